import logging
from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime
from sqlalchemy.orm import relationship, selectinload
from core.setup import Base
from core.db import CreateDBSession
from model.enrolment import student_subjects
from model.subjects import Subject
from schema.students import StudentIn
from error import (
    AlreadyEnrolledError,
    CapacityExceededError,
    ResourceNotFoundError,
)

logger = logging.getLogger(__name__)


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    enrollment_date = Column(DateTime, nullable=False, default=datetime.now)

    subjects = relationship(
        "Subject",
        secondary=student_subjects,
        back_populates="students",
        order_by="Subject.id",
        lazy="selectin",
    )

    def __repr__(self):
        return f"<Student {self.name}>"

    def __str__(self):
        return self.name

    def save(self) -> "Student":
        with CreateDBSession("save student") as db:
            db.add(self)
            db.flush()
            db.refresh(self)
        return self

    @staticmethod
    def from_schema(student_data: StudentIn) -> "Student":
        return Student(**student_data.model_dump(exclude_none=True))

    @staticmethod
    def get_student_by_id(student_id: int) -> "Student":
        with CreateDBSession("load student") as db:
            return db.get(
                Student,
                student_id,
                options=[selectinload(Student.subjects).selectinload(Subject.students)],
            )

    @staticmethod
    def validate_student(student_id: int) -> "Student":
        student = Student.get_student_by_id(student_id)
        if not student:
            raise ResourceNotFoundError(msg="Student not found.")
        return student

    @staticmethod
    def enrol(student_id: int, subject_id: int) -> "Student":
        """Add the (student, subject) join row in a single unit of work.

        Both sides are loaded in the same session so the capacity check and
        the insert see the same state. Nothing is written when a check fails.
        """
        with CreateDBSession("enrol student") as db:
            student = db.get(
                Student,
                student_id,
                options=[selectinload(Student.subjects).selectinload(Subject.students)],
            )
            if student is None:
                raise ResourceNotFoundError(msg="Student not found.")
            subject = db.get(Subject, subject_id, options=[Subject.with_enrolments()])
            if subject is None:
                raise ResourceNotFoundError(msg="Subject not found.")

            if subject in student.subjects:
                raise AlreadyEnrolledError()
            if subject.is_full:
                logger.warning(
                    f"Subject {subject.id} is full ({subject.maximum_capacity})"
                )
                raise CapacityExceededError()

            # back_populates keeps subject.students in step
            student.subjects.append(subject)
        return student
