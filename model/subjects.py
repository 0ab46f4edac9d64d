from sqlalchemy import Column, String, Integer
from sqlalchemy.orm import relationship, selectinload
from core.setup import Base
from core.db import CreateDBSession
from model.enrolment import student_subjects
from schema.subjects import SubjectIn
from error import ResourceNotFoundError


class Subject(Base):
    """Represents a subject students can enrol in."""

    __tablename__ = "subjects"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    maximum_capacity = Column(Integer, nullable=False)

    # Relationships
    students = relationship(
        "Student",
        secondary=student_subjects,
        back_populates="subjects",
        order_by="Student.id",
        lazy="selectin",
    )

    def __repr__(self):
        return f"<Subject {self.title}>"

    def __str__(self):
        return self.title

    @property
    def is_full(self) -> bool:
        return len(self.students) >= self.maximum_capacity

    def save(self) -> "Subject":
        with CreateDBSession("save subject") as session:
            session.add(self)
            session.flush()
            session.refresh(self)
        return self

    @staticmethod
    def with_enrolments():
        """Eager-load students and each student's subjects."""
        from model.students import Student

        return selectinload(Subject.students).selectinload(Student.subjects)

    @staticmethod
    def from_schema(subject_data: SubjectIn) -> "Subject":
        return Subject(**subject_data.model_dump())

    @staticmethod
    def get_subjects() -> list["Subject"]:
        with CreateDBSession("list subjects") as session:
            return (
                session.query(Subject)
                .options(Subject.with_enrolments())
                .order_by(Subject.id)
                .all()
            )

    @staticmethod
    def get_subject_by_id(subject_id: int) -> "Subject":
        with CreateDBSession("load subject") as session:
            return session.get(
                Subject, subject_id, options=[Subject.with_enrolments()]
            )

    @staticmethod
    def validate_subject(subject_id: int) -> "Subject":
        subject = Subject.get_subject_by_id(subject_id)
        if not subject:
            raise ResourceNotFoundError(msg="Subject not found.")
        return subject
