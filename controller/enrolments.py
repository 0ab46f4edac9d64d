import logging
from datetime import datetime
from typing import Optional
from model.students import Student
from model.subjects import Subject
from error import InvalidRequestError, MissingArgumentError

logger = logging.getLogger(__name__)


class EnrolmentOp:
    @staticmethod
    def add_subject(subject: Optional[Subject]) -> Subject:
        if subject is None:
            raise MissingArgumentError("subject")
        if not subject.title:
            raise InvalidRequestError(msg="Subject title cannot be null or empty.")
        capacity = subject.maximum_capacity
        if not isinstance(capacity, int) or capacity <= 0:
            raise InvalidRequestError(
                msg="Subject maximum capacity must be a positive integer."
            )

        saved = subject.save()
        logger.info(f"Added subject {saved.id} ({saved.title})")
        return saved

    @staticmethod
    def add_student(student: Optional[Student]) -> Student:
        if student is None:
            raise MissingArgumentError("student")
        if not student.name:
            raise InvalidRequestError(msg="Student name cannot be null or empty.")
        if student.enrollment_date is None:
            student.enrollment_date = datetime.now()

        saved = student.save()
        logger.info(f"Added student {saved.id} ({saved.name})")
        return saved

    @staticmethod
    def enroll_student_to_subject(student_id: int, subject_id: int) -> Student:
        student = Student.enrol(student_id, subject_id)
        logger.info(f"Enrolled student {student_id} in subject {subject_id}")
        return student

    @staticmethod
    def get_all_subjects() -> list[Subject]:
        return Subject.get_subjects()

    @staticmethod
    def get_students_for_subject(subject_id: int) -> list[Student]:
        subject = Subject.get_subject_by_id(subject_id)
        if subject is None:
            return []
        return list(subject.students)

    @staticmethod
    def get_subject(subject_id: int) -> Subject:
        return Subject.validate_subject(subject_id)

    @staticmethod
    def get_student(student_id: int) -> Student:
        return Student.validate_student(student_id)
