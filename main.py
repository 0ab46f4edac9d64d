import logging
from datetime import datetime
from config.setting import settings
from core.setup import database
from controller.enrolments import EnrolmentOp
from model.students import Student
from model.subjects import Subject
from schema.students import StudentIn
from schema.subjects import SubjectIn
from util.report import subject_report_lines
from error import EnrolmentError

logger = logging.getLogger(__name__)


def run() -> None:
    # Create database tables
    database.create_all()
    logger.info(f"Using database {database.url}")

    subject = EnrolmentOp.add_subject(
        Subject.from_schema(SubjectIn(title="Mathematics", maximum_capacity=30))
    )

    now = datetime.now()
    student1 = EnrolmentOp.add_student(
        Student.from_schema(StudentIn(name="John Doe", enrollment_date=now))
    )
    student2 = EnrolmentOp.add_student(
        Student.from_schema(StudentIn(name="Jane Smith", enrollment_date=now))
    )

    try:
        EnrolmentOp.enroll_student_to_subject(student1.id, subject.id)
        EnrolmentOp.enroll_student_to_subject(student2.id, subject.id)
    except EnrolmentError as e:
        print(f"Error during enrollment: {e.msg}")

    for line in subject_report_lines(EnrolmentOp.get_all_subjects()):
        print(line)


def main() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run()


if __name__ == "__main__":
    main()
