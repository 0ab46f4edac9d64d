from datetime import datetime

import main
from controller.enrolments import EnrolmentOp
from error import CapacityExceededError
from model.students import Student
from model.subjects import Subject
from schema.students import StudentIn
from schema.subjects import SubjectIn, SubjectOut
from util.report import subject_report_lines


class TestReport:
    def test_lines_for_subject(self):
        subject = Subject(id=1, title="Physics", maximum_capacity=2)
        subject.students = [Student(id=1, name="Ada")]

        assert subject_report_lines([subject]) == [
            "Subject: Physics, Maximum Capacity: 2",
            "Enrolled Students:",
            "- Ada",
            "",
        ]

    def test_subject_out_from_model(self):
        subject = Subject(id=3, title="Chemistry", maximum_capacity=4)
        subject.students = []
        assert SubjectOut.model_validate(subject).title == "Chemistry"


class TestSchemas:
    def test_student_from_schema_keeps_date(self):
        when = datetime(2024, 9, 1, 8, 30)
        student = Student.from_schema(StudentIn(name="Jane Smith", enrollment_date=when))
        assert student.enrollment_date == when

    def test_student_from_schema_without_date(self):
        student = Student.from_schema(StudentIn(name="Jane Smith"))
        assert student.enrollment_date is None

    def test_subject_from_schema(self):
        subject = Subject.from_schema(SubjectIn(title="Mathematics", maximum_capacity=30))
        assert (subject.title, subject.maximum_capacity) == ("Mathematics", 30)


class TestDemo:
    def test_run_prints_enrolled_students(self, capsys):
        main.run()

        out = capsys.readouterr().out.splitlines()
        assert out == [
            "Subject: Mathematics, Maximum Capacity: 30",
            "Enrolled Students:",
            "- John Doe",
            "- Jane Smith",
            "",
        ]

    def test_rerun_appends_new_rows(self, capsys):
        main.run()
        main.run()

        out = capsys.readouterr().out.splitlines()
        assert out.count("Subject: Mathematics, Maximum Capacity: 30") == 3

    def test_enrolment_failure_is_printed(self, capsys, monkeypatch):
        def reject(student_id, subject_id):
            raise CapacityExceededError()

        monkeypatch.setattr(EnrolmentOp, "enroll_student_to_subject", staticmethod(reject))

        main.run()

        out = capsys.readouterr().out.splitlines()
        assert out == [
            "Error during enrollment: Subject has reached its maximum capacity.",
            "Subject: Mathematics, Maximum Capacity: 30",
            "Enrolled Students:",
            "",
        ]
