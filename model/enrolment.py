from sqlalchemy import Column, Integer, ForeignKey, Table
from core.setup import Base


# Association table (Student <-> Subject). The composite key keeps a pair unique.
student_subjects = Table(
    "student_subjects",
    Base.metadata,
    Column("student_id", Integer, ForeignKey("students.id"), primary_key=True),
    Column("subject_id", Integer, ForeignKey("subjects.id"), primary_key=True),
)
