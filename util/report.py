from schema.subjects import SubjectOut


def subject_report_lines(subjects) -> list[str]:
    """Render subjects and their enrolled students as printable lines."""
    lines = []
    for subject in subjects:
        data = SubjectOut.model_validate(subject)
        lines.append(
            f"Subject: {data.title}, Maximum Capacity: {data.maximum_capacity}"
        )
        lines.append("Enrolled Students:")
        for student in data.students:
            lines.append(f"- {student.name}")
        lines.append("")
    return lines
