# Register every mapped class so string relationship targets always resolve.
from model import enrolment, subjects, students  # noqa: F401
