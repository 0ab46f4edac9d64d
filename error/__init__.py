class EnrolmentError(Exception):
    """Base class for enrolment-related errors"""

    def __init__(self, msg="Enrolment error occurred"):
        self.msg = msg
        super().__init__(self.msg)


class InvalidRequestError(EnrolmentError):
    """Raised when an argument is invalid"""

    def __init__(self, msg="Invalid request"):
        super().__init__(msg=msg)


class MissingArgumentError(InvalidRequestError):
    """Raised when a required argument is None"""

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(msg=f"Value cannot be null. (Parameter '{argument}')")


class ResourceNotFoundError(InvalidRequestError):
    """Raised when requested resource is not found"""

    def __init__(self, msg="Resource not found"):
        super().__init__(msg=msg)


class InvalidOperationError(EnrolmentError):
    """Raised when an operation is not valid for the current state"""

    def __init__(self, msg="Operation is not valid"):
        super().__init__(msg=msg)


class CapacityExceededError(InvalidOperationError):
    """Raised when a subject is already full"""

    def __init__(self, msg="Subject has reached its maximum capacity."):
        super().__init__(msg=msg)


class AlreadyEnrolledError(InvalidOperationError):
    """Raised when a student is already enrolled in a subject"""

    def __init__(self, msg="Student is already enrolled in this subject."):
        super().__init__(msg=msg)


class DatabaseError(EnrolmentError):
    """Raised when a database operation fails"""

    def __init__(self, msg="Database operation failed"):
        super().__init__(msg=msg)


class DatabaseIntegrityError(DatabaseError):
    """Raised when database integrity constraint is violated"""

    def __init__(self, msg="Database constraint violated"):
        super().__init__(msg=msg)
