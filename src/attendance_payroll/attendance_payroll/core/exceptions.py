class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidTimeFormat(ValidationError):
    """Raised when a check-in/out value is not a HH:MM time of day."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""


class EmployeeNotFound(NotFoundError):
    """Raised when the roster has no employee with the given id."""


class RecordNotFound(NotFoundError):
    """Raised when an attendance record id does not exist."""


class AdvanceNotFound(NotFoundError):
    """Raised when a salary advance id does not exist."""
