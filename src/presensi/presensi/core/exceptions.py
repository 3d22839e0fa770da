class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class FormatError(ValidationError):
    """Raised when a contact number or e-mail does not have the expected shape."""


class NotFoundError(DomainError):
    """Raised when a looked-up entity (employee, activity) does not exist."""


class TransportError(DomainError):
    """Raised when the API cannot be reached or answers with an unexpected failure."""
