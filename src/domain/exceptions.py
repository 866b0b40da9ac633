"""
Domain exceptions - Semantic error types for registration.

Business rule violations found by the validator are returned as data
(ValidationFailure records). These exceptions cover the cases that are
not validation outcomes: caller contract violations, a rejected
submission surfaced by the service, and storage-level conflicts.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class InvalidArgument(RegistrationError, ValueError):
    """A required collaborator was not supplied by the caller."""

    pass


class RegistrationRejected(RegistrationError):
    """Submission failed one or more business rules."""

    def __init__(self, failures) -> None:
        self.failures = tuple(failures)
        codes = ", ".join(failure.code.value for failure in self.failures)
        super().__init__(f"Registration rejected: {codes}")


class UsernameAlreadyTaken(RegistrationError):
    """Storage uniqueness constraint rejected the username."""

    pass
