"""
Domain layer - Pure business logic with zero framework imports.

This package contains the customer registration rules and the service
that applies them. It defines its own port interfaces for infrastructure
abstraction, keeping persistence and HTTP concerns in the adapters.
"""

from .exceptions import (
    InvalidArgument,
    RegistrationError,
    RegistrationRejected,
    UsernameAlreadyTaken,
)
from .ports import AccountDirectory, CustomerRepository
from .registration import RegistrationService
from .validation import (
    FailureCode,
    RegistrationSubmission,
    RegistrationValidator,
    ValidationFailure,
    is_strong_password,
    validate_registration,
)

__all__ = [
    "AccountDirectory",
    "CustomerRepository",
    "FailureCode",
    "InvalidArgument",
    "RegistrationError",
    "RegistrationRejected",
    "RegistrationService",
    "RegistrationSubmission",
    "RegistrationValidator",
    "UsernameAlreadyTaken",
    "ValidationFailure",
    "is_strong_password",
    "validate_registration",
]
