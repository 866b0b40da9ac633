"""
Registration validation - Business rules for customer self-registration.

The validator is a pure function of the submission and a read-only
account directory. It never raises for malformed text; every rejected
aspect of a submission comes back as a ValidationFailure.

Rules (evaluated in this order, none short-circuits another):
1. Password confirmation must equal the password exactly.
2. The username must not belong to an existing account. One failure is
   emitted per matching account in the directory.
3. The password must be at least 8 characters long, contain a lowercase
   letter, an uppercase letter and a digit, and contain nothing else
   (ASCII letters and digits only).
"""

import string
from dataclasses import dataclass
from enum import Enum

from .exceptions import InvalidArgument
from .ports import AccountDirectory

MIN_PASSWORD_LENGTH = 8

_LOWERCASE = frozenset(string.ascii_lowercase)
_UPPERCASE = frozenset(string.ascii_uppercase)
_DIGITS = frozenset(string.digits)
_ALLOWED = _LOWERCASE | _UPPERCASE | _DIGITS


class FailureCode(str, Enum):
    """Machine-readable reasons a submission can be rejected."""

    PASSWORD_MISMATCH = "PASSWORD_MISMATCH"
    NAME_TAKEN = "NAME_TAKEN"
    WEAK_PASSWORD = "WEAK_PASSWORD"


DEFAULT_MESSAGES = {
    FailureCode.PASSWORD_MISMATCH: "The passwords didn't match.",
    FailureCode.NAME_TAKEN: "That name is not available anymore.",
    FailureCode.WEAK_PASSWORD: (
        "The password must contain at least 8 characters, one lowercase letter, "
        "one capital letter and one number. No special characters."
    ),
}


@dataclass(frozen=True)
class RegistrationSubmission:
    """Candidate registration data, constructed once per request."""

    name: str
    password: str
    password_confirmation: str
    address: str


@dataclass(frozen=True)
class ValidationFailure:
    """One rejected aspect of a submission."""

    field: str
    code: FailureCode
    message: str

    @classmethod
    def of(cls, field: str, code: FailureCode) -> "ValidationFailure":
        """Build a failure carrying the default message for its code."""
        return cls(field=field, code=code, message=DEFAULT_MESSAGES[code])


def is_strong_password(password: str | None) -> bool:
    """
    Check the password complexity policy.

    Equivalent to ^(?=.*[a-z])(?=.*[A-Z])(?=.*\\d)[a-zA-Z\\d]{8,}$ with
    ASCII character classes.
    """
    password = password or ""
    chars = set(password)
    return (
        len(password) >= MIN_PASSWORD_LENGTH
        and bool(chars & _LOWERCASE)
        and bool(chars & _UPPERCASE)
        and bool(chars & _DIGITS)
        and chars <= _ALLOWED
    )


def validate_registration(
    submission: RegistrationSubmission, directory: AccountDirectory
) -> tuple[ValidationFailure, ...]:
    """
    Evaluate every business rule against a submission.

    Args:
        submission: Candidate registration data
        directory: Read-only view of existing accounts

    Returns:
        Failures in rule order; empty if the submission is acceptable

    Raises:
        InvalidArgument: If no account directory is supplied
    """
    if directory is None:
        raise InvalidArgument("An account directory is required to validate a registration")

    name = submission.name or ""
    password = submission.password or ""
    confirmation = submission.password_confirmation or ""

    failures: list[ValidationFailure] = []

    if password != confirmation:
        failures.append(
            ValidationFailure.of("password_confirmation", FailureCode.PASSWORD_MISMATCH)
        )

    for username in directory.list_usernames():
        if username == name:
            failures.append(ValidationFailure.of("name", FailureCode.NAME_TAKEN))

    if not is_strong_password(password):
        failures.append(ValidationFailure.of("password", FailureCode.WEAK_PASSWORD))

    return tuple(failures)


class RegistrationValidator:
    """Stateless wrapper exposing validate_registration as a collaborator."""

    def validate(
        self, submission: RegistrationSubmission, directory: AccountDirectory
    ) -> tuple[ValidationFailure, ...]:
        return validate_registration(submission, directory)
