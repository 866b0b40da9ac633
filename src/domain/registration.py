"""
Registration domain service - Customer self-registration flow.

Validates a submission against the business rules and, once accepted,
hands it to the customer repository for account creation.

Flow
====

    submission
        -> validate_registration()   (confirmation, uniqueness, complexity)
        -> bcrypt hash               (plaintext never leaves this module)
        -> repository.create_customer()

The uniqueness check in the validator is best-effort: two concurrent
registrations for the same name can both pass it. The repository's
storage constraint is the final arbiter, reported as UsernameAlreadyTaken.
"""

import logging
from dataclasses import dataclass

import bcrypt

from .exceptions import RegistrationRejected, UsernameAlreadyTaken
from .ports import AccountDirectory, CustomerRepository
from .validation import RegistrationSubmission, validate_registration

logger = logging.getLogger(__name__)


@dataclass
class RegistrationService:
    """
    Domain service for customer registration.

    Orchestrates the registration flow: rule validation,
    password hashing, and account persistence.
    """

    directory: AccountDirectory
    repository: CustomerRepository
    bcrypt_cost: int = 10

    def register(self, submission: RegistrationSubmission) -> str:
        """
        Register a new customer account.

        Args:
            submission: Candidate registration data

        Returns:
            Username of the created account

        Raises:
            RegistrationRejected: If any business rule fails
            UsernameAlreadyTaken: If the name was claimed concurrently
        """
        failures = validate_registration(submission, self.directory)
        if failures:
            logger.info(
                "Registration rejected for %s: %s",
                submission.name,
                ", ".join(failure.code.value for failure in failures),
            )
            raise RegistrationRejected(failures)

        password_hash = self._hash_password(submission.password)
        created = self.repository.create_customer(
            submission.name, password_hash, submission.address
        )
        if not created:
            logger.info("Username claimed concurrently: %s", submission.name)
            raise UsernameAlreadyTaken(submission.name)

        logger.info("Customer registered: %s", submission.name)
        return submission.name

    def _hash_password(self, password: str) -> str:
        """Hash password using bcrypt with the configured cost factor."""
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=self.bcrypt_cost)).decode()
