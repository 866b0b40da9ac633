"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from collections.abc import Sequence
from typing import Protocol


class AccountDirectory(Protocol):
    """Port interface for read-only access to existing customer accounts."""

    def list_usernames(self) -> Sequence[str]:
        """
        Enumerate the usernames of all existing customer accounts.

        Implementations must return a consistent snapshot for the duration
        of one call. The domain never mutates the returned sequence.

        Returns:
            Usernames of existing accounts, in storage order
        """
        ...


class CustomerRepository(Protocol):
    """Port interface for customer account persistence."""

    def create_customer(self, name: str, password_hash: str, address: str) -> bool:
        """
        Atomically create a customer account.

        The username uniqueness constraint is enforced here, at the
        storage layer. Concurrent creations for the same username must
        result in exactly one success.

        Args:
            name: Username of the new account
            password_hash: bcrypt hashed password
            address: Shipping/contact address

        Returns:
            True if the account was created, False if the username exists
        """
        ...
