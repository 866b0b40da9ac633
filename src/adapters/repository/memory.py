"""
In-memory repository adapter - Implements AccountDirectory and CustomerRepository.

Keeps customer accounts in process memory for development and tests.
Behaves like the PostgreSQL adapter: usernames are unique, and
create_customer() returns False instead of creating a duplicate.
"""

import logging
import threading
from collections.abc import Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredCustomer:
    """A persisted customer account."""

    username: str
    password_hash: str
    address: str


class InMemoryCustomerRepository:
    """
    Implements AccountDirectory and CustomerRepository protocols in memory.

    Uses structural subtyping - no explicit inheritance from Protocol.
    A lock makes the uniqueness check and insert atomic across threads.
    """

    def __init__(self, usernames: Iterable[str] = ()) -> None:
        self._lock = threading.Lock()
        self._customers: list[StoredCustomer] = [
            StoredCustomer(username=username, password_hash="", address="")
            for username in usernames
        ]

    def list_usernames(self) -> tuple[str, ...]:
        """Return a snapshot of usernames in insertion order."""
        with self._lock:
            return tuple(customer.username for customer in self._customers)

    def create_customer(self, name: str, password_hash: str, address: str) -> bool:
        with self._lock:
            if any(customer.username == name for customer in self._customers):
                return False
            self._customers.append(
                StoredCustomer(username=name, password_hash=password_hash, address=address)
            )
        logger.debug("Stored customer in memory: %s", name)
        return True

    def get(self, name: str) -> StoredCustomer | None:
        """Look up a stored customer by username, for inspecting stored hashes and addresses."""
        with self._lock:
            for customer in self._customers:
                if customer.username == name:
                    return customer
        return None
