"""Repository adapters - Database and in-memory implementations."""

from .memory import InMemoryCustomerRepository, StoredCustomer
from .postgres import PostgresCustomerRepository, run_migrations

__all__ = [
    "InMemoryCustomerRepository",
    "PostgresCustomerRepository",
    "StoredCustomer",
    "run_migrations",
]
