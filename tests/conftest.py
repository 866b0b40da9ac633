"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Registration submissions
- In-memory customer repositories
"""

import pytest

from src.adapters.repository.memory import InMemoryCustomerRepository
from src.domain.validation import RegistrationSubmission
from tests.factories import make_submission


@pytest.fixture
def submission() -> RegistrationSubmission:
    """A submission that passes every business rule against an empty directory."""
    return make_submission()


@pytest.fixture
def repository() -> InMemoryCustomerRepository:
    """In-memory repository seeded with two existing customers."""
    return InMemoryCustomerRepository(["bob", "carol"])
