"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import PostgresCustomerRepository
from src.config.settings import get_settings
from src.domain.registration import RegistrationService


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresCustomerRepository:
    """Create repository with connection pool from app state."""
    pool = get_pool(request)
    return PostgresCustomerRepository(pool)


def get_registration_service(request: Request) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    The PostgreSQL repository serves as both the account directory
    and the customer repository.
    """
    repository = get_repository(request)
    return RegistrationService(
        directory=repository,
        repository=repository,
        bcrypt_cost=get_settings().bcrypt_cost,
    )
