"""
PostgreSQL repository adapter - Implements AccountDirectory and CustomerRepository.

This module provides the PostgreSQL implementation of the domain's
customer ports using psycopg3 with raw SQL.

Uniqueness Design:
------------------
The domain validator checks usernames against list_usernames(), which is
a best-effort read. Two concurrent registrations for the same name can
both pass it. The UNIQUE constraint on customers.username, combined with
INSERT ... ON CONFLICT DO NOTHING, guarantees exactly one of them is
created; the loser sees create_customer() return False.
"""

import logging
from pathlib import Path

from psycopg_pool import ConnectionPool

logger = logging.getLogger(__name__)


class PostgresCustomerRepository:
    """
    Implements AccountDirectory and CustomerRepository protocols via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def list_usernames(self) -> tuple[str, ...]:
        """
        Enumerate usernames of all existing customers.

        A single SELECT statement reads one consistent snapshot.

        Returns:
            Usernames in creation order
        """
        sql = "SELECT username FROM customers ORDER BY id"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql)
            return tuple(row[0] for row in cursor.fetchall())

    def create_customer(self, name: str, password_hash: str, address: str) -> bool:
        """
        Atomically create a customer account.

        Args:
            name: Username of the new account
            password_hash: bcrypt-hashed password from domain layer
            address: Shipping/contact address

        Returns:
            True if the row was inserted, False if the username already exists
        """
        sql = """
            INSERT INTO customers (username, password_hash, address, created_at)
            VALUES (%s, %s, %s, NOW())
            ON CONFLICT (username) DO NOTHING
        """

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (name, password_hash, address))
            conn.commit()
            return cursor.rowcount == 1


MIGRATIONS_DIR = Path(__file__).resolve().parents[3] / "migrations"


def run_migrations(pool: ConnectionPool, migrations_dir: Path = MIGRATIONS_DIR) -> None:
    """
    Apply every *.sql file in the migrations directory, in filename order.

    Migrations must be idempotent (CREATE TABLE IF NOT EXISTS, etc.);
    they run on every application startup.

    Args:
        pool: psycopg3 ConnectionPool instance
        migrations_dir: Directory holding the SQL files

    Raises:
        RuntimeError: If a migration file fails to execute
    """
    if not migrations_dir.is_dir():
        logger.warning("Migrations directory not found: %s", migrations_dir)
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))
    logger.info("Applying %d migration(s) from %s", len(sql_files), migrations_dir)

    for sql_file in sql_files:
        try:
            with pool.connection() as conn:
                conn.execute(sql_file.read_text())
        except Exception as e:
            logger.error("Migration failed: %s - %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
        logger.info("Migration applied: %s", sql_file.name)
