"""
Users service - one SQL statement per user operation
"""

import logging
from dataclasses import dataclass
from typing import Dict, Any, List, Optional

import asyncpg
from fastapi import Request

logger = logging.getLogger(__name__)


@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[List[Dict[str, Any]]] = None
    count: int = 0
    error: Optional[str] = None
    error_type: Optional[str] = None


class UsersService:
    """Service for user CRUD operations over the users table"""

    def __init__(self, db_pool: asyncpg.Pool):
        self.db_pool = db_pool

    async def list_users(self) -> ServiceResult:
        """Fetch every user in storage order"""
        try:
            async with self.db_pool.acquire() as conn:
                rows = await conn.fetch("SELECT id, name, email FROM users")

            data = [dict(row) for row in rows]
            return ServiceResult(success=True, data=data, count=len(data))

        except Exception as e:
            logger.error(f"List users failed: {e}")
            return ServiceResult(success=False, error=str(e), error_type="EXECUTION_ERROR")

    async def get_user(self, user_id: str) -> ServiceResult:
        """
        Get a user by its ID

        Args:
            user_id: Raw path identifier, cast to integer by the database

        Returns:
            ServiceResult with the matching row, or RESOURCE_NOT_FOUND
        """
        try:
            async with self.db_pool.acquire() as conn:
                row = await conn.fetchrow(
                    "SELECT id, name, email FROM users WHERE id = $1::text::integer",
                    user_id
                )

            if row is None:
                return ServiceResult(
                    success=False,
                    error=f"User not found: {user_id}",
                    error_type="RESOURCE_NOT_FOUND"
                )

            return ServiceResult(success=True, data=[dict(row)], count=1)

        except Exception as e:
            logger.error(f"Get user {user_id!r} failed: {e}")
            return ServiceResult(success=False, error=str(e), error_type="EXECUTION_ERROR")

    async def create_user(self, name: str, email: str) -> ServiceResult:
        """
        Insert a new user

        Args:
            name: Display name
            email: Email address

        Returns:
            ServiceResult with the created row, including the generated id
        """
        logger.info(f"Creating new user: {email}")
        try:
            async with self.db_pool.acquire() as conn:
                user_id = await conn.fetchval(
                    "INSERT INTO users (name, email) VALUES ($1, $2) RETURNING id",
                    name, email
                )

            return ServiceResult(
                success=True,
                data=[{"id": user_id, "name": name, "email": email}],
                count=1
            )

        except Exception as e:
            logger.error(f"Create user failed: {e}")
            return ServiceResult(success=False, error=str(e), error_type="EXECUTION_ERROR")

    async def update_user(self, user_id: int, name: str, email: str) -> ServiceResult:
        """
        Overwrite name and email of a user

        A missing row is not an error; count reports the rows touched.
        """
        try:
            async with self.db_pool.acquire() as conn:
                status = await conn.execute(
                    "UPDATE users SET name = $1, email = $2 WHERE id = $3::bigint",
                    name, email, user_id
                )

            return ServiceResult(
                success=True,
                data=[{"id": user_id, "name": name, "email": email}],
                count=_affected_rows(status)
            )

        except Exception as e:
            logger.error(f"Update user {user_id} failed: {e}")
            return ServiceResult(success=False, error=str(e), error_type="EXECUTION_ERROR")

    async def delete_user(self, user_id: str) -> ServiceResult:
        """Delete a user by raw path identifier; deleting nothing still succeeds"""
        try:
            async with self.db_pool.acquire() as conn:
                status = await conn.execute(
                    "DELETE FROM users WHERE id = $1::text::integer",
                    user_id
                )

            return ServiceResult(success=True, count=_affected_rows(status))

        except Exception as e:
            logger.error(f"Delete user {user_id!r} failed: {e}")
            return ServiceResult(success=False, error=str(e), error_type="EXECUTION_ERROR")


def _affected_rows(status: str) -> int:
    # asyncpg returns the command tag, e.g. "UPDATE 1" or "DELETE 0"
    try:
        return int(status.rsplit(" ", 1)[-1])
    except (AttributeError, ValueError):
        return 0


def get_users_service(request: Request) -> UsersService:
    """Get the users service bound to the application's pool"""
    return request.app.state.users_service
