"""
Test doubles for the storage layer
"""

from typing import Dict, Optional
from unittest.mock import AsyncMock

from user_api.services.users_service import ServiceResult


class FakeAcquire:
    """Async context manager handing out a single connection"""

    def __init__(self, conn):
        self.conn = conn

    async def __aenter__(self):
        return self.conn

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakePool:
    """Minimal stand-in for asyncpg.Pool backed by an AsyncMock connection"""

    def __init__(self, conn: Optional[AsyncMock] = None):
        self.conn = conn or AsyncMock()
        self.close = AsyncMock()

    def acquire(self):
        return FakeAcquire(self.conn)


class InMemoryUsersService:
    """Users service keeping rows in a dict, with the same result contract as UsersService"""

    def __init__(self):
        self.rows: Dict[int, Dict] = {}
        self.next_id = 1
        self.failure: Optional[str] = None
        for name, email in (("John Doe", "john@example.com"), ("Jane Smith", "jane@example.com")):
            self._insert(name, email)

    def _insert(self, name: str, email: str) -> Dict:
        row = {"id": self.next_id, "name": name, "email": email}
        self.rows[self.next_id] = row
        self.next_id += 1
        return row

    def _failed(self) -> ServiceResult:
        return ServiceResult(success=False, error=self.failure, error_type="EXECUTION_ERROR")

    async def list_users(self) -> ServiceResult:
        if self.failure:
            return self._failed()
        data = [dict(row) for row in self.rows.values()]
        return ServiceResult(success=True, data=data, count=len(data))

    async def get_user(self, user_id: str) -> ServiceResult:
        if self.failure:
            return self._failed()
        try:
            key = int(user_id)
        except ValueError:
            return ServiceResult(
                success=False,
                error=f'invalid input syntax for type integer: "{user_id}"',
                error_type="EXECUTION_ERROR"
            )
        if key not in self.rows:
            return ServiceResult(success=False, error="User not found", error_type="RESOURCE_NOT_FOUND")
        return ServiceResult(success=True, data=[dict(self.rows[key])], count=1)

    async def create_user(self, name: str, email: str) -> ServiceResult:
        if self.failure:
            return self._failed()
        return ServiceResult(success=True, data=[dict(self._insert(name, email))], count=1)

    async def update_user(self, user_id: int, name: str, email: str) -> ServiceResult:
        if self.failure:
            return self._failed()
        count = 0
        if user_id in self.rows:
            self.rows[user_id].update(name=name, email=email)
            count = 1
        return ServiceResult(success=True, data=[{"id": user_id, "name": name, "email": email}], count=count)

    async def delete_user(self, user_id: str) -> ServiceResult:
        if self.failure:
            return self._failed()
        try:
            key = int(user_id)
        except ValueError:
            return ServiceResult(
                success=False,
                error=f'invalid input syntax for type integer: "{user_id}"',
                error_type="EXECUTION_ERROR"
            )
        return ServiceResult(success=True, count=1 if self.rows.pop(key, None) else 0)
