"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Any, Mapping, Union

from models.user import User
from repositories.base import BaseRepository
from utils.logger import get_logger
from utils.result import Result

logger = get_logger(__name__)


class UserRepository(BaseRepository):
    """Repository for lookups and inserts on the users table."""

    def get_user_with_email(self, email: str) -> Result:
        """
        Fetch a single user by exact email match.

        Returns:
            Success(User), NotFound, or Failure.
        """
        sql = "SELECT * FROM users WHERE email = %s;"
        return self._fetch_one(
            f"fetch user by email {email!r}", sql, [email], self._row_to_user, missing="user"
        )

    def get_user_with_id(self, user_id: int) -> Result:
        """Fetch a single user by primary key."""
        sql = "SELECT * FROM users WHERE id = %s;"
        return self._fetch_one(
            f"fetch user #{user_id}", sql, [user_id], self._row_to_user, missing="user"
        )

    def add_user(self, user: Union[User, Mapping[str, Any]]) -> Result:
        """
        Insert a new user.

        The password must already be hashed. Duplicate emails are left to
        the store's unique constraint.

        Args:
            user: A User or a mapping with 'name', 'email' and 'password'.

        Returns:
            Success(User) with its generated `id`, or Failure.
        """
        if not isinstance(user, User):
            user = User(name=user["name"], email=user["email"], password=user["password"])
        sql = """
            INSERT INTO users (name, email, password)
            VALUES (%s, %s, %s)
            RETURNING *;
        """
        result = self._fetch_one(
            "add user", sql, [user.name, user.email, user.password], self._row_to_user
        )
        if result.ok:
            logger.info(f"Added user #{result.value.id}")
        return result

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_user(row: dict) -> User:
        """Convert a database row to a User domain object."""
        return User(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            password=row["password"],
        )
