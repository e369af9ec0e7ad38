"""User service — user management business logic.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import logging
from dataclasses import replace
from datetime import datetime, timezone

from domain.model.errors import DomainError, DuplicateError, NotFoundError
from domain.model.user import User
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)


class DefaultUserService:
    """UserService implementation backed by a UserRepository."""

    def __init__(self, repo: UserRepository):
        self.repo = repo

    # ── read operations ──────────────────────────────────────

    def get_all(self) -> list[User]:
        return self.repo.find_all()

    def get_by_id(self, user_id: int) -> User:
        user = self.repo.find_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User with ID {user_id} does not exist")
        return user

    def get_by_login_name(self, login_name: str) -> User:
        user = self.repo.find_by_login_name(login_name)
        if user is None:
            raise NotFoundError(f"User with login name '{login_name}' does not exist")
        return user

    # ── write operations ─────────────────────────────────────

    def upsert(self, user: User) -> User:
        """Create a new user or update an existing one.

        New users (id is None) get both timestamps set to now; the repository
        assigns the ID. Updates keep the stored created_at and refresh
        updated_at.

        Raises:
            NotFoundError: updating an ID that does not exist
            DuplicateError: login name or email address already taken
            DomainError: repository failed to save
        """
        now = _now()

        if user.id is None:
            self._check_unique(user)
            to_save = replace(user, created_at=now, updated_at=now)
        else:
            existing = self.get_by_id(user.id)
            self._check_unique(user)
            created_at = existing.created_at or now
            to_save = replace(
                user,
                created_at=created_at,
                updated_at=max(now, created_at),
            )

        saved = self.repo.save(to_save)
        if saved is None:
            raise DomainError("Failed to save user")

        logger.info("User saved", extra={
            "userId": saved.id,
            "loginName": saved.login_name,
            "isNew": user.id is None,
        })
        return saved

    def delete(self, user_id: int) -> None:
        if not self.repo.delete(user_id):
            raise NotFoundError(f"User with ID {user_id} does not exist")
        logger.info("User deleted", extra={"userId": user_id})

    def clear(self) -> None:
        self.repo.delete_all()
        logger.info("All users deleted")

    # ── helpers ──────────────────────────────────────────────

    def _check_unique(self, user: User) -> None:
        """Raise DuplicateError if another user owns the login name or email."""
        other = self.repo.find_by_login_name(user.login_name)
        if other is not None and other.id != user.id:
            raise DuplicateError(f"Login name '{user.login_name}' is already taken")

        other = self.repo.find_by_email_address(user.email_address)
        if other is not None and other.id != user.id:
            raise DuplicateError(f"Email address '{user.email_address}' is already registered")


def _now() -> datetime:
    """Current UTC time truncated to milliseconds, the precision MongoDB stores."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)
