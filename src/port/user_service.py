"""Port definition for the user management service."""

from typing import Protocol

from domain.model.user import User


class UserService(Protocol):
    def get_all(self) -> list[User]: ...

    def get_by_id(self, user_id: int) -> User:
        """Raises NotFoundError if no user has the given ID."""
        ...

    def get_by_login_name(self, login_name: str) -> User:
        """Raises NotFoundError if no user has the given login name."""
        ...

    def upsert(self, user: User) -> User:
        """Create a user (no ID) or update an existing one.

        Raises NotFoundError when updating an unknown ID and DuplicateError
        when the login name or email address is taken by another user.
        """
        ...

    def delete(self, user_id: int) -> None:
        """Raises NotFoundError if no user has the given ID."""
        ...

    def clear(self) -> None: ...
