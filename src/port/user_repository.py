from typing import Protocol
from domain.model.user import User


class UserRepository(Protocol):
    """Protocol defining the interface for user data access."""
    def find_all(self) -> list[User]:
        """Return all users ordered by ID."""
        ...

    def find_by_id(self, user_id: int) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        ...

    def find_by_login_name(self, login_name: str) -> User | None:
        """Find a user by login name. Return User or None if not found."""
        ...

    def find_by_email_address(self, email_address: str) -> User | None:
        """Find a user by email address. Return User or None if not found."""
        ...

    def save(self, user: User) -> User | None:
        """Insert (id is None) or replace a user. Return the stored User or None on failure.

        Raises DuplicateError when a unique key (login name, email) is already taken.
        """
        ...

    def delete(self, user_id: int) -> bool:
        """Delete a user. Return True if a user was removed."""
        ...

    def delete_all(self) -> None:
        """Remove all users."""
        ...
