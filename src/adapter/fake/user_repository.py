"""In-memory implementation of UserRepository for testing."""

from dataclasses import replace
from domain.model.user import User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[int, User] = {}
        self._next_id = 1

    # ── write operations ─────────────────────────────────────

    def save(self, user: User) -> User | None:
        if user.id is None:
            user = replace(user, id=self._next_id)
            self._next_id += 1
        self.store[user.id] = user
        return user

    def delete(self, user_id: int) -> bool:
        return self.store.pop(user_id, None) is not None

    def delete_all(self) -> None:
        self.store.clear()

    # ── read operations ──────────────────────────────────────

    def find_all(self) -> list[User]:
        return [self.store[user_id] for user_id in sorted(self.store)]

    def find_by_id(self, user_id: int) -> User | None:
        return self.store.get(user_id)

    def find_by_login_name(self, login_name: str) -> User | None:
        for user in self.store.values():
            if user.login_name == login_name:
                return user
        return None

    def find_by_email_address(self, email_address: str) -> User | None:
        for user in self.store.values():
            if user.email_address == email_address:
                return user
        return None
