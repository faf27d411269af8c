"""In-memory user repository."""
import threading

from app.domain.user.entities import User


class InMemoryUserRepository:
    def __init__(self):
        self._users: dict[str, User] = {}
        self._lock = threading.Lock()

    async def get_by_id(self, user_id: str) -> User | None:
        with self._lock:
            user = self._users.get(user_id)
            return user.model_copy(deep=True) if user is not None else None

    async def save(self, user: User) -> User:
        with self._lock:
            self._users[user.id] = user.model_copy(deep=True)
        return user
