"""Shared helpers for the in-memory repositories."""
import threading
from typing import Generic, TypeVar

from pydantic import BaseModel

from app.domain.common.errors import ConflictError

T = TypeVar("T", bound=BaseModel)


class VersionedStore(Generic[T]):
    """Dict keyed by id holding deep copies of versioned entities.

    Callers always get a copy, so an entity changes in the store only via save().
    """

    def __init__(self, resource: str):
        self.resource = resource
        self._items: dict[str, T] = {}
        self._lock = threading.Lock()

    @property
    def lock(self) -> threading.Lock:
        return self._lock

    def get(self, key: str) -> T | None:
        with self._lock:
            item = self._items.get(key)
            return item.model_copy(deep=True) if item is not None else None

    def values(self) -> list[T]:
        with self._lock:
            return [item.model_copy(deep=True) for item in self._items.values()]

    def save(self, key: str, entity: T) -> T:
        with self._lock:
            return self.save_locked(key, entity)

    def save_locked(self, key: str, entity: T) -> T:
        """save() for callers already holding ``lock``."""
        stored = self._items.get(key)
        if entity.version == 0:
            if stored is not None:
                raise ConflictError(f"{self.resource} {key} already exists")
        elif stored is None or stored.version != entity.version:
            raise ConflictError(
                f"{self.resource} {key} was modified concurrently "
                f"(expected version {entity.version})"
            )
        new = entity.model_copy(update={"version": entity.version + 1}, deep=True)
        self._items[key] = new
        return new.model_copy(deep=True)

    def get_locked(self, key: str) -> T | None:
        item = self._items.get(key)
        return item.model_copy(deep=True) if item is not None else None

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._items.pop(key, None) is not None
