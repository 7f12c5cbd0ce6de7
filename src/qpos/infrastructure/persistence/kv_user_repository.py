"""Key-value-store-backed implementation of UserRepository."""

from __future__ import annotations

from qpos.domain.model.user import User
from qpos.domain.repository.key_value_store import USERS_KEY, KeyValueStore
from qpos.domain.repository.user_repository import UserRepository
from qpos.infrastructure.persistence.defaults import DEFAULT_USERS, load_or_seed
from qpos.infrastructure.persistence.serialization import user_from_raw, user_to_raw


class KeyValueUserRepository(UserRepository):

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def get_by_id(self, user_id: str) -> User | None:
        for user in self.list_all():
            if user.id == user_id:
                return user
        return None

    def list_all(self) -> list[User]:
        raw = load_or_seed(self._store, USERS_KEY, [user_to_raw(u) for u in DEFAULT_USERS])
        return [user_from_raw(u) for u in raw]
