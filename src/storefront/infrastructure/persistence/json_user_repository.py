"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

from pathlib import Path

from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.persistence.json_file_store import JsonFileStore


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._store = JsonFileStore(file_path)

    # --- UserRepository interface ---------------------------------------------

    def get_by_id(self, user_id: str) -> User | None:
        for raw in self._store.read():
            if raw["id"] == user_id:
                return self._to_domain(raw)
        return None

    def find_by_username_or_email(self, username: str, email: str) -> User | None:
        for raw in self._store.read():
            if (
                raw["username"].lower() == username.lower()
                or raw["email"].lower() == email.lower()
            ):
                return self._to_domain(raw)
        return None

    def save(self, user: User) -> None:
        with self._store.update() as records:
            for i, raw in enumerate(records):
                if raw["id"] == user.id:
                    records[i] = self._to_raw(user)
                    break
            else:
                records.append(self._to_raw(user))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(user: User) -> dict:
        return {
            "id": user.id,
            "username": user.username,
            "email": user.email,
            "address": user.address,
        }

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=raw["id"],
            username=raw["username"],
            email=raw["email"],
            address=raw.get("address"),
        )
