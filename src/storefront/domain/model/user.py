"""User record: only the parts checkout needs (identity and address)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class User:
    id: str
    username: str
    email: str
    address: dict[str, str] | None = None

    @property
    def has_address(self) -> bool:
        return bool(self.address)

    def remember_address(self, address: dict[str, str]) -> None:
        self.address = dict(address)
