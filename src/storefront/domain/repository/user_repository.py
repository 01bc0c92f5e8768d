"""Abstract repository for User records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: str) -> User | None:
        """Return a user by its ID, or None if not found."""

    @abstractmethod
    def find_by_username_or_email(self, username: str, email: str) -> User | None:
        """Return a user matching either field (case-insensitive), or None."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a new or updated user."""
