"""Application service: Register User use case."""

from __future__ import annotations

import uuid

import structlog

from storefront.domain.exceptions import ConflictError, ValidationError
from storefront.domain.model.user import User
from storefront.domain.repository.user_repository import UserRepository

logger = structlog.get_logger(__name__)


class RegisterUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, username: str, email: str) -> User:
        if not username or not username.strip():
            raise ValidationError("Username is required")
        if not email or "@" not in email:
            raise ValidationError("A valid email is required")
        username, email = username.strip(), email.strip()

        if self._user_repo.find_by_username_or_email(username, email) is not None:
            raise ConflictError("User with this email or username already exists")

        user = User(id=uuid.uuid4().hex, username=username, email=email)
        self._user_repo.save(user)
        logger.info("user.registered", user_id=user.id, username=username)
        return user
