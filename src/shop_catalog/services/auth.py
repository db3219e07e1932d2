"""Editor registration and credential checks."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

import bcrypt
from starlette.concurrency import run_in_threadpool

from shop_catalog.domain.users import LoginEvent, UserRecord
from shop_catalog.errors import AuthenticationError, RegistrationError

_logger = logging.getLogger(__name__)


class DuplicateUserError(Exception):
    """Raised by a repository when the user name is already stored."""


class UserRepository(Protocol):
    """Persistence interface for editor credentials."""

    def get_user(self, user_name: str) -> UserRecord | None:
        """Return the user with this user name, if present."""

    def create_user(self, user: UserRecord) -> None:
        """Store a new user or raise DuplicateUserError."""

    def set_login_history(self, user_name: str, history: list[LoginEvent]) -> None:
        """Replace a user's login history."""


@dataclass
class AuthService:
    """Application service for registering and authenticating editors."""

    repository: UserRepository

    async def register_user(
        self, user_name: str, email: str, password: str, password2: str
    ) -> UserRecord:
        """Create a credential after checking the passwords match."""
        if password != password2:
            raise RegistrationError("Passwords do not match")
        try:
            password_hash = hash_password(password)
        except ValueError as exc:
            raise RegistrationError(str(exc)) from exc
        user = UserRecord(user_name=user_name, email=email, password_hash=password_hash)
        try:
            await run_in_threadpool(self.repository.create_user, user)
        except DuplicateUserError as exc:
            raise RegistrationError("User Name already taken") from exc
        except Exception as exc:
            _logger.exception("Failed to register user %s", user_name)
            raise RegistrationError(
                f"There was an error creating the user: {exc}"
            ) from exc
        _logger.info("Registered user %s", user_name)
        return user

    async def check_user(
        self, user_name: str, password: str, user_agent: str
    ) -> UserRecord:
        """Verify credentials and record the login in the user's history."""
        user = await run_in_threadpool(self.repository.get_user, user_name)
        if user is None:
            raise AuthenticationError(f"Unable to find user: {user_name}")
        if not verify_password(password, user.password_hash):
            raise AuthenticationError(f"Incorrect Password for user: {user_name}")
        history = [
            *user.login_history,
            LoginEvent(date_time=datetime.now(tz=UTC), user_agent=user_agent),
        ]
        try:
            await run_in_threadpool(
                self.repository.set_login_history, user_name, history
            )
        except Exception as exc:
            _logger.exception("Failed to record login for %s", user_name)
            raise AuthenticationError(
                f"There was an error verifying the user: {exc}"
            ) from exc
        _logger.info("User %s logged in", user_name)
        return UserRecord(
            user_name=user.user_name,
            email=user.email,
            password_hash=user.password_hash,
            login_history=history,
        )


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against its bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False
