"""Domain models for editor accounts."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class LoginEvent:
    """A single successful login."""

    date_time: datetime
    user_agent: str


@dataclass(frozen=True)
class UserRecord:
    """Represents a stored editor credential."""

    user_name: str
    email: str
    password_hash: str
    login_history: list[LoginEvent] = field(default_factory=list)
