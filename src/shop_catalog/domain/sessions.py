"""Domain models for client-held sessions."""

from dataclasses import dataclass, field
from datetime import datetime

from shop_catalog.domain.users import LoginEvent


@dataclass(frozen=True)
class SessionUser:
    """Identity carried inside the session cookie."""

    user_name: str
    email: str
    login_history: list[LoginEvent] = field(default_factory=list)


@dataclass
class Session:
    """A signed, time-bounded session attached to a request."""

    user: SessionUser | None
    issued_at: datetime
    expires_at: datetime

    def reset(self) -> None:
        """Drop the identity so the session is cleared on the way out."""
        self.user = None
