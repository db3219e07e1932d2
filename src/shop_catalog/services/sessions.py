"""Signed client-held sessions with a sliding expiry."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from itsdangerous import BadSignature, URLSafeSerializer

from shop_catalog.domain.sessions import Session, SessionUser
from shop_catalog.domain.users import LoginEvent

_logger = logging.getLogger(__name__)


@dataclass
class SessionManager:
    """Issues, verifies and extends session tokens.

    Sessions live entirely in the cookie. The server only holds the signing
    secret, so two processes sharing a secret accept each other's cookies
    but share no other state.
    """

    secret: str
    duration: timedelta
    active_duration: timedelta
    cookie_name: str = "session"

    def __post_init__(self) -> None:
        self._serializer = URLSafeSerializer(self.secret, salt="shop-session")

    def start(self, user: SessionUser, now: datetime | None = None) -> Session:
        """Create a fresh session for a user that just logged in."""
        issued_at = now or datetime.now(tz=UTC)
        return Session(
            user=user, issued_at=issued_at, expires_at=issued_at + self.duration
        )

    def touch(self, session: Session, now: datetime | None = None) -> Session:
        """Extend the session when it is about to lapse."""
        current = now or datetime.now(tz=UTC)
        if session.expires_at - current < self.active_duration:
            session.expires_at = session.expires_at + self.active_duration
        return session

    def encode(self, session: Session) -> str:
        """Serialize and sign a session."""
        return self._serializer.dumps(_session_to_payload(session))

    def decode(self, token: str | None, now: datetime | None = None) -> Session | None:
        """Return the session in a token, or None when absent, forged or expired."""
        if not token:
            return None
        try:
            payload = self._serializer.loads(token)
        except BadSignature:
            _logger.info("Rejected session cookie with a bad signature")
            return None
        try:
            session = _session_from_payload(payload)
        except (KeyError, TypeError, ValueError):
            _logger.info("Rejected malformed session payload")
            return None
        if session.expires_at <= (now or datetime.now(tz=UTC)):
            return None
        return session

    def max_age(self, session: Session, now: datetime | None = None) -> int:
        """Return the remaining lifetime in whole seconds."""
        remaining = session.expires_at - (now or datetime.now(tz=UTC))
        return max(int(remaining.total_seconds()), 0)


def _session_to_payload(session: Session) -> dict[str, object]:
    user = session.user
    return {
        "user": None
        if user is None
        else {
            "userName": user.user_name,
            "email": user.email,
            "loginHistory": [
                {"dateTime": event.date_time.isoformat(), "userAgent": event.user_agent}
                for event in user.login_history
            ],
        },
        "iat": session.issued_at.isoformat(),
        "exp": session.expires_at.isoformat(),
    }


def _session_from_payload(payload: dict[str, object]) -> Session:
    raw_user = payload.get("user")
    user = None
    if isinstance(raw_user, dict):
        user = SessionUser(
            user_name=str(raw_user["userName"]),
            email=str(raw_user.get("email", "")),
            login_history=[
                LoginEvent(
                    date_time=datetime.fromisoformat(event["dateTime"]),
                    user_agent=str(event.get("userAgent", "")),
                )
                for event in raw_user.get("loginHistory", [])
            ],
        )
    return Session(
        user=user,
        issued_at=datetime.fromisoformat(str(payload["iat"])),
        expires_at=datetime.fromisoformat(str(payload["exp"])),
    )
