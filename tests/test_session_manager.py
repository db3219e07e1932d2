"""Tests for signed client sessions."""

from datetime import UTC, datetime, timedelta

from shop_catalog.domain.sessions import SessionUser
from shop_catalog.domain.users import LoginEvent
from shop_catalog.services.sessions import SessionManager


def _manager() -> SessionManager:
    return SessionManager(
        secret="secret",
        duration=timedelta(minutes=2),
        active_duration=timedelta(minutes=1),
    )


def test_encoded_session_keeps_identity_and_history() -> None:
    manager = _manager()
    login = LoginEvent(
        date_time=datetime(2024, 5, 1, 9, 30, tzinfo=UTC), user_agent="pytest"
    )
    session = manager.start(
        SessionUser(user_name="editor", email="e@example.com", login_history=[login])
    )

    decoded = manager.decode(manager.encode(session))

    assert decoded is not None
    assert decoded.user == session.user
    assert decoded.expires_at == session.expires_at


def test_missing_or_tampered_token_is_no_session() -> None:
    manager = _manager()
    token = manager.encode(manager.start(SessionUser(user_name="a", email="b")))

    assert manager.decode(None) is None
    assert manager.decode("") is None
    assert manager.decode(token[:-2] + "xx") is None


def test_token_signed_with_other_secret_is_rejected() -> None:
    other = SessionManager(
        secret="other",
        duration=timedelta(minutes=2),
        active_duration=timedelta(minutes=1),
    )
    token = other.encode(other.start(SessionUser(user_name="a", email="b")))

    assert _manager().decode(token) is None


def test_expired_session_is_no_session() -> None:
    manager = _manager()
    issued = datetime.now(tz=UTC) - timedelta(minutes=5)
    token = manager.encode(manager.start(SessionUser(user_name="a", email="b"), issued))

    assert manager.decode(token) is None


def test_touch_extends_session_close_to_expiry() -> None:
    manager = _manager()
    now = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
    session = manager.start(SessionUser(user_name="a", email="b"), now)

    manager.touch(session, now + timedelta(seconds=30))
    assert session.expires_at == now + timedelta(minutes=2)

    manager.touch(session, now + timedelta(seconds=90))
    assert session.expires_at == now + timedelta(minutes=3)


def test_max_age_never_negative() -> None:
    manager = _manager()
    now = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
    session = manager.start(SessionUser(user_name="a", email="b"), now)

    assert manager.max_age(session, now) == 120
    assert manager.max_age(session, now + timedelta(hours=1)) == 0
