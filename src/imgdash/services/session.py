"""Session gate controlling access to the dashboard.

Login is a local convention, not a security boundary: any username is accepted
and the password only has to be four decimal digits. Nothing is verified
against a server and no password is ever stored.
"""

import re
import threading

from ..config import get_session_store_path
from ..logging_config import get_logger, log_security_event, log_user_action
from ..models.session import Session
from .persistence import JsonFileKeyValueStore
from .ports import KeyValueStore

logger = get_logger(__name__)

AUTH_FLAG_KEY = "isAuthenticated"
USERNAME_KEY = "username"
DEFAULT_USERNAME = "Guest"

_PASSWORD_PATTERN = re.compile(r"[0-9]{4}")


def is_valid_password(password: str) -> bool:
    """Check that the password is exactly four ASCII digits."""
    return isinstance(password, str) and _PASSWORD_PATTERN.fullmatch(password) is not None


class SessionGate:
    """Holds the login state and mirrors it into a key-value store."""

    def __init__(self, store: KeyValueStore) -> None:
        """
        Create the gate and restore any persisted session.

        Args:
            store: Durable key-value store for the session entries

        Raises:
            ValueError: If no store is given
        """
        if store is None:
            raise ValueError("SessionGate requires a key-value store")

        self._store = store
        self._session = self._hydrate()

    def _hydrate(self) -> Session:
        if self._store.get(AUTH_FLAG_KEY) != "true":
            logger.debug("session_not_restored")
            return Session()

        username = self._store.get(USERNAME_KEY) or DEFAULT_USERNAME
        logger.info("session_restored", username=username)
        return Session(authenticated=True, username=username)

    @property
    def session(self) -> Session:
        return self._session

    @property
    def is_authenticated(self) -> bool:
        return self._session.authenticated

    @property
    def username(self) -> str:
        return self._session.username

    def login(self, username: str, password: str) -> bool:
        """
        Log in with any name and a four digit password.

        Args:
            username: Display name; surrounding whitespace is dropped
            password: Must be exactly four decimal digits

        Returns:
            True on success, False if the password does not conform
        """
        if not is_valid_password(password):
            log_security_event("login_rejected", username=username, reason="password_format")
            return False

        final_username = (username or "").strip() or DEFAULT_USERNAME
        self._session = Session(authenticated=True, username=final_username)

        self._store.set(AUTH_FLAG_KEY, "true")
        self._store.set(USERNAME_KEY, final_username)

        log_user_action(final_username, "login")
        return True

    def logout(self) -> None:
        """Clear the session and its persisted entries. Safe to call repeatedly."""
        previous = self._session
        self._session = Session()

        self._store.remove(AUTH_FLAG_KEY)
        self._store.remove(USERNAME_KEY)

        if previous.authenticated:
            log_user_action(previous.username, "logout")


# Global session gate instance, hydrated once per process
_session_gate: SessionGate | None = None
_session_gate_lock = threading.Lock()


def get_session_gate() -> SessionGate:
    """Get the process-wide session gate, creating it on first use."""
    global _session_gate

    if _session_gate is None:
        with _session_gate_lock:
            if _session_gate is None:
                store = JsonFileKeyValueStore(get_session_store_path())
                _session_gate = SessionGate(store)

    return _session_gate


def reset_session_gate() -> None:
    """Drop the global gate so the next call re-reads the persisted session."""
    global _session_gate
    with _session_gate_lock:
        _session_gate = None
