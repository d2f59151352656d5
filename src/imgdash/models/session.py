"""Session model for imgdash."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Session:
    """Snapshot of the login state held by the session gate."""

    authenticated: bool = False
    username: str = ""
