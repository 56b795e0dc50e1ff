"""Outcome of applying the session binding policy to a request."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Continue:
    """The request may proceed to the next stage."""


@dataclass(frozen=True)
class Reject:
    """The session was destroyed; the client must be sent to redirect_to."""

    redirect_to: str


Decision = Continue | Reject

# Session key holding the fingerprint a session is bound to.
UNIQUE_SESSION_KEY = "unique-session"
