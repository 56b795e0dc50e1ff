"""Session store port."""

from typing import Protocol


class SessionStore(Protocol):
    """Port for the fingerprint slot of the current request's session."""

    def has_fingerprint(self) -> bool:
        """Return True if the session is already bound to a fingerprint."""
        ...

    def get_fingerprint(self) -> str | None:
        """Return the stored fingerprint, or None when unbound."""
        ...

    def set_fingerprint(self, fingerprint: str) -> None:
        """Bind the session to a fingerprint."""
        ...

    def destroy(self) -> None:
        """Invalidate the whole session, not only the fingerprint slot."""
        ...
