"""Errors raised by the session guard."""


class InvalidIpFieldError(ValueError):
    """Raised when an ip_field path is empty or deeper than two segments."""


class SessionUnavailableError(RuntimeError):
    """Raised when a request reaches the guard without a session attached."""
