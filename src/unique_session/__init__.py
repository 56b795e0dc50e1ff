"""Session hijacking guard binding sessions to a client fingerprint."""

__version__ = "0.1.0"
