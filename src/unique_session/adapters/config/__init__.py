"""Configuration adapters."""

from unique_session.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
