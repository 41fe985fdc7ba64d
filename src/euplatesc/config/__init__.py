"""Configuration package."""
from euplatesc.config.settings import EuPlatescSettings, get_settings, reset_settings

__all__ = ["get_settings", "reset_settings", "EuPlatescSettings"]
