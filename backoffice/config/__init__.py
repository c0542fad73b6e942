"""Configuration package."""

from backoffice.config.settings import ReassignmentPolicy, Settings, get_settings, settings

__all__ = ["ReassignmentPolicy", "Settings", "get_settings", "settings"]
