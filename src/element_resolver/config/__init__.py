"""
Configuration module - Centralized settings management.

Usage:
    from element_resolver.config import get_settings, load_config
    
    # Get global settings (loaded once)
    settings = get_settings()
    
    # Or load fresh settings with overrides
    settings = load_config(resolver={"prefix": "#app"})

Environment Variables:
    ELEMENT_RESOLVER__RESOLVER__PREFIX="#app"
    ELEMENT_RESOLVER__RESOLVER__ENGINE=playwright
    ELEMENT_RESOLVER__RESOLVER__ALIASES='{"@email": "input[name=email]"}'
    ELEMENT_RESOLVER__LOGGING__LEVEL=DEBUG
"""

from element_resolver.config.settings import (
    Settings,
    ResolverSettings,
    LoggingSettings,
)
from element_resolver.config.loader import ConfigLoader, load_config

# Global settings singleton
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get the global settings instance (singleton).
    
    Settings are loaded once from environment variables and config files.
    Call reset_settings() to reload.
    
    Returns:
        Global Settings instance
    """
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def reset_settings() -> None:
    """Reset the global settings (forces reload on next get_settings())."""
    global _settings
    _settings = None


__all__ = [
    "Settings",
    "ResolverSettings",
    "LoggingSettings",
    "ConfigLoader",
    "load_config",
    "get_settings",
    "reset_settings",
]
