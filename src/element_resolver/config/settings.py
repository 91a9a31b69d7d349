"""
Settings - Pydantic models for type-safe configuration.

Example:
    >>> from element_resolver.config import load_config
    >>> settings = load_config()  # Loads from env, yaml, and defaults
    >>> print(settings.resolver.prefix)
    'body'
"""

from typing import Dict, Literal, Optional
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ResolverSettings(BaseModel):
    """
    Element resolution settings.
    
    Attributes:
        prefix: CSS scope prepended to every formatted selector ("" for none)
        aliases: Shortcut names mapped to CSS selectors, in declaration order
        engine: Driver adapter used when wrapping a raw driver
    """
    prefix: str = "body"
    aliases: Dict[str, str] = Field(default_factory=dict)
    engine: Literal["selenium", "playwright"] = "selenium"
    
    @field_validator("prefix", mode="before")
    @classmethod
    def _strip_prefix(cls, value: Optional[str]) -> str:
        if value is None:
            return ""
        return value.strip() if isinstance(value, str) else value
    
    @field_validator("aliases")
    @classmethod
    def _reject_empty_alias(cls, value: Dict[str, str]) -> Dict[str, str]:
        if any(key == "" for key in value):
            raise ValueError("alias names must not be empty")
        return value


class LoggingSettings(BaseModel):
    """
    Logging configuration.
    
    Attributes:
        level: Log level
        format: Log format string for the file handler
        file: Log file path (None for console only)
    """
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


class Settings(BaseSettings):
    """
    Root settings container.
    
    Settings are loaded in this priority order (highest to lowest):
    1. Explicit values passed to constructor
    2. Environment variables (prefixed with ELEMENT_RESOLVER__)
    3. Config file (YAML)
    4. Default values
    
    Example:
        >>> settings = Settings()  # Load from env vars
        >>> settings = Settings(resolver=ResolverSettings(prefix="#app"))
    """
    
    model_config = SettingsConfigDict(
        env_prefix="ELEMENT_RESOLVER__",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )
    
    resolver: ResolverSettings = Field(default_factory=ResolverSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    
    def merge_with(self, overrides: dict) -> "Settings":
        """
        Create a new Settings instance with overrides applied.
        
        Args:
            overrides: Dictionary of values to override
            
        Returns:
            New Settings instance with overrides applied
        """
        merged = deep_merge(self.model_dump(), overrides)
        return Settings(**merged)


def deep_merge(base: dict, updates: dict) -> dict:
    """
    Merge ``updates`` into ``base`` in place, nested dicts key by key.
    
    Alias tables are replaced wholesale, never merged key by key.
    """
    for key, value in updates.items():
        if key != "aliases" and key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base
