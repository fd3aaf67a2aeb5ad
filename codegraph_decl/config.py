"""
Centralized configuration for declaration rendering.

Usage:
    from codegraph_decl.config import RenderConfig, get_settings

    # Default rendering config
    builder = DeclarationBuilder(config=RenderConfig())

    # Environment-derived config (CODEGRAPH_DECL_* variables)
    builder = DeclarationBuilder(config=get_settings().to_render_config())

    # Override for a specific use case
    custom = RenderConfig(ignored_attribute_names=frozenset({"CompilerGeneratedAttribute"}))
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Reflection wrapper type that shows up as an attribute but is not declared in source
RUNTIME_ATTRIBUTE_DATA = "System.Reflection.RuntimeCustomAttributeData"


class RenderConfig(BaseModel):
    """Immutable configuration shared by all renderers."""

    model_config = ConfigDict(frozen=True)

    ignored_attribute_names: frozenset[str] = Field(default=frozenset({RUNTIME_ATTRIBUTE_DATA}))
    """Attribute type names dropped before rendering (exact match)"""

    default_visibility: str = Field(default="private", min_length=1)
    """Visibility token used when no access flag is set"""

    normalize_characters: str = "$<>"
    """Characters stripped from the output when normalization is requested"""

    unknown_argument_placeholder: str = "<unknown argument>"
    """Prefix for arguments of unrecognized kind"""

    def is_ignored(self, attribute_name: str) -> bool:
        return attribute_name in self.ignored_attribute_names


class DeclSettings(BaseSettings):
    """
    Process settings read from the environment.

    Environment variables use the CODEGRAPH_DECL_ prefix.
    Example: CODEGRAPH_DECL_LOG_LEVEL=DEBUG, CODEGRAPH_DECL_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="CODEGRAPH_DECL_",
        extra="ignore",
    )

    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"
    extra_ignored_attributes: list[str] = Field(default_factory=list)
    default_visibility: str = "private"

    def to_render_config(self) -> RenderConfig:
        """Fold environment overrides into a RenderConfig."""
        base = RenderConfig()
        return RenderConfig(
            ignored_attribute_names=base.ignored_attribute_names | frozenset(self.extra_ignored_attributes),
            default_visibility=self.default_visibility,
        )


@lru_cache(maxsize=1)
def get_settings() -> DeclSettings:
    """
    Get the process settings (singleton).

    The settings are cached. To reload, call get_settings.cache_clear() first.
    """
    return DeclSettings()
