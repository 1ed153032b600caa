"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use DOCATTR_ prefix (e.g., DOCATTR_STRICT_MODE=true).

Settings can also be loaded from a .env file in the project root.
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use DOCATTR_ prefix. List values are given as JSON.

    Examples:
        DOCATTR_STRICT_MODE=true
        DOCATTR_VERBOSITY=3
        DOCATTR_DEPRECATED_ATTRIBUTES='["deprecated", "ocaml.deprecated"]'
    """

    model_config = SettingsConfigDict(
        env_prefix="DOCATTR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Annotation names
    doc_attributes: List[str] = Field(
        default=["doc", "ocaml.doc"],
        description="Annotation names carrying documentation attached to a declaration",
    )

    text_attributes: List[str] = Field(
        default=["text", "ocaml.text"],
        description="Annotation names carrying freestanding documentation text",
    )

    deprecated_attributes: List[str] = Field(
        default=["deprecated", "ocaml.deprecated"],
        description="Annotation names marking a deprecation alert",
    )

    stop_marker: str = Field(
        default="/*",
        description="Text payload of a freestanding annotation that stops documentation collection",
    )

    # Locations
    location_pad: int = Field(
        default=3,
        description="Columns between an annotation literal's start and its comment text (the opening '(**')",
    )

    # Diagnostics
    strict_mode: bool = Field(
        default=False,
        description="Strict mode: raise warnings instead of collecting or logging them",
    )

    verbosity: int = Field(
        default=1,
        description="Default logging verbosity when no context has been connected (1-3)",
    )

    def attributeKind_get(self, name: str) -> str | None:
        """
        Map an annotation name to the kind of annotation it spells.

        Args:
            name: Annotation name as written in source

        Returns:
            "doc", "text" or "deprecated", or None for any other name

        Example:
            >>> settings = AppSettings()
            >>> settings.attributeKind_get("ocaml.deprecated")
            'deprecated'
        """
        if name in self.doc_attributes:
            return "doc"
        if name in self.text_attributes:
            return "text"
        if name in self.deprecated_attributes:
            return "deprecated"
        return None


# Singleton instance - import this in your code
appsettings = AppSettings()
