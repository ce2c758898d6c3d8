"""Configuration settings using Pydantic Settings.

Selects the process-wide defaults used by metadata slots that are not given
an explicit storage or resolver.

Usage:
    from typemeta.config import TypeMetaSettings

    # Load from environment variables (TYPEMETA_*)
    settings = TypeMetaSettings()

    # Or override with explicit values
    settings = TypeMetaSettings(storage_backend="attribute")
"""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class TypeMetaSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for default metadata storage and type resolution.

    Attributes:
        storage_backend: Where own entries live. "side_table" keeps them in a
            weak table keyed by type; "attribute" attaches a dict to each class.
        attribute_name: Bucket attribute name used by the "attribute" backend.
        lineage: Ancestor walk. "mro" follows __mro__, "base" follows the
            single-parent __base__ chain.

    Environment Variables:
        TYPEMETA_STORAGE_BACKEND
        TYPEMETA_ATTRIBUTE_NAME
        TYPEMETA_LINEAGE
    """

    model_config = SettingsConfigDict(
        env_prefix="TYPEMETA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    storage_backend: Literal["side_table", "attribute"] = "side_table"
    attribute_name: str = "__typemeta__"
    lineage: Literal["mro", "base"] = "mro"
