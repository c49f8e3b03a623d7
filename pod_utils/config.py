"""
Configuration management for POD utilities
Trim-exempt fields, signing defaults and logging settings
"""

from typing import FrozenSet
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

from .constants import SigningDefaults, SchemaDefaults


class UtilitiesConfig(BaseSettings):
    """Process-wide, read-only settings for the utility functions"""

    # Trimming
    not_trim_fields: FrozenSet[str] = Field(
        default_factory=frozenset,
        description="Field names that trimming never touches, at any depth"
    )

    # Signing
    default_sign_algorithm: str = Field(default=SigningDefaults.ALGORITHM)
    default_signature_encoding: str = Field(default=SigningDefaults.ENCODING)

    # Schema validation
    json_schema_draft: str = Field(
        default=SchemaDefaults.DRAFT,
        description="$schema URI assumed when a schema does not declare one"
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=True)

    model_config = SettingsConfigDict(
        env_prefix="POD_UTILS_",
        case_sensitive=False,
        frozen=True,
    )


# Global configuration instance, loaded once at import
utilities_config = UtilitiesConfig()


def get_utilities_config() -> UtilitiesConfig:
    """Get the global utilities configuration instance"""
    return utilities_config


def load_utilities_config(**overrides) -> UtilitiesConfig:
    """Build a new frozen configuration, e.g. for injection into trim calls"""
    return UtilitiesConfig(**overrides)
