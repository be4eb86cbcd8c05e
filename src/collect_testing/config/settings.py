"""Suite settings and loading."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Annotated, Any

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from collect_testing.config.validators import to_configuration_error
from collect_testing.features import Feature, parse_feature, resolve_closure
from collect_testing.samples import SampleElements

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _split_names(value: str) -> list[str]:
    return [name.strip() for name in value.split(",") if name.strip()]


class SuiteSettings(BaseSettings):
    """Settings for generating a contract suite.

    ``features`` accepts a list of names or a comma-separated string, so
    ``COLLECT_TESTING_FEATURES=ListFeature.GENERAL_PURPOSE,CollectionSize.ANY``
    works from the environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="COLLECT_TESTING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    features: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["CollectionSize.ANY"],
        description="Names of the features the list under test declares",
    )
    log_level: str = "WARNING"
    sample_values: list[Any] | None = Field(
        default=None, description="Four or five distinct sample values"
    )

    @field_validator("features", mode="before")
    @classmethod
    def validate_features(cls, v: Any) -> list[str]:
        if isinstance(v, str):
            return _split_names(v)
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Valid: {VALID_LOG_LEVELS}")
        return level

    def resolved_features(self) -> tuple[Feature, ...]:
        """Parse the configured feature names and return their closure."""
        return resolve_closure(parse_feature(name) for name in self.features)

    def samples(self) -> SampleElements[Any] | None:
        if self.sample_values is None:
            return None
        return SampleElements.of(self.sample_values)

    def apply_logging(self) -> None:
        logging.getLogger("collect_testing").setLevel(self.log_level)


def load_settings(config_path: str | Path | None = None) -> SuiteSettings:
    """Load settings from a YAML file and the environment.

    Priority: env vars > config file > defaults

    Raises:
        ConfigurationError: If any value fails validation.
    """
    config_data: dict[str, Any] = {}

    if config_path is not None:
        config_path = Path(config_path)
        if config_path.exists():
            with open(config_path) as f:
                config_data = yaml.safe_load(f) or {}

    config_data.update(_get_env_overrides())

    try:
        return SuiteSettings(**config_data)
    except ValidationError as e:
        raise to_configuration_error(e, "suite settings") from e


def _get_env_overrides() -> dict[str, Any]:
    """Get settings overrides from environment variables."""
    overrides: dict[str, Any] = {}

    env_mappings = {
        "COLLECT_TESTING_LOG_LEVEL": "log_level",
        "COLLECT_TESTING_FEATURES": ("features", _split_names),
    }

    for env_key, config_key in env_mappings.items():
        value = os.environ.get(env_key)
        if value is not None:
            if isinstance(config_key, tuple):
                key, converter = config_key
                overrides[key] = converter(value)
            else:
                overrides[config_key] = value

    return overrides
