"""
Reader configuration for apng-spec.

This module defines the Pydantic model holding the tunable constants of
the reader (default delay, required image extension, which suffixes
count as structured-text documents), plus YAML load/save helpers.

Key objects:
- DEFAULT_FRAME_NUMERATOR / DEFAULT_FRAME_DENOMINATOR: built-in default
  delay (100/1000 s).
- ReaderConfig: frozen settings model, threaded through every read.
- load_config(path) -> ReaderConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.

Every public function in the package accepts ``config=None`` meaning
``ReaderConfig()``.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from apng_spec.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)

DEFAULT_FRAME_NUMERATOR = 100
DEFAULT_FRAME_DENOMINATOR = 1000
IMAGE_EXTENSION = ".png"
STRUCTURED_EXTENSIONS = (".json", ".yaml", ".yml")


class ReaderConfig(BaseModel):
    """Settings shared by the delay parser, path resolver and readers."""

    model_config = ConfigDict(frozen=True)

    default_numerator: int = Field(
        DEFAULT_FRAME_NUMERATOR, ge=0, description="Numerator used when delay text is malformed"
    )
    default_denominator: int = Field(
        DEFAULT_FRAME_DENOMINATOR, ge=1, description="Denominator used when delay text is malformed"
    )
    image_extension: str = Field(
        IMAGE_EXTENSION, description="Extension every resolved frame file must carry"
    )
    structured_extensions: tuple[str, ...] = Field(
        STRUCTURED_EXTENSIONS,
        description="Document suffixes read by the structured-text reader; anything else is XML",
    )

    @field_validator("image_extension")
    @classmethod
    def _check_extension(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError(f"image_extension must look like '.png', got {value!r}")
        return value.lower()

    @field_validator("structured_extensions")
    @classmethod
    def _lower_extensions(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for ext in value:
            if not ext.startswith("."):
                raise ValueError(f"structured extension must start with '.', got {ext!r}")
        return tuple(ext.lower() for ext in value)


def resolve_config(config: ReaderConfig | None) -> ReaderConfig:
    """Return *config*, or the default settings when it is ``None``."""
    return config if config is not None else ReaderConfig()


def load_config(path: str | Path) -> ReaderConfig:
    """Load and validate a reader config YAML file.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty or not a mapping.
        pydantic.ValidationError: If a value fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"Config file must contain a mapping, got {type(raw).__name__}: {path}"
        )
    logger.info("Loaded reader config from %s", path)
    return ReaderConfig.model_validate(raw)


def save_config(config: ReaderConfig, path: str | Path) -> None:
    """Serialize a ReaderConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# apng-spec reader configuration\n\n")
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
    logger.info("Saved reader config to %s", path)
