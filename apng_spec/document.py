"""
Document schema shared by every specification reader.

Each reader decodes its own syntax (JSON, YAML, XML) into a plain tree of
dicts, lists and scalars, then hands it to ``parse_document`` which
validates it into a ``SpecDocument``. From there on all formats follow
the same rules.

Field rules:
- ``name``, ``loops``, ``skip_first``, ``default_delay``: optional. A
  value of the wrong kind falls back to the model default instead of
  failing, the same way a missing field does.
- ``delays``: optional sequence of delay strings.
- ``frames``: required sequence. Each element is either a bare path
  expression or a mapping ``{path: inline_delay}``.

Shape violations (``frames`` missing, a non-sequence where a sequence is
required, empty frame mappings) raise ``SpecStructureError``.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from apng_spec.exceptions import SpecStructureError

logger = logging.getLogger(__name__)

_TRUE_STRINGS = {"true", "1"}
_FALSE_STRINGS = {"false", "0"}


def _scalar_text(value: Any) -> str | None:
    """Text form of a scalar as a property tree would hold it, or None for containers."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    if value is None:
        return ""
    return None


class FrameEntry(BaseModel):
    """One element of the ``frames`` sequence.

    ``delay`` is ``None`` for a bare path entry, otherwise the inline
    delay text of a ``{path: delay}`` entry (possibly malformed).
    """

    model_config = ConfigDict(frozen=True)

    path: str
    delay: str | None = None


class SpecDocument(BaseModel):
    """Validated content of a specification document."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    loops: int = Field(0, ge=0)
    skip_first: bool = False
    default_delay: str | None = None
    delays: list[str] = Field(default_factory=list)
    frames: list[FrameEntry]

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> str:
        text = _scalar_text(value)
        if text is None:
            logger.debug("Ignoring non-scalar name %r", value)
            return ""
        return text

    @field_validator("loops", mode="before")
    @classmethod
    def _coerce_loops(cls, value: Any) -> int:
        if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
            return value
        if isinstance(value, str) and value.isascii() and value.isdigit():
            return int(value)
        logger.debug("Ignoring malformed loops %r, using 0", value)
        return 0

    @field_validator("skip_first", mode="before")
    @classmethod
    def _coerce_skip_first(cls, value: Any) -> bool:
        text = _scalar_text(value)
        if text is not None:
            lowered = text.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True
            if lowered in _FALSE_STRINGS:
                return False
        logger.debug("Ignoring malformed skip_first %r, using False", value)
        return False

    @field_validator("default_delay", mode="before")
    @classmethod
    def _coerce_default_delay(cls, value: Any) -> str | None:
        if value is None:
            return None
        text = _scalar_text(value)
        if text is None:
            logger.debug("Ignoring non-scalar default_delay %r", value)
        return text

    @field_validator("delays", mode="before")
    @classmethod
    def _coerce_delays(cls, value: Any) -> list[str]:
        if value is None:
            return []
        if not isinstance(value, list):
            raise ValueError(f"'delays' must be a sequence, got {type(value).__name__}")
        delays: list[str] = []
        for index, item in enumerate(value):
            text = _scalar_text(item)
            if text is None:
                raise ValueError(f"delays[{index}] must be a scalar, got {type(item).__name__}")
            delays.append(text)
        return delays

    @field_validator("frames", mode="before")
    @classmethod
    def _coerce_frames(cls, value: Any) -> list[FrameEntry]:
        if not isinstance(value, list):
            raise ValueError(f"'frames' must be a sequence, got {type(value).__name__}")
        return [_frame_entry(index, item) for index, item in enumerate(value)]


def _frame_entry(index: int, item: Any) -> FrameEntry:
    """Normalize a raw ``frames`` element into a FrameEntry."""
    if isinstance(item, FrameEntry):
        return item
    if isinstance(item, (str, int, float)) and not isinstance(item, bool):
        return FrameEntry(path=str(item))
    if isinstance(item, dict):
        if not item:
            raise ValueError(f"frames[{index}] is an empty mapping")
        if len(item) > 1:
            logger.warning(
                "frames[%d] has %d keys; only the first (%r) is used",
                index, len(item), next(iter(item)),
            )
        path, delay = next(iter(item.items()))
        delay_text = _scalar_text(delay)
        if delay_text is None:
            raise ValueError(f"frames[{index}] delay must be a scalar, got {type(delay).__name__}")
        return FrameEntry(path=str(path), delay=delay_text)
    raise ValueError(
        f"frames[{index}] must be a path or a {{path: delay}} mapping, "
        f"got {type(item).__name__}"
    )


def parse_document(raw: Any, source: str = "<document>") -> SpecDocument:
    """Validate a decoded document tree.

    Args:
        raw: The decoded root (must be a mapping).
        source: Label used in error messages, usually the file path.

    Raises:
        SpecStructureError: If the root is not a mapping or a required
            section is missing or malformed.
    """
    if not isinstance(raw, dict):
        raise SpecStructureError(
            f"Specification root must be a mapping, got {type(raw).__name__}: {source}"
        )
    try:
        return SpecDocument.model_validate(raw)
    except ValidationError as exc:
        raise SpecStructureError(f"Invalid specification {source}:\n{exc}") from exc
