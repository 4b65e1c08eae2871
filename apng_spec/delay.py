"""
Delay parsing for apng-spec.

A frame delay is written as ``"num"`` or ``"num/den"`` and means
``num / den`` seconds. Parsing is permissive: each half that is not a
plain unsigned integer is replaced by the configured default, so
``parse_delay`` never raises.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from apng_spec.config import ReaderConfig, resolve_config

_SEPARATOR = "/"
_UINT_PATTERN = re.compile(r"[0-9]+")
_UINT_MAX = 2**32 - 1


@dataclass(frozen=True)
class Delay:
    """Display duration of one frame, ``num / den`` seconds."""

    num: int
    den: int

    @property
    def seconds(self) -> float | None:
        """Duration as a float, or ``None`` when the denominator is zero."""
        if self.den == 0:
            return None
        return self.num / self.den

    def __str__(self) -> str:
        return f"{self.num}{_SEPARATOR}{self.den}"


def default_delay(config: ReaderConfig | None = None) -> Delay:
    """The delay used when a document declares none."""
    config = resolve_config(config)
    return Delay(config.default_numerator, config.default_denominator)


def _parse_uint(text: str) -> int | None:
    """Parse an unsigned 32-bit decimal, or return None if *text* is not one."""
    if not _UINT_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if value > _UINT_MAX:
        return None
    return value


def parse_delay_outcome(text: object, config: ReaderConfig | None = None) -> tuple[Delay, bool]:
    """Parse delay text and report whether any default was substituted.

    Non-string scalars (YAML/JSON numbers) are stringified first;
    booleans and ``None`` count as malformed.

    Returns:
        ``(delay, used_default)``.
    """
    config = resolve_config(config)
    if text is None or isinstance(text, bool):
        return default_delay(config), True
    text = str(text)

    num_text, sep, den_text = text.partition(_SEPARATOR)
    num = _parse_uint(num_text)
    den = _parse_uint(den_text) if sep else None

    used_default = num is None or (bool(sep) and den is None)
    return (
        Delay(
            num if num is not None else config.default_numerator,
            den if den is not None else config.default_denominator,
        ),
        used_default,
    )


def parse_delay(text: object, config: ReaderConfig | None = None) -> Delay:
    """Parse ``"num"`` or ``"num/den"`` into a Delay, falling back to defaults.

    Examples::

        parse_delay("12")     # Delay(12, 1000)
        parse_delay("12/25")  # Delay(12, 25)
        parse_delay("x/25")   # Delay(100, 25)
    """
    delay, _ = parse_delay_outcome(text, config)
    return delay
