"""
Format dispatch for specification documents.

The reader is chosen from the file name alone (case-insensitive):
- ``.json`` -> JSON reader
- ``.yaml`` / ``.yml`` -> YAML reader
- anything else -> XML reader (the catch-all)

Design: enum + registry
- detect_format() returns a SpecFormat.
- _READERS maps each SpecFormat to a reader function with the common
  signature ``(path, config) -> Specification``.
"""

from __future__ import annotations

import enum
import logging
from pathlib import Path
from typing import Callable

from apng_spec.config import ReaderConfig, resolve_config
from apng_spec.readers.base import Specification
from apng_spec.readers.markup import read_xml
from apng_spec.readers.structured import read_json, read_yaml

logger = logging.getLogger(__name__)

ReaderFn = Callable[[Path, ReaderConfig], Specification]


class SpecFormat(enum.Enum):
    """Supported specification document syntaxes."""
    JSON = "json"
    YAML = "yaml"
    XML = "xml"


_READERS: dict[SpecFormat, ReaderFn] = {
    SpecFormat.JSON: read_json,
    SpecFormat.YAML: read_yaml,
    SpecFormat.XML: read_xml,
}


def detect_format(path: str | Path, config: ReaderConfig | None = None) -> SpecFormat:
    """Pick the document syntax for *path* from its suffix.

    Suffixes listed in ``config.structured_extensions`` go to a
    structured-text reader (``.json`` to JSON, any other listed suffix
    to YAML); everything else is read as XML.
    """
    config = resolve_config(config)
    name = Path(path).name.lower()
    for ext in config.structured_extensions:
        if name.endswith(ext):
            return SpecFormat.JSON if ext == ".json" else SpecFormat.YAML
    return SpecFormat.XML


def get_reader(fmt: SpecFormat) -> ReaderFn:
    """Return the reader function registered for *fmt*."""
    return _READERS[fmt]


def read_spec(path: str | Path, config: ReaderConfig | None = None) -> Specification:
    """Detect the format of *path* and read it into a Specification."""
    config = resolve_config(config)
    fmt = detect_format(path, config)
    logger.debug("Dispatching %s to %s reader", path, fmt.value)
    return get_reader(fmt)(Path(path), config)
