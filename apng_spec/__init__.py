"""
apng-spec: read animation assembly specifications.

An assembly specification lists the still images that make up an
animated PNG, with per-frame delays, a loop count and a skip-first
flag. Documents may be JSON, YAML or XML, and frame paths may use ``*``
wildcards.

Public API surface:

- ``open(path, config=None)`` -- **recommended entry point**. Reads the
  document (format chosen by file name) and returns a read-only
  ``SpecReader`` with ``name``, ``loops``, ``skip_first`` and ``frames``.

- ``read_spec(path, config=None)`` -- same read, returning the bare
  ``Specification`` dataclass.

- ``parse_delay(text)`` / ``resolve_files(expression, base_dir)`` -- the
  building blocks, usable on their own.

Example::

    import apng_spec

    reader = apng_spec.open("anim/walk.json")
    for frame in reader.frames:
        print(frame.file_path, frame.delay.num, frame.delay.den)
"""

from __future__ import annotations

from pathlib import Path

from apng_spec.config import ReaderConfig, load_config, save_config
from apng_spec.delay import Delay, parse_delay
from apng_spec.detect import SpecFormat, detect_format, read_spec
from apng_spec.exceptions import (
    ConfigValidationError,
    SpecReaderError,
    SpecStructureError,
    SpecSyntaxError,
)
from apng_spec.paths import resolve_files
from apng_spec.readers.base import FrameInfo, Specification
from apng_spec.spec_reader import SpecReader

__all__ = [
    "open",
    "read_spec",
    "SpecReader",
    "Specification",
    "FrameInfo",
    "Delay",
    "SpecFormat",
    "ReaderConfig",
    "parse_delay",
    "resolve_files",
    "detect_format",
    "load_config",
    "save_config",
    "SpecReaderError",
    "SpecSyntaxError",
    "SpecStructureError",
    "ConfigValidationError",
]


def open(path: str | Path, config: ReaderConfig | None = None) -> SpecReader:
    """Read a specification file and return a read-only handle.

    Args:
        path: Path to a ``.json``, ``.yaml``/``.yml`` or XML document.
        config: Reader settings (default delay, image extension). ``None``
            uses the built-in defaults.

    Returns:
        A ``SpecReader``.

    Raises:
        FileNotFoundError: If *path* does not exist.
        SpecSyntaxError: If the document cannot be parsed.
        SpecStructureError: If ``frames`` is missing or malformed.
    """
    return SpecReader(path, config=config)
