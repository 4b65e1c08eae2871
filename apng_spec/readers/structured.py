"""
Structured-text specification readers (JSON and YAML).

Both syntaxes decode to the same key/value tree::

    {
      "name": "walk",
      "loops": 0,
      "skip_first": false,
      "default_delay": "1/10",
      "delays": ["2/10", "3/10"],
      "frames": ["cover", {"walk/*.png": "5/100"}, "last.png"]
    }

Relative frame paths are resolved against the document's directory.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from apng_spec.config import ReaderConfig
from apng_spec.document import parse_document
from apng_spec.exceptions import SpecSyntaxError
from apng_spec.readers.base import Specification, build_specification

logger = logging.getLogger(__name__)


def _load_text(path: Path) -> str:
    if not path.exists():
        raise FileNotFoundError(f"Specification file not found: {path}")
    with open(path, "r", encoding="utf-8-sig") as f:
        return f.read()


def _build(raw: Any, path: Path, config: ReaderConfig | None, fmt: str) -> Specification:
    document = parse_document(raw, source=str(path))
    spec = build_specification(document, base_dir=path.absolute().parent, config=config)
    logger.info(
        "Read %s specification %s: %d entries -> %d frames",
        fmt, path, len(document.frames), len(spec.frames),
    )
    return spec


def read_json(path: str | Path, config: ReaderConfig | None = None) -> Specification:
    """Read a JSON specification document.

    Raises:
        FileNotFoundError: If *path* does not exist.
        SpecSyntaxError: If the file is not valid JSON.
        SpecStructureError: If required sections are missing or malformed.
    """
    path = Path(path)
    text = _load_text(path)
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SpecSyntaxError(f"Malformed JSON in {path}: {exc}") from exc
    return _build(raw, path, config, "JSON")


def read_yaml(path: str | Path, config: ReaderConfig | None = None) -> Specification:
    """Read a YAML specification document.

    Same field set and semantics as :func:`read_json`.

    Raises:
        FileNotFoundError: If *path* does not exist.
        SpecSyntaxError: If the file is not valid YAML.
        SpecStructureError: If required sections are missing or malformed.
    """
    path = Path(path)
    text = _load_text(path)
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SpecSyntaxError(f"Malformed YAML in {path}: {exc}") from exc
    return _build(raw, path, config, "YAML")
