"""
XML specification reader.

Grammar::

    <animation name="walk" loops="0" skip_first="false" default_delay="1/10">
      <delays>
        <delay>2/10</delay>
      </delays>
      <frames>
        <frame>cover.png</frame>
        <frame delay="5/100">walk/*.png</frame>
        <frame src="last" />
      </frames>
    </animation>

Scalars may also be given as child elements (``<loops>3</loops>``) when
the attribute is absent. The element tree is converted to the same raw
mapping the structured readers produce, so field semantics are shared.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any

from apng_spec.config import ReaderConfig
from apng_spec.document import parse_document
from apng_spec.exceptions import SpecStructureError, SpecSyntaxError
from apng_spec.readers.base import Specification, build_specification

logger = logging.getLogger(__name__)

_ROOT_TAG = "animation"
_SCALAR_FIELDS = ("name", "loops", "skip_first", "default_delay")


def _element_text(element: ET.Element) -> str:
    return (element.text or "").strip()


def _frame_item(index: int, element: ET.Element, path: Path) -> Any:
    src = element.get("src")
    if src is None:
        src = _element_text(element)
    if not src:
        raise SpecStructureError(f"<frame> #{index} has neither src nor text: {path}")
    delay = element.get("delay")
    if delay is None:
        return src
    return {src: delay}


def element_to_tree(root: ET.Element, path: Path) -> dict[str, Any]:
    """Convert an ``<animation>`` element into the shared raw mapping."""
    if root.tag != _ROOT_TAG:
        raise SpecStructureError(
            f"Root element must be <{_ROOT_TAG}>, got <{root.tag}>: {path}"
        )

    raw: dict[str, Any] = {}
    for key in _SCALAR_FIELDS:
        value = root.get(key)
        if value is None:
            child = root.find(key)
            if child is not None:
                value = _element_text(child)
        if value is not None:
            raw[key] = value

    delays = root.find("delays")
    if delays is not None:
        raw["delays"] = [
            d.get("value", _element_text(d)) for d in delays.findall("delay")
        ]

    frames = root.find("frames")
    if frames is not None:
        raw["frames"] = [
            _frame_item(i, f, path) for i, f in enumerate(frames.findall("frame"))
        ]
    return raw


def read_xml(path: str | Path, config: ReaderConfig | None = None) -> Specification:
    """Read an XML specification document.

    Raises:
        FileNotFoundError: If *path* does not exist.
        SpecSyntaxError: If the file is not well-formed XML.
        SpecStructureError: If the root is not ``<animation>`` or
            ``<frames>`` is missing.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Specification file not found: {path}")
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as exc:
        raise SpecSyntaxError(f"Malformed XML in {path}: {exc}") from exc

    document = parse_document(element_to_tree(root, path), source=str(path))
    spec = build_specification(document, base_dir=path.absolute().parent, config=config)
    logger.info(
        "Read XML specification %s: %d entries -> %d frames",
        path, len(document.frames), len(spec.frames),
    )
    return spec
