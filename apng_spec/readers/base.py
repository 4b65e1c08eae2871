"""
Canonical specification model and frame assembly shared by all readers.

Every reader, whatever its syntax, ends with ``build_specification``:
1. Resolve ``default_delay`` (or the configured default) and the
   positional ``delays`` list through the delay parser.
2. For each frame entry pick its delay: inline delay for a
   ``{path: delay}`` entry, else ``delays[i]`` for the entry's ordinal
   ``i``, else the default delay.
3. Expand the entry's path expression against the document's directory
   and emit one FrameInfo per resolved file, all sharing that delay.
   Entries that resolve to nothing contribute nothing.

Why dataclasses (not Pydantic) here:
- The model is built once from already-validated input and never
  mutated, so frozen dataclasses with tuple fields are enough and
  compare field-for-field.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from apng_spec.config import ReaderConfig, resolve_config
from apng_spec.delay import Delay, default_delay, parse_delay
from apng_spec.document import SpecDocument
from apng_spec.paths import resolve_files

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameInfo:
    """One resolved animation frame.

    Attributes:
        file_path: Absolute path of the frame image.
        delay: How long the frame is shown.
    """
    file_path: str
    delay: Delay


@dataclass(frozen=True)
class Specification:
    """Parsed description of an animation.

    Attributes:
        name: Animation name, empty when not declared.
        loops: Number of plays; 0 means loop forever.
        skip_first: True when the first frame is a cover image that is
            not part of playback.
        frames: Resolved frames in document order (wildcard matches in
            sorted path order).
    """
    name: str = ""
    loops: int = 0
    skip_first: bool = False
    frames: tuple[FrameInfo, ...] = field(default_factory=tuple)


def build_specification(
    document: SpecDocument,
    base_dir: str | Path,
    config: ReaderConfig | None = None,
) -> Specification:
    """Assemble a Specification from a validated document.

    Args:
        document: Validated document content.
        base_dir: Directory relative frame paths are resolved against
            (the directory containing the document).
        config: Reader settings.
    """
    config = resolve_config(config)

    if document.default_delay is None:
        fallback = default_delay(config)
    else:
        fallback = parse_delay(document.default_delay, config)
    delays = [parse_delay(text, config) for text in document.delays]

    frames: list[FrameInfo] = []
    for index, entry in enumerate(document.frames):
        if entry.delay is not None:
            delay = parse_delay(entry.delay, config)
        elif index < len(delays):
            delay = delays[index]
        else:
            delay = fallback

        files = resolve_files(entry.path, base_dir=base_dir, config=config)
        if not files:
            logger.debug("Frame entry %d (%r) matched no files", index, entry.path)
        frames.extend(FrameInfo(file_path, delay) for file_path in files)

    return Specification(
        name=document.name,
        loops=document.loops,
        skip_first=document.skip_first,
        frames=tuple(frames),
    )
