"""
Read-only handle over a parsed specification.

``SpecReader`` reads its document once, at construction, and then only
exposes the result. Construction either completes or raises; there is
no partially initialised reader.
"""

from __future__ import annotations

from pathlib import Path

from apng_spec.config import ReaderConfig, resolve_config
from apng_spec.detect import SpecFormat, detect_format, get_reader
from apng_spec.readers.base import FrameInfo, Specification


class SpecReader:
    """Accessor for the animation described by one specification file.

    Attributes are read-only views of the underlying ``Specification``.
    """

    def __init__(self, path: str | Path, config: ReaderConfig | None = None) -> None:
        config = resolve_config(config)
        self._path = Path(path)
        self._format = detect_format(self._path, config)
        self._spec = get_reader(self._format)(self._path, config)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def format(self) -> SpecFormat:
        """Syntax the document was read as."""
        return self._format

    @property
    def specification(self) -> Specification:
        return self._spec

    @property
    def name(self) -> str:
        return self._spec.name

    @property
    def loops(self) -> int:
        """Play count; 0 means infinite."""
        return self._spec.loops

    @property
    def skip_first(self) -> bool:
        return self._spec.skip_first

    @property
    def frames(self) -> tuple[FrameInfo, ...]:
        return self._spec.frames

    def __repr__(self) -> str:
        return (
            f"SpecReader(path={str(self._path)!r}, format={self._format.value}, "
            f"frames={len(self._spec.frames)})"
        )
