"""
Frame file resolution for apng-spec.

Turns one path expression from a specification into the absolute paths
of the frame files it names.

Two modes:
- Literal (no ``*``): a single file. The image extension is appended
  when missing; the file is not required to exist.
- Wildcard: each ``*`` matches one or more characters, every other
  character matches itself. Candidates are the regular files directly
  inside the expression's parent directory, and only those carrying the
  image extension are kept. The result is sorted.

Relative expressions are anchored at an explicit ``base_dir`` (the
document's directory) instead of the process working directory, so
resolution never touches ``os.chdir`` and is safe to run concurrently.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from apng_spec.config import ReaderConfig, resolve_config

logger = logging.getLogger(__name__)

_WILDCARD = "*"


def absolute_expression(expression: str, base_dir: str | Path | None = None) -> str:
    """Anchor *expression* at *base_dir* (or the cwd) and normalize it."""
    if base_dir is not None:
        expression = os.path.join(os.fspath(base_dir), expression)
    return os.path.abspath(expression)


def wildcard_pattern(abs_expression: str) -> re.Pattern[str]:
    """Compile a full-match regex for a ``*`` expression."""
    parts = abs_expression.split(_WILDCARD)
    return re.compile(".+".join(re.escape(part) for part in parts))


def _has_extension(path: str, extension: str) -> bool:
    return path.lower().endswith(extension)


def resolve_files(
    expression: str,
    base_dir: str | Path | None = None,
    config: ReaderConfig | None = None,
) -> list[str]:
    """Expand a path expression into a sorted list of absolute file paths.

    Args:
        expression: Literal path or ``*`` pattern, absolute or relative.
        base_dir: Directory relative expressions are resolved against.
            ``None`` means the current working directory.
        config: Reader settings; supplies the required image extension.

    Returns:
        A new list. One element for a literal expression; zero or more
        for a wildcard expression. A missing parent directory gives ``[]``.
    """
    config = resolve_config(config)
    extension = config.image_extension
    abs_expression = absolute_expression(expression, base_dir)

    if _WILDCARD not in abs_expression:
        if _has_extension(abs_expression, extension):
            return [abs_expression]
        return [abs_expression + extension]

    parent = os.path.dirname(abs_expression)
    if not os.path.isdir(parent):
        logger.debug("Wildcard parent directory does not exist: %s", parent)
        return []

    pattern = wildcard_pattern(abs_expression)
    files: list[str] = []
    with os.scandir(parent) as entries:
        for entry in entries:
            if not entry.is_file():
                continue
            candidate = os.path.join(parent, entry.name)
            if not pattern.fullmatch(candidate):
                continue
            if _has_extension(candidate, extension):
                files.append(candidate)

    files.sort()
    return files
