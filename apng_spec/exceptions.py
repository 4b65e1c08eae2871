"""
Custom exception hierarchy for apng-spec.

Why a custom hierarchy:
- Callers can tell a document they cannot parse at all (SpecSyntaxError)
  apart from one that parses but lacks a required section
  (SpecStructureError), without catching generic ValueError.
- Content-quality problems (bad delay numbers, missing optional fields,
  wildcards that match nothing) never raise; they are replaced by
  defaults. Only the exceptions below escape a read.
"""


class SpecReaderError(Exception):
    """Base exception for all apng-spec errors."""


class SpecSyntaxError(SpecReaderError):
    """Raised when a specification document cannot be parsed.

    Wraps the underlying JSON / YAML / XML parser error, which is kept
    as ``__cause__``.
    """


class SpecStructureError(SpecReaderError):
    """Raised when a document parses but does not have the expected shape.

    This can happen if:
    - The ``frames`` section is missing or is not a sequence.
    - ``delays`` is present but is not a sequence.
    - A frame entry is an empty mapping or an unsupported type.
    - The document root is not a mapping (or not ``<animation>`` in XML).
    """


class ConfigValidationError(SpecReaderError):
    """Raised when a reader config YAML file is empty or unusable."""
