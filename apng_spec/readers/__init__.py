"""
Specification readers sub-package for apng-spec.

Each reader turns one document syntax into the canonical
``Specification`` (see base.py):

- structured.py: ``read_json`` / ``read_yaml`` for key/value documents.
- markup.py: ``read_xml`` for ``<animation>`` documents.

Readers are plain functions with the same signature
``(path, config) -> Specification``; detect.py picks one per file.
"""
