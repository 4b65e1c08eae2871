"""
Shared test fixtures for apng-spec tests.

All fixtures build their files under ``tmp_path``; no checked-in input
files are required.
"""

import json
from pathlib import Path

import pytest
import yaml


# ---------------------------------------------------------------------------
# Frame directory fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def frames_dir(tmp_path: Path) -> Path:
    """Directory with a1.png, a2.png and b.png (empty placeholder files)."""
    d = tmp_path / "frames"
    d.mkdir()
    for name in ("a1.png", "a2.png", "b.png"):
        (d / name).write_bytes(b"")
    return d


@pytest.fixture()
def write_json(tmp_path: Path):
    """Write a dict as JSON next to the frames directory; returns the path."""
    def _write(data: dict, name: str = "spec.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write


@pytest.fixture()
def write_yaml(tmp_path: Path):
    """Write a dict as YAML next to the frames directory; returns the path."""
    def _write(data: dict, name: str = "spec.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path
    return _write


@pytest.fixture()
def write_text(tmp_path: Path):
    """Write raw text to a file under tmp_path; returns the path."""
    def _write(text: str, name: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (end-to-end document reads)",
    )
