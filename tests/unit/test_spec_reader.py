"""
Unit tests for the read-only facade (apng_spec.spec_reader and
apng_spec.open).
"""

import pytest

import apng_spec
from apng_spec.config import ReaderConfig
from apng_spec.delay import Delay
from apng_spec.detect import SpecFormat
from apng_spec.exceptions import SpecReaderError, SpecStructureError
from apng_spec.spec_reader import SpecReader


class TestSpecReader:
    """Accessors mirror the parsed Specification."""

    def test_accessors(self, frames_dir, write_json):
        path = write_json({
            "name": "walk",
            "loops": 5,
            "skip_first": True,
            "frames": ["frames/a*.png"],
        })
        reader = SpecReader(path)
        assert reader.name == "walk"
        assert reader.loops == 5
        assert reader.skip_first is True
        assert [f.file_path for f in reader.frames] == [
            str(frames_dir / "a1.png"),
            str(frames_dir / "a2.png"),
        ]
        assert reader.format is SpecFormat.JSON
        assert reader.path == path
        assert reader.frames is reader.specification.frames

    def test_config_is_threaded(self, write_json):
        cfg = ReaderConfig(default_numerator=2, default_denominator=50)
        reader = SpecReader(write_json({"frames": ["x"]}), config=cfg)
        assert reader.frames[0].delay == Delay(2, 50)

    def test_repr(self, write_json):
        reader = SpecReader(write_json({"frames": ["x"]}))
        assert "format=json" in repr(reader)
        assert "frames=1" in repr(reader)

    def test_failed_read_raises(self, write_json):
        with pytest.raises(SpecStructureError):
            SpecReader(write_json({"name": "no frames"}))


class TestOpen:
    """Tests for the package-level entry point."""

    def test_open_returns_reader(self, write_yaml):
        reader = apng_spec.open(write_yaml({"name": "y", "frames": []}))
        assert isinstance(reader, SpecReader)
        assert reader.format is SpecFormat.YAML

    def test_errors_share_base_class(self, write_text):
        with pytest.raises(SpecReaderError):
            apng_spec.open(write_text("not xml at all", "spec.xml"))

    def test_read_spec_returns_specification(self, write_json):
        spec = apng_spec.read_spec(write_json({"loops": 1, "frames": []}))
        assert isinstance(spec, apng_spec.Specification)
        assert spec.loops == 1
