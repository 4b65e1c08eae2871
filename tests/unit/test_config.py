"""
Unit tests for reader configuration (apng_spec.config).

Tests Pydantic validation, YAML round-trip and load errors.
"""

import pytest
from pydantic import ValidationError

from apng_spec.config import (
    DEFAULT_FRAME_DENOMINATOR,
    DEFAULT_FRAME_NUMERATOR,
    ReaderConfig,
    load_config,
    resolve_config,
    save_config,
)
from apng_spec.exceptions import ConfigValidationError


class TestReaderConfig:
    """Tests for ReaderConfig defaults and validation."""

    def test_defaults(self):
        cfg = ReaderConfig()
        assert cfg.default_numerator == DEFAULT_FRAME_NUMERATOR == 100
        assert cfg.default_denominator == DEFAULT_FRAME_DENOMINATOR == 1000
        assert cfg.image_extension == ".png"
        assert cfg.structured_extensions == (".json", ".yaml", ".yml")

    def test_extensions_lowercased(self):
        cfg = ReaderConfig(image_extension=".PNG", structured_extensions=[".JSON"])
        assert cfg.image_extension == ".png"
        assert cfg.structured_extensions == (".json",)

    def test_zero_denominator_rejected(self):
        with pytest.raises(ValidationError, match="default_denominator"):
            ReaderConfig(default_denominator=0)

    def test_negative_numerator_rejected(self):
        with pytest.raises(ValidationError):
            ReaderConfig(default_numerator=-1)

    @pytest.mark.parametrize("ext", ["png", ".", ""])
    def test_bad_image_extension(self, ext):
        with pytest.raises(ValidationError, match="image_extension"):
            ReaderConfig(image_extension=ext)

    def test_bad_structured_extension(self):
        with pytest.raises(ValidationError):
            ReaderConfig(structured_extensions=["json"])

    def test_frozen(self):
        with pytest.raises(ValidationError):
            ReaderConfig().default_numerator = 5  # type: ignore[misc]

    def test_resolve_config(self):
        cfg = ReaderConfig(default_numerator=1)
        assert resolve_config(cfg) is cfg
        assert resolve_config(None) == ReaderConfig()


class TestYamlIO:
    """Tests for load_config() / save_config()."""

    def test_round_trip(self, tmp_path):
        cfg = ReaderConfig(default_numerator=1, default_denominator=24, image_extension=".webp")
        path = tmp_path / "nested" / "reader.yaml"
        save_config(cfg, path)
        assert path.read_text(encoding="utf-8").startswith("# apng-spec")
        assert load_config(path) == cfg

    def test_partial_file_uses_defaults(self, tmp_path):
        path = tmp_path / "reader.yaml"
        path.write_text("default_denominator: 60\n", encoding="utf-8")
        cfg = load_config(path)
        assert cfg.default_denominator == 60
        assert cfg.default_numerator == 100

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "absent.yaml")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "reader.yaml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ConfigValidationError, match="empty"):
            load_config(path)

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "reader.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(ConfigValidationError, match="mapping"):
            load_config(path)
