"""
Tests for AbbreviatorConfig.
"""

import pytest
from pydantic import ValidationError

from vendor_regex.config import DEFAULT_CONFIG, AbbreviatorConfig


class TestDefaults:
    """Default search bounds."""

    def test_defaults(self) -> None:
        config = AbbreviatorConfig()
        assert config.min_length == 4
        assert config.cross_word_max_length == 8
        assert config.min_prefix_length == 3
        assert config.span_min_length == 6
        assert config.span_max_length == 14
        assert config.span_right_max == 6
        assert config.max_repair_rounds == 20
        assert config.extension_prefix_max == 12

    def test_default_instance(self) -> None:
        assert DEFAULT_CONFIG == AbbreviatorConfig()

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            DEFAULT_CONFIG.max_repair_rounds = 5


class TestValidation:
    """Field and model validation."""

    def test_negative_rounds_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AbbreviatorConfig(max_repair_rounds=-1)

    def test_inverted_span_range_rejected(self) -> None:
        with pytest.raises(ValidationError, match="span_min_length"):
            AbbreviatorConfig(span_min_length=10, span_max_length=8)


class TestFromEnv:
    """Environment overrides."""

    def test_no_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("VENDOR_REGEX_MAX_REPAIR_ROUNDS", raising=False)
        assert AbbreviatorConfig.from_env() == AbbreviatorConfig()

    def test_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VENDOR_REGEX_MAX_REPAIR_ROUNDS", "5")
        monkeypatch.setenv("VENDOR_REGEX_MIN_LENGTH", " 3 ")
        config = AbbreviatorConfig.from_env()
        assert config.max_repair_rounds == 5
        assert config.min_length == 3

    def test_blank_value_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VENDOR_REGEX_MIN_LENGTH", "  ")
        assert AbbreviatorConfig.from_env().min_length == 4

    def test_invalid_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VENDOR_REGEX_MIN_LENGTH", "zero")
        with pytest.raises(ValidationError):
            AbbreviatorConfig.from_env()
