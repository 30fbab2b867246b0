# tests/unit/test_config.py
"""Tests for CompressionConfig validation and YAML loading."""

import pytest
from pydantic import ValidationError

from verdant.core.config import (
    CompressionConfig,
    CompressionLevel,
    OutputFormat,
    build_config,
    load_config,
    load_yaml,
)
from verdant.exceptions.config import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
)


class TestDefaults:
    def test_defaults(self):
        config = CompressionConfig()

        assert config.level is CompressionLevel.MEDIUM
        assert config.format is OutputFormat.CLASSIC
        assert config.profile == "claude"
        assert config.chronological is True
        assert config.strip_emoji is True
        assert config.chunking is False
        assert config.max_lines_per_chunk == 800
        assert config.deduplicate is None
        assert config.dedupe_min_chars == 0
        assert config.output_prefix == "compressed"
        assert config.extension == "md"

    def test_frozen(self):
        config = CompressionConfig()

        with pytest.raises(ValidationError):
            config.level = CompressionLevel.HIGH


class TestValidation:
    @pytest.mark.parametrize(
        "raw,expected",
        [("vrd", OutputFormat.DENSE), ("MD", OutputFormat.CLASSIC), (" Dense ", OutputFormat.DENSE)],
    )
    def test_format_aliases(self, raw, expected):
        assert build_config({"format": raw}).format is expected

    def test_dense_extension(self):
        assert build_config({"format": "dense"}).extension == "vrd"

    def test_names_case_insensitive(self):
        config = build_config({"level": "EXTREME", "profile": "GPT"})

        assert config.level is CompressionLevel.EXTREME
        assert config.profile == "gpt"

    @pytest.mark.parametrize(
        "data,field",
        [
            ({"level": "ultra"}, "level"),
            ({"profile": "llama"}, "profile"),
            ({"max_lines_per_chunk": 0}, "max_lines_per_chunk"),
            ({"dedupe_min_chars": -1}, "dedupe_min_chars"),
            ({"output_prefix": "  "}, "output_prefix"),
            ({"colour": "green"}, "colour"),
        ],
    )
    def test_invalid_values(self, data, field):
        with pytest.raises(ConfigValidationError, match=field):
            build_config(data)

    def test_validation_error_is_config_error(self):
        with pytest.raises(ConfigError, match="Invalid configuration"):
            build_config({"level": "ultra"})

    @pytest.mark.parametrize(
        "kwargs,field",
        [({"level": "ultra"}, "level"), ({"max_lines_per_chunk": 0}, "max_lines_per_chunk")],
    )
    def test_direct_construction_raises_config_error(self, kwargs, field):
        with pytest.raises(ConfigValidationError, match=field):
            CompressionConfig(**kwargs)


class TestAiMode:
    def test_off_by_default(self):
        config = CompressionConfig(level="low")

        assert config.ai_mode is False
        assert config.lexical_level is CompressionLevel.LOW
        assert config.writes_dictionary is False

    def test_runs_extreme_ladder_and_writes_dictionary(self):
        config = build_config({"level": "low", "ai_mode": True})

        assert config.level is CompressionLevel.LOW
        assert config.lexical_level is CompressionLevel.EXTREME
        assert config.writes_dictionary is True

    def test_dense_always_writes_dictionary(self):
        assert build_config({"format": "dense"}).writes_dictionary is True


class TestDedupeEnabled:
    @pytest.mark.parametrize(
        "level,expected",
        [("low", False), ("medium", True), ("high", True), ("extreme", True)],
    )
    def test_automatic(self, level, expected):
        assert build_config({"level": level}).dedupe_enabled is expected

    def test_explicit_wins(self):
        assert build_config({"level": "low", "deduplicate": True}).dedupe_enabled is True
        assert build_config({"level": "high", "deduplicate": False}).dedupe_enabled is False


class TestLevel:
    def test_ordering(self):
        assert CompressionLevel.EXTREME.at_least(CompressionLevel.HIGH)
        assert CompressionLevel.MEDIUM.at_least(CompressionLevel.MEDIUM)
        assert not CompressionLevel.LOW.at_least(CompressionLevel.MEDIUM)
        assert [lvl.rank for lvl in CompressionLevel] == [0, 1, 2, 3]


class TestLoading:
    def test_load_yaml_file(self, tmp_path):
        path = tmp_path / "verdant.yaml"
        path.write_text("level: high\nformat: dense\nchunking: true\n", encoding="utf-8")

        config = load_config(path)

        assert config.level is CompressionLevel.HIGH
        assert config.format is OutputFormat.DENSE
        assert config.chunking is True

    def test_overrides_win_and_none_ignored(self, tmp_path):
        path = tmp_path / "verdant.yaml"
        path.write_text("level: high\nprofile: gpt\n", encoding="utf-8")

        config = load_config(path, {"level": "low", "profile": None})

        assert config.level is CompressionLevel.LOW
        assert config.profile == "gpt"

    def test_no_file(self):
        assert load_config(overrides={"level": "extreme"}).level is CompressionLevel.EXTREME

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigNotFoundError):
            load_yaml(tmp_path / "nope.yaml")

    def test_directory(self, tmp_path):
        with pytest.raises(ConfigError, match="directory"):
            load_yaml(tmp_path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("level: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigParseError):
            load_yaml(path)

    def test_non_mapping_root(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- low\n- high\n", encoding="utf-8")

        with pytest.raises(ConfigParseError, match="mapping"):
            load_yaml(path)

    def test_empty_file_is_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert load_config(path) == CompressionConfig()

    def test_error_carries_path(self, tmp_path):
        path = tmp_path / "verdant.yaml"
        path.write_text("level: ultra\n", encoding="utf-8")

        with pytest.raises(ConfigValidationError) as exc_info:
            load_config(path)

        assert exc_info.value.path == path
