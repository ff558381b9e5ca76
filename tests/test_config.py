"""Tests for udic_plist.config module."""

from pathlib import Path

import pytest

from udic_plist import config


class TestResolvePath:
    """Tests for resolve_path function."""

    def test_relative_joins_base_dir(self, temp_dir: Path):
        assert config.resolve_path("dict.txt", temp_dir) == temp_dir / "dict.txt"

    def test_relative_subdirectory(self, temp_dir: Path):
        assert config.resolve_path("data/dict.txt", temp_dir) == temp_dir / "data" / "dict.txt"

    def test_absolute_unchanged(self, temp_dir: Path):
        absolute = temp_dir / "elsewhere" / "dict.txt"
        assert config.resolve_path(str(absolute), Path("/unused")) == absolute

    def test_ignores_working_directory(self, temp_dir: Path, monkeypatch):
        monkeypatch.chdir(temp_dir)
        base = temp_dir / "program"
        assert config.resolve_path("dict.txt", base) == base / "dict.txt"


class TestLoadConfig:
    """Tests for load_config function."""

    def test_defaults(self, temp_dir: Path):
        cfg = config.load_config(base_dir=temp_dir)
        assert cfg.conversion.input_path == "dict.txt"
        assert cfg.conversion.output_path == "dict.plist"
        assert cfg.input_file == temp_dir / "dict.txt"
        assert cfg.output_file == temp_dir / "dict.plist"

    def test_cli_values(self, temp_dir: Path):
        cfg = config.load_config(
            input_path="words.txt", output_path="words.plist", base_dir=temp_dir
        )
        assert cfg.input_file == temp_dir / "words.txt"
        assert cfg.output_file == temp_dir / "words.plist"

    def test_only_input_given(self, temp_dir: Path):
        cfg = config.load_config(input_path="words.txt", base_dir=temp_dir)
        assert cfg.output_file == temp_dir / "dict.plist"

    def test_base_dir_defaults_to_cwd(self, temp_dir: Path, monkeypatch):
        monkeypatch.chdir(temp_dir)
        cfg = config.load_config()
        assert cfg.input_file.resolve() == (temp_dir / "dict.txt").resolve()

    def test_yaml_file(self, temp_dir: Path):
        config_file = temp_dir / "config.yaml"
        config_file.write_text(
            "conversion:\n  input_path: in.txt\n  output_path: out.plist\n",
            encoding="utf-8",
        )
        cfg = config.load_config(config_path=str(config_file), base_dir=temp_dir)
        assert cfg.conversion.input_path == "in.txt"
        assert cfg.conversion.output_path == "out.plist"

    def test_cli_overrides_yaml(self, temp_dir: Path):
        config_file = temp_dir / "config.yaml"
        config_file.write_text(
            "conversion:\n  input_path: in.txt\n  output_path: out.plist\n",
            encoding="utf-8",
        )
        cfg = config.load_config(
            config_path=str(config_file), input_path="cli.txt", base_dir=temp_dir
        )
        assert cfg.conversion.input_path == "cli.txt"
        assert cfg.conversion.output_path == "out.plist"

    def test_partial_yaml_keeps_defaults(self, temp_dir: Path):
        config_file = temp_dir / "config.yaml"
        config_file.write_text("conversion:\n  input_path: in.txt\n", encoding="utf-8")
        cfg = config.load_config(config_path=str(config_file), base_dir=temp_dir)
        assert cfg.conversion.output_path == "dict.plist"

    def test_empty_yaml_keeps_defaults(self, temp_dir: Path):
        config_file = temp_dir / "config.yaml"
        config_file.write_text("", encoding="utf-8")
        cfg = config.load_config(config_path=str(config_file), base_dir=temp_dir)
        assert cfg.conversion.input_path == "dict.txt"

    def test_missing_config_file(self, temp_dir: Path):
        with pytest.raises(FileNotFoundError, match="Configuration file not found"):
            config.load_config(config_path=str(temp_dir / "nope.yaml"))

    def test_non_mapping_yaml(self, temp_dir: Path):
        config_file = temp_dir / "config.yaml"
        config_file.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            config.load_config(config_path=str(config_file), base_dir=temp_dir)

    def test_non_mapping_section(self, temp_dir: Path):
        config_file = temp_dir / "config.yaml"
        config_file.write_text("conversion: dict.txt\n", encoding="utf-8")
        with pytest.raises(ValueError, match="conversion"):
            config.load_config(config_path=str(config_file), base_dir=temp_dir)

    def test_blank_path_rejected(self, temp_dir: Path):
        config_file = temp_dir / "config.yaml"
        config_file.write_text("conversion:\n  input_path: '  '\n", encoding="utf-8")
        with pytest.raises(ValueError, match="input_path"):
            config.load_config(config_path=str(config_file), base_dir=temp_dir)

    def test_same_input_and_output_rejected(self, temp_dir: Path):
        with pytest.raises(ValueError, match="same file"):
            config.load_config(
                input_path="dict.txt", output_path="dict.txt", base_dir=temp_dir
            )
