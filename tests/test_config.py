"""Tests for TOML config file loading."""

from __future__ import annotations

from pathlib import Path

from psscan.cli import build_parser, load_config, main, resolve_options


class TestLoadConfig:
    def test_missing_config_returns_empty(self, tmp_path: Path) -> None:
        assert load_config(None, tmp_path) == {}

    def test_explicit_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text("[output]\nwidth = 60\n")
        result = load_config(cfg, tmp_path)
        assert result["output"] == {"width": 60}

    def test_auto_discover_psmin_toml(self, tmp_path: Path) -> None:
        cfg = tmp_path / "psmin.toml"
        cfg.write_text("[output]\nwidth = 72\n")
        result = load_config(None, tmp_path)
        assert result["output"] == {"width": 72}


class TestConfigMerge:
    def test_default_width(self, tmp_path: Path) -> None:
        doc = tmp_path / "doc.ps"
        doc.write_text("")
        opts = resolve_options(build_parser().parse_args([str(doc)]))
        assert opts.width == 0
        assert opts.input_files == [str(doc)]

    def test_stdin_when_no_inputs(self) -> None:
        opts = resolve_options(build_parser().parse_args([]))
        assert opts.input_files == ["-"]

    def test_config_width_merged(self, tmp_path: Path) -> None:
        (tmp_path / "psmin.toml").write_text("[output]\nwidth = 72\n")
        doc = tmp_path / "doc.ps"
        doc.write_text("")
        opts = resolve_options(build_parser().parse_args([str(doc)]))
        assert opts.width == 72

    def test_cli_overrides_config_width(self, tmp_path: Path) -> None:
        (tmp_path / "psmin.toml").write_text("[output]\nwidth = 72\n")
        doc = tmp_path / "doc.ps"
        doc.write_text("")
        opts = resolve_options(build_parser().parse_args([str(doc), "-w", "40"]))
        assert opts.width == 40

    def test_explicit_config_flag(self, tmp_path: Path) -> None:
        cfg = tmp_path / "alt.toml"
        cfg.write_text("[output]\nwidth = 33\n")
        doc = tmp_path / "doc.ps"
        doc.write_text("")
        opts = resolve_options(build_parser().parse_args([str(doc), "--config", str(cfg)]))
        assert opts.width == 33

    def test_bad_toml_returns_2(self, tmp_path: Path) -> None:
        (tmp_path / "psmin.toml").write_text("[output\n")
        doc = tmp_path / "doc.ps"
        doc.write_text("")
        assert main([str(doc)]) == 2
