#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/cli/test_env_actions.py
"""Unit tests for environment-aware argparse actions and argument helpers."""

import argparse

import pytest

from docx2md.cli import build_renderer, create_parser, resolve_format, resolve_input_path
from docx2md.cli.custom_actions import (
    EnvStoreAction,
    EnvStoreFalseAction,
    EnvStoreTrueAction,
    env_flag,
    env_key_for,
)
from docx2md.renderers.json import JsonRenderer
from docx2md.renderers.markdown import MarkdownRenderer


@pytest.mark.unit
@pytest.mark.cli
class TestEnvActions:
    """Tests for the Env* actions."""

    def test_env_key(self) -> None:
        """Destinations map to prefixed upper-case variable names."""
        assert env_key_for("image-dir") == "DOCX2MD_IMAGE_DIR"
        assert env_key_for("log.level") == "DOCX2MD_LOG_LEVEL"

    @pytest.mark.parametrize("value,expected", [("true", True), ("1", True), ("YES", True), ("no", False)])
    def test_env_flag(self, monkeypatch: pytest.MonkeyPatch, value: str, expected: bool) -> None:
        """Boolean environment values are parsed leniently."""
        monkeypatch.setenv("DOCX2MD_RICH", value)

        assert env_flag("rich") is expected

    def test_env_flag_unset(self) -> None:
        """An unset variable gives None."""
        assert env_flag("rich") is None

    def test_store_default_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The environment supplies the default; the command line wins."""
        monkeypatch.setenv("DOCX2MD_FORMAT", "json")
        parser = argparse.ArgumentParser()
        parser.add_argument("--format", action=EnvStoreAction, default="md")

        assert parser.parse_args([]).format == "json"
        assert parser.parse_args(["--format", "md"]).format == "md"

    def test_store_env_uses_type(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment values pass through the argument type."""
        monkeypatch.setenv("DOCX2MD_INDENT", "4")
        parser = argparse.ArgumentParser()
        parser.add_argument("--indent", action=EnvStoreAction, type=int)

        assert parser.parse_args([]).indent == 4

    def test_store_true(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """store_true defaults can be switched on by the environment."""
        parser = argparse.ArgumentParser()
        parser.add_argument("--rich", action=EnvStoreTrueAction)
        assert parser.parse_args([]).rich is False
        assert parser.parse_args(["--rich"]).rich is True

        monkeypatch.setenv("DOCX2MD_RICH", "true")
        parser = argparse.ArgumentParser()
        parser.add_argument("--rich", action=EnvStoreTrueAction)
        assert parser.parse_args([]).rich is True

    def test_store_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The environment holds the destination value for store_false options."""
        parser = argparse.ArgumentParser()
        parser.add_argument("--no-export-images", dest="export_images", action=EnvStoreFalseAction)
        assert parser.parse_args([]).export_images is True
        assert parser.parse_args(["--no-export-images"]).export_images is False

        monkeypatch.setenv("DOCX2MD_EXPORT_IMAGES", "false")
        parser = argparse.ArgumentParser()
        parser.add_argument("--no-export-images", dest="export_images", action=EnvStoreFalseAction)
        assert parser.parse_args([]).export_images is False


@pytest.mark.unit
@pytest.mark.cli
class TestArgumentHelpers:
    """Tests for input, format and renderer resolution."""

    @pytest.mark.parametrize(
        "raw,expected",
        [("report", "report.docx"), (" report.docx ", "report.docx"), ("Report.DOCX", "Report.DOCX")],
    )
    def test_resolve_input_path(self, raw: str, expected: str) -> None:
        """The .docx extension is appended when missing."""
        assert resolve_input_path(raw).name == expected

    @pytest.mark.parametrize(
        "raw,expected",
        [("md", "md"), ("JSON", "json"), (" pretty_json ", "pretty_json"), (None, "md")],
    )
    def test_resolve_format(self, raw: str | None, expected: str) -> None:
        """Known formats are normalized."""
        assert resolve_format(raw) == expected

    def test_unknown_format_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        """Unknown formats warn and fall back to Markdown."""
        assert resolve_format("html") == "md"
        assert "Unsupported format: html" in caplog.text

    def test_build_renderer(self, temp_dir) -> None:
        """Renderers are configured from the parsed arguments."""
        parser = create_parser()

        json_renderer = build_renderer("pretty_json", parser.parse_args(["in.docx"]))
        assert isinstance(json_renderer, JsonRenderer)
        assert json_renderer.options.indent == 2

        md_renderer = build_renderer("md", parser.parse_args(["in.docx", "-o", str(temp_dir / "out.md")]))
        assert isinstance(md_renderer, MarkdownRenderer)
        assert md_renderer.options.export_images is True
        assert md_renderer.options.image_output_dir == str(temp_dir)

    def test_image_dir_overrides_output_parent(self) -> None:
        """--image-dir wins over the output file's directory."""
        args = create_parser().parse_args(["in.docx", "-o", "out/doc.md", "--image-dir", "assets", "--no-export-images"])

        renderer = build_renderer("md", args)

        assert renderer.options.image_output_dir == "assets"
        assert renderer.options.export_images is False

    def test_defaults(self) -> None:
        """Parser defaults without environment variables."""
        args = create_parser().parse_args(["in.docx"])

        assert args.format == "md"
        assert args.output is None
        assert args.log_level == "WARNING"
        assert args.rich is False
        assert args.trace is False

    def test_log_level_case_insensitive(self) -> None:
        """Log levels are upper-cased before validation."""
        assert create_parser().parse_args(["in.docx", "--log-level", "debug"]).log_level == "DEBUG"
