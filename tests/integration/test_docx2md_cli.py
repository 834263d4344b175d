#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_docx2md_cli.py
"""Integration tests for the docx2md command-line interface.

The CLI is driven through ``main()`` with explicit argument lists, and
output is captured with pytest's ``capsys``.
"""

import json
from pathlib import Path

import pytest
from utils import add_picture_paragraph, new_document, save_document

from docx2md.cli import main
from docx2md.constants import EXIT_CONVERSION_ERROR, EXIT_OUTPUT_ERROR, EXIT_SUCCESS, EXIT_VALIDATION_ERROR


def _write_sample(path: Path, with_image: bool = False) -> Path:
    doc = new_document(title="Sample")
    doc.add_paragraph("Body text")
    if with_image:
        add_picture_paragraph(doc, alt="dot")
    return save_document(doc, path)


@pytest.mark.integration
@pytest.mark.cli
class TestCliConversion:
    """Tests for successful conversions."""

    def test_markdown_to_stdout(self, chdir_temp: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Markdown is printed to standard output by default."""
        _write_sample(chdir_temp / "sample.docx")

        exit_code = main(["sample.docx"])

        assert exit_code == EXIT_SUCCESS
        assert capsys.readouterr().out == "# Sample\n\nBody text\n"

    def test_extension_appended(self, chdir_temp: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """The input may be given without its .docx extension."""
        _write_sample(chdir_temp / "sample.docx")

        assert main(["sample"]) == EXIT_SUCCESS
        assert "Body text" in capsys.readouterr().out

    def test_json_output(self, chdir_temp: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """-f json prints the model as compact JSON."""
        _write_sample(chdir_temp / "sample.docx")

        assert main(["sample.docx", "-f", "json"]) == EXIT_SUCCESS

        out = capsys.readouterr().out
        assert out.count("\n") == 1
        assert json.loads(out)["metadata"]["title"] == "Sample"

    def test_pretty_json_output(self, chdir_temp: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """-f pretty_json indents the JSON."""
        _write_sample(chdir_temp / "sample.docx")

        assert main(["sample.docx", "-f", "pretty_json"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.startswith("{\n  ")

    def test_unknown_format_falls_back(self, chdir_temp: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Unknown formats fall back to Markdown with a warning."""
        _write_sample(chdir_temp / "sample.docx")

        assert main(["sample.docx", "-f", "html"]) == EXIT_SUCCESS

        captured = capsys.readouterr()
        assert captured.out.startswith("# Sample")
        assert "Unsupported format" in captured.err

    def test_format_from_environment(
        self, chdir_temp: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """DOCX2MD_FORMAT sets the default format."""
        _write_sample(chdir_temp / "sample.docx")
        monkeypatch.setenv("DOCX2MD_FORMAT", "json")

        assert main(["sample.docx"]) == EXIT_SUCCESS
        assert json.loads(capsys.readouterr().out)["node_type"] == "Document"

    def test_output_file_and_images(self, temp_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """-o writes the file and exports images next to it."""
        source = _write_sample(temp_dir / "sample.docx", with_image=True)
        out_dir = temp_dir / "out"
        out_dir.mkdir()

        assert main([str(source), "-o", str(out_dir / "sample.md")]) == EXIT_SUCCESS

        markdown = (out_dir / "sample.md").read_text(encoding="utf-8")
        assert "![dot](./media/" in markdown
        assert any((out_dir / "media").iterdir())
        assert capsys.readouterr().out == ""

    def test_no_export_images(self, temp_dir: Path) -> None:
        """--no-export-images leaves only the Markdown file."""
        source = _write_sample(temp_dir / "sample.docx", with_image=True)
        out_dir = temp_dir / "out"
        out_dir.mkdir()

        assert main([str(source), "-o", str(out_dir / "sample.md"), "--no-export-images"]) == EXIT_SUCCESS
        assert [p.name for p in out_dir.iterdir()] == ["sample.md"]

    def test_image_dir(self, temp_dir: Path) -> None:
        """--image-dir chooses where images are written."""
        source = _write_sample(temp_dir / "sample.docx", with_image=True)
        assets = temp_dir / "assets"

        assert main([str(source), "-o", str(temp_dir / "sample.md"), "--image-dir", str(assets)]) == EXIT_SUCCESS
        assert any((assets / "media").iterdir())

    def test_rich_output(self, chdir_temp: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--rich renders Markdown through Rich when it is installed."""
        pytest.importorskip("rich")
        _write_sample(chdir_temp / "sample.docx")

        assert main(["sample.docx", "--rich"]) == EXIT_SUCCESS
        assert "Body text" in capsys.readouterr().out

    def test_log_file(self, chdir_temp: Path) -> None:
        """--log-file receives log messages."""
        _write_sample(chdir_temp / "sample.docx")

        assert main(["sample.docx", "--log-level", "info", "--log-file", "run.log"]) == EXIT_SUCCESS
        assert "Processing file: sample.docx" in (chdir_temp / "run.log").read_text(encoding="utf-8")


@pytest.mark.integration
@pytest.mark.cli
class TestCliErrors:
    """Tests for failure exit codes."""

    def test_missing_input(self, chdir_temp: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A missing input exits with the validation error code."""
        assert main(["missing"]) == EXIT_VALIDATION_ERROR
        assert "missing.docx" in capsys.readouterr().err

    def test_malformed_input(self, chdir_temp: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A file that is not a Word package exits with the conversion error code."""
        (chdir_temp / "broken.docx").write_bytes(b"not a zip file")

        assert main(["broken.docx"]) == EXIT_CONVERSION_ERROR
        assert "Error:" in capsys.readouterr().err

    def test_unwritable_output(self, temp_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """An output path in a missing directory exits with the output error code."""
        source = _write_sample(temp_dir / "sample.docx")

        exit_code = main([str(source), "-o", str(temp_dir / "missing" / "out.md"), "--no-export-images"])

        assert exit_code == EXIT_OUTPUT_ERROR
        assert "Error:" in capsys.readouterr().err

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--version prints the version and exits."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        assert "docx2md" in capsys.readouterr().out
