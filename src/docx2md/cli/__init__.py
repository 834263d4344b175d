"""Command-line interface for docx2md.

Convert a Word document to Markdown or to a JSON dump of the document
model. Output goes to standard output unless ``--output`` is given.

Environment Variable Support
----------------------------
Options accept defaults from DOCX2MD_<OPTION_NAME> environment variables
(upper case, hyphens replaced by underscores). CLI arguments always
override environment variables.

Examples
--------
Print Markdown to the console::

    $ docx2md report.docx

Write Markdown next to its images::

    $ docx2md report.docx -o out/report.md

Dump the document model as indented JSON::

    $ docx2md report -f pretty_json

Use environment variables for defaults::

    $ export DOCX2MD_FORMAT=json
    $ export DOCX2MD_EXPORT_IMAGES=false
    $ docx2md report.docx

Exit Codes
----------
0 on success, 1 when the document cannot be converted, 2 when the input is
missing or invalid, 3 when the output cannot be written.

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from docx2md.api import load_document
from docx2md.cli.custom_actions import EnvStoreAction, EnvStoreFalseAction, EnvStoreTrueAction
from docx2md.cli.output import print_plain, print_rich_markdown
from docx2md.constants import (
    DEFAULT_PRETTY_JSON_INDENT,
    EXIT_CONVERSION_ERROR,
    EXIT_OUTPUT_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    OutputFormat,
)
from docx2md.exceptions import (
    DependencyError,
    Docx2MdError,
    FileNotFoundError,
    MalformedFileError,
    OutputWriteError,
)
from docx2md.logging_utils import configure_logging
from docx2md.options.json import JsonRendererOptions
from docx2md.options.markdown import MarkdownRendererOptions
from docx2md.renderers.base import BaseRenderer
from docx2md.renderers.json import JsonRenderer
from docx2md.renderers.markdown import MarkdownRenderer
from docx2md.utils.io_utils import write_text

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS: tuple[OutputFormat, ...] = ("md", "json", "pretty_json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    from docx2md import __version__

    parser = argparse.ArgumentParser(
        prog="docx2md",
        description="Convert a Word (DOCX) document to Markdown or JSON.",
    )
    parser.add_argument("input", help="Input DOCX file (the .docx extension may be omitted)")
    parser.add_argument(
        "-o",
        "--output",
        action=EnvStoreAction,
        help="Write output to this file instead of the console",
    )
    parser.add_argument(
        "-f",
        "--format",
        action=EnvStoreAction,
        default="md",
        help="Output format: md (default), json or pretty_json. Unknown values fall back to md.",
    )
    parser.add_argument(
        "--no-export-images",
        dest="export_images",
        action=EnvStoreFalseAction,
        help="Do not write embedded images to disk (Markdown output only)",
    )
    parser.add_argument(
        "--image-dir",
        action=EnvStoreAction,
        help="Directory to export images into (default: the output file's directory, or the current directory)",
    )
    parser.add_argument(
        "--rich",
        action=EnvStoreTrueAction,
        help="Render Markdown output in the terminal with Rich",
    )
    parser.add_argument(
        "--log-level",
        action=EnvStoreAction,
        default="WARNING",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", action=EnvStoreAction, help="Also write log messages to this file")
    parser.add_argument(
        "--trace",
        action=EnvStoreTrueAction,
        help="Debug logging with timestamps and module names",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging from the parsed arguments; --trace overrides --log-level."""
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level)
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def resolve_input_path(raw_input: str) -> Path:
    """Normalize the input argument, appending ``.docx`` when it is missing.

    Examples
    --------
        >>> resolve_input_path(" report ").name
        'report.docx'
        >>> resolve_input_path("Report.DOCX").name
        'Report.DOCX'

    """
    input_file = raw_input.strip()
    if not input_file.lower().endswith(".docx"):
        input_file = f"{input_file}.docx"
    return Path(input_file)


def resolve_format(raw_format: Optional[str]) -> OutputFormat:
    """Return a supported output format, falling back to Markdown."""
    if raw_format is None:
        return "md"
    normalized = raw_format.strip().lower()
    for supported in SUPPORTED_FORMATS:
        if normalized == supported:
            return supported
    logger.warning(f"Unsupported format: {raw_format}. Supported formats are md, json and pretty_json; using md.")
    return "md"


def build_renderer(output_format: OutputFormat, parsed_args: argparse.Namespace) -> BaseRenderer:
    """Create the renderer for an output format from the parsed arguments."""
    if output_format == "json":
        return JsonRenderer(JsonRendererOptions())
    if output_format == "pretty_json":
        return JsonRenderer(JsonRendererOptions(indent=DEFAULT_PRETTY_JSON_INDENT))

    image_dir = parsed_args.image_dir
    if image_dir is None and parsed_args.output:
        image_dir = str(Path(parsed_args.output).parent)
    return MarkdownRenderer(
        MarkdownRendererOptions(export_images=parsed_args.export_images, image_output_dir=image_dir)
    )


def main(args: list[str] | None = None) -> int:
    """Execute the docx2md command.

    Parameters
    ----------
    args : list of str, optional
        Command-line arguments; ``sys.argv[1:]`` when None

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    _setup_logging_level(parsed_args)

    input_path = resolve_input_path(parsed_args.input)
    if not input_path.is_file():
        print(f"Error: Input file does not exist or cannot be read: {input_path}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    output_format = resolve_format(parsed_args.format)
    logger.info(f"Processing file: {input_path}")
    logger.info(f"Output destination: {parsed_args.output or 'console'}")
    logger.info(f"Output format: {output_format}")

    try:
        doc = load_document(input_path)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except MalformedFileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONVERSION_ERROR

    try:
        result = build_renderer(output_format, parsed_args).render_to_string(doc)
    except OutputWriteError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_OUTPUT_ERROR
    except Docx2MdError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONVERSION_ERROR

    if parsed_args.output:
        try:
            write_text(result, parsed_args.output)
        except OutputWriteError as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_OUTPUT_ERROR
        logger.info(f"Wrote {output_format} output to {parsed_args.output}")
        return EXIT_SUCCESS

    if parsed_args.rich and output_format == "md":
        try:
            print_rich_markdown(result)
        except DependencyError as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_CONVERSION_ERROR
        return EXIT_SUCCESS

    print_plain(result)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
