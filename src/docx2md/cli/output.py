"""Terminal output helpers for the command-line interface."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/docx2md/cli/output.py
import sys
from typing import IO, Optional

from docx2md.exceptions import DependencyError


def print_rich_markdown(markdown_content: str, stream: Optional[IO[str]] = None) -> None:
    """Render Markdown to the terminal with Rich.

    Parameters
    ----------
    markdown_content : str
        Markdown text to display
    stream : IO[str], optional
        Target stream; standard output when None

    Raises
    ------
    DependencyError
        If the optional ``rich`` package is not installed

    """
    try:
        from rich.console import Console
        from rich.markdown import Markdown
    except ImportError as e:
        raise DependencyError("Rich output", "rich", original_import_error=e) from e

    console = Console(file=stream or sys.stdout)
    console.print(Markdown(markdown_content))


def print_plain(content: str, stream: Optional[IO[str]] = None) -> None:
    """Write content to a text stream, ending with a newline."""
    target = stream or sys.stdout
    target.write(content)
    if not content.endswith("\n"):
        target.write("\n")
