#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docx2md/renderers/base.py
"""Base class for document renderers.

A renderer turns a loaded :class:`~docx2md.model.Document` into text. Every
renderer produces a string; writing to a file or stream is shared here.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from docx2md.exceptions import InvalidOptionsError
from docx2md.model.nodes import Document
from docx2md.options.base import BaseRendererOptions
from docx2md.utils.io_utils import write_text


class BaseRenderer(ABC):
    """Abstract base class for text renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
        >>> class PlainRenderer(BaseRenderer):
        ...     def render_to_string(self, doc):
        ...         return "rendered output"

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the document to a string.

        Parameters
        ----------
        doc : Document
            Loaded document

        Returns
        -------
        str
            Rendered text

        Raises
        ------
        RenderingError
            If the document contains content the renderer cannot handle

        """

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the document and write it to a path or stream.

        Parameters
        ----------
        doc : Document
            Loaded document
        output : str, Path, IO[bytes] or IO[str]
            Destination

        Raises
        ------
        OutputWriteError
            If the destination path cannot be written

        """
        write_text(self.render_to_string(doc), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
