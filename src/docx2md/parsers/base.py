#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docx2md/parsers/base.py
"""Base class for document parsers.

A parser reads a source document and produces the docx2md model
(:class:`~docx2md.model.Document`), with its style and numbering
registries built and its media collected.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Union

from docx2md.exceptions import InvalidOptionsError
from docx2md.model.nodes import Document
from docx2md.options.base import BaseParserOptions


class BaseParser(ABC):
    """Abstract base class for document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    The parse() method should handle these input types:
    - str or Path: File path to read
    - IO[bytes]: File-like object in binary mode
    - bytes: Raw document bytes

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: Union[str, Path, IO[bytes], bytes, Any]) -> Document:
        """Parse the input into a Document.

        Raises
        ------
        FileNotFoundError
            If a path is given and does not exist
        MalformedFileError
            If the input cannot be read as a document

        """
