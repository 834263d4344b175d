"""docx2md - convert Word documents to Markdown.

docx2md loads a DOCX package into a small document model (paragraphs,
tables, named styles, list definitions and embedded images) and renders
it to Markdown or to JSON.

Key Features
------------
- Style cascade across named styles, paragraph and run formatting
- Adjacent runs with identical formatting merged into one span
- Numbered, lettered and bulleted lists with per-list counters
- Padded pipe tables with a synthesized header row when needed
- Embedded images exported next to the Markdown output

Examples
--------
Basic conversion:

    >>> from docx2md import to_markdown
    >>> markdown = to_markdown("report.docx")

Working with the model:

    >>> from docx2md import load_document
    >>> doc = load_document("report.docx")
    >>> doc.metadata.title
    'Quarterly Report'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "0.1.0"

from docx2md.api import load_document, to_json, to_markdown
from docx2md.exceptions import (
    DependencyError,
    Docx2MdError,
    FileError,
    MalformedFileError,
    OutputWriteError,
    RenderingError,
    ValidationError,
)
from docx2md.model import Document, DocumentMetadata
from docx2md.options import DocxParserOptions, JsonRendererOptions, MarkdownRendererOptions

__all__ = [
    "__version__",
    "load_document",
    "to_json",
    "to_markdown",
    "Document",
    "DocumentMetadata",
    "DocxParserOptions",
    "JsonRendererOptions",
    "MarkdownRendererOptions",
    "DependencyError",
    "Docx2MdError",
    "FileError",
    "MalformedFileError",
    "OutputWriteError",
    "RenderingError",
    "ValidationError",
]
