"""The exported API functions for Word document conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/docx2md/api.py
import logging
from pathlib import Path
from typing import Optional, Union

from docx2md.model.nodes import Document
from docx2md.options.docx import DocxParserOptions
from docx2md.options.json import JsonRendererOptions
from docx2md.options.markdown import MarkdownRendererOptions
from docx2md.parsers.docx import DocxParser, DocxSource
from docx2md.renderers.json import JsonRenderer
from docx2md.renderers.markdown import MarkdownRenderer
from docx2md.utils.timing import debug_timer

logger = logging.getLogger(__name__)


def _describe_source(source: object) -> str:
    if isinstance(source, (str, Path)):
        return str(source)
    if isinstance(source, bytes):
        return f"<{len(source)} bytes>"
    return getattr(source, "name", None) or type(source).__name__


def load_document(source: DocxSource, options: Optional[DocxParserOptions] = None) -> Document:
    """Load a Word document into the docx2md model.

    Parameters
    ----------
    source : str, Path, IO[bytes], bytes or docx.document.Document
        File path, binary stream, raw bytes, or a document opened with
        python-docx
    options : DocxParserOptions, optional
        Parsing options

    Returns
    -------
    Document
        Loaded document with its style, numbering and image tables

    Raises
    ------
    FileNotFoundError
        If a path is given and does not exist
    MalformedFileError
        If the package cannot be opened or read

    """
    with debug_timer(logger, f"Loading {_describe_source(source)}"):
        return DocxParser(options).parse(source)


def _ensure_document(source: Union[DocxSource, Document], options: Optional[DocxParserOptions]) -> Document:
    if isinstance(source, Document):
        return source
    return load_document(source, options)


def to_markdown(
    source: Union[DocxSource, Document],
    options: Optional[DocxParserOptions] = None,
    renderer_options: Optional[MarkdownRendererOptions] = None,
) -> str:
    """Convert a Word document to Markdown.

    Parameters
    ----------
    source : str, Path, IO[bytes], bytes, docx.document.Document or Document
        Document to convert; an already loaded Document skips parsing
    options : DocxParserOptions, optional
        Parsing options
    renderer_options : MarkdownRendererOptions, optional
        Rendering options, including image export

    Returns
    -------
    str
        Markdown text

    Examples
    --------
        >>> markdown = to_markdown("report.docx")  # doctest: +SKIP

    Export images next to the output:

        >>> opts = MarkdownRendererOptions(export_images=True, image_output_dir="out")
        >>> markdown = to_markdown("report.docx", renderer_options=opts)  # doctest: +SKIP

    """
    doc = _ensure_document(source, options)
    with debug_timer(logger, "Rendering (markdown)"):
        return MarkdownRenderer(renderer_options).render_to_string(doc)


def to_json(
    source: Union[DocxSource, Document],
    options: Optional[DocxParserOptions] = None,
    renderer_options: Optional[JsonRendererOptions] = None,
) -> str:
    """Convert a Word document to a JSON dump of the document model.

    Parameters
    ----------
    source : str, Path, IO[bytes], bytes, docx.document.Document or Document
        Document to convert; an already loaded Document skips parsing
    options : DocxParserOptions, optional
        Parsing options
    renderer_options : JsonRendererOptions, optional
        Indentation and image encoding

    Returns
    -------
    str
        JSON text

    """
    doc = _ensure_document(source, options)
    with debug_timer(logger, "Rendering (json)"):
        return JsonRenderer(renderer_options).render_to_string(doc)


__all__ = ["load_document", "to_json", "to_markdown"]
