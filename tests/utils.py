"""Test utilities for the docx2md test suite.

This module provides builders for small Word documents made with
python-docx, plus raw WordprocessingML helpers for the features
python-docx has no writing API for (numbering definitions, hyperlinks,
bookmarks, outline levels, header rows).
"""

import base64
import shutil
import tempfile
from io import BytesIO
from pathlib import Path
from typing import Optional

import docx
from docx.opc.constants import RELATIONSHIP_TYPE as RT
from docx.oxml import OxmlElement
from docx.oxml.ns import qn

# Base64 encoded 1x1 pixel PNG for testing
MINIMAL_PNG_B64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mP8/w8AAn8B9FpQHLwAAAAASUVORK5CYII="
MINIMAL_PNG_BYTES = base64.b64decode(MINIMAL_PNG_B64)


def new_document(title: Optional[str] = None):
    """Create an empty python-docx document with a known title.

    The default template's core properties are reset so that metadata
    assertions do not depend on the template.
    """
    doc = docx.Document()
    props = doc.core_properties
    props.title = title or ""
    props.author = ""
    props.last_modified_by = ""
    props.comments = ""
    props.subject = ""
    props.keywords = ""
    return doc


def to_bytes(doc) -> bytes:
    """Save a python-docx document to bytes."""
    buffer = BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


def save_document(doc, path: Path) -> Path:
    """Save a python-docx document and return its path."""
    doc.save(str(path))
    return path


def _val_element(tag: str, value: Optional[str] = None):
    element = OxmlElement(tag)
    if value is not None:
        element.set(qn("w:val"), value)
    return element


def set_outline_level(paragraph, level: int) -> None:
    """Give a paragraph a direct outline level (renders as a heading)."""
    paragraph._p.get_or_add_pPr().append(_val_element("w:outlineLvl", str(level)))


def set_numbering(paragraph, num_id: int, ilvl: Optional[int] = 0) -> None:
    """Attach a paragraph to list ``num_id`` at level ``ilvl``."""
    num_pr = OxmlElement("w:numPr")
    if ilvl is not None:
        num_pr.append(_val_element("w:ilvl", str(ilvl)))
    num_pr.append(_val_element("w:numId", str(num_id)))
    paragraph._p.get_or_add_pPr().append(num_pr)


def set_paragraph_run_properties(paragraph, *flags: str) -> None:
    """Add a paragraph-level ``w:pPr/w:rPr`` with the given flag elements (e.g. ``"w:b"``)."""
    r_pr = OxmlElement("w:rPr")
    for flag in flags:
        r_pr.append(OxmlElement(flag))
    paragraph._p.get_or_add_pPr().append(r_pr)


def add_numbering_definition(doc, num_id: int, num_format: str, level_text: str = "%1.") -> None:
    """Register a single-level list definition in the document's numbering part.

    Abstract and instance ids are offset from the template's own definitions.
    """
    numbering = doc.part.numbering_part.element
    abstract_id = str(1000 + num_id)

    abstract = OxmlElement("w:abstractNum")
    abstract.set(qn("w:abstractNumId"), abstract_id)
    lvl = OxmlElement("w:lvl")
    lvl.set(qn("w:ilvl"), "0")
    lvl.append(_val_element("w:start", "1"))
    lvl.append(_val_element("w:numFmt", num_format))
    lvl.append(_val_element("w:lvlText", level_text))
    abstract.append(lvl)

    num = OxmlElement("w:num")
    num.set(qn("w:numId"), str(num_id))
    num.append(_val_element("w:abstractNumId", abstract_id))

    first_num = numbering.find(qn("w:num"))
    if first_num is not None:
        first_num.addprevious(abstract)
    else:
        numbering.append(abstract)
    numbering.append(num)


def add_hyperlink(paragraph, label: str, url: Optional[str] = None, anchor: Optional[str] = None) -> None:
    """Append a hyperlink to an external URL or to an internal bookmark anchor."""
    hyperlink = OxmlElement("w:hyperlink")
    if anchor is not None:
        hyperlink.set(qn("w:anchor"), anchor)
    if url is not None:
        r_id = paragraph.part.relate_to(url, RT.HYPERLINK, is_external=True)
        hyperlink.set(qn("r:id"), r_id)
    run = OxmlElement("w:r")
    text = OxmlElement("w:t")
    text.text = label
    run.append(text)
    hyperlink.append(run)
    paragraph._p.append(hyperlink)


def add_bookmark(paragraph, name: str, bookmark_id: int = 0) -> None:
    """Append a bookmark start/end pair to a paragraph."""
    start = OxmlElement("w:bookmarkStart")
    start.set(qn("w:id"), str(bookmark_id))
    start.set(qn("w:name"), name)
    end = OxmlElement("w:bookmarkEnd")
    end.set(qn("w:id"), str(bookmark_id))
    paragraph._p.append(start)
    paragraph._p.append(end)


def add_picture_paragraph(doc, alt: Optional[str] = None):
    """Add a paragraph holding an inline PNG, optionally with alt text."""
    doc.add_picture(BytesIO(MINIMAL_PNG_BYTES))
    paragraph = doc.paragraphs[-1]
    if alt is not None:
        doc_pr = paragraph._p.find(f".//{qn('wp:docPr')}")
        doc_pr.set("descr", alt)
    return paragraph


def mark_header_row(table, row_index: int = 0) -> None:
    """Flag a table row as a repeating header row."""
    tr_pr = table.rows[row_index]._tr.get_or_add_trPr()
    tr_pr.append(OxmlElement("w:tblHeader"))


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)
