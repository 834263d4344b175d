#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docx2md/parsers/docx.py
"""DOCX to document model loader.

This module reads a Word package with python-docx and builds the docx2md
model. Formatting is read straight from the WordprocessingML elements
rather than through python-docx's proxy objects, because the renderer needs
to know which properties are *set* on each layer (named style, paragraph,
run) and not only their effective values.

"""

from __future__ import annotations

import logging
from dataclasses import replace
from io import BytesIO
from pathlib import Path
from typing import IO, Any, Mapping, Optional, Union

import docx
from docx.document import Document as DocxDocument
from docx.opc.constants import RELATIONSHIP_TYPE as RT
from docx.oxml.ns import qn
from lxml import etree

from docx2md.constants import APP_PROPERTIES_PARTNAME, EXTENDED_PROPERTIES_NS, OFF_VALUES
from docx2md.exceptions import FileNotFoundError, MalformedFileError
from docx2md.model.coalesce import RunCoalescer
from docx2md.model.nodes import (
    Document,
    DocumentMetadata,
    InlineStyle,
    NumberingDefinition,
    NumberingRef,
    Paragraph,
    ParagraphStyle,
    Table,
    TableRow,
)
from docx2md.model.styles import StyleRegistry
from docx2md.options.docx import DocxParserOptions
from docx2md.parsers.base import BaseParser

logger = logging.getLogger(__name__)

DocxSource = Union[str, Path, IO[bytes], bytes, DocxDocument]


def _is_on(element: Any) -> bool:
    """Evaluate a WordprocessingML on/off property element."""
    value = element.get(qn("w:val"))
    return value is None or value.lower() not in OFF_VALUES


def _has_flag(parent: Any, *tags: str) -> bool:
    for tag in tags:
        element = parent.find(qn(tag))
        if element is not None and _is_on(element):
            return True
    return False


def _child_val(parent: Any, tag: str) -> Optional[str]:
    element = parent.find(qn(tag))
    if element is None:
        return None
    return element.get(qn("w:val"))


def _child_int(parent: Any, tag: str) -> Optional[int]:
    value = _child_val(parent, tag)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        logger.debug(f"Ignoring non-integer {tag} value: {value!r}")
        return None


def _none_if_empty(value: Optional[str]) -> Optional[str]:
    return value if value else None


def parse_inline_style(r_pr: Any) -> InlineStyle:
    """Build an InlineStyle from a ``w:rPr`` element.

    A flag is on when its element is present, unless ``w:val`` switches it
    off (``0``, ``false``, ``off`` or ``none``).

    """
    return InlineStyle(
        bold=_has_flag(r_pr, "w:b"),
        italic=_has_flag(r_pr, "w:i", "w:em"),
        underline=_has_flag(r_pr, "w:u"),
        strike=_has_flag(r_pr, "w:strike", "w:dstrike"),
        size=_child_int(r_pr, "w:sz"),
    )


def parse_paragraph_style(p_pr: Any) -> ParagraphStyle:
    """Build a ParagraphStyle from a ``w:pPr`` element.

    ``w:numId`` 0 means numbering was removed from the paragraph; it yields a
    reference without a list id, which overrides a style's numbering.

    """
    numbering = None
    num_pr = p_pr.find(qn("w:numPr"))
    if num_pr is not None:
        list_id = _child_int(num_pr, "w:numId")
        numbering = NumberingRef(
            list_id=list_id if list_id else None,
            indent_level=_child_int(num_pr, "w:ilvl"),
        )

    page_break = p_pr.find(qn("w:pageBreakBefore"))
    r_pr = p_pr.find(qn("w:rPr"))

    return ParagraphStyle(
        style_id=_child_val(p_pr, "w:pStyle"),
        outline_level=_child_int(p_pr, "w:outlineLvl"),
        numbering=numbering,
        page_break_before=_is_on(page_break) if page_break is not None else None,
        inline=parse_inline_style(r_pr) if r_pr is not None else None,
    )


class DocxParser(BaseParser):
    """Load a DOCX package into the docx2md document model.

    Parameters
    ----------
    options : DocxParserOptions or None, default = None
        Parsing options

    Examples
    --------
        >>> parser = DocxParser()
        >>> doc = parser.parse("report.docx")  # doctest: +SKIP
        >>> doc.metadata.title  # doctest: +SKIP
        'Quarterly Report'

    """

    def __init__(self, options: DocxParserOptions | None = None):
        """Initialize the DOCX parser with options."""
        BaseParser._validate_options_type(options, DocxParserOptions, "docx")
        options = options or DocxParserOptions()
        super().__init__(options)
        self.options: DocxParserOptions = options

        # Relationships of the main document part, set while converting
        self._rels: Mapping[str, Any] = {}

    def parse(self, input_data: DocxSource) -> Document:
        """Parse a DOCX document.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], bytes or docx.document.Document
            Path to a ``.docx`` file, its raw bytes, a binary stream, or a
            document already opened with python-docx

        Returns
        -------
        Document
            Loaded document

        Raises
        ------
        FileNotFoundError
            If a path is given and does not exist
        MalformedFileError
            If the package cannot be opened or read

        """
        if isinstance(input_data, (str, Path)) and not Path(input_data).exists():
            raise FileNotFoundError(str(input_data))

        try:
            if isinstance(input_data, DocxDocument):
                doc = input_data
            elif isinstance(input_data, Path):
                doc = docx.Document(str(input_data))
            elif isinstance(input_data, bytes):
                doc = docx.Document(BytesIO(input_data))
            else:
                doc = docx.Document(input_data)
        except Exception as e:
            raise MalformedFileError(
                f"Failed to open DOCX document: {str(e)}",
                file_path=str(input_data) if isinstance(input_data, (str, Path)) else None,
                original_error=e,
            ) from e

        try:
            return self.convert(doc)
        except (etree.LxmlError, KeyError) as e:
            raise MalformedFileError(
                f"Failed to read DOCX document structure: {str(e)}",
                file_path=str(input_data) if isinstance(input_data, (str, Path)) else None,
                original_error=e,
            ) from e

    def convert(self, doc: DocxDocument) -> Document:
        """Build the document model from an opened python-docx document.

        Lookup tables (named styles, numbering definitions, media) are built
        first, then the body is walked in document order.

        """
        self._rels = doc.part.rels

        result = Document(
            metadata=self.extract_metadata(doc) if self.options.extract_metadata else DocumentMetadata(),
            styles=StyleRegistry(self._load_styles()),
            numberings=self._load_numberings(),
            images=self._load_images() if self.options.include_images else {},
        )

        dropped = 0
        for child in doc.element.body.iterchildren():
            if child.tag == qn("w:p"):
                if not result.add_paragraph(self._parse_paragraph(child)):
                    dropped += 1
            elif child.tag == qn("w:tbl"):
                result.content.append(self._parse_table(child))
            # w:sdt, w:sectPr and anything else are not part of the model

        logger.debug(
            f"Loaded {len(result.content)} body items ({dropped} empty paragraphs dropped), "
            f"{len(result.styles)} styles, {len(result.numberings)} numberings, {len(result.images)} images"
        )
        return result

    def extract_metadata(self, doc: DocxDocument) -> DocumentMetadata:
        """Extract core and extended document properties.

        Parameters
        ----------
        doc : docx.document.Document
            python-docx Document object

        Returns
        -------
        DocumentMetadata
            Properties with empty values mapped to None

        """
        props = doc.core_properties
        return DocumentMetadata(
            creator=_none_if_empty(props.author),
            last_editor=_none_if_empty(props.last_modified_by),
            company=self._load_company(doc),
            title=_none_if_empty(props.title),
            description=_none_if_empty(props.comments),
            subject=_none_if_empty(props.subject),
            keywords=_none_if_empty(props.keywords),
        )

    @staticmethod
    def _load_company(doc: DocxDocument) -> Optional[str]:
        for part in doc.part.package.iter_parts():
            if part.partname != APP_PROPERTIES_PARTNAME:
                continue
            try:
                root = etree.fromstring(part.blob)
            except etree.XMLSyntaxError as e:
                logger.warning(f"Could not parse {APP_PROPERTIES_PARTNAME}: {e}")
                return None
            company = root.find(f"{{{EXTENDED_PROPERTIES_NS}}}Company")
            return _none_if_empty(company.text if company is not None else None)
        return None

    def _related_element(self, reltype: str) -> Any | None:
        """Return the XML root of the part related to the main part by ``reltype``."""
        for rel in self._rels.values():
            if rel.reltype == reltype and not rel.is_external:
                return rel.target_part.element
        return None

    def _load_styles(self) -> dict[str, ParagraphStyle]:
        styles: dict[str, ParagraphStyle] = {}
        root = self._related_element(RT.STYLES)
        if root is None:
            return styles

        for style in root.iterchildren(qn("w:style")):
            if style.get(qn("w:type")) != "paragraph":
                continue
            style_id = style.get(qn("w:styleId"))
            p_pr = style.find(qn("w:pPr"))
            r_pr = style.find(qn("w:rPr"))
            if style_id is None or (p_pr is None and r_pr is None):
                continue

            paragraph_style = parse_paragraph_style(p_pr) if p_pr is not None else ParagraphStyle()
            if r_pr is not None:
                paragraph_style = replace(paragraph_style, inline=parse_inline_style(r_pr))
            styles[style_id] = paragraph_style

        return styles

    def _load_numberings(self) -> dict[int, NumberingDefinition]:
        numberings: dict[int, NumberingDefinition] = {}
        root = self._related_element(RT.NUMBERING)
        if root is None:
            return numberings

        # abstractNumId -> first level element
        first_levels: dict[str, Any] = {}
        for abstract in root.iterchildren(qn("w:abstractNum")):
            levels = list(abstract.iterchildren(qn("w:lvl")))
            if not levels:
                continue
            first = next((lvl for lvl in levels if lvl.get(qn("w:ilvl")) == "0"), levels[0])
            first_levels[abstract.get(qn("w:abstractNumId"))] = first

        for num in root.iterchildren(qn("w:num")):
            raw_id = num.get(qn("w:numId"))
            abstract_id = _child_val(num, "w:abstractNumId")
            level = first_levels.get(abstract_id) if abstract_id is not None else None
            if raw_id is None or level is None:
                logger.debug(f"Skipping numbering {raw_id!r}: no abstract definition {abstract_id!r}")
                continue
            try:
                list_id = int(raw_id)
            except ValueError:
                logger.debug(f"Skipping numbering with non-integer id {raw_id!r}")
                continue
            numberings[list_id] = NumberingDefinition(
                list_id=list_id,
                format=_child_val(level, "w:numFmt"),
                level_text=_child_val(level, "w:lvlText"),
            )

        return numberings

    def _load_images(self) -> dict[str, bytes]:
        images: dict[str, bytes] = {}
        for rel in self._rels.values():
            if rel.reltype != RT.IMAGE:
                continue
            if rel.is_external:
                logger.debug(f"Skipping linked image {rel.target_ref}")
                continue
            images[rel.target_ref] = rel.target_part.blob
        return images

    def _rel_target(self, r_id: Optional[str]) -> Optional[str]:
        if r_id is None:
            return None
        rel = self._rels.get(r_id)
        if rel is None:
            logger.debug(f"Relationship {r_id} not found")
            return None
        return rel.target_ref

    def _parse_paragraph(self, p: Any) -> Paragraph:
        p_pr = p.find(qn("w:pPr"))
        coalescer = RunCoalescer()

        for child in p.iterchildren():
            if child.tag == qn("w:r"):
                self._parse_run(child, coalescer)
            elif child.tag == qn("w:hyperlink"):
                self._parse_hyperlink(child, coalescer)
            elif child.tag == qn("w:bookmarkStart"):
                name = child.get(qn("w:name"))
                if name:
                    coalescer.add_bookmark(name)

        return Paragraph(
            style=parse_paragraph_style(p_pr) if p_pr is not None else None,
            blocks=coalescer.blocks,
        )

    def _parse_run(self, r: Any, coalescer: RunCoalescer) -> None:
        r_pr = r.find(qn("w:rPr"))
        style = parse_inline_style(r_pr) if r_pr is not None else None

        for child in r.iterchildren():
            if child.tag == qn("w:t"):
                coalescer.add_text(child.text or "", style)
            elif child.tag == qn("w:drawing") and self.options.include_images:
                self._parse_drawing(child, coalescer)

    def _parse_drawing(self, drawing: Any, coalescer: RunCoalescer) -> None:
        # Floating (wp:anchor) drawings are not converted
        inline = drawing.find(qn("wp:inline"))
        if inline is None:
            return
        blip = inline.find(f".//{qn('a:blip')}")
        target = self._rel_target(blip.get(qn("r:embed")) if blip is not None else None)
        if target is None:
            logger.warning("Skipping inline drawing without a resolvable image")
            return
        doc_pr = inline.find(qn("wp:docPr"))
        alt = doc_pr.get("descr") if doc_pr is not None else None
        coalescer.add_image(alt or "", target)

    def _parse_hyperlink(self, hyperlink: Any, coalescer: RunCoalescer) -> None:
        label = "".join(t.text or "" for t in hyperlink.iter(qn("w:t")))
        anchor = hyperlink.get(qn("w:anchor"))
        target = f"#{anchor}" if anchor else self._rel_target(hyperlink.get(qn("r:id")))
        if not label or not target:
            logger.debug(f"Skipping hyperlink with label {label!r} and target {target!r}")
            return
        coalescer.add_link(label, target)

    def _parse_table(self, tbl: Any) -> Table:
        table = Table()
        for tr in tbl.iterchildren(qn("w:tr")):
            tr_pr = tr.find(qn("w:trPr"))
            is_header = tr_pr is not None and _has_flag(tr_pr, "w:tblHeader")

            cells: list[list[Paragraph]] = []
            for tc in tr.iterchildren(qn("w:tc")):
                paragraphs = [self._parse_paragraph(p) for p in tc.iterchildren(qn("w:p"))]
                if paragraphs:
                    cells.append(paragraphs)
            table.rows.append(TableRow(cells=cells, is_header=is_header))
        return table
