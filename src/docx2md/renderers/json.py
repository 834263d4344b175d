#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docx2md/renderers/json.py
"""JSON rendering of the document model.

The output is the whole model (metadata, body, named styles, numbering
definitions and images) as nested objects tagged with ``node_type``. It is
meant for tooling that wants the resolved structure rather than Markdown.

"""

from __future__ import annotations

import json
import logging

from docx2md.model.nodes import Document
from docx2md.model.serialization import document_to_dict
from docx2md.options.json import JsonRendererOptions
from docx2md.renderers.base import BaseRenderer

logger = logging.getLogger(__name__)


class JsonRenderer(BaseRenderer):
    """Render a Document to a JSON string.

    Parameters
    ----------
    options : JsonRendererOptions or None, default = None
        JSON rendering options

    Examples
    --------
        >>> from docx2md.model import Paragraph, TextBlock
        >>> doc = Document(content=[Paragraph(blocks=[TextBlock("Hi")])])
        >>> '"node_type": "Paragraph"' in JsonRenderer().render_to_string(doc)
        True

    """

    def __init__(self, options: JsonRendererOptions | None = None):
        """Initialize the JSON renderer with options."""
        BaseRenderer._validate_options_type(options, JsonRendererOptions, "json")
        options = options or JsonRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: JsonRendererOptions = options

    def render_to_string(self, doc: Document) -> str:
        """Serialize the document to JSON.

        Returns
        -------
        str
            JSON text; compact unless ``indent`` is set

        """
        data = document_to_dict(doc, image_mode=self.options.image_mode)
        logger.debug(f"Serializing {len(doc.content)} body items and {len(doc.images)} images to JSON")
        return json.dumps(data, indent=self.options.indent, ensure_ascii=False)
