#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docx2md/constants.py
"""Constants and default values for the docx2md library.

This module centralizes the literal types, XML names and default values
used by the parser, the renderers and the command-line interface.

Constants are organized by category:
1. Type Definitions - Literal types
2. WordprocessingML - Namespaces and numbering format tokens
3. Markdown Output - Markup fragments emitted by the renderer
4. Media - Extension to MIME type mapping
5. CLI - Exit codes and environment prefix
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

OutputFormat = Literal["md", "json", "pretty_json"]
JsonImageMode = Literal["data_uri", "base64", "omit"]

# =============================================================================
# WordprocessingML
# =============================================================================

EXTENDED_PROPERTIES_NS = "http://schemas.openxmlformats.org/officeDocument/2006/extended-properties"
APP_PROPERTIES_PARTNAME = "/docProps/app.xml"

# Values of w:val that switch an on/off property off
OFF_VALUES = frozenset({"0", "false", "off", "none"})

# ST_NumberFormat tokens the numbering engine knows about
NUMBER_FORMAT_UPPER_ROMAN = "upperRoman"
NUMBER_FORMAT_LOWER_ROMAN = "lowerRoman"
NUMBER_FORMAT_UPPER_LETTER = "upperLetter"
NUMBER_FORMAT_LOWER_LETTER = "lowerLetter"
NUMBER_FORMAT_BULLET = "bullet"

# =============================================================================
# Markdown Output
# =============================================================================

MAX_HEADING_LEVEL = 6
LIST_INDENT = "    "
BULLET_MARKER = "-"
BLANK_BULLET_MARKER = " "
TABLE_CELL_LINE_BREAK = "<br/>"

BOLD_MARKER = "**"
ITALIC_MARKER = "*"
UNDERLINE_MARKER = "__"
STRIKE_MARKER = "~~"

# =============================================================================
# Media
# =============================================================================

DEFAULT_MIME_TYPE = "application/octet-stream"

IMAGE_MIME_TYPES: dict[str, str] = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "bmp": "image/bmp",
    "tif": "image/tiff",
    "tiff": "image/tiff",
}

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_EXTRACT_METADATA = True
DEFAULT_INCLUDE_IMAGES = True
DEFAULT_EXPORT_IMAGES = False
DEFAULT_JSON_IMAGE_MODE: JsonImageMode = "data_uri"
DEFAULT_PRETTY_JSON_INDENT = 2

# =============================================================================
# CLI
# =============================================================================

ENV_PREFIX = "DOCX2MD_"

EXIT_SUCCESS = 0
EXIT_CONVERSION_ERROR = 1
EXIT_VALIDATION_ERROR = 2
EXIT_OUTPUT_ERROR = 3
