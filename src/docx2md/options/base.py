"""Base classes for parser and renderer options.

This module defines the foundation classes for the options objects used
throughout the docx2md conversion pipeline.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from docx2md.constants import DEFAULT_EXTRACT_METADATA


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    fail_on_resource_errors : bool, default=False
        Whether to raise OutputWriteError when an image cannot be written.
        If False (default), errors are logged and rendering continues.

    """

    fail_on_resource_errors: bool = field(
        default=False,
        metadata={
            "help": "Raise an error on image write failures instead of logging them",
            "importance": "advanced",
        },
    )


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Parameters
    ----------
    extract_metadata : bool
        Whether to read the document's core and extended properties

    """

    extract_metadata: bool = field(
        default=DEFAULT_EXTRACT_METADATA,
        metadata={"help": "Extract document metadata (title, creator, company, ...)", "importance": "core"},
    )
