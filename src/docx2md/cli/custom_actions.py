"""Argparse actions that take their defaults from environment variables.

Every option declared with one of these actions can be preset through
``DOCX2MD_<DEST>``, where ``<DEST>`` is the option's destination in upper
case with hyphens and dots replaced by underscores. Explicit command-line
arguments always win.
"""

from __future__ import annotations

#  Copyright (c) 2025 Tom Villani, Ph.D.
import argparse
import logging
import os
from typing import Any, Callable, Optional, Sequence, Union

from docx2md.constants import ENV_PREFIX

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("true", "1", "yes", "on")


def env_key_for(dest: str) -> str:
    """Return the environment variable consulted for an option destination.

    Examples
    --------
        >>> env_key_for("image_dir")
        'DOCX2MD_IMAGE_DIR'

    """
    return f"{ENV_PREFIX}{dest.upper().replace('-', '_').replace('.', '_')}"


def env_flag(dest: str) -> Optional[bool]:
    """Read a boolean environment default, or None when unset."""
    env_value = os.environ.get(env_key_for(dest))
    if env_value is None:
        return None
    return env_value.strip().lower() in _TRUE_VALUES


class EnvStoreAction(argparse.Action):
    """Store action whose default can come from the environment."""

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        nargs: Optional[Union[int, str]] = None,
        const: Optional[Any] = None,
        default: Optional[Any] = None,
        type: Optional[Callable[[str], Any]] = None,
        choices: Optional[Sequence[Any]] = None,
        required: bool = False,
        help: Optional[str] = None,
        metavar: Optional[Union[str, tuple[str, ...]]] = None,
    ) -> None:
        env_key = env_key_for(dest)
        env_value = os.environ.get(env_key)
        if env_value is not None:
            try:
                default = type(env_value) if type is not None else env_value
            except (ValueError, TypeError) as e:
                logger.warning(f"Invalid environment variable {env_key}={env_value}: {e}")

        super().__init__(
            option_strings=option_strings,
            dest=dest,
            nargs=nargs,
            const=const,
            default=default,
            type=type,
            choices=choices,
            required=required,
            help=help,
            metavar=metavar,
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        """Store the parsed value."""
        setattr(namespace, self.dest, values)


class EnvStoreTrueAction(argparse.Action):
    """store_true action whose default can come from the environment."""

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        default: bool = False,
        required: bool = False,
        help: Optional[str] = None,
    ) -> None:
        env_default = env_flag(dest)
        if env_default is not None:
            default = env_default
        super().__init__(
            option_strings=option_strings, dest=dest, nargs=0, const=True, default=default, required=required, help=help
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        """Store True."""
        setattr(namespace, self.dest, True)


class EnvStoreFalseAction(argparse.Action):
    """store_false action whose default can come from the environment.

    The environment variable holds the value of the destination itself, so
    ``DOCX2MD_EXPORT_IMAGES=false`` has the same effect as
    ``--no-export-images``.
    """

    def __init__(
        self,
        option_strings: Sequence[str],
        dest: str,
        default: bool = True,
        required: bool = False,
        help: Optional[str] = None,
    ) -> None:
        env_default = env_flag(dest)
        if env_default is not None:
            default = env_default
        super().__init__(
            option_strings=option_strings,
            dest=dest,
            nargs=0,
            const=False,
            default=default,
            required=required,
            help=help,
        )

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        """Store False."""
        setattr(namespace, self.dest, False)
