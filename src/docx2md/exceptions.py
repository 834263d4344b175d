#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the docx2md library.

This module defines the exception classes raised while loading a Word
document into the docx2md model and rendering it to Markdown or JSON.

Exception Hierarchy
-------------------
- Docx2MdError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser or renderer)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)
    - MalformedFileError (corrupted/invalid package structure)

  - RenderingError (output generation failures)
    - OutputWriteError (file write failures)

  - DependencyError (missing optional packages)

"""

from typing import Any


class Docx2MdError(Exception):
    """Base exception class for all docx2md-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Docx2MdError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when the wrong options class is handed to a parser or renderer.

    Parameters
    ----------
    component_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        component_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{component_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(Docx2MdError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when an input document cannot be found."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class MalformedFileError(FileError):
    """Exception raised when a document package cannot be opened or parsed."""

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the malformed file error."""
        super().__init__(message, file_path=file_path, original_error=original_error)


class RenderingError(Docx2MdError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Exception raised when writing an output file fails.

    Parameters
    ----------
    file_path : str
        Path to the output file that failed to write
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path


class DependencyError(Docx2MdError):
    """Exception raised when an optional package needed by a feature is missing.

    Parameters
    ----------
    feature : str
        Name of the feature requiring the package (e.g. "rich output")
    package : str
        Package name as installed with pip
    original_import_error : ImportError, optional
        The ImportError raised when importing the package

    """

    def __init__(self, feature: str, package: str, original_import_error: ImportError | None = None):
        """Initialize the dependency error with an install hint."""
        message = f"{feature} requires the '{package}' package.\nInstall with: pip install {package}"
        super().__init__(message, original_error=original_import_error)
        self.feature = feature
        self.package = package
