"""Exceptions and message templates raised by svgtag builders."""

from typing import Any

# Message templates, filled with str.format
VALUE_NOT_IN_LIST = '"{value}" is not a valid value for "{attribute}". Valid values are: {allowed}.'
VALUE_OUT_OF_RANGE_OR_NULL = "Value must be a number between {low} and {high} inclusive or None to unset."
VALUE_MUST_BE_POSITIVE_NUMBER_OR_NULL = "Value must be a positive number or None to unset."
VALUE_MUST_BE_GTE_ONE_OR_NULL = "Value must be a number greater than or equal to 1 or None to unset."
TITLE_MUST_BE_STRING_OR_NULL = "Title attribute must be a string or None."
CONTENT_AND_FILE_PATH_BOTH_EMPTY = "File path and content cannot be empty at the same time for SVG."
FAILED_TO_READ_FILE = "Failed to read file: '{path}'."
FAILED_TO_SANITIZE_SVG = "Failed to sanitize SVG content from file: '{path}'."
UNEXPECTED_END = "Unexpected end() call for <{tag}>: no matching begin() found."


class SvgTagError(Exception):
    """Base class for all svgtag errors."""


class InvalidValueError(SvgTagError, ValueError):
    """An attribute value falls outside its documented domain.

    Attributes:
        value: The rejected value as passed by the caller
        attribute: Wire name of the attribute (e.g. "fill-rule")
        allowed: Valid values in declaration order (membership failures only)
    """

    def __init__(
        self,
        message: str,
        value: Any = None,
        attribute: str | None = None,
        allowed: tuple[str, ...] = (),
    ):
        super().__init__(message)
        self.value = value
        self.attribute = attribute
        self.allowed = allowed


class ContentError(SvgTagError, ValueError):
    """A builder has nothing to render."""


class MarkupError(SvgTagError, RuntimeError):
    """Streaming markup calls are out of order."""


class SvgFileError(SvgTagError, RuntimeError):
    """An SVG file could not be read or sanitized."""

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path
