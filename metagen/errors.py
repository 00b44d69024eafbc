"""Exception hierarchy for metagen.

Every error renders as ``"<prefix>: <detail>"``.  :meth:`MetadataError.context`
returns a new error of the same type with a context segment prepended to the
detail, so the most recently added context reads first::

    >>> err = ExtractionError("Failed to parse YAML").context("Processing file 'a.md'")
    >>> str(err)
    "Failed to extract metadata: Processing file 'a.md': Failed to parse YAML"
"""

from __future__ import annotations

import json
import tomllib
from collections.abc import Iterable
from typing import Self

import yaml


class MetadataError(Exception):
    """Base class for every error raised by metagen."""

    prefix = "Metadata error"

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.prefix}: {self.detail}"

    def _clone(self) -> Self:
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        clone.__cause__ = self.__cause__
        return clone

    def context(self, ctx: object) -> Self:
        """Return a copy of this error with *ctx* prepended to its detail."""
        clone = self._clone()
        clone.detail = f"{ctx}: {self.detail}"
        clone.args = (clone.detail,)
        return clone


# ---------------------------------------------------------------------------
# Pipeline errors
# ---------------------------------------------------------------------------

class ExtractionError(MetadataError):
    """No front matter could be located, or a selector could not be built."""

    prefix = "Failed to extract metadata"

    @property
    def message(self) -> str:
        return self.detail


class ProcessingError(MetadataError):
    prefix = "Failed to process metadata"

    @property
    def message(self) -> str:
        return self.detail


class MissingFieldError(MetadataError):
    """A required field is absent after date normalization."""

    prefix = "Missing required metadata field"

    def __init__(self, field: str) -> None:
        super().__init__(field)
        self.field = field


class DateParseError(MetadataError):
    """Every supported date format was tried and none matched.

    Attributes:
        value -- the date string that was attempted (None for pre-checks)
        cause -- text of the last underlying parser error
    """

    prefix = "Failed to parse date"

    def __init__(
        self,
        message: str,
        value: str | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.value = value
        self.cause = cause


class UnsupportedFormatError(MetadataError):
    prefix = "Unsupported metadata format"

    def __init__(self, fmt: str) -> None:
        super().__init__(fmt)
        self.format = fmt


class FieldValidationError(MetadataError):
    """A field is present but its value is not acceptable."""

    prefix = "Metadata validation error"

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field} - {message}")
        self.field = field
        self.message = message

    def context(self, ctx: object) -> Self:
        # Context belongs to the message; the field name stays first.
        clone = self._clone()
        clone.message = f"{ctx}: {self.message}"
        clone.detail = f"{self.field} - {clone.message}"
        clone.args = (clone.detail,)
        return clone


# ---------------------------------------------------------------------------
# I/O and decoding
# ---------------------------------------------------------------------------

class FileReadError(MetadataError):
    """A file could not be opened or read.

    Attributes:
        path  -- the path that failed (empty when unknown)
        errno -- the OS error number, if any
    """

    prefix = "I/O error"

    def __init__(self, message: str, path: str = "", errno: int | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.errno = errno

    @classmethod
    def from_os_error(cls, exc: OSError, path: str = "") -> FileReadError:
        err = cls(exc.strerror or str(exc), path=path or (exc.filename or ""), errno=exc.errno)
        err.__cause__ = exc
        return err


class DecodeError(MetadataError):
    """File contents are not valid UTF-8."""

    prefix = "UTF-8 decoding error"

    def __init__(self, source: UnicodeDecodeError | str) -> None:
        super().__init__(str(source))
        self.source = source


class _WrappedParserError(MetadataError):
    """Carries the native exception of one of the dialect decoders."""

    def __init__(self, source: Exception | str) -> None:
        super().__init__(str(source))
        self.source = source


class YamlError(_WrappedParserError):
    prefix = "YAML parsing error"

    def __init__(self, source: yaml.YAMLError | str) -> None:
        super().__init__(source)


class TomlError(_WrappedParserError):
    prefix = "TOML parsing error"

    def __init__(self, source: tomllib.TOMLDecodeError | str) -> None:
        super().__init__(source)


class JsonError(_WrappedParserError):
    prefix = "JSON parsing error"

    def __init__(self, source: json.JSONDecodeError | str) -> None:
        super().__init__(source)


# ---------------------------------------------------------------------------
# Catch-all
# ---------------------------------------------------------------------------

class OtherError(MetadataError):
    """Opaque failure with an ordered chain of context strings.

    ``contexts[0]`` is the most recently attached context.
    """

    prefix = "Unexpected error"

    def __init__(self, description: str, contexts: Iterable[str] = ()) -> None:
        self.description = description
        self.contexts: list[str] = list(contexts)
        super().__init__(self._render())

    def _render(self) -> str:
        return ": ".join([*self.contexts, self.description])

    @classmethod
    def from_exception(cls, exc: BaseException) -> OtherError:
        err = cls(str(exc))
        err.__cause__ = exc
        return err

    def context(self, ctx: object) -> Self:
        clone = self._clone()
        clone.contexts = [str(ctx), *self.contexts]
        clone.detail = clone._render()
        clone.args = (clone.detail,)
        return clone
