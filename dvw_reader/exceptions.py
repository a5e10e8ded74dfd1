"""Domain-specific exceptions for scout file decoding."""

from __future__ import annotations


class DVWError(Exception):
    """Base exception for all dvw_reader failures."""

    pass


class SourceReadError(DVWError):
    """Raised when the input cannot be read fully into memory or decoded as text."""

    pass


class ScoutDecodeError(DVWError):
    """
    Base exception for malformed scout file content.

    Carries enough context to locate the problem in the input.

    Attributes:
        section: Section marker being decoded (e.g. "[3MATCH]"), if known.
        line: Raw content of the offending line, if any.
        line_number: 1-based line number of the offending line, if known.
    """

    def __init__(
        self,
        message: str,
        *,
        section: str | None = None,
        line: str | None = None,
        line_number: int | None = None,
    ) -> None:
        self.message = message
        self.section = section
        self.line = line
        self.line_number = line_number
        super().__init__(self._format())

    def _format(self) -> str:
        parts = [self.message]
        if self.section:
            parts.append(f"section={self.section}")
        if self.line_number is not None:
            parts.append(f"line {self.line_number}")
        if self.line is not None:
            parts.append(f"content={self.line!r}")
        return " | ".join(parts)


class SectionHeaderError(ScoutDecodeError):
    """Raised when an expected section header is absent or mismatched."""

    pass


class FieldMissingError(ScoutDecodeError):
    """Raised when a data line lacks an expected field position."""

    pass


class ConversionError(ScoutDecodeError):
    """Raised when a field cannot be converted to its target type."""

    pass


class TruncationError(ScoutDecodeError):
    """Raised when input ends before a section has all its expected lines."""

    pass


class CodeDecodeError(ConversionError):
    """
    Raised when an action code cannot be decoded.

    Attributes:
        code: The raw code token.
        position: Character position that failed to decode, or None when the
            token is too short.
    """

    def __init__(self, message: str, *, code: str, position: int | None = None, **context) -> None:
        self.code = code
        self.position = position
        super().__init__(message, **context)
