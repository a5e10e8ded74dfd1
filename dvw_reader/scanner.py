"""Line cursor and field splitting over buffered scout file text.

The cursor walks the file one line at a time. A parser that reads a line
belonging to the next section hands it back with ``push_back`` so the next
parser can read it again; at most one line can be pending.
"""

from __future__ import annotations

import structlog

from dvw_reader.exceptions import (
    ConversionError,
    FieldMissingError,
    SectionHeaderError,
    TruncationError,
)

logger = structlog.get_logger(__name__)

FIELD_SEPARATOR = ";"
SECTION_OPEN = "["


def is_section_header(line: str) -> bool:
    """Return True if the line starts a bracketed section."""
    return line.strip().startswith(SECTION_OPEN)


def split_lines(text: str) -> list[str]:
    """
    Split text on "\n" or "\r\n" only.

    Other control characters (form feed, U+0085 and the like) stay inside
    the line. A trailing line ending does not start an empty last line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class LineCursor:
    """
    Forward-only line scanner with a one-line push-back buffer.

    Usage:
        cursor = LineCursor(text)
        header = cursor.next_line(section="[3MATCH]")
        if not header.startswith("[3MATCH]"):
            cursor.push_back(header)
    """

    def __init__(self, text: str) -> None:
        self._lines: list[str] = split_lines(text)
        self._position = 0
        self._pending: str | None = None

    @property
    def line_number(self) -> int:
        """1-based number of the most recently consumed line (0 before the first read)."""
        return self._position - (1 if self._pending is not None else 0)

    @property
    def at_end(self) -> bool:
        return self._pending is None and self._position >= len(self._lines)

    def next_line(self, section: str | None = None) -> str:
        """
        Consume and return the next line, without its line ending.

        Args:
            section: Section being decoded, used for error context only.

        Raises:
            TruncationError: If the input is exhausted.
        """
        if self._pending is not None:
            line, self._pending = self._pending, None
            return line
        if self._position >= len(self._lines):
            raise TruncationError(
                "Unexpected end of input", section=section, line_number=self._position
            )
        line = self._lines[self._position]
        self._position += 1
        return line

    def peek(self) -> str | None:
        """Return the next line without consuming it, or None at end of input."""
        if self._pending is not None:
            return self._pending
        if self._position >= len(self._lines):
            return None
        return self._lines[self._position]

    def push_back(self, line: str) -> None:
        """Un-consume the line just read so the next ``next_line`` returns it again."""
        if self._pending is not None:
            raise RuntimeError("LineCursor already holds a pushed-back line")
        self._pending = line

    def skip_until(self, marker: str) -> int:
        """
        Discard lines until one starts with ``marker``; that line stays unconsumed.

        Returns:
            Number of lines discarded.

        Raises:
            TruncationError: If no line starts with the marker.
        """
        skipped = 0
        while True:
            line = self.next_line(section=marker)
            if line.strip().startswith(marker):
                self.push_back(line)
                logger.debug("Skipped to section", marker=marker, lines_skipped=skipped)
                return skipped
            if is_section_header(line):
                logger.debug("Skipping unparsed section", header=line.strip())
            skipped += 1

    def skip_section(self, marker: str) -> int:
        """
        Discard the section starting at the cursor, which must start with ``marker``.

        Data lines are discarded up to the next bracketed header, which stays
        unconsumed. End of input also ends the section.

        Returns:
            Number of data lines discarded.

        Raises:
            SectionHeaderError: If the current line is not the expected header.
        """
        header = self.next_line(section=marker)
        if not header.strip().startswith(marker):
            raise SectionHeaderError(
                f"Expected {marker} header",
                section=marker,
                line=header,
                line_number=self.line_number,
            )

        skipped = 0
        while not self.at_end:
            line = self.next_line(section=marker)
            if is_section_header(line):
                self.push_back(line)
                break
            skipped += 1

        logger.debug("Skipped section", marker=marker, lines_skipped=skipped)
        return skipped


class Fields:
    """
    Trimmed semicolon-separated fields of one data line.

    The splitter does not check the field count; a short row surfaces as
    FieldMissingError when a parser asks for a position the row lacks.
    """

    def __init__(
        self, line: str, *, section: str | None = None, line_number: int | None = None
    ) -> None:
        self.line = line
        self.section = section
        self.line_number = line_number
        self.values: tuple[str, ...] = tuple(v.strip() for v in line.split(FIELD_SEPARATOR))

    def __len__(self) -> int:
        return len(self.values)

    def get(self, index: int, name: str) -> str:
        """
        Return the field at ``index``.

        Raises:
            FieldMissingError: If the line has no field at that position.
        """
        if index >= len(self.values):
            raise FieldMissingError(
                f"Missing field '{name}' at index {index}",
                section=self.section,
                line=self.line,
                line_number=self.line_number,
            )
        return self.values[index]

    def integer(self, index: int, name: str) -> int:
        """
        Return the field at ``index`` converted to int.

        Raises:
            FieldMissingError: If the field is absent.
            ConversionError: If the field is not an integer.
        """
        value = self.get(index, name)
        try:
            return int(value)
        except ValueError as e:
            raise ConversionError(
                f"Field '{name}' is not an integer: {value!r}",
                section=self.section,
                line=self.line,
                line_number=self.line_number,
            ) from e


def split_fields(
    line: str, *, section: str | None = None, line_number: int | None = None
) -> Fields:
    """Split a data line on semicolons, trimming whitespace around every field."""
    return Fields(line, section=section, line_number=line_number)
