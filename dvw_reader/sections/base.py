"""Base class for section parsers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import pydantic
import structlog

from dvw_reader.exceptions import ConversionError, SectionHeaderError
from dvw_reader.scanner import Fields, LineCursor, split_fields
from dvw_reader.utils.config import Settings, get_settings

logger = structlog.get_logger(__name__)


class SectionParser(ABC):
    """
    Abstract base class for section parsers.

    Subclasses set ``header`` to the bracketed section marker and implement
    ``parse_body``. ``parse`` validates the header line then delegates.
    """

    header: str  # e.g. "[3MATCH]"
    prefix_match: bool = False  # accept any header line starting with ``header``

    def __init__(self, settings: Settings | None = None, *, read_header: bool = True) -> None:
        """
        Initialize parser.

        Args:
            settings: Decoder settings. If None, uses the cached settings.
            read_header: Whether ``parse`` reads and validates the header line.
                False for records whose header was consumed by a previous parser.
        """
        self.settings = settings or get_settings()
        self.read_header = read_header
        self.logger = logger.bind(section=self.header)

    def parse(self, cursor: LineCursor) -> Any:
        """Parse the section at the cursor and return its decoded value."""
        if self.read_header:
            self.expect_header(cursor)
        result = self.parse_body(cursor)
        self.logger.debug("Parsed section", line_number=cursor.line_number)
        return result

    @abstractmethod
    def parse_body(self, cursor: LineCursor) -> Any:
        """
        Parse the data lines following the header.

        Args:
            cursor: Cursor positioned after the header line.

        Returns:
            Decoded model(s) for the section.
        """
        pass

    def expect_header(self, cursor: LineCursor) -> str:
        """
        Consume the header line and check it against ``header``.

        Raises:
            SectionHeaderError: If the line is not the expected marker.
            TruncationError: If the input is exhausted.
        """
        line = cursor.next_line(section=self.header)
        found = line.strip()
        matches = found.startswith(self.header) if self.prefix_match else found == self.header
        if not matches:
            raise SectionHeaderError(
                f"Invalid {self.header} header",
                section=self.header,
                line=line,
                line_number=cursor.line_number,
            )
        return found

    def read_fields(self, cursor: LineCursor) -> Fields:
        """Consume one data line and split it into fields."""
        line = cursor.next_line(section=self.header)
        return split_fields(line, section=self.header, line_number=cursor.line_number)

    def build(self, model_cls: type[pydantic.BaseModel], fields: Fields, **values: Any) -> Any:
        """
        Build a model, reporting constraint violations as ConversionError.
        """
        try:
            return model_cls(**values)
        except pydantic.ValidationError as e:
            raise ConversionError(
                f"Invalid {model_cls.__name__}: {e.errors(include_url=False)}",
                section=self.header,
                line=fields.line,
                line_number=fields.line_number,
            ) from e
