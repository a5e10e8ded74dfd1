"""Parser for the [3DATAVOLLEYSCOUT] section."""

from __future__ import annotations

from dvw_reader.exceptions import FieldMissingError
from dvw_reader.models.metadata import Metadata, ReleaseData
from dvw_reader.scanner import LineCursor
from dvw_reader.sections.base import SectionParser

METADATA_HEADER = "[3DATAVOLLEYSCOUT]"

# Line order of a creation / last-change block
_RELEASE_FIELDS = ("datetime", "idp", "program", "version", "license", "scouter_name")


class MetadataParser(SectionParser):
    """
    File format tag followed by two six-line release blocks.

    Every line is ``KEY: value``; the value is everything after the first
    colon, trimmed, so times such as ``2019/10/20 20:15:33`` survive intact.
    """

    header = METADATA_HEADER

    def parse_body(self, cursor: LineCursor) -> Metadata:
        file_format = self.read_value(cursor, "file_format")
        creation_data = self.read_release_data(cursor)
        modification_data = self.read_release_data(cursor)
        return Metadata(
            file_format=file_format,
            creation_data=creation_data,
            modification_data=modification_data,
        )

    def read_release_data(self, cursor: LineCursor) -> ReleaseData:
        values = {name: self.read_value(cursor, name) for name in _RELEASE_FIELDS}
        return ReleaseData(**values)

    def read_value(self, cursor: LineCursor, name: str) -> str:
        line = cursor.next_line(section=self.header)
        _key, sep, value = line.partition(":")
        if not sep:
            raise FieldMissingError(
                f"Expected 'KEY: value' line for '{name}'",
                section=self.header,
                line=line,
                line_number=cursor.line_number,
            )
        return value.strip()
