"""File metadata models."""

from pydantic import Field

from dvw_reader.models.base import ScoutModel


class ReleaseData(ScoutModel):
    """One creation or last-change block of the [3DATAVOLLEYSCOUT] section."""

    datetime: str = Field(..., description="Generation date and time as written in the file")
    idp: str = Field(..., description="Generator IDP tag")
    program: str = Field(..., description="Generating program name")
    version: str = Field(..., description="Program release/version")
    license: str = Field(..., description="Program license string")
    scouter_name: str = Field(..., description="Name of the scouter")


class Metadata(ScoutModel):
    """File-level metadata."""

    file_format: str = Field(..., description="File format tag (e.g. '2.0')")
    creation_data: ReleaseData = Field(..., description="Data about the file's creation")
    modification_data: ReleaseData = Field(..., description="Data about the last change")
