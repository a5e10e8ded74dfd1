"""Scout file decoding entry points.

Sections are decoded in the order the format mandates, expressed as an
ordered pipeline of steps. Each step names the ScoutFile field it fills and
the parser that owns the section's header; steps with ``skip_to`` first
discard everything up to that marker (unparsed sections such as [3MORE] or
[3ATTACKCOMBINATION]).

Usage:
    from dvw_reader import read_from_file
    scout_file = read_from_file("match.dvw")
    for action in scout_file.actions:
        print(action.code_explanation)
"""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import IO, Any

import structlog

from dvw_reader.exceptions import SourceReadError, TruncationError
from dvw_reader.models.scout_file import ScoutFile
from dvw_reader.scanner import LineCursor
from dvw_reader.sections import (
    SCOUT_HEADER,
    SETS_HEADER,
    MatchParser,
    MetadataParser,
    PlayersParser,
    ScoutParser,
    SectionParser,
    SetsParser,
    TeamParser,
)
from dvw_reader.utils.config import Settings, get_settings
from dvw_reader.utils.logging import clear_log_context, log_context

logger = structlog.get_logger(__name__)

_BOM = "\ufeff"


@dataclass(frozen=True)
class SectionStep:
    """One step of the decoding pipeline."""

    field: str  # ScoutFile attribute filled by this step
    parser: SectionParser
    skip_to: str | None = None  # discard lines up to this marker first
    optional: bool = False  # a missing ``skip_to`` marker yields an empty list


def build_pipeline(settings: Settings | None = None) -> tuple[SectionStep, ...]:
    """Return the section steps in file order."""
    settings = settings or get_settings()
    return (
        SectionStep("metadata", MetadataParser(settings)),
        SectionStep("game", MatchParser(settings)),
        SectionStep("home_team", TeamParser(settings)),
        SectionStep("visiting_team", TeamParser(settings, read_header=False)),
        SectionStep("sets", SetsParser(settings), skip_to=SETS_HEADER),
        SectionStep("home_players", PlayersParser(settings)),
        SectionStep("visiting_players", PlayersParser(settings)),
        SectionStep("actions", ScoutParser(settings), skip_to=SCOUT_HEADER, optional=True),
    )


def decode(
    cursor: LineCursor,
    settings: Settings | None = None,
    pipeline: tuple[SectionStep, ...] | None = None,
) -> ScoutFile:
    """
    Run the pipeline over a cursor and assemble the ScoutFile.

    Any error aborts the whole decode; there is no partial result.

    Args:
        cursor: Cursor positioned at the start of the file.
        settings: Decoder settings. If None, uses the cached settings.
        pipeline: Steps to run. If None, uses ``build_pipeline(settings)``.

    Raises:
        ScoutDecodeError: Subclass describing the malformed content.
    """
    settings = settings or get_settings()
    steps = pipeline if pipeline is not None else build_pipeline(settings)

    values: dict[str, Any] = {}
    for step in steps:
        if step.skip_to is not None:
            try:
                cursor.skip_until(step.skip_to)
            except TruncationError:
                if not step.optional:
                    raise
                logger.debug("Optional section absent", section=step.skip_to)
                values[step.field] = []
                continue
        values[step.field] = step.parser.parse(cursor)

    scout_file = ScoutFile(**values)
    _warn_on_set_count(scout_file, settings)
    return scout_file


def _warn_on_set_count(scout_file: ScoutFile, settings: Settings) -> None:
    sets_won = scout_file.home_team.sets_won + scout_file.visiting_team.sets_won
    if sets_won > settings.set_count:
        logger.warning(
            "Teams won more sets than set lines were read",
            sets_won=sets_won,
            set_count=settings.set_count,
        )


def read_text(text: str, settings: Settings | None = None) -> ScoutFile:
    """
    Decode scout file content that is already text.

    Raises:
        ScoutDecodeError: If the content is malformed.
    """
    if text.startswith(_BOM):
        text = text[len(_BOM) :]

    logger.info("Decoding scout file", characters=len(text))
    scout_file = decode(LineCursor(text), settings)
    logger.info(
        "Decoded scout file",
        sets=len(scout_file.sets),
        players=len(scout_file.players),
        actions=len(scout_file.actions),
    )
    return scout_file


def read(stream: IO[bytes] | IO[str], settings: Settings | None = None) -> ScoutFile:
    """
    Read a whole scout file from a stream and decode it.

    Args:
        stream: Binary stream (decoded with ``settings.encoding``) or text stream.
        settings: Decoder settings. If None, uses the cached settings.

    Raises:
        SourceReadError: If the stream cannot be read or decoded as text.
        ScoutDecodeError: If the content is malformed.
    """
    settings = settings or get_settings()
    try:
        data = stream.read()
        text = data.decode(settings.encoding) if isinstance(data, bytes) else data
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(f"Could not read scout file: {e}") from e
    return read_text(text, settings)


def read_from_file(path: str | PathLike[str], settings: Settings | None = None) -> ScoutFile:
    """
    Open a .dvw file and decode it.

    Raises:
        OSError: If the file cannot be opened.
        SourceReadError: If the file cannot be read or decoded as text.
        ScoutDecodeError: If the content is malformed.
    """
    log_context(source=str(path))
    try:
        with open(path, "rb") as f:
            return read(f, settings)
    finally:
        clear_log_context("source")
