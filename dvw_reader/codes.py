"""Decoder for the main action code of a scout line.

The main code is the first six characters of the code token, read by
position (DataVolley handbook, "main code"):

    position  0    1-2     3      4            5
              team player  skill  action type  evaluation
    example   *    14      S      Q            =

Characters after position 5 are the advanced and extended codes, which are
not decoded here.
"""

from __future__ import annotations

from enum import Enum

from dvw_reader.exceptions import CodeDecodeError
from dvw_reader.models.action import (
    ActionType,
    CodeExplanation,
    Evaluation,
    Skill,
    TeamSide,
)

MAIN_CODE_LENGTH = 6

# position -> (enum, label) for the single-character positions
_POSITIONAL_ENUMS: dict[int, tuple[type[Enum], str]] = {
    0: (TeamSide, "team"),
    3: (Skill, "skill"),
    4: (ActionType, "action type"),
    5: (Evaluation, "evaluation"),
}


def _decode_char(code: str, position: int, **context) -> Enum:
    enum_cls, label = _POSITIONAL_ENUMS[position]
    char = code[position]
    try:
        return enum_cls(char)
    except ValueError as e:
        raise CodeDecodeError(
            f"Invalid {label} character {char!r} at position {position} of code {code!r}",
            code=code,
            position=position,
            **context,
        ) from e


def _decode_player_number(code: str, **context) -> int:
    digits = code[1:3]
    if not (digits.isascii() and digits.isdigit()):
        raise CodeDecodeError(
            f"Invalid player number {digits!r} at positions 1-2 of code {code!r}",
            code=code,
            position=1,
            **context,
        )
    return int(digits)


def decode_code(
    code: str,
    *,
    section: str | None = None,
    line: str | None = None,
    line_number: int | None = None,
) -> CodeExplanation:
    """
    Decode the main code of an action token.

    Args:
        code: Raw code token, e.g. "*14SQ=" or "a05AH!~~~12". Surrounding
            whitespace is ignored.
        section, line, line_number: Optional context attached to errors.

    Returns:
        CodeExplanation for the first six characters.

    Raises:
        CodeDecodeError: If the token is shorter than six characters or any
            position holds a character outside its closed set.

    Examples:
        decode_code("*14SQ=") -> team=HOME, player_number=14, skill=SERVE,
                                 action_type=QUICK, evaluation=EQUAL
    """
    context = {"section": section, "line": line, "line_number": line_number}
    token = code.strip()

    if len(token) < MAIN_CODE_LENGTH:
        raise CodeDecodeError(
            f"Code {token!r} is shorter than {MAIN_CODE_LENGTH} characters",
            code=token,
            position=None,
            **context,
        )

    return CodeExplanation(
        team=_decode_char(token, 0, **context),
        player_number=_decode_player_number(token, **context),
        skill=_decode_char(token, 3, **context),
        action_type=_decode_char(token, 4, **context),
        evaluation=_decode_char(token, 5, **context),
    )
