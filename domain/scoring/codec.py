"""
Score codec: structured scores <-> the stored score text.

Grammar per category:

    time      "12:34"  "12:"  ":34"  ""      (parse also takes "1:02:03" and "12")
    amrap     "8+15"   "8"    "+15"  ""      (parse also takes "8 rounds + 15 reps")
    weight    "102.5"                        (parse also takes a kg/lb suffix)
    rounds    "10"                           (parse also takes "10 rounds")
    freeform  any text, verbatim

`parse_score` never raises. A None return means the text does not fit the
category's grammar; callers show it as freeform text without rewriting it.
`format_score` omits absent fields instead of writing zeros, so a half-typed
edit never overwrites the other half of a stored value with "0".
"""

import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Mapping, Optional, Union

from domain.models.score import (
    AmrapScore,
    AnyScore,
    FreeformScore,
    RoundsScore,
    ScoreCategory,
    TimeScore,
    WeightScore,
    empty_score,
)
from domain.scoring.fields import from_fields

logger = logging.getLogger(__name__)

_TIME_MM_SS = re.compile(r"^(\d*):(\d*)$")
_TIME_H_MM_SS = re.compile(r"^(\d+):(\d+):(\d+)$")
_BARE_INT = re.compile(r"^\d+$")
_AMRAP = re.compile(
    r"^(?:(\d+)\s*(?:rounds?)?)?\s*(?:\+\s*(\d+)\s*(?:reps?)?)?$",
    re.IGNORECASE,
)
_WEIGHT = re.compile(r"^(\d+(?:\.\d+)?|\.\d+)\s*(?:kgs?|lbs?)?$", re.IGNORECASE)
_ROUNDS = re.compile(r"^(\d+)\s*(?:rounds?)?$", re.IGNORECASE)


class ScoreCategoryMismatch(ValueError):
    """Raised when a structured score is formatted under another category."""


def _opt_int(token: Optional[str]) -> Optional[int]:
    return int(token) if token else None


def _parse_time(text: str) -> Optional[TimeScore]:
    if _BARE_INT.match(text):
        return TimeScore(minutes=int(text))

    match = _TIME_H_MM_SS.match(text)
    if match:
        hours, minutes, seconds = (int(g) for g in match.groups())
        if minutes > 59 or seconds > 59:
            return None
        return TimeScore(minutes=hours * 60 + minutes, seconds=seconds)

    match = _TIME_MM_SS.match(text)
    if not match:
        return None
    minutes, seconds = (_opt_int(g) for g in match.groups())
    if seconds is not None and seconds > 59:
        return None
    return TimeScore(minutes=minutes, seconds=seconds)


def _parse_amrap(text: str) -> Optional[AmrapScore]:
    match = _AMRAP.match(text)
    if not match:
        return None
    rounds, reps = (_opt_int(g) for g in match.groups())
    if rounds is None and reps is None:
        return None
    return AmrapScore(rounds=rounds, reps=reps)


def _parse_weight(text: str) -> Optional[WeightScore]:
    match = _WEIGHT.match(text)
    if not match:
        return None
    try:
        return WeightScore(amount=Decimal(match.group(1)))
    except InvalidOperation:
        return None


def _parse_rounds(text: str) -> Optional[RoundsScore]:
    match = _ROUNDS.match(text)
    if not match:
        return None
    return RoundsScore(rounds=int(match.group(1)))


_PARSERS = {
    ScoreCategory.TIME: _parse_time,
    ScoreCategory.AMRAP: _parse_amrap,
    ScoreCategory.WEIGHT: _parse_weight,
    ScoreCategory.ROUNDS: _parse_rounds,
}


def parse_score(
    text: Optional[str],
    category: Union[ScoreCategory, str],
) -> Optional[AnyScore]:
    """
    Decode stored score text under a category.

    Empty text decodes to the empty score of the category. Freeform text is
    taken literally and always succeeds.

    Args:
        text: Stored score text (may be None or empty)
        category: Score category selecting the grammar

    Returns:
        The structured score, or None when the text does not fit the grammar.
    """
    category = ScoreCategory(category)
    raw = text or ""

    if category == ScoreCategory.FREEFORM:
        return FreeformScore(text=raw)

    stripped = raw.strip()
    if not stripped:
        return empty_score(category)

    parser = _PARSERS.get(category)
    if parser is None:
        raise TypeError(f"Unhandled score category: {category!r}")
    try:
        parsed = parser(stripped)
    except ValueError:
        # Digit runs past the interpreter's int conversion limit
        parsed = None

    if parsed is None:
        logger.debug("Score text %r does not fit the %s grammar", raw, category.value)
    return parsed


def format_score(score: AnyScore, category: Union[ScoreCategory, str]) -> str:
    """
    Encode a (possibly partial) structured score as stored text.

    A FreeformScore is written verbatim under any category; this is how an
    athlete edits a value that fell back to freeform display.

    Raises:
        ScoreCategoryMismatch: If a non-freeform score is formatted under a
            different category.
    """
    category = ScoreCategory(category)

    if isinstance(score, FreeformScore):
        return score.text

    if score.category != category.value:
        raise ScoreCategoryMismatch(
            f"Cannot format a {score.category} score as {category.value}"
        )

    if isinstance(score, TimeScore):
        if score.minutes is not None and score.seconds is not None:
            return f"{score.minutes}:{score.seconds:02d}"
        if score.minutes is not None:
            return f"{score.minutes}:"
        if score.seconds is not None:
            return f":{score.seconds}"
        return ""

    if isinstance(score, AmrapScore):
        if score.rounds is not None and score.reps is not None:
            return f"{score.rounds}+{score.reps}"
        if score.rounds is not None:
            return str(score.rounds)
        if score.reps is not None:
            return f"+{score.reps}"
        return ""

    if isinstance(score, WeightScore):
        return "" if score.amount is None else format(score.amount, "f")

    if isinstance(score, RoundsScore):
        return "" if score.rounds is None else str(score.rounds)

    raise TypeError(f"Unhandled score type: {type(score).__name__}")


def format_fields(
    fields: Mapping[str, Optional[str]],
    category: Union[ScoreCategory, str],
) -> str:
    """
    Encode raw editable sub-field values as stored text.

    Examples:
        >>> format_fields({"minutes": "12", "seconds": "34"}, "time")
        '12:34'
        >>> format_fields({"minutes": "5", "seconds": ""}, "time")
        '5:'
    """
    return format_score(from_fields(fields, category), category)
