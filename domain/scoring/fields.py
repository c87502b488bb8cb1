"""
Editable sub-field projection of structured scores.

An editing surface shows one input per sub-field (minutes and seconds for a
timed workout, rounds and reps for an AMRAP, ...). Field values are raw
strings; a blank string means the field has not been entered.
"""

import re
from decimal import Decimal
from typing import Dict, Mapping, Optional, Union

from domain.models.score import (
    AmrapScore,
    AnyScore,
    FreeformScore,
    RoundsScore,
    ScoreCategory,
    TimeScore,
    WeightScore,
)

FIELD_NAMES: Dict[ScoreCategory, tuple] = {
    ScoreCategory.TIME: ("minutes", "seconds"),
    ScoreCategory.AMRAP: ("rounds", "reps"),
    ScoreCategory.WEIGHT: ("amount",),
    ScoreCategory.ROUNDS: ("rounds",),
    ScoreCategory.FREEFORM: ("text",),
}

_NON_DIGITS = re.compile(r"[^0-9]")
_DECIMAL_PREFIX = re.compile(r"^\d*(?:\.\d*)?")


def _text(value: Optional[object]) -> str:
    return "" if value is None else str(value)


def _int_field(raw: Optional[str]) -> Optional[int]:
    digits = _NON_DIGITS.sub("", raw or "")
    if not digits:
        return None
    try:
        return int(digits)
    except ValueError:
        # Past the interpreter's int conversion limit
        return None


def _decimal_field(raw: Optional[str]) -> Optional[Decimal]:
    cleaned = re.sub(r"[^0-9.]", "", raw or "")
    number = _DECIMAL_PREFIX.match(cleaned).group(0).rstrip(".")
    if not number:
        return None
    return Decimal(number)


def to_fields(score: AnyScore) -> Dict[str, str]:
    """
    Project a structured score onto its named editable fields.

    Examples:
        >>> to_fields(TimeScore(minutes=12, seconds=4))
        {'minutes': '12', 'seconds': '4'}
        >>> to_fields(AmrapScore(rounds=8))
        {'rounds': '8', 'reps': ''}
    """
    if isinstance(score, TimeScore):
        return {"minutes": _text(score.minutes), "seconds": _text(score.seconds)}
    if isinstance(score, AmrapScore):
        return {"rounds": _text(score.rounds), "reps": _text(score.reps)}
    if isinstance(score, WeightScore):
        return {"amount": "" if score.amount is None else format(score.amount, "f")}
    if isinstance(score, RoundsScore):
        return {"rounds": _text(score.rounds)}
    if isinstance(score, FreeformScore):
        return {"text": score.text}
    raise TypeError(f"Unhandled score type: {type(score).__name__}")


def from_fields(
    fields: Mapping[str, Optional[str]],
    category: Union[ScoreCategory, str],
) -> AnyScore:
    """
    Assemble a structured score from raw field values.

    Total by construction: integer fields keep their digits only, the weight
    amount keeps one leading decimal number, blank fields become absent, and a
    seconds value above 59 is treated as not entered. Missing keys are blank.
    """
    category = ScoreCategory(category)

    if category == ScoreCategory.TIME:
        seconds = _int_field(fields.get("seconds"))
        if seconds is not None and seconds > 59:
            seconds = None
        return TimeScore(minutes=_int_field(fields.get("minutes")), seconds=seconds)
    if category == ScoreCategory.AMRAP:
        return AmrapScore(
            rounds=_int_field(fields.get("rounds")),
            reps=_int_field(fields.get("reps")),
        )
    if category == ScoreCategory.WEIGHT:
        return WeightScore(amount=_decimal_field(fields.get("amount")))
    if category == ScoreCategory.ROUNDS:
        return RoundsScore(rounds=_int_field(fields.get("rounds")))
    if category == ScoreCategory.FREEFORM:
        return FreeformScore(text=fields.get("text") or "")
    raise TypeError(f"Unhandled score category: {category!r}")


def is_out_of_range(
    name: str,
    raw: Optional[str],
    category: Union[ScoreCategory, str],
) -> bool:
    """
    True when a keystroke into a field must be ignored.

    Seconds above 59 are refused; an editor keeps the previous seconds value
    instead of clearing it.

    Examples:
        >>> is_out_of_range("seconds", "345", ScoreCategory.TIME)
        True
        >>> is_out_of_range("seconds", "", ScoreCategory.TIME)
        False
    """
    if ScoreCategory(category) != ScoreCategory.TIME or name != "seconds":
        return False
    digits = _NON_DIGITS.sub("", raw or "").lstrip("0")
    return len(digits) > 2 or (digits != "" and int(digits) > 59)
