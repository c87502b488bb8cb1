"""
Score value objects.

A workout type maps to one of five score categories. Each category has its own
structured score shape; the union of those shapes is the in-memory form of the
single text column persisted for a result.

Numeric fields are Optional so that a partially entered score (minutes typed,
seconds still blank) can be represented while editing. Absent fields are never
coerced to zero.
"""

from decimal import Decimal
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field


class ScoreCategory(str, Enum):
    """
    Score shapes a workout type can map to.

    - TIME: elapsed time, lower is better (For Time, Chipper, Metcon)
    - AMRAP: rounds plus extra reps
    - WEIGHT: load lifted (Strength)
    - ROUNDS: rounds completed (EMOM, Rounds)
    - FREEFORM: anything else, stored verbatim
    """

    TIME = "time"
    AMRAP = "amrap"
    WEIGHT = "weight"
    ROUNDS = "rounds"
    FREEFORM = "freeform"


class _Score(BaseModel):
    model_config = {"frozen": True}

    @property
    def is_complete(self) -> bool:
        """True when every required numeric field is present."""
        raise NotImplementedError

    @property
    def is_empty(self) -> bool:
        """True when no field has been entered."""
        raise NotImplementedError


class TimeScore(_Score):
    """
    Elapsed time as minutes and seconds.

    Examples:
        >>> TimeScore(minutes=12, seconds=34)
        TimeScore(category='time', minutes=12, seconds=34)
    """

    category: Literal["time"] = "time"
    minutes: Optional[int] = Field(default=None, ge=0)
    seconds: Optional[int] = Field(default=None, ge=0, le=59)

    @property
    def is_complete(self) -> bool:
        return self.minutes is not None and self.seconds is not None

    @property
    def is_empty(self) -> bool:
        return self.minutes is None and self.seconds is None

    @property
    def total_seconds(self) -> Optional[int]:
        """Total elapsed seconds, or None when nothing was entered."""
        if self.is_empty:
            return None
        return (self.minutes or 0) * 60 + (self.seconds or 0)


class AmrapScore(_Score):
    """Rounds completed plus reps into the next round."""

    category: Literal["amrap"] = "amrap"
    rounds: Optional[int] = Field(default=None, ge=0)
    reps: Optional[int] = Field(default=None, ge=0)

    @property
    def is_complete(self) -> bool:
        # reps is optional in the grammar: "8" is a complete score
        return self.rounds is not None

    @property
    def is_empty(self) -> bool:
        return self.rounds is None and self.reps is None


class WeightScore(_Score):
    """Load lifted. The unit is implied by the category and never stored."""

    category: Literal["weight"] = "weight"
    amount: Optional[Decimal] = Field(default=None, ge=0)

    @property
    def is_complete(self) -> bool:
        return self.amount is not None

    @property
    def is_empty(self) -> bool:
        return self.amount is None


class RoundsScore(_Score):
    """Rounds completed."""

    category: Literal["rounds"] = "rounds"
    rounds: Optional[int] = Field(default=None, ge=0)

    @property
    def is_complete(self) -> bool:
        return self.rounds is not None

    @property
    def is_empty(self) -> bool:
        return self.rounds is None


class FreeformScore(_Score):
    """Free text score, stored and displayed verbatim."""

    category: Literal["freeform"] = "freeform"
    text: str = ""

    @property
    def is_complete(self) -> bool:
        return True

    @property
    def is_empty(self) -> bool:
        return self.text == ""


StructuredScore = Annotated[
    Union[TimeScore, AmrapScore, WeightScore, RoundsScore, FreeformScore],
    Field(discriminator="category"),
]

SCORE_TYPES = {
    ScoreCategory.TIME: TimeScore,
    ScoreCategory.AMRAP: AmrapScore,
    ScoreCategory.WEIGHT: WeightScore,
    ScoreCategory.ROUNDS: RoundsScore,
    ScoreCategory.FREEFORM: FreeformScore,
}

AnyScore = Union[TimeScore, AmrapScore, WeightScore, RoundsScore, FreeformScore]


def empty_score(category: ScoreCategory) -> AnyScore:
    """Return the score of `category` with every field absent."""
    return SCORE_TYPES[category]()
