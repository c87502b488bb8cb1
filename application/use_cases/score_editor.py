"""
ScoreEditor.

Holds the score being edited for one result and decides, once per
(stored text, category) pair, whether the stored text is edited through the
category's structured fields or shown verbatim as freeform text.

The decision is never re-made on a keystroke: an athlete typing into the
fallback text box must not see the input flip to minutes/seconds halfway
through.
"""

import logging
from typing import Dict, Optional, Union

from domain.models.score import AnyScore, FreeformScore, ScoreCategory
from domain.scoring import (
    FIELD_NAMES,
    format_score,
    from_fields,
    is_out_of_range,
    parse_score,
    to_fields,
    validate_score,
)

logger = logging.getLogger(__name__)


class ScoreEditor:
    """
    Editing state for a single score.

    Usage:
        >>> editor = ScoreEditor("8+15", ScoreCategory.WEIGHT)
        >>> editor.is_fallback
        True
        >>> editor.text
        '8+15'
        >>> editor = ScoreEditor("", ScoreCategory.TIME)
        >>> editor.update_fields(minutes="5")
        >>> editor.text
        '5:'
    """

    def __init__(
        self,
        stored_text: Optional[str] = "",
        category: Union[ScoreCategory, str] = ScoreCategory.FREEFORM,
    ) -> None:
        self._stored_text = stored_text or ""
        self._category = ScoreCategory(category)
        self._decide(self._stored_text)

    def _decide(self, text: str) -> None:
        parsed = parse_score(text, self._category)
        if parsed is None:
            logger.warning(
                "Stored score %r does not fit %s; editing as freeform text",
                text,
                self._category.value,
            )
            self._fallback = True
            self._score: AnyScore = FreeformScore(text=text)
        else:
            self._fallback = False
            self._score = parsed

    # =========================================================================
    # Re-decision points
    # =========================================================================

    def reset(
        self,
        stored_text: Optional[str],
        category: Union[ScoreCategory, str],
    ) -> None:
        """
        Start editing another stored value.

        Re-decides the fallback only when the (text, category) pair differs from
        the one being edited; resetting with the same pair keeps the current
        decision and any in-progress edit.
        """
        stored_text = stored_text or ""
        category = ScoreCategory(category)
        if stored_text == self._stored_text and category == self._category:
            return
        self._stored_text = stored_text
        self._category = category
        self._decide(stored_text)

    def change_category(self, category: Union[ScoreCategory, str]) -> None:
        """Switch the score category, re-deciding on the current text."""
        category = ScoreCategory(category)
        if category == self._category:
            return
        current = self.text
        self._category = category
        self._decide(current)

    # =========================================================================
    # Keystrokes
    # =========================================================================

    def update_fields(self, **fields: Optional[str]) -> None:
        """
        Apply edited sub-field values.

        Fields not passed keep their current value, and so does a field whose
        new value is out of range (seconds above 59). In fallback mode the only
        field is `text`.

        Raises:
            ValueError: If a field name does not belong to the editing mode
        """
        allowed = self.field_names
        unknown = sorted(set(fields) - set(allowed))
        if unknown:
            raise ValueError(
                f"Unknown score field(s) {unknown} for {self.mode}; expected {list(allowed)}"
            )

        if not fields:
            return

        if self._fallback:
            self._score = FreeformScore(text=fields["text"] or "")
            return

        merged: Dict[str, Optional[str]] = dict(self.fields)
        for name, raw in fields.items():
            if is_out_of_range(name, raw, self._category):
                logger.debug("Ignoring out-of-range %s keystroke %r", name, raw)
                continue
            merged[name] = raw
        self._score = from_fields(merged, self._category)

    def set_text(self, text: Optional[str]) -> None:
        """
        Replace the whole value with raw text.

        Text that does not fit the category grammar is kept verbatim rather
        than dropped; the editing mode does not change.
        """
        text = text or ""
        if self._fallback:
            self._score = FreeformScore(text=text)
            return
        parsed = parse_score(text, self._category)
        if parsed is None:
            logger.warning(
                "Score text %r does not fit %s; keeping it verbatim",
                text,
                self._category.value,
            )
            parsed = FreeformScore(text=text)
        self._score = parsed

    # =========================================================================
    # Read-only state
    # =========================================================================

    @property
    def category(self) -> ScoreCategory:
        return self._category

    @property
    def is_fallback(self) -> bool:
        """True while the stored text is edited verbatim as freeform."""
        return self._fallback

    @property
    def mode(self) -> ScoreCategory:
        """Category the editing surface is driven by (FREEFORM in fallback)."""
        return ScoreCategory.FREEFORM if self._fallback else self._category

    @property
    def field_names(self) -> tuple:
        return FIELD_NAMES[self.mode]

    @property
    def stored_text(self) -> str:
        return self._stored_text

    @property
    def score(self) -> AnyScore:
        return self._score

    @property
    def fields(self) -> Dict[str, str]:
        if isinstance(self._score, FreeformScore) and not self._fallback:
            if self._category != ScoreCategory.FREEFORM:
                # Verbatim text set through set_text; show an empty structured form
                return {name: "" for name in self.field_names}
        return to_fields(self._score)

    @property
    def text(self) -> str:
        """Stored-form value to persist."""
        return format_score(self._score, self._category)

    @property
    def is_dirty(self) -> bool:
        return self.text != self._stored_text

    @property
    def error(self) -> Optional[str]:
        """Validation message for the current score, if any."""
        return validate_score(self._score)
