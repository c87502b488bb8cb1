"""
Domain converters between Supabase rows and domain models.

All converters are pure functions with no side effects.

Examples:
    >>> from domain.converters import db_row_to_result, payload_to_db_row

    >>> result = db_row_to_result(row)
    >>> row = payload_to_db_row(payload, athlete=athlete)
"""

from domain.converters.db_converters import (
    db_row_to_catalog_workout,
    db_row_to_result,
    payload_to_db_row,
)

__all__ = [
    "db_row_to_result",
    "payload_to_db_row",
    "db_row_to_catalog_workout",
]
