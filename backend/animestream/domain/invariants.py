"""
Domain invariants for catalog rows.

Checked before any store write, so an invalid row never reaches the store.

INVARIANTS:
1. Rating lies in [0, 10] with at most one decimal place
2. Episode count is never negative
3. Release year lies in [1900, current year + 1]
"""

import logging
from datetime import date
from typing import Any

logger = logging.getLogger(__name__)

RATING_MIN = 0.0
RATING_MAX = 10.0
EPISODES_MIN = 0
RELEASE_YEAR_MIN = 1900


class InvariantViolation(Exception):
    """Raised when a value breaks a domain invariant."""

    def __init__(
        self,
        message: str,
        *,
        invariant: str,
        field: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.invariant = invariant
        self.field = field
        self.details = details or {}

        logger.info(
            "invariant_violation invariant=%s field=%s message=%s",
            invariant,
            field,
            message,
        )


def max_release_year(today: date | None = None) -> int:
    return (today or date.today()).year + 1


def validate_rating(rating: float) -> None:
    if not RATING_MIN <= rating <= RATING_MAX:
        raise InvariantViolation(
            f"Rating must be between {RATING_MIN:g} and {RATING_MAX:g}",
            invariant="rating_range",
            field="rating",
            details={"rating": rating},
        )
    if round(rating, 1) != rating:
        raise InvariantViolation(
            "Rating must have at most one decimal place",
            invariant="rating_precision",
            field="rating",
            details={"rating": rating},
        )


def validate_episodes(episodes: int) -> None:
    if episodes < EPISODES_MIN:
        raise InvariantViolation(
            "Episode count cannot be negative",
            invariant="episodes_non_negative",
            field="episodes",
            details={"episodes": episodes},
        )


def validate_release_year(release_year: int, *, today: date | None = None) -> None:
    upper = max_release_year(today)
    if not RELEASE_YEAR_MIN <= release_year <= upper:
        raise InvariantViolation(
            f"Release year must be between {RELEASE_YEAR_MIN} and {upper}",
            invariant="release_year_range",
            field="release_year",
            details={"release_year": release_year, "max": upper},
        )
