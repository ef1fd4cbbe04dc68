"""Admin form state: raw string input in, validated store payload out."""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Mapping
from datetime import date
from typing import Any, ClassVar

from ..domain.invariants import (
    InvariantViolation,
    validate_episodes,
    validate_rating,
    validate_release_year,
)
from ..errors import ValidationError

REQUIRED_MESSAGE = "This field is required"


class FormValidationError(ValidationError):
    code = "FORM_INVALID"
    message = "Form contains invalid values"


def _parse_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


class EntityForm(ABC):
    FIELDS: ClassVar[tuple[str, ...]] = ()
    REQUIRED: ClassVar[tuple[str, ...]] = ()
    BOOLEAN_FIELDS: ClassVar[tuple[str, ...]] = ()

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self.values: dict[str, Any] = self.defaults()
        self.errors: dict[str, str] = {}
        if values:
            self.update(values)

    @classmethod
    def defaults(cls) -> dict[str, Any]:
        return {field: "" for field in cls.FIELDS}

    @classmethod
    @abstractmethod
    def from_row(cls, row: Any) -> "EntityForm":
        """Pre-fill a form from a stored row."""

    def update(self, values: Mapping[str, Any]) -> None:
        for field, value in values.items():
            if field not in self.FIELDS:
                continue
            if field in self.BOOLEAN_FIELDS:
                # null keeps the current value
                if value is not None:
                    self.values[field] = _parse_bool(value)
            else:
                self.values[field] = "" if value is None else str(value)

    def parse(self) -> dict[str, Any]:
        """Validate the form. Raises FormValidationError with per-field messages."""
        errors: dict[str, str] = {}
        for field in self.REQUIRED:
            if not str(self.values.get(field, "")).strip():
                errors[field] = REQUIRED_MESSAGE

        payload = self._convert(errors)
        self.errors = errors
        if errors:
            raise FormValidationError(details=dict(errors))
        return payload

    def _convert(self, errors: dict[str, str]) -> dict[str, Any]:
        return {field: self.values[field] for field in self.FIELDS}


class AnimeForm(EntityForm):
    FIELDS = (
        "title",
        "description",
        "image_url",
        "video_url",
        "rating",
        "genre",
        "release_year",
        "episodes",
    )
    REQUIRED = FIELDS

    @classmethod
    def defaults(cls) -> dict[str, Any]:
        values = super().defaults()
        values.update(rating="0", episodes="0", release_year=str(date.today().year))
        return values

    @classmethod
    def from_row(cls, row: Any) -> "AnimeForm":
        form = cls()
        form.update(
            {
                "title": row.title,
                "description": row.description or "",
                "image_url": row.image_url or "",
                "video_url": row.video_url or "",
                "rating": "0" if row.rating is None else f"{row.rating:g}",
                "genre": row.genre or "",
                "release_year": str(row.release_year or date.today().year),
                "episodes": "0" if row.episodes is None else str(row.episodes),
            }
        )
        return form

    def _convert(self, errors: dict[str, str]) -> dict[str, Any]:
        payload = super()._convert(errors)

        rating = self._number("rating", float, errors)
        if rating is not None:
            if math.isfinite(rating):
                self._check(validate_rating, rating, errors)
            else:
                errors["rating"] = "Rating must be a number"
        episodes = self._number("episodes", int, errors)
        if episodes is not None:
            self._check(validate_episodes, episodes, errors)
        release_year = self._number("release_year", int, errors)
        if release_year is not None:
            self._check(validate_release_year, release_year, errors)

        payload.update(rating=rating, episodes=episodes, release_year=release_year)
        return payload

    def _number(self, field: str, kind: type, errors: dict[str, str]) -> Any:
        raw = str(self.values.get(field, "")).strip()
        if not raw:
            return None
        try:
            # int() and float() accept digit separators; form input must not
            if "_" in raw:
                raise ValueError(raw)
            return kind(raw)
        except ValueError:
            errors[field] = "Must be a whole number" if kind is int else "Must be a number"
            return None

    @staticmethod
    def _check(validator, value: Any, errors: dict[str, str]) -> None:
        try:
            validator(value)
        except InvariantViolation as exc:
            errors[exc.field] = str(exc)


class AdvertisementForm(EntityForm):
    FIELDS = ("title", "video_url", "link_url", "is_active")
    REQUIRED = ("title", "video_url", "link_url")
    BOOLEAN_FIELDS = ("is_active",)

    @classmethod
    def defaults(cls) -> dict[str, Any]:
        values = super().defaults()
        values["is_active"] = True
        return values

    @classmethod
    def from_row(cls, row: Any) -> "AdvertisementForm":
        return cls(
            {
                "title": row.title,
                "video_url": row.video_url,
                "link_url": row.link_url,
                "is_active": row.is_active,
            }
        )
