"""Enumerations used across the Musterroll domain."""

from __future__ import annotations

from enum import StrEnum


class UnitRole(StrEnum):
    """Army-list section a unit was exported under."""

    CHARACTERS = "characters"
    BATTLELINE = "battleline"
    DEDICATED_TRANSPORTS = "dedicated_transports"
    OTHER = "other"
    ALLIED = "allied"
    FORTIFICATION = "fortification"


class AbilityType(StrEnum):
    """Closed set of ability categories shown on a unit."""

    CORE = "core"
    FACTION = "faction"
    DATASHEET = "datasheet"
    ENHANCEMENT = "enhancement"
    INVULNERABLE = "invulnerable"
    OTHER = "other"

    @classmethod
    def from_source(cls, raw: str | None) -> AbilityType:
        """Map a free-form catalog type string onto the closed set."""

        value = (raw or "").strip().lower()
        if value == "invul":
            return cls.INVULNERABLE
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


class MultiplierMatch(StrEnum):
    """How a transport slot multiplier is matched against a unit."""

    KEYWORD = "keyword"
    MODEL = "model"
