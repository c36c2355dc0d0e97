"""Declarative rule configuration for the domain layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AllocationRules:
    """Limits applied to leader pairings and transport embarkation."""

    max_leaders_per_unit: int = 2
    default_model_slots: int = 1


@dataclass(frozen=True, slots=True)
class MatchingRules:
    """Constants used while resolving free text against the catalog."""

    unknown_stat: str = "-"
    melee_range: str = "Melee"
    duplicate_name_marker: str = "#"
    secondary_leader_phrases: tuple[str, ...] = (
        "already been attached",
        "already has a character",
        "already has a character unit",
        "even if one character",
        "even if a character",
        "can be attached as if",
        "can still be attached",
    )


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Top-level configuration container for all subsystems."""

    allocation: AllocationRules = AllocationRules()
    matching: MatchingRules = MatchingRules()


DEFAULT_RULES = RulesConfig()
