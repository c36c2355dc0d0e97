"""Dataclasses describing parsed and enriched army lists.

Three families live here:

* ``Parsed*`` types are produced once by the text parser and never change
  afterwards, so they are frozen and hold tuples.
* ``Enriched*`` types merge a parsed list with catalog data.  They are plain
  slotted dataclasses built in a single pass by the enrichment engine.
* :class:`AllocationState` is the snapshot of the two user-editable relations
  (leader pairings and transport embarkation).  Commands in
  :mod:`musterroll.domain.allocation` never mutate it; they return a new one.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import NewType

from .enums import AbilityType, MultiplierMatch, UnitRole

# --- Strongly typed identifiers -------------------------------------------------

UnitInstanceID = NewType("UnitInstanceID", str)
FactionID = NewType("FactionID", str)
DatasheetID = NewType("DatasheetID", str)
DetachmentID = NewType("DetachmentID", str)
AbilityID = NewType("AbilityID", str)


# --- Parser output --------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ParsedWeapon:
    """Weapon line under a model bullet."""

    name: str
    count: int = 1


@dataclass(frozen=True, slots=True)
class ParsedModel:
    """Model group inside a unit block."""

    name: str
    count: int = 1
    weapons: tuple[ParsedWeapon, ...] = ()


@dataclass(frozen=True, slots=True)
class ParsedUnit:
    """Unit block as exported by the roster tool."""

    id: UnitInstanceID
    name: str
    role: UnitRole
    points: int
    is_warlord: bool = False
    enhancement: str | None = None
    models: tuple[ParsedModel, ...] = ()
    equipment: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ParsedArmyList:
    """Whole exported list: header fields plus units in export order."""

    army_name: str
    faction: str
    detachment: str
    game_size: str
    total_points: int
    units: tuple[ParsedUnit, ...] = ()
    parse_warnings: tuple[str, ...] = ()


# --- Enriched output ------------------------------------------------------------


@dataclass(slots=True)
class ModelStats:
    """Display-ready stat line of one model profile."""

    name: str
    M: str
    T: str
    Sv: str
    inv_sv: str
    W: str
    Ld: str
    OC: str


@dataclass(slots=True)
class EnrichedWeapon:
    """One attack profile of a parsed weapon."""

    name: str
    profile_name: str | None
    count: int
    range: str
    type: str
    A: str
    BS_WS: str
    S: str
    AP: str
    D: str
    keywords: str = ""

    def is_stub(self, unknown: str = "-") -> bool:
        """True when no catalog profile backed this weapon."""

        return self.A == unknown and self.S == unknown


@dataclass(slots=True)
class UnitAbility:
    """Ability shown on a unit card."""

    name: str
    description: str
    type: AbilityType


@dataclass(frozen=True, slots=True)
class TransportMultiplier:
    """Slot cost override for models matching ``name``."""

    name: str
    slots: int
    match: MultiplierMatch


@dataclass(frozen=True, slots=True)
class TransportCapacity:
    """Structured form of a datasheet's transport prose."""

    base_capacity: int
    raw_text: str
    multipliers: tuple[TransportMultiplier, ...] = ()
    exclusions: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class LeaderMapping:
    """Units a character may join and whether it can share them."""

    can_lead: tuple[str, ...]
    is_secondary_leader: bool = False


@dataclass(slots=True)
class EnhancementInfo:
    """Enhancement taken by a unit (raw text when unresolved)."""

    name: str
    description: str = ""
    cost: str = ""


@dataclass(slots=True)
class StratagemInfo:
    """Detachment stratagem summary."""

    name: str
    type: str
    cp_cost: str
    description: str
    phase: str
    turn: str


@dataclass(slots=True)
class FactionAbility:
    """Army rule of the list's faction."""

    name: str
    description: str


@dataclass(slots=True)
class DetachmentInfo:
    """Detachment rule, stratagems and enhancements."""

    detachment_id: DetachmentID
    name: str
    ability: FactionAbility | None = None
    stratagems: list[StratagemInfo] = field(default_factory=list)
    enhancements: list[EnhancementInfo] = field(default_factory=list)


@dataclass(slots=True)
class EnrichedUnit:
    """Parsed unit merged with its catalog datasheet."""

    instance_id: UnitInstanceID
    display_name: str
    name: str
    datasheet_id: DatasheetID | None
    role: UnitRole
    points: int
    is_warlord: bool = False
    enhancement: EnhancementInfo | None = None
    equipment: list[str] = field(default_factory=list)
    model_stats: list[ModelStats] = field(default_factory=list)
    weapons: list[EnrichedWeapon] = field(default_factory=list)
    abilities: list[UnitAbility] = field(default_factory=list)
    keywords: list[str] = field(default_factory=list)
    faction_keywords: list[str] = field(default_factory=list)
    is_character: bool = False
    leader_mapping: LeaderMapping | None = None
    transport_capacity: TransportCapacity | None = None
    model_count: int = 0
    # lowercased catalog profile name -> parsed model count
    model_count_by_profile: dict[str, int] = field(default_factory=dict)
    match_warnings: list[str] = field(default_factory=list)


@dataclass(slots=True)
class EnrichedArmyList:
    """Army list ready for display and allocation."""

    army_name: str
    faction_id: FactionID | None
    faction_name: str
    game_size: str
    total_points: int
    detachment: DetachmentInfo | None = None
    faction_ability: FactionAbility | None = None
    units: list[EnrichedUnit] = field(default_factory=list)
    parse_warnings: list[str] = field(default_factory=list)

    def unit(self, instance_id: str) -> EnrichedUnit | None:
        """Return the unit with ``instance_id`` if present."""

        for unit in self.units:
            if unit.instance_id == instance_id:
                return unit
        return None


# --- Allocation state -----------------------------------------------------------


@dataclass(frozen=True, slots=True)
class AllocationState:
    """Leader pairings (host -> leaders) and embarkations (transport -> units).

    Hosts and transports with no entries are dropped rather than kept with an
    empty tuple, so two states describing the same relations compare equal.
    """

    leader_pairings: Mapping[UnitInstanceID, tuple[UnitInstanceID, ...]] = field(
        default_factory=dict
    )
    transport_allocations: Mapping[UnitInstanceID, tuple[UnitInstanceID, ...]] = field(
        default_factory=dict
    )


EMPTY_ALLOCATION = AllocationState()
