"""Leader pairings and transport embarkation.

Every command takes the current :class:`AllocationState` and returns the next
one.  A rejected command returns the state it was given, untouched: the new
relations are computed on copies and only handed back once every check
passes.  Rejections are part of normal use (trying a combination that does
not fit), so they are logged at DEBUG rather than raised.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .enums import MultiplierMatch
from .models import (
    AllocationState,
    EnrichedArmyList,
    EnrichedUnit,
    TransportCapacity,
    UnitInstanceID,
)
from .rules_config import DEFAULT_RULES, RulesConfig

logger = logging.getLogger(__name__)

Members = tuple[UnitInstanceID, ...]
Relation = Mapping[UnitInstanceID, Members]


# ---------------------------------------------------------------------------
# Commands


def set_leader_pairing(
    army: EnrichedArmyList,
    state: AllocationState,
    character_id: str,
    unit_id: str | None,
    rules: RulesConfig = DEFAULT_RULES,
) -> AllocationState:
    """Attach ``character_id`` to ``unit_id``, or detach it when ``unit_id`` is None.

    An attached character rides with its host, so attaching drops any transport
    it was embarked on by itself.
    """

    character = army.unit(character_id)
    if character is None:
        return _reject("unknown character %s", character_id, state=state)

    if unit_id is not None and host_of(state, character_id) == unit_id:
        return state
    if unit_id == character_id:
        return _reject("%s cannot lead itself", character_id, state=state)

    pairings = _without(state.leader_pairings, character_id)
    if unit_id is None:
        if pairings == state.leader_pairings:
            return state
        return AllocationState(pairings, state.transport_allocations)

    target = army.unit(unit_id)
    if target is None:
        return _reject("unknown unit %s", unit_id, state=state)

    mapping = character.leader_mapping
    if mapping is None:
        return _reject("%s has no leader mapping", character.display_name, state=state)
    if target.name.lower() not in {name.lower() for name in mapping.can_lead}:
        return _reject(
            "%s cannot lead %s", character.display_name, target.display_name, state=state
        )

    existing = pairings.get(target.instance_id, ())
    if len(existing) >= rules.allocation.max_leaders_per_unit:
        return _reject("%s already has %d leaders", target.display_name, len(existing), state=state)
    if existing and not mapping.is_secondary_leader:
        primaries = [leader for leader in existing if not _is_secondary(army.unit(leader))]
        if primaries:
            return _reject(
                "%s and %s are both primary leaders",
                character.display_name,
                primaries[0],
                state=state,
            )

    pairings = {**pairings, target.instance_id: (*existing, character.instance_id)}
    candidate = AllocationState(
        pairings, _without(state.transport_allocations, character.instance_id)
    )

    transport_id = transport_of(candidate, target.instance_id)
    if transport_id is not None and not _fits(army, candidate, transport_id, rules):
        return _reject(
            "attaching %s overfills transport %s",
            character.display_name,
            transport_id,
            state=state,
        )
    return candidate


def assign_to_transport(
    army: EnrichedArmyList,
    state: AllocationState,
    unit_id: str,
    transport_id: str,
    rules: RulesConfig = DEFAULT_RULES,
) -> AllocationState:
    """Embark ``unit_id`` (with its attached leaders) on ``transport_id``."""

    if transport_of(state, unit_id) == transport_id:
        return state

    transport = army.unit(transport_id)
    if transport is None or transport.transport_capacity is None:
        return _reject("%s is not a transport", transport_id, state=state)
    unit = army.unit(unit_id)
    if unit is None or unit_id == transport_id:
        return _reject("cannot embark %s on %s", unit_id, transport_id, state=state)
    host_id = host_of(state, unit_id)
    if host_id is not None:
        return _reject("%s rides with %s", unit.display_name, host_id, state=state)

    blocked_by = excluded_by(unit, transport.transport_capacity)
    if blocked_by is not None:
        return _reject(
            "%s cannot transport %s (%s)",
            transport.display_name,
            unit.display_name,
            blocked_by,
            state=state,
        )

    allocations = _without(state.transport_allocations, unit_id)
    embarked = allocations.get(transport.instance_id, ())
    allocations = {**allocations, transport.instance_id: (*embarked, unit.instance_id)}
    candidate = AllocationState(state.leader_pairings, allocations)

    if not _fits(army, candidate, transport.instance_id, rules):
        return _reject(
            "%s does not fit in %s (%d/%d)",
            unit.display_name,
            transport.display_name,
            used_capacity(army, candidate, transport.instance_id, rules),
            transport.transport_capacity.base_capacity,
            state=state,
        )
    return candidate


def remove_from_transport(state: AllocationState, unit_id: str) -> AllocationState:
    """Disembark ``unit_id`` from whichever transport holds it."""

    allocations = _without(state.transport_allocations, unit_id)
    if allocations == state.transport_allocations:
        return state
    return AllocationState(state.leader_pairings, allocations)


# ---------------------------------------------------------------------------
# Read accessors


def host_of(state: AllocationState, character_id: str) -> UnitInstanceID | None:
    """Unit the character is attached to, if any."""

    return _holder(state.leader_pairings, character_id)


def transport_of(state: AllocationState, unit_id: str) -> UnitInstanceID | None:
    """Transport the unit is embarked on, if any."""

    return _holder(state.transport_allocations, unit_id)


def total_capacity(army: EnrichedArmyList, transport_id: str) -> int | None:
    transport = army.unit(transport_id)
    if transport is None or transport.transport_capacity is None:
        return None
    return transport.transport_capacity.base_capacity


def used_capacity(
    army: EnrichedArmyList,
    state: AllocationState,
    transport_id: str,
    rules: RulesConfig = DEFAULT_RULES,
) -> int:
    """Model slots taken by embarked units and the leaders attached to them."""

    transport = army.unit(transport_id)
    if transport is None or transport.transport_capacity is None:
        return 0
    capacity = transport.transport_capacity

    total = 0
    for unit_id in state.transport_allocations.get(transport.instance_id, ()):
        unit = army.unit(unit_id)
        if unit is None:
            continue
        total += model_slots(unit, capacity, rules)
        for leader_id in state.leader_pairings.get(unit.instance_id, ()):
            leader = army.unit(leader_id)
            if leader is not None:
                total += model_slots(leader, capacity, rules)
    return total


def model_slots(
    unit: EnrichedUnit, capacity: TransportCapacity, rules: RulesConfig = DEFAULT_RULES
) -> int:
    """Slots the unit occupies in a transport with the given capacity rule.

    Each stat line costs its model count times a per-model cost: a model
    multiplier naming that stat line wins, then the largest keyword
    multiplier the unit carries, then the default of one slot.
    """

    if not unit.model_stats:
        return unit.model_count * rules.allocation.default_model_slots

    by_model: dict[str, int] = {}
    by_keyword: dict[str, int] = {}
    for multiplier in capacity.multipliers:
        target = by_model if multiplier.match is MultiplierMatch.MODEL else by_keyword
        target[multiplier.name.lower()] = multiplier.slots

    keyword_cost = max(
        (by_keyword[k.lower()] for k in unit.keywords if k.lower() in by_keyword), default=0
    )

    total = 0
    for stats in unit.model_stats:
        cost = (
            by_model.get(stats.name.lower())
            or keyword_cost
            or rules.allocation.default_model_slots
        )
        total += model_count_for_profile(unit, stats.name) * cost
    return total


def model_count_for_profile(unit: EnrichedUnit, profile_name: str) -> int:
    count = unit.model_count_by_profile.get(profile_name.lower(), 0)
    if count > 0:
        return count
    if len(unit.model_stats) == 1:
        return unit.model_count
    return 1


def excluded_by(unit: EnrichedUnit, capacity: TransportCapacity) -> str | None:
    """Return the first exclusion matching the unit's keywords, name or stat lines."""

    haystack = [
        *(keyword.lower() for keyword in unit.keywords),
        unit.name.lower(),
        *(stats.name.lower() for stats in unit.model_stats),
    ]
    for exclusion in capacity.exclusions:
        needle = exclusion.lower()
        if any(needle in text for text in haystack):
            return exclusion
    return None


def eligible_leader_targets(army: EnrichedArmyList, character_id: str) -> list[EnrichedUnit]:
    """Units in the list whose name the character may lead.

    Other characters are skipped unless they are transports themselves.
    """

    character = army.unit(character_id)
    if character is None or character.leader_mapping is None:
        return []
    names = {name.lower() for name in character.leader_mapping.can_lead}
    return [
        unit
        for unit in army.units
        if unit.instance_id != character.instance_id
        and not (unit.is_character and unit.transport_capacity is None)
        and unit.name.lower() in names
    ]


def available_leader_slots(
    state: AllocationState, unit_id: str, rules: RulesConfig = DEFAULT_RULES
) -> int:
    attached = len(state.leader_pairings.get(UnitInstanceID(unit_id), ()))
    return max(rules.allocation.max_leaders_per_unit - attached, 0)


# ---------------------------------------------------------------------------
# Helpers


def _holder(relation: Relation, member_id: str) -> UnitInstanceID | None:
    for holder, members in relation.items():
        if member_id in members:
            return holder
    return None


def _without(relation: Relation, member_id: str) -> dict[UnitInstanceID, Members]:
    result: dict[UnitInstanceID, Members] = {}
    for holder, members in relation.items():
        kept = tuple(m for m in members if m != member_id)
        if kept:
            result[holder] = kept
    return result


def _is_secondary(unit: EnrichedUnit | None) -> bool:
    return bool(unit and unit.leader_mapping and unit.leader_mapping.is_secondary_leader)


def _fits(
    army: EnrichedArmyList, state: AllocationState, transport_id: str, rules: RulesConfig
) -> bool:
    total = total_capacity(army, transport_id)
    return total is not None and used_capacity(army, state, transport_id, rules) <= total


def _reject(message: str, *args: object, state: AllocationState) -> AllocationState:
    logger.debug("allocation rejected: " + message, *args)
    return state
