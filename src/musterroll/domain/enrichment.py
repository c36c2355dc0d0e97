"""Merge a parsed army list with catalog data.

:func:`enrich_army_list` is a pure function of the parsed list and the
reference index: it resolves the faction, detachment and army rule, then
enriches every unit independently.  Misses never raise; they leave the
affected field empty (or the raw text in place) and add a warning to the unit.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Sequence

from musterroll.interfaces import IReferenceIndex
from musterroll.schemas import DatasheetRow, ModelRow

from .enums import AbilityType, UnitRole
from .leaders import is_secondary_leader
from .models import (
    DatasheetID,
    DetachmentID,
    DetachmentInfo,
    EnhancementInfo,
    EnrichedArmyList,
    EnrichedUnit,
    EnrichedWeapon,
    FactionAbility,
    FactionID,
    LeaderMapping,
    ModelStats,
    ParsedArmyList,
    ParsedModel,
    ParsedUnit,
    StratagemInfo,
    UnitAbility,
)
from .name_matching import match_datasheet, match_detachment, match_enhancement, match_faction_id
from .normalize import strip_html
from .rules_config import DEFAULT_RULES, RulesConfig
from .transport import parse_transport_capacity
from .weapons import match_weapons

logger = logging.getLogger(__name__)

CHARACTER_KEYWORD = "Character"
INVULNERABLE_SAVE = "Invulnerable Save"


def enrich_army_list(
    parsed: ParsedArmyList, index: IReferenceIndex, rules: RulesConfig = DEFAULT_RULES
) -> EnrichedArmyList:
    """Build the display-ready army list for ``parsed``."""

    faction_id = match_faction_id(index, parsed.faction)
    faction = index.faction(faction_id) if faction_id else None

    detachment = None
    faction_ability = None
    if faction_id:
        detachment = _resolve_detachment(index, faction_id, parsed.detachment)
        faction_ability = _resolve_faction_ability(index, faction_id)

    display_names = assign_display_names(parsed.units, rules.matching.duplicate_name_marker)
    units = [
        _enrich_unit(unit, display, index, faction_id, rules)
        for unit, display in zip(parsed.units, display_names)
    ]

    unresolved = sum(1 for unit in units if unit.datasheet_id is None)
    logger.info(
        "enriched %r (%s): %d units, %d without datasheet",
        parsed.army_name,
        faction.name if faction else parsed.faction or "unknown faction",
        len(units),
        unresolved,
    )

    return EnrichedArmyList(
        army_name=parsed.army_name,
        faction_id=FactionID(faction_id) if faction_id else None,
        faction_name=faction.name if faction else parsed.faction,
        game_size=parsed.game_size,
        total_points=parsed.total_points,
        detachment=detachment,
        faction_ability=faction_ability,
        units=units,
        parse_warnings=list(parsed.parse_warnings),
    )


def assign_display_names(units: Sequence[ParsedUnit], marker: str = "#") -> list[str]:
    """Disambiguate repeated unit names: ``Boyz``, ``Boyz #2``, ``Boyz #3``."""

    seen: Counter[str] = Counter()
    names: list[str] = []
    for unit in units:
        seen[unit.name] += 1
        ordinal = seen[unit.name]
        names.append(unit.name if ordinal == 1 else f"{unit.name} {marker}{ordinal}")
    return names


def distribute_profile_counts(
    model_stats: Sequence[ModelStats], parsed_models: Sequence[ParsedModel], model_count: int
) -> dict[str, int]:
    """Estimate how many models of the unit use each catalog stat line.

    Stat lines whose name matches a parsed model (case-insensitively) take
    that model's count.  The models left over are split evenly across the
    remaining stat lines, at least one each.  This is a best-effort guess for
    exports that do not group models by stat line; it is not exact.
    """

    if not model_stats:
        return {}
    if len(model_stats) == 1:
        return {model_stats[0].name.lower(): model_count}

    parsed_counts: dict[str, int] = {}
    for model in parsed_models:
        parsed_counts.setdefault(model.name.lower(), model.count)

    result: dict[str, int] = {}
    unmatched: list[str] = []
    matched_sum = 0
    for stat in model_stats:
        key = stat.name.lower()
        if key in parsed_counts:
            result[key] = parsed_counts[key]
            matched_sum += parsed_counts[key]
        else:
            unmatched.append(key)

    if unmatched:
        remaining = max(model_count - matched_sum, len(unmatched))
        share = max(remaining // len(unmatched), 1)
        for key in unmatched:
            result[key] = share
    return result


# ---------------------------------------------------------------------------
# List-level resolution


def _resolve_detachment(
    index: IReferenceIndex, faction_id: str, detachment_name: str
) -> DetachmentInfo | None:
    row = match_detachment(index, faction_id, detachment_name)
    if row is None:
        logger.debug("detachment %r not found for faction %s", detachment_name, faction_id)
        return None

    rules_text = index.detachment_abilities(row.id)
    ability = None
    if rules_text:
        first = rules_text[0]
        ability = FactionAbility(name=first.name, description=strip_html(first.description))

    return DetachmentInfo(
        detachment_id=DetachmentID(row.id),
        name=row.name,
        ability=ability,
        stratagems=[
            StratagemInfo(
                name=s.name,
                type=s.type,
                cp_cost=s.cp_cost,
                description=strip_html(s.description),
                phase=s.phase,
                turn=s.turn,
            )
            for s in index.stratagems(row.id)
        ],
        enhancements=[
            EnhancementInfo(name=e.name, description=strip_html(e.description), cost=e.cost)
            for e in index.enhancements(row.id)
        ],
    )


def _resolve_faction_ability(index: IReferenceIndex, faction_id: str) -> FactionAbility | None:
    for ability in index.faction_abilities(faction_id):
        if ability.faction_id == faction_id:
            return FactionAbility(name=ability.name, description=strip_html(ability.description))
    return None


# ---------------------------------------------------------------------------
# Unit-level resolution


def _enrich_unit(
    unit: ParsedUnit,
    display_name: str,
    index: IReferenceIndex,
    faction_id: str | None,
    rules: RulesConfig,
) -> EnrichedUnit:
    warnings: list[str] = []

    datasheet = match_datasheet(index, faction_id, unit.name) if faction_id else None
    if datasheet is None:
        warnings.append(f'Could not match unit "{unit.name}" to a catalog datasheet')

    model_rows: Sequence[ModelRow] = index.models(datasheet.id) if datasheet else ()
    model_stats = [_model_stats(row, rules) for row in model_rows]

    weapons, equipment = _resolve_weapons(unit, datasheet, index, rules)

    abilities = _resolve_abilities(index, datasheet.id) if datasheet else []
    abilities.extend(_invulnerable_abilities(model_rows, abilities))

    enhancement = None
    if unit.enhancement:
        enhancement = _resolve_enhancement(index, faction_id, unit.enhancement)
        if enhancement is None:
            enhancement = EnhancementInfo(name=unit.enhancement)
            warnings.append(f'Could not match enhancement "{unit.enhancement}"')
        else:
            abilities.append(
                UnitAbility(enhancement.name, enhancement.description, AbilityType.ENHANCEMENT)
            )

    keywords: list[str] = []
    faction_keywords: list[str] = []
    if datasheet:
        for row in index.keywords(datasheet.id):
            (faction_keywords if row.is_faction_keyword else keywords).append(row.keyword)

    is_character = unit.role is UnitRole.CHARACTERS or CHARACTER_KEYWORD in keywords
    leader_mapping = None
    if is_character and datasheet:
        leader_mapping = _resolve_leader_mapping(index, datasheet.id, rules)

    transport_capacity = None
    if datasheet and datasheet.transport:
        transport_capacity = parse_transport_capacity(datasheet.transport)

    model_count = sum(model.count for model in unit.models)

    for warning in warnings:
        logger.debug("%s (%s): %s", display_name, unit.id, warning)

    return EnrichedUnit(
        instance_id=unit.id,
        display_name=display_name,
        name=unit.name,
        datasheet_id=DatasheetID(datasheet.id) if datasheet else None,
        role=unit.role,
        points=unit.points,
        is_warlord=unit.is_warlord,
        enhancement=enhancement,
        equipment=equipment,
        model_stats=model_stats,
        weapons=weapons,
        abilities=abilities,
        keywords=keywords,
        faction_keywords=faction_keywords,
        is_character=is_character,
        leader_mapping=leader_mapping,
        transport_capacity=transport_capacity,
        model_count=model_count,
        model_count_by_profile=distribute_profile_counts(model_stats, unit.models, model_count),
        match_warnings=warnings,
    )


def _with_plus(value: str, unknown: str) -> str:
    if not value or value == unknown:
        return unknown
    return value if value.endswith("+") else f"{value}+"


def _model_stats(row: ModelRow, rules: RulesConfig) -> ModelStats:
    unknown = rules.matching.unknown_stat
    return ModelStats(
        name=row.name,
        M=row.M,
        T=row.T,
        Sv=row.Sv,
        inv_sv=_with_plus(row.inv_sv, unknown),
        W=row.W,
        Ld=_with_plus(row.Ld, unknown),
        OC=row.OC,
    )


def _resolve_weapons(
    unit: ParsedUnit,
    datasheet: DatasheetRow | None,
    index: IReferenceIndex,
    rules: RulesConfig,
) -> tuple[list[EnrichedWeapon], list[str]]:
    parsed_weapons = [weapon for model in unit.models for weapon in model.weapons]
    equipment = list(unit.equipment)
    if datasheet is None:
        return match_weapons(parsed_weapons, (), rules), equipment

    weapons: list[EnrichedWeapon] = []
    for weapon in match_weapons(parsed_weapons, index.wargear(datasheet.id), rules):
        # Decorative wargear (tracks, armour plates...) never has a profile.
        if weapon.is_stub(rules.matching.unknown_stat):
            equipment.append(weapon.name)
        else:
            weapons.append(weapon)
    return weapons, equipment


def _resolve_abilities(index: IReferenceIndex, datasheet_id: str) -> list[UnitAbility]:
    abilities: list[UnitAbility] = []
    for row in index.abilities(datasheet_id):
        name, description = row.name, row.description
        if row.ability_id and (not name or not description):
            shared = index.ability(row.ability_id)
            if shared is not None:
                name = name or shared.name
                description = description or shared.description
        if not name:
            continue
        abilities.append(
            UnitAbility(name, strip_html(description), AbilityType.from_source(row.type))
        )
    return abilities


def _invulnerable_abilities(
    model_rows: Iterable[ModelRow], existing: Sequence[UnitAbility]
) -> list[UnitAbility]:
    seen = {a.description for a in existing if a.type is AbilityType.INVULNERABLE}
    extra: list[UnitAbility] = []
    for row in model_rows:
        description = strip_html(row.inv_sv_descr)
        if not description or description in seen:
            continue
        seen.add(description)
        extra.append(UnitAbility(INVULNERABLE_SAVE, description, AbilityType.INVULNERABLE))
    return extra


def _resolve_enhancement(
    index: IReferenceIndex, faction_id: str | None, name: str
) -> EnhancementInfo | None:
    if not faction_id:
        return None
    row = match_enhancement(index, faction_id, name)
    if row is None:
        return None
    return EnhancementInfo(name=row.name, description=strip_html(row.description), cost=row.cost)


def _resolve_leader_mapping(
    index: IReferenceIndex, datasheet_id: str, rules: RulesConfig
) -> LeaderMapping | None:
    names = []
    for target_id in index.leader_targets(datasheet_id):
        target = index.datasheet(target_id)
        if target is not None and target.name:
            names.append(target.name)
    if not names:
        return None
    return LeaderMapping(
        can_lead=tuple(names),
        is_secondary_leader=is_secondary_leader(index, datasheet_id, rules),
    )
