"""Weapon matching.

Resolves the weapon names of a parsed unit to the wargear rows of its
datasheet.  One parsed weapon can expand to several attack profiles, either
because the catalog stores several rows under the same name or because the
rows carry a profile suffix (``Gork's Klaw - strike`` / ``Gork's Klaw - sweep``).
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from musterroll.schemas import WargearRow

from .models import EnrichedWeapon, ParsedWeapon
from .normalize import normalize_name
from .rules_config import DEFAULT_RULES, RulesConfig

PROFILE_SEPARATORS = (" - ", " – ")
_LEADING_SEPARATOR = re.compile(r"^\s*[-–]\s*")


def match_weapons(
    parsed_weapons: Iterable[ParsedWeapon],
    wargear: Sequence[WargearRow],
    rules: RulesConfig = DEFAULT_RULES,
) -> list[EnrichedWeapon]:
    """Return one entry per matched profile, or a stub for unmatched weapons."""

    result: list[EnrichedWeapon] = []
    normalized_rows = [(normalize_name(row.name), row) for row in wargear]

    for weapon in parsed_weapons:
        wanted = normalize_name(weapon.name)
        matched = [row for name, row in normalized_rows if name == wanted]
        if not matched:
            prefixes = tuple(wanted + sep for sep in PROFILE_SEPARATORS)
            matched = [row for name, row in normalized_rows if name.startswith(prefixes)]

        if not matched:
            result.append(_stub(weapon, rules))
            continue

        for row in matched:
            profile = None
            if normalize_name(row.name) != wanted:
                profile = extract_profile_name(row.name, weapon.name)
            result.append(_from_row(weapon, row, profile, rules))

    return result


def extract_profile_name(full_name: str, base_name: str) -> str:
    """``("Gork's Klaw - strike", "Gork's Klaw")`` -> ``"Strike"``."""

    suffix = normalize_name(full_name)[len(normalize_name(base_name)) :]
    suffix = _LEADING_SEPARATOR.sub("", suffix)
    return suffix[:1].upper() + suffix[1:]


def _format_ap(ap: str, unknown: str) -> str:
    if not ap:
        return unknown
    if ap == "0" or ap.startswith("-"):
        return ap
    return f"-{ap}"


def _from_row(
    weapon: ParsedWeapon, row: WargearRow, profile: str | None, rules: RulesConfig
) -> EnrichedWeapon:
    melee = rules.matching.melee_range
    unknown = rules.matching.unknown_stat
    return EnrichedWeapon(
        name=weapon.name,
        profile_name=profile,
        count=weapon.count,
        range=f'{row.range}"' if row.range and row.range != melee else melee,
        type=row.type,
        A=row.A,
        BS_WS=f"{row.BS_WS}+" if row.BS_WS and row.BS_WS != "N/A" else unknown,
        S=row.S,
        AP=_format_ap(row.AP, unknown),
        D=row.D,
        keywords=row.description,
    )


def _stub(weapon: ParsedWeapon, rules: RulesConfig) -> EnrichedWeapon:
    unknown = rules.matching.unknown_stat
    return EnrichedWeapon(
        name=weapon.name,
        profile_name=None,
        count=weapon.count,
        range=unknown,
        type=unknown,
        A=unknown,
        BS_WS=unknown,
        S=unknown,
        AP=unknown,
        D=unknown,
    )
