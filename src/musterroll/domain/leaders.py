"""Leader classification.

A *secondary* leader is a character whose rules let it join a unit that
already has a leader attached (an apothecary-style support character).  The
catalog has no flag for this, so it is inferred from the ability prose.
"""

from __future__ import annotations

from collections.abc import Iterable

from musterroll.interfaces import IReferenceIndex

from .normalize import strip_html
from .rules_config import DEFAULT_RULES, RulesConfig


def is_secondary_leader(
    index: IReferenceIndex, datasheet_id: str, rules: RulesConfig = DEFAULT_RULES
) -> bool:
    """Return True when any ability text of the datasheet allows co-attachment."""

    phrases = rules.matching.secondary_leader_phrases
    return any(_mentions(text, phrases) for text in _ability_texts(index, datasheet_id))


def _ability_texts(index: IReferenceIndex, datasheet_id: str) -> Iterable[str]:
    for ability in index.abilities(datasheet_id):
        yield ability.description
        if ability.ability_id:
            shared = index.ability(ability.ability_id)
            if shared is not None:
                yield shared.description
        yield ability.name

    datasheet = index.datasheet(datasheet_id)
    if datasheet is not None:
        yield datasheet.leader_footer


def _mentions(text: str, phrases: Iterable[str]) -> bool:
    plain = strip_html(text).lower()
    return bool(plain) and any(phrase in plain for phrase in phrases)
