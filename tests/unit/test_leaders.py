"""Unit tests for secondary-leader classification."""

from __future__ import annotations

from musterroll.domain.leaders import is_secondary_leader
from musterroll.domain.rules_config import MatchingRules, RulesConfig
from musterroll.reference import CatalogIndex, build_snapshot


def test_inline_description_phrase(orks_index):
    assert is_secondary_leader(orks_index, "D_PAINBOY") is True


def test_primary_leaders(orks_index):
    assert is_secondary_leader(orks_index, "D_WARBOSS") is False
    assert is_secondary_leader(orks_index, "D_GHAZ") is False


def test_unknown_datasheet(orks_index):
    assert is_secondary_leader(orks_index, "D_NOPE") is False


def test_shared_ability_description_is_scanned(orks_tables):
    tables = orks_tables
    tables["Abilities"].append(
        {
            "id": "A_SUPPORT",
            "name": "Support Character",
            "faction_id": "ORK",
            "description": "Can be attached to a unit that <b>already has a Character</b>.",
        }
    )
    tables["Datasheets_abilities"].append(
        {"datasheet_id": "D_WARBOSS", "line": "9", "ability_id": "A_SUPPORT", "type": "Faction"}
    )
    index = CatalogIndex(build_snapshot(tables))
    assert is_secondary_leader(index, "D_WARBOSS") is True


def test_leader_footer_is_scanned(orks_tables):
    tables = orks_tables
    for sheet in tables["Datasheets"]:
        if sheet["id"] == "D_GHAZ":
            sheet["leader_footer"] = "This model <i>can still be attached</i> to a led unit."
    index = CatalogIndex(build_snapshot(tables))
    assert is_secondary_leader(index, "D_GHAZ") is True


def test_phrases_come_from_rules(orks_index):
    rules = RulesConfig(matching=MatchingRules(secondary_leader_phrases=("da biggest",)))
    assert is_secondary_leader(orks_index, "D_WARBOSS", rules) is True
    assert is_secondary_leader(orks_index, "D_PAINBOY", rules) is False
