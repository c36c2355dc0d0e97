"""Pytest configuration to ensure the `src` package layout is importable.

This adds the `src/` directory to `sys.path` so tests can import the
`musterroll` package without requiring an editable install in CI.  It also
provides a small Orks catalog and a few exported lists shared by the unit and
integration suites.
"""

import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from musterroll.reference import CatalogIndex, build_snapshot  # noqa: E402
from musterroll.schemas import CatalogSnapshot  # noqa: E402

BATTLEWAGON_TRANSPORT = (
    "This model has a <b>transport capacity of 22 Orks Infantry</b> models. "
    "Each <b>Mega Armour</b> or <b>Jump Pack</b> model takes up the space of 2 models. "
    "The Ghazghkull Thraka model takes up the space of 4 models."
)
TRUKK_TRANSPORT = (
    "This model has a transport capacity of 12 <b>Orks Infantry</b> models. "
    "It cannot transport <b>Jump Pack</b>, <b>Mega Armour</b> or "
    "<b>Ghazghkull Thraka</b> models."
)


def _datasheet(id_: str, name: str, role: str, transport: str = "") -> dict[str, str]:
    return {
        "id": id_,
        "name": name,
        "faction_id": "ORK",
        "source_id": "SRC1",
        "role": role,
        "transport": transport,
        "virtual": "false",
    }


def _model(
    datasheet_id: str, line: str, name: str, inv_sv: str = "", inv_descr: str = ""
) -> dict[str, str]:
    return {
        "datasheet_id": datasheet_id,
        "line": line,
        "name": name,
        "M": '6"',
        "T": "5",
        "Sv": "4+",
        "inv_sv": inv_sv,
        "inv_sv_descr": inv_descr,
        "W": "6",
        "Ld": "6",
        "OC": "1",
    }


def _weapon(
    datasheet_id: str, name: str, range_: str, skill: str, ap: str, description: str = ""
) -> dict[str, str]:
    return {
        "datasheet_id": datasheet_id,
        "line": "1",
        "line_in_wargear": "1",
        "name": name,
        "description": description,
        "range": range_,
        "type": "Melee" if range_ == "Melee" else "Ranged",
        "A": "3",
        "BS_WS": skill,
        "S": "5",
        "AP": ap,
        "D": "1",
    }


def _keywords(datasheet_id: str, *keywords: str, faction: str = "Orks") -> list[dict[str, str]]:
    rows = [
        {"datasheet_id": datasheet_id, "keyword": kw, "is_faction_keyword": "false"}
        for kw in keywords
    ]
    rows.append({"datasheet_id": datasheet_id, "keyword": faction, "is_faction_keyword": "true"})
    return rows


def _orks_tables() -> dict[str, list[dict[str, str]]]:

    return {
        "Factions": [{"id": "ORK", "name": "Orks", "link": ""}],
        "Detachments": [
            {"id": "DET_WH", "faction_id": "ORK", "name": "War Horde", "type": ""},
        ],
        "Datasheets": [
            _datasheet("D_WARBOSS", "Warboss", "Characters"),
            _datasheet("D_PAINBOY", "Painboy", "Characters"),
            _datasheet("D_GHAZ", "Ghazghkull Thraka", "Epic Hero"),
            _datasheet("D_BOYZ", "Boyz", "Battleline"),
            _datasheet("D_TRUKK", "Trukk", "Dedicated Transport", TRUKK_TRANSPORT),
            _datasheet("D_BW", "Battlewagon", "Other", BATTLEWAGON_TRANSPORT),
            _datasheet("D_STORM", "Stormboyz", "Other"),
            _datasheet("D_MEGA", "Meganobz", "Other"),
        ],
        "Datasheets_models": [
            _model("D_WARBOSS", "1", "Warboss"),
            _model("D_PAINBOY", "1", "Painboy"),
            _model("D_GHAZ", "1", "Ghazghkull Thraka", "4", "Ghazghkull has a 4+ invulnerable save."),
            _model("D_GHAZ", "2", "Makari", "2", "Makari has a 2+ invulnerable save."),
            _model("D_BOYZ", "1", "Boss Nob"),
            _model("D_BOYZ", "2", "Boy"),
            _model("D_TRUKK", "1", "Trukk"),
            _model("D_BW", "1", "Battlewagon"),
            _model("D_STORM", "1", "Boss Nob"),
            _model("D_STORM", "2", "Stormboy"),
            _model("D_MEGA", "1", "Meganob"),
        ],
        "Datasheets_wargear": [
            _weapon("D_WARBOSS", "Power klaw", "Melee", "2", "2"),
            _weapon("D_WARBOSS", "Kombi-weapon", "24", "5", "0", "anti-infantry 4+"),
            _weapon("D_PAINBOY", "Power klaw", "Melee", "3", "2"),
            _weapon("D_PAINBOY", "'Urty syringe", "Melee", "3", "-1", "anti-infantry 4+"),
            _weapon("D_GHAZ", "Gork's Klaw - strike", "Melee", "2", "-2"),
            _weapon("D_GHAZ", "Gork's Klaw - sweep", "Melee", "2", "1"),
            _weapon("D_GHAZ", "Mork's Roar", "18", "5", "0"),
            _weapon("D_GHAZ", "Makari's stabba", "Melee", "2", "1"),
            _weapon("D_BOYZ", "Choppa", "Melee", "3", "1"),
            _weapon("D_BOYZ", "Slugga", "12", "5", "0", "pistol"),
            _weapon("D_BOYZ", "Power klaw", "Melee", "4", "2"),
            _weapon("D_TRUKK", "Big shoota", "36", "5", "0", "rapid fire 2"),
            _weapon("D_BW", "Kannon", "36", "5", "1"),
            _weapon("D_BW", "Lobba", "48", "5", "0", "indirect fire"),
            _weapon("D_STORM", "Choppa", "Melee", "3", "1"),
            _weapon("D_STORM", "Slugga", "12", "5", "0", "pistol"),
            _weapon("D_MEGA", "Power klaw", "Melee", "4", "2"),
        ],
        "Datasheets_abilities": [
            {"datasheet_id": "D_WARBOSS", "line": "1", "ability_id": "A_LEADER", "type": "Core"},
            {"datasheet_id": "D_WARBOSS", "line": "2", "ability_id": "A_WAAAGH", "type": "Faction"},
            {
                "datasheet_id": "D_WARBOSS",
                "line": "3",
                "name": "Da Biggest and da Best",
                "description": "While this model is leading a unit, add 4 to its <b>Attacks</b>.",
                "type": "Datasheet",
            },
            {"datasheet_id": "D_PAINBOY", "line": "1", "ability_id": "A_LEADER", "type": "Core"},
            {
                "datasheet_id": "D_PAINBOY",
                "line": "2",
                "name": "Sawbonez",
                "description": (
                    "This model can be attached to a <b>Boyz</b> unit even if one "
                    "<b>Character</b> unit has already been attached to it."
                ),
                "type": "Datasheet",
            },
            {"datasheet_id": "D_GHAZ", "line": "1", "ability_id": "A_LEADER", "type": "Core"},
            {
                "datasheet_id": "D_GHAZ",
                "line": "2",
                "name": "Prophet of Da Great Waaagh!",
                "description": "Add 1 to Hit and Wound rolls.",
                "type": "Datasheet",
            },
            {
                "datasheet_id": "D_TRUKK",
                "line": "1",
                "name": "Deadly Demise",
                "description": "",
                "ability_id": "A_DEMISE",
                "type": "Core",
                "parameter": "D3",
            },
        ],
        "Datasheets_keywords": [
            *_keywords("D_WARBOSS", "Infantry", "Character", "Warboss"),
            *_keywords("D_PAINBOY", "Infantry", "Character", "Painboy"),
            *_keywords("D_GHAZ", "Infantry", "Character", "Epic Hero", "Ghazghkull Thraka"),
            *_keywords("D_BOYZ", "Infantry", "Battleline", "Boyz"),
            *_keywords("D_TRUKK", "Vehicle", "Transport", "Dedicated Transport", "Trukk"),
            *_keywords("D_BW", "Vehicle", "Transport", "Battlewagon"),
            *_keywords("D_STORM", "Infantry", "Jump Pack", "Fly", "Stormboyz"),
            *_keywords("D_MEGA", "Infantry", "Mega Armour", "Meganobz"),
        ],
        "Datasheets_leader": [
            {"leader_id": "D_WARBOSS", "attached_id": "D_BOYZ"},
            {"leader_id": "D_WARBOSS", "attached_id": "D_MEGA"},
            {"leader_id": "D_PAINBOY", "attached_id": "D_BOYZ"},
            {"leader_id": "D_PAINBOY", "attached_id": "D_MEGA"},
            {"leader_id": "D_GHAZ", "attached_id": "D_MEGA"},
            {"leader_id": "D_GHAZ", "attached_id": "D_BOYZ"},
        ],
        "Enhancements": [
            {
                "id": "E_KUNNIN",
                "faction_id": "ORK",
                "name": "Kunnin' but Brutal",
                "cost": "15",
                "detachment": "War Horde",
                "detachment_id": "DET_WH",
                "description": "<p>The bearer can <i>Fall Back</i> and still charge.</p>",
            },
            {
                "id": "E_HEAD",
                "faction_id": "ORK",
                "name": "Headwoppa's Killchoppa",
                "cost": "20",
                "detachment": "War Horde",
                "detachment_id": "DET_WH",
                "description": "Improve the Strength of melee weapons by 1.",
            },
        ],
        "Detachment_abilities": [
            {
                "id": "DA_STUCK",
                "faction_id": "ORK",
                "name": "Get Stuck In",
                "description": "Melee weapons have <b>[SUSTAINED HITS 1]</b>.",
                "detachment": "War Horde",
                "detachment_id": "DET_WH",
            },
        ],
        "Stratagems": [
            {
                "id": "S_CARNAGE",
                "faction_id": "ORK",
                "name": "Unbridled Carnage",
                "type": "War Horde - Battle Tactic Stratagem",
                "cp_cost": "1",
                "turn": "Either player's turn",
                "phase": "Fight phase",
                "detachment": "War Horde",
                "detachment_id": "DET_WH",
                "description": "Critical hits on <b>5+</b>.",
            },
            {
                "id": "S_ORKS",
                "faction_id": "ORK",
                "name": "Orks Is Never Beaten",
                "type": "War Horde - Epic Deed Stratagem",
                "cp_cost": "2",
                "turn": "Either player's turn",
                "phase": "Fight phase",
                "detachment": "War Horde",
                "detachment_id": "DET_WH",
                "description": "Models fight on death.",
            },
        ],
        "Abilities": [
            {"id": "A_LEADER", "name": "Leader", "faction_id": "", "description": "Can lead."},
            {
                "id": "A_WAAAGH",
                "name": "Waaagh!",
                "faction_id": "ORK",
                "description": "Once per battle, call a <b>Waaagh!</b>.",
            },
            {
                "id": "A_DEMISE",
                "name": "Deadly Demise",
                "faction_id": "",
                "description": "Roll one D6 when this model is destroyed.",
            },
        ],
        "Last_update": [{"last_update": "2026-09-30 12:00:00"}],
    }


@pytest.fixture
def orks_tables() -> dict[str, list[dict[str, str]]]:
    """Raw export tables for a tiny Orks catalog; a fresh copy per test."""

    return _orks_tables()


@pytest.fixture
def orks_snapshot(orks_tables) -> CatalogSnapshot:
    return build_snapshot(orks_tables)


@pytest.fixture
def orks_index(orks_snapshot: CatalogSnapshot) -> CatalogIndex:
    return CatalogIndex(orks_snapshot)


@pytest.fixture
def sample_list() -> str:
    """Compact list touching every catalog datasheet plus one unknown unit."""

    return "\n".join(
        [
            "Waaagh Test (1000 Points)",
            "Orks",
            "War Horde",
            "Incursion (1,000 Points)",
            "",
            "CHARACTERS",
            "",
            "Warboss (80 Points)",
            "• Warlord",
            "• Enhancements: Kunnin’ but Brutal",
            "• 1x Warboss",
            "  ◦ 1x Power Klaw",
            "  ◦ 1x Kombi-weapon",
            "",
            "Painboy (70 Points)",
            "• 1x Painboy",
            "  ◦ 1x ‘Urty Syringe",
            "  ◦ 1x Power Klaw",
            "",
            "Ghazghkull Thraka (235 Points)",
            "• 1x Ghazghkull Thraka",
            "  ◦ 1x Gork’s Klaw",
            "  ◦ 1x Mork’s Roar",
            "• 1x Makari",
            "  ◦ 1x Makari’s stabba",
            "",
            "BATTLELINE",
            "",
            "Boyz (80 Points)",
            "• 1x Boss Nob",
            "  ◦ 1x Power klaw",
            "  ◦ 1x Slugga",
            "• 9x Boy",
            "  ◦ 9x Choppa",
            "  ◦ 9x Slugga",
            "",
            "Boyz (80 Points)",
            "• 1x Boss Nob",
            "  ◦ 1x Power klaw",
            "  ◦ 1x Slugga",
            "• 9x Boy",
            "  ◦ 9x Choppa",
            "  ◦ 9x Slugga",
            "",
            "DEDICATED TRANSPORTS",
            "",
            "Trukk (70 Points)",
            "• 1x Big shoota",
            "• 1x Spiked wheels",
            "",
            "OTHER DATASHEETS",
            "",
            "Battlewagon (160 Points)",
            "• 1x Kannon",
            "• 1x Lobba",
            "• 1x ‘Ard Case",
            "",
            "Stormboyz (65 Points)",
            "• 1x Boss Nob",
            "  ◦ 1x Choppa",
            "  ◦ 1x Slugga",
            "• 4x Stormboy",
            "  ◦ 4x Choppa",
            "  ◦ 4x Slugga",
            "",
            "Meganobz (60 Points)",
            "• 2x Meganob",
            "  ◦ 2x Power klaw",
            "",
            "Mekboy Workshop (40 Points)",
            "• 1x Mekboy Workshop",
            "  ◦ 1x Big Zappa",
            "",
            "Exported with App Version: v1.46.2 (1), Data Version: v732",
        ]
    )
