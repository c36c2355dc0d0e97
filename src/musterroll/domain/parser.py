"""Army list text parser.

Turns the plain-text export of the roster app into a :class:`ParsedArmyList`
with a line-by-line state machine.  The export is not a formal grammar, so
the parser never raises: lines it does not recognise are skipped and missing
header lines leave empty fields behind.

Layout of an export::

    Da Green Tide (2000 Points)        <- army name + declared total
    Orks                               <- faction
    War Horde                          <- detachment
    Strike Force (2000 Points)         <- game size, ends the header

    CHARACTERS                         <- section header
    Warboss (65 Points)                <- unit
    • Warlord                          <- warlord marker
    • Enhancements: Kunnin' but Brutal <- enhancement marker
    • 1x Warboss                       <- model (first-level bullet)
      ◦ 1x Power Klaw                  <- weapon (second-level bullet)

    Exported with App Version: ...     <- footer, discarded
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from .enums import UnitRole
from .models import ParsedArmyList, ParsedModel, ParsedUnit, ParsedWeapon, UnitInstanceID

logger = logging.getLogger(__name__)

HEADER_LINE_COUNT = 4

ROLE_MAP: dict[str, UnitRole] = {
    "characters": UnitRole.CHARACTERS,
    "character": UnitRole.CHARACTERS,
    "battleline": UnitRole.BATTLELINE,
    "dedicated transports": UnitRole.DEDICATED_TRANSPORTS,
    "dedicated transport": UnitRole.DEDICATED_TRANSPORTS,
    "other datasheets": UnitRole.OTHER,
    "other": UnitRole.OTHER,
    "allied units": UnitRole.ALLIED,
    "fortifications": UnitRole.FORTIFICATION,
    "fortification": UnitRole.FORTIFICATION,
}

_HEADER_FIELDS = ("army name", "faction", "detachment", "game size")

# "Army Name (2000 Points)" or "Army Name (2,000 Points)"
_POINTS_LINE_RE = re.compile(r"^(.+?)\s*\((\d[\d,]*)\s*[Pp]oints?\)$")
_SECTION_HEADER_RE = re.compile(r"^[A-Z][A-Z\s]+$")
_MODEL_RE = re.compile(r"^•\s+(?:(\d+)x\s+)?(.+)$")
_WEAPON_RE = re.compile(r"^◦\s+(?:(\d+)x\s+)?(.+)$")
_ENHANCEMENT_RE = re.compile(r"^•\s+Enhancements?:\s*(.+)$")
_WARLORD_RE = re.compile(r"^•\s+Warlord$", re.IGNORECASE)
_FOOTER_RE = re.compile(r"^Exported with App Version", re.IGNORECASE)
_BULLETS = ("•", "◦")


@dataclass(slots=True)
class _ModelDraft:
    name: str
    count: int
    weapons: list[ParsedWeapon] = field(default_factory=list)


@dataclass(slots=True)
class _UnitDraft:
    id: UnitInstanceID
    name: str
    role: UnitRole
    points: int
    is_warlord: bool = False
    enhancement: str | None = None
    models: list[_ModelDraft] = field(default_factory=list)


def _to_int(raw: str | None, default: int = 1) -> int:
    if not raw:
        return default
    return int(raw.replace(",", ""))


class _ArmyListParser:
    """Single-use state machine; one instance per ``parse_army_list`` call."""

    def __init__(self) -> None:
        self.header: list[str] = []
        self.army_name = ""
        self.total_points = 0
        self.role = UnitRole.OTHER
        self.unit: _UnitDraft | None = None
        self.model: _ModelDraft | None = None
        self.units: list[ParsedUnit] = []
        self._next_id = 0

    def feed(self, line: str) -> None:
        if len(self.header) < HEADER_LINE_COUNT:
            self._feed_header(line)
            return

        if _SECTION_HEADER_RE.match(line):
            role = ROLE_MAP.get(line.lower().strip())
            if role is not None:
                self._finish_unit()
                self.role = role
                return

        unit_match = _POINTS_LINE_RE.match(line)
        if unit_match and not line.startswith(_BULLETS):
            self._finish_unit()
            self._next_id += 1
            self.unit = _UnitDraft(
                id=UnitInstanceID(f"unit_{self._next_id}"),
                name=unit_match.group(1).strip(),
                role=self.role,
                points=_to_int(unit_match.group(2), default=0),
            )
            return

        if self.unit is not None:
            enhancement = _ENHANCEMENT_RE.match(line)
            if enhancement:
                self.unit.enhancement = enhancement.group(1).strip()
                return
            if _WARLORD_RE.match(line):
                self.unit.is_warlord = True
                return

        weapon = _WEAPON_RE.match(line)
        if weapon and self.model is not None:
            self.model.weapons.append(
                ParsedWeapon(name=weapon.group(2).strip(), count=_to_int(weapon.group(1)))
            )
            return

        model = _MODEL_RE.match(line)
        if model and self.unit is not None:
            self._finish_model()
            self.model = _ModelDraft(
                name=model.group(2).strip(), count=max(_to_int(model.group(1)), 1)
            )
            return

        logger.debug("skipping unrecognised line %r", line)

    def _feed_header(self, line: str) -> None:
        if not self.header:
            match = _POINTS_LINE_RE.match(line)
            if match:
                self.army_name = match.group(1).strip()
                self.total_points = _to_int(match.group(2), default=0)
            else:
                self.army_name = line
        self.header.append(line)

    def _finish_model(self) -> None:
        if self.model is not None and self.unit is not None:
            self.unit.models.append(self.model)
        self.model = None

    def _finish_unit(self) -> None:
        if self.unit is None:
            return
        self._finish_model()
        self.units.append(_reclassify(self.unit))
        self.unit = None

    def result(self) -> ParsedArmyList:
        self._finish_unit()
        header = self.header + [""] * (HEADER_LINE_COUNT - len(self.header))
        warnings = tuple(
            f"Army list header is missing the {label} line"
            for label in _HEADER_FIELDS[len(self.header) :]
        )
        return ParsedArmyList(
            army_name=self.army_name,
            faction=header[1],
            detachment=header[2],
            game_size=header[3],
            total_points=self.total_points,
            units=tuple(self.units),
            parse_warnings=warnings,
        )


def _freeze(model: _ModelDraft) -> ParsedModel:
    return ParsedModel(name=model.name, count=model.count, weapons=tuple(model.weapons))


def _reclassify(unit: _UnitDraft) -> ParsedUnit:
    """Tell flat wargear lists apart from named model groups.

    The exporter uses the same bullet for "model with weapons underneath" and
    for "one item of wargear".  When no bullet received sub-weapons every
    bullet is wargear of a single model named after the unit.  When only some
    did, bullets repeating a modelled name stay models and the rest become
    equipment.
    """

    modelled = [m for m in unit.models if m.weapons]
    bare = [m for m in unit.models if not m.weapons]
    equipment: list[str] = []

    if bare and not modelled:
        implicit = ParsedModel(
            name=unit.name,
            count=1,
            weapons=tuple(ParsedWeapon(name=m.name, count=m.count) for m in bare),
        )
        models: tuple[ParsedModel, ...] = (implicit,)
    elif bare:
        modelled_names = {m.name for m in modelled}
        kept: list[ParsedModel] = []
        for m in unit.models:
            if m.weapons or m.name in modelled_names:
                kept.append(_freeze(m))
            else:
                equipment.extend([m.name] * m.count)
        models = tuple(kept)
    else:
        models = tuple(_freeze(m) for m in unit.models)

    return ParsedUnit(
        id=unit.id,
        name=unit.name,
        role=unit.role,
        points=unit.points,
        is_warlord=unit.is_warlord,
        enhancement=unit.enhancement,
        models=models,
        equipment=tuple(equipment),
    )


def parse_army_list(text: str) -> ParsedArmyList:
    """Parse an exported army list.  Never raises on malformed input."""

    parser = _ArmyListParser()
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or _FOOTER_RE.match(line):
            continue
        parser.feed(line)
    return parser.result()
