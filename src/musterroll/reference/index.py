"""In-memory catalog index implementing :class:`IReferenceIndex`."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence
from typing import TypeVar

from musterroll.domain.normalize import normalize_name
from musterroll.schemas import (
    AbilityRow,
    CatalogSnapshot,
    DatasheetAbilityRow,
    DatasheetRow,
    DetachmentAbilityRow,
    DetachmentRow,
    EnhancementRow,
    FactionRow,
    KeywordRow,
    ModelRow,
    StratagemRow,
    WargearRow,
)

RowT = TypeVar("RowT")


def _group(rows: Iterable[RowT], key: str) -> dict[str, list[RowT]]:
    grouped: dict[str, list[RowT]] = defaultdict(list)
    for row in rows:
        grouped[getattr(row, key)].append(row)
    return dict(grouped)


class CatalogIndex:
    """Read-only lookups over a validated :class:`CatalogSnapshot`.

    Built once; nothing mutates it afterwards, so a single instance can be
    shared by every import for the lifetime of the process.
    """

    def __init__(self, snapshot: CatalogSnapshot) -> None:
        self.snapshot = snapshot
        self._factions = {f.id: f for f in snapshot.factions}
        self._faction_names = {normalize_name(f.name): f.id for f in snapshot.factions}
        self._datasheets = {d.id: d for d in snapshot.datasheets}
        self._datasheet_names: dict[str, dict[str, str]] = defaultdict(dict)
        for sheet in snapshot.datasheets:
            self._datasheet_names[sheet.faction_id][normalize_name(sheet.name)] = sheet.id
        self._detachments = _group(snapshot.detachments, "faction_id")
        self._models = _group(snapshot.models, "datasheet_id")
        self._wargear = _group(snapshot.wargear, "datasheet_id")
        self._abilities = _group(snapshot.abilities, "datasheet_id")
        self._keywords = _group(snapshot.keywords, "datasheet_id")
        self._leaders: dict[str, list[str]] = defaultdict(list)
        for link in snapshot.leaders:
            self._leaders[link.leader_id].append(link.attached_id)
        self._enhancements = _group(snapshot.enhancements, "detachment_id")
        self._faction_enhancements = _group(snapshot.enhancements, "faction_id")
        self._detachment_abilities = _group(snapshot.detachment_abilities, "detachment_id")
        self._stratagems = _group(snapshot.stratagems, "detachment_id")
        self._shared = {a.id: a for a in snapshot.shared_abilities}
        self._faction_shared = _group(snapshot.shared_abilities, "faction_id")

    @property
    def last_update(self) -> str:
        return self.snapshot.last_update

    def faction_id_by_name(self, name: str) -> str | None:
        return self._faction_names.get(normalize_name(name))

    def faction(self, faction_id: str) -> FactionRow | None:
        return self._factions.get(faction_id)

    def datasheet_by_name(self, faction_id: str, name: str) -> DatasheetRow | None:
        datasheet_id = self._datasheet_names.get(faction_id, {}).get(normalize_name(name))
        if datasheet_id is None:
            return None
        return self._datasheets.get(datasheet_id)

    def datasheet(self, datasheet_id: str) -> DatasheetRow | None:
        return self._datasheets.get(datasheet_id)

    def models(self, datasheet_id: str) -> Sequence[ModelRow]:
        return self._models.get(datasheet_id, [])

    def wargear(self, datasheet_id: str) -> Sequence[WargearRow]:
        return self._wargear.get(datasheet_id, [])

    def abilities(self, datasheet_id: str) -> Sequence[DatasheetAbilityRow]:
        return self._abilities.get(datasheet_id, [])

    def keywords(self, datasheet_id: str) -> Sequence[KeywordRow]:
        return self._keywords.get(datasheet_id, [])

    def leader_targets(self, datasheet_id: str) -> Sequence[str]:
        return self._leaders.get(datasheet_id, [])

    def ability(self, ability_id: str) -> AbilityRow | None:
        return self._shared.get(ability_id)

    def faction_abilities(self, faction_id: str) -> Sequence[AbilityRow]:
        return self._faction_shared.get(faction_id, [])

    def detachment_by_name(self, faction_id: str, name: str) -> DetachmentRow | None:
        wanted = normalize_name(name)
        for detachment in self._detachments.get(faction_id, []):
            if normalize_name(detachment.name) == wanted:
                return detachment
        return None

    def detachment_abilities(self, detachment_id: str) -> Sequence[DetachmentAbilityRow]:
        return self._detachment_abilities.get(detachment_id, [])

    def stratagems(self, detachment_id: str) -> Sequence[StratagemRow]:
        return self._stratagems.get(detachment_id, [])

    def enhancements(self, detachment_id: str) -> Sequence[EnhancementRow]:
        return self._enhancements.get(detachment_id, [])

    def enhancement_by_name(self, faction_id: str, name: str) -> EnhancementRow | None:
        wanted = normalize_name(name)
        for enhancement in self._faction_enhancements.get(faction_id, []):
            if normalize_name(enhancement.name) == wanted:
                return enhancement
        return None
