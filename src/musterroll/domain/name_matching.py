"""Resolve free-text names from an army list to catalog records.

Matching is exact after :func:`normalize_name`; there is no fuzzy fallback.
A miss returns ``None`` and the caller decides what warning to record.
"""

from __future__ import annotations

from musterroll.interfaces import IReferenceIndex
from musterroll.schemas import DatasheetRow, DetachmentRow, EnhancementRow

from .normalize import normalize_name


def match_faction_id(index: IReferenceIndex, faction_name: str) -> str | None:
    if not normalize_name(faction_name):
        return None
    return index.faction_id_by_name(faction_name)


def match_datasheet(index: IReferenceIndex, faction_id: str, unit_name: str) -> DatasheetRow | None:
    if not normalize_name(unit_name):
        return None
    return index.datasheet_by_name(faction_id, unit_name)


def match_detachment(
    index: IReferenceIndex, faction_id: str, detachment_name: str
) -> DetachmentRow | None:
    if not normalize_name(detachment_name):
        return None
    return index.detachment_by_name(faction_id, detachment_name)


def match_enhancement(
    index: IReferenceIndex, faction_id: str, enhancement_name: str
) -> EnhancementRow | None:
    if not normalize_name(enhancement_name):
        return None
    return index.enhancement_by_name(faction_id, enhancement_name)
