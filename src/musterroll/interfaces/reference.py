"""Reference Index Protocol Interface.

This module defines the read-only lookup interface the matching and
enrichment code consumes.  Any object satisfying it can back an import; the
bundled implementation is :class:`musterroll.reference.CatalogIndex`.
"""

from collections.abc import Sequence
from typing import Protocol

from musterroll.schemas import (
    AbilityRow,
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


class IReferenceIndex(Protocol):
    """Protocol defining catalog lookups keyed by identifiers and normalized names.

    Name arguments are free text; implementations normalise them (see
    :func:`musterroll.domain.normalize.normalize_name`) before comparing.
    Single-record lookups return ``None`` on a miss, collection lookups an
    empty sequence.
    """

    def faction_id_by_name(self, name: str) -> str | None:
        """Resolve a faction name to its identifier."""
        ...

    def faction(self, faction_id: str) -> FactionRow | None:
        """Return the faction record."""
        ...

    def datasheet_by_name(self, faction_id: str, name: str) -> DatasheetRow | None:
        """Resolve a unit name within a faction."""
        ...

    def datasheet(self, datasheet_id: str) -> DatasheetRow | None:
        """Return the datasheet record."""
        ...

    def models(self, datasheet_id: str) -> Sequence[ModelRow]:
        """Model stat lines of a datasheet, in catalog order."""
        ...

    def wargear(self, datasheet_id: str) -> Sequence[WargearRow]:
        """Weapon profiles of a datasheet, in catalog order."""
        ...

    def abilities(self, datasheet_id: str) -> Sequence[DatasheetAbilityRow]:
        """Datasheet-scoped ability rows."""
        ...

    def keywords(self, datasheet_id: str) -> Sequence[KeywordRow]:
        """Keyword rows, faction keywords included."""
        ...

    def leader_targets(self, datasheet_id: str) -> Sequence[str]:
        """Datasheet identifiers the given datasheet may lead."""
        ...

    def ability(self, ability_id: str) -> AbilityRow | None:
        """Return a shared ability record."""
        ...

    def faction_abilities(self, faction_id: str) -> Sequence[AbilityRow]:
        """Shared abilities owned by a faction (its army rules)."""
        ...

    def detachment_by_name(self, faction_id: str, name: str) -> DetachmentRow | None:
        """Resolve a detachment name within a faction."""
        ...

    def detachment_abilities(self, detachment_id: str) -> Sequence[DetachmentAbilityRow]:
        """Rules granted by a detachment."""
        ...

    def stratagems(self, detachment_id: str) -> Sequence[StratagemRow]:
        """Stratagems of a detachment."""
        ...

    def enhancements(self, detachment_id: str) -> Sequence[EnhancementRow]:
        """Enhancements of a detachment."""
        ...

    def enhancement_by_name(self, faction_id: str, name: str) -> EnhancementRow | None:
        """Resolve an enhancement name anywhere within a faction."""
        ...
