"""Army Workspace Service for Musterroll.

Holds the one army list being worked on together with its allocation state.
Imports go through the parser and the enrichment engine; leader and transport
edits are delegated to the pure commands in
:mod:`musterroll.domain.allocation` and the returned state replaces the
current one wholesale.
"""

from __future__ import annotations

import logging

from musterroll.domain import allocation
from musterroll.domain.enrichment import enrich_army_list
from musterroll.domain.models import (
    EMPTY_ALLOCATION,
    AllocationState,
    EnrichedArmyList,
    EnrichedUnit,
    UnitInstanceID,
)
from musterroll.domain.parser import parse_army_list
from musterroll.domain.rules_config import DEFAULT_RULES, RulesConfig
from musterroll.services.catalog_service import CatalogNotLoadedError, CatalogProvider

logger = logging.getLogger(__name__)


class ArmyWorkspace:
    """Current army list plus leader pairings and transport embarkations.

    Every command is a no-op while no list is loaded.  Importing a new list
    clears both relations.
    """

    def __init__(self, catalog: CatalogProvider, *, rules: RulesConfig = DEFAULT_RULES) -> None:
        self._catalog = catalog
        self.rules = rules
        self.army: EnrichedArmyList | None = None
        self.allocations: AllocationState = EMPTY_ALLOCATION
        self.raw_text = ""
        self.import_error: str | None = None

    def import_text(self, text: str) -> EnrichedArmyList | None:
        """Parse and enrich ``text``; returns ``None`` if the catalog is not loaded."""

        try:
            index = self._catalog.get()
        except CatalogNotLoadedError as exc:
            self.import_error = str(exc)
            logger.warning("import refused: %s", exc)
            return None

        parsed = parse_army_list(text)
        self.army = enrich_army_list(parsed, index, self.rules)
        self.allocations = EMPTY_ALLOCATION
        self.raw_text = text
        self.import_error = None
        return self.army

    def reset(self) -> None:
        self.army = None
        self.allocations = EMPTY_ALLOCATION
        self.raw_text = ""
        self.import_error = None

    # -- commands ---------------------------------------------------------

    def set_leader_pairing(self, character_id: str, unit_id: str | None) -> AllocationState:
        if self.army is not None:
            self.allocations = allocation.set_leader_pairing(
                self.army, self.allocations, character_id, unit_id, self.rules
            )
        return self.allocations

    def assign_to_transport(self, unit_id: str, transport_id: str) -> AllocationState:
        if self.army is not None:
            self.allocations = allocation.assign_to_transport(
                self.army, self.allocations, unit_id, transport_id, self.rules
            )
        return self.allocations

    def remove_from_transport(self, unit_id: str) -> AllocationState:
        if self.army is not None:
            self.allocations = allocation.remove_from_transport(self.allocations, unit_id)
        return self.allocations

    # -- accessors --------------------------------------------------------

    def unit(self, instance_id: str) -> EnrichedUnit | None:
        return self.army.unit(instance_id) if self.army is not None else None

    def host_of(self, character_id: str) -> UnitInstanceID | None:
        return allocation.host_of(self.allocations, character_id)

    def transport_of(self, unit_id: str) -> UnitInstanceID | None:
        return allocation.transport_of(self.allocations, unit_id)

    def used_capacity(self, transport_id: str) -> int:
        if self.army is None:
            return 0
        return allocation.used_capacity(self.army, self.allocations, transport_id, self.rules)

    def total_capacity(self, transport_id: str) -> int | None:
        if self.army is None:
            return None
        return allocation.total_capacity(self.army, transport_id)

    def eligible_leader_targets(self, character_id: str) -> list[EnrichedUnit]:
        if self.army is None:
            return []
        return allocation.eligible_leader_targets(self.army, character_id)

    def available_leader_slots(self, unit_id: str) -> int:
        if self.army is None:
            return 0
        return allocation.available_leader_slots(self.allocations, unit_id, self.rules)
