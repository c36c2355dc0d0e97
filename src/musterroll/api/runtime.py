"""Runtime primitives backing the Musterroll HTTP API."""

from __future__ import annotations

import logging
from dataclasses import replace

from musterroll.config import Settings, get_settings
from musterroll.domain.rules_config import DEFAULT_RULES, RulesConfig
from musterroll.repository import JsonCatalogRepository
from musterroll.services import ArmyWorkspace, CatalogProvider

logger = logging.getLogger(__name__)


def rules_from_settings(settings: Settings, base: RulesConfig = DEFAULT_RULES) -> RulesConfig:
    """Apply the configurable limits on top of ``base``."""

    allocation = replace(base.allocation, max_leaders_per_unit=settings.max_leaders_per_unit)
    return replace(base, allocation=allocation)


class ApiState:
    """Aggregated services shared by the FastAPI layer."""

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        rules: RulesConfig | None = None,
        catalog: CatalogProvider | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.rules = rules or rules_from_settings(self.settings)
        self.catalog = catalog or CatalogProvider(
            JsonCatalogRepository(self.settings.catalog_path),
            tables_dir=self.settings.catalog_tables_dir,
        )
        self.workspace = ArmyWorkspace(self.catalog, rules=self.rules)

    def startup(self) -> None:
        if not self.catalog.is_loaded:
            self.catalog.load()

    async def shutdown(self) -> None:
        self.workspace.reset()
        logger.debug("api state released")


def build_state() -> ApiState:
    """Factory used by the API to initialize state."""

    return ApiState()
