"""Service layer for Musterroll.

Services own the little state the application has; the rules themselves
live in :mod:`musterroll.domain`:

- CatalogProvider: one-time load of the reference catalog, shared read-only
- ArmyWorkspace: the current army list and its leader/transport allocations

Usage:
    from musterroll.services import ArmyWorkspace, CatalogProvider

    catalog = CatalogProvider(JsonCatalogRepository(path))
    catalog.load()
    workspace = ArmyWorkspace(catalog)
    workspace.import_text(exported_list)
"""

from musterroll.services.army_service import ArmyWorkspace
from musterroll.services.catalog_service import CatalogNotLoadedError, CatalogProvider

__all__ = ["ArmyWorkspace", "CatalogNotLoadedError", "CatalogProvider"]
