"""Owns the process-wide reference catalog.

The catalog is loaded once (from the JSON snapshot, or built from a directory
of pipe-delimited exports when no snapshot exists yet) and is read-only
afterwards.  Importing a list before it is loaded is refused.
"""

from __future__ import annotations

import logging
from pathlib import Path

from musterroll.reference import CatalogIndex, load_tables_dir
from musterroll.repository import JsonCatalogRepository
from musterroll.schemas import CatalogSnapshot

logger = logging.getLogger(__name__)


class CatalogNotLoadedError(RuntimeError):
    """Raised when the catalog is requested before it has been loaded."""


class CatalogProvider:
    """Loads the catalog and hands out the shared :class:`CatalogIndex`."""

    def __init__(
        self, repository: JsonCatalogRepository, *, tables_dir: Path | None = None
    ) -> None:
        self._repository = repository
        self._tables_dir = tables_dir
        self._index: CatalogIndex | None = None

    @property
    def is_loaded(self) -> bool:
        return self._index is not None

    @property
    def last_update(self) -> str | None:
        return self._index.last_update if self._index is not None else None

    def load(self) -> CatalogIndex | None:
        """Load the snapshot, building it from the exports if needed.

        Returns ``None`` (and logs a warning) when neither source is available.

        Raises:
            pydantic.ValidationError: If a stored snapshot or an export row is invalid.
        """

        if self._repository.exists():
            snapshot = self._repository.load()
            logger.info("catalog loaded from %s", self._repository.path)
        elif self._tables_dir is not None and self._tables_dir.is_dir():
            snapshot = load_tables_dir(self._tables_dir)
            self._repository.save(snapshot)
            logger.info(
                "catalog built from %s and saved to %s", self._tables_dir, self._repository.path
            )
        else:
            logger.warning(
                "no catalog at %s and no export directory configured", self._repository.path
            )
            return None
        return self.use(snapshot)

    def use(self, snapshot: CatalogSnapshot) -> CatalogIndex:
        """Install an already validated snapshot."""

        self._index = CatalogIndex(snapshot)
        logger.info(
            "catalog ready: %d factions, %d datasheets (updated %s)",
            len(snapshot.factions),
            len(snapshot.datasheets),
            snapshot.last_update,
        )
        return self._index

    def get(self) -> CatalogIndex:
        if self._index is None:
            raise CatalogNotLoadedError("Reference catalog has not been loaded")
        return self._index
