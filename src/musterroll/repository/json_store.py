"""JSON-based repository for the reference catalog."""

from __future__ import annotations

from pathlib import Path

from pydantic import TypeAdapter

from musterroll.schemas import CatalogSnapshot


class JsonCatalogRepository:
    """Persist the validated catalog as a single JSON snapshot on disk."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._adapter: TypeAdapter[CatalogSnapshot] = TypeAdapter(CatalogSnapshot)

    def exists(self) -> bool:
        return self.path.exists()

    def save(self, snapshot: CatalogSnapshot) -> Path:
        """Serialize the snapshot to disk and return its path."""

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_bytes(self._adapter.dump_json(snapshot))
        return self.path

    def load(self) -> CatalogSnapshot:
        """Load the stored snapshot or raise ``FileNotFoundError``."""

        return self._adapter.validate_json(self.path.read_bytes())

    def delete(self) -> None:
        """Remove the snapshot if it exists."""

        if self.path.exists():
            self.path.unlink()
