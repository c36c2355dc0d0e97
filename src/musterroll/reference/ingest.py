"""Turn pipe-delimited catalog exports into a validated snapshot.

Downloading the exports is someone else's job; this module only reads what
is already on disk (or in memory) and validates every row at the boundary so
the rest of the code never sees an untyped record.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

from musterroll.schemas import TABLE_FIELDS, CatalogSnapshot

logger = logging.getLogger(__name__)

LAST_UPDATE_TABLE = "Last_update"


def parse_pipe_table(raw: str) -> list[dict[str, str]]:
    """Parse one ``|``-separated export into a list of column -> value dicts."""

    text = raw.removeprefix("\ufeff")
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        return []

    header = lines[0].removesuffix("|").split("|")
    rows: list[dict[str, str]] = []
    for line in lines[1:]:
        cells = line.removesuffix("|").split("|")
        rows.append(
            {column: cells[i] if i < len(cells) else "" for i, column in enumerate(header)}
        )
    return rows


def build_snapshot(tables: Mapping[str, Iterable[Mapping[str, object]]]) -> CatalogSnapshot:
    """Validate raw tables keyed by export name (``Datasheets``, ``Factions``...).

    Unknown table names are ignored; a missing table yields an empty list.

    Raises:
        pydantic.ValidationError: If any row fails its schema.
    """

    payload: dict[str, object] = {}
    for table, field_name in TABLE_FIELDS.items():
        rows = tables.get(table)
        if rows is not None:
            payload[field_name] = list(rows)

    last_update_rows = list(tables.get(LAST_UPDATE_TABLE, []))
    if last_update_rows:
        payload["last_update"] = str(last_update_rows[0].get("last_update") or "unknown")

    return CatalogSnapshot.model_validate(payload)


def load_tables_dir(directory: Path) -> CatalogSnapshot:
    """Read ``<Table>.csv`` exports from ``directory`` and validate them."""

    tables: dict[str, list[dict[str, str]]] = {}
    for table in [*TABLE_FIELDS, LAST_UPDATE_TABLE]:
        path = directory / f"{table}.csv"
        if not path.exists():
            logger.warning("catalog table %s missing from %s", table, directory)
            continue
        tables[table] = parse_pipe_table(path.read_text(encoding="utf-8"))
        logger.debug("read %d rows from %s", len(tables[table]), path.name)
    return build_snapshot(tables)
