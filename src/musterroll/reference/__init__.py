from .index import CatalogIndex
from .ingest import build_snapshot, load_tables_dir, parse_pipe_table

__all__ = ["CatalogIndex", "build_snapshot", "load_tables_dir", "parse_pipe_table"]
