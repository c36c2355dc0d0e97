"""Musterroll: army-list import, catalog enrichment and unit allocation."""

__version__ = "0.1.0"
