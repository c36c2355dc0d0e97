from .json_store import JsonCatalogRepository

__all__ = ["JsonCatalogRepository"]
