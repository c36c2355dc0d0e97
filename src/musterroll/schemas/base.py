from pydantic import BaseModel, ConfigDict


class CatalogRow(BaseModel):
    """Base for one validated row of a catalog table."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)
