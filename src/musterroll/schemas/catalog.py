from pydantic import BaseModel, Field

from .datasheet import (
    DatasheetAbilityRow,
    DatasheetRow,
    KeywordRow,
    LeaderRow,
    ModelRow,
    WargearRow,
)
from .faction import (
    AbilityRow,
    DetachmentAbilityRow,
    DetachmentRow,
    EnhancementRow,
    FactionRow,
    StratagemRow,
)


class CatalogSnapshot(BaseModel):
    """Every validated catalog table, as exported by the source site."""

    factions: list[FactionRow] = Field(default_factory=list)
    detachments: list[DetachmentRow] = Field(default_factory=list)
    datasheets: list[DatasheetRow] = Field(default_factory=list)
    models: list[ModelRow] = Field(default_factory=list)
    wargear: list[WargearRow] = Field(default_factory=list)
    abilities: list[DatasheetAbilityRow] = Field(default_factory=list)
    keywords: list[KeywordRow] = Field(default_factory=list)
    leaders: list[LeaderRow] = Field(default_factory=list)
    enhancements: list[EnhancementRow] = Field(default_factory=list)
    detachment_abilities: list[DetachmentAbilityRow] = Field(default_factory=list)
    stratagems: list[StratagemRow] = Field(default_factory=list)
    shared_abilities: list[AbilityRow] = Field(default_factory=list)
    last_update: str = Field(default="unknown", description="Source export timestamp")


# Export file name -> snapshot field
TABLE_FIELDS: dict[str, str] = {
    "Factions": "factions",
    "Detachments": "detachments",
    "Datasheets": "datasheets",
    "Datasheets_models": "models",
    "Datasheets_wargear": "wargear",
    "Datasheets_abilities": "abilities",
    "Datasheets_keywords": "keywords",
    "Datasheets_leader": "leaders",
    "Enhancements": "enhancements",
    "Detachment_abilities": "detachment_abilities",
    "Stratagems": "stratagems",
    "Abilities": "shared_abilities",
}
