from .catalog import TABLE_FIELDS, CatalogSnapshot
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

__all__ = [
    "TABLE_FIELDS",
    "AbilityRow",
    "CatalogSnapshot",
    "DatasheetAbilityRow",
    "DatasheetRow",
    "DetachmentAbilityRow",
    "DetachmentRow",
    "EnhancementRow",
    "FactionRow",
    "KeywordRow",
    "LeaderRow",
    "ModelRow",
    "StratagemRow",
    "WargearRow",
]
