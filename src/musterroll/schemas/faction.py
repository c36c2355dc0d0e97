from pydantic import Field

from .base import CatalogRow


class FactionRow(CatalogRow):
    id: str = Field(..., min_length=1, description="Faction identifier")
    name: str = Field(..., min_length=1, description="Display name of the faction")
    link: str = Field(default="", description="Source page of the faction")


class DetachmentRow(CatalogRow):
    id: str = Field(..., min_length=1, description="Detachment identifier")
    faction_id: str = Field(..., description="Foreign key to faction")
    name: str = Field(..., min_length=1, description="Name of the detachment")
    legend: str = Field(default="", description="Flavour text")
    type: str = Field(default="", description="Detachment category")


class DetachmentAbilityRow(CatalogRow):
    id: str = Field(..., min_length=1, description="Detachment ability identifier")
    faction_id: str = Field(default="", description="Foreign key to faction")
    name: str = Field(..., description="Name of the detachment rule")
    legend: str = Field(default="", description="Flavour text")
    description: str = Field(default="", description="Rule text (HTML)")
    detachment: str = Field(default="", description="Detachment name")
    detachment_id: str = Field(..., description="Foreign key to detachment")


class EnhancementRow(CatalogRow):
    id: str = Field(..., min_length=1, description="Enhancement identifier")
    faction_id: str = Field(..., description="Foreign key to faction")
    name: str = Field(..., min_length=1, description="Name of the enhancement")
    cost: str = Field(default="", description="Points cost")
    detachment: str = Field(default="", description="Detachment name")
    detachment_id: str = Field(default="", description="Foreign key to detachment")
    legend: str = Field(default="", description="Flavour text")
    description: str = Field(default="", description="Rule text (HTML)")


class StratagemRow(CatalogRow):
    id: str = Field(..., min_length=1, description="Stratagem identifier")
    faction_id: str = Field(default="", description="Foreign key to faction")
    name: str = Field(..., min_length=1, description="Name of the stratagem")
    type: str = Field(default="", description="Stratagem category")
    cp_cost: str = Field(default="", description="Command point cost")
    legend: str = Field(default="", description="Flavour text")
    turn: str = Field(default="", description="Whose turn it can be used in")
    phase: str = Field(default="", description="Phase it can be used in")
    detachment: str = Field(default="", description="Detachment name")
    detachment_id: str = Field(default="", description="Foreign key to detachment")
    description: str = Field(default="", description="Rule text (HTML)")


class AbilityRow(CatalogRow):
    """Shared ability referenced by datasheets (core and faction rules)."""

    id: str = Field(..., min_length=1, description="Ability identifier")
    name: str = Field(..., description="Name of the ability")
    legend: str = Field(default="", description="Flavour text")
    faction_id: str = Field(default="", description="Owning faction; empty for core rules")
    description: str = Field(default="", description="Rule text (HTML)")
