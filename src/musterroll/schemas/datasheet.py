from typing import Any

from pydantic import Field, field_validator

from .base import CatalogRow


class DatasheetRow(CatalogRow):
    id: str = Field(..., min_length=1, description="Datasheet identifier")
    name: str = Field(..., min_length=1, description="Unit name")
    faction_id: str = Field(..., description="Foreign key to faction")
    source_id: str = Field(default="", description="Publication the datasheet comes from")
    legend: str = Field(default="", description="Flavour text")
    role: str = Field(default="", description="Battlefield role")
    loadout: str = Field(default="", description="Default wargear (HTML)")
    transport: str = Field(default="", description="Transport capacity prose (HTML)")
    virtual: str = Field(default="", description="Whether the datasheet is virtual")
    leader_head: str = Field(default="", description="Leader section heading (HTML)")
    leader_footer: str = Field(default="", description="Leader section footnote (HTML)")
    damaged_w: str = Field(default="", description="Wound range of the damaged profile")
    damaged_description: str = Field(default="", description="Damaged profile effect")
    link: str = Field(default="", description="Source page of the datasheet")


class ModelRow(CatalogRow):
    datasheet_id: str = Field(..., min_length=1, description="Foreign key to datasheet")
    line: str = Field(default="", description="Ordering within the datasheet")
    name: str = Field(..., description="Model profile name")
    M: str = Field(default="", description="Move")
    T: str = Field(default="", description="Toughness")
    Sv: str = Field(default="", description="Save")
    inv_sv: str = Field(default="", description="Invulnerable save")
    inv_sv_descr: str = Field(default="", description="Invulnerable save conditions")
    W: str = Field(default="", description="Wounds")
    Ld: str = Field(default="", description="Leadership")
    OC: str = Field(default="", description="Objective control")
    base_size: str = Field(default="", description="Base size")
    base_size_descr: str = Field(default="", description="Base size notes")


class WargearRow(CatalogRow):
    datasheet_id: str = Field(..., min_length=1, description="Foreign key to datasheet")
    line: str = Field(default="", description="Ordering within the datasheet")
    line_in_wargear: str = Field(default="", description="Ordering within the weapon")
    dice: str = Field(default="", description="Dice notation")
    name: str = Field(..., description="Weapon name, possibly with a profile suffix")
    description: str = Field(default="", description="Weapon keywords")
    range: str = Field(default="", description="Range in inches; empty for melee")
    type: str = Field(default="", description="Ranged or Melee")
    A: str = Field(default="", description="Attacks")
    BS_WS: str = Field(default="", description="Ballistic or weapon skill")
    S: str = Field(default="", description="Strength")
    AP: str = Field(default="", description="Armour penetration")
    D: str = Field(default="", description="Damage")


class DatasheetAbilityRow(CatalogRow):
    datasheet_id: str = Field(..., min_length=1, description="Foreign key to datasheet")
    line: str = Field(default="", description="Ordering within the datasheet")
    ability_id: str = Field(default="", description="Foreign key to a shared ability")
    model: str = Field(default="", description="Model the ability is limited to")
    name: str = Field(default="", description="Ability name; blank when shared")
    description: str = Field(default="", description="Rule text (HTML); blank when shared")
    type: str = Field(default="", description="Ability category")
    parameter: str = Field(default="", description="Parameter such as Deadly Demise D3")


class KeywordRow(CatalogRow):
    datasheet_id: str = Field(..., min_length=1, description="Foreign key to datasheet")
    keyword: str = Field(..., min_length=1, description="Keyword text")
    model: str = Field(default="", description="Model the keyword is limited to")
    is_faction_keyword: bool = Field(default=False, description="Faction keyword flag")

    @field_validator("is_faction_keyword", mode="before")
    @classmethod
    def _parse_flag(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower() == "true"
        return value


class LeaderRow(CatalogRow):
    leader_id: str = Field(..., min_length=1, description="Datasheet that leads")
    attached_id: str = Field(..., min_length=1, description="Datasheet that can be led")
