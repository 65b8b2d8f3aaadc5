"""
Owned-card records.

A LedgerEntry is both a raw row (one physical copy in the caller's list)
and a grouped row (one distinct id with counters, produced by the ledger
aggregator). The shape is the same; only the counters differ in meaning.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from digivault.models.catalog import CardImage, FieldEntry, NextEvolution


class Category(str, Enum):
    """Coarse evolutionary stage shown to users and used for pricing."""

    BABY = "Baby"
    ROOKIE = "Rookie"
    CHAMPION = "Champion"
    ULTIMATE = "Ultimate"
    MEGA = "Mega"


class LedgerEntry(BaseModel):
    """
    One owned card.

    Attributes:
        type, attribute, level, description: single resolved strings,
            chosen from the catalog's revision lists
        is_evolution: row was produced by an evolution event
        evolution_count: evolution-produced copies folded into this row
        starter_pack_count: pack-acquired copies folded into this row
        total_owned: raw copies folded into this row
        sell_price: coins credited when one copy is sold
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0)
    name: str
    images: tuple[CardImage, ...] = ()
    type: str = ""
    attribute: str = ""
    level: str = ""
    fields: tuple[FieldEntry, ...] = ()
    description: str = ""
    next_evolutions: tuple[NextEvolution, ...] = ()
    is_evolution: bool = False
    evolution_count: int = Field(default=0, ge=0)
    starter_pack_count: int = Field(default=0, ge=0)
    total_owned: int = Field(default=0, ge=0)
    category: Category = Category.BABY
    sell_price: int = Field(default=0, ge=0)

    @property
    def can_evolve_further(self) -> bool:
        return len(self.next_evolutions) > 0
