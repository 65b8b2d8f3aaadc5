"""
Catalog payload models.

Mirror the shapes served by the Digimon catalog API. Wire keys are
camelCase; attributes are snake_case through aliases. Unknown keys are
ignored so upstream additions never break parsing.
"""

from pydantic import BaseModel, ConfigDict, Field


class CatalogModel(BaseModel):
    """Base for immutable catalog payloads."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class CatalogCardSummary(CatalogModel):
    """Minimal listing entry, used only to pick a random id."""

    id: int = Field(..., gt=0)
    name: str = ""
    href: str = ""
    image: str = ""


class PageInfo(CatalogModel):
    current_page: int = Field(default=0, alias="currentPage")
    elements_on_page: int = Field(default=0, alias="elementsOnPage")
    total_elements: int = Field(default=0, alias="totalElements")
    total_pages: int = Field(default=0, alias="totalPages")
    previous_page: str | None = Field(default=None, alias="previousPage")
    next_page: str | None = Field(default=None, alias="nextPage")


class CatalogPage(CatalogModel):
    """One page of catalog summaries for a tier."""

    content: list[CatalogCardSummary] = Field(default_factory=list)
    pageable: PageInfo = Field(default_factory=PageInfo)


class CardImage(CatalogModel):
    href: str
    transparent: bool = False


class LevelEntry(CatalogModel):
    id: int
    level: str = ""


class TypeEntry(CatalogModel):
    id: int
    type: str = ""


class AttributeEntry(CatalogModel):
    id: int
    attribute: str = ""


class FieldEntry(CatalogModel):
    id: int
    field: str = ""
    image: str = ""


class Description(CatalogModel):
    origin: str = ""
    language: str = ""
    description: str = ""


class NextEvolution(CatalogModel):
    """Link from a card to one of the cards it can evolve into."""

    id: int
    digimon: str = ""
    condition: str = ""
    image: str = ""
    url: str = ""


class CatalogCardDetail(CatalogModel):
    """
    Full catalog definition for one creature.

    `levels`, `types` and `attributes` can hold several entries because the
    upstream data embeds revision history. Resolution to a single value
    happens in services.entry_resolver, never here.
    """

    id: int = Field(..., gt=0)
    name: str
    images: list[CardImage] = Field(default_factory=list)
    levels: list[LevelEntry] = Field(default_factory=list)
    types: list[TypeEntry] = Field(default_factory=list)
    attributes: list[AttributeEntry] = Field(default_factory=list)
    fields: list[FieldEntry] = Field(default_factory=list)
    descriptions: list[Description] = Field(default_factory=list)
    next_evolutions: list[NextEvolution] = Field(default_factory=list, alias="nextEvolutions")
    level: LevelEntry | None = None
