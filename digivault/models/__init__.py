from digivault.models.catalog import (
    AttributeEntry,
    CardImage,
    CatalogCardDetail,
    CatalogCardSummary,
    CatalogPage,
    Description,
    FieldEntry,
    LevelEntry,
    NextEvolution,
    PageInfo,
    TypeEntry,
)
from digivault.models.failure import (
    CatalogUnavailableError,
    EvolutionNotAllowedError,
    FailureKind,
    InsufficientCoinsError,
    InvalidUsernameError,
    KnownError,
    MalformedCatalogDataError,
    ProfileNotFoundError,
    UnknownPackError,
)
from digivault.models.ledger import Category, LedgerEntry
from digivault.models.pack import STARTER_PACKS, PackDefinition, get_pack, pack_price
from digivault.models.profile import Profile

__all__ = [
    "AttributeEntry",
    "CardImage",
    "CatalogCardDetail",
    "CatalogCardSummary",
    "CatalogPage",
    "CatalogUnavailableError",
    "Category",
    "Description",
    "EvolutionNotAllowedError",
    "FailureKind",
    "FieldEntry",
    "InsufficientCoinsError",
    "InvalidUsernameError",
    "KnownError",
    "LedgerEntry",
    "LevelEntry",
    "MalformedCatalogDataError",
    "NextEvolution",
    "PackDefinition",
    "PageInfo",
    "Profile",
    "ProfileNotFoundError",
    "STARTER_PACKS",
    "TypeEntry",
    "UnknownPackError",
    "get_pack",
    "pack_price",
]
