"""
DigiVault services.

Collection ledger, gacha composition, and the catalog boundary.
"""

from digivault.services.catalog_client import (
    CatalogClient,
    HttpCatalogClient,
    normalize_detail,
)
from digivault.services.collector import (
    CollectorSession,
    sanitize_input,
    validate_username,
)
from digivault.services.entry_resolver import (
    latest_by_id,
    resolve_entry,
    resolve_pack_entries,
)
from digivault.services.evolution import can_evolve, evolve, remove_copies
from digivault.services.gacha import (
    PACK_COMPOSITION,
    DrawRule,
    GachaComposer,
    draws_for,
)
from digivault.services.ledger import aggregate, find_grouped, matches_filters
from digivault.services.pricing import category_of, sell_price
from digivault.services.selling import sell

__all__ = [
    # Catalog boundary
    "CatalogClient",
    "HttpCatalogClient",
    "normalize_detail",
    # Pricing rules
    "category_of",
    "sell_price",
    # Entry resolution
    "latest_by_id",
    "resolve_entry",
    "resolve_pack_entries",
    # Gacha composer
    "PACK_COMPOSITION",
    "DrawRule",
    "GachaComposer",
    "draws_for",
    # Ledger aggregator
    "aggregate",
    "find_grouped",
    "matches_filters",
    # Evolution and sell resolvers
    "can_evolve",
    "evolve",
    "remove_copies",
    "sell",
    # Collector session
    "CollectorSession",
    "sanitize_input",
    "validate_username",
]
