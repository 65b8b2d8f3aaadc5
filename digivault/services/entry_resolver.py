"""
Catalog detail -> LedgerEntry resolution.

The catalog embeds revision history: a card can list several levels,
types and attributes. Exactly one of each is kept, the entry with the
highest id. Descriptions carry no id, so the last one in list order wins.

Grouping in the ledger aggregator uses a different rule (first row wins);
the two are intentionally separate.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from digivault.models.catalog import CatalogCardDetail
from digivault.models.ledger import LedgerEntry
from digivault.services.pricing import category_of, sell_price


def latest_by_id(items: Iterable[Any], key: str) -> str:
    """
    Value of `key` on the item with the numerically highest id.

    Returns an empty string when there are no items. The sort is stable,
    so among equal ids the first encountered wins.
    """
    ordered = sorted(items, key=lambda item: item.id, reverse=True)
    if not ordered:
        return ""
    return str(getattr(ordered[0], key) or "")


def resolve_entry(detail: CatalogCardDetail, *, is_evolution: bool) -> LedgerEntry:
    """
    Build a fresh owned-card row from a catalog detail.

    The detail's top-level `level` is ignored; level is re-derived from
    `levels` like type and attribute. Counters start at zero and only grow
    once the row passes through the ledger aggregator.
    """
    level = latest_by_id(detail.levels, "level")
    category = category_of(level)
    description = detail.descriptions[-1].description if detail.descriptions else ""

    return LedgerEntry(
        id=detail.id,
        name=detail.name,
        images=tuple(detail.images),
        type=latest_by_id(detail.types, "type"),
        attribute=latest_by_id(detail.attributes, "attribute"),
        level=level,
        fields=tuple(detail.fields),
        description=description,
        next_evolutions=tuple(detail.next_evolutions),
        is_evolution=is_evolution,
        evolution_count=0,
        starter_pack_count=0,
        total_owned=0,
        category=category,
        sell_price=sell_price(category, len(detail.next_evolutions) > 0),
    )


def resolve_pack_entries(details: Sequence[CatalogCardDetail]) -> list[LedgerEntry]:
    """Convert drawn pack cards into raw rows ready to append to a collection."""
    return [resolve_entry(detail, is_evolution=False) for detail in details]
