"""
Evolution resolution.

An evolution event consumes up to EVOLUTION_COST copies of a source card
and appends one freshly fetched copy of the target card.

Owning the source is NOT required: with zero matching rows nothing is
removed and the evolved card is still appended. Callers that want the
ownership rule apply can_evolve() first.

The input list is never mutated. If the catalog fetch fails, the caller
still holds its own list untouched.
"""

import logging
from collections.abc import Sequence

from digivault.config import EVOLUTION_COST
from digivault.models.ledger import LedgerEntry
from digivault.services.catalog_client import CatalogClient
from digivault.services.entry_resolver import resolve_entry

logger = logging.getLogger(__name__)


def remove_copies(
    raw_cards: Sequence[LedgerEntry],
    card_id: int,
    limit: int,
) -> tuple[list[LedgerEntry], int]:
    """
    Drop the first `limit` rows matching card_id, in encounter order.

    Returns:
        (remaining rows, number removed)
    """
    remaining: list[LedgerEntry] = []
    removed = 0
    for row in raw_cards:
        if row.id == card_id and removed < limit:
            removed += 1
            continue
        remaining.append(row)
    return remaining, removed


def can_evolve(entry: LedgerEntry) -> bool:
    """
    Whether a grouped row is eligible for evolution.

    Requires at least EVOLUTION_COST owned copies and a known next form.
    """
    return entry.total_owned >= EVOLUTION_COST and entry.can_evolve_further


async def evolve(
    raw_cards: Sequence[LedgerEntry],
    source_id: int,
    target_catalog_id: int,
    client: CatalogClient,
) -> list[LedgerEntry]:
    """
    Evolve a source card into a target card.

    Args:
        raw_cards: The caller's raw owned-card list
        source_id: Card id whose duplicates are consumed
        target_catalog_id: Catalog id of the evolved form
        client: Catalog to fetch the evolved form from

    Returns:
        New raw list: source rows removed (at most EVOLUTION_COST),
        evolved row appended

    Raises:
        CatalogUnavailableError: If fetching the target fails
    """
    remaining, removed = remove_copies(raw_cards, source_id, EVOLUTION_COST)

    if removed == 0:
        logger.warning(
            "evolution_without_source",
            extra={"source_id": source_id, "target_id": target_catalog_id},
        )

    detail = await client.get_by_id(target_catalog_id)
    evolved = resolve_entry(detail, is_evolution=True)
    remaining.append(evolved)

    logger.info(
        "card_evolved",
        extra={
            "source_id": source_id,
            "target_id": evolved.id,
            "copies_consumed": removed,
        },
    )
    return remaining
