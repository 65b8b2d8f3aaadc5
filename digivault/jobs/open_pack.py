"""
Open a pack against the live catalog.

Draws one pack and logs what came out. Nothing is bought or stored; use
it to check the catalog and composition rules end to end.

    python -m digivault.jobs.open_pack R
"""

import argparse
import asyncio
import logging

from digivault.models.failure import KnownError
from digivault.models.ledger import LedgerEntry
from digivault.models.pack import STARTER_PACKS
from digivault.services.catalog_client import CatalogClient, HttpCatalogClient
from digivault.services.entry_resolver import resolve_pack_entries
from digivault.services.gacha import GachaComposer

logger = logging.getLogger(__name__)


async def run_open_pack(tier_code: str, client: CatalogClient) -> list[LedgerEntry]:
    """
    Draw one pack and log each card.

    Args:
        tier_code: Pack code (C, B, A, R)
        client: Catalog to draw from

    Returns:
        Drawn cards as raw collection rows
    """
    logger.info("Opening pack %s...", tier_code)

    try:
        details = await GachaComposer(client).draw(tier_code)
    except KnownError as e:
        logger.error("Failed to open pack %s: %s", tier_code, e.message)
        if e.suggestion:
            logger.error("%s", e.suggestion)
        raise

    entries = resolve_pack_entries(details)
    if not entries:
        logger.warning("Pack %s has no draws", tier_code)

    for entry in entries:
        logger.info(
            "#%d %s - %s (%s), sells for %d",
            entry.id,
            entry.name,
            entry.level or "?",
            entry.category.value,
            entry.sell_price,
        )

    logger.info("Opened pack %s: %d cards", tier_code, len(entries))
    return entries


async def _open_with_http_client(tier_code: str) -> None:
    async with HttpCatalogClient() as client:
        await run_open_pack(tier_code, client)


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Open a gacha pack")
    parser.add_argument(
        "pack",
        choices=[pack.tier_code for pack in STARTER_PACKS],
        help="Pack code to open",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(_open_with_http_client(args.pack))


if __name__ == "__main__":
    main()
