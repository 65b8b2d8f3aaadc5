"""
Gacha composition.

Turns a pack tier code into a fixed set of catalog draws. Each draw lists
one or more tiers, picks one summary uniformly at random and fetches its
full definition. All draws of a pack run concurrently; the first failure
cancels the remaining draws and fails the whole pack, so a purchase is
never delivered partially.
"""

import asyncio
import logging
import math
import random
from collections.abc import Callable
from dataclasses import dataclass

from digivault.config import COMBINED_DRAW_PAGE_SIZE, SINGLE_DRAW_PAGE_SIZE
from digivault.models.catalog import CatalogCardDetail, CatalogCardSummary
from digivault.models.failure import MalformedCatalogDataError
from digivault.services.catalog_client import CatalogClient

logger = logging.getLogger(__name__)

RandomSource = Callable[[], float]

LOW_TIER = "Child"
HIGH_TIER = "Ultimate"
TOP_TIER = "Perfect"

# Order defines probability mass: larger buckets are proportionally likelier
MID_TIER_BUCKETS: tuple[str, ...] = ("Adult", "Armor", "Unknown", "Hybrid")


@dataclass(frozen=True, slots=True)
class DrawRule:
    """One catalog draw: the tiers listed and the page size per tier."""

    tiers: tuple[str, ...]
    page_size: int


LOW_SINGLE = DrawRule(tiers=(LOW_TIER,), page_size=SINGLE_DRAW_PAGE_SIZE)
MID_COMBINED = DrawRule(tiers=MID_TIER_BUCKETS, page_size=COMBINED_DRAW_PAGE_SIZE)
HIGH_SINGLE = DrawRule(tiers=(HIGH_TIER,), page_size=SINGLE_DRAW_PAGE_SIZE)
TOP_SINGLE = DrawRule(tiers=(TOP_TIER,), page_size=SINGLE_DRAW_PAGE_SIZE)


PACK_COMPOSITION: dict[str, tuple[DrawRule, ...]] = {
    "C": (LOW_SINGLE,) * 4 + (MID_COMBINED,),
    "B": (LOW_SINGLE,) * 2 + (MID_COMBINED,) * 2 + (HIGH_SINGLE,),
    "A": (LOW_SINGLE,) + (MID_COMBINED,) * 2 + (HIGH_SINGLE,) * 2,
    "R": (MID_COMBINED,) + (HIGH_SINGLE,) * 2 + (TOP_SINGLE,),
}


def draws_for(pack_tier_code: str) -> tuple[DrawRule, ...]:
    """Draw rules for a pack code, empty for unknown codes."""
    return PACK_COMPOSITION.get(pack_tier_code, ())


def pick_index(length: int, rng: RandomSource) -> int:
    """Uniform index into a list of `length` items: floor(rng() * length)."""
    return math.floor(rng() * length)


class GachaComposer:
    """
    Draws pack contents from a catalog.

    Args:
        client: Catalog to list and fetch cards from
        rng: Zero-argument callable returning a float in [0, 1).
            Inject a fixed sequence in tests for deterministic picks.
    """

    def __init__(self, client: CatalogClient, rng: RandomSource | None = None) -> None:
        self._client = client
        self._rng = rng or random.random

    async def draw(self, pack_tier_code: str) -> list[CatalogCardDetail]:
        """
        Draw every card of one pack.

        Returns cards in the order the draws were initiated. Unknown pack
        codes yield an empty list without touching the catalog.

        Raises:
            CatalogUnavailableError: If any catalog request fails
            MalformedCatalogDataError: If any draw has nothing to pick from
        """
        rules = draws_for(pack_tier_code)
        if not rules:
            logger.info("gacha_unknown_pack", extra={"pack": pack_tier_code})
            return []

        tasks = [asyncio.create_task(self._draw_one(rule)) for rule in rules]
        try:
            cards = await asyncio.gather(*tasks)
        except Exception:
            # Remaining draws must not touch the client once the pack has failed
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        logger.info(
            "gacha_pack_drawn",
            extra={"pack": pack_tier_code, "card_ids": [card.id for card in cards]},
        )
        return list(cards)

    async def _draw_one(self, rule: DrawRule) -> CatalogCardDetail:
        pool: list[CatalogCardSummary] = []
        for tier in rule.tiers:
            page = await self._client.list_by_tier(tier, rule.page_size)
            pool.extend(page.content)

        if not pool:
            raise MalformedCatalogDataError(rule.tiers)

        index = pick_index(len(pool), self._rng)
        return await self._client.get_by_id(pool[index].id)
