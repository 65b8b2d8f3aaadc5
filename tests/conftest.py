from collections.abc import Callable
from typing import Any

import pytest
from fakes import FakeCatalogClient, catalog_detail_payload

from digivault.models.catalog import CatalogCardDetail
from digivault.models.ledger import Category, LedgerEntry


@pytest.fixture
def detail_payload() -> Callable[..., dict[str, Any]]:
    """Factory for raw catalog detail payloads (wire format)."""
    return catalog_detail_payload


@pytest.fixture
def make_detail() -> Callable[..., CatalogCardDetail]:
    """Factory for parsed catalog details."""

    def factory(card_id: int, **kwargs: Any) -> CatalogCardDetail:
        return CatalogCardDetail.model_validate(catalog_detail_payload(card_id, **kwargs))

    return factory


@pytest.fixture
def make_entry() -> Callable[..., LedgerEntry]:
    """Factory for raw owned-card rows."""

    def factory(card_id: int, **kwargs: Any) -> LedgerEntry:
        defaults: dict[str, Any] = {
            "name": f"Digimon {card_id}",
            "type": "Reptile",
            "attribute": "Vaccine",
            "level": "Child",
            "category": Category.ROOKIE,
            "sell_price": 5,
        }
        defaults.update(kwargs)
        return LedgerEntry(id=card_id, **defaults)

    return factory


@pytest.fixture
def fake_catalog() -> FakeCatalogClient:
    """Catalog with a few cards in every tier the gacha composer uses."""
    return FakeCatalogClient(
        pages={
            "Child": [101, 102, 103, 104],
            "Adult": [201, 202],
            "Armor": [301],
            "Unknown": [401],
            "Hybrid": [501, 502, 503],
            "Ultimate": [601, 602],
            "Perfect": [701, 702, 703],
        }
    )


def fixed_rng(*values: float) -> Callable[[], float]:
    """Random source that replays `values` in order."""
    iterator = iter(values)
    return lambda: next(iterator)


@pytest.fixture
def rng_sequence() -> Callable[..., Callable[[], float]]:
    return fixed_rng
