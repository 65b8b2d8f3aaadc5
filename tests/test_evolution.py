import logging
from collections.abc import Callable

import pytest
from fakes import FakeCatalogClient

from digivault.models.catalog import CatalogCardDetail
from digivault.models.failure import CatalogUnavailableError
from digivault.models.ledger import Category, LedgerEntry
from digivault.services.evolution import can_evolve, evolve, remove_copies
from digivault.services.ledger import aggregate

EntryFactory = Callable[..., LedgerEntry]


class TestRemoveCopies:
    def test_removes_first_matches_only(self, make_entry: EntryFactory) -> None:
        raw = [make_entry(1, name="a"), make_entry(2), make_entry(1, name="b"), make_entry(1, name="c")]

        remaining, removed = remove_copies(raw, 1, limit=2)

        assert removed == 2
        assert [(row.id, row.name) for row in remaining] == [(2, "Digimon 2"), (1, "c")]

    def test_no_matches(self, make_entry: EntryFactory) -> None:
        raw = [make_entry(2)]

        remaining, removed = remove_copies(raw, 1, limit=3)

        assert removed == 0
        assert remaining == raw


class TestEvolve:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(("copies", "consumed"), [(0, 0), (1, 1), (2, 2), (3, 3), (5, 3)])
    async def test_bounded_removal(
        self,
        make_entry: EntryFactory,
        fake_catalog: FakeCatalogClient,
        copies: int,
        consumed: int,
    ) -> None:
        """len(result) == len(raw) - min(n, 3) + 1."""
        raw = [make_entry(9)] + [make_entry(1) for _ in range(copies)]

        result = await evolve(raw, 1, 42, fake_catalog)

        assert len(result) == len(raw) - consumed + 1
        assert sum(1 for row in result if row.id == 1) == copies - consumed

    @pytest.mark.asyncio
    async def test_appends_evolved_card_last(
        self,
        make_entry: EntryFactory,
        make_detail: Callable[..., CatalogCardDetail],
        fake_catalog: FakeCatalogClient,
    ) -> None:
        fake_catalog.details[42] = make_detail(42, name="Greymon", level="Adult", next_evolution_ids=(43,))
        raw = [make_entry(1), make_entry(1), make_entry(1), make_entry(7)]

        result = await evolve(raw, 1, 42, fake_catalog)

        assert [row.id for row in result] == [7, 42]
        evolved = result[-1]
        assert evolved.name == "Greymon"
        assert evolved.is_evolution is True
        assert evolved.category == Category.CHAMPION
        assert evolved.sell_price == 10
        assert (evolved.total_owned, evolved.evolution_count, evolved.starter_pack_count) == (0, 0, 0)
        assert fake_catalog.get_calls == [42]

    @pytest.mark.asyncio
    async def test_evolving_without_source_still_appends(
        self,
        make_entry: EntryFactory,
        fake_catalog: FakeCatalogClient,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Owning the source is not required, but it is logged."""
        raw = [make_entry(7)]

        with caplog.at_level(logging.WARNING, logger="digivault.services.evolution"):
            result = await evolve(raw, 1, 42, fake_catalog)

        assert [row.id for row in result] == [7, 42]
        assert "evolution_without_source" in caplog.text

    @pytest.mark.asyncio
    async def test_owned_source_logs_no_warning(
        self,
        make_entry: EntryFactory,
        fake_catalog: FakeCatalogClient,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        raw = [make_entry(1), make_entry(1), make_entry(1)]

        with caplog.at_level(logging.WARNING, logger="digivault.services.evolution"):
            await evolve(raw, 1, 42, fake_catalog)

        assert "evolution_without_source" not in caplog.text

    @pytest.mark.asyncio
    async def test_does_not_mutate_input(
        self,
        make_entry: EntryFactory,
        fake_catalog: FakeCatalogClient,
    ) -> None:
        raw = [make_entry(1), make_entry(1), make_entry(1)]
        snapshot = list(raw)

        await evolve(raw, 1, 42, fake_catalog)

        assert raw == snapshot

    @pytest.mark.asyncio
    async def test_fetch_failure_propagates(
        self,
        make_entry: EntryFactory,
        fake_catalog: FakeCatalogClient,
    ) -> None:
        """The caller's list is untouched when the catalog fails."""
        fake_catalog.failing_ids.add(42)
        raw = [make_entry(1), make_entry(1), make_entry(1)]

        with pytest.raises(CatalogUnavailableError):
            await evolve(raw, 1, 42, fake_catalog)

        assert len(raw) == 3

    @pytest.mark.asyncio
    async def test_evolved_row_aggregates_as_evolution(
        self,
        make_entry: EntryFactory,
        fake_catalog: FakeCatalogClient,
    ) -> None:
        raw = [make_entry(1), make_entry(1), make_entry(1)]

        grouped = aggregate(await evolve(raw, 1, 42, fake_catalog))

        assert len(grouped) == 1
        assert grouped[0].id == 42
        assert grouped[0].evolution_count == 1
        assert grouped[0].starter_pack_count == 0


class TestCanEvolve:
    def test_needs_three_copies(self, make_entry: EntryFactory, make_detail) -> None:
        evolutions = make_detail(1, next_evolution_ids=(2,)).next_evolutions
        two = make_entry(1, total_owned=2, next_evolutions=evolutions)
        three = make_entry(1, total_owned=3, next_evolutions=evolutions)

        assert can_evolve(two) is False
        assert can_evolve(three) is True

    def test_needs_next_evolution(self, make_entry: EntryFactory) -> None:
        assert can_evolve(make_entry(1, total_owned=5)) is False
