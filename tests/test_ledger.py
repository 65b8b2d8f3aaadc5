from collections.abc import Callable

import pytest

from digivault.models.ledger import Category, LedgerEntry
from digivault.services.ledger import aggregate, find_grouped, matches_filters

EntryFactory = Callable[..., LedgerEntry]


@pytest.fixture
def mixed_collection(make_entry: EntryFactory) -> list[LedgerEntry]:
    """Raw rows across categories and types, with duplicates."""
    return [
        make_entry(1, name="Agumon", type="Reptile"),
        make_entry(2, name="Greymon", type="Dinosaur", category=Category.CHAMPION),
        make_entry(1, name="Agumon (alt)", type="Reptile"),
        make_entry(3, name="Gabumon", type="reptile"),
        make_entry(2, name="Greymon", type="Dinosaur", category=Category.CHAMPION, is_evolution=True),
        make_entry(4, name="MetalGreymon", type="Cyborg", category=Category.ULTIMATE),
    ]


class TestAggregate:
    def test_scenario_counts(self, make_entry: EntryFactory) -> None:
        """Two pack copies and one evolved copy fold into one row."""
        raw = [
            make_entry(1, is_evolution=False),
            make_entry(1, is_evolution=False),
            make_entry(1, is_evolution=True),
        ]

        grouped = aggregate(raw)

        assert len(grouped) == 1
        entry = grouped[0]
        assert entry.id == 1
        assert entry.total_owned == 3
        assert entry.starter_pack_count == 2
        assert entry.evolution_count == 1

    def test_totals_match_raw_length(self, mixed_collection: list[LedgerEntry]) -> None:
        grouped = aggregate(mixed_collection)

        assert sum(entry.total_owned for entry in grouped) == len(mixed_collection)

    def test_counters_partition_total(self, mixed_collection: list[LedgerEntry]) -> None:
        """Every raw row adds to exactly one of the two counters."""
        for entry in aggregate(mixed_collection):
            assert entry.total_owned == entry.evolution_count + entry.starter_pack_count

    def test_first_seen_order(self, mixed_collection: list[LedgerEntry]) -> None:
        grouped = aggregate(mixed_collection)

        assert [entry.id for entry in grouped] == [1, 2, 3, 4]

    def test_first_row_supplies_static_fields(self, mixed_collection: list[LedgerEntry]) -> None:
        """Later duplicates only contribute counters."""
        agumon = find_grouped(aggregate(mixed_collection), 1)

        assert agumon is not None
        assert agumon.name == "Agumon"
        assert agumon.total_owned == 2

    def test_grouped_row_keeps_first_is_evolution(
        self, mixed_collection: list[LedgerEntry]
    ) -> None:
        greymon = find_grouped(aggregate(mixed_collection), 2)

        assert greymon is not None
        assert greymon.is_evolution is False
        assert greymon.evolution_count == 1
        assert greymon.starter_pack_count == 1

    def test_raw_row_counters_are_ignored(self, make_entry: EntryFactory) -> None:
        """Counters on raw rows carry no meaning; grouping starts from zero."""
        raw = [make_entry(1, total_owned=9, starter_pack_count=9, evolution_count=9)]

        entry = aggregate(raw)[0]

        assert entry.total_owned == 1
        assert entry.starter_pack_count == 1
        assert entry.evolution_count == 0

    def test_empty_list(self) -> None:
        assert aggregate([]) == []

    def test_is_deterministic(self, mixed_collection: list[LedgerEntry]) -> None:
        assert aggregate(mixed_collection, "Rookie") == aggregate(mixed_collection, "Rookie")

    def test_does_not_mutate_input(self, mixed_collection: list[LedgerEntry]) -> None:
        snapshot = list(mixed_collection)

        aggregate(mixed_collection)

        assert mixed_collection == snapshot


class TestAggregateFilters:
    def test_category_filter(self, mixed_collection: list[LedgerEntry]) -> None:
        grouped = aggregate(mixed_collection, filter_category="Champion")

        assert [entry.id for entry in grouped] == [2]
        assert grouped[0].total_owned == 2

    def test_category_filter_is_exact(self, mixed_collection: list[LedgerEntry]) -> None:
        assert aggregate(mixed_collection, filter_category="champion") == []

    def test_type_filter_ignores_case(self, mixed_collection: list[LedgerEntry]) -> None:
        """'reptile' and 'Reptile' are the same type."""
        grouped = aggregate(mixed_collection, filter_type="REPTILE")

        assert [entry.id for entry in grouped] == [1, 3]

    def test_both_filters(self, mixed_collection: list[LedgerEntry]) -> None:
        grouped = aggregate(mixed_collection, filter_category="Rookie", filter_type="reptile")

        assert [entry.id for entry in grouped] == [1, 3]

    def test_empty_filters_accept_everything(self, mixed_collection: list[LedgerEntry]) -> None:
        assert aggregate(mixed_collection, "", "") == aggregate(mixed_collection)
        assert aggregate(mixed_collection, None, None) == aggregate(mixed_collection)

    def test_filter_excluding_everything_is_empty(
        self, mixed_collection: list[LedgerEntry]
    ) -> None:
        assert aggregate(mixed_collection, filter_category="Mega") == []

    def test_refiltering_filtered_subset_is_noop(
        self, mixed_collection: list[LedgerEntry]
    ) -> None:
        subset = [row for row in mixed_collection if matches_filters(row, "Rookie", "reptile")]
        again = [row for row in subset if matches_filters(row, "Rookie", "reptile")]

        assert again == subset
        assert aggregate(subset, "Rookie", "reptile") == aggregate(subset)


class TestFindGrouped:
    def test_missing_id(self, mixed_collection: list[LedgerEntry]) -> None:
        assert find_grouped(aggregate(mixed_collection), 999) is None
