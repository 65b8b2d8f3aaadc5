"""
Ledger aggregation.

Projects the raw owned-card list (one row per physical copy) into a
grouped view with one row per distinct card id.

INVARIANTS:
1. total_owned of a grouped row == number of raw rows with that id
2. Each raw row adds 1 to exactly one of evolution_count / starter_pack_count
3. The first raw row seen for an id supplies the static fields
4. Output order is first appearance; no sorting
"""

from collections.abc import Iterable, Sequence

from digivault.models.ledger import LedgerEntry


def matches_filters(
    entry: LedgerEntry,
    filter_category: str | None = None,
    filter_type: str | None = None,
) -> bool:
    """
    Check a raw row against the optional filters.

    Category must match exactly; type matches case-insensitively. An empty
    or missing filter accepts everything.
    """
    if filter_category and entry.category != filter_category:
        return False
    if filter_type and entry.type.lower() != filter_type.lower():
        return False
    return True


def _fold(group: LedgerEntry | None, row: LedgerEntry) -> LedgerEntry:
    """Fold one raw row into its group; the first row seeds the group."""
    if group is None:
        # Raw-row counters are not trusted; a new group starts from zero
        group = row.model_copy(
            update={"total_owned": 0, "evolution_count": 0, "starter_pack_count": 0}
        )
    base = group
    return base.model_copy(
        update={
            "total_owned": base.total_owned + 1,
            "evolution_count": base.evolution_count + (1 if row.is_evolution else 0),
            "starter_pack_count": base.starter_pack_count + (0 if row.is_evolution else 1),
        }
    )


def aggregate(
    raw_cards: Iterable[LedgerEntry],
    filter_category: str | None = None,
    filter_type: str | None = None,
) -> list[LedgerEntry]:
    """
    Group raw rows by card id.

    Args:
        raw_cards: The caller's raw owned-card list
        filter_category: Keep only rows whose category equals this
        filter_type: Keep only rows whose type equals this, ignoring case

    Returns:
        Grouped rows in order of first appearance
    """
    grouped: dict[int, LedgerEntry] = {}

    for row in raw_cards:
        if not matches_filters(row, filter_category, filter_type):
            continue
        grouped[row.id] = _fold(grouped.get(row.id), row)

    return list(grouped.values())


def find_grouped(grouped: Sequence[LedgerEntry], card_id: int) -> LedgerEntry | None:
    """Grouped row for a card id, or None if not owned."""
    return next((entry for entry in grouped if entry.id == card_id), None)
