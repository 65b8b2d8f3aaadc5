from collections.abc import Sequence

from digivault.models.ledger import LedgerEntry
from digivault.services.evolution import remove_copies


def sell(raw_cards: Sequence[LedgerEntry], card_id: int) -> list[LedgerEntry]:
    """
    Remove the first row matching card_id.

    Later rows with the same id are kept. Selling an id that is not owned
    returns an equal list and never raises.
    """
    remaining, _ = remove_copies(raw_cards, card_id, limit=1)
    return remaining
