"""
Collector session.

The caller-side flow around the collection core: the raw owned-card list
and the profile live in a key-value store, and every mutation is derived
by a core function and then persisted. Core functions return new lists,
so a failed operation leaves the stored state exactly as it was.
"""

import logging
import re
import time

from digivault.config import EVOLUTION_COST, settings
from digivault.models.failure import (
    EvolutionNotAllowedError,
    InsufficientCoinsError,
    InvalidUsernameError,
    ProfileNotFoundError,
    UnknownPackError,
)
from digivault.models.ledger import LedgerEntry
from digivault.models.pack import get_pack
from digivault.models.profile import Profile
from digivault.services.catalog_client import CatalogClient
from digivault.services.entry_resolver import resolve_pack_entries
from digivault.services.evolution import can_evolve, evolve
from digivault.services.gacha import GachaComposer
from digivault.services.ledger import aggregate, find_grouped
from digivault.services.selling import sell
from digivault.storage import KeyValueStore

logger = logging.getLogger(__name__)

PROFILE_KEY = "Profile"
CARDS_KEY = "MyCard"

MAX_INPUT_LENGTH = 100
MIN_USERNAME_LENGTH = 3
MAX_USERNAME_LENGTH = 20

_USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9\s._-]+$")
_EVENT_HANDLER_PATTERN = re.compile(r"on\w+=", re.IGNORECASE)
_JS_PROTOCOL_PATTERN = re.compile(r"javascript:", re.IGNORECASE)


def sanitize_input(value: str) -> str:
    """Strip markup, script protocols and inline handlers; cap the length."""
    if not value or not isinstance(value, str):
        return ""
    cleaned = value.strip().replace("<", "").replace(">", "")
    cleaned = _JS_PROTOCOL_PATTERN.sub("", cleaned)
    cleaned = _EVENT_HANDLER_PATTERN.sub("", cleaned)
    return cleaned[:MAX_INPUT_LENGTH]


def validate_username(username: str) -> str:
    """
    Sanitize and validate a username.

    Returns:
        The sanitized username

    Raises:
        InvalidUsernameError: If the name is empty, too short, too long,
            or uses characters outside letters, digits, spaces and ._-
    """
    sanitized = sanitize_input(username)

    if not sanitized:
        raise InvalidUsernameError("Username is required")
    if len(sanitized) < MIN_USERNAME_LENGTH:
        raise InvalidUsernameError(
            f"Username must be at least {MIN_USERNAME_LENGTH} characters"
        )
    if len(sanitized) > MAX_USERNAME_LENGTH:
        raise InvalidUsernameError(
            f"Username must not exceed {MAX_USERNAME_LENGTH} characters"
        )
    if not _USERNAME_PATTERN.match(sanitized):
        raise InvalidUsernameError("Username contains invalid characters")

    return sanitized


class CollectorSession:
    """
    A player's collection, backed by a key-value store.

    Args:
        store: Where the profile and raw card list are persisted
        client: Catalog used for pack draws and evolutions
        composer: Gacha composer; built over `client` if omitted
    """

    def __init__(
        self,
        store: KeyValueStore,
        client: CatalogClient,
        composer: GachaComposer | None = None,
    ) -> None:
        self._store = store
        self._client = client
        self._composer = composer or GachaComposer(client)

    # -- reads ---------------------------------------------------------------

    def profile(self) -> Profile:
        data = self._store.get(PROFILE_KEY)
        if not data:
            raise ProfileNotFoundError()
        return Profile.model_validate(data)

    def raw_cards(self) -> list[LedgerEntry]:
        return [LedgerEntry.model_validate(row) for row in self._store.get(CARDS_KEY) or []]

    def ledger(
        self,
        filter_category: str | None = None,
        filter_type: str | None = None,
    ) -> list[LedgerEntry]:
        """Grouped view of the collection."""
        return aggregate(self.raw_cards(), filter_category, filter_type)

    # -- writes --------------------------------------------------------------

    def _save_profile(self, profile: Profile) -> None:
        self._store.set(PROFILE_KEY, profile.model_dump(mode="json"))

    def _save_cards(self, cards: list[LedgerEntry]) -> None:
        self._store.set(CARDS_KEY, [card.model_dump(mode="json") for card in cards])

    def create_profile(self, username: str, profile_id: int | None = None) -> Profile:
        """
        Create and store a new profile with the starting coin balance.

        Raises:
            InvalidUsernameError: If the username fails validation
        """
        name = validate_username(username)
        profile = Profile(
            id=profile_id if profile_id is not None else int(time.time() * 1000),
            name=name,
            coins=settings.starting_coins,
        )
        self._save_profile(profile)
        logger.info("profile_created", extra={"profile_id": profile.id})
        return profile

    async def buy_pack(self, tier_code: str) -> list[LedgerEntry]:
        """
        Buy a pack: check balance, draw, append cards, deduct price.

        Nothing is persisted unless every draw succeeds.

        Returns:
            The raw rows added to the collection

        Raises:
            UnknownPackError: If no pack has this code
            InsufficientCoinsError: If the balance is below the price
            CatalogUnavailableError: If a draw fails
            MalformedCatalogDataError: If a draw had nothing to pick from
        """
        pack = get_pack(tier_code)
        if pack is None:
            raise UnknownPackError(tier_code)

        profile = self.profile()
        if profile.coins < pack.price:
            logger.warning(
                "pack_purchase_refused",
                extra={"pack": tier_code, "price": pack.price, "balance": profile.coins},
            )
            raise InsufficientCoinsError(price=pack.price, balance=profile.coins)

        details = await self._composer.draw(pack.tier_code)
        drawn = resolve_pack_entries(details)

        self._save_cards(self.raw_cards() + drawn)
        self._save_profile(profile.model_copy(update={"coins": profile.coins - pack.price}))

        logger.info(
            "pack_purchased",
            extra={"pack": tier_code, "price": pack.price, "cards": len(drawn)},
        )
        return drawn

    def sell_card(self, card_id: int) -> int:
        """
        Sell one copy of a card.

        Returns:
            Coins credited; 0 if the card is not owned
        """
        raw = self.raw_cards()
        sold = next((row for row in raw if row.id == card_id), None)
        if sold is None:
            return 0

        profile = self.profile()
        self._save_cards(sell(raw, card_id))
        self._save_profile(profile.model_copy(update={"coins": profile.coins + sold.sell_price}))

        logger.info("card_sold", extra={"card_id": card_id, "price": sold.sell_price})
        return sold.sell_price

    async def evolve_card(self, source_id: int, target_id: int) -> LedgerEntry:
        """
        Evolve EVOLUTION_COST copies of a card into one of its next forms.

        Returns:
            The evolved raw row

        Raises:
            EvolutionNotAllowedError: If too few copies are owned or the
                target is not one of the source's next evolutions
            CatalogUnavailableError: If fetching the target fails; the
                stored collection is left unchanged
        """
        raw = self.raw_cards()
        grouped = find_grouped(aggregate(raw), source_id)

        if grouped is None or not can_evolve(grouped):
            raise EvolutionNotAllowedError(
                source_id, f"needs {EVOLUTION_COST} copies and a next evolution"
            )
        if target_id not in {evo.id for evo in grouped.next_evolutions}:
            raise EvolutionNotAllowedError(
                source_id, f"#{target_id} is not one of its next evolutions"
            )

        evolved_list = await evolve(raw, source_id, target_id, self._client)
        self._save_cards(evolved_list)
        return evolved_list[-1]
