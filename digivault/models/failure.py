"""
Failure classification for the collection core.

Only transport-layer and data-integrity problems are failures here.
Business-rule mismatches (a filter that excludes everything, selling a
card that is not owned, evolving without the source card) are legitimate
empty or unchanged results and never raise.

Every raised failure carries a FailureKind so callers can branch on the
classification instead of parsing messages.
"""

from enum import Enum


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input validation failures
    INVALID_INPUT = "invalid_input"

    # Resource failures
    NOT_FOUND = "not_found"
    UNKNOWN_PACK = "unknown_pack"

    # Constraint violations
    INSUFFICIENT_COINS = "insufficient_coins"
    EVOLUTION_NOT_ALLOWED = "evolution_not_allowed"

    # Catalog failures
    CATALOG_UNAVAILABLE = "catalog_unavailable"
    MALFORMED_CATALOG_DATA = "malformed_catalog_data"


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        super().__init__(message)


class CatalogUnavailableError(KnownError):
    """
    The catalog request failed (network, timeout, status, or parse).

    Propagated verbatim from the gacha composer and the evolution
    resolver. Never retried internally.
    """

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(
            kind=FailureKind.CATALOG_UNAVAILABLE,
            message=message,
            detail=detail,
            suggestion="Check your connection and try again.",
        )


class MalformedCatalogDataError(KnownError):
    """Raised when a draw has no catalog summaries to pick from."""

    def __init__(self, tiers: tuple[str, ...]) -> None:
        self.tiers = tiers
        super().__init__(
            kind=FailureKind.MALFORMED_CATALOG_DATA,
            message=f"Catalog returned no cards for tier(s): {', '.join(tiers)}",
            detail="Cannot select a random card from an empty listing",
        )


class UnknownPackError(KnownError):
    """Raised when a purchase names a pack code that does not exist."""

    def __init__(self, tier_code: str) -> None:
        self.tier_code = tier_code
        super().__init__(
            kind=FailureKind.UNKNOWN_PACK,
            message=f"Unknown pack: {tier_code!r}",
        )


class InsufficientCoinsError(KnownError):
    """Raised when the profile cannot afford a pack."""

    def __init__(self, price: int, balance: int) -> None:
        self.price = price
        self.balance = balance
        super().__init__(
            kind=FailureKind.INSUFFICIENT_COINS,
            message=(
                f"Not enough coins! You need {price} coins but only have {balance} coins."
            ),
            suggestion="Sell some cards to earn more coins.",
        )


class EvolutionNotAllowedError(KnownError):
    """Raised when a caller-side evolution request fails eligibility."""

    def __init__(self, source_id: int, reason: str) -> None:
        self.source_id = source_id
        self.reason = reason
        super().__init__(
            kind=FailureKind.EVOLUTION_NOT_ALLOWED,
            message=f"Card #{source_id} cannot evolve: {reason}",
        )


class InvalidUsernameError(KnownError):
    """Raised when a username fails validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(kind=FailureKind.INVALID_INPUT, message=reason)


class ProfileNotFoundError(KnownError):
    """Raised when a session operation needs a profile and none is stored."""

    def __init__(self) -> None:
        super().__init__(
            kind=FailureKind.NOT_FOUND,
            message="No profile found",
            suggestion="Create a profile before buying packs.",
        )
