from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PackDefinition:
    """
    A purchasable pack.

    Attributes:
        id: Stable pack identifier
        tier_code: Composition key ("C", "B", "A" or "R")
        price: Cost in coins
        name: Display name
        image: Artwork reference
        description: Marketing copy shown with the pack
    """

    id: int
    tier_code: str
    price: int
    name: str
    image: str
    description: str


STARTER_PACKS: tuple[PackDefinition, ...] = (
    PackDefinition(
        id=1,
        tier_code="C",
        price=5,
        name="Common",
        image="/images/common.png",
        description=(
            "Perfect for beginners! Get 4 Rookie cards to start your collection "
            "and 1 Champion to lead your team into battle."
        ),
    ),
    PackDefinition(
        id=2,
        tier_code="B",
        price=10,
        name="Balance",
        image="/images/balance.png",
        description=(
            "The smart choice! Build a balanced deck with 2 Rookies, 2 Champions, "
            "and your first Ultimate card."
        ),
    ),
    PackDefinition(
        id=3,
        tier_code="A",
        price=15,
        name="Advanced",
        image="/images/advance.png",
        description=(
            "Power up your game! Unlock advanced strategies with 1 Rookie, "
            "2 Champions, and 2 powerful Ultimate cards."
        ),
    ),
    PackDefinition(
        id=4,
        tier_code="R",
        price=20,
        name="Rare",
        image="/images/rare.png",
        description=(
            "The ultimate pack! Experience legendary power with 1 Champion, "
            "2 Ultimates, and 1 exclusive Mega card."
        ),
    ),
)

_PACKS_BY_CODE = {pack.tier_code: pack for pack in STARTER_PACKS}


def get_pack(tier_code: str) -> PackDefinition | None:
    """Look up a pack by its tier code."""
    return _PACKS_BY_CODE.get(tier_code)


def pack_price(tier_code: str) -> int:
    """Price of a pack in coins, 0 for unknown codes."""
    pack = get_pack(tier_code)
    return pack.price if pack else 0
