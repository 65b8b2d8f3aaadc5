"""
Pricing rules.

Maps the catalog's raw tier vocabulary onto the coarse Category and
prices a card for selling.
"""

from digivault.models.ledger import Category

_TIER_CATEGORIES: dict[str, Category] = {
    "Child": Category.ROOKIE,
    # Synonym bucket: every mid-level tier reads as Champion
    "Adult": Category.CHAMPION,
    "Armor": Category.CHAMPION,
    "Unknown": Category.CHAMPION,
    "Hybrid": Category.CHAMPION,
    "Ultimate": Category.ULTIMATE,
    "Perfect": Category.MEGA,
}

_CATEGORY_PRICES: dict[str, int] = {
    Category.ROOKIE.value: 5,
    Category.CHAMPION.value: 10,
    Category.ULTIMATE.value: 20,
    Category.MEGA.value: 30,
}

# Price of a final form, one that has no further evolution
FINAL_FORM_PRICE = 100

# Price of anything outside the priced categories
FALLBACK_PRICE = 1


def category_of(tier_name: str) -> Category:
    """
    Collapse a raw catalog tier name into a Category.

    Unrecognized or empty names map to Baby.
    """
    return _TIER_CATEGORIES.get(tier_name, Category.BABY)


def sell_price(category: str, has_further_evolution: bool) -> int:
    """
    Coins credited for selling one copy.

    A card that cannot evolve further is always worth the final-form
    price, whatever its category.
    """
    if not has_further_evolution:
        return FINAL_FORM_PRICE
    if isinstance(category, Category):
        category = category.value
    return _CATEGORY_PRICES.get(category, FALLBACK_PRICE)
