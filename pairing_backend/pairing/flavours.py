from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ..catalog.models import DrinkRecord

# ---------------------------------------------------------------------------
# Flavour keyword table
# ---------------------------------------------------------------------------
# Dish keyword (matched as a substring of the lowercased dish) -> flavour
# descriptors that complement it. Several entries may fire for one dish.

FLAVOUR_KEYWORDS: Mapping[str, frozenset[str]] = MappingProxyType({
    "beef": frozenset({"malt", "caramel", "rich", "roast", "oak", "robust"}),
    "steak": frozenset({"malt", "rich", "oak", "robust", "peppery"}),
    "lamb": frozenset({"herb", "fruit", "rich", "spice", "blackcurrant"}),
    "pork": frozenset({"apple", "crisp", "honey", "sweet"}),
    "sausage": frozenset({"malt", "biscuit", "apple"}),
    "bangers": frozenset({"malt", "biscuit", "apple"}),
    "chicken": frozenset({"crisp", "apple", "citrus", "light", "floral"}),
    "fish": frozenset({"citrus", "crisp", "light", "lemon", "mineral", "dry"}),
    "chips": frozenset({"crisp", "citrus", "dry"}),
    "seafood": frozenset({"mineral", "citrus", "crisp", "juniper"}),
    "salmon": frozenset({"smoky", "peat", "citrus", "cucumber"}),
    "oyster": frozenset({"mineral", "seaweed", "brioche", "bubbles"}),
    "curry": frozenset({"ginger", "spice", "sweet", "molasses", "fruit"}),
    "tikka": frozenset({"ginger", "spice", "citrus"}),
    "spicy": frozenset({"ginger", "sweet", "citrus"}),
    "cheese": frozenset({"apple", "fruit", "toffee", "oak", "biscuit", "peat"}),
    "ploughman": frozenset({"apple", "crisp", "biscuit", "malt"}),
    "pie": frozenset({"malt", "biscuit", "fruit", "rich"}),
    "roast": frozenset({"malt", "biscuit", "roast", "rich", "robust"}),
    "breakfast": frozenset({"malt", "robust", "brisk"}),
    "bacon": frozenset({"malt", "smoky", "robust"}),
    "smoked": frozenset({"peat", "smoky", "oak"}),
    "game": frozenset({"fruitcake", "blackcurrant", "rich", "dark"}),
    "venison": frozenset({"fruitcake", "blackcurrant", "rich", "dark"}),
    "dessert": frozenset({"toffee", "butterscotch", "vanilla", "caramel", "honey"}),
    "pudding": frozenset({"toffee", "fruitcake", "vanilla", "caramel", "malt"}),
    "chocolate": frozenset({"vanilla", "molasses", "butterscotch", "oak"}),
    "cake": frozenset({"bergamot", "honey", "vanilla", "lemon"}),
    "scone": frozenset({"bergamot", "malt", "honey"}),
    "sandwich": frozenset({"cucumber", "floral", "bergamot"}),
    "salad": frozenset({"cucumber", "elderflower", "floral", "crisp", "citrus"}),
    "burger": frozenset({"caramel", "malt", "cola", "ginger"}),
    "bbq": frozenset({"smoky", "caramel", "molasses", "spice"}),
    "pizza": frozenset({"herbal", "citrus", "malt"}),
})


# ---------------------------------------------------------------------------
# Categorical dish x drink rules
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CategoryRule:
    """Bonus awarded when the dish mentions a keyword and the drink fits.

    A rule with ``drink_types`` needs the drink type to be one of them; a
    rule with ``flavour_keyword`` needs it in the drink's flavour notes.
    When both are set, both must hold.
    """

    dish_keyword: str
    bonus: float
    drink_types: frozenset[str] = frozenset()
    flavour_keyword: str | None = None

    def applies(self, dish_lower: str, drink: DrinkRecord) -> bool:
        if self.dish_keyword not in dish_lower:
            return False
        if self.drink_types and drink.type.lower() not in self.drink_types:
            return False
        if self.flavour_keyword and self.flavour_keyword not in drink.flavour_notes.lower():
            return False
        return True


CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule("fish", 20, frozenset({"ale", "wine"})),
    CategoryRule("beef", 20, frozenset({"ale", "whisky"})),
    CategoryRule("chicken", 20, frozenset({"cider", "wine"})),
    CategoryRule("pork", 25, frozenset({"cider"})),
    CategoryRule("curry", 20, frozenset({"ale", "rum", "soft drink"})),
    CategoryRule("curry", 15, flavour_keyword="ginger"),
    CategoryRule("cheese", 20, frozenset({"cider", "ale"})),
    CategoryRule("pie", 25, frozenset({"ale"})),
    CategoryRule("roast", 25, frozenset({"ale", "tea"})),
    CategoryRule("breakfast", 30, frozenset({"tea"})),
    CategoryRule("spicy", 25, frozenset({"soft drink"})),
    CategoryRule("spicy", 10, flavour_keyword="ginger"),
    CategoryRule("chocolate", 20, frozenset({"rum", "whisky"})),
    CategoryRule("cake", 20, frozenset({"tea"})),
    CategoryRule("oyster", 20, frozenset({"wine", "whisky"})),
    CategoryRule("salmon", 15, frozenset({"gin", "whisky"})),
)

# Description words that mark small or independent producers
CRAFT_WORDS: tuple[str, ...] = ("micro", "craft", "independent", "family")

# Used by the fallback dish analysis and to pad short generative analyses
GENERIC_CHARACTERISTICS: tuple[str, ...] = ("savoury", "hearty", "traditional")

TRENDING_DISHES: tuple[str, ...] = (
    "Fish & Chips",
    "Roast Beef",
    "Shepherd's Pie",
    "Chicken Tikka Masala",
    "Full English Breakfast",
    "Bangers & Mash",
    "Steak & Ale Pie",
    "Sunday Roast",
    "Cornish Pasty",
    "Beef Wellington",
    "Cheese Ploughman's",
    "Welsh Rarebit",
)
