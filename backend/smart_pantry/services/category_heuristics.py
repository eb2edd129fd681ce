"""
Category / Expiry Heuristics

Maps free-text category strings (Open Food Facts "categories", user input)
to the fixed product taxonomy, and derives a default shelf life per category.

Both functions are pure lookups over the static tables below.
"""

import re
from typing import Optional

from smart_pantry.core.constants import (
    CATEGORY_DAIRY,
    CATEGORY_MEAT,
    CATEGORY_SEAFOOD,
    CATEGORY_PRODUCE,
    CATEGORY_BAKERY,
    CATEGORY_FROZEN,
    CATEGORY_BEVERAGES,
    CATEGORY_SNACKS,
    CATEGORY_PANTRY,
    CATEGORY_CONDIMENTS,
    CATEGORY_HOUSEHOLD,
    CATEGORY_PERSONAL_CARE,
    DEFAULT_CATEGORY,
    DEFAULT_EXPIRY_DAYS,
)


# Ordered (keyword, category) pairs, matched as lowercase substrings.
# Within one segment the first keyword found wins, so more specific keywords
# ("ice cream", "juice") come before broader ones ("cream", "fruit").
CATEGORY_KEYWORDS = [
    # Frozen
    ("frozen", CATEGORY_FROZEN),
    ("ice cream", CATEGORY_FROZEN),
    ("surgel", CATEGORY_FROZEN),
    # Eggs before meat ("Chicken eggs")
    ("egg", CATEGORY_DAIRY),
    # Seafood
    ("seafood", CATEGORY_SEAFOOD),
    ("fish", CATEGORY_SEAFOOD),
    ("salmon", CATEGORY_SEAFOOD),
    ("tuna", CATEGORY_SEAFOOD),
    ("shrimp", CATEGORY_SEAFOOD),
    # Meat
    ("meat", CATEGORY_MEAT),
    ("beef", CATEGORY_MEAT),
    ("pork", CATEGORY_MEAT),
    ("poultry", CATEGORY_MEAT),
    ("chicken", CATEGORY_MEAT),
    ("steak", CATEGORY_MEAT),
    ("sausage", CATEGORY_MEAT),
    ("bacon", CATEGORY_MEAT),
    ("salami", CATEGORY_MEAT),
    # Snacks (before dairy so "milk chocolate" is a snack)
    ("snack", CATEGORY_SNACKS),
    ("chocolate", CATEGORY_SNACKS),
    ("candy", CATEGORY_SNACKS),
    ("confectioner", CATEGORY_SNACKS),
    ("chips", CATEGORY_SNACKS),
    ("crisps", CATEGORY_SNACKS),
    ("cookie", CATEGORY_SNACKS),
    # Dairy
    ("dairy", CATEGORY_DAIRY),
    ("dairies", CATEGORY_DAIRY),
    ("milk", CATEGORY_DAIRY),
    ("cheese", CATEGORY_DAIRY),
    ("yogurt", CATEGORY_DAIRY),
    ("yoghurt", CATEGORY_DAIRY),
    ("butter", CATEGORY_DAIRY),
    ("cream", CATEGORY_DAIRY),
    # Juices before fruit
    ("juice", CATEGORY_BEVERAGES),
    ("fruit", CATEGORY_PRODUCE),
    ("vegetable", CATEGORY_PRODUCE),
    ("produce", CATEGORY_PRODUCE),
    ("salad", CATEGORY_PRODUCE),
    ("apple", CATEGORY_PRODUCE),
    ("banana", CATEGORY_PRODUCE),
    ("tomato", CATEGORY_PRODUCE),
    ("melon", CATEGORY_PRODUCE),
    # Beverages
    ("water", CATEGORY_BEVERAGES),
    ("soda", CATEGORY_BEVERAGES),
    ("coffee", CATEGORY_BEVERAGES),
    ("tea", CATEGORY_BEVERAGES),
    ("wine", CATEGORY_BEVERAGES),
    ("beer", CATEGORY_BEVERAGES),
    # Bakery
    ("bakery", CATEGORY_BAKERY),
    ("bread", CATEGORY_BAKERY),
    ("pastr", CATEGORY_BAKERY),
    ("croissant", CATEGORY_BAKERY),
    ("cake", CATEGORY_BAKERY),
    ("biscuit", CATEGORY_BAKERY),
    # Condiments
    ("condiment", CATEGORY_CONDIMENTS),
    ("sauce", CATEGORY_CONDIMENTS),
    ("ketchup", CATEGORY_CONDIMENTS),
    ("mayonnaise", CATEGORY_CONDIMENTS),
    ("mustard", CATEGORY_CONDIMENTS),
    ("dressing", CATEGORY_CONDIMENTS),
    ("spice", CATEGORY_CONDIMENTS),
    ("vinegar", CATEGORY_CONDIMENTS),
    ("olive oil", CATEGORY_CONDIMENTS),
    # Dry pantry goods
    ("pantry", CATEGORY_PANTRY),
    ("pasta", CATEGORY_PANTRY),
    ("spaghetti", CATEGORY_PANTRY),
    ("rice", CATEGORY_PANTRY),
    ("cereal", CATEGORY_PANTRY),
    ("grain", CATEGORY_PANTRY),
    ("flour", CATEGORY_PANTRY),
    ("legume", CATEGORY_PANTRY),
    ("bean", CATEGORY_PANTRY),
    ("canned", CATEGORY_PANTRY),
    ("noodle", CATEGORY_PANTRY),
    ("sugar", CATEGORY_PANTRY),
    # Non-food
    ("household", CATEGORY_HOUSEHOLD),
    ("detergent", CATEGORY_HOUSEHOLD),
    ("cleaning", CATEGORY_HOUSEHOLD),
    ("laundry", CATEGORY_HOUSEHOLD),
    ("dishwasher", CATEGORY_HOUSEHOLD),
    ("personal care", CATEGORY_PERSONAL_CARE),
    ("shampoo", CATEGORY_PERSONAL_CARE),
    ("soap", CATEGORY_PERSONAL_CARE),
    ("toothpaste", CATEGORY_PERSONAL_CARE),
    ("cosmetic", CATEGORY_PERSONAL_CARE),
    ("hygiene", CATEGORY_PERSONAL_CARE),
]

# Short keywords that only count as whole words ("egg" is not "veggie",
# "tea" is not "steak"). A trailing plural "s" is allowed.
WHOLE_WORD_KEYWORDS = {"egg", "tea", "rice"}

# Umbrella terms Open Food Facts puts at the top of a hierarchy
# ("Plant-based foods and beverages"). Only used when no keyword above matches.
GENERIC_KEYWORDS = [
    ("beverage", CATEGORY_BEVERAGES),
    ("drink", CATEGORY_BEVERAGES),
]

# Default shelf life in days per taxonomy category
CATEGORY_EXPIRY_DAYS = {
    CATEGORY_DAIRY: 7,
    CATEGORY_MEAT: 3,
    CATEGORY_SEAFOOD: 2,
    CATEGORY_PRODUCE: 7,
    CATEGORY_BAKERY: 5,
    CATEGORY_FROZEN: 90,
    CATEGORY_BEVERAGES: 180,
    CATEGORY_SNACKS: 90,
    CATEGORY_PANTRY: 365,
    CATEGORY_CONDIMENTS: 180,
    CATEGORY_HOUSEHOLD: 730,
    CATEGORY_PERSONAL_CARE: 730,
    DEFAULT_CATEGORY: DEFAULT_EXPIRY_DAYS,
}


def _keyword_in(keyword: str, segment: str) -> bool:
    if keyword in WHOLE_WORD_KEYWORDS:
        return re.search(rf"\b{re.escape(keyword)}s?\b", segment) is not None
    return keyword in segment


def _match(segments: list[str], table: list[tuple[str, str]]) -> Optional[str]:
    for segment in segments:
        for keyword, category in table:
            if _keyword_in(keyword, segment):
                return category
    return None


def map_category(free_text: Optional[str]) -> str:
    """
    Map free text to a taxonomy category.

    Comma-separated hierarchies are read from the most specific (last)
    segment to the broadest, so "Plant-based foods and beverages, ..., Breads"
    is Bakery rather than Beverages.

    Example:
        map_category("Plant-based foods, Fruits, Apples")  # "Produce"
        map_category("Dairies, Cheeses")                   # "Dairy"
        map_category(None)                                 # "Other"
    """
    if not free_text:
        return DEFAULT_CATEGORY

    segments = [s.strip() for s in free_text.lower().split(",") if s.strip()]
    segments.reverse()

    return (
        _match(segments, CATEGORY_KEYWORDS)
        or _match(segments, GENERIC_KEYWORDS)
        or DEFAULT_CATEGORY
    )


def estimate_expiry_days(category: Optional[str]) -> int:
    """Default shelf life for a taxonomy category; DEFAULT_EXPIRY_DAYS when unmapped."""
    if category is None:
        return DEFAULT_EXPIRY_DAYS
    return CATEGORY_EXPIRY_DAYS.get(category, DEFAULT_EXPIRY_DAYS)
