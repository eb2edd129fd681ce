import pytest

from smart_pantry.core.constants import VALID_CATEGORIES, DEFAULT_CATEGORY, DEFAULT_EXPIRY_DAYS
from smart_pantry.services.category_heuristics import map_category, estimate_expiry_days


@pytest.mark.parametrize("text, expected", [
    ("Fruits", "Produce"),
    ("Plant-based foods and beverages, Plant-based foods, Fruits, Apples", "Produce"),
    ("Dairies, Cheeses, Cow cheeses", "Dairy"),
    ("Snacks, Sweet snacks, Milk chocolates", "Snacks"),
    ("Meats, Beef, Steaks", "Meat"),
    ("Seafood, Fishes, Salmons", "Seafood"),
    ("Frozen foods, Ice creams", "Frozen"),
    ("Beverages, Fruit juices, Orange juices", "Beverages"),
    ("Beverages, Waters, Mineral waters", "Beverages"),
    ("Breads, Sliced breads", "Bakery"),
    ("Pastas, Dry pastas, Spaghetti", "Pantry"),
    ("Sauces, Ketchups", "Condiments"),
    ("Dishwasher detergents", "Household"),
    ("Shampoos", "Personal Care"),
])
def test_map_category_known_text(text, expected):
    assert map_category(text) == expected


def test_map_category_is_case_insensitive():
    assert map_category("DAIRY") == map_category("dairy") == "Dairy"


@pytest.mark.parametrize("text", [None, "", "Widgets", "???"])
def test_map_category_defaults_to_other(text):
    assert map_category(text) == DEFAULT_CATEGORY


def test_map_category_keeps_taxonomy_labels():
    for category in VALID_CATEGORIES:
        assert map_category(category) == category


def test_map_category_is_deterministic():
    text = "Plant-based foods, Fruits, Apples"
    assert {map_category(text) for _ in range(5)} == {"Produce"}


def test_estimate_expiry_days_positive_for_every_category():
    for category in VALID_CATEGORIES:
        days = estimate_expiry_days(category)
        assert isinstance(days, int)
        assert days > 0


def test_estimate_expiry_days_fallbacks():
    assert estimate_expiry_days(None) == DEFAULT_EXPIRY_DAYS
    assert estimate_expiry_days("Not a category") == DEFAULT_EXPIRY_DAYS


def test_perishables_expire_before_dry_goods():
    assert estimate_expiry_days("Seafood") < estimate_expiry_days("Dairy") < estimate_expiry_days("Pantry")


@pytest.mark.parametrize("text, expected", [
    ("Plant-based foods and beverages, Plant-based foods, Cereals and potatoes, Breads", "Bakery"),
    ("Plant-based foods and beverages, Plant-based foods, Cereals and potatoes, Cereals and their products, Pastas", "Pantry"),
    ("Plant-based foods and beverages, Plant-based foods, Cereals and potatoes, Seeds, Cereal grains, Rices", "Pantry"),
    ("Plant-based foods and beverages, Plant-based foods, Legumes and their products, Legumes, Dried legumes", "Pantry"),
    ("Plant-based foods and beverages, Beverages, Plant-based beverages, Oat-based drinks", "Beverages"),
    ("Plant-based foods and beverages, Beverages, Hot beverages, Teas, Green teas", "Beverages"),
    ("Plant-based foods and beverages, Plant-based foods, Fruits and vegetables based foods, Vegetables, Eggplants", "Produce"),
    ("Farming products, Eggs, Chicken eggs", "Dairy"),
])
def test_map_category_open_food_facts_hierarchies(text, expected):
    assert map_category(text) == expected


def test_short_keywords_do_not_match_inside_words():
    assert map_category("Meals, Veggie burgers") == DEFAULT_CATEGORY
    assert estimate_expiry_days(map_category("Meals, Veggie burgers")) == DEFAULT_EXPIRY_DAYS
    assert map_category("Meats, Beef, Steaks") == "Meat"


def test_generic_beverage_terms_only_apply_without_a_specific_match():
    assert map_category("Beverages") == "Beverages"
    assert map_category("Plant-based foods and beverages, Breads") == "Bakery"
    assert estimate_expiry_days(map_category("Plant-based foods and beverages, Breads")) == 5
