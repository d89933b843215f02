"""Tests for the RecipeBook and Recipe."""
import pytest

from cafemachine.domain.errors import UnsupportedDrinkError
from cafemachine.domain.recipes import DrinkType, Recipe, RecipeBook


def test_book_has_two_recipes():
    book = RecipeBook()
    assert len(book) == 2
    assert [r.drink for r in book.all()] == [DrinkType.COFFEE, DrinkType.CAPPUCCINO]


def test_coffee_recipe():
    recipe = RecipeBook().get("coffee")
    assert recipe is not None
    assert (recipe.water, recipe.coffee, recipe.milk) == (50, 10, 0)
    assert recipe.steams_milk is False
    assert recipe.display_name == "Coffee"


def test_cappuccino_recipe():
    recipe = RecipeBook().get(DrinkType.CAPPUCCINO)
    assert recipe is not None
    assert (recipe.water, recipe.coffee, recipe.milk) == (50, 10, 20)
    assert recipe.steams_milk is True


def test_lookup_normalizes_name():
    book = RecipeBook()
    assert book.get("  Cappuccino ").name == "cappuccino"
    assert book.get("CAFÉ").drink is DrinkType.COFFEE


def test_unknown_name():
    book = RecipeBook()
    assert book.get("tea") is None
    assert "tea" not in book
    assert "coffee" in book


def test_require_raises_for_unknown():
    with pytest.raises(UnsupportedDrinkError) as excinfo:
        RecipeBook().require("thé")
    assert excinfo.value.drink == "thé"
    assert str(excinfo.value) == "Drink 'thé' is not supported"


def test_recipe_is_frozen():
    recipe = RecipeBook().get("coffee")
    with pytest.raises(AttributeError):
        recipe.water = 0


def test_custom_recipe_defaults():
    recipe = Recipe(drink=DrinkType.COFFEE, display_name="Ristretto", water=25, coffee=10)
    assert recipe.milk == 0
    assert recipe.steams_milk is False
    assert recipe.name == "coffee"
