"""
Recipe book for the simulated machine.

Only two drinks are supported: a plain coffee (one espresso shot) and a
cappuccino (the same shot plus steamed milk). Each recipe lists the minimum
levels the machine must hold before preparation starts.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from cafemachine.domain.errors import UnsupportedDrinkError


class DrinkType(str, Enum):
    COFFEE = "coffee"
    CAPPUCCINO = "cappuccino"


# Amount each step takes out of its tank.
GRIND_COFFEE_AMOUNT = 10
EXTRACT_WATER_AMOUNT = 50
STEAM_MILK_AMOUNT = 20

# Simulated step durations, in seconds.
HEAT_DELAY = 3.0
GRIND_DELAY = 2.0
EXTRACT_DELAY = 3.0
STEAM_DELAY = 3.0


@dataclass(frozen=True)
class Recipe:
    """
    Requirements for a single drink.

    Attributes:
        drink: The drink this recipe makes.
        display_name: Human-readable name used in console output.
        water: Minimum water level required.
        coffee: Minimum coffee level required.
        milk: Minimum milk level required.
        steams_milk: Whether the milk steaming step runs.
    """
    drink: DrinkType
    display_name: str
    water: int
    coffee: int
    milk: int = 0
    steams_milk: bool = False

    @property
    def name(self) -> str:
        return self.drink.value


RECIPES: dict[DrinkType, Recipe] = {
    DrinkType.COFFEE: Recipe(
        drink=DrinkType.COFFEE,
        display_name="Coffee",
        water=EXTRACT_WATER_AMOUNT,
        coffee=GRIND_COFFEE_AMOUNT,
    ),
    DrinkType.CAPPUCCINO: Recipe(
        drink=DrinkType.CAPPUCCINO,
        display_name="Cappuccino",
        water=EXTRACT_WATER_AMOUNT,
        coffee=GRIND_COFFEE_AMOUNT,
        milk=STEAM_MILK_AMOUNT,
        steams_milk=True,
    ),
}

# Alternative spellings accepted on lookup.
ALIASES: dict[str, DrinkType] = {
    "café": DrinkType.COFFEE,
    "cafe": DrinkType.COFFEE,
    "espresso": DrinkType.COFFEE,
}


def _normalize(name: str | DrinkType) -> str:
    if isinstance(name, DrinkType):
        return name.value
    return str(name).strip().lower()


class RecipeBook:
    """Read-only lookup of the supported recipes by name."""

    def __init__(self) -> None:
        self._by_name: dict[str, Recipe] = {r.name: r for r in RECIPES.values()}
        for alias, drink in ALIASES.items():
            self._by_name[alias] = RECIPES[drink]

    def get(self, name: str | DrinkType) -> Optional[Recipe]:
        """
        Look up a recipe by drink name.

        Args:
            name: The drink name (e.g. ``"cappuccino"``); whitespace and case
                are ignored.

        Returns:
            The ``Recipe`` if the drink is supported, otherwise ``None``.
        """
        return self._by_name.get(_normalize(name))

    def require(self, name: str | DrinkType) -> Recipe:
        recipe = self.get(name)
        if recipe is None:
            raise UnsupportedDrinkError(str(name))
        return recipe

    def all(self) -> list[Recipe]:
        """Return every supported recipe, coffee first."""
        return list(RECIPES.values())

    def __len__(self) -> int:
        return len(RECIPES)

    def __contains__(self, item: str | DrinkType) -> bool:
        return _normalize(item) in self._by_name
