"""
This package defines the domain model of the simulated coffee machine:
the supported recipes, the errors an order can fail with, and the status
snapshot a machine reports.
"""
from cafemachine.domain.errors import (
    CoffeeMachineError,
    InsufficientCoffeeError,
    InsufficientIngredientError,
    InsufficientMilkError,
    InsufficientWaterError,
    TankEmptyError,
    UnsupportedDrinkError,
)
from cafemachine.domain.recipes import DrinkType, Recipe, RecipeBook
from cafemachine.domain.status import MachineStatus

__all__ = [
    "CoffeeMachineError",
    "DrinkType",
    "InsufficientCoffeeError",
    "InsufficientIngredientError",
    "InsufficientMilkError",
    "InsufficientWaterError",
    "MachineStatus",
    "Recipe",
    "RecipeBook",
    "TankEmptyError",
    "UnsupportedDrinkError",
]
