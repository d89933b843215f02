from cafemachine.config import MachineSettings, get_settings
from cafemachine.core.clock import AsyncioClock, Clock, InstantClock
from cafemachine.domain import (
    CoffeeMachineError,
    DrinkType,
    InsufficientCoffeeError,
    InsufficientIngredientError,
    InsufficientMilkError,
    InsufficientWaterError,
    MachineStatus,
    Recipe,
    RecipeBook,
    TankEmptyError,
    UnsupportedDrinkError,
)
from cafemachine.machine import CoffeeMachine
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "AsyncioClock",
    "Clock",
    "CoffeeMachine",
    "CoffeeMachineError",
    "DrinkType",
    "InstantClock",
    "InsufficientCoffeeError",
    "InsufficientIngredientError",
    "InsufficientMilkError",
    "InsufficientWaterError",
    "MachineSettings",
    "MachineStatus",
    "Recipe",
    "RecipeBook",
    "TankEmptyError",
    "UnsupportedDrinkError",
    "get_settings",
]

try:
    __version__ = version("cafemachine")
except PackageNotFoundError:
    __version__ = "0.0.0"
