from __future__ import annotations

from typing import Optional


class CoffeeMachineError(Exception):
    """Base class for every failure a drink order can run into."""

    def __init__(self, message: str, drink: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.drink = drink


class UnsupportedDrinkError(CoffeeMachineError):
    def __init__(self, drink: str) -> None:
        super().__init__(f"Drink '{drink}' is not supported", drink=drink)


class TankEmptyError(CoffeeMachineError):
    def __init__(self, drink: Optional[str] = None) -> None:
        super().__init__("Please fill the water tank", drink=drink)


class InsufficientIngredientError(CoffeeMachineError):
    resource = "ingredient"

    def __init__(self, drink: str, available: int, required: int) -> None:
        self.available = available
        self.required = required
        super().__init__(
            f"Cannot prepare {drink}: not enough {self.resource} ({available}/{required})",
            drink=drink,
        )


class InsufficientWaterError(InsufficientIngredientError):
    resource = "water"


class InsufficientCoffeeError(InsufficientIngredientError):
    resource = "coffee"


class InsufficientMilkError(InsufficientIngredientError):
    resource = "milk"
