"""
The simulated coffee machine.

A :class:`CoffeeMachine` holds three resource levels and a heating flag. Its
step coroutines (heat, grind, extract, steam) wait on the injected clock and
then mutate that state. ``prepare_drink`` chains them into a recipe while
holding the machine lock, so overlapping orders are served one at a time and
each one is checked against the levels left by the previous one.
"""
from __future__ import annotations

import asyncio
import itertools
import logging
from typing import Any, Dict, List, Optional

from cafemachine.config import MachineSettings, get_settings
from cafemachine.core.clock import AsyncioClock, Clock
from cafemachine.domain.errors import (
    CoffeeMachineError,
    InsufficientCoffeeError,
    InsufficientMilkError,
    InsufficientWaterError,
    TankEmptyError,
)
from cafemachine.domain.recipes import (
    EXTRACT_DELAY,
    EXTRACT_WATER_AMOUNT,
    GRIND_COFFEE_AMOUNT,
    GRIND_DELAY,
    HEAT_DELAY,
    STEAM_DELAY,
    STEAM_MILK_AMOUNT,
    DrinkType,
    Recipe,
    RecipeBook,
)
from cafemachine.domain.status import MachineStatus
from cafemachine.logging import MachineLogger

_machine_ids = itertools.count(1)


class CoffeeMachine:
    def __init__(
        self,
        clock: Optional[Clock] = None,
        recipes: Optional[RecipeBook] = None,
        settings: Optional[MachineSettings] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.water_level = 0
        self.coffee_level = 0
        self.milk_level = 0
        self.is_heating = False

        self.clock: Clock = clock or AsyncioClock()
        self.recipes = recipes or RecipeBook()
        self.settings = settings or get_settings()
        self.logger = MachineLogger(
            next(_machine_ids),
            ring_size=self.settings.log_ring_size,
            level=self.settings.log_level,
            logger=logger,
        )
        self._lock: Optional[asyncio.Lock] = None
        self._lock_loop: Optional[asyncio.AbstractEventLoop] = None

    def _prepare_lock(self) -> asyncio.Lock:
        # asyncio locks bind to the loop they are first contended on
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    def log(self, event: str, details: Optional[dict] = None, level: int = logging.INFO) -> None:
        self.logger.log(level, event, extra={"details": details or {}})

    # ---- refills ----
    def _refill(self, resource: str, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"Refill amount for {resource} must not be negative, got {amount}")
        attr = f"{resource}_level"
        setattr(self, attr, getattr(self, attr) + amount)
        self.log("refilled", {"resource": resource, "amount": amount, attr: getattr(self, attr)})

    def refill_water(self, amount: int) -> None:
        self._refill("water", amount)

    def refill_coffee(self, amount: int) -> None:
        self._refill("coffee", amount)

    def refill_milk(self, amount: int) -> None:
        self._refill("milk", amount)

    # ---- steps ----
    async def check_ingredients(self, drink: str | DrinkType) -> Recipe:
        """
        Verify the machine holds enough of everything ``drink`` needs.

        Levels are checked in the order water, coffee, milk and the first
        shortfall is raised. Nothing is consumed.

        Raises:
            UnsupportedDrinkError: ``drink`` is not in the recipe book.
            InsufficientIngredientError: one of the levels is too low.
        """
        recipe = self.recipes.require(drink)
        if self.water_level < recipe.water:
            raise InsufficientWaterError(recipe.name, self.water_level, recipe.water)
        if self.coffee_level < recipe.coffee:
            raise InsufficientCoffeeError(recipe.name, self.coffee_level, recipe.coffee)
        if self.milk_level < recipe.milk:
            raise InsufficientMilkError(recipe.name, self.milk_level, recipe.milk)
        return recipe

    async def heat_water(self) -> None:
        if self.water_level == 0:
            raise TankEmptyError()
        if self.is_heating:
            return
        await self.clock.sleep(HEAT_DELAY)
        self.is_heating = True
        self.log("water_heated")

    async def grind_coffee(self) -> None:
        await self.clock.sleep(GRIND_DELAY)
        self.coffee_level -= GRIND_COFFEE_AMOUNT
        self.log("coffee_ground", {"coffee_level": self.coffee_level})

    async def extract_espresso(self) -> None:
        await self.clock.sleep(EXTRACT_DELAY)
        self.water_level -= EXTRACT_WATER_AMOUNT
        self.log("espresso_extracted", {"water_level": self.water_level})

    async def steam_milk(self) -> None:
        await self.clock.sleep(STEAM_DELAY)
        self.milk_level -= STEAM_MILK_AMOUNT
        self.log("milk_steamed", {"milk_level": self.milk_level})

    # ---- recipes ----
    async def prepare_drink(self, drink: str | DrinkType) -> Recipe:
        async with self._prepare_lock():
            recipe = await self.check_ingredients(drink)
            self.log("drink_preparing", {"drink": recipe.name, "display_name": recipe.display_name})
            await self.heat_water()
            await self.grind_coffee()
            await self.extract_espresso()
            if recipe.steams_milk:
                await self.steam_milk()
            self.log("drink_ready", {"drink": recipe.name, "display_name": recipe.display_name})
            return recipe

    async def order_drink(self, drink: str | DrinkType) -> None:
        """
        Prepare ``drink`` and report a failed order instead of raising it.

        Only ``CoffeeMachineError`` is swallowed and logged as ``order_failed``.
        Any other exception (a programming error, a cancelled task) propagates
        to the caller.
        """
        try:
            await self.prepare_drink(drink)
        except CoffeeMachineError as exc:
            self.log(
                "order_failed",
                {"drink": exc.drink or str(drink), "error": type(exc).__name__, "message": exc.message},
                level=logging.ERROR,
            )

    # ---- inspection ----
    def status(self) -> MachineStatus:
        return MachineStatus(
            water_level=self.water_level,
            coffee_level=self.coffee_level,
            milk_level=self.milk_level,
            is_heating=self.is_heating,
        )

    def events(self) -> List[Dict[str, Any]]:
        return self.logger.buffer.get_events()

    def __repr__(self) -> str:
        return (
            f"CoffeeMachine(water_level={self.water_level}, coffee_level={self.coffee_level}, "
            f"milk_level={self.milk_level}, is_heating={self.is_heating})"
        )
