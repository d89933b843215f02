import argparse
import asyncio
import sys

from cafemachine.config import MachineSettings, get_settings
from cafemachine.core.clock import AsyncioClock, InstantClock
from cafemachine.logging import attach_console
from cafemachine.machine import CoffeeMachine

DEMO_ORDERS = ("coffee", "cappuccino", "tea")


async def run_demo(machine: CoffeeMachine, settings: MachineSettings, orders=DEMO_ORDERS) -> None:
    machine.refill_water(settings.refill_water)
    machine.refill_coffee(settings.refill_coffee)
    machine.refill_milk(settings.refill_milk)
    print(machine.status())

    for drink in orders:
        await machine.order_drink(drink)

    print(machine.status())


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run the coffee machine demo: a coffee, a cappuccino and a tea.")
    parser.add_argument("--instant", action="store_true", help="Skip the simulated step delays.")
    parser.add_argument("--water", type=int, default=None, help="Water to refill before ordering.")
    parser.add_argument("--coffee", type=int, default=None, help="Coffee to refill before ordering.")
    parser.add_argument("--milk", type=int, default=None, help="Milk to refill before ordering.")
    args = parser.parse_args(argv)

    overrides = {
        key: value
        for key, value in (
            ("refill_water", args.water),
            ("refill_coffee", args.coffee),
            ("refill_milk", args.milk),
        )
        if value is not None
    }
    if args.instant:
        overrides["instant"] = True
    settings = get_settings().model_copy(update=overrides)

    clock = InstantClock() if settings.instant else AsyncioClock()
    machine = CoffeeMachine(clock=clock, settings=settings)
    attach_console(machine.logger, level=settings.log_level)
    asyncio.run(run_demo(machine, settings))
    return 0


if __name__ == "__main__":
    sys.exit(main())
