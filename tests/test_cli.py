"""Tests for the `python -m cafemachine` demo."""
import asyncio

from cafemachine.__main__ import main, run_demo
from cafemachine.config import MachineSettings
from cafemachine.core.clock import InstantClock
from cafemachine.machine import CoffeeMachine


def test_run_demo_levels(capsys):
    settings = MachineSettings(_env_file=None, refill_water=100, refill_coffee=100, refill_milk=100)
    machine = CoffeeMachine(clock=InstantClock(), settings=settings)
    asyncio.run(run_demo(machine, settings))

    assert machine.status().levels() == (0, 80, 80)
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "water_level=100 coffee_level=100 milk_level=100 is_heating=False"
    assert out[-1] == "water_level=0 coffee_level=80 milk_level=80 is_heating=True"


def test_main_instant(capsys):
    assert main(["--instant", "--water", "60", "--coffee", "10", "--milk", "0"]) == 0
    out = capsys.readouterr().out
    assert "drink=coffee" in out
    assert "drink_ready drink=coffee" in out
    assert "ERROR: order_failed drink=cappuccino error=InsufficientWaterError" in out
    assert "ERROR: order_failed drink=tea error=UnsupportedDrinkError" in out
    assert out.strip().splitlines()[-1] == "water_level=10 coffee_level=0 milk_level=0 is_heating=True"
