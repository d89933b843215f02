from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class MachineStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    water_level: int
    coffee_level: int
    milk_level: int
    is_heating: bool

    def levels(self) -> tuple[int, int, int]:
        return self.water_level, self.coffee_level, self.milk_level
