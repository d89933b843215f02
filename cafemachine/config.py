from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict, BaseSettings

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class MachineSettings(BaseSettings):
    log_level: LogLevel = Field("INFO", validation_alias="CAFEMACHINE_LOG_LEVEL")
    log_ring_size: int = Field(200, ge=0, validation_alias="CAFEMACHINE_LOG_RING_SIZE")

    # Skip real waiting in the demo
    instant: bool = Field(False, validation_alias="CAFEMACHINE_INSTANT")

    refill_water: int = Field(100, ge=0, validation_alias="CAFEMACHINE_REFILL_WATER")
    refill_coffee: int = Field(100, ge=0, validation_alias="CAFEMACHINE_REFILL_COFFEE")
    refill_milk: int = Field(100, ge=0, validation_alias="CAFEMACHINE_REFILL_MILK")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.strip().upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> MachineSettings:
    return MachineSettings()
