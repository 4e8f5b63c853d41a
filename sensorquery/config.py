from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict, BaseSettings

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class QuerySettings(BaseSettings):
    bus: Literal["system", "session"] = Field("system", validation_alias="SENSOR_QUERY_BUS")
    # Passed to Properties.GetAll; empty means every interface on the object.
    interface: str = Field("", validation_alias="SENSOR_QUERY_INTERFACE")
    sensor_table: str = Field("openbmc", validation_alias="SENSOR_QUERY_TABLE")

    log_level: str = Field("WARNING", validation_alias="LOG_LEVEL")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> QuerySettings:
    return QuerySettings()
