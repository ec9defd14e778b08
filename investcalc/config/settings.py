from decimal import Decimal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    sensitivity_variation: Decimal = Field(default=Decimal("0.2"), ge=0, lt=1)
    rounding_places: int = Field(default=2, ge=0)

    model_config = SettingsConfigDict(env_prefix="INVESTCALC_", env_file=".env")
