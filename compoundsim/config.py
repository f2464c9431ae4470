import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="COMPOUNDSIM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    default_principal: float = Field(default=100_000, ge=0, description="Lump sum used when none is supplied")
    default_monthly_payment: float = Field(
        default=10_000, ge=0, description="Monthly contribution used when none is supplied"
    )
    default_rate_percent: float = Field(default=8.0, ge=0, description="Annual rate (in percent) used when none is supplied")
    default_years: int = Field(default=10, ge=0, description="Investment period (in years) used when none is supplied")
    default_frequency: int = Field(default=12, gt=0, description="Compounding events per year used when none is supplied")
    currency_symbol: str = Field(default="¥", description="Symbol prefixed to formatted amounts")
    log_level: str = Field(default="INFO", description="Level passed to `configure_logging`")


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a basic stream handler to the root logger."""
    level = level or get_settings().log_level
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("compoundsim").setLevel(level.upper())
