"""Runtime settings, read from ``STOREFRONT_*`` environment variables.

Only the composition root reads these; everything below it receives
plain constructor arguments.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class StorefrontSettings(BaseSettings):
    catalog_base_url: str = Field(
        default="https://dummyjson.com/products",
        description="Base URL of the external product catalog",
    )
    catalog_timeout_seconds: float = Field(default=10.0, gt=0)
    cache_ttl_seconds: float = Field(default=300.0, gt=0)
    enrichment_workers: int = Field(default=8, ge=1)

    payment_success_rate: float = Field(default=0.9, ge=0, le=1)
    verify_prices: bool = Field(
        default=False,
        description="Re-price checkout lines against the live catalog",
    )
    price_tolerance: Decimal = Field(default=Decimal("0.01"), ge=0)

    data_dir: Path = Field(default=Path("data"))

    log_level: str = Field(default="INFO")
    log_format: LogFormat = Field(default=LogFormat.CONSOLE)

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )
