"""Pydantic Settings configuration models.

Config hierarchy (lowest to highest priority):
1. Pydantic defaults (in code below)
2. .env file (loaded by Pydantic Settings)
3. Environment variables (e.g., FINCHARTS_INDICATORS__RSI_PERIOD=21)
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fincharts.data.types import AggregationPeriod

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
VALID_LOG_FORMATS = frozenset({"console", "json"})


class IndicatorConfig(BaseModel):
    """Default indicator parameters used when a caller does not pass one."""

    sma_period: int = Field(default=20, ge=1, le=500)
    ema_period: int = Field(default=20, ge=1, le=500)
    rsi_period: int = Field(default=14, ge=1, le=100)
    macd_fast: int = Field(default=12, ge=1, le=100)
    macd_slow: int = Field(default=26, ge=2, le=200)
    macd_signal: int = Field(default=9, ge=1, le=100)
    bollinger_period: int = Field(default=20, ge=1, le=500)
    bollinger_std_dev: float = Field(default=2.0, gt=0.0, le=5.0)

    @model_validator(mode="after")
    def validate_macd_periods(self) -> IndicatorConfig:
        if self.macd_fast >= self.macd_slow:
            raise ValueError(
                f"macd_fast ({self.macd_fast}) must be less than "
                f"macd_slow ({self.macd_slow})"
            )
        return self


class AggregationConfig(BaseModel):
    """Calendar aggregation defaults."""

    default_period: AggregationPeriod = AggregationPeriod.DAY


class AppConfig(BaseSettings):
    """Top-level application configuration.

    Env var examples:
        FINCHARTS_LOG_LEVEL=DEBUG
        FINCHARTS_DATA_DIR=/srv/stock_data
        FINCHARTS_AGGREGATION__DEFAULT_PERIOD=week
    """

    model_config = SettingsConfigDict(
        env_prefix="FINCHARTS_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"
    log_format: str = "console"
    data_dir: str = "stock_data"
    indicators: IndicatorConfig = IndicatorConfig()
    aggregation: AggregationConfig = AggregationConfig()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, got {v}"
            )
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in VALID_LOG_FORMATS:
            raise ValueError(
                f"log_format must be one of {sorted(VALID_LOG_FORMATS)}, got {v}"
            )
        return v
