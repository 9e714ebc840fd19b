"""
Ledger settings.

Loads configuration from environment variables using pydantic-settings.
Variables are prefixed with ``STAKING_``, e.g. ``STAKING_OWNER_ADDRESS``.
"""

from functools import lru_cache

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from staking.constants import DEFAULT_FUNDING_WEI, DEFAULT_LOCK_TIERS
from staking.core.ledger import StakingLedger
from staking.utils.address import normalize_wallet_address
from staking.utils.logging import setup_logging


class LedgerSettings(BaseSettings):
    """Ledger settings loaded from environment variables."""

    # Owner (deployer) of the ledger
    owner_address: str

    # (lock period in days, rate scaled by 10000); JSON list in env
    lock_tiers: list[tuple[int, int]] = Field(
        default_factory=lambda: list(DEFAULT_LOCK_TIERS),
        description="Initial tier table",
    )
    funding_wei: int = Field(
        default=DEFAULT_FUNDING_WEI,
        ge=0,
        description="Reserve the ledger is created with, in wei",
    )

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="STAKING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("owner_address")
    @classmethod
    def validate_owner_address(cls, v: str) -> str:
        """Validate and checksum the owner address."""
        return normalize_wallet_address(v)

    @field_validator("lock_tiers")
    @classmethod
    def validate_lock_tiers(cls, v: list[tuple[int, int]]) -> list[tuple[int, int]]:
        """Warn about duplicate periods; the last rate wins."""
        periods = [period for period, _ in v]
        if len(periods) != len(set(periods)):
            logger.warning(
                f"STAKING_LOCK_TIERS contains duplicate lock periods: {periods}. "
                "The last rate given for each period is used."
            )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize log level name."""
        v = v.upper()
        if v not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return v


@lru_cache
def get_settings() -> LedgerSettings:
    """Get cached settings instance."""
    return LedgerSettings()


def create_ledger_from_settings(settings: LedgerSettings | None = None) -> StakingLedger:
    """
    Configure logging and create a ledger from settings.

    Args:
        settings: Settings to use (environment settings if omitted)

    Returns:
        New StakingLedger owned by ``settings.owner_address``
    """
    if settings is None:
        settings = get_settings()

    setup_logging(settings.log_level, settings.log_file)

    return StakingLedger(
        owner=settings.owner_address,
        initial_tiers=settings.lock_tiers,
        funding_amount=settings.funding_wei,
    )
