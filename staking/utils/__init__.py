"""Helper utilities for the staking ledger."""

from staking.utils.address import normalize_wallet_address, validate_wallet_address
from staking.utils.datetime_utils import utc_now, utc_now_timestamp
from staking.utils.logging import setup_logging

__all__ = [
    "normalize_wallet_address",
    "validate_wallet_address",
    "utc_now",
    "utc_now_timestamp",
    "setup_logging",
]
