"""
Staking ledger.

Accounting core for locking ether for a fixed term at a predetermined
interest rate.

Example:
    >>> from staking import StakingLedger
    >>>
    >>> owner = "0x5B38Da6a701c568545dCfcB03FcB875f56beddC4"
    >>> ledger = StakingLedger(owner, funding_amount=10 * 10**18)
    >>> position_id = ledger.open_position(90, 5 * 10**18, owner, now=0)
    >>> ledger.get_position_by_id(position_id).amount_interest
    600000000000000000
    >>> ledger.close_position(position_id)
    5600000000000000000
"""

from staking.config import LedgerSettings, create_ledger_from_settings, get_settings
from staking.constants import (
    DEFAULT_FUNDING_WEI,
    DEFAULT_LOCK_TIERS,
    RATE_DENOMINATOR,
    SECONDS_PER_DAY,
)
from staking.core.ledger import StakingLedger, calculate_interest
from staking.core.models import Position, Tier
from staking.core.tiers import TierTable
from staking.exceptions import (
    InsufficientReserveError,
    InvalidAddressError,
    InvalidAmountError,
    NotOwnerError,
    PositionAlreadyClosedError,
    PositionNotFoundError,
    StakingError,
    UnknownTierError,
)


__version__ = "1.0.0"
__all__ = [
    # Core
    "StakingLedger",
    "TierTable",
    "calculate_interest",
    # Models
    "Position",
    "Tier",
    # Config
    "LedgerSettings",
    "get_settings",
    "create_ledger_from_settings",
    # Constants
    "DEFAULT_FUNDING_WEI",
    "DEFAULT_LOCK_TIERS",
    "RATE_DENOMINATOR",
    "SECONDS_PER_DAY",
    # Errors
    "StakingError",
    "UnknownTierError",
    "InvalidAmountError",
    "InvalidAddressError",
    "PositionNotFoundError",
    "PositionAlreadyClosedError",
    "InsufficientReserveError",
    "NotOwnerError",
]
