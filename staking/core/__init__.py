"""
Core ledger functionality.

Contains the staking ledger, the tier table and the data models.
"""

from staking.core.ledger import StakingLedger, calculate_interest
from staking.core.models import Position, Tier
from staking.core.tiers import TierTable

__all__ = [
    "StakingLedger",
    "calculate_interest",
    "Position",
    "Tier",
    "TierTable",
]
