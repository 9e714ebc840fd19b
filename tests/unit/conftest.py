"""
Shared fixtures for unit tests.

This module provides common fixtures used across multiple test modules:
- Funded StakingLedger with the default tiers
- Fixed creation timestamp
"""

import pytest

from staking import DEFAULT_LOCK_TIERS, StakingLedger
from staking.constants import WEI_PER_ETHER


@pytest.fixture
def now():
    """
    Fixed creation time used as ``now`` for opened positions.

    Returns:
        int: Epoch seconds (2024-01-01 00:00:00 UTC)
    """
    return 1704067200


@pytest.fixture
def ledger(owner_address):
    """
    Create ledger funded with 10 ether.

    Default tiers: 10 days -> 700, 30 days -> 900, 90 days -> 1200.

    Returns:
        StakingLedger: Ledger owned by ``owner_address``
    """
    return StakingLedger(
        owner=owner_address,
        initial_tiers=DEFAULT_LOCK_TIERS,
        funding_amount=10 * WEI_PER_ETHER,
    )
