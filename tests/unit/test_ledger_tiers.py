"""
Unit tests for tier administration on the ledger.

Tests cover:
- Ledger creation (owner, tiers, funding)
- Lock period and interest rate queries
- Owner-only tier modification
"""

import pytest

from staking import (
    InvalidAddressError,
    InvalidAmountError,
    NotOwnerError,
    StakingLedger,
    UnknownTierError,
)
from staking.constants import WEI_PER_ETHER


class TestLedgerCreation:
    """Test ledger setup."""

    def test_sets_owner(self, ledger, owner_address):
        """Test creator becomes owner."""
        assert ledger.owner == owner_address

    def test_owner_is_checksummed(self, owner_address):
        """Test owner address is normalized."""
        ledger = StakingLedger(owner_address.lower())
        assert ledger.owner == owner_address

    def test_sets_up_tiers(self, ledger):
        """Test default lock periods and rates."""
        assert ledger.get_lock_periods() == [10, 30, 90]
        assert ledger.get_interest_rate(10) == 700
        assert ledger.get_interest_rate(30) == 900
        assert ledger.get_interest_rate(90) == 1200

    def test_holds_funding(self, ledger):
        """Test reserve equals funding amount."""
        assert ledger.balance == 10 * WEI_PER_ETHER

    def test_duplicate_initial_tiers(self, owner_address):
        """Test duplicates collapse to last rate in first position."""
        ledger = StakingLedger(owner_address, [(10, 700), (30, 900), (10, 800)])
        assert ledger.get_lock_periods() == [10, 30]
        assert ledger.get_interest_rate(10) == 800

    def test_negative_funding_rejected(self, owner_address):
        """Test negative funding amount."""
        with pytest.raises(InvalidAmountError):
            StakingLedger(owner_address, funding_amount=-1)

    def test_invalid_owner_rejected(self):
        """Test malformed owner address."""
        with pytest.raises(InvalidAddressError):
            StakingLedger("0x123")


class TestInterestRate:
    """Test rate lookup."""

    def test_unknown_period(self, ledger):
        """Test unknown lock period raises UnknownTierError."""
        with pytest.raises(UnknownTierError):
            ledger.get_interest_rate(100)

    def test_lock_periods_returns_copy(self, ledger):
        """Test mutating the returned list does not touch the table."""
        periods = ledger.get_lock_periods()
        periods.append(365)
        assert ledger.get_lock_periods() == [10, 30, 90]


class TestModifyLockPeriodsOwner:
    """Test tier modification by the owner."""

    def test_creates_new_lock_period(self, ledger, owner_address):
        """Test new period is appended with its rate."""
        ledger.modify_lock_periods(100, 999, caller=owner_address)

        assert ledger.get_interest_rate(100) == 999
        assert ledger.get_lock_periods()[3] == 100

    def test_modifies_existing_lock_period(self, ledger, owner_address):
        """Test only the targeted period changes."""
        ledger.modify_lock_periods(10, 150, caller=owner_address)

        assert ledger.get_interest_rate(10) == 150
        assert ledger.get_interest_rate(30) == 900
        assert ledger.get_interest_rate(90) == 1200
        assert ledger.get_lock_periods() == [10, 30, 90]

    def test_existing_positions_keep_rate(self, ledger, owner_address, user_address):
        """Test positions keep the rate snapshotted at creation."""
        position_id = ledger.open_position(10, WEI_PER_ETHER, user_address, now=0)

        ledger.modify_lock_periods(10, 150, caller=owner_address)

        position = ledger.get_position_by_id(position_id)
        assert position.percent_interest == 700
        assert position.amount_interest == WEI_PER_ETHER * 700 // 10000

        new_id = ledger.open_position(10, WEI_PER_ETHER, user_address, now=0)
        assert ledger.get_position_by_id(new_id).percent_interest == 150

    def test_new_period_can_be_staked(self, ledger, owner_address, user_address):
        """Test a period added by the owner is usable immediately."""
        ledger.modify_lock_periods(100, 999, caller=owner_address)

        position_id = ledger.open_position(100, WEI_PER_ETHER, user_address, now=0)
        assert ledger.get_position_by_id(position_id).percent_interest == 999

    def test_rate_not_bounds_checked(self, ledger, owner_address):
        """Test owner may set zero or very large rates."""
        ledger.modify_lock_periods(10, 0, caller=owner_address)
        ledger.modify_lock_periods(30, 10**9, caller=owner_address)

        assert ledger.get_interest_rate(10) == 0
        assert ledger.get_interest_rate(30) == 10**9


class TestModifyLockPeriodsNonOwner:
    """Test tier modification by other callers."""

    def test_non_owner_reverts(self, ledger, user_address):
        """Test non-owner gets NotOwnerError and nothing changes."""
        with pytest.raises(NotOwnerError, match="Only owner may modify staking periods"):
            ledger.modify_lock_periods(100, 999, caller=user_address)

        assert ledger.get_lock_periods() == [10, 30, 90]
        with pytest.raises(UnknownTierError):
            ledger.get_interest_rate(100)

    def test_malformed_caller_is_not_owner(self, ledger, log_messages):
        """Test invalid caller address is rejected as non-owner and logged."""
        with pytest.raises(NotOwnerError):
            ledger.modify_lock_periods(100, 999, caller="not-an-address")

        assert ledger.get_lock_periods() == [10, 30, 90]
        warnings = [r for r in log_messages if r["level"].name == "WARNING"]
        assert len(warnings) == 1
        assert "caller is not owner" in warnings[0]["message"]

    def test_non_owner_cannot_overwrite(self, ledger, user_address):
        """Test existing rate survives a rejected overwrite."""
        with pytest.raises(NotOwnerError):
            ledger.modify_lock_periods(10, 1, caller=user_address)

        assert ledger.get_interest_rate(10) == 700

    def test_owner_match_ignores_case(self, ledger, owner_address):
        """Test lowercase owner address is accepted."""
        ledger.modify_lock_periods(10, 800, caller=owner_address.lower())
        assert ledger.get_interest_rate(10) == 800
