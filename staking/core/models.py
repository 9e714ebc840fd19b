"""Pydantic models for the staking ledger."""

from pydantic import BaseModel, ConfigDict, Field

from staking.constants import SECONDS_PER_DAY


class Tier(BaseModel):
    """A lock period and the interest rate paid for it."""

    model_config = ConfigDict(frozen=True)

    lock_period_days: int = Field(..., description="Lock period in days")
    rate: int = Field(..., description="Interest rate scaled by 10000 (700 = 7.00%)")


class Position(BaseModel):
    """
    One stake record.

    Instances are immutable snapshots. Closing a position replaces the
    stored record with a copy whose ``open`` flag is False.
    """

    model_config = ConfigDict(frozen=True)

    position_id: int = Field(..., ge=0, description="Sequential position id")
    wallet_address: str = Field(..., description="Checksummed depositor address")
    created_date: int = Field(..., description="Creation time, epoch seconds")
    unlock_date: int = Field(..., description="End of the lock, epoch seconds")
    percent_interest: int = Field(..., description="Rate snapshotted at creation")
    amount_staked: int = Field(..., gt=0, description="Principal in wei")
    amount_interest: int = Field(..., description="Interest owed at close, in wei")
    open: bool = Field(default=True, description="False once the position is closed")

    @property
    def lock_period_days(self) -> int:
        return (self.unlock_date - self.created_date) // SECONDS_PER_DAY

    @property
    def payout_amount(self) -> int:
        """Principal plus interest paid out when the position closes."""
        return self.amount_staked + self.amount_interest

    def is_unlocked(self, now: int) -> bool:
        return now >= self.unlock_date

    def days_remaining(self, now: int) -> int:
        """
        Whole days left until unlock.

        Args:
            now: Current time, epoch seconds

        Returns:
            Remaining days rounded to the nearest day (halves up), never negative
        """
        seconds_remaining = self.unlock_date - now
        if seconds_remaining <= 0:
            return 0
        return (seconds_remaining + SECONDS_PER_DAY // 2) // SECONDS_PER_DAY
