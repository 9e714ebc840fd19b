"""
Tier table.

Maps lock period (days) to interest rate. Iteration follows the order in
which periods were first introduced; overwriting a rate keeps its slot.
"""

from collections.abc import Iterable, Iterator

from staking.core.models import Tier
from staking.exceptions import UnknownTierError


class TierTable:
    """Ordered lock period -> rate mapping."""

    def __init__(self, tiers: Iterable[tuple[int, int]] = ()) -> None:
        """
        Initialize tier table.

        Duplicate periods collapse to the last rate given, keeping the
        position of their first appearance.

        Args:
            tiers: (lock_period_days, rate) pairs
        """
        # dict keeps insertion order and reassignment does not move a key
        self._rates: dict[int, int] = {}
        for lock_period_days, rate in tiers:
            self.set_rate(lock_period_days, rate)

    def __contains__(self, lock_period_days: object) -> bool:
        return lock_period_days in self._rates

    def __len__(self) -> int:
        return len(self._rates)

    def __iter__(self) -> Iterator[Tier]:
        for lock_period_days, rate in self._rates.items():
            yield Tier(lock_period_days=lock_period_days, rate=rate)

    def get_rate(self, lock_period_days: int) -> int:
        """
        Get rate for a lock period.

        Raises:
            UnknownTierError: If the period is not in the table
        """
        try:
            return self._rates[lock_period_days]
        except KeyError:
            raise UnknownTierError(lock_period_days) from None

    def set_rate(self, lock_period_days: int, rate: int) -> bool:
        """
        Overwrite an existing rate or append a new period.

        Returns:
            True if a new period was appended, False if overwritten
        """
        is_new = lock_period_days not in self._rates
        self._rates[lock_period_days] = rate
        return is_new

    def lock_periods(self) -> list[int]:
        return list(self._rates)

    def as_pairs(self) -> list[tuple[int, int]]:
        return list(self._rates.items())
