"""
Staking ledger.

Holds the tier table, the append-only position registry, the per-wallet
index of position ids and the reserve balance. All of it is guarded by a
single lock: every mutation validates first and only then changes state,
so a failed call leaves the ledger exactly as it was.

The ledger only does accounting. Moving funds across the external
boundary is the caller's job: ``open_position`` assumes the deposit was
received, ``close_position`` returns the amount owed to the position's
wallet.
"""

import threading
from collections.abc import Iterable

from loguru import logger

from staking.constants import (
    DEFAULT_LOCK_TIERS,
    RATE_DENOMINATOR,
    SECONDS_PER_DAY,
)
from staking.core.models import Position
from staking.core.tiers import TierTable
from staking.exceptions import (
    InsufficientReserveError,
    InvalidAddressError,
    InvalidAmountError,
    NotOwnerError,
    PositionAlreadyClosedError,
    PositionNotFoundError,
    StakingError,
)
from staking.utils.address import normalize_wallet_address
from staking.utils.datetime_utils import utc_now_timestamp


def calculate_interest(amount: int, rate: int) -> int:
    """
    Interest owed for a stake.

    Formula: floor(amount * rate / 10000)

    Example:
        >>> calculate_interest(5 * 10**18, 1200)
        600000000000000000
    """
    return amount * rate // RATE_DENOMINATOR


class StakingLedger:
    """Registry of interest-bearing positions with an owner-managed tier table."""

    def __init__(
        self,
        owner: str,
        initial_tiers: Iterable[tuple[int, int]] = DEFAULT_LOCK_TIERS,
        funding_amount: int = 0,
    ) -> None:
        """
        Create a ledger.

        Args:
            owner: Address allowed to administer tiers (the creator)
            initial_tiers: (lock_period_days, rate) pairs, last rate wins on duplicates
            funding_amount: Reserve in wei available for interest payouts

        Raises:
            InvalidAddressError: If owner is not a valid address
            InvalidAmountError: If funding_amount is negative
        """
        if funding_amount < 0:
            raise InvalidAmountError(
                funding_amount, f"Funding amount must not be negative, got {funding_amount}"
            )

        self._owner = normalize_wallet_address(owner)
        self._tiers = TierTable(initial_tiers)
        self._positions: list[Position] = []
        self._position_ids_by_address: dict[str, list[int]] = {}
        self._balance = funding_amount
        self._lock = threading.RLock()
        self.logger = logger.bind(service=self.__class__.__name__)

        self.logger.info(
            "Staking ledger created",
            extra={
                "owner": self._owner,
                "tiers": self._tiers.as_pairs(),
                "funding_wei": str(funding_amount),
            },
        )

    # === State ===

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def current_position_id(self) -> int:
        """Id the next opened position will receive."""
        with self._lock:
            return len(self._positions)

    @property
    def balance(self) -> int:
        """Reserve held by the ledger, in wei."""
        with self._lock:
            return self._balance

    # === Positions ===

    def open_position(
        self,
        lock_period_days: int,
        deposit_amount: int,
        wallet_address: str,
        now: int | None = None,
    ) -> int:
        """
        Open a new position.

        The rate is snapshotted from the tier table; later tier changes do
        not affect this position.

        Args:
            lock_period_days: Lock period, must exist in the tier table
            deposit_amount: Principal in wei, must be positive
            wallet_address: Depositor address
            now: Creation time in epoch seconds, fractions truncated
                (current UTC time if omitted)

        Returns:
            Id of the new position

        Raises:
            UnknownTierError: If the lock period is not offered
            InvalidAmountError: If deposit_amount <= 0
            InvalidAddressError: If wallet_address is malformed
        """
        if now is None:
            now = utc_now_timestamp()
        # positions record whole epoch seconds
        now = int(now)

        with self._lock:
            try:
                rate = self._tiers.get_rate(lock_period_days)
                if deposit_amount <= 0:
                    raise InvalidAmountError(deposit_amount)
                wallet = normalize_wallet_address(wallet_address)
            except StakingError as e:
                self.logger.warning(
                    "Position rejected: {error}",
                    error=str(e),
                    extra={
                        "lock_period_days": lock_period_days,
                        "deposit_amount": str(deposit_amount),
                        "wallet_address": wallet_address,
                    },
                )
                raise

            position = Position(
                position_id=len(self._positions),
                wallet_address=wallet,
                created_date=now,
                unlock_date=now + lock_period_days * SECONDS_PER_DAY,
                percent_interest=rate,
                amount_staked=deposit_amount,
                amount_interest=calculate_interest(deposit_amount, rate),
                open=True,
            )

            self._positions.append(position)
            self._position_ids_by_address.setdefault(wallet, []).append(
                position.position_id
            )
            self._balance += deposit_amount

        self.logger.info(
            "Position opened",
            extra={
                "position_id": position.position_id,
                "wallet_address": wallet,
                "lock_period_days": lock_period_days,
                "percent_interest": rate,
                "amount_staked": str(deposit_amount),
                "amount_interest": str(position.amount_interest),
                "unlock_date": position.unlock_date,
            },
        )
        return position.position_id

    def close_position(self, position_id: int, caller: str | None = None) -> int:
        """
        Close a position and release principal plus interest.

        Closing before ``unlock_date`` is allowed and still pays the full
        interest. Anyone may trigger the close; the payout always belongs
        to the position's wallet.

        Args:
            position_id: Position to close
            caller: Identity triggering the close, recorded in logs only

        Returns:
            Payout in wei owed to ``position.wallet_address``

        Raises:
            PositionNotFoundError: If the id is unknown
            PositionAlreadyClosedError: If the position was closed before
            InsufficientReserveError: If the reserve cannot cover the payout
        """
        with self._lock:
            try:
                position = self._get_position(position_id)
                if not position.open:
                    raise PositionAlreadyClosedError(position_id)
                payout = position.payout_amount
                if payout > self._balance:
                    raise InsufficientReserveError(payout, self._balance)
            except StakingError as e:
                self.logger.warning(
                    "Close rejected: {error}",
                    error=str(e),
                    extra={"position_id": position_id, "caller": caller},
                )
                raise

            self._positions[position_id] = position.model_copy(update={"open": False})
            self._balance -= payout

        self.logger.info(
            "Position closed",
            extra={
                "position_id": position_id,
                "wallet_address": position.wallet_address,
                "caller": caller,
                "payout": str(payout),
            },
        )
        return payout

    def get_position_by_id(self, position_id: int) -> Position:
        """
        Get a position snapshot.

        Raises:
            PositionNotFoundError: If the id is unknown
        """
        with self._lock:
            return self._get_position(position_id)

    def get_position_ids_for_address(self, wallet_address: str) -> list[int]:
        """
        Get ids of positions opened by a wallet, in creation order.

        Returns an empty list for a wallet without positions.
        """
        wallet = normalize_wallet_address(wallet_address)
        with self._lock:
            return list(self._position_ids_by_address.get(wallet, []))

    def get_positions_for_address(self, wallet_address: str) -> list[Position]:
        wallet = normalize_wallet_address(wallet_address)
        with self._lock:
            return [
                self._positions[position_id]
                for position_id in self._position_ids_by_address.get(wallet, [])
            ]

    def _get_position(self, position_id: int) -> Position:
        # negative ids would index from the end of the list
        if not 0 <= position_id < len(self._positions):
            raise PositionNotFoundError(position_id)
        return self._positions[position_id]

    # === Tiers ===

    def get_lock_periods(self) -> list[int]:
        with self._lock:
            return self._tiers.lock_periods()

    def get_interest_rate(self, lock_period_days: int) -> int:
        """
        Get the current rate for a lock period.

        Raises:
            UnknownTierError: If the period is not in the tier table
        """
        with self._lock:
            return self._tiers.get_rate(lock_period_days)

    def modify_lock_periods(self, lock_period_days: int, new_rate: int, caller: str) -> None:
        """
        Set the rate for a lock period (owner only).

        An existing period keeps its place in the table; a new one is
        appended. Positions already opened keep their snapshotted rate.

        Raises:
            NotOwnerError: If caller is not the ledger owner, including
                callers that are not valid addresses
        """
        try:
            caller_address = normalize_wallet_address(caller)
        except InvalidAddressError:
            # a malformed identity can never match the owner
            caller_address = caller

        with self._lock:
            if caller_address != self._owner:
                self.logger.warning(
                    "Tier modification rejected: caller is not owner",
                    extra={
                        "caller": caller_address,
                        "lock_period_days": lock_period_days,
                        "new_rate": new_rate,
                    },
                )
                raise NotOwnerError(caller_address)

            is_new = self._tiers.set_rate(lock_period_days, new_rate)

        self.logger.info(
            "Lock period added" if is_new else "Lock period rate updated",
            extra={"lock_period_days": lock_period_days, "rate": new_rate},
        )
