"""
Staking ledger exceptions.

Every error is raised synchronously and leaves the ledger unchanged.
"""


class StakingError(Exception):
    """Base class for all ledger errors."""
    pass


class UnknownTierError(StakingError):
    """Raised when a lock period is not present in the tier table."""

    def __init__(self, lock_period_days: int) -> None:
        self.lock_period_days = lock_period_days
        super().__init__(f"Lock period {lock_period_days} days not found")


class InvalidAmountError(StakingError):
    """Raised for a non-positive deposit or negative funding amount."""

    def __init__(self, amount: int, message: str | None = None) -> None:
        self.amount = amount
        super().__init__(message or f"Amount must be greater than 0, got {amount}")


class InvalidAddressError(StakingError, ValueError):
    """Raised when a wallet address is malformed."""

    def __init__(self, address: object, reason: str) -> None:
        self.address = address
        self.reason = reason
        super().__init__(f"Invalid wallet address {address!r}: {reason}")


class PositionNotFoundError(StakingError):
    """Raised when a position id is unknown."""

    def __init__(self, position_id: int) -> None:
        self.position_id = position_id
        super().__init__(f"Position {position_id} not found")


class PositionAlreadyClosedError(StakingError):
    """Raised when closing a position that was already closed."""

    def __init__(self, position_id: int) -> None:
        self.position_id = position_id
        super().__init__(f"Position {position_id} is already closed")


class InsufficientReserveError(StakingError):
    """Raised when the ledger cannot cover a payout."""

    def __init__(self, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(
            f"Insufficient reserve: required {required} wei, available {available} wei"
        )


class NotOwnerError(StakingError):
    """Raised when a non-owner tries to administer the tier table."""

    def __init__(self, caller: str) -> None:
        self.caller = caller
        super().__init__("Only owner may modify staking periods")
