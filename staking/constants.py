"""
Default constants for the staking ledger.

Tier rates are integers scaled by RATE_DENOMINATOR (700 == 7.00%).
Monetary amounts are integers in wei.
"""

SECONDS_PER_DAY = 86400

# Rates are divided by this value to get the interest fraction
RATE_DENOMINATOR = 10000

WEI_PER_ETHER = 10**18

# (lock period in days, rate scaled by RATE_DENOMINATOR)
DEFAULT_LOCK_TIERS: list[tuple[int, int]] = [
    (10, 700),
    (30, 900),
    (90, 1200),
]

# Reserve the ledger is deployed with (10 ether)
DEFAULT_FUNDING_WEI = 10 * WEI_PER_ETHER
