"""
Wallet address validation and normalization.

The ledger stores every address in EIP-55 checksum form, so lookups
do not depend on the caller's letter case.
"""

from eth_utils import is_hex_address
from loguru import logger
from web3 import Web3

from staking.exceptions import InvalidAddressError


def validate_wallet_address(address: str) -> tuple[bool, str | None]:
    """
    Validate an Ethereum wallet address.

    Args:
        address: Wallet address to validate

    Returns:
        Tuple of (is_valid, error_message)
        - (True, None) if valid
        - (False, error_message) if invalid

    Examples:
        >>> validate_wallet_address("0x1234567890123456789012345678901234567890")
        (True, None)
        >>> validate_wallet_address("invalid")
        (False, 'Address must start with 0x')
    """
    if not address or not isinstance(address, str):
        return False, "Address is empty"

    address = address.strip()

    if not address:
        return False, "Address is empty"

    if not address.startswith("0x"):
        return False, "Address must start with 0x"

    if len(address) != 42:
        return False, "Address must be 42 characters"

    if not is_hex_address(address):
        return False, "Invalid address format"

    return True, None


def normalize_wallet_address(address: str) -> str:
    """
    Normalize wallet address to checksum format.

    Args:
        address: Wallet address

    Returns:
        Checksummed address

    Raises:
        InvalidAddressError: If address is invalid
    """
    is_valid, error = validate_wallet_address(address)
    if not is_valid:
        logger.debug(f"Address validation failed for {address!r}: {error}")
        raise InvalidAddressError(address, error)

    return Web3.to_checksum_address(address.strip())
