"""Pytest configuration and shared fixtures for all tests."""

import sys
from pathlib import Path

# Добавить корень проекта в PYTHONPATH
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from loguru import logger


# Hardhat default accounts
OWNER_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
USER_ADDRESS = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"
OTHER_ADDRESS = "0x3C44CdDdB6a900fa2b585dd299e03d12FA4293BC"


@pytest.fixture
def owner_address():
    """Ledger owner (deployer) address."""
    return OWNER_ADDRESS


@pytest.fixture
def user_address():
    """Address of a regular staker."""
    return USER_ADDRESS


@pytest.fixture
def other_address():
    """Address of a second staker."""
    return OTHER_ADDRESS


@pytest.fixture
def log_messages():
    """Collect loguru records emitted during the test."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record), level="DEBUG")
    yield messages
    logger.remove(handler_id)
