# tests/conftest.py
import pytest

from txforge.core.types import Address
from txforge.crypto.keys import keypair_from_seed


def fixed_source(byte: int):
    """Deterministic stand-in for the secure random source."""
    return lambda n: bytes([byte]) * n


@pytest.fixture
def alice():
    return keypair_from_seed(bytes([1]) * 32)


@pytest.fixture
def bob():
    return keypair_from_seed(bytes([2]) * 32)


@pytest.fixture
def mint_address():
    return keypair_from_seed(bytes([3]) * 32).public


@pytest.fixture
def raw_address():
    return Address(bytes(range(32)))
