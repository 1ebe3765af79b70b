# txforge/core/encoding.py
import base58

from txforge.core.errors import InvalidAddress
from txforge.core.types import ADDRESS_LENGTH, Address


def b58encode(data: bytes) -> str:
    """Encode bytes to base-58 text (Bitcoin alphabet)."""
    return base58.b58encode(bytes(data)).decode("ascii")


def b58decode(text: str) -> bytes:
    """Decode base-58 text. Raises ValueError on characters outside the alphabet."""
    if not isinstance(text, str):
        raise ValueError("base-58 input must be a string")
    try:
        text.encode("ascii")
    except UnicodeEncodeError:
        raise ValueError("Invalid character in base-58 string")
    return base58.b58decode(text)


def decode_address(text: str, field: str = None) -> Address:
    """
    Parse base-58 address text into an Address.
    Raises InvalidAddress for bad characters or a decoded length other than 32.
    """
    try:
        raw = b58decode(text)
    except ValueError:
        raise InvalidAddress(field)
    if len(raw) != ADDRESS_LENGTH:
        raise InvalidAddress(field)
    return Address(raw)


def encode_address(address: Address) -> str:
    return b58encode(address.raw)
