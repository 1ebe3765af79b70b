# txforge/programs/validation.py
from typing import Union

from txforge.core.encoding import decode_address
from txforge.core.errors import InvalidAddress, InvalidAmount, InvalidField
from txforge.core.types import Address

U64_MAX = 2 ** 64 - 1

AddressLike = Union[Address, str]


def as_address(value: AddressLike, field: str) -> Address:
    """Accept an Address or its base-58 text; anything else is InvalidAddress."""
    if isinstance(value, Address):
        return value
    if isinstance(value, str):
        return decode_address(value, field)
    raise InvalidAddress(field)


def positive_u64(value: int, field: str = "amount") -> int:
    # bool is an int subclass; True is not an amount
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidAmount(field, f"Invalid {field}: must be an integer")
    if value <= 0:
        raise InvalidAmount(field)
    if value > U64_MAX:
        raise InvalidAmount(field, f"Invalid {field}: exceeds maximum of {U64_MAX}")
    return value


def u8(value: int, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
        raise InvalidField(field, f"Invalid {field}: must be an integer between 0 and 255")
    return value
