from txforge.core.types import Address, AccountMeta, Instruction, Keypair
from txforge.core.encoding import b58decode, b58encode, decode_address, encode_address

__all__ = [
    "Address",
    "AccountMeta",
    "Instruction",
    "Keypair",
    "b58decode",
    "b58encode",
    "decode_address",
    "encode_address",
]
