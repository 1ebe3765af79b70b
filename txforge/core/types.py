# txforge/core/types.py
from dataclasses import dataclass, field
from typing import Tuple

import base58

from txforge.core.errors import InvalidAddress, InvalidSecretKey

ADDRESS_LENGTH = 32
SECRET_KEY_LENGTH = 64
SIGNATURE_LENGTH = 64


@dataclass(frozen=True)
class Address:
    """32-byte account identifier. Text form is base-58."""
    raw: bytes

    def __post_init__(self):
        if not isinstance(self.raw, (bytes, bytearray)) or len(self.raw) != ADDRESS_LENGTH:
            raise InvalidAddress()
        object.__setattr__(self, "raw", bytes(self.raw))

    def __bytes__(self) -> bytes:
        return self.raw

    def __str__(self) -> str:
        return base58.b58encode(self.raw).decode("ascii")

    def __repr__(self) -> str:
        return f"Address({self})"


@dataclass(frozen=True)
class AccountMeta:
    """One account slot referenced by an instruction."""
    pubkey: Address
    is_signer: bool = False
    is_writable: bool = False

    def to_dict(self) -> dict:
        return {
            "pubkey": str(self.pubkey),
            "is_signer": self.is_signer,
            "is_writable": self.is_writable,
        }


@dataclass(frozen=True)
class Instruction:
    """Single directive to a program: target, ordered accounts, opaque payload."""
    program_id: Address
    accounts: Tuple[AccountMeta, ...]
    data: bytes

    def __post_init__(self):
        # accept any sequence from callers, store an immutable one
        object.__setattr__(self, "accounts", tuple(self.accounts))
        object.__setattr__(self, "data", bytes(self.data))

    def to_dict(self) -> dict:
        """Wire shape: base-58 program id, account metas, base-58 instruction data."""
        return {
            "program_id": str(self.program_id),
            "accounts": [meta.to_dict() for meta in self.accounts],
            "instruction_data": base58.b58encode(self.data).decode("ascii"),
        }


@dataclass(frozen=True)
class Keypair:
    """ed25519 keypair in the ledger's 64-byte layout: seed(32) || public(32)."""
    public: Address
    secret: bytes = field(repr=False)

    def __post_init__(self):
        if len(self.secret) != SECRET_KEY_LENGTH:
            raise InvalidSecretKey()
        if self.secret[32:] != self.public.raw:
            raise InvalidSecretKey("Invalid keypair: public key does not match secret")

    @property
    def seed(self) -> bytes:
        return self.secret[:32]

    @property
    def pubkey(self) -> str:
        return str(self.public)
