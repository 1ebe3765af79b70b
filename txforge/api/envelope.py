# txforge/api/envelope.py
from dataclasses import dataclass
from typing import Any, Optional

from txforge.core.encoding import b58encode
from txforge.core.types import Address, Instruction, Keypair

OK = 200
BAD_REQUEST = 400
NOT_FOUND = 404


@dataclass(frozen=True)
class ApiResponse:
    """
    Success/error envelope handed to whatever transport sits in front.
    `{"success": true, "data": ...}` or `{"success": false, "error": "..."}`.
    """
    success: bool
    data: Optional[Any] = None
    error: Optional[str] = None
    status_code: int = OK

    @classmethod
    def ok(cls, data: Any) -> "ApiResponse":
        return cls(success=True, data=data, status_code=OK)

    @classmethod
    def fail(cls, error: str, status_code: int = BAD_REQUEST) -> "ApiResponse":
        return cls(success=False, error=error, status_code=status_code)

    def to_dict(self) -> dict:
        if self.success:
            return {"success": True, "data": self.data}
        return {"success": False, "error": self.error}


# One result type per operation


@dataclass(frozen=True)
class KeypairResult:
    keypair: Keypair

    def to_dict(self) -> dict:
        return {
            "pubkey": self.keypair.pubkey,
            "secret": b58encode(self.keypair.secret),
        }


@dataclass(frozen=True)
class SignatureResult:
    signature: bytes
    message: str
    pubkey: Address

    def to_dict(self) -> dict:
        return {
            "signature": b58encode(self.signature),
            "message": self.message,
            "pubkey": str(self.pubkey),
        }


@dataclass(frozen=True)
class VerificationResult:
    valid: bool
    message: str
    pubkey: Address

    def __bool__(self):
        return self.valid

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "message": self.message,
            "pubkey": str(self.pubkey),
        }


@dataclass(frozen=True)
class InstructionResult:
    instruction: Instruction

    def to_dict(self) -> dict:
        return self.instruction.to_dict()


@dataclass(frozen=True)
class TokenTransferResult:
    """
    Token transfer as reported by /send/token.

    Callers identify the source by its wallet, so slot 0 shows `owner`
    rather than the owner's associated account. `instruction` keeps the
    on-chain account order.
    """

    instruction: Instruction
    owner: Address

    def to_dict(self) -> dict:
        out = self.instruction.to_dict()
        source = dict(out["accounts"][0])
        source["pubkey"] = str(self.owner)
        out["accounts"] = [source] + out["accounts"][1:]
        return out
