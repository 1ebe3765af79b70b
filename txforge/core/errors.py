# txforge/core/errors.py
from typing import Optional


class TxForgeError(ValueError):
    """Base class for every input-validation failure raised by txforge.

    These are deterministic function-of-input errors; callers report them
    (HTTP 400, CLI exit 1) and never retry.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def __str__(self):
        return self.message


class InvalidAddress(TxForgeError):
    def __init__(self, field: Optional[str] = None, message: Optional[str] = None):
        if message is None:
            message = f"Invalid {field} address" if field else "Invalid address"
        super().__init__(message, field)


class InvalidSecretKey(TxForgeError):
    def __init__(self, message: str = "Invalid keypair: must be 64 bytes", field: Optional[str] = "secret"):
        super().__init__(message, field)


class InvalidSignature(TxForgeError):
    def __init__(self, message: str = "Invalid signature: must be 64 bytes", field: Optional[str] = "signature"):
        super().__init__(message, field)


class InvalidPublicKey(TxForgeError):
    def __init__(self, message: str = "Invalid public key: must be 32 bytes", field: Optional[str] = "pubkey"):
        super().__init__(message, field)


class MissingField(TxForgeError):
    def __init__(self, field: str):
        super().__init__(f"Missing required field: {field}", field)


class InvalidField(TxForgeError):
    """Present but unusable field: wrong JSON type, unknown name, bad range."""

    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__(message or f"Invalid value for field: {field}", field)


class InvalidAmount(TxForgeError):
    def __init__(self, field: str = "amount", message: str = "Amount must be greater than 0"):
        super().__init__(message, field)


class InvalidSeeds(TxForgeError):
    def __init__(self, message: str = "Invalid seeds for program address"):
        super().__init__(message, "seeds")


class AddressDerivationExhausted(TxForgeError):
    def __init__(self):
        super().__init__("Unable to find a viable program address bump seed", "seeds")


class EntropyUnavailable(RuntimeError):
    """The environment could not supply secure randomness. Fatal."""
