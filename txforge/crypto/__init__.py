from txforge.crypto.keys import (
    generate_keypair,
    keypair_from_base58,
    keypair_from_secret,
    keypair_from_seed,
)
from txforge.crypto.signing import sign_message, verify_message

__all__ = [
    "generate_keypair",
    "keypair_from_base58",
    "keypair_from_secret",
    "keypair_from_seed",
    "sign_message",
    "verify_message",
]
