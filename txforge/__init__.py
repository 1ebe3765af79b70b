# txforge/__init__.py
"""
txforge — unsigned ledger instructions and ed25519 keys, without a full SDK.
Builds system/token program instructions, derives associated token addresses,
and generates keypairs / signs / verifies detached messages. Never talks to a
network and never stores keys.
"""

from txforge.core.types import Address, AccountMeta, Instruction, Keypair
from txforge.crypto.keys import generate_keypair
from txforge.crypto.signing import sign_message, verify_message

__version__ = "0.1.0-dev"

__all__ = [
    "Address",
    "AccountMeta",
    "Instruction",
    "Keypair",
    "generate_keypair",
    "sign_message",
    "verify_message",
]
