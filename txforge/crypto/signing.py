# txforge/crypto/signing.py
from typing import Union

from cryptography import exceptions as crypto_exceptions
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey, Ed25519PublicKey

from txforge.core.errors import InvalidPublicKey, InvalidSignature
from txforge.core.types import ADDRESS_LENGTH, SIGNATURE_LENGTH, Address
from txforge.crypto.keys import keypair_from_secret

Message = Union[bytes, str]


def _as_bytes(message: Message) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    return bytes(message)


def sign_message(message: Message, secret: bytes) -> bytes:
    """
    Detached ed25519 signature (RFC 8032) over `message`.
    Same message and key always give the same 64 bytes.
    Raises InvalidSecretKey for a malformed secret.
    """
    keypair = keypair_from_secret(secret)
    private = Ed25519PrivateKey.from_private_bytes(keypair.seed)
    return private.sign(_as_bytes(message))


def verify_message(message: Message, signature: bytes, public_key: Union[bytes, Address]) -> bool:
    """
    True if `signature` is a valid signature of `message` by `public_key`.

    Length errors raise (InvalidSignature / InvalidPublicKey); a well-formed
    signature that does not match simply returns False.
    """
    if isinstance(public_key, Address):
        public_key = public_key.raw
    if len(signature) != SIGNATURE_LENGTH:
        raise InvalidSignature()
    if len(public_key) != ADDRESS_LENGTH:
        raise InvalidPublicKey()

    try:
        verifier = Ed25519PublicKey.from_public_bytes(bytes(public_key))
    except ValueError:
        # 32 bytes that are not a usable curve point can never verify
        return False

    try:
        verifier.verify(bytes(signature), _as_bytes(message))
    except crypto_exceptions.InvalidSignature:
        return False
    return True
