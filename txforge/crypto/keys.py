# txforge/crypto/keys.py
import json
import logging
import os
import secrets
from pathlib import Path
from typing import Callable, List, Union

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from txforge.core.encoding import b58decode, b58encode
from txforge.core.errors import EntropyUnavailable, InvalidSecretKey
from txforge.core.types import SECRET_KEY_LENGTH, Address, Keypair

logger = logging.getLogger(__name__)

SEED_LENGTH = 32

# Any callable returning n secure random bytes; secrets.token_bytes in production.
RandomSource = Callable[[int], bytes]


def _public_from_seed(seed: bytes) -> bytes:
    private = Ed25519PrivateKey.from_private_bytes(seed)
    return private.public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )


def keypair_from_seed(seed: bytes) -> Keypair:
    """Derive the full keypair from a 32-byte ed25519 seed."""
    if len(seed) != SEED_LENGTH:
        raise InvalidSecretKey("Invalid seed: must be 32 bytes")
    public = _public_from_seed(bytes(seed))
    return Keypair(public=Address(public), secret=bytes(seed) + public)


def generate_keypair(random_source: RandomSource = secrets.token_bytes) -> Keypair:
    """
    Generate a fresh keypair from `random_source`.

    A source that fails or returns short output raises EntropyUnavailable;
    no key material is produced in that case.
    """
    try:
        seed = random_source(SEED_LENGTH)
    except (OSError, NotImplementedError) as e:
        raise EntropyUnavailable(f"Secure random source failed: {e}") from e

    if not isinstance(seed, (bytes, bytearray)) or len(seed) != SEED_LENGTH:
        raise EntropyUnavailable("Secure random source returned the wrong number of bytes")

    keypair = keypair_from_seed(bytes(seed))
    logger.debug("Generated keypair %s", keypair.pubkey)
    return keypair


def keypair_from_secret(secret: bytes) -> Keypair:
    """
    Rebuild a keypair from its 64-byte secret (seed || public).
    The trailing 32 bytes must be the public key of the leading seed.
    """
    if not isinstance(secret, (bytes, bytearray)) or len(secret) != SECRET_KEY_LENGTH:
        raise InvalidSecretKey()
    secret = bytes(secret)
    expected = _public_from_seed(secret[:SEED_LENGTH])
    if expected != secret[SEED_LENGTH:]:
        raise InvalidSecretKey("Invalid keypair: public key does not match secret")
    return Keypair(public=Address(expected), secret=secret)


def keypair_from_base58(text: str) -> Keypair:
    try:
        raw = b58decode(text)
    except ValueError:
        raise InvalidSecretKey("Invalid base58 encoding")
    return keypair_from_secret(raw)


def keypair_to_base58(keypair: Keypair) -> str:
    return b58encode(keypair.secret)


def keypair_to_json_bytes(keypair: Keypair) -> List[int]:
    """Keyfile form used by the ledger CLI: JSON array of the 64 secret bytes."""
    return list(keypair.secret)


def keypair_from_json_bytes(values: List[int]) -> Keypair:
    if not isinstance(values, list) or not all(isinstance(v, int) and 0 <= v <= 255 for v in values):
        raise InvalidSecretKey("Invalid keypair: expected an array of 64 bytes")
    return keypair_from_secret(bytes(values))


def load_keypair_file(path: Union[str, Path]) -> Keypair:
    """
    Load a keyfile: either a JSON byte array (id.json style) or base-58 text.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8").strip()
    except UnicodeDecodeError:
        raise InvalidSecretKey(f"Invalid keyfile {path}: not UTF-8 text")
    if text.startswith("["):
        try:
            values = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidSecretKey(f"Invalid keyfile {path}: {e}")
        return keypair_from_json_bytes(values)
    return keypair_from_base58(text)


def write_keypair_file(keypair: Keypair, path: Union[str, Path]) -> Path:
    """
    Write a new keyfile as a JSON byte array, created owner-only (0600).
    Raises FileExistsError rather than replacing an existing file.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        json.dump(keypair_to_json_bytes(keypair), f, separators=(",", ":"))
    logger.debug("Wrote keyfile %s", path)
    return path
