# txforge/api/requests.py
"""
Boundary adapter: loosely-typed JSON bodies in, validated typed requests out.

Each request type checks for missing fields, unknown fields and JSON types,
then decodes addresses, secrets and signatures, so the builders and crypto
functions only ever see well-formed values.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from txforge.core.encoding import b58decode, decode_address
from txforge.core.errors import (
    InvalidAddress,
    InvalidField,
    InvalidPublicKey,
    InvalidSecretKey,
    InvalidSignature,
    MissingField,
)
from txforge.core.types import ADDRESS_LENGTH, SIGNATURE_LENGTH, Address, Keypair
from txforge.crypto.keys import keypair_from_base58, keypair_from_json_bytes
from txforge.programs.validation import positive_u64, u8


def _as_object(body: Any, allowed: Iterable[str]) -> Dict[str, Any]:
    if body is None:
        body = {}
    if not isinstance(body, dict):
        raise InvalidField("body", "Request body must be a JSON object")
    for key in body:
        if key not in allowed:
            raise InvalidField(key, f"Unknown field: {key}")
    return body


def _required(body: Dict[str, Any], name: str) -> Any:
    value = body.get(name)
    # empty strings count as absent
    if value is None or value == "":
        raise MissingField(name)
    return value


def _required_str(body: Dict[str, Any], name: str) -> str:
    value = _required(body, name)
    if not isinstance(value, str):
        raise InvalidField(name, f"Invalid {name}: expected a string")
    return value


def _required_address(body: Dict[str, Any], name: str, label: Optional[str] = None) -> Address:
    text = _required_str(body, name)
    try:
        return decode_address(text, name)
    except InvalidAddress:
        raise InvalidAddress(name, f"Invalid {label or name + ' address'}")


def _required_amount(body: Dict[str, Any], name: str) -> int:
    return positive_u64(_required(body, name), name)


def _message(body: Dict[str, Any]) -> str:
    # an empty message is a valid thing to sign
    if "message" not in body or body["message"] is None:
        raise MissingField("message")
    if not isinstance(body["message"], str):
        raise InvalidField("message", "Invalid message: expected a string")
    return body["message"]


@dataclass(frozen=True)
class SignMessageRequest:
    message: str
    keypair: Keypair

    @classmethod
    def from_json(cls, body: Any) -> "SignMessageRequest":
        body = _as_object(body, ("message", "secret"))
        message = _message(body)
        secret = _required(body, "secret")
        if isinstance(secret, str):
            keypair = keypair_from_base58(secret)
        elif isinstance(secret, list):
            keypair = keypair_from_json_bytes(secret)
        else:
            raise InvalidSecretKey("Invalid secret: expected base-58 text or a byte array")
        return cls(message=message, keypair=keypair)


@dataclass(frozen=True)
class VerifyMessageRequest:
    message: str
    signature: bytes
    pubkey: Address

    @classmethod
    def from_json(cls, body: Any) -> "VerifyMessageRequest":
        body = _as_object(body, ("message", "signature", "pubkey"))
        message = _message(body)

        signature_text = _required_str(body, "signature")
        try:
            signature = b58decode(signature_text)
        except ValueError:
            raise InvalidSignature("Invalid signature: not base-58")
        if len(signature) != SIGNATURE_LENGTH:
            raise InvalidSignature()

        pubkey_text = _required_str(body, "pubkey")
        try:
            pubkey = b58decode(pubkey_text)
        except ValueError:
            raise InvalidPublicKey("Invalid public key: not base-58")
        if len(pubkey) != ADDRESS_LENGTH:
            raise InvalidPublicKey()

        return cls(message=message, signature=signature, pubkey=Address(pubkey))


@dataclass(frozen=True)
class CreateTokenRequest:
    mint: Address
    mint_authority: Address
    decimals: int
    freeze_authority: Optional[Address] = None

    @classmethod
    def from_json(cls, body: Any) -> "CreateTokenRequest":
        body = _as_object(body, ("mint", "mintAuthority", "decimals", "freezeAuthority"))
        mint_authority = _required_address(body, "mintAuthority", "mint authority address")
        mint = _required_address(body, "mint", "mint address")
        if "decimals" not in body or body["decimals"] is None:
            raise MissingField("decimals")
        decimals = u8(body["decimals"], "decimals")

        freeze_authority = None
        if body.get("freezeAuthority") not in (None, ""):
            freeze_authority = _required_address(body, "freezeAuthority", "freeze authority address")

        return cls(
            mint=mint,
            mint_authority=mint_authority,
            decimals=decimals,
            freeze_authority=freeze_authority,
        )


@dataclass(frozen=True)
class MintTokenRequest:
    mint: Address
    destination: Address
    authority: Address
    amount: int

    @classmethod
    def from_json(cls, body: Any) -> "MintTokenRequest":
        body = _as_object(body, ("mint", "destination", "authority", "amount"))
        return cls(
            mint=_required_address(body, "mint", "mint address"),
            destination=_required_address(body, "destination", "destination address"),
            authority=_required_address(body, "authority", "authority address"),
            amount=_required_amount(body, "amount"),
        )


@dataclass(frozen=True)
class SendSolRequest:
    sender: Address
    recipient: Address
    lamports: int

    @classmethod
    def from_json(cls, body: Any) -> "SendSolRequest":
        body = _as_object(body, ("from", "to", "lamports"))
        # presence first, then the amount rule, then address decoding
        _required_str(body, "from")
        _required_str(body, "to")
        lamports = _required_amount(body, "lamports")
        return cls(
            sender=_required_address(body, "from", "sender public key"),
            recipient=_required_address(body, "to", "recipient public key"),
            lamports=lamports,
        )


@dataclass(frozen=True)
class SendTokenRequest:
    destination: Address
    mint: Address
    owner: Address
    amount: int

    @classmethod
    def from_json(cls, body: Any) -> "SendTokenRequest":
        body = _as_object(body, ("destination", "mint", "owner", "amount"))
        return cls(
            destination=_required_address(body, "destination", "destination public key"),
            mint=_required_address(body, "mint", "mint public key"),
            owner=_required_address(body, "owner", "owner public key"),
            amount=_required_amount(body, "amount"),
        )
