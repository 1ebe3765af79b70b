# tests/test_api.py
import pytest

from txforge.api import Router, dispatch
from txforge.api.envelope import TokenTransferResult
from txforge.core.encoding import b58decode, b58encode
from txforge.core.errors import EntropyUnavailable
from txforge.crypto.keys import keypair_to_base58, keypair_to_json_bytes
from txforge.programs import get_associated_token_address, token

from conftest import fixed_source

TOKEN_PROGRAM = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"


@pytest.fixture
def generated():
    res = dispatch("/keypair")
    assert res.status_code == 200
    return res.data


def test_keypair_envelope(generated):
    assert len(b58decode(generated["pubkey"])) == 32
    secret = b58decode(generated["secret"])
    assert len(secret) == 64
    assert b58encode(secret[32:]) == generated["pubkey"]


def test_keypair_with_injected_source():
    router = Router(random_source=fixed_source(5))
    assert router.dispatch("/keypair").data == router.dispatch("/keypair").data


def test_entropy_failure_propagates():
    def broken(n):
        raise OSError("getrandom failed")

    with pytest.raises(EntropyUnavailable):
        Router(random_source=broken).dispatch("/keypair")


def test_sign_then_verify_scenario(generated):
    signed = dispatch("/message/sign", {"message": "Hello, Solana!", "secret": generated["secret"]})
    assert signed.success
    assert signed.data["message"] == "Hello, Solana!"
    assert signed.data["pubkey"] == generated["pubkey"]

    verified = dispatch("/message/verify", {
        "message": "Hello, Solana!",
        "signature": signed.data["signature"],
        "pubkey": signed.data["pubkey"],
    })
    assert verified.status_code == 200
    assert verified.data == {"valid": True, "message": "Hello, Solana!", "pubkey": generated["pubkey"]}

    tampered = dispatch("/message/verify", {
        "message": "Hello, Bitcoin!",
        "signature": signed.data["signature"],
        "pubkey": signed.data["pubkey"],
    })
    assert tampered.success
    assert tampered.data["valid"] is False


def test_sign_accepts_byte_array_secret(alice):
    res = dispatch("/message/sign", {"message": "hi", "secret": keypair_to_json_bytes(alice)})
    assert res.success
    assert res.data["pubkey"] == alice.pubkey


def test_sign_empty_message_allowed(alice):
    res = dispatch("/message/sign", {"message": "", "secret": keypair_to_base58(alice)})
    assert res.success


def test_sign_invalid_secret():
    res = dispatch("/message/sign", {"message": "Hello, Solana!", "secret": "secret"})
    assert res.status_code == 400
    assert res.to_dict() == {"success": False, "error": res.error}
    assert "keypair" in res.error.lower()


def test_verify_bad_signature_length(alice):
    res = dispatch("/message/verify", {"message": "m", "signature": "abc", "pubkey": alice.pubkey})
    assert res.status_code == 400
    assert "signature" in res.error.lower()


def test_verify_bad_pubkey_length(alice):
    signature = b58encode(bytes(64))
    res = dispatch("/message/verify", {"message": "m", "signature": signature, "pubkey": "abc"})
    assert res.status_code == 400
    assert "public key" in res.error.lower()


def test_verify_missing_message(alice):
    res = dispatch("/message/verify", {"signature": b58encode(bytes(64)), "pubkey": alice.pubkey})
    assert res.error == "Missing required field: message"


def test_token_create(alice, mint_address):
    res = dispatch("/token/create", {"mintAuthority": alice.pubkey, "mint": str(mint_address), "decimals": 6})
    assert res.status_code == 200
    data = res.data
    assert data["program_id"] == TOKEN_PROGRAM
    assert len(data["accounts"]) == 2
    assert data["accounts"][0] == {"pubkey": str(mint_address), "is_signer": False, "is_writable": True}
    assert data["accounts"][1]["is_signer"] is False
    assert data["accounts"][1]["is_writable"] is False
    assert b58decode(data["instruction_data"])[:2] == bytes([0, 6])


def test_token_create_invalid_addresses():
    res = dispatch("/token/create", {"mintAuthority": "askdjkadsjkdsajkdajadkjk", "mint": "asdadsdas", "decimals": 6})
    assert res.status_code == 400
    assert res.success is False


def test_token_create_missing_field():
    res = dispatch("/token/create", {"mint": "asdadsdas", "decimals": 6})
    assert res.status_code == 400
    assert res.error == "Missing required field: mintAuthority"


def test_token_mint(alice, bob, mint_address):
    res = dispatch("/token/mint", {
        "mint": str(mint_address),
        "destination": bob.pubkey,
        "authority": alice.pubkey,
        "amount": 1000000,
    })
    assert res.success
    accounts = res.data["accounts"]
    assert [a["pubkey"] for a in accounts] == [
        str(mint_address),
        str(get_associated_token_address(bob.public, mint_address)),
        alice.pubkey,
    ]
    assert accounts[2]["is_signer"] is True


def test_token_mint_missing_mint(alice, bob):
    res = dispatch("/token/mint", {"destination": bob.pubkey, "authority": alice.pubkey, "amount": 1000000})
    assert res.status_code == 400
    assert "mint" in res.error


def test_send_sol(alice, bob):
    res = dispatch("/send/sol", {"from": alice.pubkey, "to": bob.pubkey, "lamports": 200})
    assert res.status_code == 200
    assert res.data["program_id"] == "11111111111111111111111111111111"
    data = b58decode(res.data["instruction_data"])
    assert list(data[:4]) == [2, 0, 0, 0]
    assert data[4] == 200
    assert [a["pubkey"] for a in res.data["accounts"]] == [alice.pubkey, bob.pubkey]


def test_send_sol_alias_is_consistent(alice, bob):
    body = {"from": alice.pubkey, "to": bob.pubkey, "lamports": 1000000}
    assert dispatch("/send/sol", body).to_dict() == dispatch("/send-sol", body).to_dict()


def test_send_sol_zero_lamports(alice, bob):
    res = dispatch("/send/sol", {"from": alice.pubkey, "to": bob.pubkey, "lamports": 0})
    assert res.status_code == 400
    assert res.error == "Amount must be greater than 0"


def test_send_sol_invalid_sender(bob):
    res = dispatch("/send/sol", {"from": "sender", "to": bob.pubkey, "lamports": 1000000})
    assert res.status_code == 400
    assert res.error == "Invalid sender public key"


def test_send_sol_wrong_type(alice, bob):
    res = dispatch("/send/sol", {"from": alice.pubkey, "to": bob.pubkey, "lamports": "100"})
    assert res.status_code == 400


def test_send_token(alice, bob, mint_address):
    res = dispatch("/send/token", {
        "destination": bob.pubkey,
        "mint": str(mint_address),
        "owner": alice.pubkey,
        "amount": 1000000,
    })
    assert res.status_code == 200
    assert res.data["program_id"] == TOKEN_PROGRAM
    accounts = res.data["accounts"]
    assert len(accounts) == 3
    assert accounts[0]["pubkey"] == alice.pubkey
    assert accounts[1]["pubkey"] == str(get_associated_token_address(bob.public, mint_address))
    assert accounts[2] == {"pubkey": alice.pubkey, "is_signer": True, "is_writable": False}


def test_send_token_reports_owner_wallet_first(alice, bob, mint_address):
    ix = token.transfer(alice.public, bob.public, mint_address, 5)
    result = TokenTransferResult(ix, owner=alice.public)
    accounts = result.to_dict()["accounts"]
    assert accounts[0] == {"pubkey": alice.pubkey, "is_signer": False, "is_writable": True}
    assert accounts[1:] == [meta.to_dict() for meta in ix.accounts[1:]]
    # the instruction itself still starts from the owner's associated account
    assert ix.accounts[0].pubkey == get_associated_token_address(alice.public, mint_address)


def test_send_token_missing_mint(alice, bob):
    res = dispatch("/send-token", {"destination": bob.pubkey, "owner": alice.pubkey, "amount": 1000000})
    assert res.status_code == 400
    assert res.error == "Missing required field: mint"


def test_unknown_field_rejected(alice, bob):
    res = dispatch("/send/sol", {"from": alice.pubkey, "to": bob.pubkey, "lamports": 5, "memo": "x"})
    assert res.status_code == 400
    assert res.error == "Unknown field: memo"


def test_non_object_body():
    res = dispatch("/send/sol", ["not", "an", "object"])
    assert res.status_code == 400


def test_unknown_path():
    res = dispatch("/balance/abc")
    assert res.status_code == 404
    assert res.success is False


def test_request_adapter_raises_typed_errors(alice):
    from txforge.api.requests import MintTokenRequest, SendSolRequest
    from txforge.core.errors import InvalidAmount, MissingField

    with pytest.raises(MissingField) as exc:
        SendSolRequest.from_json({"from": alice.pubkey, "lamports": 5})
    assert exc.value.field == "to"

    with pytest.raises(InvalidAmount):
        MintTokenRequest.from_json({
            "mint": alice.pubkey, "destination": alice.pubkey, "authority": alice.pubkey, "amount": -3,
        })
