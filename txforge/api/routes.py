# txforge/api/routes.py
import logging
import secrets
from typing import Any, Callable, Dict

from txforge.api.envelope import (
    NOT_FOUND,
    ApiResponse,
    InstructionResult,
    KeypairResult,
    SignatureResult,
    TokenTransferResult,
    VerificationResult,
)
from txforge.api.requests import (
    CreateTokenRequest,
    MintTokenRequest,
    SendSolRequest,
    SendTokenRequest,
    SignMessageRequest,
    VerifyMessageRequest,
)
from txforge.core.errors import TxForgeError
from txforge.crypto.keys import RandomSource, generate_keypair
from txforge.crypto.signing import sign_message, verify_message
from txforge.programs import system, token

logger = logging.getLogger(__name__)


class Router:
    """
    Maps endpoint paths to operations.
    Transport-agnostic: hand it a path and the decoded JSON body.
    """

    def __init__(self, random_source: RandomSource = secrets.token_bytes):
        self.random_source = random_source
        self.routes: Dict[str, Callable[[Any], Any]] = {
            "/keypair": self.keypair,
            "/message/sign": self.sign,
            "/message/verify": self.verify,
            "/token/create": self.create_token,
            "/token/mint": self.mint_token,
            "/send/sol": self.send_sol,
            "/send-sol": self.send_sol,
            "/send/token": self.send_token,
            "/send-token": self.send_token,
        }

    def dispatch(self, path: str, body: Any = None) -> ApiResponse:
        handler = self.routes.get(path)
        if handler is None:
            return ApiResponse.fail(f"Unknown endpoint: {path}", NOT_FOUND)

        logger.debug("Dispatching %s", path)
        try:
            result = handler(body)
        except TxForgeError as e:
            logger.info("Rejected %s request: %s", path, e)
            return ApiResponse.fail(str(e))
        return ApiResponse.ok(result.to_dict())

    def keypair(self, body: Any) -> KeypairResult:
        return KeypairResult(generate_keypair(self.random_source))

    def sign(self, body: Any) -> SignatureResult:
        req = SignMessageRequest.from_json(body)
        signature = sign_message(req.message, req.keypair.secret)
        return SignatureResult(signature=signature, message=req.message, pubkey=req.keypair.public)

    def verify(self, body: Any) -> VerificationResult:
        req = VerifyMessageRequest.from_json(body)
        valid = verify_message(req.message, req.signature, req.pubkey)
        return VerificationResult(valid=valid, message=req.message, pubkey=req.pubkey)

    def create_token(self, body: Any) -> InstructionResult:
        req = CreateTokenRequest.from_json(body)
        return InstructionResult(
            token.initialize_mint(req.mint, req.mint_authority, req.decimals, req.freeze_authority)
        )

    def mint_token(self, body: Any) -> InstructionResult:
        req = MintTokenRequest.from_json(body)
        return InstructionResult(token.mint_to(req.mint, req.destination, req.authority, req.amount))

    def send_sol(self, body: Any) -> InstructionResult:
        req = SendSolRequest.from_json(body)
        return InstructionResult(system.transfer(req.sender, req.recipient, req.lamports))

    def send_token(self, body: Any) -> TokenTransferResult:
        req = SendTokenRequest.from_json(body)
        ix = token.transfer(req.owner, req.destination, req.mint, req.amount)
        return TokenTransferResult(ix, owner=req.owner)


_default_router = Router()


def dispatch(path: str, body: Any = None) -> ApiResponse:
    """Run the operation behind `path` with the process-wide secure random source."""
    return _default_router.dispatch(path, body)
