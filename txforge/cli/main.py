# txforge/cli/main.py
"""
CLI for generating keys, signing messages and building unsigned instructions.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from txforge.api.envelope import ApiResponse
from txforge.api.routes import dispatch
from txforge.core.canon import canonical_json
from txforge.core.errors import TxForgeError
from txforge.crypto.keys import generate_keypair, keypair_to_base58, load_keypair_file, write_keypair_file
from txforge.programs.pda import get_associated_token_address

app = typer.Typer(
    name="txforge",
    help="Build unsigned ledger instructions, generate keypairs, sign and verify messages",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)

state = {"canonical": False}

DEFAULT_KEYPAIR_PATH = Path.home() / ".config" / "solana" / "id.json"


def get_keypair_path(keypair_flag: Optional[Path] = None) -> Path:
    """Resolve keyfile path in this order:
    1. --keypair flag
    2. TXFORGE_KEYPAIR environment variable
    3. Default: ~/.config/solana/id.json
    """
    if keypair_flag:
        return keypair_flag.resolve()
    env_path = os.environ.get("TXFORGE_KEYPAIR")
    if env_path:
        return Path(env_path).resolve()
    return DEFAULT_KEYPAIR_PATH


def configure_logging(verbose: bool = False) -> None:
    level_name = "DEBUG" if verbose else os.environ.get("TXFORGE_LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def emit(response: ApiResponse) -> None:
    """Print the envelope; non-zero exit when the operation was rejected."""
    if state["canonical"]:
        typer.echo(canonical_json(response.to_dict()).decode("utf-8"))
    else:
        console.print_json(data=response.to_dict())
    if not response.success:
        raise typer.Exit(1)


def run(path: str, body: Any = None) -> None:
    emit(dispatch(path, body))


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr"),
    canonical: bool = typer.Option(False, "--canonical", help="Print RFC 8785 canonical JSON on one line"),
):
    """Stateless instruction builder and ed25519 toolkit."""
    configure_logging(verbose)
    state["canonical"] = canonical


@app.command()
def keypair(
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Also write the keypair as a JSON byte-array keyfile"),
):
    """Generate a new ed25519 keypair."""
    if out is None:
        run("/keypair")
        return

    kp = generate_keypair()
    try:
        write_keypair_file(kp, out)
    except FileExistsError:
        err_console.print(f"[red]Refusing to overwrite existing keyfile: {out}[/]")
        raise typer.Exit(1)
    emit(ApiResponse.ok({"pubkey": kp.pubkey, "secret": keypair_to_base58(kp), "keyfile": str(out)}))


@app.command()
def sign(
    message: str = typer.Argument(..., help="Message to sign (UTF-8)"),
    secret: Optional[str] = typer.Option(None, "--secret", "-s", help="Base-58 64-byte secret key"),
    keypair_path: Optional[Path] = typer.Option(None, "--keypair", "-k", help="Keyfile (overrides TXFORGE_KEYPAIR)"),
):
    """Sign a message with a secret key or keyfile."""
    if secret is None:
        path = get_keypair_path(keypair_path)
        if not path.exists():
            err_console.print(f"[red]Keyfile not found: {path}[/]")
            err_console.print("[yellow]Pass --secret, --keypair, or set TXFORGE_KEYPAIR[/]")
            raise typer.Exit(1)
        try:
            secret = keypair_to_base58(load_keypair_file(path))
        except TxForgeError as e:
            err_console.print(f"[red]Failed to load keyfile {path}: {e}[/]")
            raise typer.Exit(1)

    run("/message/sign", {"message": message, "secret": secret})


@app.command()
def verify(
    message: str = typer.Argument(..., help="Signed message (UTF-8)"),
    signature: str = typer.Argument(..., help="Base-58 signature"),
    pubkey: str = typer.Argument(..., help="Base-58 public key"),
):
    """Verify a detached signature."""
    run("/message/verify", {"message": message, "signature": signature, "pubkey": pubkey})


@app.command("create-token")
def create_token(
    mint: str = typer.Option(..., "--mint", help="Mint account address"),
    mint_authority: str = typer.Option(..., "--mint-authority", help="Mint authority address"),
    decimals: int = typer.Option(..., "--decimals", help="Token decimals (0-255)"),
    freeze_authority: Optional[str] = typer.Option(None, "--freeze-authority", help="Optional freeze authority"),
):
    """Build an InitializeMint instruction."""
    body = {"mint": mint, "mintAuthority": mint_authority, "decimals": decimals}
    if freeze_authority:
        body["freezeAuthority"] = freeze_authority
    run("/token/create", body)


@app.command("mint-token")
def mint_token(
    mint: str = typer.Option(..., "--mint"),
    destination: str = typer.Option(..., "--destination", help="Destination wallet (its associated account is used)"),
    authority: str = typer.Option(..., "--authority"),
    amount: int = typer.Option(..., "--amount"),
):
    """Build a MintTo instruction."""
    run("/token/mint", {"mint": mint, "destination": destination, "authority": authority, "amount": amount})


@app.command("send-sol")
def send_sol(
    sender: str = typer.Option(..., "--from", help="Sender address (signer)"),
    recipient: str = typer.Option(..., "--to", help="Recipient address"),
    lamports: int = typer.Option(..., "--lamports"),
):
    """Build a native transfer instruction."""
    run("/send/sol", {"from": sender, "to": recipient, "lamports": lamports})


@app.command("send-token")
def send_token(
    destination: str = typer.Option(..., "--destination", help="Destination wallet"),
    mint: str = typer.Option(..., "--mint"),
    owner: str = typer.Option(..., "--owner", help="Owner wallet (signer)"),
    amount: int = typer.Option(..., "--amount"),
):
    """Build a token Transfer instruction between associated accounts."""
    run("/send/token", {"destination": destination, "mint": mint, "owner": owner, "amount": amount})


@app.command()
def ata(
    owner: str = typer.Argument(..., help="Wallet address"),
    mint: str = typer.Argument(..., help="Token mint address"),
):
    """Derive the associated token account address."""
    try:
        address = get_associated_token_address(owner, mint)
    except TxForgeError as e:
        emit(ApiResponse.fail(str(e)))
        return
    emit(ApiResponse.ok({"owner": owner, "mint": mint, "address": str(address)}))


@app.command()
def call(
    path: str = typer.Argument(..., help="Endpoint path, e.g. /send/sol"),
    body: Optional[str] = typer.Argument(None, help="JSON request body"),
):
    """Run any endpoint with a raw JSON body and print the response envelope."""
    payload = None
    if body:
        try:
            payload = json.loads(body)
        except json.JSONDecodeError as e:
            err_console.print(f"[red]Invalid JSON body: {e}[/]")
            raise typer.Exit(1)
    run(path, payload)


if __name__ == "__main__":
    app()
