# txforge/programs/pda.py
"""
Program-derived addresses.

A program address is an address with no private key: the candidate hash of
seeds + program id must fall off the ed25519 curve. `find_program_address`
appends a one-byte bump seed, scanning 255 down to 0, and returns the first
candidate the runtime would accept.
"""

import logging
from typing import Sequence, Tuple

from solders.pubkey import Pubkey

from txforge.core.errors import AddressDerivationExhausted, InvalidSeeds
from txforge.core.types import Address
from txforge.programs.ids import ASSOCIATED_TOKEN_PROGRAM_ID, TOKEN_PROGRAM_ID
from txforge.programs.validation import AddressLike, as_address

logger = logging.getLogger(__name__)

MAX_SEEDS = 16
MAX_SEED_LENGTH = 32


def create_program_address(seeds: Sequence[bytes], program_id: Address) -> Address:
    """
    Address for `seeds` under `program_id`.
    Raises InvalidSeeds if the seeds are out of bounds or the hash lands on the curve.
    """
    if len(seeds) > MAX_SEEDS:
        raise InvalidSeeds(f"Too many seeds: {len(seeds)} > {MAX_SEEDS}")
    if any(len(seed) > MAX_SEED_LENGTH for seed in seeds):
        raise InvalidSeeds(f"Seed exceeds {MAX_SEED_LENGTH} bytes")

    try:
        pubkey = Pubkey.create_program_address([bytes(s) for s in seeds], Pubkey(program_id.raw))
    except Exception:
        # solders raises PubkeyError, which it does not export; bounds are checked above
        raise InvalidSeeds("Invalid seeds, address must fall off the curve")
    return Address(bytes(pubkey))


def find_program_address(seeds: Sequence[bytes], program_id: Address) -> Tuple[Address, int]:
    """Return (address, bump) for the highest bump whose address is off the curve."""
    seeds = list(seeds)
    if len(seeds) >= MAX_SEEDS:
        # the bump itself takes one seed slot
        raise InvalidSeeds(f"Too many seeds: {len(seeds)} + bump > {MAX_SEEDS}")

    for bump in range(255, -1, -1):
        try:
            address = create_program_address(seeds + [bytes([bump])], program_id)
        except InvalidSeeds:
            continue
        logger.debug("Derived program address %s with bump %d", address, bump)
        return address, bump

    raise AddressDerivationExhausted()


def get_associated_token_address(
    owner: AddressLike,
    mint: AddressLike,
    token_program_id: AddressLike = TOKEN_PROGRAM_ID,
    associated_program_id: AddressLike = ASSOCIATED_TOKEN_PROGRAM_ID,
) -> Address:
    """
    Associated token account of `owner` for `mint`.
    Seeds are [owner, token_program_id, mint] under the associated-token program.
    """
    owner = as_address(owner, "owner")
    mint = as_address(mint, "mint")
    token_program_id = as_address(token_program_id, "token program")
    associated_program_id = as_address(associated_program_id, "associated token program")

    address, _ = find_program_address(
        [owner.raw, token_program_id.raw, mint.raw],
        associated_program_id,
    )
    return address
