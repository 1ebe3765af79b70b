# txforge/programs/token.py
import struct
from typing import Optional

from txforge.core.types import AccountMeta, Instruction
from txforge.programs.ids import SYSVAR_RENT_PUBKEY, TOKEN_PROGRAM_ID
from txforge.programs.pda import get_associated_token_address
from txforge.programs.validation import AddressLike, as_address, positive_u64, u8

# Token program instruction tags (single byte)
INITIALIZE_MINT = 0
TRANSFER = 3
MINT_TO = 7


def initialize_mint(
    mint: AddressLike,
    mint_authority: AddressLike,
    decimals: int,
    freeze_authority: Optional[AddressLike] = None,
    token_program_id: AddressLike = TOKEN_PROGRAM_ID,
) -> Instruction:
    """
    Accounts: [mint (writable), rent sysvar]
    Data:     0 || decimals || mint_authority(32) || option tag (0, or 1 || freeze_authority(32))
    """
    mint = as_address(mint, "mint")
    mint_authority = as_address(mint_authority, "mint authority")
    decimals = u8(decimals, "decimals")
    program_id = as_address(token_program_id, "token program")

    data = struct.pack("<BB", INITIALIZE_MINT, decimals) + mint_authority.raw
    if freeze_authority is None:
        data += b"\x00"
    else:
        data += b"\x01" + as_address(freeze_authority, "freeze authority").raw

    return Instruction(
        program_id=program_id,
        accounts=(
            AccountMeta(mint, is_signer=False, is_writable=True),
            AccountMeta(SYSVAR_RENT_PUBKEY, is_signer=False, is_writable=False),
        ),
        data=data,
    )


def mint_to(
    mint: AddressLike,
    destination: AddressLike,
    authority: AddressLike,
    amount: int,
    token_program_id: AddressLike = TOKEN_PROGRAM_ID,
) -> Instruction:
    """
    Mint `amount` into the associated token account of wallet `destination`.

    Accounts: [mint (writable), destination ATA (writable), authority (signer)]
    Data:     7 || u64 LE amount
    """
    mint = as_address(mint, "mint")
    destination = as_address(destination, "destination")
    authority = as_address(authority, "authority")
    amount = positive_u64(amount)
    program_id = as_address(token_program_id, "token program")

    destination_ata = get_associated_token_address(destination, mint, program_id)

    return Instruction(
        program_id=program_id,
        accounts=(
            AccountMeta(mint, is_signer=False, is_writable=True),
            AccountMeta(destination_ata, is_signer=False, is_writable=True),
            AccountMeta(authority, is_signer=True, is_writable=False),
        ),
        data=struct.pack("<BQ", MINT_TO, amount),
    )


def transfer(
    owner: AddressLike,
    destination: AddressLike,
    mint: AddressLike,
    amount: int,
    token_program_id: AddressLike = TOKEN_PROGRAM_ID,
) -> Instruction:
    """
    Move `amount` of `mint` from `owner`'s associated account to `destination`'s.

    Accounts: [owner ATA (writable), destination ATA (writable), owner (signer)]
    Data:     3 || u64 LE amount
    """
    owner = as_address(owner, "owner")
    destination = as_address(destination, "destination")
    mint = as_address(mint, "mint")
    amount = positive_u64(amount)
    program_id = as_address(token_program_id, "token program")

    source_ata = get_associated_token_address(owner, mint, program_id)
    destination_ata = get_associated_token_address(destination, mint, program_id)

    return Instruction(
        program_id=program_id,
        accounts=(
            AccountMeta(source_ata, is_signer=False, is_writable=True),
            AccountMeta(destination_ata, is_signer=False, is_writable=True),
            AccountMeta(owner, is_signer=True, is_writable=False),
        ),
        data=struct.pack("<BQ", TRANSFER, amount),
    )
