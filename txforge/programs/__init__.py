"""
Instruction builders for the system and token programs, plus program-derived
address helpers.
"""

from txforge.programs.ids import (
    ASSOCIATED_TOKEN_PROGRAM_ID,
    SYSTEM_PROGRAM_ID,
    SYSVAR_RENT_PUBKEY,
    TOKEN_PROGRAM_ID,
)
from txforge.programs.pda import (
    create_program_address,
    find_program_address,
    get_associated_token_address,
)
from txforge.programs import system, token

__all__ = [
    "ASSOCIATED_TOKEN_PROGRAM_ID",
    "SYSTEM_PROGRAM_ID",
    "SYSVAR_RENT_PUBKEY",
    "TOKEN_PROGRAM_ID",
    "create_program_address",
    "find_program_address",
    "get_associated_token_address",
    "system",
    "token",
]
