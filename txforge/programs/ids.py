# txforge/programs/ids.py
from txforge.core.encoding import decode_address

SYSTEM_PROGRAM_ID = decode_address("11111111111111111111111111111111")
TOKEN_PROGRAM_ID = decode_address("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA")
ASSOCIATED_TOKEN_PROGRAM_ID = decode_address("ATokenGPvbdGVxr1b2hvZbsiqW5xWH25efTNsLJA8knL")
SYSVAR_RENT_PUBKEY = decode_address("SysvarRent111111111111111111111111111111111")
