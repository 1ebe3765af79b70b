# txforge/programs/system.py
import struct

from txforge.core.types import AccountMeta, Instruction
from txforge.programs.ids import SYSTEM_PROGRAM_ID
from txforge.programs.validation import AddressLike, as_address, positive_u64

# System program instruction index, encoded as u32 LE
TRANSFER = 2


def transfer(from_: AddressLike, to: AddressLike, lamports: int) -> Instruction:
    """
    Native-currency transfer.

    Accounts: [from (signer, writable), to (writable)]
    Data:     u32 LE 2 || u64 LE lamports
    """
    sender = as_address(from_, "sender")
    recipient = as_address(to, "recipient")
    lamports = positive_u64(lamports, "lamports")

    return Instruction(
        program_id=SYSTEM_PROGRAM_ID,
        accounts=(
            AccountMeta(sender, is_signer=True, is_writable=True),
            AccountMeta(recipient, is_signer=False, is_writable=True),
        ),
        data=struct.pack("<IQ", TRANSFER, lamports),
    )
