"""System program: rent and account allocation.

Programs cannot create accounts themselves. They ask the system program to
allocate zeroed space at an address they control and to hand ownership of it
over, with the payer covering the rent-exempt minimum balance.
"""

from collections.abc import Sequence

import structlog

from ledger.errors import (
    AccountAlreadyInUse,
    IncorrectProgramId,
    InsufficientFunds,
    MissingRequiredSignature,
)
from ledger.interface import AccountInfo
from ledger.keys import SYSTEM_PROGRAM_ID, program_address

logger = structlog.get_logger(__name__)

ACCOUNT_STORAGE_OVERHEAD = 128
LAMPORTS_PER_BYTE_YEAR = 3480
EXEMPTION_THRESHOLD_YEARS = 2


def minimum_balance(space: int) -> int:
    """Lamports an account of ``space`` data bytes must hold to be rent exempt."""
    return (ACCOUNT_STORAGE_OVERHEAD + space) * LAMPORTS_PER_BYTE_YEAR * EXEMPTION_THRESHOLD_YEARS


def create_account(
    system_account: AccountInfo,
    payer: AccountInfo,
    new_account: AccountInfo,
    space: int,
    owner: str,
    seeds: Sequence[bytes],
) -> None:
    """Allocate ``space`` zeroed bytes at ``new_account`` and assign it to ``owner``.

    ``seeds`` must derive ``new_account.key`` under ``owner``; that is how the
    owning program signs for an address it holds no key for. Every check runs
    before any lamports move.
    """
    if system_account.key != SYSTEM_PROGRAM_ID:
        raise IncorrectProgramId(f"Expected the system program, got {system_account.key}")
    if not payer.is_signer:
        raise MissingRequiredSignature(f"Payer {payer.key} did not sign")
    if program_address(seeds, owner) != new_account.key:
        raise MissingRequiredSignature(f"Seeds do not derive {new_account.key} for program {owner}")
    if not new_account.is_empty or new_account.owner != SYSTEM_PROGRAM_ID:
        raise AccountAlreadyInUse(f"Account {new_account.key} is already in use")

    required = max(minimum_balance(space) - new_account.lamports, 0)
    if payer.lamports < required:
        raise InsufficientFunds(f"Payer {payer.key} holds {payer.lamports} lamports, {required} required")

    payer.lamports -= required
    new_account.lamports += required
    new_account.data = bytearray(space)
    new_account.owner = owner

    logger.debug(
        "Account created",
        address=new_account.key,
        owner=owner,
        space=space,
        rent=required,
    )
