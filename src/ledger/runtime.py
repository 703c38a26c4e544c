"""Program registry and instruction invocation.

Provides register_program() / get_program() / reset_programs() to manage the
programs the ledger hosts, and invoke() to run one of them against account
snapshots while enforcing the runtime rules:

- read-only accounts come back untouched
- data changes only on accounts the invoked program owns afterwards, and only
  if it owned them before or they were empty system accounts
- lamports leave an account only if the program owns it or it signed
- total lamports across the instruction are conserved
"""

from collections.abc import Callable

import structlog

from ledger.errors import (
    ExternalAccountDataModified,
    ExternalLamportSpend,
    ReadonlyAccountModified,
    UnbalancedInstruction,
    UnknownProgram,
)
from ledger.interface import AccountInfo
from ledger.keys import SYSTEM_PROGRAM_ID, address_bytes

logger = structlog.get_logger(__name__)

ProgramEntrypoint = Callable[[str, list[AccountInfo], bytes], None]

_programs: dict[str, ProgramEntrypoint] = {}


def register_program(program_id: str, entrypoint: ProgramEntrypoint) -> None:
    """Make ``entrypoint`` executable under ``program_id``."""
    address_bytes(program_id)
    _programs[program_id] = entrypoint
    logger.info("Program registered", program_id=program_id)


def get_program(program_id: str) -> ProgramEntrypoint:
    try:
        return _programs[program_id]
    except KeyError:
        raise UnknownProgram(f"No program registered at {program_id}") from None


def reset_programs() -> None:
    """Forget all registered programs (useful for tests)."""
    _programs.clear()


def invoke(program_id: str, accounts: list[AccountInfo], data: bytes) -> list[AccountInfo]:
    """Run ``program_id`` over ``accounts`` and return the snapshots it changed.

    The same snapshot object may appear more than once in ``accounts``.
    Raises whatever the program raises, or a LedgerError when the program
    broke a runtime rule.
    """
    entrypoint = get_program(program_id)

    originals: dict[str, AccountInfo] = {}
    for account in accounts:
        originals.setdefault(account.key, account.clone())

    entrypoint(program_id, accounts, data)

    unique = list({account.key: account for account in accounts}.values())
    changed = []
    for account in unique:
        before = originals[account.key]
        if account.state() == before.state():
            continue
        _verify_change(program_id, before, account)
        changed.append(account)

    lamports_before = sum(before.lamports for before in originals.values())
    lamports_after = sum(account.lamports for account in unique)
    if lamports_before != lamports_after:
        raise UnbalancedInstruction(f"Lamports changed from {lamports_before} to {lamports_after}")

    return changed


def _verify_change(program_id: str, before: AccountInfo, after: AccountInfo) -> None:
    if not after.is_writable:
        raise ReadonlyAccountModified(f"Account {after.key} is read-only")

    if after.owner != before.owner or after.data != before.data:
        claimable = before.owner == SYSTEM_PROGRAM_ID and before.is_empty
        if after.owner != program_id or not (before.owner == program_id or claimable):
            raise ExternalAccountDataModified(f"Program {program_id} cannot modify account {after.key}")

    if after.lamports < before.lamports and not (before.owner == program_id or after.is_signer):
        raise ExternalLamportSpend(f"Program {program_id} cannot debit account {after.key}")
