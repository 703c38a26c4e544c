"""Synchronous facade over the ledger domain.

Callers must run inside an active ledger domain context.
"""

import json
from collections.abc import Iterable
from dataclasses import asdict

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ledger.account.account import Account
from ledger.account.execution import ExecuteInstruction
from ledger.account.funding import FundAccount
from ledger.interface import AccountInfo, Instruction

PAGE_SIZE = 100


class LedgerClient:
    """Submit instructions to the ledger and read account state back."""

    def send(self, instruction: Instruction, signers: Iterable[str] = ()) -> list[str]:
        """Execute ``instruction`` atomically; return the addresses it changed."""
        command = ExecuteInstruction(
            program_id=instruction.program_id,
            accounts=json.dumps([asdict(meta) for meta in instruction.accounts]),
            data=instruction.data.hex(),
            signers=json.dumps(sorted(set(signers))),
        )
        return current_domain.process(command, asynchronous=False)

    def airdrop(self, address: str, lamports: int) -> int:
        """Credit ``lamports`` to ``address``; return the new balance."""
        return current_domain.process(FundAccount(address=address, lamports=lamports), asynchronous=False)

    def get_account(self, address: str) -> AccountInfo | None:
        try:
            account = current_domain.repository_for(Account).get(address)
        except ObjectNotFoundError:
            return None
        return account.snapshot()


    def get_program_accounts(self, program_id: str) -> list[AccountInfo]:
        """All persisted accounts currently owned by ``program_id``, ordered by address."""
        repo = current_domain.repository_for(Account)
        query = repo._dao.query.filter(owner=program_id).order_by("address")

        accounts = []
        offset = 0
        while True:
            page = query.offset(offset).limit(PAGE_SIZE).all()
            accounts.extend(account.snapshot() for account in page.items)
            if not page.has_next:
                return accounts
            offset += PAGE_SIZE
