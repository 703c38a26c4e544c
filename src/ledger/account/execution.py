"""ExecuteInstruction: run one program instruction against ledger accounts.

The handler authenticates signers, snapshots every referenced account, lets
the runtime invoke the program and check its changes, then persists only the
snapshots that changed. Any exception leaves every account as it was.
"""

import json

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from ledger.account.account import Account
from ledger.domain import ledger
from ledger.errors import MissingRequiredSignature
from ledger.keys import address_bytes
from ledger.runtime import invoke
from ledger.utils.logging import add_context, clear_context

logger = structlog.get_logger(__name__)


@ledger.command(part_of="Account")
class ExecuteInstruction:
    program_id = Identifier(required=True)
    accounts = Text(required=True)  # JSON array of {address, is_signer, is_writable}
    data = Text()  # hex-encoded instruction payload
    signers = Text()  # JSON array of addresses that signed the request


@ledger.command_handler(part_of=Account)
class ExecuteInstructionHandler:
    @handle(ExecuteInstruction)
    def execute_instruction(self, command):
        program_id = str(command.program_id)
        metas = json.loads(command.accounts)
        signers = set(json.loads(command.signers)) if command.signers else set()
        data = bytes.fromhex(command.data) if command.data else b""

        add_context(program_id=program_id, accounts=[meta["address"] for meta in metas])
        try:
            return self._execute(program_id, metas, signers, data)
        finally:
            clear_context()

    def _execute(self, program_id, metas, signers, data):
        repo = current_domain.repository_for(Account)
        aggregates = {}
        snapshots = {}
        accounts = []
        for meta in metas:
            address = meta["address"]
            address_bytes(address)

            is_signer = bool(meta.get("is_signer"))
            if is_signer and address not in signers:
                logger.warning("Missing required signature", address=address)
                raise MissingRequiredSignature(f"Account {address} must sign this request")

            if address not in snapshots:
                aggregates[address] = _load(repo, address)
                snapshots[address] = aggregates[address].snapshot()
            snapshot = snapshots[address]
            snapshot.is_signer = snapshot.is_signer or is_signer
            snapshot.is_writable = snapshot.is_writable or bool(meta.get("is_writable"))
            accounts.append(snapshot)

        changed = invoke(program_id, accounts, data)

        for snapshot in changed:
            account = aggregates[snapshot.key]
            account.apply(snapshot)
            repo.add(account)

        logger.info("Instruction executed", changed=[snapshot.key for snapshot in changed])
        return [snapshot.key for snapshot in changed]


def _load(repo, address):
    try:
        return repo.get(address)
    except ObjectNotFoundError:
        return Account.blank(address)
