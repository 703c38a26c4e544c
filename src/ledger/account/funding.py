"""FundAccount: credit lamports to an address (development faucet)."""

from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from ledger.account.account import Account
from ledger.domain import ledger
from ledger.keys import address_bytes


@ledger.command(part_of="Account")
class FundAccount:
    address = Identifier(required=True)
    lamports = Integer(required=True, min_value=1)


@ledger.command_handler(part_of=Account)
class FundAccountHandler:
    @handle(FundAccount)
    def fund_account(self, command):
        address = str(command.address)
        address_bytes(address)

        repo = current_domain.repository_for(Account)
        try:
            account = repo.get(address)
        except ObjectNotFoundError:
            account = Account.blank(address)

        account.credit(command.lamports)
        repo.add(account)
        return account.lamports
