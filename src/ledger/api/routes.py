"""FastAPI routes for the Ledger API: account inspection and the dev faucet."""

from fastapi import APIRouter, HTTPException

from ledger.api.schemas import AccountResponse, AirdropRequest
from ledger.client import LedgerClient
from ledger.interface import AccountInfo
from ledger.keys import is_address

account_router = APIRouter(prefix="/accounts", tags=["accounts"])


def _account_response(account: AccountInfo) -> AccountResponse:
    return AccountResponse(
        address=account.key,
        owner=account.owner,
        lamports=account.lamports,
        data=bytes(account.data).hex(),
    )


@account_router.get("/{address}", response_model=AccountResponse)
async def get_account(address: str) -> AccountResponse:
    if not is_address(address):
        raise HTTPException(status_code=400, detail="Invalid address")
    account = LedgerClient().get_account(address)
    if account is None:
        raise HTTPException(status_code=404, detail="Account not found")
    return _account_response(account)


@account_router.post("/{address}/airdrop", response_model=AccountResponse)
async def airdrop(address: str, body: AirdropRequest) -> AccountResponse:
    """Credit lamports to an address."""
    client = LedgerClient()
    client.airdrop(address, body.lamports)
    return _account_response(client.get_account(address))
