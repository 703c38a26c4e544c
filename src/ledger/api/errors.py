"""Translate ledger errors into HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ledger.errors import AccountAlreadyInUse, InsufficientFunds, LedgerError, MissingRequiredSignature

_STATUS_CODES = {
    InsufficientFunds: 402,
    MissingRequiredSignature: 403,
    AccountAlreadyInUse: 409,
}


async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
    return JSONResponse(
        status_code=_STATUS_CODES.get(type(exc), 400),
        content={"error": type(exc).__name__, "code": 0, "detail": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LedgerError, ledger_error_handler)
