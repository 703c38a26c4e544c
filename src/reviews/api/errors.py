"""Translate review program errors into HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from reviews.program.errors import (
    AddressMismatch,
    AlreadyInitialized,
    IllegalOwner,
    MissingSignature,
    NotInitialized,
    ReviewProgramError,
)

_STATUS_CODES = {
    AddressMismatch: 403,
    MissingSignature: 403,
    IllegalOwner: 403,
    NotInitialized: 404,
    AlreadyInitialized: 409,
}


async def review_program_error_handler(request: Request, exc: ReviewProgramError) -> JSONResponse:
    return JSONResponse(
        status_code=_STATUS_CODES.get(type(exc), 400),
        content={"error": exc.kind, "code": exc.code, "detail": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ReviewProgramError, review_program_error_handler)
