"""FastAPI routes for the Reviews API.

Each route builds a review instruction and submits it to the ledger with the
submitter as the request's signer. Signature collection itself belongs to the
wallet layer in front of this service.
"""

from dataclasses import asdict

from fastapi import APIRouter

from ledger.client import LedgerClient
from reviews.api.schemas import ErrorResponse, ReviewAddressResponse, ReviewRequest, ReviewResponse
from reviews.client import create_review_instruction, update_review_instruction
from reviews.listing import fetch_reviews
from reviews.program import get_program_id

review_router = APIRouter(prefix="/reviews", tags=["reviews"])

_ERROR_RESPONSES = {status: {"model": ErrorResponse} for status in (400, 402, 403, 404, 409)}


@review_router.post("", status_code=201, response_model=ReviewAddressResponse, responses=_ERROR_RESPONSES)
async def create_review(body: ReviewRequest) -> ReviewAddressResponse:
    """Create the submitter's review of a restaurant."""
    instruction = create_review_instruction(
        get_program_id(),
        body.submitter,
        body.title,
        body.rating,
        body.description,
    )
    LedgerClient().send(instruction, signers=[body.submitter])
    return ReviewAddressResponse(address=instruction.accounts[1].address)


@review_router.put("", response_model=ReviewAddressResponse, responses=_ERROR_RESPONSES)
async def update_review(body: ReviewRequest) -> ReviewAddressResponse:
    """Replace rating and description of the submitter's existing review."""
    instruction = update_review_instruction(
        get_program_id(),
        body.submitter,
        body.title,
        body.rating,
        body.description,
    )
    LedgerClient().send(instruction, signers=[body.submitter])
    return ReviewAddressResponse(address=instruction.accounts[1].address)


@review_router.get("", response_model=list[ReviewResponse])
async def list_reviews() -> list[ReviewResponse]:
    """All reviews held by the review program."""
    return [ReviewResponse(**asdict(entry)) for entry in fetch_reviews()]
