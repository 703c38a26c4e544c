"""Pydantic request/response schemas for the Reviews API.

The rating is only checked to fit one byte here: the 1-10 bound belongs to the
program, which reports RatingOutOfRange itself.
"""

from pydantic import BaseModel, Field

ADDRESS_PATTERN = r"^[0-9a-f]{64}$"


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class ReviewRequest(BaseModel):
    submitter: str = Field(pattern=ADDRESS_PATTERN)
    title: str
    rating: int = Field(ge=0, le=255)
    description: str


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class ReviewAddressResponse(BaseModel):
    address: str


class ReviewResponse(BaseModel):
    address: str
    title: str
    rating: int
    description: str


class ErrorResponse(BaseModel):
    error: str
    code: int
    detail: str
