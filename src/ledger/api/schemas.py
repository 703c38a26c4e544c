"""Pydantic request/response schemas for the Ledger API."""

from pydantic import BaseModel, Field


class AirdropRequest(BaseModel):
    lamports: int = Field(gt=0)


class AccountResponse(BaseModel):
    address: str
    owner: str
    lamports: int
    data: str  # hex
