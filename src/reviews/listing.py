"""Read side: every review a program holds on the ledger.

Accounts that are uninitialized or do not decode as a review record are
skipped, never reported as errors.
"""

from collections.abc import Iterable
from dataclasses import dataclass

import structlog

from ledger.client import LedgerClient
from ledger.interface import AccountInfo
from reviews.program import get_program_id
from reviews.program.errors import DecodeError
from reviews.program.record import decode_record

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ReviewEntry:
    address: str
    title: str
    rating: int
    description: str


def collect_reviews(accounts: Iterable[AccountInfo]) -> list[ReviewEntry]:
    entries = []
    for account in accounts:
        try:
            record = decode_record(account.data)
        except DecodeError as exc:
            logger.debug("Skipping undecodable account", address=account.key, reason=str(exc))
            continue
        if not record.is_initialized:
            continue
        entries.append(
            ReviewEntry(
                address=account.key,
                title=record.title,
                rating=record.rating,
                description=record.description,
            )
        )
    return entries


def fetch_reviews(program_id: str | None = None, client: LedgerClient | None = None) -> list[ReviewEntry]:
    """Enumerate and decode the accounts owned by the review program."""
    client = client or LedgerClient()
    return collect_reviews(client.get_program_accounts(program_id or get_program_id()))
