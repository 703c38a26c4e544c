"""Review program processor.

Accounts are positional:

    0. submitter, which must have signed the request
    1. review record at the address derived from (submitter, title)
    2. system program, used to allocate the record on creation

Every check runs before the record account is touched, so a rejected
instruction never leaves a partial write behind.
"""

from dataclasses import replace

import structlog

from ledger.interface import AccountInfo
from ledger.system import create_account
from reviews.program.address import check_review_address, review_seeds
from reviews.program.errors import (
    AddressMismatch,
    AlreadyInitialized,
    IllegalOwner,
    InvalidInstruction,
    MalformedAccountList,
    MissingSignature,
    NotInitialized,
    RatingOutOfRange,
)
from reviews.program.instruction import (
    CreateReview,
    ReviewCommand,
    UpdateReview,
    decode_instruction,
)
from reviews.program.record import (
    MAX_DESCRIPTION_LENGTH,
    MAX_RATING,
    MAX_TITLE_LENGTH,
    MIN_RATING,
    RECORD_SIZE,
    ReviewRecord,
    decode_record,
    encode_record,
    encode_text,
)

logger = structlog.get_logger(__name__)

REQUIRED_ACCOUNTS = 3


def process_instruction(program_id: str, accounts: list[AccountInfo], instruction_data: bytes) -> None:
    """Ledger entrypoint: decode ``instruction_data`` and apply it."""
    command = decode_instruction(instruction_data)
    process(command, accounts, program_id)


def process(command: ReviewCommand, accounts: list[AccountInfo], program_id: str) -> None:
    if isinstance(command, CreateReview):
        create_review(program_id, accounts, command)
    elif isinstance(command, UpdateReview):
        update_review(program_id, accounts, command)
    else:
        raise InvalidInstruction(f"Unsupported command {type(command).__name__}")


def create_review(program_id: str, accounts: list[AccountInfo], command: CreateReview) -> None:
    logger.info(
        "Adding review",
        title=command.title,
        rating=command.rating,
        description=command.description,
    )
    submitter, record_account, system_account = _unpack_accounts(accounts)
    _verify_address(program_id, submitter, record_account, command.title)

    current = _load_record(program_id, record_account)
    if current.is_initialized:
        logger.warning("Review already exists", address=record_account.key)
        raise AlreadyInitialized(f"A review already exists at {record_account.key}")

    _validate(command)

    encoded = encode_record(
        ReviewRecord(
            is_initialized=True,
            rating=command.rating,
            title=command.title,
            description=command.description,
        )
    )
    if record_account.is_empty:
        create_account(
            system_account,
            payer=submitter,
            new_account=record_account,
            space=RECORD_SIZE,
            owner=program_id,
            seeds=review_seeds(submitter.key, command.title),
        )
    record_account.data[:] = encoded

    logger.info("Review created", address=record_account.key)


def update_review(program_id: str, accounts: list[AccountInfo], command: UpdateReview) -> None:
    logger.info("Updating review", title=command.title)
    submitter, record_account, _ = _unpack_accounts(accounts)
    _verify_address(program_id, submitter, record_account, command.title)

    current = _load_record(program_id, record_account)
    if not current.is_initialized:
        logger.warning("Review account is not initialized", address=record_account.key)
        raise NotInitialized(f"No review exists at {record_account.key}")

    _validate(command)

    logger.debug("Review before update", rating=current.rating, description=current.description)
    updated = replace(current, rating=command.rating, description=command.description)
    record_account.data[:] = encode_record(updated)
    logger.info("Review updated", address=record_account.key, rating=updated.rating)


def _unpack_accounts(accounts: list[AccountInfo]) -> tuple[AccountInfo, AccountInfo, AccountInfo]:
    if len(accounts) < REQUIRED_ACCOUNTS:
        raise MalformedAccountList(f"Expected {REQUIRED_ACCOUNTS} accounts, got {len(accounts)}")
    submitter, record_account, system_account = accounts[:REQUIRED_ACCOUNTS]
    if not submitter.is_signer:
        logger.warning("Missing required signature", submitter=submitter.key)
        raise MissingSignature(f"Submitter {submitter.key} did not sign")
    return submitter, record_account, system_account


def _verify_address(program_id: str, submitter: AccountInfo, record_account: AccountInfo, title: str) -> None:
    if not check_review_address(record_account.key, submitter.key, title, program_id):
        logger.warning("Invalid seeds for review address", supplied=record_account.key)
        raise AddressMismatch(f"{record_account.key} is not the review address of {submitter.key} for {title!r}")


def _load_record(program_id: str, record_account: AccountInfo) -> ReviewRecord:
    if record_account.is_empty:
        return ReviewRecord()
    if record_account.owner != program_id:
        raise IllegalOwner(f"Account {record_account.key} is owned by {record_account.owner}")
    return decode_record(record_account.data)


def _validate(command: ReviewCommand) -> None:
    if not MIN_RATING <= command.rating <= MAX_RATING:
        raise RatingOutOfRange(f"Rating {command.rating} is outside {MIN_RATING}-{MAX_RATING}")
    encode_text(command.title, MAX_TITLE_LENGTH, "title")
    encode_text(command.description, MAX_DESCRIPTION_LENGTH, "description")
