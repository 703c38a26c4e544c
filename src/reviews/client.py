"""Instruction builders for review clients.

Mirror of what a wallet-side client does before signing: derive the review
address and lay out the three positional accounts the program expects.
"""

from ledger.interface import AccountMeta, Instruction
from ledger.keys import SYSTEM_PROGRAM_ID
from reviews.program.address import derive_review_address
from reviews.program.instruction import CreateReview, ReviewCommand, UpdateReview, encode_instruction


def create_review_instruction(program_id: str, submitter: str, title: str, rating: int, description: str) -> Instruction:
    return review_instruction(program_id, submitter, CreateReview(title=title, rating=rating, description=description))


def update_review_instruction(program_id: str, submitter: str, title: str, rating: int, description: str) -> Instruction:
    return review_instruction(program_id, submitter, UpdateReview(title=title, rating=rating, description=description))


def review_instruction(program_id: str, submitter: str, command: ReviewCommand, record_address: str | None = None) -> Instruction:
    """Build the instruction for ``command``.

    ``record_address`` defaults to the derived review address; passing any
    other address produces an instruction the program will reject.
    """
    if record_address is None:
        record_address = derive_review_address(submitter, command.title, program_id)
    return Instruction(
        program_id=program_id,
        accounts=(
            AccountMeta(submitter, is_signer=True, is_writable=True),
            AccountMeta(record_address, is_writable=True),
            AccountMeta(SYSTEM_PROGRAM_ID),
        ),
        data=encode_instruction(command),
    )
