"""Restaurant review program.

Provides get_program_id() / install() to register the program with the
ledger runtime. The program identity defaults to a fixed built-in address
and can be overridden with the REVIEW_PROGRAM_ID environment variable.
"""

import hashlib
import os

from ledger.keys import address_bytes
from ledger.runtime import register_program
from reviews.program.processor import process_instruction

DEFAULT_PROGRAM_ID = hashlib.sha256(b"restaurant-review-program").hexdigest()


def get_program_id() -> str:
    """Return the configured program identity."""
    program_id = os.environ.get("REVIEW_PROGRAM_ID", DEFAULT_PROGRAM_ID)
    address_bytes(program_id)
    return program_id


def install(program_id: str | None = None) -> str:
    """Register the review program with the ledger runtime and return its identity."""
    program_id = program_id or get_program_id()
    register_program(program_id, process_instruction)
    return program_id
