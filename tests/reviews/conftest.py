import pytest
from ledger.keys import new_address
from ledger.runtime import reset_programs
from ledger.system import minimum_balance
from reviews.program import install
from reviews.program.record import RECORD_SIZE


@pytest.fixture(autouse=True)
def program_id():
    """Register the review program with the ledger runtime for each test."""
    program_id = install()
    yield program_id
    reset_programs()


@pytest.fixture()
def reviewer_funding():
    # Rent for five review records
    return 5 * minimum_balance(RECORD_SIZE)


@pytest.fixture()
def reviewer(ledger_client, reviewer_funding):
    address = new_address()
    ledger_client.airdrop(address, reviewer_funding)
    return address
