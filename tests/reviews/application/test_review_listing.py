from ledger.account.account import Account
from ledger.keys import new_address
from ledger.system import minimum_balance
from protean.utils.globals import current_domain
from reviews.client import create_review_instruction, update_review_instruction
from reviews.listing import fetch_reviews
from reviews.program.address import derive_review_address
from reviews.program.record import RECORD_SIZE, ReviewRecord, encode_record


def _create(ledger_client, program_id, reviewer, title, rating, description="Tasty"):
    ledger_client.send(create_review_instruction(program_id, reviewer, title, rating, description), signers=[reviewer])


def test_no_reviews(program_id):
    assert fetch_reviews(program_id) == []


def test_lists_every_created_review(ledger_client, program_id, reviewer):
    _create(ledger_client, program_id, reviewer, "Pho House", 8)
    _create(ledger_client, program_id, reviewer, "Taco Stand", 6)

    entries = {entry.title: entry for entry in fetch_reviews(program_id)}

    assert set(entries) == {"Pho House", "Taco Stand"}
    assert entries["Pho House"].rating == 8
    assert entries["Pho House"].address == derive_review_address(reviewer, "Pho House", program_id)


def test_listing_reflects_updates(ledger_client, program_id, reviewer):
    _create(ledger_client, program_id, reviewer, "Pho House", 8)
    ledger_client.send(
        update_review_instruction(program_id, reviewer, "Pho House", 4, "Went downhill"),
        signers=[reviewer],
    )

    [entry] = fetch_reviews(program_id)
    assert (entry.rating, entry.description) == (4, "Went downhill")


def test_defaults_to_installed_program(ledger_client, program_id, reviewer):
    _create(ledger_client, program_id, reviewer, "Pho House", 8)
    assert [entry.title for entry in fetch_reviews()] == ["Pho House"]


def test_other_programs_accounts_are_ignored(ledger_client, program_id, reviewer):
    _create(ledger_client, program_id, reviewer, "Pho House", 8)

    assert fetch_reviews(new_address()) == []


def test_lists_reviews_beyond_one_page(program_id):
    repo = current_domain.repository_for(Account)
    for number in range(1005):
        record = ReviewRecord(is_initialized=True, rating=number % 10 + 1, title=f"Diner {number}", description="")
        repo.add(
            Account(
                address=new_address(),
                owner=program_id,
                lamports=minimum_balance(RECORD_SIZE),
                content=encode_record(record).hex(),
            )
        )

    entries = fetch_reviews(program_id)

    assert len(entries) == 1005
    assert len({entry.address for entry in entries}) == 1005
