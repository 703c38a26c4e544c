"""Shared BDD fixtures and step definitions for review lifecycles."""

import pytest
from pytest_bdd import given, parsers, then
from reviews.client import create_review_instruction
from reviews.program.address import derive_review_address
from reviews.program.errors import ReviewProgramError
from reviews.program.record import decode_record


@pytest.fixture()
def error():
    """Container for captured program errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a funded reviewer", target_fixture="submitter")
def funded_reviewer(reviewer):
    return reviewer


@given(parsers.cfparse('the reviewer has reviewed "{title}" with rating {rating:d}'))
def existing_review(ledger_client, program_id, submitter, title, rating):
    instruction = create_review_instruction(program_id, submitter, title, rating, "Great broth")
    ledger_client.send(instruction, signers=[submitter])


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the review of "{title}" is rated {rating:d} saying "{description}"'))
def review_is(ledger_client, program_id, submitter, title, rating, description):
    account = ledger_client.get_account(derive_review_address(submitter, title, program_id))
    record = decode_record(account.data)
    assert record.is_initialized
    assert record.title == title
    assert record.rating == rating
    assert record.description == description


@then(parsers.cfparse('no review of "{title}" exists'))
def no_review(ledger_client, program_id, submitter, title):
    assert ledger_client.get_account(derive_review_address(submitter, title, program_id)) is None


@then(parsers.cfparse("the request fails with {kind}"))
def request_fails(error, kind):
    assert error["exc"] is not None, f"Expected {kind} but the request succeeded"
    assert isinstance(error["exc"], ReviewProgramError)
    assert error["exc"].kind == kind
