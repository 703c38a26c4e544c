"""Review addresses.

A review lives at the program address derived from the submitter's identity
and the restaurant title. The address itself is the ownership proof: only the
submitter who created a review can name it again, and a second review of the
same restaurant by the same submitter lands on the same address.
"""

from ledger.keys import address_bytes, program_address


def review_seeds(submitter: str, title: str) -> list[bytes]:
    return [address_bytes(submitter), title.encode("utf-8")]


def derive_review_address(submitter: str, title: str, program_id: str) -> str:
    return program_address(review_seeds(submitter, title), program_id)


def check_review_address(expected: str, submitter: str, title: str, program_id: str) -> bool:
    """Whether ``expected`` is the review address of (submitter, title)."""
    return derive_review_address(submitter, title, program_id) == expected
