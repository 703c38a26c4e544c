"""Errors returned by the review program.

Each error carries a stable numeric ``code`` so that callers outside Python
can tell failures apart; ``kind`` is the name surfaced to HTTP clients.
"""


class ReviewProgramError(Exception):
    code = 0

    def __init__(self, message: str | None = None):
        super().__init__(message or self.__doc__)

    @property
    def kind(self) -> str:
        return type(self).__name__


class InvalidInstruction(ReviewProgramError):
    """Instruction data is not a well-formed review instruction."""

    code = 1


class MalformedAccountList(ReviewProgramError):
    """Instruction does not reference the accounts the program expects."""

    code = 2


class MissingSignature(ReviewProgramError):
    """Submitter did not sign the request."""

    code = 3


class AddressMismatch(ReviewProgramError):
    """Record account is not the address derived from submitter and title."""

    code = 4


class IllegalOwner(ReviewProgramError):
    """Record account holds data but is not owned by this program."""

    code = 5


class AlreadyInitialized(ReviewProgramError):
    """A review already exists at this address."""

    code = 6


class NotInitialized(ReviewProgramError):
    """No review has been created at this address."""

    code = 7


class RatingOutOfRange(ReviewProgramError):
    """Rating must be between 1 and 10."""

    code = 8


class FieldTooLong(ReviewProgramError):
    """Title or description exceeds its maximum encoded length."""

    code = 9


class DecodeError(ReviewProgramError):
    """Stored account bytes are not a valid review record."""

    code = 10
