"""Failures raised by the ledger runtime and the system program."""


class LedgerError(Exception):
    """Base class for every ledger-level rejection."""


class InvalidAddress(LedgerError):
    """Value is not a canonical 32-byte hex address."""


class InvalidSeeds(LedgerError):
    """Seeds cannot be used to derive a program address."""


class UnknownProgram(LedgerError):
    """No program is registered under the requested identity."""


class MissingRequiredSignature(LedgerError):
    """An account that must sign the request did not."""


class InsufficientFunds(LedgerError):
    """Payer cannot cover the lamports an operation requires."""


class AccountAlreadyInUse(LedgerError):
    """Allocation target already holds data or belongs to a program."""


class IncorrectProgramId(LedgerError):
    """An account passed as a program does not carry that program's identity."""


class ReadonlyAccountModified(LedgerError):
    """A program changed an account the request marked read-only."""


class ExternalAccountDataModified(LedgerError):
    """A program changed data of an account it does not own."""


class ExternalLamportSpend(LedgerError):
    """A program debited an account it neither owns nor was signed for."""


class UnbalancedInstruction(LedgerError):
    """Total lamports across the instruction's accounts changed."""
