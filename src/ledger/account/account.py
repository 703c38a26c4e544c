"""Account aggregate: one addressable slot on the ledger.

An account has an owner program, a lamport balance and a raw data buffer.
Addresses that were never written behave as empty, zero-balance accounts owned
by the system program; they are only persisted once something changes them.
"""

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Identifier, Integer, Text

from ledger.domain import ledger
from ledger.interface import AccountInfo
from ledger.keys import SYSTEM_PROGRAM_ID


@ledger.aggregate
class Account:
    """An addressable account: owner, balance and raw data."""

    address = Identifier(identifier=True, required=True)
    owner = Identifier(required=True)
    lamports = Integer(default=0)
    content = Text()  # hex-encoded account data

    @invariant.post
    def lamports_cannot_be_negative(self):
        if self.lamports is not None and self.lamports < 0:
            raise ValidationError({"lamports": ["Account balance cannot be negative"]})

    @classmethod
    def blank(cls, address):
        """The state of an address nothing has written to yet."""
        return cls(address=address, owner=SYSTEM_PROGRAM_ID, lamports=0, content="")

    @property
    def raw_data(self) -> bytes:
        return bytes.fromhex(self.content or "")

    def snapshot(self, is_signer=False, is_writable=False) -> AccountInfo:
        return AccountInfo(
            key=str(self.address),
            owner=str(self.owner),
            lamports=self.lamports or 0,
            data=bytearray(self.raw_data),
            is_signer=is_signer,
            is_writable=is_writable,
        )

    def apply(self, snapshot: AccountInfo) -> None:
        """Take over the owner, balance and data of a snapshot the runtime accepted."""
        with atomic_change(self):
            self.owner = snapshot.owner
            self.lamports = snapshot.lamports
            self.content = bytes(snapshot.data).hex()

    def credit(self, lamports: int) -> None:
        if lamports <= 0:
            raise ValidationError({"lamports": ["Credit must be positive"]})
        self.lamports = (self.lamports or 0) + lamports
