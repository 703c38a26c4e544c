"""Types exchanged between the ledger runtime, its clients and hosted programs."""

from dataclasses import dataclass, field, replace

from ledger.keys import SYSTEM_PROGRAM_ID


@dataclass
class AccountInfo:
    """Mutable snapshot of an account handed to a program for one instruction.

    Programs change ``owner``, ``lamports`` and ``data`` in place; the runtime
    decides afterwards whether the changes are legal and persists them.
    """

    key: str
    owner: str = SYSTEM_PROGRAM_ID
    lamports: int = 0
    data: bytearray = field(default_factory=bytearray)
    is_signer: bool = False
    is_writable: bool = False

    @property
    def is_empty(self) -> bool:
        return len(self.data) == 0

    def clone(self) -> "AccountInfo":
        return replace(self, data=bytearray(self.data))

    def state(self) -> tuple[str, int, bytes]:
        return self.owner, self.lamports, bytes(self.data)


@dataclass(frozen=True)
class AccountMeta:
    """One positional account reference of an instruction."""

    address: str
    is_signer: bool = False
    is_writable: bool = False


@dataclass(frozen=True)
class Instruction:
    """A request for ``program_id`` to act on ``accounts`` with opaque ``data``."""

    program_id: str
    accounts: tuple[AccountMeta, ...]
    data: bytes = b""
