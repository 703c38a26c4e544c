"""Ledger bounded context: the host chain that review programs run on.

Stores addressable accounts (owner program, lamport balance, raw data),
authenticates signers and executes program instructions atomically against
account snapshots. Only changed snapshots are written back, and only when the
program returns without raising.
"""

from protean.domain import Domain

from ledger.utils.logging import configure_logging

configure_logging()

ledger = Domain(name="ledger")
