"""Account addresses and program-derived addresses.

Addresses are 32 bytes, written as 64 lowercase hex characters. A program
derived address is a hash of caller-chosen seeds and the owning program's
identity; no private key exists for it, so only the owning program can claim
it by presenting the same seeds.
"""

import hashlib
import secrets
import struct
from collections.abc import Sequence

from ledger.errors import InvalidAddress, InvalidSeeds

ADDRESS_LENGTH = 32
MAX_SEEDS = 16
PDA_MARKER = b"ProgramDerivedAddress"

SYSTEM_PROGRAM_ID = "00" * ADDRESS_LENGTH

_SEED_LENGTH = struct.Struct("<I")


def new_address() -> str:
    """Return a fresh random address."""
    return secrets.token_hex(ADDRESS_LENGTH)


def address_bytes(address: str) -> bytes:
    """Return the raw bytes of ``address``, rejecting non-canonical forms."""
    if not isinstance(address, str):
        raise InvalidAddress(f"Address must be a hex string, got {type(address).__name__}")
    try:
        raw = bytes.fromhex(address)
    except ValueError as exc:
        raise InvalidAddress(f"Address is not hex: {address!r}") from exc
    if len(raw) != ADDRESS_LENGTH or raw.hex() != address:
        raise InvalidAddress(f"Address must be {ADDRESS_LENGTH * 2} lowercase hex characters: {address!r}")
    return raw


def is_address(value) -> bool:
    try:
        address_bytes(value)
    except InvalidAddress:
        return False
    return True


def program_address(seeds: Sequence[bytes], program_id: str) -> str:
    """Derive the address owned by ``program_id`` for ``seeds``.

    Seeds are length-prefixed so that seed boundaries are part of the hash input.
    """
    if len(seeds) > MAX_SEEDS:
        raise InvalidSeeds(f"At most {MAX_SEEDS} seeds are allowed, got {len(seeds)}")

    hasher = hashlib.sha256()
    for seed in seeds:
        if not isinstance(seed, (bytes, bytearray)):
            raise InvalidSeeds(f"Seeds must be bytes, got {type(seed).__name__}")
        hasher.update(_SEED_LENGTH.pack(len(seed)))
        hasher.update(seed)
    hasher.update(address_bytes(program_id))
    hasher.update(PDA_MARKER)
    return hasher.hexdigest()
