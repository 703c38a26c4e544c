"""Tests for addresses and program-derived addresses."""

import pytest
from ledger.errors import InvalidAddress, InvalidSeeds
from ledger.keys import (
    ADDRESS_LENGTH,
    MAX_SEEDS,
    SYSTEM_PROGRAM_ID,
    address_bytes,
    is_address,
    new_address,
    program_address,
)

PROGRAM_ID = "ab" * ADDRESS_LENGTH
OTHER_PROGRAM_ID = "cd" * ADDRESS_LENGTH


class TestAddresses:
    def test_new_address_is_canonical(self):
        address = new_address()
        assert len(address) == ADDRESS_LENGTH * 2
        assert address_bytes(address) == bytes.fromhex(address)

    def test_new_addresses_are_distinct(self):
        assert new_address() != new_address()

    def test_system_program_id_is_all_zeros(self):
        assert address_bytes(SYSTEM_PROGRAM_ID) == bytes(ADDRESS_LENGTH)

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "abc",
            "zz" * ADDRESS_LENGTH,
            "AB" * ADDRESS_LENGTH,
            "ab" * (ADDRESS_LENGTH - 1),
            "ab" * (ADDRESS_LENGTH + 1),
            " " + "ab" * ADDRESS_LENGTH,
        ],
    )
    def test_non_canonical_address_rejected(self, value):
        with pytest.raises(InvalidAddress):
            address_bytes(value)
        assert not is_address(value)

    def test_bytes_are_not_an_address(self):
        with pytest.raises(InvalidAddress):
            address_bytes(bytes(ADDRESS_LENGTH))


class TestProgramAddress:
    def test_deterministic(self):
        seeds = [b"alice", b"Pho House"]
        assert program_address(seeds, PROGRAM_ID) == program_address(seeds, PROGRAM_ID)

    def test_result_is_an_address(self):
        assert is_address(program_address([b"seed"], PROGRAM_ID))

    def test_different_seeds_differ(self):
        assert program_address([b"a"], PROGRAM_ID) != program_address([b"b"], PROGRAM_ID)

    def test_different_programs_differ(self):
        assert program_address([b"a"], PROGRAM_ID) != program_address([b"a"], OTHER_PROGRAM_ID)

    def test_seed_boundaries_matter(self):
        assert program_address([b"ab", b"c"], PROGRAM_ID) != program_address([b"a", b"bc"], PROGRAM_ID)

    def test_no_seeds_allowed(self):
        assert is_address(program_address([], PROGRAM_ID))

    def test_too_many_seeds_rejected(self):
        with pytest.raises(InvalidSeeds):
            program_address([b"s"] * (MAX_SEEDS + 1), PROGRAM_ID)

    def test_text_seed_rejected(self):
        with pytest.raises(InvalidSeeds):
            program_address(["not bytes"], PROGRAM_ID)

    def test_invalid_program_id_rejected(self):
        with pytest.raises(InvalidAddress):
            program_address([b"seed"], "not-a-program")
