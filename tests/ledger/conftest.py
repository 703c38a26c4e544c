import pytest
from ledger.runtime import reset_programs


@pytest.fixture(autouse=True)
def _program_registry():
    """Programs registered by a ledger test never leak into the next one."""
    yield
    reset_programs()
