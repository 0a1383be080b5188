import pytest

from frontdesk.services.tables import reset_all


@pytest.fixture(autouse=True)
def fresh_tables():
    """Every test starts from the seeded startup state."""
    reset_all(seed=True)
    yield
    reset_all(seed=True)
