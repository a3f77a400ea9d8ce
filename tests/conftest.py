"""
Shared test fixtures for the Kuji test suite.

Provides fixtures for:
- Fixed seeds
- Common generators
- Settings cache isolation
"""

import pytest

from kuji.core.config import get_settings
from kuji.gen import Generator, Seed, draw_bool, integer, make_seed


# =============================================================================
# Settings
# =============================================================================

@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop cached settings so monkeypatched env vars are seen."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Seeds
# =============================================================================

@pytest.fixture
def seed() -> Seed:
    """The seed most tests start from."""
    return make_seed(1)


@pytest.fixture
def seeds() -> list[Seed]:
    """Fifty successive seeds along one stream."""
    current = make_seed(2024)
    spread = []
    for _ in range(50):
        spread.append(current)
        _, current = draw_bool(current)
    return spread


# =============================================================================
# Generators
# =============================================================================

@pytest.fixture
def die() -> Generator[int]:
    """A six-sided die."""
    return integer(1, 6)
