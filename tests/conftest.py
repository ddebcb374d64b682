import pytest

from webapp.core.config import get_settings


@pytest.fixture
def fresh_settings():
    """Drop cached settings before and after a test that changes the environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
