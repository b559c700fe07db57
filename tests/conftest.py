import pytest
import structlog

from input_validation.config import get_settings


@pytest.fixture(autouse=True)
def reset_environment():
    get_settings.cache_clear()
    structlog.reset_defaults()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
