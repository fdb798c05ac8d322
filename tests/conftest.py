import pytest

from propdoc.core.config import config


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts from the default configuration."""
    config.reset()
    yield
    config.reset()
