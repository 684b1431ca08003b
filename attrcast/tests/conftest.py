import pytest

from attrcast.config import config


@pytest.fixture(autouse=True)
def restore_config():
    """ Drop the options set at runtime by a test. """
    yield
    config.reset()
