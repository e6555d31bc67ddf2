import logging
from unittest.mock import Mock

import pytest

from fragment_router import Router


@pytest.fixture
def funct():
    """Mock function for testing purposes."""
    return Mock(__name__="Mock", return_value=None)


@pytest.fixture
def router():
    """Router with default logging configuration."""
    router = Router(name="test_router")
    yield router

    # Clear logger handlers
    for h in list(router.log.handlers):
        router.log.removeHandler(h)
    router.log.propagate = True
    router.log.setLevel(logging.NOTSET)
