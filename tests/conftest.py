import pytest

import weburl.config


@pytest.fixture(autouse=True)
def setup_function():
    # Reset defaults that may be overridden by some tests.
    weburl.config.unittest_configure()
