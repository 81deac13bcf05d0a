"""
Test bootstrap:
- Make ``tests/helpers`` importable as ``helpers``
- Shared fixtures for base URLs, keys and assets
"""
import sys
import pathlib

import pytest

TESTS_DIR = pathlib.Path(__file__).parent
if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

from helpers import (  # noqa: E402
    BASE_URL,
    ACCOUNT_ID,
    OTHER_ACCOUNT_ID,
    mk_alphanum4,
    mk_alphanum12,
)


@pytest.fixture
def base_url():
    """Horizon test network URL."""
    return BASE_URL


@pytest.fixture
def account_id():
    """A well-formed account address."""
    return ACCOUNT_ID


@pytest.fixture
def other_account_id():
    """A second well-formed account address."""
    return OTHER_ACCOUNT_ID


@pytest.fixture
def usd():
    """An alphanumeric-4 asset issued by ``ACCOUNT_ID``."""
    return mk_alphanum4("USD")


@pytest.fixture
def long_asset():
    """An alphanumeric-12 asset issued by ``ACCOUNT_ID``."""
    return mk_alphanum12("LONGASSET")
