"""Shared test fixtures."""

from __future__ import annotations

import pytest

from stripe_query import reset_default_options

SEARCH_URL = "https://api.stripe.com/v1/products/search"


@pytest.fixture(autouse=True)
def _clean_default_options():
    """Each test starts and ends with an empty process-wide default list."""
    reset_default_options()
    yield
    reset_default_options()


@pytest.fixture
def search_url() -> str:
    return SEARCH_URL
