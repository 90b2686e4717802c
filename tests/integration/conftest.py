"""Integration test fixtures — live DevRev knowledge base.

Runs only when a token is available::

    DEVREV_TEST_TOKEN=... DEVREV_TEST_HELP_BASE=https://help.acme.io pytest -m integration
"""

from __future__ import annotations

import os

import pytest

from communitysearch.adapters.devrev.adapter import DevRevAdapter


@pytest.fixture
def devrev_token() -> str:
    token = os.environ.get("DEVREV_TEST_TOKEN", "")
    if not token:
        pytest.skip("DEVREV_TEST_TOKEN not set")
    return token


@pytest.fixture
def help_base() -> str:
    return os.environ.get("DEVREV_TEST_HELP_BASE", "https://help.example.com").rstrip("/")


@pytest.fixture
async def adapter(devrev_token: str):
    a = DevRevAdapter(token=devrev_token)
    await a.initialize()
    yield a
    await a.shutdown()
