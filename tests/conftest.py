# tests/conftest.py

"""Shared pytest fixtures for the Tiliches test suite."""

from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest


@pytest.fixture(autouse=True)
def block_network() -> Generator[MagicMock, None, None]:
    """Replace curl_cffi sessions so no test can reach the network."""
    with patch("curl_cffi.requests.Session") as mock_session_cls:
        yield mock_session_cls
