from unittest.mock import AsyncMock

import pytest

from botlistspace import Client, HTTPClient


@pytest.fixture
def http():
    transport = HTTPClient(token="bot-token")
    transport.request = AsyncMock(return_value=None)
    return transport


@pytest.fixture
def client(http):
    return Client("123", "bot-token", user_token="user-token", http=http)
