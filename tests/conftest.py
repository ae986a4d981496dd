import json
from typing import Generator
from unittest.mock import patch

import pytest
import requests

from login_probe.config import LOGIN_URL


@pytest.fixture
def make_response():
    """Build real requests.Response objects as the login endpoint would return them."""
    def _make(status_code: int, body=None, raw: bytes = b"", reason: str = "OK") -> requests.Response:
        response = requests.Response()
        response.status_code = status_code
        response.reason = reason
        response.url = LOGIN_URL
        response.encoding = "utf-8"
        if body is not None:
            raw = json.dumps(body, separators=(",", ":")).encode("utf-8")
        response._content = raw
        return response
    return _make


@pytest.fixture
def mock_post() -> Generator:
    """Stub out the outbound login call."""
    with patch("login_probe.probe.requests.post") as post:
        yield post
