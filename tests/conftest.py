"""Shared test doubles for the settings copier.

FakeTransport stands in for RiotTransport so the handshake and the
preferences calls can be driven from scripted responses without a
network.
"""

import json
from typing import Any, Dict, List, Optional

import pytest
import requests
from requests.cookies import cookiejar_from_dict

from config import CopierConfig

REDIRECT_URI = (
    "https://playvalorant.com/opt_in#access_token=AAA111&scope=account%20openid"
    "&iss=https%3A%2F%2Fauth.riotgames.com&id_token=BBB222&token_type=Bearer"
    "&session_state=xyz&expires_in=3600"
)


def make_response(payload: Any = None, status: int = 200, cookies: Optional[Dict[str, str]] = None,
                  body: Optional[bytes] = None) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response._content = body if body is not None else json.dumps(payload).encode("utf-8")
    response.encoding = "utf-8"
    response.cookies = cookiejar_from_dict(cookies or {})
    return response


class FakeTransport:
    """Records every request and answers from a scripted queue"""

    def __init__(self, responses: List[Any]):
        self.responses = list(responses)
        self.calls: List[tuple] = []
        self.headers: Dict[str, str] = {}
        self.closed = False

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append((method, url, kwargs))
        if not self.responses:
            raise AssertionError(f"unexpected request {method} {url}")
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        if callable(item):
            return item(method, url, **kwargs)
        return item

    def set_header(self, name: str, value: str):
        self.headers[name] = value

    def close(self):
        self.closed = True


def handshake_responses(access_uri: str = REDIRECT_URI, entitlements_token: str = "ENT-TOKEN") -> List[requests.Response]:
    return [
        make_response({"type": "auth"}, cookies={"asid": "cookie-1", "clid": "ue1"}),
        make_response({"type": "response", "response": {"mode": "fragment", "parameters": {"uri": access_uri}}}),
        make_response({"entitlements_token": entitlements_token}),
    ]


@pytest.fixture
def quiet_config() -> CopierConfig:
    return CopierConfig(quiet=True)

