"""
Typed response schemas for the Riot auth endpoints

Each schema validates the decoded JSON and raises MalformedResponse
rather than letting a KeyError or TypeError escape.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from errors import MalformedResponse


def decode_json(response: requests.Response, endpoint: str) -> Dict[str, Any]:
    """Decode a response body that must be a JSON object"""
    try:
        data = response.json()
    except ValueError:
        raise MalformedResponse(endpoint, f"body is not JSON (HTTP {response.status_code})")
    if not isinstance(data, dict):
        raise MalformedResponse(endpoint, f"expected a JSON object, got {type(data).__name__}")
    return data


def require(data: Dict[str, Any], key: str, kind: type, endpoint: str, path: str = "") -> Any:
    """Fetch data[key] and check its type"""
    where = f"{path}.{key}" if path else key
    if key not in data:
        raise MalformedResponse(endpoint, f"missing field '{where}'")
    value = data[key]
    if not isinstance(value, kind):
        raise MalformedResponse(endpoint, f"field '{where}' is {type(value).__name__}, expected {kind.__name__}")
    return value


@dataclass(frozen=True)
class CredentialsResponse:
    """Answer to the credential PUT: either an error code or a redirect URI"""

    error: Optional[str] = None
    uri: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any], endpoint: str) -> "CredentialsResponse":
        if "error" in data:
            return cls(error=str(data["error"]))

        response = require(data, "response", dict, endpoint)
        parameters = require(response, "parameters", dict, endpoint, "response")
        uri = require(parameters, "uri", str, endpoint, "response.parameters")
        return cls(uri=uri)


@dataclass(frozen=True)
class EntitlementsResponse:
    entitlements_token: str

    @classmethod
    def from_json(cls, data: Dict[str, Any], endpoint: str) -> "EntitlementsResponse":
        return cls(entitlements_token=require(data, "entitlements_token", str, endpoint))
