"""
Riot account session and login handshake

An AccountSession walks the handshake one state at a time:
authorize -> submit credentials -> pull the bearer token out of the
redirect URI -> trade it for an entitlement token. Each state object only
carries what is valid at that point, so a half-finished login can never
be mistaken for a usable session.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

import requests

from config import (
    AUTH_HOST,
    CLIENT_ID,
    ENTITLEMENTS_HOST,
    NONCE,
    REDIRECT_URI,
    RESPONSE_TYPE,
    CopierConfig,
)
from errors import AuthenticationFailed, SessionNotAuthenticated, SessionStateError
from transport import RiotTransport

from .models import CredentialsResponse, EntitlementsResponse, decode_json
from .token_parser import extract_tokens

AUTHORIZATION_URL = f"https://{AUTH_HOST}/api/v1/authorization"
ENTITLEMENTS_URL = f"https://{ENTITLEMENTS_HOST}/api/token/v1"


class Stage(Enum):
    UNAUTHENTICATED = "unauthenticated"
    AUTHORIZATION_REQUESTED = "authorization requested"
    CREDENTIALS_SUBMITTED = "credentials submitted"
    TOKEN_EXTRACTED = "token extracted"
    ENTITLEMENT_REQUESTED = "entitlement requested"
    AUTHENTICATED = "authenticated"


# ============================================================================
# Handshake states
# ============================================================================

@dataclass(frozen=True)
class Unauthenticated:
    stage = Stage.UNAUTHENTICATED


@dataclass(frozen=True)
class AuthorizationRequested:
    stage = Stage.AUTHORIZATION_REQUESTED
    cookies: Dict[str, str]


@dataclass(frozen=True)
class CredentialsSubmitted:
    stage = Stage.CREDENTIALS_SUBMITTED
    cookies: Dict[str, str]
    redirect_uri: str


@dataclass(frozen=True)
class TokenExtracted:
    stage = Stage.TOKEN_EXTRACTED
    cookies: Dict[str, str]
    access_token: str


@dataclass(frozen=True)
class EntitlementRequested:
    """Entitlement exchange sent; the session stays here if it fails"""
    stage = Stage.ENTITLEMENT_REQUESTED
    cookies: Dict[str, str]
    access_token: str


@dataclass(frozen=True)
class Authenticated:
    stage = Stage.AUTHENTICATED
    access_token: str
    entitlements_token: str


SessionState = Union[
    Unauthenticated,
    AuthorizationRequested,
    CredentialsSubmitted,
    TokenExtracted,
    EntitlementRequested,
    Authenticated,
]


class AccountSession:
    """Authenticated HTTP client for one Riot account"""

    def __init__(self, label: str = "account", config: Optional[CopierConfig] = None,
                 transport: Optional[RiotTransport] = None):
        self.label = label
        self.config = config or CopierConfig()
        self.transport = transport or RiotTransport(self.config)
        self.state: SessionState = Unauthenticated()

    def __enter__(self) -> "AccountSession":
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        self.transport.close()

    @property
    def stage(self) -> Stage:
        return self.state.stage

    @property
    def is_authenticated(self) -> bool:
        return isinstance(self.state, Authenticated)

    def log(self, message: str):
        if not self.config.quiet:
            print(f"[{self.label}] {message}")

    # ------------------------------------------------------------------
    # Handshake
    # ------------------------------------------------------------------

    def authenticate(self, username: str, password: str):
        """Run the full login handshake; raises on the first failing step"""
        if not isinstance(self.state, Unauthenticated):
            raise SessionStateError(f"cannot authenticate a session in state '{self.stage.value}'")

        self.log("Requesting authorization session...")
        self.state = self._request_authorization()

        self.log("Submitting credentials...")
        self.state = self._submit_credentials(self.state, username, password)

        self.state = self._extract_access_token(self.state)

        self.log("Requesting entitlement token...")
        self.state = EntitlementRequested(self.state.cookies, self.state.access_token)
        self.state = self._request_entitlement(self.state)
        self.log("Authenticated")

    def _request_authorization(self) -> AuthorizationRequested:
        response = self.transport.request("POST", AUTHORIZATION_URL, json={
            "client_id": CLIENT_ID,
            "nonce": NONCE,
            "redirect_uri": REDIRECT_URI,
            "response_type": RESPONSE_TYPE,
        })
        return AuthorizationRequested(cookies=requests.utils.dict_from_cookiejar(response.cookies))

    def _submit_credentials(self, state: AuthorizationRequested, username: str,
                            password: str) -> CredentialsSubmitted:
        response = self.transport.request("PUT", AUTHORIZATION_URL, cookies=state.cookies, json={
            "type": "auth",
            "username": username,
            "password": password,
        })
        result = CredentialsResponse.from_json(decode_json(response, AUTHORIZATION_URL), AUTHORIZATION_URL)
        if result.error is not None:
            raise AuthenticationFailed(result.error)
        return CredentialsSubmitted(cookies=state.cookies, redirect_uri=result.uri)

    def _extract_access_token(self, state: CredentialsSubmitted) -> TokenExtracted:
        tokens = extract_tokens(state.redirect_uri)
        self.transport.set_header("Authorization", f"Bearer {tokens.access_token}")
        return TokenExtracted(cookies=state.cookies, access_token=tokens.access_token)

    def _request_entitlement(self, state: EntitlementRequested) -> Authenticated:
        response = self.transport.request("POST", ENTITLEMENTS_URL, cookies=state.cookies)
        result = EntitlementsResponse.from_json(decode_json(response, ENTITLEMENTS_URL), ENTITLEMENTS_URL)
        self.transport.set_header("X-Riot-Entitlements-JWT", result.entitlements_token)
        return Authenticated(access_token=state.access_token, entitlements_token=result.entitlements_token)

    # ------------------------------------------------------------------
    # Authenticated calls
    # ------------------------------------------------------------------

    def request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """Send a request that needs both tokens"""
        if not self.is_authenticated:
            raise SessionNotAuthenticated(self.stage.value)
        return self.transport.request(method, url, **kwargs)
