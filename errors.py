"""
Error types for the Valorant settings copier
Every stage raises one of these so the CLI can report a single line
"""

from typing import Optional


class CopierError(Exception):
    """Base class for every failure the copier reports"""


class TransportError(CopierError):
    """DNS, connect, TLS or IO failure while talking to a Riot host"""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class AuthenticationError(CopierError):
    """The login handshake was refused or returned something unusable"""


class AuthenticationFailed(AuthenticationError):
    """Identity provider answered the credential submission with an error"""

    def __init__(self, error_code: str):
        super().__init__(f"failed to authenticate ({error_code})")
        self.error_code = error_code


class TokenExtractionFailed(AuthenticationError):
    """Redirect URI did not carry the expected token fragments"""

    def __init__(self, uri: str):
        super().__init__("unable to match access token")
        self.uri = uri


class MalformedResponse(CopierError):
    """A response body was not JSON or lacked an expected field"""

    def __init__(self, endpoint: str, detail: str):
        super().__init__(f"malformed response from {endpoint}: {detail}")
        self.endpoint = endpoint
        self.detail = detail


class SessionStateError(CopierError):
    """Operation is not valid in the session's current state"""


class SessionNotAuthenticated(SessionStateError):
    """Settings call attempted before the handshake completed"""

    def __init__(self, state: str):
        super().__init__(f"session is not authenticated (state: {state})")
        self.state = state
