"""
Token extraction from the identity provider's redirect URI

The provider does not return tokens as JSON fields; it hands back a
redirect URI with them in the fragment, e.g.
https://playvalorant.com/opt_in#access_token=...&id_token=...&expires_in=3600
"""

import re
from dataclasses import dataclass

from errors import TokenExtractionFailed

TOKEN_PATTERN = re.compile(
    r"access_token=([a-zA-Z\d.\-_]*).*id_token=([a-zA-Z\d.\-_]*).*expires_in=(\d*)",
    re.ASCII,
)


@dataclass(frozen=True)
class TokenExtractionResult:
    access_token: str
    id_token: str
    expires_in: str

    @property
    def expires_in_seconds(self) -> int:
        return int(self.expires_in) if self.expires_in else 0


def extract_tokens(uri: str) -> TokenExtractionResult:
    """Pull access token, id token and expiry out of a redirect URI"""
    match = TOKEN_PATTERN.search(uri)
    if match is None or len(match.groups()) != 3:
        raise TokenExtractionFailed(uri)

    access_token, id_token, expires_in = match.groups()
    return TokenExtractionResult(access_token, id_token, expires_in)
