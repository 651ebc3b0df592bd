"""
Authentication module for Riot accounts
Contains the login handshake state machine and token parsing
"""

from .riot_auth import (
    AccountSession,
    Authenticated,
    Stage,
)
from .token_parser import (
    TokenExtractionResult,
    extract_tokens,
)

__all__ = [
    'AccountSession',
    'Authenticated',
    'Stage',
    'TokenExtractionResult',
    'extract_tokens',
]
