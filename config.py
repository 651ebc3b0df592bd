"""
Runtime configuration for the settings copier

Nothing here is required. Values come from the environment, optionally
seeded from a .env file, and default to a plain TLS-verified run.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# ============================================================================
# Fixed Riot client values
# ============================================================================

USER_AGENT = "RiotClient/43.0.1.4195386.4190634 rso-auth (Windows;10;;Professional, x64)"

AUTH_HOST = "auth.riotgames.com"
ENTITLEMENTS_HOST = "entitlements.auth.riotgames.com"
PREFERENCES_HOST = "playerpreferences.riotgames.com"

CLIENT_ID = "play-valorant-web-prod"
REDIRECT_URI = "https://playvalorant.com/opt_in"
RESPONSE_TYPE = "token id_token"
NONCE = "1"

SETTINGS_KEY = "Ares.PlayerSettings"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


def _env_timeout(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from None
    if timeout <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return timeout


@dataclass(frozen=True)
class CopierConfig:
    """Transport and output options shared by both account sessions"""

    insecure_transport: bool = False
    timeout: Optional[float] = None
    quiet: bool = False

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "CopierConfig":
        """Load .env (if any) and read the VALORANT_* variables"""
        load_dotenv(dotenv_path)
        return cls(
            insecure_transport=_env_flag("VALORANT_INSECURE_TRANSPORT"),
            timeout=_env_timeout("VALORANT_HTTP_TIMEOUT"),
            quiet=_env_flag("VALORANT_QUIET"),
        )
