"""
Player preferences client and the account-to-account settings transfer
"""

from dataclasses import dataclass
from typing import Any, Dict

from auth import AccountSession
from auth.models import decode_json, require
from config import PREFERENCES_HOST, SETTINGS_KEY

GET_PREFERENCE_URL = f"https://{PREFERENCES_HOST}/playerPref/v3/getPreference/{SETTINGS_KEY}"
SAVE_PREFERENCE_URL = f"https://{PREFERENCES_HOST}/playerPref/v3/savePreference"


@dataclass(frozen=True)
class PreferenceResponse:
    data: str

    @classmethod
    def from_json(cls, data: Dict[str, Any], endpoint: str) -> "PreferenceResponse":
        return cls(data=require(data, "data", str, endpoint))


def get_settings(session: AccountSession) -> str:
    """Read the account's serialized player settings, untouched"""
    response = session.request("GET", GET_PREFERENCE_URL)
    return PreferenceResponse.from_json(decode_json(response, GET_PREFERENCE_URL), GET_PREFERENCE_URL).data


def set_settings(session: AccountSession, settings: str) -> str:
    """
    Save settings to the account

    Returns the blob the server echoes back; callers compare it against
    what they sent to confirm the write.
    """
    response = session.request("PUT", SAVE_PREFERENCE_URL, json={
        "data": settings,
        "type": SETTINGS_KEY,
    })
    return PreferenceResponse.from_json(decode_json(response, SAVE_PREFERENCE_URL), SAVE_PREFERENCE_URL).data


@dataclass(frozen=True)
class TransferResult:
    source_settings: str
    echoed_settings: str

    @property
    def success(self) -> bool:
        return self.source_settings == self.echoed_settings


def transfer_settings(source: AccountSession, destination: AccountSession) -> TransferResult:
    """Copy the source account's settings onto the destination account"""
    source.log("Reading player settings...")
    settings = get_settings(source)

    destination.log("Writing player settings...")
    echoed = set_settings(destination, settings)
    return TransferResult(source_settings=settings, echoed_settings=echoed)
