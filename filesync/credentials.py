"""Wi-Fi hotspot credentials and their random generation."""

from __future__ import annotations

import secrets
import string
from dataclasses import dataclass
from typing import Any, Mapping

_SSID_MIN = 1000
_SSID_MAX = 9999
_PASSKEY_LENGTH = 8
_PASSKEY_ALPHABET = (
    string.ascii_lowercase + string.ascii_uppercase + string.digits + string.punctuation
)
_U16_MAX = 0xFFFF


@dataclass(frozen=True)
class WifiCredentials:
    """Network identifier and passkey shared with a peer device."""

    ssid: int = 0
    passkey: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.ssid, bool) or not isinstance(self.ssid, int):
            raise TypeError("ssid must be an integer")
        if not 0 <= self.ssid <= _U16_MAX:
            raise ValueError(f"ssid {self.ssid} is out of range 0..{_U16_MAX}")
        if not isinstance(self.passkey, str):
            raise TypeError("passkey must be a string")

    def __str__(self) -> str:
        return f"{self.ssid}::{self.passkey}"

    def to_dict(self) -> dict[str, Any]:
        """Return the credentials as a JSON-ready mapping."""
        return {"ssid": self.ssid, "passkey": self.passkey}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WifiCredentials:
        """Build credentials from a mapping with ``ssid`` and ``passkey`` keys."""
        try:
            return cls(ssid=data["ssid"], passkey=data["passkey"])
        except KeyError as missing:
            raise ValueError(f"missing field {missing.args[0]!r}") from None


def generate_random_digits() -> int:
    """Return a random four-digit number."""
    return _SSID_MIN + secrets.randbelow(_SSID_MAX - _SSID_MIN + 1)


def generate_passkey() -> str:
    """Return an eight-character passkey of letters, digits and symbols."""
    return "".join(secrets.choice(_PASSKEY_ALPHABET) for _ in range(_PASSKEY_LENGTH))


def generate_android_wifi_credentials() -> WifiCredentials:
    """Generate fresh hotspot credentials for an Android peer."""
    return WifiCredentials(ssid=generate_random_digits(), passkey=generate_passkey())