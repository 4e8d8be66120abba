"""Operating-system platforms a device can run."""

from __future__ import annotations

from enum import Enum


class PlatformParseError(ValueError):
    """Raised when a string does not name a known platform."""


class Platform(Enum):
    """A device platform, named by its lower-case identifier."""

    ANDROID = "android"
    IOS = "ios"
    MAC = "mac"
    LINUX = "linux"
    WINDOWS = "windows"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_str(cls, text: str) -> Platform:
        """Parse a platform name, ignoring case and surrounding whitespace."""
        normalized = text.lower().strip()
        try:
            return cls(normalized)
        except ValueError:
            raise PlatformParseError("Error parsing the platform") from None

    def is_mobile(self) -> bool:
        """Whether the platform gets the mobile interface."""
        return self in (Platform.ANDROID, Platform.IOS)


DEFAULT_PLATFORM = Platform.MAC