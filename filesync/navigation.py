"""Route paths and the screens they lead to."""

from __future__ import annotations

from types import MappingProxyType
from urllib.parse import urlsplit

DEFAULT_ROUTE = "/"
SEND_ROUTE = "/send"
RECEIVE_ROUTE = "/receive"
HOME_ROUTE = "/home"
SETTINGS_ROUTE = "/settings"
HISTORY_ROUTE = "/history"
SELECT_PLATFORM_ROUTE = "/platform"
ABOUT_ROUTE = "/about"
SHARE_ROUTE = "/share"

MOBILE_ROUTES = (
    DEFAULT_ROUTE,
    SEND_ROUTE,
    RECEIVE_ROUTE,
    HOME_ROUTE,
    SETTINGS_ROUTE,
    HISTORY_ROUTE,
)

NOT_FOUND = "Not found."

DESKTOP_ROUTES = MappingProxyType(
    {
        DEFAULT_ROUTE: "TransferScreen",
        HOME_ROUTE: "HomeScreen",
        SELECT_PLATFORM_ROUTE: "SelectPlatformScreen",
        SEND_ROUTE: "SendScreen",
        RECEIVE_ROUTE: "ReceiveScreen",
        ABOUT_ROUTE: "AboutScreen",
        SETTINGS_ROUTE: "SettingsScreen",
        SHARE_ROUTE: "ShareScreen",
        HISTORY_ROUTE: "HistoryScreen",
    }
)


def resolve_screen(path: str) -> str:
    """Return the desktop screen for ``path``, or ``NOT_FOUND`` if none matches."""
    route = urlsplit(path).path or DEFAULT_ROUTE
    return DESKTOP_ROUTES.get(route, NOT_FOUND)