"""Inline SVG icons used across the interface, rendered as markup strings."""

from __future__ import annotations

from html import escape
from typing import Iterable, Mapping

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
DEFAULT_CLASS = "size-6"
_VIEW_BOX = "0 0 24 24"


def _attributes(attrs: Mapping[str, str]) -> str:
    return "".join(f' {name}="{escape(value, quote=True)}"' for name, value in attrs.items())


def _element(tag: str, attrs: Mapping[str, str], children: Iterable[str] = ()) -> str:
    body = "".join(children)
    if not body:
        return f"<{tag}{_attributes(attrs)}/>"
    return f"<{tag}{_attributes(attrs)}>{body}</{tag}>"


def _outline(*paths: str, class_name: str = DEFAULT_CLASS) -> str:
    """A stroked icon: each path is drawn with rounded caps and joins."""
    return _element(
        "svg",
        {
            "xmlns": SVG_NAMESPACE,
            "fill": "none",
            "viewBox": _VIEW_BOX,
            "stroke-width": "1.5",
            "stroke": "currentColor",
            "class": class_name,
        },
        (
            _element(
                "path",
                {"stroke-linecap": "round", "stroke-linejoin": "round", "d": d},
            )
            for d in paths
        ),
    )


def _solid(*paths: str, even_odd: bool = False) -> str:
    """A filled icon; ``even_odd`` applies the even-odd fill and clip rules."""
    rules = {"fill-rule": "evenodd", "clip-rule": "evenodd"} if even_odd else {}
    return _element(
        "svg",
        {
            "xmlns": SVG_NAMESPACE,
            "viewBox": _VIEW_BOX,
            "fill": "currentColor",
            "class": DEFAULT_CLASS,
        },
        (_element("path", {"d": d, **rules}) for d in paths),
    )


def arrow_left_right_icon_solid() -> str:
    """Two opposing arrows, for transfers."""
    return _outline(
        "M3 7.5 7.5 3m0 0L12 7.5M7.5 3v13.5m13.5 0L16.5 21m0 0L12 16.5m4.5 4.5V7.5"
    )


def calendar_icon_outline() -> str:
    """Calendar, outlined."""
    return _outline(
        "M6.75 3v2.25M17.25 3v2.25M3 18.75V7.5a2.25 2.25 0 0 1 2.25-2.25h13.5A2.25 2.25 0 0 1 "
        "21 7.5v11.25m-18 0A2.25 2.25 0 0 0 5.25 21h13.5A2.25 2.25 0 0 0 21 18.75m-18 0v-7.5A2.25 "
        "2.25 0 0 1 5.25 9h13.5A2.25 2.25 0 0 1 21 11.25v7.5"
    )


def calendar_icon_solid() -> str:
    """Calendar, filled."""
    return _solid(
        "M6.75 2.25A.75.75 0 0 1 7.5 3v1.5h9V3A.75.75 0 0 1 18 3v1.5h.75a3 3 0 0 1 3 3v11.25a3 3 "
        "0 0 1-3 3H5.25a3 3 0 0 1-3-3V7.5a3 3 0 0 1 3-3H6V3a.75.75 0 0 1 .75-.75Zm13.5 9a1.5 1.5 "
        "0 0 0-1.5-1.5H5.25a1.5 1.5 0 0 0-1.5 1.5v7.5a1.5 1.5 0 0 0 1.5 1.5h13.5a1.5 1.5 0 0 0 "
        "1.5-1.5v-7.5Z",
        even_odd=True,
    )


def chevron_left_icon() -> str:
    """Left-pointing chevron."""
    return _outline("M15.75 19.5 8.25 12l7.5-7.5")


def chevron_up_down_icon() -> str:
    """Up and down chevrons."""
    return _outline("M8.25 15 12 18.75 15.75 15m-7.5-6L12 5.25 15.75 9")


def cloud_upload_icon(class_name: str = "") -> str:
    """Cloud with an upward arrow; ``class_name`` is appended to the default class."""
    return _outline(
        "M12 16.5V9.75m0 0 3 3m-3-3-3 3M6.75 19.5a4.5 4.5 0 0 1-1.41-8.775 5.25 5.25 0 0 1 "
        "10.233-2.33 3 3 0 0 1 3.758 3.848A3.752 3.752 0 0 1 18 19.5H6.75Z",
        class_name=f"{DEFAULT_CLASS} {class_name}",
    )


def cloud_download_icon_solid() -> str:
    """Filled cloud with a downward arrow."""
    return _solid(
        "M10.5 3.75a6 6 0 0 0-5.98 6.496A5.25 5.25 0 0 0 6.75 20.25H18a4.5 4.5 0 0 0 "
        "2.206-8.423 3.75 3.75 0 0 0-4.133-4.303A6.001 6.001 0 0 0 10.5 3.75Zm2.25 6a.75.75 0 0 "
        "0-1.5 0v4.94l-1.72-1.72a.75.75 0 0 0-1.06 1.06l3 3a.75.75 0 0 0 1.06 0l3-3a.75.75 0 1 "
        "0-1.06-1.06l-1.72 1.72V9.75Z",
        even_odd=True,
    )


def cloud_upload_icon_solid() -> str:
    """Filled cloud with an upward arrow."""
    return _solid(
        "M10.5 3.75a6 6 0 0 0-5.98 6.496A5.25 5.25 0 0 0 6.75 20.25H18a4.5 4.5 0 0 0 "
        "2.206-8.423 3.75 3.75 0 0 0-4.133-4.303A6.001 6.001 0 0 0 10.5 3.75Zm2.03 5.47a.75.75 0 "
        "0 0-1.06 0l-3 3a.75.75 0 1 0 1.06 1.06l1.72-1.72v4.94a.75.75 0 0 0 1.5 0v-4.94l1.72 "
        "1.72a.75.75 0 1 0 1.06-1.06l-3-3Z",
        even_odd=True,
    )


def settings_icon_outline() -> str:
    """Settings cog, outlined."""
    return _outline(
        "M9.594 3.94c.09-.542.56-.94 1.11-.94h2.593c.55 0 1.02.398 1.11.94l.213 1.281c.063.374"
        ".313.686.645.87.074.04.147.083.22.127.325.196.72.257 1.075.124l1.217-.456a1.125 1.125 0 "
        "0 1 1.37.49l1.296 2.247a1.125 1.125 0 0 1-.26 1.431l-1.003.827c-.293.241-.438.613-.43"
        ".992a7.723 7.723 0 0 1 0 .255c-.008.378.137.75.43.991l1.004.827c.424.35.534.955.26 "
        "1.43l-1.298 2.247a1.125 1.125 0 0 1-1.369.491l-1.217-.456c-.355-.133-.75-.072-1.076"
        ".124a6.47 6.47 0 0 1-.22.128c-.331.183-.581.495-.644.869l-.213 1.281c-.09.543-.56.94-1.11"
        ".94h-2.594c-.55 0-1.019-.398-1.11-.94l-.213-1.281c-.062-.374-.312-.686-.644-.87a6.52 "
        "6.52 0 0 1-.22-.127c-.325-.196-.72-.257-1.076-.124l-1.217.456a1.125 1.125 0 0 "
        "1-1.369-.49l-1.297-2.247a1.125 1.125 0 0 1 .26-1.431l1.004-.827c.292-.24.437-.613.43"
        "-.991a6.932 6.932 0 0 1 0-.255c.007-.38-.138-.751-.43-.992l-1.004-.827a1.125 1.125 0 0 "
        "1-.26-1.43l1.297-2.247a1.125 1.125 0 0 1 1.37-.491l1.216.456c.356.133.751.072 1.076-.124"
        ".072-.044.146-.086.22-.128.332-.183.582-.495.644-.869l.214-1.28Z",
        "M15 12a3 3 0 1 1-6 0 3 3 0 0 1 6 0Z",
    )


def cog_solid() -> str:
    """Settings cog, filled."""
    return _solid(
        "M11.078 2.25c-.917 0-1.699.663-1.85 1.567L9.05 4.889c-.02.12-.115.26-.297.348a7.493 "
        "7.493 0 0 0-.986.57c-.166.115-.334.126-.45.083L6.3 5.508a1.875 1.875 0 0 0-2.282.819l-.922 "
        "1.597a1.875 1.875 0 0 0 .432 2.385l.84.692c.095.078.17.229.154.43a7.598 7.598 0 0 0 0 "
        "1.139c.015.2-.059.352-.153.43l-.841.692a1.875 1.875 0 0 0-.432 2.385l.922 1.597a1.875 "
        "1.875 0 0 0 2.282.818l1.019-.382c.115-.043.283-.031.45.082.312.214.641.405.985.57.182"
        ".088.277.228.297.35l.178 1.071c.151.904.933 1.567 1.85 1.567h1.844c.916 0 1.699-.663 "
        "1.85-1.567l.178-1.072c.02-.12.114-.26.297-.349.344-.165.673-.356.985-.57.167-.114.335"
        "-.125.45-.082l1.02.382a1.875 1.875 0 0 0 2.28-.819l.923-1.597a1.875 1.875 0 0 "
        "0-.432-2.385l-.84-.692c-.095-.078-.17-.229-.154-.43a7.614 7.614 0 0 0 0-1.139c-.016-.2"
        ".059-.352.153-.43l.84-.692c.708-.582.891-1.59.433-2.385l-.922-1.597a1.875 1.875 0 0 "
        "0-2.282-.818l-1.02.382c-.114.043-.282.031-.449-.083a7.49 7.49 0 0 0-.985-.57c-.183-.087"
        "-.277-.227-.297-.348l-.179-1.072a1.875 1.875 0 0 0-1.85-1.567h-1.843ZM12 15.75a3.75 3.75 "
        "0 1 0 0-7.5 3.75 3.75 0 0 0 0 7.5Z",
        even_odd=True,
    )


def dot_vertical() -> str:
    """Three vertically stacked dots."""
    return _outline(
        "M12 6.75a.75.75 0 1 1 0-1.5.75.75 0 0 1 0 1.5ZM12 12.75a.75.75 0 1 1 0-1.5.75.75 0 0 1 "
        "0 1.5ZM12 18.75a.75.75 0 1 1 0-1.5.75.75 0 0 1 0 1.5Z"
    )


def download_icon() -> str:
    """Tray with a downward arrow."""
    return _outline(
        "M3 16.5v2.25A2.25 2.25 0 0 0 5.25 21h13.5A2.25 2.25 0 0 0 21 18.75V16.5M16.5 12 12 "
        "16.5m0 0L7.5 12m4.5 4.5V3"
    )


def history_icon() -> str:
    """Clock face."""
    return _outline("M12 6v6h4.5m4.5 0a9 9 0 1 1-18 0 9 9 0 0 1 18 0Z")


def home_icon() -> str:
    """House outline drawn as a filled shape."""
    return _solid(
        "M13 19H19V9.97815L12 4.53371L5 9.97815V19H11V13H13V19ZM21 20C21 20.5523 20.5523 21 20 "
        "21H4C3.44772 21 3 20.5523 3 20V9.48907C3 9.18048 3.14247 8.88917 3.38606 8.69972L11.3861 "
        "2.47749C11.7472 2.19663 12.2528 2.19663 12.6139 2.47749L20.6139 8.69972C20.8575 8.88917 "
        "21 9.18048 21 9.48907V20Z"
    )


def home_icon_solid() -> str:
    """Filled house."""
    return _solid(
        "M11.47 3.841a.75.75 0 0 1 1.06 0l8.69 8.69a.75.75 0 1 0 1.06-1.061l-8.689-8.69a2.25 "
        "2.25 0 0 0-3.182 0l-8.69 8.69a.75.75 0 1 0 1.061 1.06l8.69-8.689Z",
        "m12 5.432 8.159 8.159c.03.03.06.058.091.086v6.198c0 1.035-.84 1.875-1.875 1.875H15a.75"
        ".75 0 0 1-.75-.75v-4.5a.75.75 0 0 0-.75-.75h-3a.75.75 0 0 0-.75.75V21a.75.75 0 0 "
        "1-.75.75H5.625a1.875 1.875 0 0 1-1.875-1.875v-6.198a2.29 2.29 0 0 0 .091-.086L12 5.432Z",
    )


def information_icon_outline() -> str:
    """Information sign in a circle."""
    return _outline(
        "m11.25 11.25.041-.02a.75.75 0 0 1 1.063.852l-.708 2.836a.75.75 0 0 0 1.063.853l.041-.021"
        "M21 12a9 9 0 1 1-18 0 9 9 0 0 1 18 0Zm-9-3.75h.008v.008H12V8.25Z"
    )


def menu_icon() -> str:
    """Three horizontal bars."""
    return _outline("M3.75 6.75h16.5M3.75 12h16.5m-16.5 5.25h16.5")


def moon_icon_outline() -> str:
    """Crescent moon."""
    return _outline(
        "M21.752 15.002A9.72 9.72 0 0 1 18 15.75c-5.385 0-9.75-4.365-9.75-9.75 0-1.33.266-2.597"
        ".748-3.752A9.753 9.753 0 0 0 3 11.25C3 16.635 7.365 21 12.75 21a9.753 9.753 0 0 0 "
        "9.002-5.998Z"
    )


def plus_icon() -> str:
    """Plus sign."""
    return _solid(
        "M12 3.75a.75.75 0 0 1 .75.75v6.75h6.75a.75.75 0 0 1 0 1.5h-6.75v6.75a.75.75 0 0 1-1.5 "
        "0v-6.75H4.5a.75.75 0 0 1 0-1.5h6.75V4.5a.75.75 0 0 1 .75-.75Z",
        even_odd=True,
    )


def scan_qr_icon() -> str:
    """Scanner frame with a scan line."""
    return _solid(
        "M15 3H21V8H19V5H15V3ZM9 3V5H5V8H3V3H9ZM15 21V19H19V16H21V21H15ZM9 21H3V16H5V19H9V21Z"
        "M3 11H21V13H3V11Z"
    )


def share_icon_solid() -> str:
    """Broadcast waves around a point."""
    return _outline(
        "M9.348 14.652a3.75 3.75 0 0 1 0-5.304m5.304 0a3.75 3.75 0 0 1 0 5.304m-7.425 2.121a6.75 "
        "6.75 0 0 1 0-9.546m9.546 0a6.75 6.75 0 0 1 0 9.546M5.106 18.894c-3.808-3.807-3.808-9.98 "
        "0-13.788m13.788 0c3.808 3.807 3.808 9.98 0 13.788M12 12h.008v.008H12V12Zm.375 0a.375"
        ".375 0 1 1-.75 0 .375.375 0 0 1 .75 0Z"
    )


def sun_icon_outline() -> str:
    """Sun with rays."""
    return _outline(
        "M12 3v2.25m6.364.386-1.591 1.591M21 12h-2.25m-.386 6.364-1.591-1.591M12 18.75V21m-4.773"
        "-4.227-1.591 1.591M5.25 12H3m4.227-4.773L5.636 5.636M15.75 12a3.75 3.75 0 1 1-7.5 0 3.75 "
        "3.75 0 0 1 7.5 0Z"
    )


def upload_icon() -> str:
    """Tray with an upward arrow."""
    return _outline(
        "M3 16.5v2.25A2.25 2.25 0 0 0 5.25 21h13.5A2.25 2.25 0 0 0 21 18.75V16.5m-13.5-9L12 3m0 "
        "0 4.5 4.5M12 3v13.5"
    )


def user_icon_multiple_outline() -> str:
    """Group of people, outlined."""
    return _outline(
        "M15 19.128a9.38 9.38 0 0 0 2.625.372 9.337 9.337 0 0 0 4.121-.952 4.125 4.125 0 0 "
        "0-7.533-2.493M15 19.128v-.003c0-1.113-.285-2.16-.786-3.07M15 19.128v.106A12.318 12.318 0 "
        "0 1 8.624 21c-2.331 0-4.512-.645-6.374-1.766l-.001-.109a6.375 6.375 0 0 1 11.964-3.07M12 "
        "6.375a3.375 3.375 0 1 1-6.75 0 3.375 3.375 0 0 1 6.75 0Zm8.25 2.25a2.625 2.625 0 1 1-5.25 "
        "0 2.625 2.625 0 0 1 5.25 0Z"
    )


def user_icon_multiple_solid() -> str:
    """Group of people, filled."""
    return _solid(
        "M4.5 6.375a4.125 4.125 0 1 1 8.25 0 4.125 4.125 0 0 1-8.25 0ZM14.25 8.625a3.375 3.375 0 "
        "1 1 6.75 0 3.375 3.375 0 0 1-6.75 0ZM1.5 19.125a7.125 7.125 0 0 1 14.25 0v.003l-.001.119a"
        ".75.75 0 0 1-.363.63 13.067 13.067 0 0 1-6.761 1.873c-2.472 0-4.786-.684-6.76-1.873a.75"
        ".75 0 0 1-.364-.63l-.001-.122ZM17.25 19.128l-.001.144a2.25 2.25 0 0 1-.233.96 10.088 "
        "10.088 0 0 0 5.06-1.01.75.75 0 0 0 .42-.643 4.875 4.875 0 0 0-6.957-4.611 8.586 8.586 0 0 "
        "1 1.71 5.157v.003Z"
    )