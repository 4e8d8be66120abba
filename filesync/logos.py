"""Platform logos shown when picking the operating system of a peer device."""

from __future__ import annotations

from html import escape
from typing import Callable, Iterable, Mapping

from filesync.icons import SVG_NAMESPACE
from filesync.platform import Platform

XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"
LOGO_SIZE = "50px"


def _attributes(attrs: Mapping[str, str]) -> str:
    return "".join(f' {name}="{escape(value, quote=True)}"' for name, value in attrs.items())


def _logo(view_box: str, group_id: str, paths: Iterable[tuple[str, str]]) -> str:
    """A filled logo: one group of identified paths inside a fixed-size frame."""
    svg_attrs = {
        "fill": "currentColor",
        "height": LOGO_SIZE,
        "width": LOGO_SIZE,
        "version": "1.1",
        "id": "Layer_1",
        "xmlns": SVG_NAMESPACE,
        "xmlns:xlink": XLINK_NAMESPACE,
        "viewBox": view_box,
        "xml:space": "preserve",
    }
    body = "".join(f"<path{_attributes({'id': path_id, 'd': d})}/>" for path_id, d in paths)
    return f"<svg{_attributes(svg_attrs)}><g{_attributes({'id': group_id})}>{body}</g></svg>"


def android_logo() -> str:
    """The Android robot."""
    return _logo(
        "0 0 299.679 299.679",
        "XMLID_197_",
        (
            (
                "XMLID_221_",
                "M181.122,299.679c10.02,0,18.758-8.738,18.758-18.758v-43.808h12.525"
                "c7.516,0,12.525-5.011,12.525-12.525 V99.466H74.749v125.123c0,7.515,5.01,12.525,"
                "12.525,12.525H99.8v43.808c0,10.02,8.736,18.758,18.758,18.758 c10.019,0,"
                "18.756-8.738,18.756-18.758v-43.808h25.051v43.808C162.364,290.941,171.102,"
                "299.679,181.122,299.679z",
            ),
            (
                "XMLID_222_",
                "M256.214,224.589c10.02,0,18.756-8.737,18.756-18.758v-87.615c0-9.967-8.736-18.75"
                "-18.756-18.75 c-10.021,0-18.758,8.783-18.758,18.75v87.615C237.456,215.851,"
                "246.192,224.589,256.214,224.589z",
            ),
            (
                "XMLID_223_",
                "M43.466,224.589c10.021,0,18.758-8.737,18.758-18.758v-87.615c0-9.967-8.736-18.75"
                "-18.758-18.75 c-10.02,0-18.756,8.783-18.756,18.75v87.615C24.71,215.851,33.446,"
                "224.589,43.466,224.589z",
            ),
            (
                "XMLID_224_",
                "M209.899,1.89c-2.504-2.52-6.232-2.52-8.736,0l-16.799,16.743l-0.775,0.774 "
                "c-9.961-4.988-21.129-7.479-33.566-7.503c-0.061,0-0.121-0.002-0.182-0.002h-0.002"
                "c-0.063,0-0.121,0.002-0.184,0.002 c-12.436,0.024-23.604,2.515-33.564,7.503"
                "l-0.777-0.774L98.516,1.89c-2.506-2.52-6.232-2.52-8.736,0 c-2.506,2.506-2.506,"
                "6.225,0,8.729l16.25,16.253c-5.236,3.496-9.984,7.774-14.113,12.667C82.032,"
                "51.256,75.727,66.505,74.86,83.027 c-0.008,0.172-0.025,0.342-0.033,0.514"
                "c-0.053,1.125-0.078,2.256-0.078,3.391H224.93c0-1.135-0.027-2.266-0.078-3.391 "
                "c-0.008-0.172-0.025-0.342-0.035-0.514c-0.865-16.522-7.172-31.772-17.057-43.487"
                "c-4.127-4.893-8.877-9.171-14.113-12.667 l16.252-16.253C212.405,8.115,212.405,"
                "4.396,209.899,1.89z M118.534,65.063c-5.182,0-9.383-4.201-9.383-9.383 "
                "c0-5.182,4.201-9.383,9.383-9.383c5.182,0,9.383,4.201,9.383,9.383C127.917,"
                "60.862,123.716,65.063,118.534,65.063z M181.145,65.063 c-5.182,0-9.383-4.201"
                "-9.383-9.383c0-5.182,4.201-9.383,9.383-9.383c5.182,0,9.383,4.201,9.383,9.383 "
                "C190.528,60.862,186.327,65.063,181.145,65.063z",
            ),
        ),
    )


def mac_os_logo() -> str:
    """The Apple logo."""
    return _logo(
        "0 0 305 305",
        "XMLID_228_",
        (
            (
                "XMLID_229_",
                "M40.738,112.119c-25.785,44.745-9.393,112.648,19.121,153.82C74.092,286.523,"
                "88.502,305,108.239,305 c0.372,0,0.745-0.007,1.127-0.022c9.273-0.37,15.974-3.225,"
                "22.453-5.984c7.274-3.1,14.797-6.305,26.597-6.305 c11.226,0,18.39,3.101,25.318,"
                "6.099c6.828,2.954,13.861,6.01,24.253,5.815c22.232-0.414,35.882-20.352,"
                "47.925-37.941 c12.567-18.365,18.871-36.196,20.998-43.01l0.086-0.271c0.405-1.211"
                "-0.167-2.533-1.328-3.066c-0.032-0.015-0.15-0.064-0.183-0.078 c-3.915-1.601"
                "-38.257-16.836-38.618-58.36c-0.335-33.736,25.763-51.601,30.997-54.839l0.244-0.152 "
                "c0.567-0.365,0.962-0.944,1.096-1.606c0.134-0.661-0.006-1.349-0.386-1.905"
                "c-18.014-26.362-45.624-30.335-56.74-30.813 c-1.613-0.161-3.278-0.242-4.95-0.242"
                "c-13.056,0-25.563,4.931-35.611,8.893c-6.936,2.735-12.927,5.097-17.059,5.097 "
                "c-4.643,0-10.668-2.391-17.645-5.159c-9.33-3.703-19.905-7.899-31.1-7.899"
                "c-0.267,0-0.53,0.003-0.789,0.008 C78.894,73.643,54.298,88.535,40.738,112.119z",
            ),
            (
                "XMLID_230_",
                "M212.101,0.002c-15.763,0.642-34.672,10.345-45.974,23.583c-9.605,11.127-18.988,"
                "29.679-16.516,48.379 c0.155,1.17,1.107,2.073,2.284,2.164c1.064,0.083,2.15,0.125,"
                "3.232,0.126c15.413,0,32.04-8.527,43.395-22.257 c11.951-14.498,17.994-33.104,"
                "16.166-49.77C214.544,0.921,213.395-0.049,212.101,0.002z",
            ),
        ),
    )


def windows_platform_logo() -> str:
    """The four-pane Windows logo."""
    return _logo(
        "0 0 305 305",
        "XMLID_108_",
        (
            (
                "XMLID_109_",
                "M139.999,25.775v116.724c0,1.381,1.119,2.5,2.5,2.5H302.46c1.381,0,2.5-1.119,"
                "2.5-2.5V2.5 c0-0.726-0.315-1.416-0.864-1.891c-0.548-0.475-1.275-0.687-1.996"
                "-0.583L142.139,23.301 C140.91,23.48,139.999,24.534,139.999,25.775z",
            ),
            (
                "XMLID_110_",
                "M122.501,279.948c0.601,0,1.186-0.216,1.644-0.616c0.544-0.475,0.856-1.162,"
                "0.856-1.884V162.5 c0-1.381-1.119-2.5-2.5-2.5H2.592c-0.663,0-1.299,0.263-1.768,"
                "0.732c-0.469,0.469-0.732,1.105-0.732,1.768l0.006,98.515 c0,1.25,0.923,2.307,"
                "2.16,2.477l119.903,16.434C122.274,279.94,122.388,279.948,122.501,279.948z",
            ),
            (
                "XMLID_138_",
                "M2.609,144.999h119.892c1.381,0,2.5-1.119,2.5-2.5V28.681c0-0.722-0.312-1.408"
                "-0.855-1.883 c-0.543-0.475-1.261-0.693-1.981-0.594L2.164,42.5C0.923,42.669"
                "-0.001,43.728,0,44.98l0.109,97.521 C0.111,143.881,1.23,144.999,2.609,144.999z",
            ),
            (
                "XMLID_169_",
                "M302.46,305c0.599,0,1.182-0.215,1.64-0.613c0.546-0.475,0.86-1.163,0.86-1.887"
                "l0.04-140 c0-0.663-0.263-1.299-0.732-1.768c-0.469-0.469-1.105-0.732-1.768-0.732"
                "H142.499c-1.381,0-2.5,1.119-2.5,2.5v117.496 c0,1.246,0.918,2.302,2.151,2.476"
                "l159.961,22.504C302.228,304.992,302.344,305,302.46,305z",
            ),
        ),
    )


def linux_logo() -> str:
    """The Linux penguin."""
    return _logo(
        "0 0 304.998 304.998",
        "XMLID_91_",
        (
            (
                "XMLID_92_",
                "M274.659,244.888c-8.944-3.663-12.77-8.524-12.4-15.777c0.381-8.466-4.422-14.667"
                "-6.703-17.117 c1.378-5.264,5.405-23.474,0.004-39.291c-5.804-16.93-23.524-42.787"
                "-41.808-68.204c-7.485-10.438-7.839-21.784-8.248-34.922 c-0.392-12.531-0.834"
                "-26.735-7.822-42.525C190.084,9.859,174.838,0,155.851,0c-11.295,0-22.889,3.53"
                "-31.811,9.684 c-18.27,12.609-15.855,40.1-14.257,58.291c0.219,2.491,0.425,4.844,"
                "0.545,6.853c1.064,17.816,0.096,27.206-1.17,30.06 c-0.819,1.865-4.851,7.173"
                "-9.118,12.793c-4.413,5.812-9.416,12.4-13.517,18.539c-4.893,7.387-8.843,18.678"
                "-12.663,29.597 c-2.795,7.99-5.435,15.537-8.005,20.047c-4.871,8.676-3.659,16.766"
                "-2.647,20.505c-1.844,1.281-4.508,3.803-6.757,8.557 c-2.718,5.8-8.233,8.917"
                "-19.701,11.122c-5.27,1.078-8.904,3.294-10.804,6.586c-2.765,4.791-1.259,10.811,"
                "0.115,14.925 c2.03,6.048,0.765,9.876-1.535,16.826c-0.53,1.604-1.131,3.42-1.74,"
                "5.423c-0.959,3.161-0.613,6.035,1.026,8.542 c4.331,6.621,16.969,8.956,29.979,"
                "10.492c7.768,0.922,16.27,4.029,24.493,7.035c8.057,2.944,16.388,5.989,23.961,"
                "6.913 c1.151,0.145,2.291,0.218,3.39,0.218c11.434,0,16.6-7.587,18.238-10.704"
                "c4.107-0.838,18.272-3.522,32.871-3.882 c14.576-0.416,28.679,2.462,32.674,3.357"
                "c1.256,2.404,4.567,7.895,9.845,10.724c2.901,1.586,6.938,2.495,11.073,2.495 "
                "c0.001,0,0,0,0.001,0c4.416,0,12.817-1.044,19.466-8.039c6.632-7.028,23.202-16,"
                "35.302-22.551c2.7-1.462,5.226-2.83,7.441-4.065 c6.797-3.768,10.506-9.152,"
                "10.175-14.771C282.445,250.905,279.356,246.811,274.659,244.888z M124.189,243.535 "
                "c-0.846-5.96-8.513-11.871-17.392-18.715c-7.26-5.597-15.489-11.94-17.756-17.312"
                "c-4.685-11.082-0.992-30.568,5.447-40.602 c3.182-5.024,5.781-12.643,8.295-20.011"
                "c2.714-7.956,5.521-16.182,8.66-19.783c4.971-5.622,9.565-16.561,10.379-25.182 "
                "c4.655,4.444,11.876,10.083,18.547,10.083c1.027,0,2.024-0.134,2.977-0.403"
                "c4.564-1.318,11.277-5.197,17.769-8.947 c5.597-3.234,12.499-7.222,15.096-7.585"
                "c4.453,6.394,30.328,63.655,32.972,82.044c2.092,14.55-0.118,26.578-1.229,31.289 "
                "c-0.894-0.122-1.96-0.221-3.08-0.221c-7.207,0-9.115,3.934-9.612,6.283"
                "c-1.278,6.103-1.413,25.618-1.427,30.003 c-2.606,3.311-15.785,18.903-34.706,"
                "21.706c-7.707,1.12-14.904,1.688-21.39,1.688c-5.544,0-9.082-0.428-10.551-0.651"
                "l-9.508-10.879 C121.429,254.489,125.177,250.583,124.189,243.535z M136.254,"
                "64.149c-0.297,0.128-0.589,0.265-0.876,0.411 c-0.029-0.644-0.096-1.297-0.199"
                "-1.952c-1.038-5.975-5-10.312-9.419-10.312c-0.327,0-0.656,0.025-1.017,0.08 "
                "c-2.629,0.438-4.691,2.413-5.821,5.213c0.991-6.144,4.472-10.693,8.602-10.693"
                "c4.85,0,8.947,6.536,8.947,14.272 C136.471,62.143,136.4,63.113,136.254,64.149z "
                "M173.94,68.756c0.444-1.414,0.684-2.944,0.684-4.532 c0-7.014-4.45-12.509-10.131"
                "-12.509c-5.552,0-10.069,5.611-10.069,12.509c0,0.47,0.023,0.941,0.067,1.411 "
                "c-0.294-0.113-0.581-0.223-0.861-0.329c-0.639-1.935-0.962-3.954-0.962-6.015"
                "c0-8.387,5.36-15.211,11.95-15.211 c6.589,0,11.95,6.824,11.95,15.211C176.568,"
                "62.78,175.605,66.11,173.94,68.756z M169.081,85.08 c-0.095,0.424-0.297,0.612"
                "-2.531,1.774c-1.128,0.587-2.532,1.318-4.289,2.388l-1.174,0.711c-4.718,2.86"
                "-15.765,9.559-18.764,9.952 c-2.037,0.274-3.297-0.516-6.13-2.441c-0.639-0.435"
                "-1.319-0.897-2.044-1.362c-5.107-3.351-8.392-7.042-8.763-8.485 c1.665-1.287,"
                "5.792-4.508,7.905-6.415c4.289-3.988,8.605-6.668,10.741-6.668c0.113,0,0.215,"
                "0.008,0.321,0.028 c2.51,0.443,8.701,2.914,13.223,4.718c2.09,0.834,3.895,1.554,"
                "5.165,2.01C166.742,82.664,168.828,84.422,169.081,85.08z M205.028,271.45"
                "c2.257-10.181,4.857-24.031,4.436-32.196c-0.097-1.855-0.261-3.874-0.42-5.826 "
                "c-0.297-3.65-0.738-9.075-0.283-10.684c0.09-0.042,0.19-0.078,0.301-0.109"
                "c0.019,4.668,1.033,13.979,8.479,17.226 c2.219,0.968,4.755,1.458,7.537,1.458"
                "c7.459,0,15.735-3.659,19.125-7.049c1.996-1.996,3.675-4.438,4.851-6.372 "
                "c0.257,0.753,0.415,1.737,0.332,3.005c-0.443,6.885,2.903,16.019,9.271,19.385"
                "l0.927,0.487c2.268,1.19,8.292,4.353,8.389,5.853 c-0.001,0.001-0.051,0.177"
                "-0.387,0.489c-1.509,1.379-6.82,4.091-11.956,6.714c-9.111,4.652-19.438,9.925"
                "-24.076,14.803 c-6.53,6.872-13.916,11.488-18.376,11.488c-0.537,0-1.026-0.068"
                "-1.461-0.206C206.873,288.406,202.886,281.417,205.028,271.45z M39.917,245.477"
                "c-0.494-2.312-0.884-4.137-0.465-5.905c0.304-1.31,6.771-2.714,9.533-3.313"
                "c3.883-0.843,7.899-1.714,10.525-3.308 c3.551-2.151,5.474-6.118,7.17-9.618"
                "c1.228-2.531,2.496-5.148,4.005-6.007c0.085-0.05,0.215-0.108,0.463-0.108 "
                "c2.827,0,8.759,5.943,12.177,11.262c0.867,1.341,2.473,4.028,4.331,7.139"
                "c5.557,9.298,13.166,22.033,17.14,26.301 c3.581,3.837,9.378,11.214,7.952,17.541"
                "c-1.044,4.909-6.602,8.901-7.913,9.784c-0.476,0.108-1.065,0.163-1.758,0.163 "
                "c-7.606,0-22.662-6.328-30.751-9.728l-1.197-0.503c-4.517-1.894-11.891-3.087"
                "-19.022-4.241c-5.674-0.919-13.444-2.176-14.732-3.312 c-1.044-1.171,0.167-4.978,"
                "1.235-8.337c0.769-2.414,1.563-4.91,1.998-7.523C41.225,251.596,40.499,248.203,"
                "39.917,245.477z",
            ),
        ),
    )


_LOGOS: Mapping[Platform, Callable[[], str]] = {
    Platform.ANDROID: android_logo,
    Platform.MAC: mac_os_logo,
    Platform.WINDOWS: windows_platform_logo,
    Platform.LINUX: linux_logo,
}


def logo_for(platform: Platform | str) -> str:
    """The logo of ``platform``, given as a ``Platform`` or its name.

    Raises ``PlatformParseError`` for an unknown name and ``ValueError``
    for a platform that has no logo.
    """
    if not isinstance(platform, Platform):
        platform = Platform.from_str(platform)
    try:
        render = _LOGOS[platform]
    except KeyError:
        raise ValueError(f"no logo for platform {platform}") from None
    return render()