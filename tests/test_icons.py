import xml.etree.ElementTree as ET

import pytest

from filesync import icons

NS = "{http://www.w3.org/2000/svg}"


def parse(markup):
    return ET.fromstring(markup)


def paths(root):
    return root.findall(f"{NS}path")


def test_every_icon_is_well_formed_svg():
    rendered = [
        icons.arrow_left_right_icon_solid(),
        icons.calendar_icon_outline(),
        icons.calendar_icon_solid(),
        icons.chevron_left_icon(),
        icons.chevron_up_down_icon(),
        icons.cloud_upload_icon(),
        icons.cloud_download_icon_solid(),
        icons.cloud_upload_icon_solid(),
        icons.settings_icon_outline(),
        icons.cog_solid(),
        icons.dot_vertical(),
        icons.download_icon(),
        icons.history_icon(),
        icons.home_icon(),
        icons.home_icon_solid(),
        icons.information_icon_outline(),
        icons.menu_icon(),
        icons.moon_icon_outline(),
        icons.plus_icon(),
        icons.scan_qr_icon(),
        icons.share_icon_solid(),
        icons.sun_icon_outline(),
        icons.upload_icon(),
        icons.user_icon_multiple_outline(),
        icons.user_icon_multiple_solid(),
    ]
    assert len(set(rendered)) == 25
    for markup in rendered:
        root = parse(markup)
        assert root.tag == f"{NS}svg"
        assert root.get("viewBox") == "0 0 24 24"
        assert paths(root)
        assert all(path.get("d") for path in paths(root))


def test_outline_icons_are_stroked():
    rendered = [
        icons.arrow_left_right_icon_solid(),
        icons.calendar_icon_outline(),
        icons.chevron_left_icon(),
        icons.chevron_up_down_icon(),
        icons.settings_icon_outline(),
        icons.dot_vertical(),
        icons.download_icon(),
        icons.history_icon(),
        icons.information_icon_outline(),
        icons.menu_icon(),
        icons.moon_icon_outline(),
        icons.share_icon_solid(),
        icons.sun_icon_outline(),
        icons.upload_icon(),
        icons.user_icon_multiple_outline(),
    ]
    for markup in rendered:
        root = parse(markup)
        assert root.get("fill") == "none"
        assert root.get("stroke") == "currentColor"
        assert root.get("stroke-width") == "1.5"
        assert root.get("class") == "size-6"
        for path in paths(root):
            assert path.get("stroke-linecap") == "round"
            assert path.get("stroke-linejoin") == "round"


def test_solid_icons_are_filled():
    rendered = [
        icons.calendar_icon_solid(),
        icons.cloud_download_icon_solid(),
        icons.cloud_upload_icon_solid(),
        icons.cog_solid(),
        icons.home_icon(),
        icons.home_icon_solid(),
        icons.plus_icon(),
        icons.scan_qr_icon(),
        icons.user_icon_multiple_solid(),
    ]
    for markup in rendered:
        root = parse(markup)
        assert root.get("fill") == "currentColor"
        assert root.get("stroke") is None
        assert root.get("class") == "size-6"


@pytest.mark.parametrize(
    "icon", [icons.calendar_icon_solid, icons.cog_solid, icons.plus_icon, icons.cloud_upload_icon_solid]
)
def test_even_odd_icons_carry_rules(icon):
    for path in paths(parse(icon())):
        assert path.get("fill-rule") == "evenodd"
        assert path.get("clip-rule") == "evenodd"


def test_chevron_left_path():
    (path,) = paths(parse(icons.chevron_left_icon()))
    assert path.get("d") == "M15.75 19.5 8.25 12l7.5-7.5"


def test_menu_icon_path():
    (path,) = paths(parse(icons.menu_icon()))
    assert path.get("d") == "M3.75 6.75h16.5M3.75 12h16.5m-16.5 5.25h16.5"


def test_settings_outline_has_gear_and_centre():
    drawn = [path.get("d") for path in paths(parse(icons.settings_icon_outline()))]
    assert drawn[-1] == "M15 12a3 3 0 1 1-6 0 3 3 0 0 1 6 0Z"
    assert len(drawn) == 2


def test_home_icon_solid_has_roof_and_body():
    drawn = [path.get("d") for path in paths(parse(icons.home_icon_solid()))]
    assert len(drawn) == 2
    assert drawn[1].endswith("L12 5.432Z")


def test_cloud_upload_icon_appends_class():
    root = parse(icons.cloud_upload_icon("animate-pulse"))
    assert root.get("class").split() == ["size-6", "animate-pulse"]


def test_cloud_upload_icon_default_class():
    root = parse(icons.cloud_upload_icon())
    assert root.get("class").split() == ["size-6"]


def test_cloud_upload_icon_escapes_class():
    root = parse(icons.cloud_upload_icon('a"<b>'))
    assert root.get("class") == 'size-6 a"<b>'


@pytest.mark.parametrize(
    ("icon", "expected"),
    [
        (icons.history_icon, "M12 6v6h4.5m4.5 0a9 9 0 1 1-18 0 9 9 0 0 1 18 0Z"),
        (
            icons.scan_qr_icon,
            "M15 3H21V8H19V5H15V3ZM9 3V5H5V8H3V3H9ZM15 21V19H19V16H21V21H15ZM9 21H3V16H5V19H9V21ZM3 11H21V13H3V11Z",
        ),
        (
            icons.download_icon,
            "M3 16.5v2.25A2.25 2.25 0 0 0 5.25 21h13.5A2.25 2.25 0 0 0 21 18.75V16.5M16.5 12 12 16.5m0 0L7.5 12m4.5 4.5V3",
        ),
        (
            icons.upload_icon,
            "M3 16.5v2.25A2.25 2.25 0 0 0 5.25 21h13.5A2.25 2.25 0 0 0 21 18.75V16.5m-13.5-9L12 3m0 0 4.5 4.5M12 3v13.5",
        ),
        (icons.chevron_up_down_icon, "M8.25 15 12 18.75 15.75 15m-7.5-6L12 5.25 15.75 9"),
    ],
)
def test_pinned_single_paths(icon, expected):
    (path,) = paths(parse(icon()))
    assert path.get("d") == expected


def test_upload_and_download_differ():
    up = paths(parse(icons.cloud_upload_icon_solid()))[0].get("d")
    down = paths(parse(icons.cloud_download_icon_solid()))[0].get("d")
    assert up != down
    assert up.split("Z")[0] == down.split("Z")[0]