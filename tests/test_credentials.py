import pytest

from filesync.credentials import (
    WifiCredentials,
    generate_android_wifi_credentials,
    generate_passkey,
    generate_random_digits,
)


def test_random_digit_generator():
    digit = generate_random_digits()
    assert len(str(digit)) >= 4


def test_random_letters_generator():
    passkey = generate_passkey()
    assert len(passkey) == 8


def test_random_digits_stay_in_range():
    for _ in range(200):
        assert 1000 <= generate_random_digits() <= 9999


def test_passkey_is_printable_without_whitespace():
    for _ in range(50):
        passkey = generate_passkey()
        assert passkey.isprintable()
        assert not any(ch.isspace() for ch in passkey)


def test_display_format():
    creds = WifiCredentials(ssid=1234, passkey="secret")
    assert str(creds) == "1234::secret"


def test_default_credentials():
    creds = WifiCredentials()
    assert (creds.ssid, creds.passkey) == (0, "")


def test_dict_round_trip():
    creds = WifiCredentials(ssid=4321, passkey="placeholder")
    assert WifiCredentials.from_dict(creds.to_dict()) == creds


def test_to_dict_keys():
    creds = WifiCredentials(ssid=5000, passkey="token")
    assert creds.to_dict() == {"ssid": 5000, "passkey": "token"}


def test_from_dict_missing_field():
    with pytest.raises(ValueError, match="passkey"):
        WifiCredentials.from_dict({"ssid": 1000})


def test_ssid_out_of_range():
    with pytest.raises(ValueError):
        WifiCredentials(ssid=70000, passkey="secret")


def test_ssid_must_be_integer():
    with pytest.raises(TypeError):
        WifiCredentials(ssid="1234", passkey="secret")


def test_generated_credentials():
    creds = generate_android_wifi_credentials()
    assert 1000 <= creds.ssid <= 9999
    assert len(creds.passkey) == 8
    assert str(creds) == f"{creds.ssid}::{creds.passkey}"