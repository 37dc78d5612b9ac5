import base64

import pytest

from osdrills.hexb64 import DEFAULT_HEX, hex_to_base64, main


def test_default_string_encodes_to_known_value():
    assert (
        hex_to_base64(DEFAULT_HEX)
        == "SSdtIGtpbGxpbmcgeW91ciBicmFpbiBsaWtlIGEgcG9pc29ub3VzIG11c2hyb29t"
    )


@pytest.mark.parametrize("hex_string", ["", "00", "ff00", "0123456789abcdef", "ABCDEF"])
def test_round_trip(hex_string):
    encoded = hex_to_base64(hex_string)
    assert base64.b64decode(encoded) == bytes.fromhex(hex_string)


def test_empty_input_gives_empty_output():
    assert hex_to_base64("") == ""


@pytest.mark.parametrize("bad", ["abc", "zz", "12 34", "0g"])
def test_invalid_hex_raises(bad):
    with pytest.raises(ValueError, match="Failed to decode hex"):
        hex_to_base64(bad)


def test_main_prints_default(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == hex_to_base64(DEFAULT_HEX)


def test_main_with_argument(capsys):
    assert main(["4d616e"]) == 0
    assert capsys.readouterr().out.strip() == "TWFu"


def test_main_reports_bad_input(capsys):
    assert main(["xyz"]) == 1
    assert "Failed to decode hex" in capsys.readouterr().err