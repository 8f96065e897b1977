import base64

import pytest

from askit.base64codec import decode, encode, encode_url


def test_encode_worked_example():
    assert encode(b"Man") == "TWFu"


def test_encode_single_byte_padded():
    assert encode(b"M") == "TQ=="


def test_encode_matches_standard_library():
    data = bytes(range(256))
    assert encode(data) == base64.b64encode(data).decode("ascii")


def test_encode_accepts_text():
    assert encode("Man") == encode(b"Man")


def test_url_encoding_has_no_padding():
    data = b"\xfb\xff"
    result = encode_url(data)
    assert "=" not in result
    assert result == base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def test_encode_url_flag_equals_encode_url():
    data = b"\xfa\xfb\xfc\xfd"
    assert encode(data, url=True) == encode_url(data)


@pytest.mark.parametrize("data", [b"", b"a", b"ab", b"abc", b"hello world", bytes(range(1, 200))])
def test_round_trip_standard(data):
    assert decode(encode(data)) == data


@pytest.mark.parametrize("data", [b"a", b"ab", b"abc", b"\xfb\xff\xfe", bytes(range(1, 200))])
def test_round_trip_url(data):
    assert decode(encode_url(data), url=True) == data


def test_decode_stops_at_padding():
    assert decode("TQ==AAAA") == decode("TQ==")


def test_unknown_characters_count_as_zero():
    assert decode("TW@u") == decode("TWAu")


def test_decode_ends_at_zero_byte():
    assert decode(encode(b"ab\0cd")) == b"ab"