import pytest

from predicate_core.encoding import bytes_to_hex, hex_to_bytes, pad_address


def test_bytes_to_hex_lowercase_with_prefix():
    assert bytes_to_hex(bytes([0x01, 0x23, 0x45, 0x67, 0x89, 0xAB, 0xCD, 0xEF])) == "0x0123456789abcdef"


def test_bytes_to_hex_empty():
    assert bytes_to_hex(b"") == "0x"


def test_hex_to_bytes_accepts_optional_prefix():
    assert hex_to_bytes("0x0123456789ABCDEF") == bytes.fromhex("0123456789abcdef")
    assert hex_to_bytes("0123") == b"\x01\x23"
    assert hex_to_bytes("0x") == b""


@pytest.mark.parametrize("bad", ["0x123", "0xzz", "01 2"])
def test_hex_to_bytes_rejects_garbage(bad):
    with pytest.raises(ValueError):
        hex_to_bytes(bad)


def test_pad_address_to_word():
    padded = pad_address("0xAbCd000000000000000000000000000000001234")
    assert padded == "0x" + "0" * 24 + "abcd000000000000000000000000000000001234"
    assert len(padded) == 66


def test_pad_address_rejects_oversized():
    with pytest.raises(ValueError):
        pad_address("0x" + "1" * 65)


def test_pad_address_without_prefix():
    assert pad_address("FF") == "0x" + "0" * 62 + "ff"


def test_pad_address_rejects_non_hex():
    with pytest.raises(ValueError):
        pad_address("0xnothex")
