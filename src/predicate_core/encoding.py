"""Predicate tooling - hex encoding helpers."""
from __future__ import annotations

import binascii

from .protocol import WORD_HEX_DIGITS


def bytes_to_hex(b: bytes) -> str:
    """Encode bytes as lowercase hex with a 0x prefix. Empty input gives "0x"."""
    return "0x" + bytes(b).hex()


def hex_to_bytes(text: str) -> bytes:
    """Decode hex with an optional 0x prefix.

    Raises ValueError on odd length or non-hex characters.
    """
    clean = text[2:] if text[:2] in ("0x", "0X") else text
    if len(clean) % 2:
        raise ValueError(f"Odd-length hex string ({len(clean)} digits)")
    try:
        return binascii.unhexlify(clean)
    except binascii.Error as e:
        raise ValueError(f"Invalid hex string: {e}") from None


def pad_address(address: str) -> str:
    """Left-pad an EVM address to a 32-byte word for an address configurable."""
    clean = address.lower()
    if clean.startswith("0x"):
        clean = clean[2:]
    if len(clean) > WORD_HEX_DIGITS:
        raise ValueError(f"Address longer than 32 bytes: {address}")
    padded = clean.rjust(WORD_HEX_DIGITS, "0")
    return bytes_to_hex(hex_to_bytes(padded))
