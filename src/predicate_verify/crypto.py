"""EIP-191 signature compaction for the predicate verifier.

A recoverable signature r | s | v is folded into r | s' where the top bit of
s' carries the recovery parity. secp256k1 s values never use that bit.
"""
from __future__ import annotations

from predicate_core.encoding import bytes_to_hex, hex_to_bytes
from predicate_core.protocol import (
    ACCEPTED_V,
    COMPACT_SIG_LEN,
    PARITY_BIT,
    RECOVERABLE_SIG_LEN,
    SIG_SCALAR_LEN,
    V_OFFSET,
)

from .const import MalformedSignature


def _as_bytes(signature: bytes | str) -> bytes:
    if isinstance(signature, str):
        try:
            return hex_to_bytes(signature)
        except ValueError as e:
            raise MalformedSignature(str(e)) from None
    return bytes(signature)


def recovery_parity(v: int, strict: bool = False) -> int:
    """Map v in either the {27, 28} or the {0, 1} convention to 0 or 1."""
    if strict and v not in ACCEPTED_V:
        raise MalformedSignature(f"recovery byte {v} not in {sorted(ACCEPTED_V)}")
    if v >= V_OFFSET:
        v -= V_OFFSET
    return v % 2


def to_compact(signature: bytes | str, strict: bool = False) -> bytes:
    sig = _as_bytes(signature)
    if len(sig) != RECOVERABLE_SIG_LEN:
        raise MalformedSignature(f"expected {RECOVERABLE_SIG_LEN} bytes, got {len(sig)}")

    r = sig[:SIG_SCALAR_LEN]
    s = bytearray(sig[SIG_SCALAR_LEN:2 * SIG_SCALAR_LEN])
    parity = recovery_parity(sig[-1], strict=strict)

    s[0] = (s[0] & ~PARITY_BIT & 0xFF) | (PARITY_BIT if parity else 0)
    return r + bytes(s)


def to_compact_hex(signature_hex: str, strict: bool = False) -> str:
    return bytes_to_hex(to_compact(signature_hex, strict=strict))


def from_compact(compact: bytes | str) -> tuple[bytes, bytes, int]:
    """Split a compact signature back into (r, s, v) with v in {27, 28}."""
    sig = _as_bytes(compact)
    if len(sig) != COMPACT_SIG_LEN:
        raise MalformedSignature(f"expected {COMPACT_SIG_LEN} bytes, got {len(sig)}")

    r = sig[:SIG_SCALAR_LEN]
    s = bytearray(sig[SIG_SCALAR_LEN:])
    parity = 1 if s[0] & PARITY_BIT else 0
    s[0] &= ~PARITY_BIT & 0xFF
    return r, bytes(s), V_OFFSET + parity
