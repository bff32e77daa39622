"""Predicate Core - Shared layout constants and hex encoding."""
from .encoding import bytes_to_hex, hex_to_bytes, pad_address

__all__ = ["bytes_to_hex", "hex_to_bytes", "pad_address"]
