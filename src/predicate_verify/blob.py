"""Content-addressed blob identification for compiled predicates.

BlobId = sha256(code_section). The configurables section is excluded so that
every deployment of the same code shares one blob.
"""
from __future__ import annotations

import hashlib
from typing import Any, Callable, Mapping
from warnings import warn

from predicate_core.encoding import bytes_to_hex
from predicate_core.protocol import DEFAULT_HASH

from .const import OffsetOutOfRange
from .layout import LayoutDescriptor, as_layout

Hasher = Callable[[bytes], bytes]


def sha256_digest(b: bytes) -> bytes:
    return hashlib.sha256(b).digest()


HASHERS: dict[str, Hasher] = {
    "sha256": sha256_digest,
}


def section_offset(layout: LayoutDescriptor | Mapping[str, Any]) -> int:
    layout = as_layout(layout)

    offsets = [e.offset for e in layout.entries]
    lowest = min(offsets)
    if offsets.count(lowest) > 1:
        names = [e.name for e in layout.entries if e.offset == lowest]
        warn(f"Configurables {names} share section offset {lowest}")
    return lowest


def split(
    image: bytes, layout: LayoutDescriptor | Mapping[str, Any]
) -> tuple[bytes, bytes]:
    """Split a program image into (code_section, configurables_section)."""
    image = bytes(image)
    offset = section_offset(layout)
    if offset > len(image):
        raise OffsetOutOfRange(f"offset {offset} > image length {len(image)}")
    return image[:offset], image[offset:]


def compute_blob_id(
    image: bytes,
    layout: LayoutDescriptor | Mapping[str, Any],
    hasher: Hasher = HASHERS[DEFAULT_HASH],
) -> str:
    code_section, _ = split(image, layout)
    return bytes_to_hex(hasher(code_section))
