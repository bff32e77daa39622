"""Loader image parsing and construction.

Layout: [Instructions(48) | BlobId(32) | SectionLength(8, u64 BE) | Configurables(N)]
"""
from __future__ import annotations

import struct
from dataclasses import dataclass
from warnings import warn

from predicate_core.encoding import bytes_to_hex, hex_to_bytes
from predicate_core.protocol import (
    BLOB_ID_LEN,
    BLOB_ID_OFFSET,
    LOADER_HEADER_LEN,
    LOADER_INSTRUCTIONS_LEN,
    SECTION_LENGTH_FMT,
    SECTION_LENGTH_OFFSET,
)

from .const import MalformedLoader


@dataclass(frozen=True)
class LoaderComponents:
    instructions: bytes
    blob_id: bytes
    section_length: int
    configurables: bytes

    @property
    def blob_id_hex(self) -> str:
        return bytes_to_hex(self.blob_id)

    def to_dict(self) -> dict:
        return {
            "instructions_length": len(self.instructions),
            "blob_id": self.blob_id_hex,
            "section_length": self.section_length,
            "configurables_length": len(self.configurables),
        }


def parse_loader(image: bytes) -> LoaderComponents | None:
    """Decode a loader image, or return None if it is too short to be one.

    Trailing bytes are not checked against section_length; a mismatch is
    only warned about.
    """
    image = bytes(image)
    if len(image) < LOADER_HEADER_LEN:
        return None

    (section_length,) = struct.unpack_from(SECTION_LENGTH_FMT, image, SECTION_LENGTH_OFFSET)
    configurables = image[LOADER_HEADER_LEN:]
    if section_length != len(configurables):
        warn(
            f"Loader section length {section_length} != "
            f"{len(configurables)} trailing configurable bytes"
        )

    return LoaderComponents(
        instructions=image[:LOADER_INSTRUCTIONS_LEN],
        blob_id=image[BLOB_ID_OFFSET:SECTION_LENGTH_OFFSET],
        section_length=section_length,
        configurables=configurables,
    )


def build_loader(instructions: bytes, blob_id: bytes | str, configurables: bytes = b"") -> bytes:
    """Assemble a loader image referencing blob_id (raw or 0x hex)."""
    if isinstance(blob_id, str):
        blob_id = hex_to_bytes(blob_id)
    instructions = bytes(instructions)
    configurables = bytes(configurables)

    if len(instructions) != LOADER_INSTRUCTIONS_LEN:
        raise MalformedLoader(f"instructions are {len(instructions)} bytes, need {LOADER_INSTRUCTIONS_LEN}")
    if len(blob_id) != BLOB_ID_LEN:
        raise MalformedLoader(f"blob id is {len(blob_id)} bytes, need {BLOB_ID_LEN}")

    return (
        instructions
        + bytes(blob_id)
        + struct.pack(SECTION_LENGTH_FMT, len(configurables))
        + configurables
    )
