"""Predicate loader protocol constants.

Single source of truth for loader image layout and signature sizes.
Keep this file stable. Loader builder and parser must remain synchronized.
"""

# Loader layout: [Instructions(48) | BlobId(32) | SectionLength(8) | Configurables(N)]
LOADER_INSTRUCTIONS_LEN = 48
BLOB_ID_LEN = 32
SECTION_LENGTH_FMT = ">Q"  # big-endian u64
SECTION_LENGTH_LEN = 8

BLOB_ID_OFFSET = LOADER_INSTRUCTIONS_LEN
SECTION_LENGTH_OFFSET = BLOB_ID_OFFSET + BLOB_ID_LEN
LOADER_HEADER_LEN = SECTION_LENGTH_OFFSET + SECTION_LENGTH_LEN  # 88

# Content addressing
DEFAULT_HASH = "sha256"

# Signatures: recoverable = r(32) | s(32) | v(1), compact = r(32) | s'(32)
SIG_SCALAR_LEN = 32
RECOVERABLE_SIG_LEN = 2 * SIG_SCALAR_LEN + 1
COMPACT_SIG_LEN = 2 * SIG_SCALAR_LEN

# Recovery indicator conventions (raw and Ethereum-offset)
V_OFFSET = 27
ACCEPTED_V = frozenset({0, 1, 27, 28})

# Top bit of s' carries the recovery parity
PARITY_BIT = 0x80

# Configurable values are 32-byte words
WORD_HEX_DIGITS = 64
