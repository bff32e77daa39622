"""Predicate Verify - Blob identification, loader checks and signature compaction."""
from .blob import HASHERS, compute_blob_id, section_offset, split
from .const import EmptyLayout, InvalidAbi, MalformedLoader, MalformedSignature, OffsetOutOfRange, PredicateError
from .crypto import from_compact, to_compact, to_compact_hex
from .layout import ConfigurableEntry, LayoutDescriptor
from .loader import LoaderComponents, build_loader, parse_loader
from .logic import verify, verify_report

__all__ = [
    "HASHERS", "compute_blob_id", "section_offset", "split",
    "EmptyLayout", "InvalidAbi", "MalformedLoader", "MalformedSignature", "OffsetOutOfRange", "PredicateError",
    "from_compact", "to_compact", "to_compact_hex",
    "ConfigurableEntry", "LayoutDescriptor",
    "LoaderComponents", "build_loader", "parse_loader",
    "verify", "verify_report",
]
