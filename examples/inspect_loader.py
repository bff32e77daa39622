"""Walk through blob id calculation and loader verification for one predicate."""
from __future__ import annotations

import json
import sys
from pathlib import Path

from predicate_verify import compute_blob_id, parse_loader, split, verify
from predicate_verify.layout import LayoutDescriptor


def main() -> None:
    if len(sys.argv) < 4:
        print("Usage: python inspect_loader.py <predicate.bin> <abi.json> <loader.bin>")
        print("Example: python inspect_loader.py fixtures/predicate.bin fixtures/predicate-abi.json fixtures/predicate-loader.bin")
        sys.exit(1)

    program = Path(sys.argv[1]).read_bytes()
    layout = LayoutDescriptor.from_abi(json.loads(Path(sys.argv[2]).read_text(encoding="utf-8")))
    loader = Path(sys.argv[3]).read_bytes()

    blob_id = compute_blob_id(program, layout)
    code, configurables = split(program, layout)
    print(f"--- Blob: {blob_id} ---")
    print(f"  Code section: {len(code)} bytes")
    print(f"  Configurables: {len(configurables)} bytes\n")

    parsed = parse_loader(loader)
    if parsed is None:
        print("Not a loader: image shorter than the loader header.")
        sys.exit(1)

    print("--- Loader ---")
    print(f"  Instructions: {len(parsed.instructions)} bytes")
    print(f"  Embedded blob id: {parsed.blob_id_hex}")
    print(f"  Section length: {parsed.section_length}")
    print(f"  Configurables: {len(parsed.configurables)} bytes\n")

    ok = verify(program, layout, loader)
    print(f"Verification: {'MATCH' if ok else 'MISMATCH'}")

    reduction = (1 - len(loader) / len(program)) * 100
    print(f"Size: {len(program)} -> {len(loader)} bytes ({reduction:.2f}% smaller)")
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
