import sys
from pathlib import Path

from predicate_core.protocol import BLOB_ID_LEN, BLOB_ID_OFFSET


def main():
    if len(sys.argv) not in (2, 3):
        print("Usage: corrupt_blob_id.py <loader.bin> [byte_index]")
        raise SystemExit(2)

    p = Path(sys.argv[1])
    idx = int(sys.argv[2]) if len(sys.argv) == 3 else 0
    if not 0 <= idx < BLOB_ID_LEN:
        print(f"byte_index must be in [0, {BLOB_ID_LEN})")
        raise SystemExit(2)

    b = bytearray(p.read_bytes())
    if len(b) < BLOB_ID_OFFSET + BLOB_ID_LEN:
        print("File too small to hold a loader blob id.")
        raise SystemExit(2)

    # Flip one bit inside the embedded blob id so verification must fail.
    off = BLOB_ID_OFFSET + idx
    b[off] ^= 0x01
    p.write_bytes(bytes(b))
    print(f"Corrupted 1 byte at offset {off} in {p}")


if __name__ == "__main__":
    main()
