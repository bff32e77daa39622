"""Generate a synthetic predicate program, its ABI and a matching loader.

The program bytes are random; only the layout matters to the verifier.
"""
import json
import random
import sys
from pathlib import Path

from predicate_core.encoding import hex_to_bytes, pad_address
from predicate_verify.blob import compute_blob_id, split
from predicate_verify.layout import LayoutDescriptor
from predicate_verify.loader import build_loader

# Sizes observed in compiled fixtures: 4112-byte program, configurables at 3928.
PROGRAM_LEN = 4112
CONFIGURABLES_OFFSET = 3928


def generate_fixture(output_dir: str, seed: int | None = None, owner: str | None = None) -> Path:
    rng = random.Random(seed)

    code = bytes(rng.getrandbits(8) for _ in range(CONFIGURABLES_OFFSET))
    configurables = bytes(rng.getrandbits(8) for _ in range(PROGRAM_LEN - CONFIGURABLES_OFFSET))
    owner_word = pad_address(owner or "0x" + rng.randbytes(20).hex())
    program = code + configurables

    abi = {
        "programType": "predicate",
        "configurables": [
            {"name": "OWNER_ADDRESS", "concreteTypeId": "b256", "offset": CONFIGURABLES_OFFSET},
            {"name": "THRESHOLD", "concreteTypeId": "u64", "offset": CONFIGURABLES_OFFSET + 32},
        ],
    }
    layout = LayoutDescriptor.from_abi(abi)
    _, program_configurables = split(program, layout)

    instructions = bytes(rng.getrandbits(8) for _ in range(48))
    loader = build_loader(
        instructions,
        compute_blob_id(program, layout),
        hex_to_bytes(owner_word),
    )

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    (out / "predicate.bin").write_bytes(program)
    (out / "predicate-abi.json").write_text(json.dumps(abi, indent=2) + "\n", encoding="utf-8")
    (out / "predicate-loader.bin").write_bytes(loader)

    print(f"GENERATED: {out}")
    print(f"  Program: {len(program)} bytes ({len(program_configurables)} configurable)")
    print(f"  Loader: {len(loader)} bytes")
    return out


if __name__ == "__main__":
    # Usage: python tools/make_fixture.py OUT_DIR [--seed N]
    args = [a for a in sys.argv[1:] if a]

    seed = None
    if "--seed" in args:
        i = args.index("--seed")
        if i + 1 >= len(args):
            raise SystemExit("--seed requires a value")
        seed = int(args[i + 1])
        args = args[:i] + args[i + 2:]

    out = args[0] if args else "fixtures"
    generate_fixture(out, seed=seed)
