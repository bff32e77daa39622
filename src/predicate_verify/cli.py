import functools
import json
from pathlib import Path

import click

from predicate_core.encoding import bytes_to_hex
from predicate_core.protocol import DEFAULT_HASH

from .blob import HASHERS, split
from .const import ERRORS
from .crypto import to_compact_hex
from .layout import LayoutDescriptor
from .loader import parse_loader
from .logic import verify_report

CANONICAL_JSON_KW = {"sort_keys": True, "separators": (",", ":"), "ensure_ascii": False}

_file = click.Path(exists=True, dir_okay=False, path_type=Path)


def _echo(obj) -> None:
    click.echo(json.dumps(obj, **CANONICAL_JSON_KW))


def _load_layout(path: Path) -> LayoutDescriptor:
    return LayoutDescriptor.from_abi(json.loads(path.read_text(encoding="utf-8")))


def _fail_closed(fn):
    """Single-line FATAL reason and exit 1 on bad input; no stack traces."""
    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except (ValueError, KeyError, OSError) as e:
            click.echo(f"FATAL: {e}")
            raise SystemExit(1)
    return wrapper


@click.group()
def main():
    """Predicate blob id, loader and signature checks."""


@main.command("blob-id")
@click.argument("bytecode", type=_file)
@click.argument("abi", type=_file)
@_fail_closed
def blob_id_cmd(bytecode: Path, abi: Path):
    """Compute the blob id of BYTECODE's code section."""
    image = bytecode.read_bytes()
    layout = _load_layout(abi)
    code, configurables = split(image, layout)
    _echo({
        "blob_id": bytes_to_hex(HASHERS[DEFAULT_HASH](code)),
        "offset": len(code),
        "code_length": len(code),
        "configurables_length": len(configurables),
    })


@main.command("loader")
@click.argument("bytecode", type=_file)
@_fail_closed
def loader_cmd(bytecode: Path):
    """Show the structure of a loader image."""
    image = bytecode.read_bytes()
    parsed = parse_loader(image)
    if parsed is None:
        errors = [{"code":"E_NOT_A_LOADER","message":ERRORS["E_NOT_A_LOADER"],"length":len(image)}]
        _echo({"status":"FAIL","error_count":len(errors),"errors":errors})
        raise SystemExit(1)
    _echo(parsed.to_dict())


@main.command("verify")
@click.argument("bytecode", type=_file)
@click.argument("abi", type=_file)
@click.argument("loader", type=_file)
@_fail_closed
def verify_cmd(bytecode: Path, abi: Path, loader: Path):
    """Check that LOADER references the blob built from BYTECODE."""
    result = verify_report(bytecode.read_bytes(), _load_layout(abi), loader.read_bytes())
    _echo(result)
    if result["status"] != "PASS":
        raise SystemExit(1)


@main.command("compact-sig")
@click.argument("signature")
@click.option("--strict", is_flag=True, help="Reject recovery bytes outside {0, 1, 27, 28}")
@_fail_closed
def compact_sig_cmd(signature: str, strict: bool):
    """Fold a 65-byte 0x-hex SIGNATURE into the 64-byte compact form."""
    _echo({"compact": to_compact_hex(signature, strict=strict)})


if __name__ == "__main__":
    main()
