from __future__ import annotations

from typing import Any, Mapping

from .blob import compute_blob_id
from .const import ERRORS
from .layout import LayoutDescriptor
from .loader import parse_loader


def verify_report(
    full_image: bytes,
    full_layout: LayoutDescriptor | Mapping[str, Any],
    loader_image: bytes,
) -> dict:
    errors = []
    expected = compute_blob_id(full_image, full_layout)

    parsed = parse_loader(loader_image)
    if parsed is None:
        errors.append({"code":"E_NOT_A_LOADER","message":ERRORS["E_NOT_A_LOADER"],"length":len(loader_image)})
        return {"status":"FAIL","error_count":len(errors),"errors":errors,"blob_id":expected}

    embedded = parsed.blob_id_hex
    if embedded != expected:
        errors.append({"code":"E_BLOB_ID_MISMATCH","message":ERRORS["E_BLOB_ID_MISMATCH"],"expected":expected,"embedded":embedded})
        return {"status":"FAIL","error_count":len(errors),"errors":errors,"blob_id":expected}

    return {"status":"PASS","error_count":0,"errors":[],"blob_id":expected}


def verify(
    full_image: bytes,
    full_layout: LayoutDescriptor | Mapping[str, Any],
    loader_image: bytes,
) -> bool:
    """True iff the loader embeds the blob id of full_image's code section."""
    return verify_report(full_image, full_layout, loader_image)["status"] == "PASS"
