import hashlib

import pytest

from predicate_verify.blob import HASHERS, compute_blob_id, section_offset, split
from predicate_verify.const import EmptyLayout, InvalidAbi, OffsetOutOfRange
from predicate_verify.layout import ConfigurableEntry, LayoutDescriptor

PROGRAM_LEN = 4112
OFFSET = 3928


def make_program(fill: int = 0) -> bytes:
    code = bytes(i % 251 for i in range(OFFSET))
    return code + bytes([fill]) * (PROGRAM_LEN - OFFSET)


def make_layout() -> LayoutDescriptor:
    return LayoutDescriptor.of([
        ConfigurableEntry("THRESHOLD", OFFSET + 32),
        ConfigurableEntry("OWNER_ADDRESS", OFFSET),
    ])


def test_section_offset_is_minimum():
    assert section_offset(make_layout()) == OFFSET


def test_empty_layout_rejected_at_construction():
    with pytest.raises(EmptyLayout):
        LayoutDescriptor.of([])
    with pytest.raises(EmptyLayout, match="no configurables"):
        section_offset({"configurables": []})
    with pytest.raises(EmptyLayout):
        LayoutDescriptor.from_abi({})


def test_negative_offset_rejected():
    with pytest.raises(OffsetOutOfRange):
        ConfigurableEntry("BAD", -1)


def test_from_abi_reads_name_and_offset():
    abi = {"configurables": [
        {"name": "OWNER_ADDRESS", "concreteTypeId": "b256", "offset": 3928},
        {"name": "THRESHOLD", "concreteTypeId": "u64", "offset": 3960},
    ]}
    layout = LayoutDescriptor.from_abi(abi)
    assert [e.name for e in layout.entries] == ["OWNER_ADDRESS", "THRESHOLD"]
    assert section_offset(abi) == 3928


def test_shared_minimum_offset_warns():
    layout = LayoutDescriptor.of([ConfigurableEntry("A", 8), ConfigurableEntry("B", 8)])
    with pytest.warns(UserWarning, match="share section offset 8"):
        assert section_offset(layout) == 8


def test_split_sizes():
    code, configurables = split(make_program(), make_layout())
    assert len(code) == 3928
    assert len(configurables) == 184
    assert code + configurables == make_program()


def test_split_at_end_gives_empty_configurables():
    layout = LayoutDescriptor.of([ConfigurableEntry("X", 4)])
    assert split(b"\x01\x02\x03\x04", layout) == (b"\x01\x02\x03\x04", b"")


def test_split_offset_past_end():
    layout = LayoutDescriptor.of([ConfigurableEntry("X", 5)])
    with pytest.raises(OffsetOutOfRange):
        split(b"\x01\x02\x03\x04", layout)


def test_blob_id_is_sha256_of_code_section():
    layout = LayoutDescriptor.of([ConfigurableEntry("X", 3)])
    blob_id = compute_blob_id(b"abc" + b"\xff" * 16, layout)
    assert blob_id == "0xba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


def test_blob_id_shape_and_determinism():
    program, layout = make_program(), make_layout()
    first = compute_blob_id(program, layout)
    assert first == compute_blob_id(program, layout)
    assert first.startswith("0x")
    assert len(first) == 66
    assert first == "0x" + hashlib.sha256(program[:OFFSET]).hexdigest()


def test_blob_id_ignores_configurables():
    layout = make_layout()
    assert compute_blob_id(make_program(0x00), layout) == compute_blob_id(make_program(0xAA), layout)


def test_blob_id_tracks_code_changes():
    layout = make_layout()
    program = bytearray(make_program())
    original = compute_blob_id(bytes(program), layout)
    program[OFFSET - 1] ^= 0x01
    assert compute_blob_id(bytes(program), layout) != original


def test_hasher_is_swappable():
    layout = LayoutDescriptor.of([ConfigurableEntry("X", 3)])
    blob_id = compute_blob_id(b"abcdef", layout, hasher=lambda b: hashlib.sha3_256(b).digest())
    assert blob_id == "0x" + hashlib.sha3_256(b"abc").hexdigest()
    assert HASHERS["sha256"](b"abc") == hashlib.sha256(b"abc").digest()


@pytest.mark.parametrize("abi", [
    [],
    {"configurables": {"OWNER_ADDRESS": 3928}},
    {"configurables": [3928]},
    {"configurables": [{"name": "X"}]},
    {"configurables": [{"name": "X", "offset": None}]},
    {"configurables": [{"name": "X", "offset": "3928"}]},
    {"configurables": [{"name": "X", "offset": 3.9}]},
    {"configurables": [{"name": "X", "offset": True}]},
])
def test_malformed_abi_rejected(abi):
    with pytest.raises(InvalidAbi):
        LayoutDescriptor.from_abi(abi)


def test_fractional_offset_does_not_split():
    with pytest.raises(InvalidAbi, match="non-integer offset 3.9"):
        split(b"abcdef", {"configurables": [{"name": "X", "offset": 3.9}]})
