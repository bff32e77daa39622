"""Configurable layout records read from a compiled predicate ABI."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from .const import EmptyLayout, InvalidAbi, OffsetOutOfRange


@dataclass(frozen=True)
class ConfigurableEntry:
    name: str
    offset: int

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise OffsetOutOfRange(f"{self.name} at {self.offset}")


@dataclass(frozen=True)
class LayoutDescriptor:
    """Ordered configurable entries of one program image.

    The smallest offset is where the configurables section begins.
    An empty descriptor cannot locate that boundary and is rejected here.
    """

    entries: tuple[ConfigurableEntry, ...]

    def __post_init__(self) -> None:
        if not self.entries:
            raise EmptyLayout("no configurables found in ABI")

    @classmethod
    def of(cls, entries: Iterable[ConfigurableEntry]) -> "LayoutDescriptor":
        return cls(tuple(entries))

    @classmethod
    def from_abi(cls, abi: Mapping[str, Any]) -> "LayoutDescriptor":
        """Build from a compiler ABI; only `name` and `offset` are read."""
        if not isinstance(abi, Mapping):
            raise InvalidAbi(f"expected a JSON object, got {type(abi).__name__}")
        raw = abi.get("configurables") or []
        if not isinstance(raw, list):
            raise InvalidAbi(f"configurables must be a list, got {type(raw).__name__}")
        return cls.of(_entry_from_abi(i, c) for i, c in enumerate(raw))


def as_layout(layout: LayoutDescriptor | Mapping[str, Any]) -> LayoutDescriptor:
    if isinstance(layout, LayoutDescriptor):
        return layout
    return LayoutDescriptor.from_abi(layout)


def _entry_from_abi(index: int, raw: Any) -> ConfigurableEntry:
    if not isinstance(raw, Mapping):
        raise InvalidAbi(f"configurable #{index} is {type(raw).__name__}, not an object")
    name = raw.get("name", "")
    offset = raw.get("offset")
    # bool is an int subclass; floats would silently truncate
    if not isinstance(offset, int) or isinstance(offset, bool):
        raise InvalidAbi(f"configurable #{index} {name!r} has non-integer offset {offset!r}")
    return ConfigurableEntry(str(name), offset)
