"""Shared finalize machinery for message option blocks.

Every option block is a frozen dataclass whose fields default to None.
``finalize`` turns a block into its wire form: a plain dict holding only
the populated fields, with nested blocks finalized recursively and enum
members replaced by their wire tokens.
"""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence, Type, TypeVar

E = TypeVar("E", bound=Enum)


def _wire_value(value: Any) -> Any:
    if isinstance(value, WireBlock):
        return value.finalize()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_wire_value(item) for item in value]
    if isinstance(value, Mapping):
        return dict(value)
    return value


@dataclass(frozen=True)
class WireBlock:
    """Base class for option blocks with omit-if-absent serialization."""

    def finalize(self) -> Dict[str, Any]:
        """Return the wire form of this block.

        Absent fields are omitted rather than sent as null. A block with no
        populated field finalizes to an empty dict.
        """
        wire: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            wire[f.name] = _wire_value(value)
        return wire

    def _coerce_enum(self, name: str, enum_type: Type[E]) -> None:
        value = getattr(self, name)
        if value is None or isinstance(value, enum_type):
            return
        if isinstance(value, str):
            try:
                object.__setattr__(self, name, enum_type(value.upper()))
                return
            except ValueError:
                pass
        allowed = ", ".join(member.value for member in enum_type)
        raise ValueError(f"{name} must be one of {allowed}, got: {value!r}")

    def _coerce_sequence(self, name: str) -> None:
        value = getattr(self, name)
        if value is None:
            return
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            raise TypeError(f"{name} must be a sequence of strings, got: {type(value).__name__}")
        object.__setattr__(self, name, tuple(value))

    def _coerce_mapping(self, name: str) -> None:
        value = getattr(self, name)
        if value is None:
            return
        if not isinstance(value, Mapping):
            raise TypeError(f"{name} must be a mapping, got: {type(value).__name__}")
        object.__setattr__(self, name, dict(value))

    def _check_block(self, name: str, block_type: type) -> None:
        value: Optional[Any] = getattr(self, name)
        if value is not None and not isinstance(value, block_type):
            raise TypeError(
                f"{name} must be a {block_type.__name__}, got: {type(value).__name__}"
            )
