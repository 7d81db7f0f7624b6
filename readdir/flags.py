"""Display flags shared by every entry of one listing call."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields


@dataclass(frozen=True)
class DisplayFlags:
    """Named boolean switches controlling filtering, order, and size output."""

    all: bool = False
    reverse: bool = False
    unsorted: bool = False
    case_sensitive: bool = False
    show_size: bool = False
    human_readable: bool = False
    base_1000: bool = False

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if not isinstance(value, bool):
                raise TypeError(f"flag {field.name!r} must be a bool, got {type(value).__name__}")

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Return flag names in declaration order."""
        return tuple(field.name for field in fields(cls))

    @classmethod
    def from_mapping(cls, values: Mapping[str, bool]) -> "DisplayFlags":
        """Build flags from a name-to-bool mapping, rejecting unknown names."""
        known = set(cls.names())
        unknown = sorted(name for name in values if name not in known)
        if unknown:
            raise ValueError(f"unknown display flag(s): {', '.join(unknown)}")
        return cls(**dict(values))


__all__ = ["DisplayFlags"]
