"""Resolved binding layout, handed to the graphics layer."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from bindc.builtins.types import StageFlag, ResourceType


@dataclass(frozen=True)
class BindingEntry:
    slot: int
    visibility: StageFlag
    resource_type: ResourceType


@dataclass(frozen=True)
class BindingDescriptor:
    label: Optional[str] = None
    entries: tuple[BindingEntry, ...] = ()

    @property
    def slots(self) -> list[int]:
        return [e.slot for e in self.entries]
