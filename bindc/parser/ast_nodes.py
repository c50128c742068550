"""Parse tree definitions for binding layouts."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Union

from bindc.builtins.types import ResourceKind, TextureKind, ModifierKind, ComponentType


@dataclass
class SourceLocation:
    line: int
    column: int


# --- Layout ---

@dataclass
class Layout:
    directives: list[Directive] = field(default_factory=list)


@dataclass
class LabelDirective:
    text: str
    loc: Optional[SourceLocation] = None


@dataclass
class GroupDirective:
    visibility: VisibilityExpr
    slots: list[SlotDecl] = field(default_factory=list)
    loc: Optional[SourceLocation] = None


Directive = Union[LabelDirective, GroupDirective]


# --- Visibility ---

@dataclass
class VisibilityExpr:
    stages: list[str]  # "Vertex", "Fragment", "Compute" or "None"
    loc: Optional[SourceLocation] = None


# --- Slot declarations ---

@dataclass
class SlotDecl:
    slot: int
    type_expr: TypeExpr
    loc: Optional[SourceLocation] = None


@dataclass
class Modifier:
    kind: ModifierKind
    argument: Optional[str] = None  # storage format token for Storage<...>
    loc: Optional[SourceLocation] = None


@dataclass
class PlainTypeExpr:
    kind: ResourceKind
    modifiers: list[Modifier] = field(default_factory=list)
    loc: Optional[SourceLocation] = None


@dataclass
class TextureTypeExpr:
    kind: TextureKind
    component_type: ComponentType
    modifiers: list[Modifier] = field(default_factory=list)
    loc: Optional[SourceLocation] = None


TypeExpr = Union[PlainTypeExpr, TextureTypeExpr]
