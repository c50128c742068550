"""Resolve one visibility group into binding entries."""

from __future__ import annotations
from bindc.parser.ast_nodes import GroupDirective, PlainTypeExpr, TextureTypeExpr, TypeExpr
from bindc.builtins.types import ResourceType
from bindc.analysis.traits import resolve_plain_type
from bindc.analysis.textures import resolve_texture_type
from bindc.analysis.visibility import resolve_visibility
from bindc.descriptor import BindingEntry
from bindc.errors import LayoutResolveError


def resolve_type_expr(expr: TypeExpr) -> ResourceType:
    if isinstance(expr, PlainTypeExpr):
        return resolve_plain_type(expr)
    if isinstance(expr, TextureTypeExpr):
        return resolve_texture_type(expr)
    raise LayoutResolveError(f"Unsupported type expression: {type(expr).__name__}")


def resolve_group(group: GroupDirective) -> list[BindingEntry]:
    """Resolve every slot of a group, in declaration order.

    Slots are neither sorted nor deduplicated; repeated slot numbers are
    passed through for the consumer to reject.
    """
    visibility = resolve_visibility(group.visibility)
    entries = []
    for decl in group.slots:
        if decl.slot < 0:
            raise LayoutResolveError(f"Slot number must be non-negative, got {decl.slot}", decl.loc)
        entries.append(BindingEntry(decl.slot, visibility, resolve_type_expr(decl.type_expr)))
    return entries
