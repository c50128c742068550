"""Resolve modifier-only resource kinds (buffers, storage buffers, samplers)."""

from __future__ import annotations
from bindc.parser.ast_nodes import PlainTypeExpr, Modifier
from bindc.builtins.types import (
    ResourceKind, ModifierKind, ResourceType,
    UniformBuffer, StorageBuffer, Sampler,
)
from bindc.errors import LayoutResolveError

_DYN = ModifierKind.DYN
_READONLY = ModifierKind.READONLY
_CMP = ModifierKind.CMP

# Every legal (kind, modifiers) pair. Anything missing is rejected.
_TRAIT_RULES: dict[tuple[ResourceKind, frozenset[ModifierKind]], ResourceType] = {
    (ResourceKind.BUFFER, frozenset()): UniformBuffer(dynamic=False),
    (ResourceKind.BUFFER, frozenset({_DYN})): UniformBuffer(dynamic=True),
    (ResourceKind.SAMPLER, frozenset()): Sampler(comparison=False),
    (ResourceKind.SAMPLER, frozenset({_CMP})): Sampler(comparison=True),
    (ResourceKind.STORAGE_BUFFER, frozenset()): StorageBuffer(dynamic=False, readonly=False),
    (ResourceKind.STORAGE_BUFFER, frozenset({_DYN})): StorageBuffer(dynamic=True, readonly=False),
    (ResourceKind.STORAGE_BUFFER, frozenset({_READONLY})): StorageBuffer(dynamic=False, readonly=True),
    (ResourceKind.STORAGE_BUFFER, frozenset({_DYN, _READONLY})): StorageBuffer(dynamic=True, readonly=True),
}


def modifier_set(modifiers: list[Modifier]) -> frozenset[ModifierKind]:
    """Collapse a modifier list into a set, rejecting repeats."""
    seen: set[ModifierKind] = set()
    for m in modifiers:
        if m.kind in seen:
            raise LayoutResolveError(f"Modifier '{m.kind.value}' given more than once", m.loc)
        seen.add(m.kind)
    return frozenset(seen)


def resolve_plain_type(expr: PlainTypeExpr) -> ResourceType:
    key = (expr.kind, modifier_set(expr.modifiers))
    rule = _TRAIT_RULES.get(key)
    if rule is None:
        names = " + ".join(m.kind.value for m in expr.modifiers)
        raise LayoutResolveError(
            f"'{expr.kind.value}' does not accept modifiers '{names}'", expr.loc
        )
    return rule
