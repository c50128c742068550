"""Resolve texture type expressions into sampled or storage textures.

A texture declaration without modifiers is a sampled texture. ``Storage<F>``
turns it into a storage texture of format ``F``; ``Readonly`` is only
meaningful next to ``Storage`` and may appear on either side of it.
"""

from __future__ import annotations
import logging

from bindc.parser.ast_nodes import TextureTypeExpr
from bindc.builtins.types import (
    ModifierKind, ResourceType, SampledTexture, StorageTexture,
)
from bindc.builtins.dimensions import texture_dimension
from bindc.builtins.formats import lookup_storage_format
from bindc.analysis.traits import modifier_set
from bindc.errors import LayoutResolveError

logger = logging.getLogger(__name__)

_TEXTURE_MODIFIERS = frozenset({ModifierKind.STORAGE, ModifierKind.READONLY})


def resolve_texture_type(expr: TextureTypeExpr) -> ResourceType:
    kinds = modifier_set(expr.modifiers)
    for m in expr.modifiers:
        if m.kind not in _TEXTURE_MODIFIERS:
            raise LayoutResolveError(
                f"Modifier '{m.kind.value}' is not valid on texture '{expr.kind.value}'", m.loc
            )

    dimension, multisampled = texture_dimension(expr.kind)

    if not kinds:
        return SampledTexture(
            dimension=dimension,
            multisampled=multisampled,
            component_type=expr.component_type,
        )

    if ModifierKind.STORAGE not in kinds:
        raise LayoutResolveError(
            f"'Readonly' on texture '{expr.kind.value}' requires a Storage<...> modifier",
            expr.loc,
        )

    storage = next(m for m in expr.modifiers if m.kind is ModifierKind.STORAGE)
    fmt = lookup_storage_format(storage.argument or "")
    if fmt is None:
        raise LayoutResolveError(f"Unknown storage format '{storage.argument}'", storage.loc)

    if multisampled:
        logger.debug(
            "Dropping multisample flag of '%s': storage textures are single-sampled",
            expr.kind.value,
        )

    return StorageTexture(
        dimension=dimension,
        component_type=expr.component_type,
        format=fmt,
        readonly=ModifierKind.READONLY in kinds,
    )
