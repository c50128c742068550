"""Texture kind -> (view dimension, multisampled) table."""

from __future__ import annotations
from bindc.builtins.types import TextureKind, DimensionCategory


# The MS suffix only toggles the multisample flag. Combinations the target
# API cannot multisample (3D, cube) are still listed; the consumer rejects
# them when it creates the layout object.
TEXTURE_DIMENSIONS: dict[TextureKind, tuple[DimensionCategory, bool]] = {
    TextureKind.TEX_1D: (DimensionCategory.D1, False),
    TextureKind.TEX_1D_MS: (DimensionCategory.D1, True),
    TextureKind.TEX_2D: (DimensionCategory.D2, False),
    TextureKind.TEX_2D_MS: (DimensionCategory.D2, True),
    TextureKind.TEX_3D: (DimensionCategory.D3, False),
    TextureKind.TEX_3D_MS: (DimensionCategory.D3, True),
    TextureKind.TEX_2D_ARRAY: (DimensionCategory.D2_ARRAY, False),
    TextureKind.TEX_2D_ARRAY_MS: (DimensionCategory.D2_ARRAY, True),
    TextureKind.TEX_CUBE: (DimensionCategory.CUBE, False),
    TextureKind.TEX_CUBE_MS: (DimensionCategory.CUBE, True),
    TextureKind.TEX_CUBE_ARRAY: (DimensionCategory.CUBE_ARRAY, False),
    TextureKind.TEX_CUBE_ARRAY_MS: (DimensionCategory.CUBE_ARRAY, True),
}


def texture_dimension(kind: TextureKind) -> tuple[DimensionCategory, bool]:
    return TEXTURE_DIMENSIONS[kind]
