"""Closed type sets for binding layouts.

Grammar-level kinds (``ResourceKind``, ``TextureKind``, ``ModifierKind``) use
their source token as the enum value, so the tree builder can convert a token
with ``Kind(token)``. Semantic enums use the WebGPU spelling as their value.
"""

from __future__ import annotations
import enum
from dataclasses import dataclass
from typing import ClassVar

from bindc.builtins.formats import StorageFormat


# --- Grammar-level kinds ---

class ResourceKind(enum.Enum):
    BUFFER = "Buffer"
    STORAGE_BUFFER = "StorageBuffer"
    SAMPLER = "Sampler"


class TextureKind(enum.Enum):
    TEX_1D = "Tex1D"
    TEX_1D_MS = "Tex1DMS"
    TEX_2D = "Tex2D"
    TEX_2D_MS = "Tex2DMS"
    TEX_3D = "Tex3D"
    TEX_3D_MS = "Tex3DMS"
    TEX_2D_ARRAY = "Tex2DArray"
    TEX_2D_ARRAY_MS = "Tex2DArrayMS"
    TEX_CUBE = "TexCube"
    TEX_CUBE_MS = "TexCubeMS"
    TEX_CUBE_ARRAY = "TexCubeArray"
    TEX_CUBE_ARRAY_MS = "TexCubeArrayMS"


class ModifierKind(enum.Enum):
    DYN = "Dyn"
    READONLY = "Readonly"
    CMP = "Cmp"
    STORAGE = "Storage"


# --- Semantic enums ---

class StageFlag(enum.IntFlag):
    NONE = 0
    VERTEX = 1
    FRAGMENT = 2
    COMPUTE = 4


class DimensionCategory(enum.Enum):
    D1 = "1d"
    D2 = "2d"
    D3 = "3d"
    D2_ARRAY = "2d-array"
    CUBE = "cube"
    CUBE_ARRAY = "cube-array"


class ComponentType(enum.Enum):
    FLOAT = "float"
    SINT = "sint"
    UINT = "uint"


COMPONENT_TYPE_TOKENS: dict[str, ComponentType] = {
    "Float": ComponentType.FLOAT,
    "Sint": ComponentType.SINT,
    "Uint": ComponentType.UINT,
}


# --- Resource types ---

@dataclass(frozen=True)
class ResourceType:
    kind: ClassVar[str] = ""


@dataclass(frozen=True)
class UniformBuffer(ResourceType):
    kind: ClassVar[str] = "uniform_buffer"
    dynamic: bool = False


@dataclass(frozen=True)
class StorageBuffer(ResourceType):
    kind: ClassVar[str] = "storage_buffer"
    dynamic: bool = False
    readonly: bool = False


@dataclass(frozen=True)
class Sampler(ResourceType):
    kind: ClassVar[str] = "sampler"
    comparison: bool = False


@dataclass(frozen=True)
class SampledTexture(ResourceType):
    kind: ClassVar[str] = "sampled_texture"
    dimension: DimensionCategory
    multisampled: bool
    component_type: ComponentType


@dataclass(frozen=True)
class StorageTexture(ResourceType):
    """Storage textures cannot be multisampled, so there is no such field."""
    kind: ClassVar[str] = "storage_texture"
    dimension: DimensionCategory
    component_type: ComponentType
    format: StorageFormat
    readonly: bool = False
