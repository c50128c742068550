"""Texture storage formats of the wgpu target API."""

from __future__ import annotations
import enum


class StorageFormat(enum.Enum):
    # 8 bit
    R8UNORM = "r8unorm"
    R8SNORM = "r8snorm"
    R8UINT = "r8uint"
    R8SINT = "r8sint"
    # 16 bit
    R16UINT = "r16uint"
    R16SINT = "r16sint"
    R16FLOAT = "r16float"
    RG8UNORM = "rg8unorm"
    RG8SNORM = "rg8snorm"
    RG8UINT = "rg8uint"
    RG8SINT = "rg8sint"
    # 32 bit
    R32UINT = "r32uint"
    R32SINT = "r32sint"
    R32FLOAT = "r32float"
    RG16UINT = "rg16uint"
    RG16SINT = "rg16sint"
    RG16FLOAT = "rg16float"
    RGBA8UNORM = "rgba8unorm"
    RGBA8UNORM_SRGB = "rgba8unorm-srgb"
    RGBA8SNORM = "rgba8snorm"
    RGBA8UINT = "rgba8uint"
    RGBA8SINT = "rgba8sint"
    BGRA8UNORM = "bgra8unorm"
    BGRA8UNORM_SRGB = "bgra8unorm-srgb"
    RGB10A2UNORM = "rgb10a2unorm"
    RG11B10UFLOAT = "rg11b10ufloat"
    # 64 bit
    RG32UINT = "rg32uint"
    RG32SINT = "rg32sint"
    RG32FLOAT = "rg32float"
    RGBA16UINT = "rgba16uint"
    RGBA16SINT = "rgba16sint"
    RGBA16FLOAT = "rgba16float"
    # 128 bit
    RGBA32UINT = "rgba32uint"
    RGBA32SINT = "rgba32sint"
    RGBA32FLOAT = "rgba32float"
    # Depth and stencil
    DEPTH32FLOAT = "depth32float"
    DEPTH24PLUS = "depth24plus"
    DEPTH24PLUS_STENCIL8 = "depth24plus-stencil8"


# Grammar spelling -> format. Tokens are case-sensitive.
STORAGE_FORMAT_TOKENS: dict[str, StorageFormat] = {
    "R8Unorm": StorageFormat.R8UNORM,
    "R8Snorm": StorageFormat.R8SNORM,
    "R8Uint": StorageFormat.R8UINT,
    "R8Sint": StorageFormat.R8SINT,
    "R16Uint": StorageFormat.R16UINT,
    "R16Sint": StorageFormat.R16SINT,
    "R16Float": StorageFormat.R16FLOAT,
    "Rg8Unorm": StorageFormat.RG8UNORM,
    "Rg8Snorm": StorageFormat.RG8SNORM,
    "Rg8Uint": StorageFormat.RG8UINT,
    "Rg8Sint": StorageFormat.RG8SINT,
    "R32Uint": StorageFormat.R32UINT,
    "R32Sint": StorageFormat.R32SINT,
    "R32Float": StorageFormat.R32FLOAT,
    "Rg16Uint": StorageFormat.RG16UINT,
    "Rg16Sint": StorageFormat.RG16SINT,
    "Rg16Float": StorageFormat.RG16FLOAT,
    "Rgba8Unorm": StorageFormat.RGBA8UNORM,
    "Rgba8UnormSrgb": StorageFormat.RGBA8UNORM_SRGB,
    "Rgba8Snorm": StorageFormat.RGBA8SNORM,
    "Rgba8Uint": StorageFormat.RGBA8UINT,
    "Rgba8Sint": StorageFormat.RGBA8SINT,
    "Bgra8Unorm": StorageFormat.BGRA8UNORM,
    "Bgra8UnormSrgb": StorageFormat.BGRA8UNORM_SRGB,
    "Rgb10a2Unorm": StorageFormat.RGB10A2UNORM,
    "Rg11b10Float": StorageFormat.RG11B10UFLOAT,
    "Rg32Uint": StorageFormat.RG32UINT,
    "Rg32Sint": StorageFormat.RG32SINT,
    "Rg32Float": StorageFormat.RG32FLOAT,
    "Rgba16Uint": StorageFormat.RGBA16UINT,
    "Rgba16Sint": StorageFormat.RGBA16SINT,
    "Rgba16Float": StorageFormat.RGBA16FLOAT,
    "Rgba32Uint": StorageFormat.RGBA32UINT,
    "Rgba32Sint": StorageFormat.RGBA32SINT,
    "Rgba32Float": StorageFormat.RGBA32FLOAT,
    "Depth32Float": StorageFormat.DEPTH32FLOAT,
    "Depth24Plus": StorageFormat.DEPTH24PLUS,
    "Depth24PlusStencil8": StorageFormat.DEPTH24PLUS_STENCIL8,
}


def lookup_storage_format(token: str) -> StorageFormat | None:
    return STORAGE_FORMAT_TOKENS.get(token)
