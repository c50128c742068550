"""bindc: compile binding layout descriptions into structured descriptors."""

from bindc.compiler import compile_layout
from bindc.descriptor import BindingDescriptor, BindingEntry
from bindc.errors import LayoutError, LayoutResolveError, LayoutSyntaxError

__all__ = [
    "compile_layout",
    "BindingDescriptor",
    "BindingEntry",
    "LayoutError",
    "LayoutResolveError",
    "LayoutSyntaxError",
]
