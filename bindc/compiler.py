"""Top-level compiler orchestration."""

from __future__ import annotations
import dataclasses
import enum
import json
import logging

from bindc.parser.ast_nodes import Layout
from bindc.parser.tree_builder import parse_layout
from bindc.analysis.layout_resolver import resolve_layout
from bindc.descriptor import BindingDescriptor
from bindc.errors import LayoutResolveError

logger = logging.getLogger(__name__)


def compile_layout(source: str, source_name: str = "") -> BindingDescriptor:
    """Parse and resolve layout source into a binding descriptor.

    Raises LayoutSyntaxError when the source does not match the grammar and
    LayoutResolveError when a declaration has no resolution rule.
    """
    layout = parse_layout(source, source_name=source_name)
    try:
        descriptor = resolve_layout(layout)
    except LayoutResolveError as exc:
        if not source_name:
            raise
        raise exc.with_source(source_name) from exc
    logger.debug(
        "Compiled layout %s: label=%r, %d entries",
        source_name or "<string>", descriptor.label, len(descriptor.entries),
    )
    return descriptor


def dump_ast(layout: Layout) -> str:
    def _ser(obj):
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            d = {"_type": type(obj).__name__}
            for f in dataclasses.fields(obj):
                d[f.name] = _ser(getattr(obj, f.name))
            return d
        if isinstance(obj, list):
            return [_ser(x) for x in obj]
        if isinstance(obj, enum.Enum):
            return obj.value
        return obj

    return json.dumps(_ser(layout), indent=2)
