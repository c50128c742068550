"""Walk the top-level directives and build the binding descriptor."""

from __future__ import annotations
import logging

from bindc.parser.ast_nodes import Layout, LabelDirective, GroupDirective
from bindc.analysis.entries import resolve_group
from bindc.descriptor import BindingDescriptor, BindingEntry
from bindc.errors import LayoutResolveError

logger = logging.getLogger(__name__)


def resolve_layout(layout: Layout) -> BindingDescriptor:
    """Resolve directives strictly left to right.

    A label directive replaces the running label (last one wins); a group
    directive appends its entries. The descriptor is only built once every
    directive has resolved, so a failure never leaves a partial result.
    """
    label: str | None = None
    entries: list[BindingEntry] = []

    for directive in layout.directives:
        if isinstance(directive, LabelDirective):
            if label is not None:
                logger.debug("Label %r overridden by %r", label, directive.text)
            label = directive.text
        elif isinstance(directive, GroupDirective):
            group_entries = resolve_group(directive)
            logger.debug(
                "Resolved group %s with %d entries",
                "|".join(directive.visibility.stages), len(group_entries),
            )
            entries.extend(group_entries)
        else:
            raise LayoutResolveError(f"Unsupported directive: {type(directive).__name__}")

    return BindingDescriptor(label=label, entries=tuple(entries))
