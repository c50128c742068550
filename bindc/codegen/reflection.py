"""Reflection metadata emitter.

Turns a resolved BindingDescriptor into a JSON-ready dict so a runtime can
create its bind group layout without hardcoded values. Each binding carries
its slot, the visible stages and the resource type's own fields.
"""

from __future__ import annotations

import dataclasses
import enum
import json

from bindc.builtins.types import StageFlag, ResourceType
from bindc.descriptor import BindingDescriptor, BindingEntry

REFLECTION_VERSION = 1

# Stable output order for visibility lists
_STAGE_NAMES = (
    (StageFlag.VERTEX, "vertex"),
    (StageFlag.FRAGMENT, "fragment"),
    (StageFlag.COMPUTE, "compute"),
)


def generate_reflection(descriptor: BindingDescriptor, source_name: str = "") -> dict:
    """Generate reflection metadata for a binding descriptor.

    Args:
        descriptor: The resolved layout.
        source_name: Name of the layout source, recorded for tooling.

    Returns:
        A dict with ``version``, ``source``, ``label`` and ``bindings``.
    """
    return {
        "version": REFLECTION_VERSION,
        "source": source_name,
        "label": descriptor.label,
        "bindings": [_reflect_entry(e) for e in descriptor.entries],
    }


def emit_reflection_json(reflection: dict) -> str:
    return json.dumps(reflection, indent=2) + "\n"


def _reflect_entry(entry: BindingEntry) -> dict:
    result = {
        "binding": entry.slot,
        "visibility": _reflect_visibility(entry.visibility),
    }
    result.update(_reflect_resource_type(entry.resource_type))
    return result


def _reflect_visibility(flags: StageFlag) -> list[str]:
    return [name for flag, name in _STAGE_NAMES if flag in flags]


def _reflect_resource_type(resource_type: ResourceType) -> dict:
    result = {"type": resource_type.kind}
    for f in dataclasses.fields(resource_type):
        value = getattr(resource_type, f.name)
        if isinstance(value, enum.Enum):
            value = value.value
        result[f.name] = value
    return result
