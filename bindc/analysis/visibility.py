"""Resolve visibility expressions into stage flags."""

from __future__ import annotations
import functools
import operator

from bindc.parser.ast_nodes import VisibilityExpr
from bindc.builtins.types import StageFlag
from bindc.errors import LayoutResolveError

_STAGE_FLAGS: dict[str, StageFlag] = {
    "Vertex": StageFlag.VERTEX,
    "Fragment": StageFlag.FRAGMENT,
    "Compute": StageFlag.COMPUTE,
}

_MAX_UNION = 3


def resolve_visibility(expr: VisibilityExpr) -> StageFlag:
    stages = expr.stages
    if stages == ["None"]:
        return StageFlag.NONE

    if not 1 <= len(stages) <= _MAX_UNION:
        raise LayoutResolveError(
            f"Visibility takes 1 to {_MAX_UNION} stages, got {len(stages)}", expr.loc
        )

    flags = []
    for name in stages:
        flag = _STAGE_FLAGS.get(name)
        if flag is None:
            if name == "None":
                raise LayoutResolveError("'None' cannot be combined with other stages", expr.loc)
            raise LayoutResolveError(f"Unknown stage '{name}'", expr.loc)
        flags.append(flag)

    return functools.reduce(operator.or_, flags)
