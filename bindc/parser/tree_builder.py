"""Lark Transformer that builds the layout parse tree."""

from __future__ import annotations
import ast
from pathlib import Path
from lark import Lark, Transformer, Token
from lark.exceptions import UnexpectedInput, VisitError

from bindc.parser.ast_nodes import (
    Layout, LabelDirective, GroupDirective, VisibilityExpr, SlotDecl,
    Modifier, PlainTypeExpr, TextureTypeExpr, SourceLocation,
)
from bindc.builtins.types import (
    ResourceKind, TextureKind, ModifierKind, COMPONENT_TYPE_TOKENS,
)
from bindc.errors import LayoutSyntaxError

_GRAMMAR_PATH = Path(__file__).parent.parent / "grammar" / "layout.lark"

_parser = Lark(
    _GRAMMAR_PATH.read_text(encoding="utf-8"),
    parser="earley",
    propagate_positions=True,
)


def _tok_loc(tok: Token) -> SourceLocation | None:
    if tok is not None and getattr(tok, "line", None) is not None:
        return SourceLocation(tok.line, tok.column)
    return None


def _unquote(tok: Token, source_name: str = "") -> str:
    try:
        return ast.literal_eval(str(tok))
    except (ValueError, SyntaxError) as exc:
        raise LayoutSyntaxError(
            f"Invalid string literal {str(tok)}: {exc}", tok.line, tok.column, source_name
        ) from exc


class LayoutTransformer(Transformer):
    def __init__(self, source_name: str = ""):
        super().__init__()
        self.source_name = source_name

    # --- Layout ---

    def start(self, items):
        return Layout(list(items))

    def label_directive(self, args):
        text = args[0]
        return LabelDirective(_unquote(text, self.source_name), _tok_loc(text))

    def group_directive(self, args):
        visibility = args[0]
        slots = [a for a in args[1:] if isinstance(a, SlotDecl)]
        return GroupDirective(visibility, slots, visibility.loc)

    # --- Visibility ---

    def single_stage(self, args):
        return VisibilityExpr([str(args[0])], _tok_loc(args[0]))

    def no_stage(self, args):
        return VisibilityExpr([str(args[0])], _tok_loc(args[0]))

    def stage_union(self, args):
        return VisibilityExpr([str(a) for a in args], _tok_loc(args[0]))

    # --- Slot declarations ---

    def slot_decl(self, args):
        slot, type_expr = args[0], args[1]
        return SlotDecl(int(slot), type_expr, _tok_loc(slot))

    def plain_type(self, args):
        kind = args[0]
        modifiers = [a for a in args[1:] if isinstance(a, Modifier)]
        return PlainTypeExpr(ResourceKind(str(kind)), modifiers, _tok_loc(kind))

    def texture_type(self, args):
        kind, component = args[0], args[1]
        modifiers = [a for a in args[2:] if isinstance(a, Modifier)]
        return TextureTypeExpr(
            TextureKind(str(kind)),
            COMPONENT_TYPE_TOKENS[str(component)],
            modifiers,
            _tok_loc(kind),
        )

    def modifier(self, args):
        keyword = args[0]
        if len(args) == 1:
            return Modifier(ModifierKind(str(keyword)), loc=_tok_loc(keyword))
        # Storage "<" NAME ">"
        return Modifier(ModifierKind.STORAGE, str(args[1]), _tok_loc(keyword))


def parse_layout(source: str, source_name: str = "") -> Layout:
    try:
        tree = _parser.parse(source)
    except UnexpectedInput as exc:
        raise LayoutSyntaxError.from_lark(exc, source, source_name) from exc
    try:
        return LayoutTransformer(source_name).transform(tree)
    except VisitError as exc:
        if isinstance(exc.orig_exc, LayoutSyntaxError):
            raise exc.orig_exc from None
        raise
