"""Tests for the layout parser and parse tree construction."""

import pytest
from bindc.parser.tree_builder import parse_layout
from bindc.parser.ast_nodes import (
    Layout, LabelDirective, GroupDirective, VisibilityExpr, SlotDecl,
    PlainTypeExpr, TextureTypeExpr, Modifier,
)
from bindc.builtins.types import ResourceKind, TextureKind, ModifierKind, ComponentType
from bindc.errors import LayoutSyntaxError


class TestBasicParsing:
    def test_empty_source(self):
        layout = parse_layout("")
        assert isinstance(layout, Layout)
        assert layout.directives == []

    def test_empty_braces(self):
        layout = parse_layout("{}")
        assert layout.directives == []

    def test_label(self):
        layout = parse_layout('Label => "named",')
        assert len(layout.directives) == 1
        d = layout.directives[0]
        assert isinstance(d, LabelDirective)
        assert d.text == "named"

    def test_label_escaped_quote(self):
        layout = parse_layout(r'Label => "say \"hi\"",')
        assert layout.directives[0].text == 'say "hi"'

    @pytest.mark.parametrize("literal,text", [
        (r'"a\nb"', "a\nb"),
        (r'"a\tb"', "a\tb"),
        (r'"caf\u00e9"', "caf\u00e9"),
        (r'"back\\slash"', "back\\slash"),
    ])
    def test_label_escapes_decoded(self, literal, text):
        layout = parse_layout(f"Label => {literal},")
        assert layout.directives[0].text == text

    def test_label_bad_escape(self):
        with pytest.raises(LayoutSyntaxError) as info:
            parse_layout(r'Label => "bad \x escape",', source_name="bad.layout")
        assert info.value.line == 1
        assert "bad.layout" in str(info.value)

    def test_single_stage_group(self):
        layout = parse_layout("Vertex => { 1 => Buffer, },")
        group = layout.directives[0]
        assert isinstance(group, GroupDirective)
        assert group.visibility.stages == ["Vertex"]
        assert len(group.slots) == 1
        assert group.slots[0].slot == 1
        assert isinstance(group.slots[0].type_expr, PlainTypeExpr)
        assert group.slots[0].type_expr.kind is ResourceKind.BUFFER
        assert group.slots[0].type_expr.modifiers == []

    def test_none_stage(self):
        layout = parse_layout("None => { 0 => Sampler, },")
        assert layout.directives[0].visibility.stages == ["None"]

    def test_stage_union(self):
        layout = parse_layout("{ Compute | Fragment } => { 1 => Buffer, },")
        assert layout.directives[0].visibility.stages == ["Compute", "Fragment"]

    def test_three_stage_union(self):
        layout = parse_layout("{ Vertex | Fragment | Compute } => {},")
        assert layout.directives[0].visibility.stages == ["Vertex", "Fragment", "Compute"]

    def test_empty_group(self):
        layout = parse_layout("Fragment => {},")
        assert layout.directives[0].slots == []

    def test_trailing_commas_optional(self):
        with_commas = parse_layout("Vertex => { 1 => Buffer, 2 => Sampler, },")
        without = parse_layout("Vertex => { 1 => Buffer, 2 => Sampler }")
        assert [s.slot for s in with_commas.directives[0].slots] == [1, 2]
        assert [s.slot for s in without.directives[0].slots] == [1, 2]

    def test_wrapped_in_braces(self):
        src = """
        {
            Label => "wrapped",
            Vertex => { 0 => Buffer, },
        }
        """
        layout = parse_layout(src)
        assert len(layout.directives) == 2
        assert layout.directives[0].text == "wrapped"

    def test_comments_ignored(self):
        src = """
        // camera data
        Vertex => {
            0 => Buffer, // view-projection
        },
        """
        layout = parse_layout(src)
        assert layout.directives[0].slots[0].slot == 0

    def test_directive_order_kept(self):
        src = 'Label => "a", Vertex => {}, Label => "b",'
        layout = parse_layout(src)
        kinds = [type(d) for d in layout.directives]
        assert kinds == [LabelDirective, GroupDirective, LabelDirective]


class TestTypeExpressions:
    def _type_of(self, decl: str):
        layout = parse_layout(f"Vertex => {{ 0 => {decl}, }},")
        return layout.directives[0].slots[0].type_expr

    def test_plain_with_modifiers(self):
        t = self._type_of("StorageBuffer: Dyn + Readonly")
        assert t.kind is ResourceKind.STORAGE_BUFFER
        assert [m.kind for m in t.modifiers] == [ModifierKind.DYN, ModifierKind.READONLY]

    def test_sampler_cmp(self):
        t = self._type_of("Sampler: Cmp")
        assert t.kind is ResourceKind.SAMPLER
        assert t.modifiers[0].kind is ModifierKind.CMP

    def test_texture(self):
        t = self._type_of("Tex2DArray<Uint>")
        assert isinstance(t, TextureTypeExpr)
        assert t.kind is TextureKind.TEX_2D_ARRAY
        assert t.component_type is ComponentType.UINT
        assert t.modifiers == []

    @pytest.mark.parametrize("kind", list(TextureKind))
    def test_every_texture_kind(self, kind):
        t = self._type_of(f"{kind.value}<Float>")
        assert t.kind is kind

    def test_storage_modifier_argument(self):
        t = self._type_of("Tex2D<Sint>: Storage<Rgba32Uint> + Readonly")
        assert t.modifiers[0] == Modifier(ModifierKind.STORAGE, "Rgba32Uint", t.modifiers[0].loc)
        assert t.modifiers[1].kind is ModifierKind.READONLY
        assert t.modifiers[1].argument is None

    def test_modifiers_are_not_validated_by_parser(self):
        # Buffer + Storage has no rule, but the shape is grammatical
        t = self._type_of("Buffer: Storage<R8Unorm>")
        assert t.modifiers[0].kind is ModifierKind.STORAGE


class TestLocations:
    def test_slot_and_label_locations(self):
        src = 'Label => "x",\nVertex => {\n    7 => Buffer,\n},'
        layout = parse_layout(src)
        assert layout.directives[0].loc.line == 1
        group = layout.directives[1]
        assert group.loc.line == 2
        assert group.slots[0].loc.line == 3
        assert group.slots[0].loc.column == 5


class TestSyntaxErrors:
    @pytest.mark.parametrize("src", [
        "{ Vertex | Fragment | Compute | Vertex } => {},",
        "{ { Vertex | Fragment } | Compute } => {},",
        "{ None | Vertex } => {},",
        "{ Vertex } => {},",
        "Geometry => {},",
        "vertex => {},",
        "Vertex { 1 => Buffer, },",
        "Vertex => { 1 => Texture, },",
        "Vertex => { 1 => Tex2D, },",
        "Vertex => { 1 => Tex2D<Double>, },",
        "Vertex => { 1 => Buffer 2 => Buffer },",
        "Vertex => { Buffer, },",
        "Vertex => { -1 => Buffer, },",
        "Vertex => { 1 => Buffer: Fast, },",
        "Label => named,",
        "Vertex => {} Fragment => {}",
        "Vertex => { 1 => Buffer,",
    ])
    def test_rejected(self, src):
        with pytest.raises(LayoutSyntaxError):
            parse_layout(src)

    def test_error_reports_line(self):
        src = "Vertex => {\n    1 => Bufer,\n},"
        with pytest.raises(LayoutSyntaxError) as info:
            parse_layout(src)
        assert info.value.line == 2

    def test_truncated_input_reports_end_position(self):
        src = "Vertex => {\n    1 => Buffer,"
        with pytest.raises(LayoutSyntaxError, match="end of input") as info:
            parse_layout(src)
        assert info.value.line == 2
        assert info.value.column == 17

    def test_error_mentions_source_name(self):
        with pytest.raises(LayoutSyntaxError) as info:
            parse_layout("Geometry => {},", source_name="shadow.layout")
        assert "shadow.layout" in str(info.value)
