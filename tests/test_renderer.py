"""Tests for MathMLRenderer on hand-built trees."""

import pytest

from texmark.attributes import Accent, ColumnAlign, DisplayStyle, LineThickness, Variant
from texmark.nodes import (
    Ampersand,
    Fenced,
    Frac,
    Function,
    Letter,
    Matrix,
    NewLine,
    Node,
    Number,
    Operator,
    OverOp,
    Row,
    SizedParen,
    Slashed,
    Space,
    Sqrt,
    StretchedOp,
    Style,
    Text,
    UnderOp,
    Undefined,
)
from texmark.renderers import ASTRenderer, MathMLRenderer

a, b, c, d = Letter("a"), Letter("b"), Letter("c"), Letter("d")


@pytest.fixture
def renderer() -> MathMLRenderer:
    return MathMLRenderer()


class TestLeaves:
    """Single-element output."""

    @pytest.mark.parametrize(
        ("node", "expected"),
        [
            (Number("3.14"), "<mn>3.14</mn>"),
            (Letter("x"), "<mi>x</mi>"),
            (Letter("R", Variant.DOUBLE_STRUCK), '<mi mathvariant="double-struck">R</mi>'),
            (Letter("x", Variant.BOLD_ITALIC), '<mi mathvariant="bold-italic">x</mi>'),
            (Operator("+"), "<mo>+</mo>"),
            (Operator("∂"), '<mo mathvariant="italic">∂</mo>'),
            (Function("sin"), "<mi>sin</mi>"),
            (Space(1.0), '<mspace width="1em"/>'),
            (Space(-0.1667), '<mspace width="-0.1667em"/>'),
            (Text("if"), "<mtext>if</mtext>"),
            (StretchedOp(True, "|"), '<mo stretchy="true">|</mo>'),
            (SizedParen("1.2em", "("), '<mrow><mo maxsize="1.2em" minsize="1.2em">(</mo></mrow>'),
        ],
    )
    def test_leaf(self, renderer: MathMLRenderer, node: Node, expected: str) -> None:
        assert renderer.render([node]) == expected

    def test_markup_characters_are_escaped(self, renderer: MathMLRenderer) -> None:
        assert renderer.render([Operator("<"), Text("a&b")]) == (
            "<mo>&lt;</mo><mtext>a&amp;b</mtext>"
        )


class TestComposites:
    """Nested elements."""

    def test_accent(self, renderer: MathMLRenderer) -> None:
        assert renderer.render([OverOp("^", Accent.TRUE, a)]) == (
            '<mover><mi>a</mi><mo accent="true">^</mo></mover>'
        )

    def test_under_accent(self, renderer: MathMLRenderer) -> None:
        assert renderer.render([UnderOp("_", Accent.TRUE, a)]) == (
            '<munder><mi>a</mi><mo accent="true">_</mo></munder>'
        )

    def test_root_puts_degree_last(self, renderer: MathMLRenderer) -> None:
        assert renderer.render([Sqrt(Number("3"), a)]) == "<mroot><mi>a</mi><mn>3</mn></mroot>"

    def test_square_root(self, renderer: MathMLRenderer) -> None:
        assert renderer.render([Sqrt(None, a)]) == "<msqrt><mi>a</mi></msqrt>"

    def test_fraction_without_bar(self, renderer: MathMLRenderer) -> None:
        assert renderer.render([Frac(a, b, LineThickness.ZERO)]) == (
            '<mfrac linethickness="0"><mi>a</mi><mi>b</mi></mfrac>'
        )

    def test_fenced_invisible_side(self, renderer: MathMLRenderer) -> None:
        assert renderer.render([Fenced("(", "", a)]) == (
            '<mrow><mo stretchy="true" form="prefix">(</mo><mi>a</mi>'
            '<mo stretchy="true" form="postfix"></mo></mrow>'
        )

    def test_style_display(self, renderer: MathMLRenderer) -> None:
        assert renderer.render([Style(DisplayStyle.INLINE, Row((a,)))]) == (
            '<mstyle displaystyle="false"><mrow><mi>a</mi></mrow></mstyle>'
        )

    def test_empty_row(self, renderer: MathMLRenderer) -> None:
        assert renderer.render([Row(())]) == "<mrow></mrow>"


class TestSlashed:
    """Slash overlay."""

    def test_letter_keeps_its_variant(self, renderer: MathMLRenderer) -> None:
        assert renderer.render([Slashed(Letter("x"))]) == (
            '<mi mathvariant="italic">x&#x0338;</mi>'
        )

    def test_operator(self, renderer: MathMLRenderer) -> None:
        assert renderer.render([Slashed(Operator("∂"))]) == "<mo>∂&#x0338;</mo>"

    def test_other_content_is_rendered_plain(self, renderer: MathMLRenderer) -> None:
        assert renderer.render([Slashed(Number("1"))]) == "<mn>1</mn>"


class TestMatrix:
    """Regrouping the flat cell list."""

    def test_two_by_two(self, renderer: MathMLRenderer) -> None:
        matrix = Matrix((a, Ampersand(), b, NewLine(), c, Ampersand(), d))
        assert renderer.render([matrix]) == (
            "<mtable>"
            "<mtr><mtd><mi>a</mi></mtd><mtd><mi>b</mi></mtd></mtr>"
            "<mtr><mtd><mi>c</mi></mtd><mtd><mi>d</mi></mtd></mtr>"
            "</mtable>"
        )

    def test_trailing_newline_adds_no_row(self, renderer: MathMLRenderer) -> None:
        assert renderer.render([Matrix((a, NewLine()))]) == (
            "<mtable><mtr><mtd><mi>a</mi></mtd></mtr></mtable>"
        )

    def test_empty_matrix(self, renderer: MathMLRenderer) -> None:
        assert renderer.render([Matrix(())]) == "<mtable><mtr><mtd></mtd></mtr></mtable>"

    def test_left_aligned(self, renderer: MathMLRenderer) -> None:
        assert renderer.render([Matrix((a,), ColumnAlign.LEFT)]) == (
            '<mtable columnalign="left"><mtr><mtd><mi>a</mi></mtd></mtr></mtable>'
        )


class TestPlaceholders:
    """Rendering never raises."""

    def test_undefined(self, renderer: MathMLRenderer) -> None:
        assert renderer.render([Undefined("Token(UNDEFINED, 'foo')")]) == (
            "<mtext>[PARSE ERROR: Token(UNDEFINED, 'foo')]</mtext>"
        )

    def test_bare_marker_outside_matrix(self, renderer: MathMLRenderer) -> None:
        assert renderer.render([Ampersand()]) == "<mtext>[PARSE ERROR: Ampersand()]</mtext>"


class TestRoot:
    """The ``<math>`` wrapper."""

    def test_render_math(self, renderer: MathMLRenderer) -> None:
        assert renderer.render_math([a], DisplayStyle.BLOCK) == (
            '<math xmlns="http://www.w3.org/1998/Math/MathML" display="block"><mi>a</mi></math>'
        )

    def test_custom_namespace(self) -> None:
        renderer = MathMLRenderer(namespace="urn:test")
        assert renderer.render_math([], DisplayStyle.INLINE) == (
            '<math xmlns="urn:test" display="inline"></math>'
        )

    def test_satisfies_protocol(self, renderer: MathMLRenderer) -> None:
        assert isinstance(renderer, ASTRenderer)
