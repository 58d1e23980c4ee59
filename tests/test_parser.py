"""Tests for the recursive descent parser."""

import pytest

from texmark import parse
from texmark.attributes import Accent, ColumnAlign, DisplayStyle, LineThickness, Variant
from texmark.errors import MissingDelimiterError, UnexpectedTokenError, UnknownEnvironmentError
from texmark.nodes import (
    Ampersand,
    Fenced,
    Frac,
    Function,
    Letter,
    Matrix,
    NewLine,
    Number,
    Operator,
    OtherOperator,
    OverOp,
    Overset,
    Row,
    SizedParen,
    Slashed,
    Sqrt,
    StretchedOp,
    Style,
    SubSup,
    Subscript,
    Superscript,
    Text,
    Under,
    UnderOver,
    Underset,
    Undefined,
)
from texmark.tokens import Token, TokenType

x, y, i, n = Letter("x"), Letter("y"), Letter("i"), Letter("n")


class TestScripts:
    """Subscripts, superscripts and primes."""

    def test_superscript(self) -> None:
        assert parse("x^2") == (Superscript(x, Number("2")),)

    def test_subscript_group(self) -> None:
        assert parse(r"g_{\mu\nu}") == (
            Subscript(Letter("g"), Row((Letter("μ"), Letter("ν")))),
        )

    def test_script_of_script_nests_right(self) -> None:
        assert parse("x_i^2") == (Subscript(x, Superscript(i, Number("2"))),)

    def test_prime(self) -> None:
        assert parse("f'") == (Superscript(Letter("f"), Operator("′")),)

    def test_double_prime(self) -> None:
        assert parse("f''") == (Superscript(Letter("f"), Operator("″")),)

    def test_prime_then_superscript(self) -> None:
        assert parse("f'^2") == (
            Superscript(Superscript(Letter("f"), Operator("′")), Number("2")),
        )


class TestDigitArguments:
    """``\\sqrt``/``\\frac`` take one bare digit."""

    def test_sqrt_takes_single_digit(self) -> None:
        assert parse(r"\sqrt12") == (Sqrt(None, Number("1")), Number("2"))

    def test_braced_sqrt_keeps_whole_number(self) -> None:
        assert parse(r"\sqrt{12}") == (Sqrt(None, Number("12")),)

    def test_spaced_sqrt_reads_whole_number(self) -> None:
        assert parse(r"\sqrt 12") == (Sqrt(None, Number("12")),)

    def test_frac_digits(self) -> None:
        assert parse(r"\frac12") == parse(r"\frac{1}{2}") == (Frac(Number("1"), Number("2")),)

    def test_sqrt_with_degree(self) -> None:
        assert parse(r"\sqrt[3]{x}") == (Sqrt(Number("3"), x),)

    def test_sqrt_argument_excludes_following_script(self) -> None:
        assert parse(r"\sqrt{x}^2") == (Superscript(Sqrt(None, x), Number("2")),)


class TestCommands:
    """Commands with arguments."""

    def test_binom(self) -> None:
        assert parse(r"\binom{n}{k}") == (
            Fenced("(", ")", Frac(n, Letter("k"), LineThickness.ZERO)),
        )

    def test_inline_binom_wraps_style(self) -> None:
        (node,) = parse(r"\tbinom{n}{k}")
        assert isinstance(node, Style)
        assert node.display is DisplayStyle.INLINE
        assert isinstance(node.content, Row)

    def test_accent(self) -> None:
        assert parse(r"\hat{x}") == (OverOp("^", Accent.TRUE, x),)

    def test_overset(self) -> None:
        assert parse(r"\overset{n}{X}") == (Overset(n, Letter("X")),)

    def test_underset(self) -> None:
        assert parse(r"\underset{n}{X}") == (Underset(n, Letter("X")),)

    def test_overbrace_without_label(self) -> None:
        assert parse(r"\overbrace{x}") == (Overset(Operator("⏞"), x),)

    def test_overbrace_with_label(self) -> None:
        assert parse(r"\overbrace{x}^{n}") == (Overset(Overset(n, Operator("⏞")), x),)

    def test_underbrace_with_label(self) -> None:
        assert parse(r"\underbrace{x}_{n}") == (Underset(Underset(n, Operator("⏟")), x),)

    def test_slashed(self) -> None:
        assert parse(r"\slashed{\partial}") == (Slashed(Operator("∂")),)

    def test_operatorname(self) -> None:
        assert parse(r"\operatorname{sn} x") == (Function("sn"), x)

    def test_text(self) -> None:
        assert parse(r"\text{and}") == (Text("and"),)

    def test_sized_paren(self) -> None:
        assert parse(r"\big(") == (SizedParen("1.2em", "("),)

    def test_sized_paren_requires_delimiter(self) -> None:
        with pytest.raises(UnexpectedTokenError) as exc_info:
            parse(r"\big x")
        assert exc_info.value.got == Token(TokenType.LETTER, "x", Variant.ITALIC)

    def test_bare_paren_is_plain_operator(self) -> None:
        assert parse("(x)") == (OtherOperator("("), x, OtherOperator(")"))


class TestStyle:
    """Font-style flooding."""

    def test_single_letter(self) -> None:
        assert parse(r"\mathbb{R}") == (Letter("R", Variant.DOUBLE_STRUCK),)

    def test_floods_nested_letters_only(self) -> None:
        assert parse(r"\mathbf{x_1 + \frac{a}{b}}") == (
            Row(
                (
                    Subscript(Letter("x", Variant.BOLD), Number("1")),
                    Operator("+"),
                    Frac(Letter("a", Variant.BOLD), Letter("b", Variant.BOLD)),
                )
            ),
        )

    def test_following_script_is_not_styled(self) -> None:
        assert parse(r"\mathbb{R}^n") == (Superscript(Letter("R", Variant.DOUBLE_STRUCK), n),)


class TestLimits:
    """Big operators, integrals and limit functions."""

    def test_big_operator_bare(self) -> None:
        assert parse(r"\sum") == (Operator("∑"),)

    def test_big_operator_under(self) -> None:
        assert parse(r"\prod_n n") == (Under(Operator("∏"), n), n)

    def test_big_operator_over(self) -> None:
        assert parse(r"\sum^n") == (Overset(n, Operator("∑")),)

    def test_big_operator_under_over(self) -> None:
        expected = (
            UnderOver(
                Operator("∑"),
                Row((i, Operator("="), Number("0"))),
                Letter("∞", Variant.NORMAL),
            ),
            i,
        )
        assert parse(r"\sum_{i=0}^\infty i") == expected
        assert parse(r"\sum^\infty_{i=0} i") == expected

    def test_integral_sub_sup_either_order(self) -> None:
        expected = (SubSup(Operator("∫"), Number("0"), Number("1")), Letter("d"), x)
        assert parse(r"\int_0^1 dx") == expected
        assert parse(r"\int^1_0 dx") == expected

    def test_integral_sub_only(self) -> None:
        assert parse(r"\oint_C") == (Subscript(Operator("∮"), Letter("C")),)

    def test_integral_sup_only(self) -> None:
        assert parse(r"\int^1") == (Superscript(Operator("∫"), Number("1")),)

    def test_limit(self) -> None:
        assert parse(r"\lim_{h \to 0}") == (
            Under(Function("lim"), Row((Letter("h"), Operator("→"), Number("0")))),
        )

    def test_limit_without_annotation(self) -> None:
        assert parse(r"\max x") == (Function("max"), x)


class TestFences:
    """``\\left``/``\\middle``/``\\right``."""

    def test_fenced(self) -> None:
        assert parse(r"\left( x \right)") == (Fenced("(", ")", x),)

    def test_invisible_side(self) -> None:
        assert parse(r"\left. x \right\}") == (Fenced("", "}", x),)

    def test_middle(self) -> None:
        assert parse(r"\left\{ x \middle| y \right\}") == (
            Fenced("{", "}", Row((x, StretchedOp(True, "|"), y))),
        )

    def test_left_without_delimiter(self) -> None:
        with pytest.raises(MissingDelimiterError) as exc_info:
            parse(r"\left x \right)")
        assert exc_info.value.location == Token(TokenType.LEFT)

    def test_right_without_delimiter(self) -> None:
        with pytest.raises(MissingDelimiterError) as exc_info:
            parse(r"\left( x \right x")
        assert exc_info.value.location == Token(TokenType.RIGHT)

    def test_missing_right(self) -> None:
        with pytest.raises(UnexpectedTokenError) as exc_info:
            parse(r"\left( x")
        assert exc_info.value.expected == Token(TokenType.RIGHT)
        assert exc_info.value.got == Token(TokenType.EOF)

    def test_middle_on_non_operator(self) -> None:
        with pytest.raises(MissingDelimiterError) as exc_info:
            parse(r"\left( x \middle y \right)")
        assert exc_info.value.location == Token(TokenType.MIDDLE)


class TestGroups:
    """Brace groups."""

    def test_single_node_group_is_unwrapped(self) -> None:
        assert parse("{x}") == (x,)

    def test_empty_group(self) -> None:
        assert parse("{}_n C") == (Subscript(Row(()), n), Letter("C"))

    def test_unclosed_group(self) -> None:
        with pytest.raises(UnexpectedTokenError) as exc_info:
            parse("{x")
        assert exc_info.value.expected == Token(TokenType.RBRACE)


class TestEnvironments:
    """``\\begin``/``\\end`` matrices."""

    def test_pmatrix(self) -> None:
        assert parse(r"\begin{pmatrix} x \\ y \end{pmatrix}") == (
            Fenced("(", ")", Matrix((x, NewLine(), y))),
        )

    def test_plain_matrix_has_no_fence(self) -> None:
        assert parse(r"\begin{matrix} a & b \end{matrix}") == (
            Matrix((Letter("a"), Ampersand(), Letter("b"))),
        )

    @pytest.mark.parametrize(
        ("name", "fence"),
        [("bmatrix", ("[", "]")), ("vmatrix", ("|", "|"))],
    )
    def test_fenced_variants(self, name: str, fence: tuple[str, str]) -> None:
        (node,) = parse(rf"\begin{{{name}}} x \end{{{name}}}")
        assert isinstance(node, Fenced)
        assert (node.open, node.close) == fence

    def test_align_is_left_aligned_matrix(self) -> None:
        (node,) = parse(r"\begin{align} x &= y \end{align}")
        assert node == Matrix((x, Ampersand(), Operator("="), y), ColumnAlign.LEFT)

    def test_cell_group_stays_a_row(self) -> None:
        (node,) = parse(r"\begin{matrix} {a b} \end{matrix}")
        assert node == Matrix((Row((Letter("a"), Letter("b"))),))

    def test_unknown_environment(self) -> None:
        with pytest.raises(UnknownEnvironmentError) as exc_info:
            parse(r"\begin{foo} x \end{foo}")
        assert exc_info.value.environment == "foo"

    def test_missing_end(self) -> None:
        with pytest.raises(UnexpectedTokenError) as exc_info:
            parse(r"\begin{matrix} x")
        assert exc_info.value.expected == Token(TokenType.END)


class TestDegradation:
    """Unsupported input becomes visible placeholders."""

    def test_unknown_command(self) -> None:
        assert parse(r"\foo x") == (Undefined("Token(UNDEFINED, 'foo')"), x)

    def test_stray_closing_brace(self) -> None:
        assert parse("x}") == (x, Undefined("Token(RBRACE)"))

    def test_dangling_script(self) -> None:
        assert parse("x^") == (Superscript(x, Undefined("Token(EOF)")),)
