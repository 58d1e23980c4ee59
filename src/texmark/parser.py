"""Recursive descent parser producing typed AST.

Pulls tokens from the Lexer and builds immutable (frozen) dataclass nodes.

Lookahead:
The lexer keeps two characters of lookahead; the parser adds one token of
its own (``cur_token``/``peek_token``). Every ``parse_*`` method starts with
its first token in ``cur_token`` and returns with the *last* token it owns in
``cur_token``; callers advance past it.

One rule reaches below the token level: right after ``\\sqrt``, ``\\frac``
or ``\\binom``, a directly following digit is taken alone as a one-digit
number, so ``\\frac12`` is one half and ``\\sqrt12`` is root-of-1 then 2.
That rule lives in ``next_token`` and nowhere else.

Thread Safety:
Parser instances are single-use and not thread-safe. Create one per
formula. Configuration is read from ContextVar (thread-local).
The resulting AST is immutable and thread-safe.

"""

from __future__ import annotations

from texmark.attributes import ColumnAlign, LineThickness
from texmark.config import get_convert_config
from texmark.errors import (
    MissingDelimiterError,
    UnexpectedTokenError,
    UnknownCommandError,
    UnknownEnvironmentError,
)
from texmark.lexer import Lexer
from texmark.lexer.core import is_ascii_digit
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
    OtherOperator,
    OverOp,
    Overset,
    Row,
    SizedParen,
    Slashed,
    Space,
    Sqrt,
    StretchedOp,
    Style,
    SubSup,
    Subscript,
    Superscript,
    Text,
    Under,
    UnderOp,
    UnderOver,
    Underset,
    Undefined,
)
from texmark.tokens import ILLEGAL_TOKEN, Token, TokenType
from texmark.utils.logger import get_logger
from texmark.visitor import set_variant

logger = get_logger(__name__)

PRIME = Token(TokenType.OPERATOR, "'")
PRIME_GLYPHS = ("′", "″", "‴", "⁗")
INVISIBLE_DELIMITER = Token(TokenType.OPERATOR, ".")
LBRACKET = Token(TokenType.PAREN, "[")
RBRACKET = Token(TokenType.PAREN, "]")
RBRACE = Token(TokenType.RBRACE)
RIGHT = Token(TokenType.RIGHT)
END = Token(TokenType.END)

# Environment name -> (open, close) fence; None means no fence
ENVIRONMENTS: dict[str, tuple[str, str] | None] = {
    "matrix": None,
    "pmatrix": ("(", ")"),
    "bmatrix": ("[", "]"),
    "Bmatrix": ("{", "}"),
    "vmatrix": ("|", "|"),
    "Vmatrix": ("‖", "‖"),
}

# Sugar: environment name -> (environment it stands for, column alignment)
ENVIRONMENT_ALIASES: dict[str, tuple[str, ColumnAlign]] = {
    "align": ("matrix", ColumnAlign.LEFT),
}


class Parser:
    """Recursive descent parser for formula notation.

    Usage:
        >>> Parser("x^2").parse()
        (Superscript(target=Letter(char='x', ...), sup=Number(value='2')),)

    """

    __slots__ = ("_lexer", "cur_token", "peek_token")

    def __init__(self, source: str | Lexer) -> None:
        """Initialize parser and prime the token lookahead.

        Args:
            source: Formula text, or a Lexer positioned at its start

        """
        self._lexer = source if isinstance(source, Lexer) else Lexer(source)
        self.cur_token: Token = ILLEGAL_TOKEN
        self.peek_token: Token = ILLEGAL_TOKEN
        self.next_token()
        self.next_token()

    # =========================================================================
    # Token navigation
    # =========================================================================

    def next_token(self) -> None:
        """Shift the token window by one."""
        self.cur_token = self.peek_token
        if self.cur_token.acts_on_a_digit and is_ascii_digit(self._lexer.cur):
            self.peek_token = self._lexer.read_digit()
        else:
            self.peek_token = self._lexer.next_token()

    def _cur_is(self, token_type: TokenType) -> bool:
        return self.cur_token.type is token_type

    def _peek_is(self, token_type: TokenType) -> bool:
        return self.peek_token.type is token_type

    def _take_script(self, marker: TokenType) -> Node | None:
        """Consume ``marker`` and one atom after it, if ``marker`` is next."""
        if not self._peek_is(marker):
            return None
        self.next_token()
        self.next_token()
        return self.parse_single_node()

    # =========================================================================
    # Grammar
    # =========================================================================

    def parse(self) -> tuple[Node, ...]:
        """Parse the whole input into top-level nodes."""
        nodes: list[Node] = []
        while not self._cur_is(TokenType.EOF):
            nodes.append(self.parse_node())
            self.next_token()
        return tuple(nodes)

    def parse_node(self) -> Node:
        """Parse one atom plus a directly following sub/superscript.

        The script itself is parsed with parse_node, so ``x_i^2`` is x with
        subscript ``i^2``.
        """
        left = self.parse_single_node()
        if self._peek_is(TokenType.UNDERSCORE):
            self.next_token()
            self.next_token()
            return Subscript(left, self.parse_node())
        if self._peek_is(TokenType.CIRCUMFLEX):
            self.next_token()
            self.next_token()
            return Superscript(left, self.parse_node())
        return left

    def parse_single_node(self) -> Node:
        """Parse one atom without looking for ``_`` or ``^`` after it.

        Trailing apostrophes are folded in as a prime superscript.
        """
        node = self._parse_atom(self.cur_token)

        primes = 0
        while self.peek_token == PRIME:
            self.next_token()
            primes += 1
        if primes:
            glyph = PRIME_GLYPHS[min(primes, len(PRIME_GLYPHS)) - 1]
            node = Superscript(node, Operator(glyph))
        return node

    def _parse_atom(self, token: Token) -> Node:
        match token.type:
            case TokenType.NUMBER:
                return Number(token.value)
            case TokenType.LETTER:
                return Letter(token.value, token.variant)
            case TokenType.OPERATOR:
                return Operator(token.value)
            case TokenType.FUNCTION:
                return Function(token.value)
            case TokenType.SPACE:
                return Space(token.space)
            case TokenType.PAREN:
                return OtherOperator(token.value)
            case TokenType.LBRACE:
                return self.parse_group(RBRACE)
            case TokenType.SQRT:
                return self._parse_sqrt()
            case TokenType.FRAC:
                numerator, denominator = self._parse_two_arguments()
                return Frac(numerator, denominator)
            case TokenType.BINOM:
                return self._parse_binom(token)
            case TokenType.OVER:
                self.next_token()
                return OverOp(token.value, token.accent, self.parse_single_node())
            case TokenType.UNDER:
                self.next_token()
                return UnderOp(token.value, token.accent, self.parse_single_node())
            case TokenType.OVERSET:
                over, target = self._parse_two_arguments()
                return Overset(over, target)
            case TokenType.UNDERSET:
                under, target = self._parse_two_arguments()
                return Underset(under, target)
            case TokenType.OVERBRACE:
                return self._parse_overbrace(token)
            case TokenType.UNDERBRACE:
                return self._parse_underbrace(token)
            case TokenType.BIG_OP:
                return self._parse_big_operator(token)
            case TokenType.LIM:
                return self._parse_limit(token)
            case TokenType.INTEGRAL:
                return self._parse_integral(token)
            case TokenType.SLASHED:
                return self._parse_slashed()
            case TokenType.STYLE:
                self.next_token()
                return set_variant(self.parse_single_node(), token.variant)
            case TokenType.LEFT:
                return self._parse_fenced()
            case TokenType.MIDDLE:
                return self._parse_middle()
            case TokenType.BIG:
                return self._parse_sized_paren(token)
            case TokenType.BEGIN:
                return self._parse_environment()
            case TokenType.OPERATOR_NAME:
                self.next_token()
                return Function(self.parse_text())
            case TokenType.TEXT:
                self.next_token()
                return Text(self.parse_text())
            case TokenType.AMPERSAND:
                return Ampersand()
            case TokenType.NEWLINE:
                return NewLine()
            case TokenType.UNDEFINED if get_convert_config().strict_commands:
                raise UnknownCommandError(token.value)
            case _:
                logger.debug("Unsupported token %r; emitting placeholder", token)
                return Undefined(repr(token))

    def parse_group(self, end: Token) -> Node:
        """Parse nodes up to the ``end`` token; cur_token is the opening token.

        A single node is returned unwrapped, several are wrapped in a Row.
        """
        nodes = self._parse_sequence(end)
        if len(nodes) == 1:
            return nodes[0]
        return Row(tuple(nodes))

    def _parse_sequence(self, end: Token) -> list[Node]:
        self.next_token()
        nodes: list[Node] = []
        while self.cur_token != end:
            if self._cur_is(TokenType.EOF):
                raise UnexpectedTokenError(expected=end, got=self.cur_token)
            nodes.append(self.parse_node())
            self.next_token()
        return nodes

    def parse_text(self) -> str:
        """Read ``{`` and a run of letters; stops with cur_token on the first non-letter."""
        self.next_token()
        chars: list[str] = []
        while self._cur_is(TokenType.LETTER):
            chars.append(self.cur_token.value)
            self.next_token()
        return "".join(chars)

    # =========================================================================
    # Commands with arguments
    # =========================================================================

    def _parse_two_arguments(self) -> tuple[Node, Node]:
        self.next_token()
        first = self.parse_single_node()
        self.next_token()
        second = self.parse_single_node()
        return first, second

    def _parse_sqrt(self) -> Sqrt:
        self.next_token()
        degree = None
        if self.cur_token == LBRACKET:
            degree = self.parse_group(RBRACKET)
            self.next_token()
        return Sqrt(degree, self.parse_single_node())

    def _parse_binom(self, token: Token) -> Node:
        numerator, denominator = self._parse_two_arguments()
        binom = Fenced("(", ")", Frac(numerator, denominator, LineThickness.ZERO))
        if token.display is None:
            return binom
        return Style(token.display, Row((binom,)))

    def _parse_overbrace(self, token: Token) -> Overset:
        self.next_token()
        target = self.parse_single_node()
        brace: Node = Operator(token.value)
        label = self._take_script(TokenType.CIRCUMFLEX)
        if label is not None:
            brace = Overset(label, brace)
        return Overset(brace, target)

    def _parse_underbrace(self, token: Token) -> Underset:
        self.next_token()
        target = self.parse_single_node()
        brace: Node = Operator(token.value)
        label = self._take_script(TokenType.UNDERSCORE)
        if label is not None:
            brace = Underset(label, brace)
        return Underset(brace, target)

    def _parse_slashed(self) -> Slashed:
        self.next_token()
        if self._cur_is(TokenType.LBRACE):
            return Slashed(self.parse_group(RBRACE))
        return Slashed(self.parse_single_node())

    # =========================================================================
    # Operators carrying their own limits
    # =========================================================================
    # These look at peek_token for ``_``/``^`` before any operand is parsed,
    # so the markers attach to the operator rather than to what follows it.

    def _parse_big_operator(self, token: Token) -> Node:
        op = Operator(token.value)
        if self._peek_is(TokenType.UNDERSCORE):
            under = self._take_script(TokenType.UNDERSCORE)
            over = self._take_script(TokenType.CIRCUMFLEX)
        elif self._peek_is(TokenType.CIRCUMFLEX):
            over = self._take_script(TokenType.CIRCUMFLEX)
            under = self._take_script(TokenType.UNDERSCORE)
        else:
            return op

        if under is not None and over is not None:
            return UnderOver(op, under, over)
        if under is not None:
            return Under(op, under)
        return Overset(over, op)

    def _parse_limit(self, token: Token) -> Node:
        lim = Function(token.value)
        under = self._take_script(TokenType.UNDERSCORE)
        if under is None:
            return lim
        return Under(lim, under)

    def _parse_integral(self, token: Token) -> Node:
        op = Operator(token.value)
        if self._peek_is(TokenType.UNDERSCORE):
            sub = self._take_script(TokenType.UNDERSCORE)
            sup = self._take_script(TokenType.CIRCUMFLEX)
        elif self._peek_is(TokenType.CIRCUMFLEX):
            sup = self._take_script(TokenType.CIRCUMFLEX)
            sub = self._take_script(TokenType.UNDERSCORE)
        else:
            return op

        if sub is not None and sup is not None:
            return SubSup(op, sub, sup)
        if sub is not None:
            return Subscript(op, sub)
        return Superscript(op, sup)

    # =========================================================================
    # Delimiters
    # =========================================================================

    def _delimiter(self, anchor: Token) -> str:
        """Glyph of the delimiter in cur_token; ``.`` is the invisible one."""
        if self._cur_is(TokenType.PAREN):
            return self.cur_token.value
        if self.cur_token == INVISIBLE_DELIMITER:
            return ""
        raise MissingDelimiterError(location=anchor, got=self.cur_token)

    def _parse_fenced(self) -> Fenced:
        self.next_token()
        open_ = self._delimiter(Token(TokenType.LEFT))
        content = self.parse_group(RIGHT)
        self.next_token()
        close = self._delimiter(RIGHT)
        return Fenced(open_, close, content)

    def _parse_middle(self) -> StretchedOp:
        self.next_token()
        got = self.cur_token
        match self.parse_single_node():
            case Operator(op=op) | OtherOperator(op=op):
                return StretchedOp(True, op)
            case _:
                raise MissingDelimiterError(location=Token(TokenType.MIDDLE), got=got)

    def _parse_sized_paren(self, token: Token) -> SizedParen:
        self.next_token()
        if not self._cur_is(TokenType.PAREN):
            raise UnexpectedTokenError(expected=Token(TokenType.PAREN), got=self.cur_token)
        return SizedParen(token.value, self.cur_token.value)

    # =========================================================================
    # Environments
    # =========================================================================

    def _parse_environment(self) -> Node:
        """Parse ``\\begin{name} ... \\end{name}`` into a (fenced) Matrix."""
        self.next_token()
        name = self.parse_text()
        environment, column_align = ENVIRONMENT_ALIASES.get(name, (name, ColumnAlign.CENTER))
        if environment not in ENVIRONMENTS:
            raise UnknownEnvironmentError(name)

        matrix = Matrix(tuple(self._parse_sequence(END)), column_align)

        # Trailing {name} after \end is read and discarded
        self.next_token()
        self.parse_text()

        fence = ENVIRONMENTS[environment]
        if fence is None:
            return matrix
        return Fenced(fence[0], fence[1], matrix)
