"""Token and TokenType definitions for the texmark lexer.

The lexer produces a stream of Token objects that the parser consumes.
A Token is a tagged value: a TokenType plus only the payload needed to
build the corresponding AST node (a glyph, a font variant, an accent flag,
a display hint or a spacing amount). Tokens never carry further structure.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from texmark.attributes import Accent, DisplayStyle, Variant


class TokenType(Enum):
    """Token types produced by the lexer.

    Organized by category for clarity:
    - Literals (numbers, letters, operators, parens, spaces)
    - Structural keywords (braces, scripts, table separators, fences)
    - Commands looked up from a backslash name

    """

    # Literals
    NUMBER = auto()  # 3.14
    LETTER = auto()  # x, \alpha
    OPERATOR = auto()  # +, \times
    FUNCTION = auto()  # \sin
    SPACE = auto()  # \, \quad
    PAREN = auto()  # ( [ | \{ \langle

    # Structural keywords
    LBRACE = auto()  # {
    RBRACE = auto()  # }
    UNDERSCORE = auto()  # _
    CIRCUMFLEX = auto()  # ^
    AMPERSAND = auto()  # &
    NEWLINE = auto()  # \\
    BEGIN = auto()  # \begin
    END = auto()  # \end
    LEFT = auto()  # \left
    RIGHT = auto()  # \right
    MIDDLE = auto()  # \middle
    EOF = auto()
    ILLEGAL = auto()

    # Commands
    SQRT = auto()  # \sqrt
    FRAC = auto()  # \frac
    BINOM = auto()  # \binom \tbinom \dbinom
    OVER = auto()  # \hat \vec \overline
    UNDER = auto()  # \underline
    OVERSET = auto()  # \overset
    UNDERSET = auto()  # \underset
    OVERBRACE = auto()  # \overbrace \overparen \overbracket
    UNDERBRACE = auto()  # \underbrace \underparen \underbracket
    BIG_OP = auto()  # \sum \prod \bigcup
    LIM = auto()  # \lim \max \sup
    INTEGRAL = auto()  # \int \oint
    STYLE = auto()  # \mathbf \mathbb
    SLASHED = auto()  # \slashed
    OPERATOR_NAME = auto()  # \operatorname
    TEXT = auto()  # \text
    BIG = auto()  # \big \Bigl
    UNDEFINED = auto()  # unknown multi-letter command


# Commands that take exactly one bare digit as an argument: \sqrt2, \frac12
_ACTS_ON_A_DIGIT = frozenset({TokenType.SQRT, TokenType.FRAC, TokenType.BINOM})


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Glyph, name or literal text (meaning depends on type)
        variant: Font variant of LETTER tokens and STYLE commands
        accent: Accent flag of OVER/UNDER commands
        display: Display hint of BINOM commands (None = no wrapper)
        space: Width in em of SPACE tokens

    Tokens are value types: two tokens are equal when all fields are equal.

    """

    type: TokenType
    value: str = ""
    variant: Variant | None = None
    accent: Accent | None = None
    display: DisplayStyle | None = None
    space: float | None = None

    @property
    def acts_on_a_digit(self) -> bool:
        """Whether a directly following digit is a one-digit argument."""
        return self.type in _ACTS_ON_A_DIGIT

    def __repr__(self) -> str:
        """Compact repr for debugging and error messages."""
        parts = [self.type.name]
        if self.value:
            parts.append(repr(self.value))
        for extra in (self.variant, self.accent, self.display):
            if extra is not None:
                parts.append(str(extra))
        if self.space is not None:
            parts.append(f"{self.space}em")
        return f"Token({', '.join(parts)})"


# Shared singletons for payload-free tokens
EOF_TOKEN = Token(TokenType.EOF)
ILLEGAL_TOKEN = Token(TokenType.ILLEGAL)
