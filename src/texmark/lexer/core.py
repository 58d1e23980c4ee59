"""Pull-based lexer with a two-character lookahead window.

The lexer turns formula source into tokens one at a time, on demand. It owns
whitespace skipping, numeric-literal accumulation and command-name
accumulation; everything else is a direct character-to-token mapping.

The lexer never fails: a character outside its known set becomes an upright
letter token, so every input tokenizes.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from texmark.attributes import Variant
from texmark.lexer.commands import classify_command
from texmark.tokens import EOF_TOKEN, Token, TokenType

# End-of-input sentinel held in the lookahead window; no character equals it
EOI = ""

WHITESPACE = frozenset(" \t\n\r")

SINGLE_CHAR_TOKENS: dict[str, Token] = {
    "=": Token(TokenType.OPERATOR, "="),
    ";": Token(TokenType.OPERATOR, ";"),
    ",": Token(TokenType.OPERATOR, ","),
    ".": Token(TokenType.OPERATOR, "."),
    "'": Token(TokenType.OPERATOR, "'"),
    "+": Token(TokenType.OPERATOR, "+"),
    "-": Token(TokenType.OPERATOR, "-"),
    "*": Token(TokenType.OPERATOR, "*"),
    "/": Token(TokenType.OPERATOR, "/"),
    "!": Token(TokenType.OPERATOR, "!"),
    "<": Token(TokenType.OPERATOR, "<"),
    ">": Token(TokenType.OPERATOR, ">"),
    "(": Token(TokenType.PAREN, "("),
    ")": Token(TokenType.PAREN, ")"),
    "[": Token(TokenType.PAREN, "["),
    "]": Token(TokenType.PAREN, "]"),
    "|": Token(TokenType.PAREN, "|"),
    "{": Token(TokenType.LBRACE),
    "}": Token(TokenType.RBRACE),
    "_": Token(TokenType.UNDERSCORE),
    "^": Token(TokenType.CIRCUMFLEX),
    "&": Token(TokenType.AMPERSAND),
}

COLON = Token(TokenType.OPERATOR, ":")
COLON_EQUALS = Token(TokenType.PAREN, ":=")
# A backslash with nothing after it is kept as a literal glyph
TRAILING_BACKSLASH = Token(TokenType.LETTER, "\\", Variant.NORMAL)


def is_ascii_letter(char: str) -> bool:
    """Whether char is one of A-Z or a-z."""
    return char.isascii() and char.isalpha()


def is_ascii_digit(char: str) -> bool:
    """Whether char is one of 0-9."""
    return "0" <= char <= "9"


class Lexer:
    """Formula lexer with ``cur``/``peek`` character lookahead.

    Usage:
        >>> lexer = Lexer(r"x = \\alpha")
        >>> list(lexer.tokenize())
        [Token(LETTER, 'x', italic), Token(OPERATOR, '='), Token(LETTER, 'α', italic), Token(EOF)]

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = ("_chars", "cur", "peek")

    def __init__(self, source: str) -> None:
        """Initialize lexer with source text and prime the lookahead window.

        Args:
            source: Formula source text (without ``$`` delimiters)
        """
        self._chars: Iterator[str] = iter(source)
        self.cur: str = EOI
        self.peek: str = EOI
        self.read_char()
        self.read_char()

    def read_char(self) -> str:
        """Return the current character and shift the window by one.

        Past the end of input the window holds EOI forever.
        """
        char = self.cur
        self.cur = self.peek
        self.peek = next(self._chars, EOI)
        return char

    def skip_whitespace(self) -> None:
        """Consume spaces, tabs, newlines and carriage returns."""
        while self.cur in WHITESPACE:
            self.read_char()

    def read_command(self) -> Token:
        """Read one backslash command and classify it.

        The first character after the backslash is always part of the name;
        if it is an ASCII letter, further ASCII letters are consumed greedily.
        """
        self.read_char()  # backslash
        first = self.read_char()
        if first == EOI:
            return TRAILING_BACKSLASH
        name = [first]
        if is_ascii_letter(first):
            while is_ascii_letter(self.cur):
                name.append(self.read_char())
        return classify_command("".join(name))

    def read_number(self) -> Token:
        """Read a run of digits with at most one decimal point.

        The matched text is kept verbatim; a second point ends the literal.
        """
        digits: list[str] = []
        has_period = False
        while is_ascii_digit(self.cur) or (self.cur == "." and not has_period):
            if self.cur == ".":
                has_period = True
            digits.append(self.read_char())
        return Token(TokenType.NUMBER, "".join(digits))

    def read_digit(self) -> Token:
        """Read exactly one digit as a number token.

        Used by the parser for the one-digit argument of ``\\sqrt2``-style
        commands; the caller checks that ``cur`` is a digit.
        """
        return Token(TokenType.NUMBER, self.read_char())

    def next_token(self) -> Token:
        """Produce the next token and advance past it."""
        self.skip_whitespace()

        char = self.cur
        if char == "\\":
            return self.read_command()
        if is_ascii_digit(char):
            return self.read_number()

        if char == EOI:
            token = EOF_TOKEN
        elif char == ":":
            if self.peek == "=":
                self.read_char()
                token = COLON_EQUALS
            else:
                token = COLON
        elif char in SINGLE_CHAR_TOKENS:
            token = SINGLE_CHAR_TOKENS[char]
        elif is_ascii_letter(char):
            token = Token(TokenType.LETTER, char, Variant.ITALIC)
        else:
            token = Token(TokenType.LETTER, char, Variant.NORMAL)
        self.read_char()
        return token

    def tokenize(self) -> Iterator[Token]:
        """Yield every remaining token, ending with exactly one EOF.

        Convenience for debugging and tests; the parser pulls tokens
        through next_token() instead.
        """
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return
