"""Exception classes for texmark.

Provides standardized exceptions for error handling throughout texmark.
The lexer never raises; the parser raises only on structural mismatches it
cannot recover from, and the document layer raises on malformed delimiter
counts. Every error carries the context needed to explain itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from texmark.tokens import Token


class TexmarkError(Exception):
    """Base exception for all texmark errors.

    Subclass this for specific error categories.
    """

    pass


class LatexError(TexmarkError):
    """Error while converting a formula to MathML.

    Raised by the parser and the document layer. Conversions abort on the
    first LatexError; nothing is partially returned.
    """

    pass


class UnexpectedTokenError(LatexError):
    """A required structural token was not where the grammar needs it.

    Typical causes are a missing closing brace, a missing ``\\end`` or a
    ``\\big`` that is not followed by a delimiter.
    """

    def __init__(self, expected: Token, got: Token) -> None:
        """Initialize unexpected-token error.

        Args:
            expected: The token the parser was looking for
            got: The token actually found
        """
        self.expected = expected
        self.got = got
        super().__init__(
            f'The token "{expected!r}" is expected, but the token "{got!r}" is found.'
        )


class MissingDelimiterError(LatexError):
    """``\\left``, ``\\right`` or ``\\middle`` is not followed by a delimiter."""

    def __init__(self, location: Token, got: Token) -> None:
        """Initialize missing-delimiter error.

        Args:
            location: The keyword token that needs a delimiter
            got: The token found in place of the delimiter
        """
        self.location = location
        self.got = got
        super().__init__(
            f'There must be a delimiter after "{location!r}", but "{got!r}" is found instead.'
        )


class UnknownEnvironmentError(LatexError):
    """``\\begin{name}`` names an environment outside the supported set."""

    def __init__(self, environment: str) -> None:
        self.environment = environment
        super().__init__(f'An unknown environment "{environment}" is found.')


class UnknownCommandError(LatexError):
    """A multi-letter command is not in the vocabulary.

    Only raised when strict command handling is enabled; by default unknown
    commands degrade to visibly marked output.
    """

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f'An unknown command "\\{command}" is found.')


class InvalidDelimiterCountError(LatexError):
    """A host document contains an odd number of formula delimiters."""

    def __init__(self, delimiter: str, count: int) -> None:
        """Initialize delimiter-count error.

        Args:
            delimiter: The delimiter that is unbalanced (``$`` or ``$$``)
            count: Number of occurrences found
        """
        self.delimiter = delimiter
        self.count = count
        super().__init__(
            f"Invalid number of delimiters: found {count} occurrences of {delimiter!r}."
        )
