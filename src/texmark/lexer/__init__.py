"""Lexer package for texmark formulas.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, classify_command
├── core.py              # Lexer class (lookahead window + token dispatch)
└── commands.py          # Static command table and classifier

Usage:
    >>> from texmark.lexer import Lexer
    >>> for token in Lexer("x^2").tokenize():
    ...     print(token)
Token(LETTER, 'x', italic)
Token(CIRCUMFLEX)
Token(NUMBER, '2')
Token(EOF)

"""

from texmark.lexer.commands import COMMANDS, classify_command
from texmark.lexer.core import Lexer

__all__ = ["COMMANDS", "Lexer", "classify_command"]
