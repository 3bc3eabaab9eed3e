"""Lexer for calclang.

The lexer scans source text on demand: each call to :meth:`Lexer.next_token`
consumes exactly one token from a cursor over the text and returns it. The
parser pulls tokens one at a time, so no token list is ever built in advance.

Rules are tried in a fixed order at every call: end of input, whitespace,
the two-character ``:=`` operator, single-character punctuation, integer
literals and finally identifiers, which are checked against the reserved
keywords ``BEGIN`` and ``END``.

Characters that start no token raise :class:`LexException` unless the lexer
was created with ``skip_unknown=True``, in which case they are dropped.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from calclang.exceptions import LexException, NumericOverflowException


class TokenType(str, Enum):
    """
    Enumeration of token kinds.
    """

    # Arithmetic operators
    PLUS = "PLUS"
    MINUS = "MINUS"
    MULTIPLY = "MULTIPLY"
    DIVIDE = "DIVIDE"

    # Delimiters
    LEFTPAREN = "LEFTPAREN"
    RIGHTPAREN = "RIGHTPAREN"
    DOT = "DOT"
    SEMI = "SEMI"

    # Assignment
    ASSIGN = "ASSIGN"

    # Literals and identifiers
    INTEGER = "INTEGER"
    ID = "ID"

    # Keywords
    BEGIN = "BEGIN"
    END = "END"

    EOF = "EOF"

    def __str__(self) -> str:
        return self.value


RESERVED_KEYWORDS = {
    "BEGIN": TokenType.BEGIN,
    "END": TokenType.END,
}

SINGLE_CHAR_TOKENS = {
    ";": TokenType.SEMI,
    ".": TokenType.DOT,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "(": TokenType.LEFTPAREN,
    ")": TokenType.RIGHTPAREN,
}

# Signed 64-bit range; a literal has no sign of its own.
MAX_INTEGER = 2**63 - 1
MAX_INTEGER_DIGITS = len(str(MAX_INTEGER))

INTEGER_PATTERN = re.compile(r"[0-9]+")
ID_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9]*")


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token with a type and value.

    Only ``type`` and ``value`` take part in equality; the position is
    carried for error reporting.
    """
    type: TokenType
    value: int | str | None
    line: int = field(default=1, compare=False)
    column: int = field(default=1, compare=False)

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.value!r}, line={self.line}, column={self.column})"


class Lexer:
    """Pull-based lexer over a source string."""

    def __init__(self, text: str, skip_unknown: bool = False, file: str | None = None):
        """
        Initialize the lexer.

        Parameters:
            text (str): The source code to scan.
            skip_unknown (bool): Drop unrecognized characters instead of raising.
            file (str): Name of the source, used in error messages.
        """
        self.text = text
        self.pos = 0
        self.current_char = text[0] if text else None
        self.line = 1
        self.column = 1
        self.skip_unknown = skip_unknown
        self.file = file

    def advance(self) -> None:
        """
        Move the cursor forward by one character.
        """
        if self.current_char is None:
            return
        if self.current_char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.pos += 1
        self.current_char = self.text[self.pos] if self.pos < len(self.text) else None

    def advance_n(self, count: int) -> None:
        for _ in range(count):
            self.advance()

    def peek(self) -> str | None:
        """
        Return the character after the current one without consuming anything.
        """
        pos = self.pos + 1
        return self.text[pos] if pos < len(self.text) else None

    def skip_whitespace(self) -> None:
        while self.current_char is not None and self.current_char.isspace():
            self.advance()

    def integer(self) -> Token:
        """
        Consume a run of decimal digits and return an INTEGER token.

        Raises:
            NumericOverflowException: If the literal exceeds the 64-bit range.
        """
        line, column = self.line, self.column
        literal = INTEGER_PATTERN.match(self.text, self.pos).group()
        # Longer literals are rejected before int() sees them.
        digits = literal.lstrip("0") or "0"
        if len(digits) > MAX_INTEGER_DIGITS or int(digits) > MAX_INTEGER:
            raise NumericOverflowException(literal, line, column, self.file)
        self.advance_n(len(literal))
        return Token(TokenType.INTEGER, int(digits), line, column)

    def identifier(self, word: str) -> Token:
        """
        Consume an identifier, returning a keyword token for reserved words.
        """
        line, column = self.line, self.column
        self.advance_n(len(word))
        keyword = RESERVED_KEYWORDS.get(word)
        if keyword is not None:
            return Token(keyword, word, line, column)
        return Token(TokenType.ID, word, line, column)

    def next_token(self) -> Token:
        """
        Return the next token in the source.

        Once the input is exhausted every further call returns an EOF token.

        Raises:
            LexException: On an unrecognized character, unless skip_unknown is set.
            NumericOverflowException: On an out-of-range integer literal.
        """
        while self.current_char is not None:
            char = self.current_char

            if char.isspace():
                self.skip_whitespace()
                continue

            line, column = self.line, self.column

            if char == ":" and self.peek() == "=":
                self.advance_n(2)
                return Token(TokenType.ASSIGN, ":=", line, column)

            if char in SINGLE_CHAR_TOKENS:
                self.advance()
                return Token(SINGLE_CHAR_TOKENS[char], char, line, column)

            if "0" <= char <= "9":
                return self.integer()

            match_obj = ID_PATTERN.match(self.text, self.pos)
            if match_obj:
                return self.identifier(match_obj.group())

            if not self.skip_unknown:
                raise LexException(char, line, column, self.file)
            self.advance()

        return Token(TokenType.EOF, None, self.line, self.column)

    def __iter__(self) -> Iterator[Token]:
        """
        Yield tokens up to and including the first EOF.
        """
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOF:
                return


def tokenize(code: str, skip_unknown: bool = False) -> list[Token]:
    """
    Convert a string of source code into a list of tokens.

    The parser never needs this; it exists for token dumps.

    Parameters:
        code (str): The source code to tokenize.
        skip_unknown (bool): Drop unrecognized characters instead of raising.

    Returns:
        list[Token]: The tokens, ending with a single EOF token.
    """
    return list(Lexer(code, skip_unknown=skip_unknown))
