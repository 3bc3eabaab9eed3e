"""Shared definitions for AST operation identifiers.

This module centralizes the operators used by the parser and interpreter to
label ``UnaryOp`` and ``BinOp`` nodes, and maps the lexer's operator tokens
onto them.
"""

from enum import Enum

from calclang.lexer import TokenType


class Op(str, Enum):
    """
    Enumeration of supported arithmetic operations.
    """

    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"

    @property
    def symbol(self) -> str:
        """
        Return the source spelling of the operator.
        """
        return _SYMBOLS[self]

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


_SYMBOLS = {
    Op.ADD: "+",
    Op.SUB: "-",
    Op.MUL: "*",
    Op.DIV: "/",
}

TOKEN_OPS = {
    TokenType.PLUS: Op.ADD,
    TokenType.MINUS: Op.SUB,
    TokenType.MULTIPLY: Op.MUL,
    TokenType.DIVIDE: Op.DIV,
}


__all__ = ["Op", "TOKEN_OPS"]
