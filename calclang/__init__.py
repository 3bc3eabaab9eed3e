"""calclang: a small interpreter for BEGIN ... END integer programs.

A program is a compound statement of assignments, terminated by a period::

    BEGIN
        a := 2;
        b := a * (3 + 4)
    END.

Source text flows through :class:`Lexer`, :class:`Parser` and
:class:`Interpreter`; :func:`interpret` and :func:`run` drive all three.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from calclang.exceptions import (
    CalcException,
    DivisionByZeroException,
    LexException,
    NestingTooDeepException,
    NumericOverflowException,
    TypeMismatchException,
    UndefinedVariableException,
    UnexpectedTokenException,
)
from calclang.interpreter import Interpreter
from calclang.lexer import Lexer, Token, TokenType, tokenize
from calclang.parser import Parser
from calclang.runner import RunResult, evaluate_expression, interpret, load_source, parse_program, run

__version__ = "0.1.0"

__all__ = [
    "CalcException",
    "DivisionByZeroException",
    "LexException",
    "NestingTooDeepException",
    "NumericOverflowException",
    "TypeMismatchException",
    "UndefinedVariableException",
    "UnexpectedTokenException",
    "Interpreter",
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    "Parser",
    "RunResult",
    "evaluate_expression",
    "interpret",
    "load_source",
    "parse_program",
    "run",
]
