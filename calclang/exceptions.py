"""Errors.

Every failure the pipeline can produce is a subclass of :class:`CalcException`.
Each one records the stage that raised it (``lex``, ``parse`` or ``eval``) and,
where known, the source position and file so the driver can report it.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class CalcException(Exception):
    """
    Base class for lexing, parsing and evaluation errors.
    """
    stage = None

    def __init__(self, detail, line=None, column=None, file=None):
        self.detail = detail
        self.line = line
        self.column = column
        self.file = file
        message = detail
        if line is not None:
            message += f" on line {line}"
            if column is not None:
                message += f", column {column}"
        if file is not None:
            message += f" in {file}"
        super().__init__(message)


class LexException(CalcException):
    """
    Error for characters that do not start any token.
    """
    stage = "lex"

    def __init__(self, char, line=None, column=None, file=None):
        self.char = char
        super().__init__(f"Unexpected character {char!r}", line, column, file)


class NumericOverflowException(CalcException):
    """
    Error for integer literals outside the representable range.
    """
    stage = "lex"

    def __init__(self, literal, line=None, column=None, file=None):
        self.literal = literal
        super().__init__(
            f"Integer literal {literal} is out of range", line, column, file
        )


class UnexpectedTokenException(CalcException):
    """
    Error for a token that does not fit the grammar at its position.
    """
    stage = "parse"

    def __init__(self, expected, found, file=None):
        self.expected = expected
        self.found = found
        if isinstance(expected, tuple):
            wanted = " or ".join(str(kind) for kind in expected)
        else:
            wanted = str(expected)
        super().__init__(
            f"Expected token of type {wanted}, "
            f"but got value {found.value!r} of type {found.type}",
            found.line,
            found.column,
            file,
        )


class UndefinedVariableException(CalcException):
    """
    Error for undefined variables.
    """
    stage = "eval"

    def __init__(self, varname, line=None, file=None):
        self.varname = varname
        super().__init__(f"Undefined variable '{varname}'", line, None, file)


class DivisionByZeroException(CalcException):
    """
    Error for integer division by zero.
    """
    stage = "eval"

    def __init__(self, expression=None, line=None, file=None):
        self.expression = expression
        detail = "Division by zero"
        if expression is not None:
            detail += f" in {expression}"
        super().__init__(detail, line, None, file)


class TypeMismatchException(CalcException):
    """
    Error for operands that are not integers.
    """
    stage = "eval"

    def __init__(self, operator, operand, line=None, file=None):
        self.operator = operator
        self.operand = operand
        super().__init__(
            f"Operator '{operator}' requires an integer operand, "
            f"got {type(operand).__name__}",
            line,
            None,
            file,
        )


class NestingTooDeepException(CalcException):
    """
    Error for input nested deeper than the interpreter can recurse.

    Raised by the parser (stage ``parse``) or the interpreter (stage ``eval``).
    """

    def __init__(self, stage, line=None, file=None):
        self.stage = stage
        super().__init__("Expression nested too deeply", line, None, file)
