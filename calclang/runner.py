"""Entry points that run source text through the whole pipeline.

``interpret`` lexes, parses and evaluates a program and raises on the first
error. ``run`` does the same but hands back a :class:`RunResult` instead of
raising, keeping whatever bindings were committed before an evaluation error.
``evaluate_expression`` evaluates a bare expression, calculator style.


File: runner.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass, field
from pathlib import Path

from calclang.exceptions import CalcException
from calclang.interpreter import Interpreter
from calclang.lexer import Lexer
from calclang.nodes import Compound
from calclang.parser import Parser


@dataclass
class RunResult:
    """
    Outcome of running one program.
    """
    environment: dict[str, int] = field(default_factory=dict)
    error: CalcException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_program(source: str, file: str = "<string>", skip_unknown: bool = False) -> Compound:
    """
    Lex and parse a program, returning its AST.
    """
    lexer = Lexer(source, skip_unknown=skip_unknown, file=file)
    return Parser(lexer, file).parse()


def interpret(source: str, file: str = "<string>", skip_unknown: bool = False) -> dict[str, int]:
    """
    Run a program and return its final environment.

    Raises:
        CalcException: On the first lexing, parsing or evaluation error.
    """
    ast = parse_program(source, file, skip_unknown)
    interpreter = Interpreter(file)
    interpreter.execute(ast)
    return interpreter.environment()


def run(
    source: str,
    file: str = "<string>",
    skip_unknown: bool = False,
    interpreter: Interpreter | None = None,
) -> RunResult:
    """
    Run a program and report the outcome as a value.

    A lexing or parsing error means nothing is evaluated. An evaluation error
    leaves the bindings made before it in the result's environment.

    Parameters:
        source (str): Program text.
        file (str): Name used in error messages.
        skip_unknown (bool): Drop unrecognized characters instead of failing.
        interpreter (Interpreter): Reuse an existing environment, as the REPL does.
    """
    if interpreter is None:
        interpreter = Interpreter(file)
    try:
        ast = parse_program(source, file, skip_unknown)
    except CalcException as e:
        return RunResult(interpreter.environment(), e)
    try:
        interpreter.execute(ast)
    except CalcException as e:
        return RunResult(interpreter.environment(), e)
    return RunResult(interpreter.environment())


def evaluate_expression(
    source: str,
    environment: dict[str, int] | None = None,
    skip_unknown: bool = False,
) -> int:
    """
    Evaluate a bare expression such as ``2 + 3 * x``.

    Raises:
        CalcException: On the first lexing, parsing or evaluation error.
    """
    lexer = Lexer(source, skip_unknown=skip_unknown, file="<expr>")
    ast = Parser(lexer, "<expr>").parse_expression()
    return Interpreter("<expr>", environment).execute(ast)


def load_source(path: str | Path) -> str:
    """
    Read a program file as UTF-8 text.
    """
    return Path(path).read_text(encoding="utf-8")
