"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser.

1. Execution Model
The interpreter evaluates the tree top-down and recursively. :meth:`Interpreter.evaluate`
dispatches on the node class with an exhaustive ``match``; expression nodes yield an
``int``, ``Assign`` yields the value it stored, ``Compound`` yields the value of its last
statement and ``Empty`` yields ``None``.

2. Environment
The interpreter owns a single flat dictionary ``vars`` mapping variable names to
integers. Nested ``BEGIN ... END`` blocks share it; there is no scoping. A fresh
interpreter starts with an empty environment, so independent runs never see each
other's bindings.

3. Expression Evaluation
Operands are evaluated left before right. Division truncates toward zero.

4. Error Handling
Reading an unassigned variable, dividing by zero and applying an operator to (or
assigning) a non-integer raise typed exceptions carrying the line and file. Evaluation stops at
the first error; assignments already performed stay in ``vars``.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from calclang.exceptions import (
    DivisionByZeroException,
    NestingTooDeepException,
    TypeMismatchException,
    UndefinedVariableException,
)
from calclang.nodes import (
    Assign,
    BinOp,
    Compound,
    Empty,
    Node,
    Num,
    UnaryOp,
    Var,
    format_tree,
)
from calclang.operations import Op


class Interpreter:
    """Tree-walk interpreter for calclang."""

    def __init__(self, file: str = "<string>", env: dict[str, int] | None = None):
        """
        Initialize the interpreter.

        Parameters:
            file (str): The name of the script, used in error messages.
            env (dict): Optional initial bindings, copied.
        """
        self.vars: dict[str, int] = dict(env) if env else {}
        self.file = file

    def environment(self) -> dict[str, int]:
        """
        Return a snapshot of the current bindings.
        """
        return dict(self.vars)

    def execute(self, node: Node) -> int | None:
        """
        Evaluate a whole tree from the top.

        Same as :meth:`evaluate`, but a tree too deep to walk raises
        NestingTooDeepException instead of RecursionError.
        """
        try:
            return self.evaluate(node)
        except RecursionError:
            raise NestingTooDeepException("eval", getattr(node, "line", None), self.file) from None

    def evaluate(self, node: Node) -> int | None:
        """
        Evaluate a node and return its value.

        Parameters:
            node: Any AST node.

        Returns:
            int | None: The value of the node; ``None`` for empty statements.

        Raises:
            UndefinedVariableException: If a variable is read before assignment.
            DivisionByZeroException: If the right operand of ``/`` is zero.
            TypeMismatchException: If an operand is not an integer.
        """
        match node:
            case Num(value=value):
                return value

            case Var(name=name, line=line):
                if name in self.vars:
                    return self.vars[name]
                raise UndefinedVariableException(name, line, self.file)

            case UnaryOp(op=op, operand=operand, line=line):
                value = self._require_int(op.symbol, self.evaluate(operand), line)
                if op == Op.SUB:
                    return -value
                return value

            case BinOp(op=op, left=left, right=right, line=line):
                lhs = self._require_int(op.symbol, self.evaluate(left), line)
                rhs = self._require_int(op.symbol, self.evaluate(right), line)
                match op:
                    case Op.ADD:
                        return lhs + rhs
                    case Op.SUB:
                        return lhs - rhs
                    case Op.MUL:
                        return lhs * rhs
                    case Op.DIV:
                        if rhs == 0:
                            raise DivisionByZeroException(format_tree(node), line, self.file)
                        return _truncating_div(lhs, rhs)

            case Assign(target=target, value=value_expr):
                value = self._require_int(":=", self.evaluate(value_expr), node.line)
                self.vars[target.name] = value
                return value

            case Compound(children=children):
                result = None
                for child in children:
                    result = self.evaluate(child)
                return result

            case Empty():
                return None

        raise TypeError(f"Cannot evaluate {node!r}")

    def _require_int(self, operator: str, value, line: int) -> int:
        # bool is an int subclass but never a language value
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeMismatchException(operator, value, line, self.file)
        return value


def _truncating_div(lhs: int, rhs: int) -> int:
    """
    Divide, rounding the quotient toward zero.
    """
    quotient = abs(lhs) // abs(rhs)
    return quotient if (lhs < 0) == (rhs < 0) else -quotient
