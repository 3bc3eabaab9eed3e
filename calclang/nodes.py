"""AST node definitions.

The tree is a closed set of seven frozen dataclasses. Expression nodes are
``Num``, ``Var``, ``UnaryOp`` and ``BinOp``; statement nodes are
``Compound``, ``Assign`` and ``Empty``. Each node records the line it starts
on; the line does not take part in equality so trees can be compared
structurally.

Nodes are built once by the parser, bottom-up, and never modified.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from calclang.operations import Op


@dataclass(frozen=True)
class Num:
    value: int
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Var:
    name: str
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class UnaryOp:
    op: Op
    operand: Expression
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class BinOp:
    op: Op
    left: Expression
    right: Expression
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Assign:
    target: Var
    value: Expression
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Compound:
    children: tuple[Statement, ...]
    line: int = field(default=0, compare=False)


@dataclass(frozen=True)
class Empty:
    line: int = field(default=0, compare=False)


Expression = Union[Num, Var, UnaryOp, BinOp]
Statement = Union[Compound, Assign, Empty]
Node = Union[Expression, Statement]


def format_tree(node: Node, indent: int = 0) -> str:
    """
    Render a node back to readable source text.

    Expressions are fully parenthesized so the grouping chosen by the parser
    is visible; statements are laid out one per line.

    Args:
        node: The node to render.
        indent (int): Nesting depth used for statements.

    Returns:
        str: The rendered text.
    """
    pad = "    " * indent
    match node:
        case Num(value=value):
            return str(value)
        case Var(name=name):
            return name
        case UnaryOp(op=op, operand=operand):
            return f"({op.symbol}{format_tree(operand)})"
        case BinOp(op=op, left=left, right=right):
            return f"({format_tree(left)} {op.symbol} {format_tree(right)})"
        case Assign(target=target, value=value):
            return f"{pad}{target.name} := {format_tree(value)}"
        case Empty():
            return f"{pad}<empty>"
        case Compound(children=children):
            lines = [f"{pad}BEGIN"]
            lines.extend(format_tree(child, indent + 1) for child in children)
            lines.append(f"{pad}END")
            return "\n".join(lines)
        case _:
            raise TypeError(f"Not an AST node: {node!r}")


__all__ = [
    "Num",
    "Var",
    "UnaryOp",
    "BinOp",
    "Assign",
    "Compound",
    "Empty",
    "Expression",
    "Statement",
    "Node",
    "format_tree",
]
