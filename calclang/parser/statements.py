"""Statement parsing utilities for calclang.

These functions operate on a `calclang.parser.parser.Parser` instance and
handle the statement forms of the language: the program itself, compound
``BEGIN ... END`` blocks, assignments and empty statements.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from calclang.lexer import TokenType
from calclang.nodes import Assign, Compound, Empty

if TYPE_CHECKING:
    from calclang.parser import Parser


def parse_program(parser: 'Parser') -> Compound:
    """
    Parse a whole program.

    Syntax:
        <compound_statement> .

    Args:
        parser: The parser instance.

    Returns:
        Compound: The outermost block.
    """
    node = parser.compound_statement()
    parser.eat(TokenType.DOT)
    return node


def parse_compound_statement(parser: 'Parser') -> Compound:
    """
    Parse a block of statements enclosed in BEGIN and END.

    Syntax:
        BEGIN <statement_list> END

    Args:
        parser: The parser instance.

    Returns:
        Compound: The block with its statements in source order.
    """
    tok = parser.curr_token
    parser.eat(TokenType.BEGIN)
    children = parser.statement_list()
    parser.eat(TokenType.END)
    return Compound(tuple(children), tok.line)


def parse_statement_list(parser: 'Parser') -> list:
    """
    Parse one or more statements separated by semicolons.

    Syntax:
        <statement> (; <statement>)*
    """
    statements = [parser.statement()]
    while parser.curr_token.type == TokenType.SEMI:
        parser.eat(TokenType.SEMI)
        statements.append(parser.statement())
    return statements


def parse_statement(parser: 'Parser'):
    """
    Parse a single statement.

    A position holding neither BEGIN nor an identifier is an empty statement;
    whatever token is there is left for the enclosing rule to check.
    """
    tok = parser.curr_token
    if tok.type == TokenType.BEGIN:
        return parser.compound_statement()
    if tok.type == TokenType.ID:
        return parser.assignment_statement()
    return parser.empty()


def parse_assignment_statement(parser: 'Parser') -> Assign:
    """
    Parse an assignment.

    Syntax:
        <variable> := <expr>

    Args:
        parser: The parser instance.

    Returns:
        Assign: The target variable and value expression.
    """
    target = parser.variable()
    parser.eat(TokenType.ASSIGN)
    value_expr = parser.expr()
    return Assign(target, value_expr, target.line)


def parse_empty(parser: 'Parser') -> Empty:
    return Empty(parser.curr_token.line)
