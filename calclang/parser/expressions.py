"""
Expression parsing utilities for calclang.

These functions operate on a `calclang.parser.parser.Parser` instance and
implement the recursive descent logic for expressions. Precedence, from
loosest to tightest binding, is ``expr`` (``+ -``), ``term`` (``* /``) and
``factor``. Binary operators are left-associative: each operator is folded
into a new ``BinOp`` whose left child is everything parsed so far.
"""

from typing import TYPE_CHECKING

from calclang.lexer import TokenType
from calclang.nodes import BinOp, Num, UnaryOp, Var
from calclang.operations import TOKEN_OPS

if TYPE_CHECKING:
    from calclang.parser import Parser


# ---- Highest precedence ----

def parse_factor(parser: 'Parser'):
    """
    Parse a factor.

    Syntax:
        ('+' | '-') <factor> | INTEGER | '(' <expr> ')' | <variable>
    """
    tok = parser.curr_token
    if tok.type in (TokenType.PLUS, TokenType.MINUS):
        parser.eat(tok.type)
        return UnaryOp(TOKEN_OPS[tok.type], parser.factor(), tok.line)

    if tok.type == TokenType.INTEGER:
        parser.eat(TokenType.INTEGER)
        return Num(tok.value, tok.line)

    if tok.type == TokenType.LEFTPAREN:
        parser.eat(TokenType.LEFTPAREN)
        node = parser.expr()
        parser.eat(TokenType.RIGHTPAREN)
        return node

    # Anything else must be an identifier; eat() reports the mismatch.
    return parser.variable()


def parse_term(parser: 'Parser'):
    """Parse multiplication and division expressions."""
    result = parser.factor()
    while parser.curr_token.type in (TokenType.MULTIPLY, TokenType.DIVIDE):
        op_tok = parser.curr_token
        parser.eat(op_tok.type)
        result = BinOp(TOKEN_OPS[op_tok.type], result, parser.factor(), op_tok.line)
    return result


# ---- Lowest precedence ----

def parse_expr(parser: 'Parser'):
    """Parse addition and subtraction expressions."""
    result = parser.term()
    while parser.curr_token.type in (TokenType.PLUS, TokenType.MINUS):
        op_tok = parser.curr_token
        parser.eat(op_tok.type)
        result = BinOp(TOKEN_OPS[op_tok.type], result, parser.term(), op_tok.line)
    return result


def parse_variable(parser: 'Parser') -> Var:
    """
    Parse a variable reference.

    Syntax:
        ID
    """
    tok = parser.curr_token
    parser.eat(TokenType.ID)
    return Var(tok.value, tok.line)
