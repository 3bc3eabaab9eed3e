"""
Main parser entry point for calclang.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`calclang.parser.expressions` and `calclang.parser.statements`.

The parser holds exactly one unconsumed token at a time and pulls the next
one from the lexer whenever it eats the current token.
"""

from calclang.exceptions import NestingTooDeepException, UnexpectedTokenException
from calclang.lexer import Lexer, Token, TokenType

from . import expressions as _expr
from . import statements as _stmt


class Parser:
    """calclang parser."""

    def __init__(self, lexer: Lexer, file: str = "<string>"):
        """
        Initialize the parser and read the first token.

        Parameters:
            lexer (Lexer): The token source.
            file (str): The name of the script.
        """
        self.lexer = lexer
        self.source_file = file
        self.curr_token: Token = self.lexer.next_token()

    def eat(self, token_type: TokenType) -> None:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (TokenType): The expected token type.

        Raises:
            UnexpectedTokenException: If the token does not match the expected type.
        """
        if self.curr_token.type == token_type:
            self.curr_token = self.lexer.next_token()
        else:
            raise UnexpectedTokenException(token_type, self.curr_token, self.source_file)


    # Expression wrappers
    def factor(self):
        """
        Parse a factor: a signed factor, integer, parenthesized group or variable.
        """
        return _expr.parse_factor(self)

    def term(self):
        """
        Parse a term, involving multiplication or division.
        """
        return _expr.parse_term(self)

    def expr(self):
        """
        Parse a full expression, involving addition or subtraction.
        """
        return _expr.parse_expr(self)

    def variable(self):
        """
        Parse a variable reference.
        """
        return _expr.parse_variable(self)


    # Statement wrappers
    def program(self):
        """
        Parse a program: a compound statement followed by a period.
        """
        return _stmt.parse_program(self)

    def compound_statement(self):
        """
        Parse a BEGIN ... END block.
        """
        return _stmt.parse_compound_statement(self)

    def statement_list(self):
        """
        Parse semicolon-separated statements.
        """
        return _stmt.parse_statement_list(self)

    def statement(self):
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def assignment_statement(self):
        """
        Parse a variable assignment statement.
        """
        return _stmt.parse_assignment_statement(self)

    def empty(self):
        """
        Produce an empty statement.
        """
        return _stmt.parse_empty(self)


    def parse(self):
        """
        Parse the full input as a program and require nothing after it.

        Raises:
            UnexpectedTokenException: On the first grammar violation.
            NestingTooDeepException: If the input nests past the recursion limit.
        """
        try:
            node = self.program()
        except RecursionError:
            raise NestingTooDeepException("parse", self.curr_token.line, self.source_file) from None
        self.eat(TokenType.EOF)
        return node

    def parse_expression(self):
        """
        Parse the full input as a single expression.
        """
        try:
            node = self.expr()
        except RecursionError:
            raise NestingTooDeepException("parse", self.curr_token.line, self.source_file) from None
        self.eat(TokenType.EOF)
        return node
