import pytest

from calclang.exceptions import UnexpectedTokenException
from calclang.lexer import Lexer, TokenType
from calclang.nodes import Assign, BinOp, Compound, Empty, Num, UnaryOp, Var, format_tree
from calclang.operations import Op
from calclang.parser import Parser
from calclang.tests.utils import parse_source


def parse_expr(source: str):
    return Parser(Lexer(source)).parse_expression()


def test_precedence_multiplication_binds_tighter():
    assert parse_expr("2 + 3 * 4") == BinOp(
        Op.ADD, Num(2), BinOp(Op.MUL, Num(3), Num(4))
    )


def test_parentheses_override_precedence():
    assert parse_expr("(2 + 3) * 4") == BinOp(
        Op.MUL, BinOp(Op.ADD, Num(2), Num(3)), Num(4)
    )


def test_left_associativity():
    assert parse_expr("10 - 2 - 3") == BinOp(
        Op.SUB, BinOp(Op.SUB, Num(10), Num(2)), Num(3)
    )
    assert parse_expr("8 / 4 / 2") == BinOp(
        Op.DIV, BinOp(Op.DIV, Num(8), Num(4)), Num(2)
    )


def test_unary_operators_nest():
    assert parse_expr("- -5") == UnaryOp(Op.SUB, UnaryOp(Op.SUB, Num(5)))
    assert parse_expr("+-5") == UnaryOp(Op.ADD, UnaryOp(Op.SUB, Num(5)))


def test_program_ast():
    ast = parse_source("BEGIN a := 1; BEGIN b := a END; END.")
    assert ast == Compound((
        Assign(Var("a"), Num(1)),
        Compound((Assign(Var("b"), Var("a")),)),
        Empty(),
    ))


def test_empty_block():
    assert parse_source("BEGIN END.") == Compound((Empty(),))


def test_nodes_carry_lines():
    ast = parse_source("BEGIN\n  a := 1;\n  b := a + 2\nEND.")
    first, second = ast.children
    assert first.line == 2
    assert second.line == 3
    assert second.value.line == 3


def test_missing_assign():
    with pytest.raises(UnexpectedTokenException) as exc_info:
        parse_source("BEGIN x 1 END.")
    error = exc_info.value
    assert error.expected == TokenType.ASSIGN
    assert error.found.type == TokenType.INTEGER
    assert error.stage == "parse"


def test_missing_dot():
    with pytest.raises(UnexpectedTokenException) as exc_info:
        parse_source("BEGIN x := 1 END")
    assert exc_info.value.expected == TokenType.DOT
    assert exc_info.value.found.type == TokenType.EOF


def test_trailing_tokens_after_program():
    with pytest.raises(UnexpectedTokenException) as exc_info:
        parse_source("BEGIN END. x")
    assert exc_info.value.expected == TokenType.EOF
    assert exc_info.value.found.type == TokenType.ID


def test_missing_semicolon_between_statements():
    with pytest.raises(UnexpectedTokenException) as exc_info:
        parse_source("BEGIN a := 1 b := 2 END.")
    assert exc_info.value.expected == TokenType.END
    assert exc_info.value.found.value == "b"


def test_unclosed_parenthesis():
    with pytest.raises(UnexpectedTokenException) as exc_info:
        parse_source("BEGIN a := (1 + 2 END.")
    assert exc_info.value.expected == TokenType.RIGHTPAREN


def test_operator_without_operand():
    with pytest.raises(UnexpectedTokenException) as exc_info:
        parse_source("BEGIN a := 1 + END.")
    assert exc_info.value.expected == TokenType.ID
    assert exc_info.value.found.type == TokenType.END


def test_program_must_start_with_begin():
    with pytest.raises(UnexpectedTokenException) as exc_info:
        parse_source("x := 1.")
    assert exc_info.value.expected == TokenType.BEGIN


def test_error_message_has_position():
    with pytest.raises(UnexpectedTokenException) as exc_info:
        parse_source("BEGIN\n x 1 END.")
    assert "line 2, column 4" in str(exc_info.value)
    assert "in <test>" in str(exc_info.value)


def test_format_tree():
    ast = parse_source("BEGIN a := -(1 + 2) * b; BEGIN END END.")
    assert format_tree(ast) == (
        "BEGIN\n"
        "    a := ((-(1 + 2)) * b)\n"
        "    BEGIN\n"
        "        <empty>\n"
        "    END\n"
        "END"
    )
