"""
Utility functions shared across calclang tests.
"""
from calclang.interpreter import Interpreter
from calclang.lexer import Lexer
from calclang.parser import Parser


def parse_source(source: str):
    """
    Parse source code and return the AST.
    """
    parser = Parser(Lexer(source, file="<test>"), "<test>")
    return parser.parse()


def run_source(source: str) -> Interpreter:
    """
    Run source code and return the interpreter instance after execution.
    """
    ast = parse_source(source)
    interpreter = Interpreter("<test>")
    interpreter.evaluate(ast)
    return interpreter
