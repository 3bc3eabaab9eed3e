"""
calclang interpreter

This is the main entry point for the calclang interpreter.

Workflow:
1. The source program is read from the file given on the command line.
2. The Lexer produces tokens on demand for the Parser.
3. The Parser builds an AST following the language grammar.
4. The Interpreter walks the AST, updating the variable environment.
5. The final environment is printed, one `name = value` line per variable.

Set CALCDEBUG to dump the tokens and AST before evaluation.
"""
import argparse
import os
import sys

from termcolor import colored

from calclang import CalcException, Interpreter, evaluate_expression, load_source, run, tokenize
from calclang.nodes import format_tree
from calclang.runner import parse_program


def print_error(error: Exception):
    """
    Print an error as `<ExceptionName>: <message>`.
    """
    label = colored(f"{type(error).__name__}:", "red", attrs=["bold"])
    print(f"{label} {error}")


def print_environment(env: dict[str, int]):
    for name in sorted(env):
        print(f"{name} = {env[name]}")


def debug_print_tokens_ast(source: str, file: str, skip_unknown: bool):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    print(tokenize(source, skip_unknown))
    print("\nAST:\n")
    print(format_tree(parse_program(source, file, skip_unknown)))
    print(" ")


def run_script(script_name: str, skip_unknown: bool = False) -> int:
    """
    Run a program file and print its final environment.
    """
    try:
        code = load_source(script_name)
    except OSError as e:
        print_error(e)
        return 1

    if os.environ.get('CALCDEBUG'):
        try:
            debug_print_tokens_ast(code, script_name, skip_unknown)
        except CalcException:
            # reported below by run()
            pass

    result = run(code, script_name, skip_unknown)
    print_environment(result.environment)
    if not result.ok:
        print_error(result.error)
        return 1
    return 0


def print_tokens(script_name: str, skip_unknown: bool = False) -> int:
    """
    Print the token stream of a program file, one token per line.
    """
    try:
        for token in tokenize(load_source(script_name), skip_unknown):
            print(repr(token))
    except (OSError, CalcException) as e:
        print_error(e)
        return 1
    return 0


def run_repl(skip_unknown: bool = False):
    """
    Run the interactive REPL

    Lines starting with BEGIN are collected until the program ends with a
    period; any other line is evaluated as an expression.
    """
    print("calclang interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = Interpreter("<stdin>")
    buffer: list[str] = []
    while True:
        try:
            prompt = ">>> " if not buffer else "... "
            line = input(prompt)
            if not buffer and line.strip() in {"exit", "quit"}:
                break
            if not buffer and not line.strip():
                continue
            buffer.append(line)
            source = "\n".join(buffer).strip()

            if not source.startswith("BEGIN"):
                buffer.clear()
                try:
                    print(evaluate_expression(source, interpreter.vars, skip_unknown))
                except CalcException as e:
                    print_error(e)
                continue

            # Incomplete program, keep reading
            if not source.endswith("."):
                continue
            buffer.clear()
            result = run(source, "<stdin>", skip_unknown, interpreter)
            if result.ok:
                print_environment(result.environment)
            else:
                print_error(result.error)
        except KeyboardInterrupt:
            # Discard a half-typed program; leave only from an empty prompt
            if buffer:
                buffer.clear()
                print()
                continue
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calc",
        description="Run a calclang program, or start the REPL when no file is given.",
    )
    parser.add_argument("script", nargs="?", help="path to a program file")
    parser.add_argument(
        "--tokens",
        action="store_true",
        help="print the token stream instead of running the program",
    )
    parser.add_argument(
        "--skip-unknown",
        action="store_true",
        help="ignore characters that start no token instead of failing",
    )
    return parser


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No script: enter the REPL.
    - A script: run it, print the final environment, and return 1 on error.
    - A script with --tokens: print its tokens only.
    """
    args = build_parser().parse_args(argv[1:])
    if args.script is None:
        if args.tokens:
            build_parser().print_usage()
            return 1
        run_repl(args.skip_unknown)
        return 0
    if args.tokens:
        return print_tokens(args.script, args.skip_unknown)
    return run_script(args.script, args.skip_unknown)


def cli() -> None:
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    cli()
