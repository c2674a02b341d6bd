"""Command-line driver: runs a script file or an interactive prompt."""

import argparse
import sys

from termcolor import colored

from treelox.interpreter import Interpreter, stringify
from treelox.parser import parse
from treelox.printer import AstPrinter, RpnPrinter
from treelox.resolver import resolve
from treelox.scanner import scan
from treelox.syntax import Stmt

EXIT_DATA_ERROR = 65
EXIT_NO_INPUT = 66
EXIT_SOFTWARE = 70


class Lox:
    def __init__(self, color=True, dump=None, stderr=None):
        self.interpreter = Interpreter()
        self.color = color
        self.dump = dump
        self.stderr = stderr
        self.had_error = False
        self.had_runtime_error = False

    def main(self, args):
        if args.filename is not None:
            self.run_file(args.filename)
        else:
            self.run_prompt()

        if self.had_error:
            return EXIT_DATA_ERROR
        if self.had_runtime_error:
            return EXIT_SOFTWARE
        return 0

    def run_file(self, filename):
        try:
            with open(filename, "r") as file:
                source = file.read()
        except OSError as error:
            self.report(f"Could not open '{filename}': {error.strerror}.")
            sys.exit(EXIT_NO_INPUT)
        self.run(source)

    def run_prompt(self):
        while True:
            try:
                line = input("> ")
            except EOFError:
                print()
                break
            self.had_error = False
            self.had_runtime_error = False
            result = self.run(line)
            if result is not None and result.ok and result.value is not None:
                print(stringify(result.value))

    def run(self, source):
        tokens, errors = scan(source)
        if self.dump == "tokens" and not errors:
            self.print_dump(tokens, [])
            return None

        statements, parse_errors = parse(tokens)
        errors = errors + parse_errors
        if errors:
            return self.report_errors(errors)

        if self.dump is not None:
            self.print_dump(tokens, statements)
            return None

        errors = resolve(self.interpreter, statements)
        if errors:
            return self.report_errors(errors)

        result = self.interpreter.interpret(statements)
        if not result.ok:
            self.report(str(result.error))
            self.had_runtime_error = True
        return result

    def print_dump(self, tokens, statements):
        match self.dump:
            case "tokens":
                for token in tokens:
                    print(token)
            case "ast":
                printer = AstPrinter()
                for statement in statements:
                    print(printer.print(statement))
            case "rpn":
                printer = RpnPrinter()
                for statement in statements:
                    if not isinstance(statement, Stmt.Expression):
                        continue
                    try:
                        print(printer.print(statement.expression))
                    except TypeError as error:
                        self.report(str(error))

    def report_errors(self, errors):
        for error in sorted(errors, key=lambda error: error.line):
            self.report(str(error))
        self.had_error = True
        return None

    def report(self, message):
        if self.color and message.startswith("["):
            prefix, _, rest = message.partition(" Error")
            message = prefix + " " + colored("Error", "red", attrs=["bold"]) + rest
        print(message, file=self.stderr or sys.stderr)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="treelox", description="Run Lox scripts")
    parser.add_argument("filename", nargs="?")
    parser.add_argument(
        "--dump", choices=("tokens", "ast", "rpn"),
        help="print tokens, the syntax tree or postfix expressions instead of running")
    parser.add_argument(
        "--no-color", dest="color", action="store_false",
        help="disable colored diagnostics")
    args = parser.parse_args(argv)
    return Lox(color=args.color, dump=args.dump).main(args)


if __name__ == "__main__":
    sys.exit(main())
