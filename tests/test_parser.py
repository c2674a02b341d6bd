import unittest

from treelox.errors import ParseError
from treelox.parser import Parser, parse
from treelox.printer import AstPrinter
from treelox.scanner import scan
from treelox.syntax import Expr, Stmt
from treelox.tokens import TokenType


def parse_source(source):
    tokens, errors = scan(source)
    assert not errors, errors
    return parse(tokens)


def printed(source):
    statements, errors = parse_source(source)
    assert not errors, errors
    printer = AstPrinter()
    return [printer.print(statement) for statement in statements]


def messages(source):
    _, errors = parse_source(source)
    return [error.message for error in errors]


class ExpressionTestCase(unittest.TestCase):

    def test_precedence(self):
        cases = {
            "1 + 2 * 3;": "(; (+ 1 (* 2 3)))",
            "(1 + 2) * 3;": "(; (* (group (+ 1 2)) 3))",
            "1 - 2 - 3;": "(; (- (- 1 2) 3))",
            "-1 < 2 == !false;": "(; (== (< (- 1) 2) (! false)))",
            "a or b and c;": "(; (or a (and b c)))",
            "a = b = 1;": "(; (= a (= b 1)))",
        }
        for case, expected in cases.items():
            self.assertEqual([expected], printed(case), case)

    def test_ternary_is_right_associative(self):
        self.assertEqual(
            ["(; (?: a 1 (?: b 2 3)))"], printed("a ? 1 : b ? 2 : 3;"))
        self.assertEqual(
            ["(; (= x (?: (or a b) 1 2)))"], printed("x = a or b ? 1 : 2;"))

    def test_calls_chain(self):
        self.assertEqual(["(; (call (call f 1 \"s\")))"], printed("f(1, \"s\")();"))

    def test_assignment_target_is_variable_node(self):
        statements, _ = parse_source("a = 1;")
        assign = statements[0].expression
        self.assertIsInstance(assign, Expr.Assign)
        self.assertIsInstance(assign.target, Expr.Variable)
        self.assertEqual("a", assign.target.name.lexeme)

    def test_nodes_have_distinct_handles(self):
        statements, _ = parse_source("a + a;")
        binary = statements[0].expression
        self.assertNotEqual(binary.left.handle, binary.right.handle)
        self.assertNotEqual(binary.left, binary.right)

    def test_invalid_assignment_target(self):
        statements, errors = parse_source("1 + 2 = 3; print 4;")
        self.assertEqual(["Invalid assignment target."], [error.message for error in errors])
        self.assertEqual(2, len(statements))

    def test_argument_limit_is_not_fatal(self):
        arguments = ", ".join("1" for _ in range(256))
        statements, errors = parse_source(f"f({arguments});")
        self.assertEqual(["Can't have more than 255 arguments."], [error.message for error in errors])
        self.assertEqual(256, len(statements[0].expression.arguments))


class StatementTestCase(unittest.TestCase):

    def test_declarations(self):
        self.assertEqual(
            ["(var a = 1)", "(var b)", "(fun f (x y) (return (+ x y)))"],
            printed("var a = 1; var b; fun f(x, y) { return x + y; }"))

    def test_control_flow(self):
        self.assertEqual(
            ["(if-else a (print 1) (block (print 2)))", "(while true (; (= x 1)))"],
            printed("if (a) print 1; else { print 2; } while (true) x = 1;"))

    def test_for_desugars_to_while(self):
        self.assertEqual(
            ["(block (var i = 0) (while (< i 3) (block (print i) (; (= i (+ i 1))))))"],
            printed("for (var i = 0; i < 3; i = i + 1) print i;"))

    def test_empty_for_loops_forever(self):
        statements, errors = parse_source("for (;;) break;")
        self.assertEqual([], errors)
        loop = statements[0]
        self.assertIsInstance(loop, Stmt.While)
        self.assertIsInstance(loop.condition, Expr.Literal)
        self.assertIs(True, loop.condition.value)
        self.assertIsInstance(loop.body, Stmt.Break)

    def test_return_without_value(self):
        self.assertEqual(["(fun f () (return))"], printed("fun f() { return; }"))

    def test_parameter_limit_is_not_fatal(self):
        params = ", ".join(f"p{i}" for i in range(9))
        statements, errors = parse_source(f"fun f({params}) {{}}")
        self.assertEqual(["Can't have more than 8 parameters."], [error.message for error in errors])
        self.assertEqual(9, len(statements[0].params))

        params = ", ".join(f"p{i}" for i in range(8))
        self.assertEqual([], messages(f"fun f({params}) {{}}"))


class BreakTestCase(unittest.TestCase):

    def test_break_outside_loop(self):
        self.assertEqual(["Can't use 'break' outside of a loop."], messages("break;"))
        self.assertEqual(["Can't use 'break' outside of a loop."], messages("{ break; }"))

    def test_break_inside_loops(self):
        self.assertEqual([], messages("while (true) { if (a) break; }"))
        self.assertEqual([], messages("for (;;) { { break; } }"))

    def test_break_after_loop(self):
        self.assertEqual(
            ["Can't use 'break' outside of a loop."], messages("while (a) print 1; break;"))

    def test_break_in_function_inside_loop(self):
        self.assertEqual(
            ["Can't use 'break' outside of a loop."],
            messages("while (true) { fun f() { break; } }"))
        self.assertEqual([], messages("fun f() { while (true) break; }"))


class RecoveryTestCase(unittest.TestCase):

    def test_reports_every_statement_error(self):
        statements, errors = parse_source("var = 1;\nprint 2;\nprint (3;\nvar b = 4;")
        self.assertEqual(
            ["Expected variable name.", "Expected ')' after expression."],
            [error.message for error in errors])
        self.assertEqual([1, 3], [error.line for error in errors])
        self.assertEqual(["(print 2)", "(var b = 4)"], [AstPrinter().print(s) for s in statements])

    def test_synchronizes_on_keyword(self):
        statements, errors = parse_source("1 + ; fun f() {} print f;")
        self.assertEqual(1, len(errors))
        self.assertEqual(2, len(statements))

    def test_reserved_keywords_are_not_expressions(self):
        statements, errors = parse_source("class; print 1;")
        self.assertEqual(["Expected expression."], [error.message for error in errors])
        self.assertEqual(1, len(statements))

    def test_error_at_end(self):
        _, errors = parse_source("print 1")
        self.assertEqual(1, len(errors))
        self.assertIsInstance(errors[0], ParseError)
        self.assertEqual(TokenType.EOF, errors[0].token.type)
        self.assertEqual("[line 1] Error at end: Expected ';' after value.", str(errors[0]))

    def test_error_at_token(self):
        _, errors = parse_source("print );")
        self.assertEqual("[line 1] Error at ')': Expected expression.", str(errors[0]))

    def test_unclosed_block(self):
        statements, errors = parse_source("{ print 1;")
        self.assertEqual(["Expected '}' after block."], [error.message for error in errors])
        self.assertEqual([], statements)

    def test_deep_nesting_is_reported(self):
        source = "print " + "(" * 400 + "1" + ")" * 400 + ";\nprint 2;"
        statements, errors = parse_source(source)
        self.assertEqual(["Too much nesting."], [error.message for error in errors])
        self.assertEqual(["(print 2)"], [AstPrinter().print(s) for s in statements])

    def test_requires_tokens(self):
        self.assertRaises(ValueError, Parser, [])

    def test_empty_program(self):
        self.assertEqual(([], []), parse_source(""))


if __name__ == '__main__':
    unittest.main()
