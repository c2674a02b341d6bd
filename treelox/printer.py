"""Debug dumps of the syntax tree."""

from treelox.interpreter import stringify
from treelox.syntax import Expr, Stmt


class AstPrinter:
    """Parenthesized prefix form, e.g. ``(+ 1 (* 2 3))``."""

    def print(self, node):
        if isinstance(node, Stmt):
            return self.print_stmt(node)
        return self.print_expr(node)

    def print_stmt(self, stmt):
        match stmt:
            case Stmt.Block(statements):
                return self.join("block", *map(self.print_stmt, statements))
            case Stmt.Break():
                return "(break)"
            case Stmt.Expression(expression):
                return self.join(";", self.print_expr(expression))
            case Stmt.Function(name, params, body):
                signature = "(" + " ".join(param.lexeme for param in params) + ")"
                return self.join(
                    "fun", name.lexeme, signature, *map(self.print_stmt, body))
            case Stmt.If(condition, then_branch, None):
                return self.join(
                    "if", self.print_expr(condition), self.print_stmt(then_branch))
            case Stmt.If(condition, then_branch, else_branch):
                return self.join(
                    "if-else", self.print_expr(condition),
                    self.print_stmt(then_branch), self.print_stmt(else_branch))
            case Stmt.Print(expression):
                return self.join("print", self.print_expr(expression))
            case Stmt.Return(_, None):
                return "(return)"
            case Stmt.Return(_, value):
                return self.join("return", self.print_expr(value))
            case Stmt.Var(name, None):
                return self.join("var", name.lexeme)
            case Stmt.Var(name, initializer):
                return self.join("var", name.lexeme, "=", self.print_expr(initializer))
            case Stmt.While(condition, body):
                return self.join(
                    "while", self.print_expr(condition), self.print_stmt(body))
            case _:
                raise TypeError(f"Cannot print {type(stmt).__name__}")

    def print_expr(self, expr):
        match expr:
            case Expr.Assign(target, value):
                return self.join("=", target.name.lexeme, self.print_expr(value))
            case Expr.Binary(left, operator, right) | Expr.Logical(left, operator, right):
                return self.join(
                    operator.lexeme, self.print_expr(left), self.print_expr(right))
            case Expr.Call(callee, _, arguments):
                return self.join(
                    "call", self.print_expr(callee), *map(self.print_expr, arguments))
            case Expr.Grouping(expression):
                return self.join("group", self.print_expr(expression))
            case Expr.Literal(value):
                if isinstance(value, str):
                    return f"\"{value}\""
                return stringify(value)
            case Expr.Ternary(condition, then_branch, else_branch):
                return self.join(
                    "?:", self.print_expr(condition),
                    self.print_expr(then_branch), self.print_expr(else_branch))
            case Expr.Unary(operator, right):
                return self.join(operator.lexeme, self.print_expr(right))
            case Expr.Variable(name):
                return name.lexeme
            case _:
                raise TypeError(f"Cannot print {type(expr).__name__}")

    @staticmethod
    def join(name, *parts):
        return "(" + " ".join((name, *parts)) + ")"


class RpnPrinter:
    """Postfix form of arithmetic expressions, e.g. ``1 2 3 * +``."""

    def print(self, expr):
        match expr:
            case Expr.Binary(left, operator, right):
                return f"{self.print(left)} {self.print(right)} {operator.lexeme}"
            case Expr.Grouping(expression):
                return self.print(expression)
            case Expr.Literal(value):
                return stringify(value)
            case Expr.Unary(operator, right):
                # "-" alone would be read back as subtraction
                name = "neg" if operator.lexeme == "-" else operator.lexeme
                return f"{self.print(right)} {name}"
            case Expr.Variable(name):
                return name.lexeme
            case _:
                raise TypeError(f"Cannot print {type(expr).__name__} in postfix form")
