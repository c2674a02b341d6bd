"""Static scope resolution.

For every ``Variable`` and ``Assign`` node the resolver works out how many
scopes sit between the reference and the scope declaring the name, and hands
that distance to the interpreter keyed by the node's handle. Globals are not
tracked here; names that are not found in any local scope are left for the
interpreter to look up in the global frame.
"""

from treelox.errors import ResolveError
from treelox.syntax import Expr, Stmt, locate


class Resolver:
    def __init__(self, interpreter):
        self.interpreter = interpreter
        self.scopes = []
        self.errors = []
        self.current_function = "NONE"

    def resolve(self, statements):
        for statement in statements:
            depth, function = len(self.scopes), self.current_function
            try:
                self.resolve_stmt(statement)
            except RecursionError:
                del self.scopes[depth:]
                self.current_function = function
                self.error(locate(statement), "Too much nesting.")
        return self.errors

    def resolve_stmt(self, stmt):
        match stmt:
            case Stmt.Block(statements):
                self.begin_scope()
                self.resolve(statements)
                self.end_scope()
            case Stmt.Break():
                pass
            case Stmt.Expression(expression) | Stmt.Print(expression):
                self.resolve_expr(expression)
            case Stmt.Function(name):
                self.declare(name)
                self.define(name)
                self.resolve_function(stmt, "FUNCTION")
            case Stmt.If(condition, then_branch, else_branch):
                self.resolve_expr(condition)
                self.resolve_stmt(then_branch)
                if else_branch is not None:
                    self.resolve_stmt(else_branch)
            case Stmt.Return(keyword, value):
                if self.current_function == "NONE":
                    self.error(keyword, "Can't return from top-level code.")
                if value is not None:
                    self.resolve_expr(value)
            case Stmt.Var(name, initializer):
                self.declare(name)
                if initializer is not None:
                    self.resolve_expr(initializer)
                self.define(name)
            case Stmt.While(condition, body):
                self.resolve_expr(condition)
                self.resolve_stmt(body)
            case _:
                raise TypeError(f"Cannot resolve {type(stmt).__name__}")

    def resolve_expr(self, expr):
        match expr:
            case Expr.Assign(target, value):
                self.resolve_expr(value)
                self.resolve_local(expr, target.name)
            case Expr.Binary(left, _, right) | Expr.Logical(left, _, right):
                self.resolve_expr(left)
                self.resolve_expr(right)
            case Expr.Call(callee, _, arguments):
                self.resolve_expr(callee)
                for argument in arguments:
                    self.resolve_expr(argument)
            case Expr.Grouping(expression):
                self.resolve_expr(expression)
            case Expr.Literal():
                pass
            case Expr.Ternary(condition, then_branch, else_branch):
                self.resolve_expr(condition)
                self.resolve_expr(then_branch)
                self.resolve_expr(else_branch)
            case Expr.Unary(_, right):
                self.resolve_expr(right)
            case Expr.Variable(name):
                if self.scopes and self.scopes[-1].get(name.lexeme) is False:
                    self.error(name, "Cannot read local variable in its own initializer.")
                self.resolve_local(expr, name)
            case _:
                raise TypeError(f"Cannot resolve {type(expr).__name__}")

    def begin_scope(self):
        self.scopes.append({})

    def end_scope(self):
        self.scopes.pop()

    def declare(self, name):
        if self.scopes:
            if name.lexeme in self.scopes[-1]:
                self.error(name, "Already a variable with this name in this scope.")
            self.scopes[-1][name.lexeme] = False

    def define(self, name):
        if self.scopes:
            self.scopes[-1][name.lexeme] = True

    def resolve_function(self, function, kind):
        enclosing = self.current_function
        self.current_function = kind
        self.begin_scope()
        for param in function.params:
            self.declare(param)
            self.define(param)
        self.resolve(function.body)
        self.end_scope()
        self.current_function = enclosing

    def resolve_local(self, expr, name):
        for i, scope in enumerate(reversed(self.scopes)):
            if name.lexeme in scope:
                self.interpreter.resolve(expr, i)
                return

    def error(self, token, message):
        self.errors.append(ResolveError(token, message))


def resolve(interpreter, statements):
    """Resolve ``statements`` into ``interpreter`` and return the scope errors found."""
    return Resolver(interpreter).resolve(statements)
