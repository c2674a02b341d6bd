from typing import NamedTuple

from treelox.callable import LoxCallable, LoxFunction
from treelox.environment import Environment
from treelox.errors import LoxRuntimeError
from treelox.signals import BreakSignal, ReturnSignal
from treelox.syntax import Expr, Stmt, locate
from treelox.tokens import TokenType


class Result(NamedTuple):
    value: object = None
    error: LoxRuntimeError = None

    @property
    def ok(self):
        return self.error is None


def is_truthy(value):
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(left, right):
    # bool is a subclass of int, and 1.0 == True in Python
    if type(left) is not type(right):
        return False
    return left == right


def stringify(value):
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class Interpreter:
    def __init__(self):
        self.globals = Environment()
        self.environment = self.globals
        self.locals = {}

    def interpret(self, statements):
        value = None
        try:
            for statement in statements:
                value = self.execute(statement)
        except LoxRuntimeError as error:
            self.environment = self.globals
            return Result(error=error)
        except RecursionError:
            self.environment = self.globals
            return Result(error=LoxRuntimeError(locate(statement), "Too much nesting."))
        return Result(value)

    def resolve(self, expr, depth):
        self.locals[expr.handle] = depth

    def execute(self, stmt):
        match stmt:
            case Stmt.Block(statements):
                self.execute_block(statements, Environment(self.environment))
            case Stmt.Break():
                raise BreakSignal()
            case Stmt.Expression(expression):
                return self.evaluate(expression)
            case Stmt.Function(name):
                function = LoxFunction(stmt, self.environment)
                self.environment.define(name.lexeme, function)
            case Stmt.If(condition, then_branch, else_branch):
                if is_truthy(self.evaluate(condition)):
                    self.execute(then_branch)
                elif else_branch is not None:
                    self.execute(else_branch)
            case Stmt.Print(expression):
                print(stringify(self.evaluate(expression)))
            case Stmt.Return(_, value):
                raise ReturnSignal(None if value is None else self.evaluate(value))
            case Stmt.Var(name, initializer):
                value = None
                if initializer is not None:
                    value = self.evaluate(initializer)
                self.environment.define(name.lexeme, value)
            case Stmt.While(condition, body):
                try:
                    while is_truthy(self.evaluate(condition)):
                        self.execute(body)
                except BreakSignal:
                    pass
            case _:
                raise TypeError(f"Cannot execute {type(stmt).__name__}")
        return None

    def execute_block(self, statements, environment):
        previous = self.environment
        try:
            self.environment = environment
            for statement in statements:
                self.execute(statement)
        finally:
            self.environment = previous

    def evaluate(self, expr):
        match expr:
            case Expr.Assign(target, value):
                return self.assign_variable(expr, target.name, self.evaluate(value))
            case Expr.Binary(left, operator, right):
                return self.binary(operator, self.evaluate(left), self.evaluate(right))
            case Expr.Call(callee, paren, arguments):
                return self.call(paren, self.evaluate(callee), arguments)
            case Expr.Grouping(expression):
                return self.evaluate(expression)
            case Expr.Literal(value):
                return value
            case Expr.Logical(left, operator, right):
                value = self.evaluate(left)
                if operator.type == TokenType.OR:
                    if is_truthy(value):
                        return value
                elif not is_truthy(value):
                    return value
                return self.evaluate(right)
            case Expr.Ternary(condition, then_branch, else_branch):
                if is_truthy(self.evaluate(condition)):
                    return self.evaluate(then_branch)
                return self.evaluate(else_branch)
            case Expr.Unary(operator, right):
                return self.unary(operator, self.evaluate(right))
            case Expr.Variable(name):
                return self.lookup_variable(expr, name)
            case _:
                raise TypeError(f"Cannot evaluate {type(expr).__name__}")

    def lookup_variable(self, expr, name):
        if (distance := self.locals.get(expr.handle)) is not None:
            return self.environment.get_at(distance, name)
        return self.globals.get(name)

    def assign_variable(self, expr, name, value):
        if (distance := self.locals.get(expr.handle)) is not None:
            self.environment.assign_at(distance, name, value)
        else:
            self.globals.assign(name, value)
        return value

    def call(self, paren, callee, argument_exprs):
        arguments = [self.evaluate(argument) for argument in argument_exprs]
        if not isinstance(callee, LoxCallable):
            raise LoxRuntimeError(paren, "Can only call functions.")
        if len(arguments) != callee.arity():
            raise LoxRuntimeError(
                paren, f"Expected {callee.arity()} arguments but got {len(arguments)}.")
        try:
            return callee.call(self, arguments)
        except RecursionError:
            raise LoxRuntimeError(paren, "Stack overflow.") from None

    def unary(self, operator, right):
        match operator.type:
            case TokenType.BANG:
                return not is_truthy(right)
            case TokenType.MINUS:
                self.check_operands(operator, right)
                return -right
        raise LoxRuntimeError(operator, f"Unknown unary operator '{operator.lexeme}'.")

    def binary(self, operator, left, right):
        match operator.type:
            case TokenType.BANG_EQUAL: return not is_equal(left, right)
            case TokenType.EQUAL_EQUAL: return is_equal(left, right)
            case TokenType.GREATER:
                self.check_operands(operator, left, right)
                return left > right
            case TokenType.GREATER_EQUAL:
                self.check_operands(operator, left, right)
                return left >= right
            case TokenType.LESS:
                self.check_operands(operator, left, right)
                return left < right
            case TokenType.LESS_EQUAL:
                self.check_operands(operator, left, right)
                return left <= right
            case TokenType.MINUS:
                self.check_operands(operator, left, right)
                return left - right
            case TokenType.PLUS:
                if isinstance(left, float) and isinstance(right, float):
                    return left + right
                if isinstance(left, str) or isinstance(right, str):
                    return stringify(left) + stringify(right)
                raise LoxRuntimeError(
                    operator, "Operands must be two numbers or one of them must be a string.")
            case TokenType.SLASH:
                if isinstance(right, float) and right == 0.0:
                    raise LoxRuntimeError(operator, "Division by zero.")
                self.check_operands(operator, left, right)
                return left / right
            case TokenType.STAR:
                self.check_operands(operator, left, right)
                return left * right
        raise LoxRuntimeError(operator, f"Unknown binary operator '{operator.lexeme}'.")

    def check_operands(self, operator, *operands):
        if any(not isinstance(operand, float) for operand in operands):
            if len(operands) == 1:
                raise LoxRuntimeError(operator, "Operand must be a number.")
            raise LoxRuntimeError(operator, "Operands must be numbers.")


def interpret(statements, interpreter=None):
    if interpreter is None:
        interpreter = Interpreter()
    return interpreter.interpret(statements)
