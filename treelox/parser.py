from treelox.errors import ParseError
from treelox.syntax import Expr, Stmt
from treelox.tokens import TokenType

MAX_ARGUMENTS = 255
MAX_PARAMETERS = 8

STATEMENT_KEYWORDS = (
    TokenType.CLASS, TokenType.FUN, TokenType.VAR, TokenType.FOR,
    TokenType.IF, TokenType.WHILE, TokenType.PRINT, TokenType.RETURN,
)


class Parser:
    def __init__(self, tokens):
        if not tokens:
            raise ValueError("Expected a non-empty list of tokens.")
        self.tokens = tokens
        self.current = 0
        self.errors = []
        # "loop" or "function" for every body currently being parsed
        self.contexts = []

    def parse(self):
        statements = []
        while not self.at_end():
            if (statement := self.declaration()) is not None:
                statements.append(statement)
        return statements, self.errors

    def declaration(self):
        try:
            if self.match(TokenType.FUN):
                return self.function("function")
            if self.match(TokenType.VAR):
                return self.var_declaration()
            return self.statement()
        except ParseError as error:
            self.errors.append(error)
            self.synchronize()
            return None
        except RecursionError:
            self.errors.append(ParseError(self.peek(), "Too much nesting."))
            self.synchronize()
            return None

    def function(self, kind):
        name = self.consume(TokenType.IDENTIFIER, f"Expected {kind} name.")
        self.consume(TokenType.LEFT_PAREN, f"Expected '(' after {kind} name.")

        params = []
        if not self.check(TokenType.RIGHT_PAREN):
            params.append(self.consume(
                TokenType.IDENTIFIER, "Expected parameter name."))
            while self.match(TokenType.COMMA):
                if len(params) >= MAX_PARAMETERS:
                    self.error(
                        self.peek(), f"Can't have more than {MAX_PARAMETERS} parameters.")
                params.append(self.consume(
                    TokenType.IDENTIFIER, "Expected parameter name."))

        self.consume(TokenType.RIGHT_PAREN, "Expected ')' after parameters.")
        self.consume(TokenType.LEFT_BRACE, f"Expected '{{' before {kind} body.")
        body = self.within("function", self.block)
        return Stmt.Function(name, params, body)

    def statement(self):
        if self.match(TokenType.FOR):
            return self.for_statement()
        if self.match(TokenType.IF):
            return self.if_statement()
        if self.match(TokenType.PRINT):
            return self.print_statement()
        if self.match(TokenType.LEFT_BRACE):
            return Stmt.Block(self.block())
        if keyword := self.match(TokenType.RETURN):
            return self.return_statement(keyword)
        if self.match(TokenType.WHILE):
            return self.while_statement()
        if keyword := self.match(TokenType.BREAK):
            return self.break_statement(keyword)
        return self.expression_statement()

    def block(self):
        statements = []
        while not self.check(TokenType.RIGHT_BRACE) and not self.at_end():
            if (statement := self.declaration()) is not None:
                statements.append(statement)
        self.consume(TokenType.RIGHT_BRACE, "Expected '}' after block.")
        return statements

    def break_statement(self, keyword):
        if not self.contexts or self.contexts[-1] != "loop":
            self.error(keyword, "Can't use 'break' outside of a loop.")
        self.consume(TokenType.SEMICOLON, "Expected ';' after 'break'.")
        return Stmt.Break(keyword)

    def for_statement(self):
        self.consume(TokenType.LEFT_PAREN, "Expected '(' after 'for'.")

        initializer = None
        if self.match(TokenType.VAR):
            initializer = self.var_declaration()
        elif not self.match(TokenType.SEMICOLON):
            initializer = self.expression_statement()

        condition = None
        if not self.check(TokenType.SEMICOLON):
            condition = self.expression()
        self.consume(TokenType.SEMICOLON, "Expected ';' after loop condition.")

        increment = None
        if not self.check(TokenType.RIGHT_PAREN):
            increment = self.expression()
        self.consume(TokenType.RIGHT_PAREN, "Expected ')' after for clauses.")

        body = self.within("loop", self.statement)

        if increment is not None:
            body = Stmt.Block([body, Stmt.Expression(increment)])
        if condition is None:
            condition = Expr.Literal(True)
        body = Stmt.While(condition, body)
        if initializer is not None:
            body = Stmt.Block([initializer, body])
        return body

    def if_statement(self):
        self.consume(TokenType.LEFT_PAREN, "Expected '(' after 'if'.")
        condition = self.expression()
        self.consume(TokenType.RIGHT_PAREN, "Expected ')' after if condition.")
        then_branch = self.statement()
        else_branch = None
        if self.match(TokenType.ELSE):
            else_branch = self.statement()
        return Stmt.If(condition, then_branch, else_branch)

    def expression_statement(self):
        expression = self.expression()
        self.consume(TokenType.SEMICOLON, "Expected ';' after expression.")
        return Stmt.Expression(expression)

    def print_statement(self):
        expression = self.expression()
        self.consume(TokenType.SEMICOLON, "Expected ';' after value.")
        return Stmt.Print(expression)

    def return_statement(self, keyword):
        value = None
        if not self.check(TokenType.SEMICOLON):
            value = self.expression()
        self.consume(TokenType.SEMICOLON, "Expected ';' after return value.")
        return Stmt.Return(keyword, value)

    def var_declaration(self):
        name = self.consume(TokenType.IDENTIFIER, "Expected variable name.")
        initializer = None
        if self.match(TokenType.EQUAL):
            initializer = self.expression()
        self.consume(TokenType.SEMICOLON, "Expected ';' after variable declaration.")
        return Stmt.Var(name, initializer)

    def while_statement(self):
        self.consume(TokenType.LEFT_PAREN, "Expected '(' after 'while'.")
        condition = self.expression()
        self.consume(TokenType.RIGHT_PAREN, "Expected ')' after condition.")
        body = self.within("loop", self.statement)
        return Stmt.While(condition, body)

    def within(self, context, parse_body):
        self.contexts.append(context)
        try:
            return parse_body()
        finally:
            self.contexts.pop()

    def expression(self):
        return self.assignment()

    def assignment(self):
        expr = self.ternary()
        if equals := self.match(TokenType.EQUAL):
            value = self.assignment()
            if isinstance(expr, Expr.Variable):
                return Expr.Assign(expr, value)
            self.error(equals, "Invalid assignment target.")
        return expr

    def ternary(self):
        expr = self.logic_or()
        if self.match(TokenType.QUESTION):
            then_branch = self.expression()
            self.consume(TokenType.COLON, "Expected ':' in ternary expression.")
            else_branch = self.ternary()
            expr = Expr.Ternary(expr, then_branch, else_branch)
        return expr

    def logic_or(self):
        expr = self.logic_and()
        while operator := self.match(TokenType.OR):
            expr = Expr.Logical(expr, operator, self.logic_and())
        return expr

    def logic_and(self):
        expr = self.equality()
        while operator := self.match(TokenType.AND):
            expr = Expr.Logical(expr, operator, self.equality())
        return expr

    def equality(self):
        expr = self.comparison()
        while operator := self.match(TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL):
            expr = Expr.Binary(expr, operator, self.comparison())
        return expr

    def comparison(self):
        expr = self.addition()
        while operator := self.match(
                TokenType.GREATER, TokenType.GREATER_EQUAL, TokenType.LESS, TokenType.LESS_EQUAL):
            expr = Expr.Binary(expr, operator, self.addition())
        return expr

    def addition(self):
        expr = self.multiplication()
        while operator := self.match(TokenType.MINUS, TokenType.PLUS):
            expr = Expr.Binary(expr, operator, self.multiplication())
        return expr

    def multiplication(self):
        expr = self.unary()
        while operator := self.match(TokenType.SLASH, TokenType.STAR):
            expr = Expr.Binary(expr, operator, self.unary())
        return expr

    def unary(self):
        if operator := self.match(TokenType.BANG, TokenType.MINUS):
            return Expr.Unary(operator, self.unary())
        return self.call()

    def call(self):
        expr = self.primary()
        while self.match(TokenType.LEFT_PAREN):
            expr = self.finish_call(expr)
        return expr

    def finish_call(self, callee):
        arguments = []
        if not self.check(TokenType.RIGHT_PAREN):
            arguments.append(self.expression())
            while self.match(TokenType.COMMA):
                if len(arguments) >= MAX_ARGUMENTS:
                    self.error(
                        self.peek(), f"Can't have more than {MAX_ARGUMENTS} arguments.")
                arguments.append(self.expression())
        paren = self.consume(TokenType.RIGHT_PAREN, "Expected ')' after arguments.")
        return Expr.Call(callee, paren, arguments)

    def primary(self):
        if self.match(TokenType.FALSE):
            return Expr.Literal(False)
        if self.match(TokenType.TRUE):
            return Expr.Literal(True)
        if self.match(TokenType.NIL):
            return Expr.Literal(None)
        if token := self.match(TokenType.NUMBER, TokenType.STRING):
            return Expr.Literal(token.literal)
        if self.match(TokenType.LEFT_PAREN):
            expr = self.expression()
            self.consume(TokenType.RIGHT_PAREN, "Expected ')' after expression.")
            return Expr.Grouping(expr)
        if token := self.match(TokenType.IDENTIFIER):
            return Expr.Variable(token)
        raise ParseError(self.peek(), "Expected expression.")

    def synchronize(self):
        self.advance()
        while not self.at_end():
            if self.previous().type == TokenType.SEMICOLON:
                return
            if self.peek().type in STATEMENT_KEYWORDS:
                return
            self.advance()

    def consume(self, token_type, message):
        if token := self.match(token_type):
            return token
        raise ParseError(self.peek(), message)

    def match(self, *token_types):
        if self.peek().type in token_types:
            return self.advance()
        return None

    def check(self, token_type):
        return self.peek().type == token_type

    def advance(self):
        token = self.peek()
        if not self.at_end():
            self.current += 1
        return token

    def at_end(self):
        return self.peek().type == TokenType.EOF

    def peek(self):
        return self.tokens[self.current]

    def previous(self):
        return self.tokens[self.current - 1]

    def error(self, token, message):
        """Record a non-fatal error and keep parsing."""
        self.errors.append(ParseError(token, message))


def parse(tokens):
    return Parser(tokens).parse()
