"""Error values shared by every phase of the pipeline.

Scan, parse and resolve errors are collected into lists and handed back to the
caller next to the phase's result. Runtime errors are raised inside the
interpreter and turned into data by ``Interpreter.interpret``.
"""

from treelox.tokens import TokenType


class LoxError(Exception):
    def __init__(self, message, token=None, line=None):
        super().__init__(message)
        self.message = message
        self.token = token
        if line is None and token is not None:
            line = token.line
        self.line = line

    @property
    def where(self):
        if self.token is None:
            return ""
        if self.token.type == TokenType.EOF:
            return " at end"
        return f" at '{self.token.lexeme}'"

    def __str__(self):
        return f"[line {self.line}] Error{self.where}: {self.message}"

    def __repr__(self):
        return f"{type(self).__name__}({self.message!r}, line={self.line})"


class ScanError(LoxError):
    def __init__(self, line, message):
        super().__init__(message, line=line)


class ParseError(LoxError):
    def __init__(self, token, message):
        super().__init__(message, token=token)


class ResolveError(LoxError):
    def __init__(self, token, message):
        super().__init__(message, token=token)


class LoxRuntimeError(LoxError):
    def __init__(self, token, message):
        super().__init__(message, token=token)
