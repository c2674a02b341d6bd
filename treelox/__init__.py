from treelox.errors import LoxError, LoxRuntimeError, ParseError, ResolveError, ScanError
from treelox.interpreter import Interpreter, Result, interpret
from treelox.parser import parse
from treelox.resolver import resolve
from treelox.scanner import scan

__all__ = [
    "Interpreter", "LoxError", "LoxRuntimeError", "ParseError", "ResolveError",
    "Result", "ScanError", "interpret", "parse", "resolve", "scan",
]
