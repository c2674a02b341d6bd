"""Non-local exits used by the interpreter for ``break`` and ``return``.

These are not errors: they never derive from ``LoxError`` and are always
caught by the nearest enclosing loop or call before ``interpret`` returns.
"""


class Signal(Exception):
    pass


class BreakSignal(Signal):
    pass


class ReturnSignal(Signal):
    def __init__(self, value):
        super().__init__()
        self.value = value
