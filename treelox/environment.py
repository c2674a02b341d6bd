from treelox.errors import LoxRuntimeError


class Environment:
    def __init__(self, enclosing=None):
        self.values = {}
        self.enclosing = enclosing

    def define(self, name, value):
        self.values[name] = value

    def assign(self, name, value):
        if name.lexeme in self.values:
            self.values[name.lexeme] = value
            return
        if self.enclosing is not None:
            self.enclosing.assign(name, value)
            return
        raise LoxRuntimeError(
            name, f"Undefined variable '{name.lexeme}'.")

    def get(self, name):
        if name.lexeme in self.values:
            return self.values[name.lexeme]
        if self.enclosing is not None:
            return self.enclosing.get(name)
        raise LoxRuntimeError(
            name, f"Undefined variable '{name.lexeme}'.")

    def assign_at(self, distance, name, value):
        environment = self.ancestor(distance)
        if name.lexeme not in environment.values:
            raise LoxRuntimeError(
                name, f"Undefined variable '{name.lexeme}'.")
        environment.values[name.lexeme] = value
        return value

    def get_at(self, distance, name):
        environment = self.ancestor(distance)
        if name.lexeme not in environment.values:
            raise LoxRuntimeError(
                name, f"Undefined variable '{name.lexeme}'.")
        return environment.values[name.lexeme]

    def ancestor(self, distance):
        environment = self
        for _ in range(distance):
            environment = environment.enclosing
        return environment
