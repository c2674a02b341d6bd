"""Syntax tree node families.

``Expr`` and ``Stmt`` are closed families: each variant is generated by
``make_syntax_tree_node`` and listed in the family's ``variants`` tuple.
Nodes support structural pattern matching on their fields, in declaration
order, and compare by identity. Every node gets a process-unique integer
``handle`` when it is built; the resolver keys its scope distances on it.
"""

import itertools

from treelox.tokens import Token

_handles = itertools.count()


def make_syntax_tree_node(base_class, name, *attrs):
    def __init__(self, *values):
        if len(values) != len(attrs):
            message = f"{name}.__init__() takes {len(attrs)} positional arguments but {len(values)} were given"
            raise TypeError(message)

        self.handle = next(_handles)
        for attr, value in zip(attrs, values):
            setattr(self, attr, value)

    def __repr__(self):
        fields = ", ".join(f"{attr}={getattr(self, attr)!r}" for attr in attrs)
        return f"{base_class.__name__}.{name}({fields})"

    subclass = type(
        name, (base_class,),
        {
            "__init__": __init__,
            "__repr__": __repr__,
            "__slots__": attrs,
            "__match_args__": attrs,
            "__qualname__": f"{base_class.__name__}.{name}",
            "fields": attrs,
        })

    setattr(base_class, name, subclass)
    base_class.variants += (subclass,)
    return subclass


class Expr:
    __slots__ = ("handle",)
    variants = ()


class Stmt:
    __slots__ = ("handle",)
    variants = ()


# Expr variants
make_syntax_tree_node(Expr, "Assign", "target", "value")
make_syntax_tree_node(Expr, "Binary", "left", "operator", "right")
make_syntax_tree_node(Expr, "Call", "callee", "paren", "arguments")
make_syntax_tree_node(Expr, "Grouping", "expression")
make_syntax_tree_node(Expr, "Literal", "value")
make_syntax_tree_node(Expr, "Logical", "left", "operator", "right")
make_syntax_tree_node(Expr, "Ternary", "condition", "then_branch", "else_branch")
make_syntax_tree_node(Expr, "Unary", "operator", "right")
make_syntax_tree_node(Expr, "Variable", "name")

# Stmt variants
make_syntax_tree_node(Stmt, "Block", "statements")
make_syntax_tree_node(Stmt, "Break", "keyword")
make_syntax_tree_node(Stmt, "Expression", "expression")
make_syntax_tree_node(Stmt, "Function", "name", "params", "body")
make_syntax_tree_node(Stmt, "If", "condition", "then_branch", "else_branch")
make_syntax_tree_node(Stmt, "Print", "expression")
make_syntax_tree_node(Stmt, "Return", "keyword", "value")
make_syntax_tree_node(Stmt, "Var", "name", "initializer")
make_syntax_tree_node(Stmt, "While", "condition", "body")


def locate(node):
    """Return the shallowest token under ``node``, or None if it holds none."""
    # Breadth first and iterative: used on trees too deep to recurse into.
    queue = [node]
    while queue:
        current = queue.pop(0)
        for field in current.fields:
            value = getattr(current, field)
            children = value if isinstance(value, list) else [value]
            for child in children:
                if isinstance(child, (Expr, Stmt)):
                    queue.append(child)
                elif isinstance(child, Token):
                    return child
    return None
