import unittest

from treelox.environment import Environment
from treelox.errors import LoxRuntimeError
from treelox.tokens import Token, TokenType


def name(lexeme):
    return Token(TokenType.IDENTIFIER, lexeme, None, 1)


class EnvironmentTestCase(unittest.TestCase):

    def setUp(self):
        self.globals = Environment()
        self.globals.define("a", 1.0)
        self.middle = Environment(self.globals)
        self.middle.define("b", 2.0)
        self.inner = Environment(self.middle)

    def test_get_walks_outward(self):
        self.assertEqual(1.0, self.inner.get(name("a")))
        self.assertEqual(2.0, self.inner.get(name("b")))

    def test_define_overwrites(self):
        self.globals.define("a", "again")
        self.assertEqual("again", self.inner.get(name("a")))

    def test_define_shadows(self):
        self.inner.define("a", 3.0)
        self.assertEqual(3.0, self.inner.get(name("a")))
        self.assertEqual(1.0, self.middle.get(name("a")))

    def test_nil_values_are_defined(self):
        self.middle.define("n", None)
        self.assertIsNone(self.inner.get(name("n")))

    def test_assign_updates_defining_frame(self):
        self.inner.assign(name("b"), 5.0)
        self.assertEqual(5.0, self.middle.values["b"])
        self.assertNotIn("b", self.inner.values)

    def test_undefined(self):
        with self.assertRaises(LoxRuntimeError) as context:
            self.inner.get(name("missing"))
        self.assertEqual("Undefined variable 'missing'.", context.exception.message)
        self.assertRaises(LoxRuntimeError, self.inner.assign, name("missing"), 1.0)

    def test_distance_access(self):
        self.assertEqual(2.0, self.inner.get_at(1, name("b")))
        self.assertEqual(1.0, self.inner.get_at(2, name("a")))
        self.inner.assign_at(2, name("a"), 9.0)
        self.assertEqual(9.0, self.globals.values["a"])

    def test_distance_access_uses_exact_frame(self):
        self.middle.define("a", "shadow")
        self.assertEqual(1.0, self.inner.get_at(2, name("a")))
        self.inner.assign_at(1, name("a"), "changed")
        self.assertEqual(1.0, self.globals.values["a"])
        self.assertEqual("changed", self.middle.values["a"])

    def test_distance_access_to_missing_name(self):
        with self.assertRaises(LoxRuntimeError) as context:
            self.inner.get_at(1, name("x"))
        self.assertEqual("Undefined variable 'x'.", context.exception.message)
        # present further out, but not in the frame at that distance
        self.assertRaises(LoxRuntimeError, self.inner.get_at, 1, name("a"))
        self.assertRaises(LoxRuntimeError, self.inner.assign_at, 1, name("x"), 1.0)
        self.assertNotIn("x", self.middle.values)


if __name__ == '__main__':
    unittest.main()
