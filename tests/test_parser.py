# test_parser.py
import unittest

from exprtree.errors import LexError, ParseError
from exprtree.math_ast import Binary, Literal, Unary
from exprtree.parser import Parser, parse
from exprtree.tokenizer import tokenize


class TestParser(unittest.TestCase):
    def test_parse(self):
        node = parse("1 + 2")
        self.assertEqual(node.left.value, 1)
        self.assertEqual(node.right.value, 2)
        self.assertEqual(node.op, '+')

    def test_precedence(self):
        node = parse("2 + 3 * 4")
        self.assertEqual(node, Binary('+', Literal(2), Binary('*', Literal(3), Literal(4))))

    def test_left_associative(self):
        self.assertEqual(
            parse("10 - 3 - 2"),
            Binary('-', Binary('-', Literal(10), Literal(3)), Literal(2)))
        self.assertEqual(
            parse("8 / 4 % 3"),
            Binary('%', Binary('/', Literal(8), Literal(4)), Literal(3)))

    def test_parentheses(self):
        node = parse("(2 + 3) * 4")
        self.assertEqual(node, Binary('*', Binary('+', Literal(2), Literal(3)), Literal(4)))
        self.assertEqual(parse("(((7)))"), Literal(7))

    def test_unary(self):
        self.assertEqual(parse("-5"), Unary('-', Literal(5)))
        self.assertEqual(parse("--5"), Unary('-', Unary('-', Literal(5))))

    def test_unary_binds_tighter_than_multiply(self):
        self.assertEqual(
            parse("-2 * 3"),
            Binary('*', Unary('-', Literal(2)), Literal(3)))

    def test_subtract_negative(self):
        node = parse("-1--2")
        self.assertEqual(node.left.operand.value, 1)
        self.assertEqual(node.right.operand.value, 2)
        self.assertEqual(node.op, '-')

    def test_deterministic(self):
        self.assertEqual(parse("(10 + 5) * -2 % 7"), parse("(10 + 5) * -2 % 7"))

    def test_unclosed_paren(self):
        with self.assertRaises(ParseError):
            parse("(10 + ")
        with self.assertRaises(ParseError) as cm:
            parse("(10 + 5")
        self.assertIn("Expected ')'", str(cm.exception))
        self.assertEqual(cm.exception.position, 7)

    def test_dangling_operator(self):
        with self.assertRaises(ParseError) as cm:
            parse("10 *")
        self.assertEqual(str(cm.exception), "Unexpected end of input")

    def test_empty_input(self):
        with self.assertRaises(ParseError):
            parse("")

    def test_unexpected_token(self):
        with self.assertRaises(ParseError) as cm:
            parse(")")
        self.assertEqual(cm.exception.position, 0)
        with self.assertRaises(ParseError):
            parse("2 * * 3")
        with self.assertRaises(ParseError):
            parse("+3")

    def test_trailing_tokens(self):
        with self.assertRaises(ParseError) as cm:
            parse("10 5")
        self.assertIn("trailing", str(cm.exception))
        self.assertEqual(cm.exception.position, 3)
        with self.assertRaises(ParseError):
            parse("(1))")

    def test_lex_error_passes_through(self):
        with self.assertRaises(LexError):
            parse("10 @ 5")

    def test_too_deep(self):
        with self.assertRaises(ParseError) as cm:
            parse("(" * 100000 + "1" + ")" * 100000)
        self.assertIn("nested too deeply", str(cm.exception))

    def test_parser_requires_eof(self):
        tokens = tokenize("1 + 2")
        with self.assertRaises(ValueError):
            Parser(tokens[:-1])


if __name__ == '__main__':
    unittest.main()
