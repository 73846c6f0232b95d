# test_render.py
import unittest

from exprtree.evaluate import evaluate
from exprtree.math_ast import Binary, Literal, Unary
from exprtree.parser import parse
from exprtree.render import render_canonical, render_tree


class TestCanonical(unittest.TestCase):
    def test_minimal_parens(self):
        tree = Binary('*', Binary('+', Literal(10), Literal(5)), Unary('-', Literal(2)))
        self.assertEqual(render_canonical(tree), "(10 + 5) * -2")

    def test_redundant_parens_dropped(self):
        self.assertEqual(render_canonical(parse("((1)) + (2 * 3)")), "1 + 2 * 3")
        self.assertEqual(render_canonical(parse("(10 - 3) - 2")), "10 - 3 - 2")

    def test_right_operand_keeps_parens(self):
        self.assertEqual(render_canonical(parse("10 - (3 - 2)")), "10 - (3 - 2)")
        self.assertEqual(render_canonical(parse("10 / (4 % 3)")), "10 / (4 % 3)")
        self.assertEqual(render_canonical(parse("1 + (2 + 3)")), "1 + (2 + 3)")
        self.assertEqual(render_canonical(parse("1 - (2 * 3)")), "1 - 2 * 3")

    def test_negation(self):
        self.assertEqual(render_canonical(parse("--5")), "--5")
        self.assertEqual(render_canonical(parse("-(5 + 2)")), "-(5 + 2)")
        self.assertEqual(render_canonical(parse("-(2 * 3)")), "-(2 * 3)")
        self.assertEqual(render_canonical(parse("-2 * 3")), "-2 * 3")
        self.assertEqual(render_canonical(parse("1 - -2")), "1 - -2")

    def test_whitespace_normalised(self):
        self.assertEqual(render_canonical(parse("  1+2*  3 ")), "1 + 2 * 3")

    def test_reparse_evaluates_the_same(self):
        for text in ["10 - (3 - 2)", "-(7 % -(2 + 1)) * 4", "(1 + 2) * (3 - 4) / -5", "1 / 0 + 2"]:
            tree = parse(text)
            self.assertEqual(parse(render_canonical(tree)), tree)
            self.assertEqual(evaluate(parse(render_canonical(tree))), evaluate(tree))


class TestTreeDiagram(unittest.TestCase):
    def test_example(self):
        tree = Binary('*', Binary('+', Literal(10), Literal(5)), Unary('-', Literal(2)))
        self.assertEqual(render_tree(tree), "\n".join([
            "*",
            "  ├ +",
            "  │ ├ 10",
            "  │ └ 5",
            "  └ -",
            "    └ 2",
        ]))

    def test_single_literal(self):
        self.assertEqual(render_tree(Literal(7)), "7")

    def test_left_spine(self):
        self.assertEqual(render_tree(parse("1 - 2 - 3")), "\n".join([
            "-",
            "  ├ -",
            "  │ ├ 1",
            "  │ └ 2",
            "  └ 3",
        ]))

    def test_nested_under_last_child(self):
        self.assertEqual(render_tree(parse("1 % (2 / 3)")), "\n".join([
            "%",
            "  ├ 1",
            "  └ /",
            "    ├ 2",
            "    └ 3",
        ]))

    def test_one_line_per_node(self):
        tree = parse("-(1 + 2) * (3 - -4) / 5")
        self.assertEqual(len(render_tree(tree).splitlines()), 11)


if __name__ == '__main__':
    unittest.main()
