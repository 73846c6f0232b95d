from exprtree.errors import ExpressionError, LexError, ParseError
from exprtree.evaluate import evaluate
from exprtree.math_ast import Binary, Literal, Node, Unary
from exprtree.parser import parse
from exprtree.render import render_canonical, render_tree

__all__ = [
    'ExpressionError', 'LexError', 'ParseError',
    'Node', 'Literal', 'Unary', 'Binary',
    'parse', 'evaluate', 'render_canonical', 'render_tree',
]
