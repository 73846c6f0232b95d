# math_ast.py

from dataclasses import dataclass

# ====== AST ======
# Nodes are immutable once the parser has built them.

ARITY = {
    '+': 2, '-': 2, '*': 2, '/': 2, '%': 2,
}

UNARY_ARITY = {
    '-': 1,
}

# binding strength, higher binds tighter
PRECEDENCE = {'+': 1, '-': 1, '*': 2, '/': 2, '%': 2}
UNARY_PRECEDENCE = 3


class Node:
    __slots__ = ()


@dataclass(frozen=True)
class Literal(Node):
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Literal value must be an int, got {type(self.value).__name__}")


@dataclass(frozen=True)
class Unary(Node):
    op: str
    operand: Node

    def __post_init__(self):
        if self.op not in UNARY_ARITY:
            raise ValueError(f"Unknown unary operator: {self.op}")
        if not isinstance(self.operand, Node):
            raise TypeError("Unary operand must be a Node")


@dataclass(frozen=True)
class Binary(Node):
    op: str
    left: Node
    right: Node

    def __post_init__(self):
        if self.op not in ARITY:
            raise ValueError(f"Unknown operator: {self.op}")
        if not isinstance(self.left, Node) or not isinstance(self.right, Node):
            raise TypeError("Binary operands must be Nodes")


def format_number(value: int) -> str:
    """Decimal text of `value`, or a size summary past the interpreter's digit limit."""
    try:
        return str(value)
    except ValueError:
        return f"<{value.bit_length()}-bit integer, too large to display>"


def label(node: Node) -> str:
    """Text shown for a node in diagrams: the operator symbol or the value."""
    if isinstance(node, Literal):
        return format_number(node.value)
    if isinstance(node, (Unary, Binary)):
        return node.op
    raise ValueError(f"Unknown node type: {type(node)}")


def children(node: Node):
    if isinstance(node, Literal):
        return ()
    if isinstance(node, Unary):
        return (node.operand,)
    if isinstance(node, Binary):
        return (node.left, node.right)
    raise ValueError(f"Unknown node type: {type(node)}")
