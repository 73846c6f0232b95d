# evaluate.py

import logging
from typing import Optional

from exprtree.math_ast import Binary, Literal, Node, Unary

logger = logging.getLogger(__name__)

DEFAULT_INT_BITS = 64


def int_range(int_bits: Optional[int]):
    """Inclusive (low, high) bounds of a signed integer of the given width."""
    if int_bits is None:
        return None
    if int_bits < 2:
        raise ValueError(f"int_bits must be at least 2, got {int_bits}")
    half = 1 << (int_bits - 1)
    return -half, half - 1


def truncating_divmod(left: int, right: int):
    """Quotient rounded toward zero and the remainder that goes with it.

    Python's // and % floor instead, which disagrees for mixed signs:
    -7 // 2 == -4 but the truncated quotient is -3 (remainder -1).
    """
    quotient = abs(left) // abs(right)
    if (left < 0) != (right < 0):
        quotient = -quotient
    return quotient, left - quotient * right


def evaluate_binary(op: str, left: int, right: int) -> Optional[int]:
    if op == '+':
        return left + right
    if op == '-':
        return left - right
    if op == '*':
        return left * right
    if op == '/':
        if right == 0:
            return None
        return truncating_divmod(left, right)[0]
    if op == '%':
        if right == 0:
            return None
        return truncating_divmod(left, right)[1]
    raise ValueError(f"Unknown operator: {op}")


def evaluate(node: Node, int_bits: Optional[int] = None) -> Optional[int]:
    """Compute the value of `node`, or None when it is undefined.

    Division or remainder by zero makes the node undefined, and an undefined
    operand makes every ancestor undefined too. With `int_bits` set, values
    outside that signed width are undefined as well.
    """
    bounds = int_range(int_bits)

    def checked(value: Optional[int]) -> Optional[int]:
        if value is None or bounds is None:
            return value
        low, high = bounds
        if value < low or value > high:
            return None
        return value

    def helper(n: Node) -> Optional[int]:
        if isinstance(n, Literal):
            return checked(n.value)
        if isinstance(n, Unary):
            child = helper(n.operand)
            if child is None:
                return None
            return checked(-child)
        if isinstance(n, Binary):
            left = helper(n.left)
            right = helper(n.right)
            if left is None or right is None:
                return None
            value = evaluate_binary(n.op, left, right)
            if n.op == '%' and value is not None and checked(truncating_divmod(left, right)[0]) is None:
                # MIN % -1: the remainder is 0 but its quotient overflows
                return None
            return checked(value)
        raise ValueError(f"Unknown node type: {type(n)}")

    result = helper(node)
    if result is None:
        logger.debug("expression %r is undefined", node)
    return result
