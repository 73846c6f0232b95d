# render.py

from typing import List

from exprtree.math_ast import (PRECEDENCE, UNARY_PRECEDENCE, Binary, Literal, Node, Unary, children, format_number,
                               label)

# ====== canonical form ======

def to_string(node: Node, parent_prec: int = 0, is_right: bool = False) -> str:
    """Infix rendering with only the parentheses the structure needs.

    `parent_prec` is the binding strength the surrounding operator demands
    and `is_right` tells whether `node` is the right operand of a binary
    operator. All binary operators are left-associative, so a right operand
    of equal precedence keeps its parentheses.
    """
    if isinstance(node, Literal):
        return format_number(node.value)

    if isinstance(node, Unary):
        s = f"{node.op}{to_string(node.operand, UNARY_PRECEDENCE)}"
        need_paren = UNARY_PRECEDENCE < parent_prec
        return f"({s})" if need_paren else s

    if isinstance(node, Binary):
        prec = PRECEDENCE[node.op]
        left_str = to_string(node.left, prec, is_right=False)
        right_str = to_string(node.right, prec, is_right=True)
        s = f"{left_str} {node.op} {right_str}"
        need_paren = prec < parent_prec or (prec == parent_prec and is_right)
        return f"({s})" if need_paren else s

    raise ValueError(f"Unknown node type: {type(node)}")


def render_canonical(node: Node) -> str:
    return to_string(node)


# ====== tree diagram ======
BRANCH = '├'
LAST_BRANCH = '└'
PIPE = '│ '
BLANK = '  '


def render_tree(node: Node) -> str:
    """Box-drawing diagram of the tree, one node per line in pre-order.

        *
          ├ +
          │ ├ 10
          │ └ 5
          └ -
            └ 2
    """
    lines: List[str] = [label(node)]

    def helper(n: Node, prefix: str) -> None:
        kids = children(n)
        for i, child in enumerate(kids):
            is_last = i == len(kids) - 1
            lines.append(f"{prefix}{LAST_BRANCH if is_last else BRANCH} {label(child)}")
            helper(child, prefix + (BLANK if is_last else PIPE))

    # the root is drawn as a last child, so its subtree is indented by a blank
    helper(node, BLANK)
    return "\n".join(lines)
