# generate_data.py

import random
from dataclasses import dataclass, field
from typing import Iterator, Optional, Set

from exprtree.math_ast import ARITY, Binary, Literal, Node, Unary


# ====== config ======
@dataclass
class GenConfig:
    max_depth_cap: int = 6
    min_digits: int = 1
    max_digits: int = 2
    operators: Set[str] = field(default_factory=lambda: {'+', '-', '*', '/', '%', 'neg'})
    prob_leaf: float = 0.4    # chance of stopping early below the root
    prob_zero: float = 0.05   # chance a leaf is 0, so undefined results show up
    seed: Optional[int] = None


# ====== generation ======
def random_literal(cfg: GenConfig, rng: random.Random) -> Literal:
    if rng.random() < cfg.prob_zero:
        return Literal(0)
    num_digits = rng.randint(cfg.min_digits, cfg.max_digits)
    lower_bound = 10**(num_digits - 1) if num_digits > 1 else 1
    upper_bound = 10**num_digits - 1
    return Literal(rng.randint(lower_bound, upper_bound))


def generate_tree(cfg: GenConfig, current_depth: int = 0, rng: Optional[random.Random] = None) -> Node:
    """Random well-formed tree no deeper than cfg.max_depth_cap + 1 levels.

    Leaves are non-negative; negative numbers come from 'neg' (unary minus)
    nodes, the same shape the parser produces.
    """
    if rng is None:
        rng = random.Random(cfg.seed)

    if current_depth >= cfg.max_depth_cap or (current_depth > 0 and rng.random() < cfg.prob_leaf):
        return random_literal(cfg, rng)

    op = rng.choice(sorted(cfg.operators))
    if op == 'neg':
        return Unary('-', generate_tree(cfg, current_depth + 1, rng))
    if op not in ARITY:
        raise ValueError(f"Unknown operator: {op}")

    left = generate_tree(cfg, current_depth + 1, rng)
    right = generate_tree(cfg, current_depth + 1, rng)
    return Binary(op, left, right)


def stream_trees(cfg: GenConfig) -> Iterator[Node]:
    rng = random.Random(cfg.seed)
    while True:
        yield generate_tree(cfg, rng=rng)
