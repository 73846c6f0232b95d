import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional

from exprtree.config import CalcConfig, validate_int_bits
from exprtree.errors import ExpressionError
from exprtree.evaluate import evaluate
from exprtree.generate_data import GenConfig, stream_trees
from exprtree.logging_config import configure_logging
from exprtree.math_ast import Node, format_number
from exprtree.parser import parse
from exprtree.render import render_canonical, render_tree

logger = logging.getLogger(__name__)

UNDEFINED = "undefined (division by zero or overflow)"


@dataclass
class Analysis:
    tree: Node
    canonical: str
    diagram: str
    value: Optional[int]

    @property
    def undefined(self) -> bool:
        return self.value is None


def analyze(expression: str, config: Optional[CalcConfig] = None) -> Analysis:
    """Parse one expression and produce every rendering of it.

    Lex and parse errors propagate to the caller.
    """
    if config is None:
        config = CalcConfig()
    tree = parse(expression)
    return Analysis(
        tree=tree,
        canonical=render_canonical(tree),
        diagram=render_tree(tree),
        value=evaluate(tree, config.int_bits),
    )


def format_value(value: Optional[int]) -> str:
    return UNDEFINED if value is None else format_number(value)


def format_analysis(analysis: Analysis) -> str:
    return "\n".join([
        "Expression:",
        analysis.canonical,
        "",
        "Syntax tree:",
        analysis.diagram,
        "",
        f"Result: {format_value(analysis.value)}",
    ])


def process_line(line: str, config: Optional[CalcConfig] = None) -> Optional[str]:
    """Report for one line of input, or None for a blank line."""
    expression = line.strip()
    if not expression:
        return None
    try:
        analysis = analyze(expression, config)
    except ExpressionError as e:
        logger.info("rejected %r: %s", expression, e)
        return f"Error: {e}"
    return format_analysis(analysis)


def repl(config: CalcConfig, stdin=None, stdout=None) -> None:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    while True:
        stdout.write(config.prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            # EOF
            stdout.write("\n")
            break
        if config.is_exit(line):
            break
        report = process_line(line, config)
        if report is not None:
            stdout.write(report + "\n\n")


def demo(n: int, config: CalcConfig, seed: Optional[int] = None) -> None:
    trees = stream_trees(GenConfig(max_depth_cap=4, seed=seed))
    for i in range(n):
        tree = next(trees)
        print(f"{i:<4} {render_canonical(tree)} = {format_value(evaluate(tree, config.int_bits))}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Parse, print and evaluate integer arithmetic expressions.")
    parser.add_argument('--expr', type=str, default=None, help='Evaluate this expression once and exit.')
    parser.add_argument('--int-bits', type=int, default=None,
                        help='Signed integer width for evaluation; 0 disables range checks (default: 64).')
    parser.add_argument('--log-level', type=str, default=None, help='Logging level (default: WARNING).')
    parser.add_argument('--random', type=int, default=0, metavar='N',
                        help='Print N randomly generated expressions with their values.')
    parser.add_argument('--seed', type=int, default=None, help='Seed for --random.')
    args = parser.parse_args(argv)

    try:
        config = CalcConfig.from_env()
        if args.int_bits is not None:
            config.int_bits = validate_int_bits(args.int_bits)
    except ValueError as e:
        parser.error(str(e))
    if args.log_level is not None:
        config.log_level = args.log_level
    configure_logging(config.log_level)

    if args.random > 0:
        demo(args.random, config, args.seed)
        return 0

    if args.expr is not None:
        try:
            analysis = analyze(args.expr, config)
        except ExpressionError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(format_analysis(analysis))
        return 0

    print("Enter an arithmetic expression (or 'exit' to quit)")
    print("Examples: 10 + 20, (10 + 20) * 30, -5 + 3\n")
    repl(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
