# parser.py

import logging
from typing import List

from exprtree.errors import ParseError
from exprtree.math_ast import Binary, Literal, Node, Unary
from exprtree.tokenizer import Token, TokenKind, tokenize

logger = logging.getLogger(__name__)

ADDITIVE = {TokenKind.PLUS: '+', TokenKind.MINUS: '-'}
MULTIPLICATIVE = {TokenKind.STAR: '*', TokenKind.SLASH: '/', TokenKind.PERCENT: '%'}


class Parser:
    """Recursive descent parser, one method per precedence tier.

        expression := term (("+" | "-") term)*
        term       := unary (("*" | "/" | "%") unary)*
        unary      := "-" unary | primary
        primary    := NUMBER | "(" expression ")"
    """

    def __init__(self, tokens: List[Token]):
        if not tokens or tokens[-1].kind is not TokenKind.EOF:
            raise ValueError("token sequence must end with EOF")
        self.tokens = tokens
        self.pos = 0

    def current(self) -> Token:
        return self.tokens[self.pos]

    def advance(self) -> Token:
        token = self.tokens[self.pos]
        if token.kind is not TokenKind.EOF:
            self.pos += 1
        return token

    def parse(self) -> Node:
        try:
            node = self.parse_expression()
        except RecursionError:
            raise ParseError("Expression nested too deeply") from None

        token = self.current()
        if token.kind is not TokenKind.EOF:
            raise ParseError(f"Unexpected trailing token {token} at position {token.position}", token)
        return node

    def parse_expression(self) -> Node:
        left = self.parse_term()
        while self.current().kind in ADDITIVE:
            op = ADDITIVE[self.advance().kind]
            right = self.parse_term()
            left = Binary(op, left, right)
        return left

    def parse_term(self) -> Node:
        left = self.parse_unary()
        while self.current().kind in MULTIPLICATIVE:
            op = MULTIPLICATIVE[self.advance().kind]
            right = self.parse_unary()
            left = Binary(op, left, right)
        return left

    def parse_unary(self) -> Node:
        if self.current().kind is TokenKind.MINUS:
            self.advance()
            return Unary('-', self.parse_unary())
        return self.parse_primary()

    def parse_primary(self) -> Node:
        token = self.current()
        if token.kind is TokenKind.NUMBER:
            self.advance()
            return Literal(token.value)

        if token.kind is TokenKind.LPAREN:
            self.advance()
            node = self.parse_expression()
            closing = self.current()
            if closing.kind is not TokenKind.RPAREN:
                raise ParseError(
                    f"Expected ')' at position {closing.position} to close '(' "
                    f"at position {token.position}, found {closing}", closing)
            self.advance()
            return node

        if token.kind is TokenKind.EOF:
            raise ParseError("Unexpected end of input", token)
        raise ParseError(f"Unexpected token {token} at position {token.position}", token)


def parse(expression: str) -> Node:
    """Tokenize and parse one complete expression.

    Raises LexError for characters outside the grammar and ParseError for
    malformed token sequences. There is no recovery: the whole expression is
    rejected.
    """
    tokens = tokenize(expression)
    node = Parser(tokens).parse()
    logger.debug("parsed %r -> %r", expression, node)
    return node
