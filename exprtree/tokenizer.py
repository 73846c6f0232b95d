# tokenizer.py

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from exprtree.errors import LexError

logger = logging.getLogger(__name__)


class TokenKind(str, Enum):
    NUMBER = "number"
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    PERCENT = "%"
    LPAREN = "("
    RPAREN = ")"
    EOF = "end of input"


SINGLE_CHAR_TOKENS = {
    '+': TokenKind.PLUS,
    '-': TokenKind.MINUS,
    '*': TokenKind.STAR,
    '/': TokenKind.SLASH,
    '%': TokenKind.PERCENT,
    '(': TokenKind.LPAREN,
    ')': TokenKind.RPAREN,
}


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    position: int
    value: Optional[int] = None

    def __str__(self):
        if self.kind is TokenKind.EOF:
            return self.kind.value
        return f"'{self.text}'"


def _is_digit(char: str) -> bool:
    # str.isdigit() also accepts superscripts and other unicode digits
    return '0' <= char <= '9'


def tokenize(text: str) -> List[Token]:
    """Split `text` into tokens, always ending with an EOF token.

    Whitespace is skipped. '-' is emitted as MINUS regardless of whether it
    is later read as negation or subtraction.
    """
    tokens: List[Token] = []
    pos = 0
    length = len(text)

    while pos < length:
        char = text[pos]
        if char.isspace():
            pos += 1
            continue

        if _is_digit(char):
            end = pos
            while end < length and _is_digit(text[end]):
                end += 1
            digits = text[pos:end]
            try:
                value = int(digits)
            except ValueError:
                # longer than sys.get_int_max_str_digits()
                raise LexError(char, pos, f"Invalid number at position {pos}: too many digits ({len(digits)})") from None
            tokens.append(Token(TokenKind.NUMBER, digits, pos, value))
            pos = end
            continue

        kind = SINGLE_CHAR_TOKENS.get(char)
        if kind is None:
            raise LexError(char, pos)
        tokens.append(Token(kind, char, pos))
        pos += 1

    tokens.append(Token(TokenKind.EOF, '', length))
    logger.debug("tokenized %d characters into %d tokens", length, len(tokens))
    return tokens
