# errors.py

from typing import Optional


class ExpressionError(ValueError):
    """Base class for every failure scoped to a single expression."""

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.position = position


class LexError(ExpressionError):
    def __init__(self, char: str, position: int, message: Optional[str] = None):
        if message is None:
            message = f"Invalid character '{char}' at position {position}"
        super().__init__(message, position)
        self.char = char


class ParseError(ExpressionError):
    def __init__(self, message: str, token=None):
        super().__init__(message, token.position if token is not None else None)
        self.token = token
