"""Configuration for the calculator loop and the HTTP viewer."""
import os
from dataclasses import dataclass
from typing import Optional, Tuple

from exprtree.evaluate import DEFAULT_INT_BITS


def validate_int_bits(bits: int) -> Optional[int]:
    """Normalise a configured width: 0 turns range checking off."""
    if bits == 0:
        return None
    if bits < 2:
        raise ValueError(f"integer width must be 0 (unbounded) or at least 2, got {bits}")
    return bits


def _parse_int_bits(raw: Optional[str]) -> Optional[int]:
    if raw is None or raw.strip() == "":
        return DEFAULT_INT_BITS
    try:
        bits = int(raw)
    except ValueError:
        raise ValueError(f"EXPRTREE_INT_BITS must be an integer, got {raw!r}") from None
    return validate_int_bits(bits)


@dataclass
class CalcConfig:
    int_bits: Optional[int] = DEFAULT_INT_BITS
    exit_words: Tuple[str, ...] = ("exit", "quit", "sair")
    prompt: str = "expr> "
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.int_bits is not None:
            self.int_bits = validate_int_bits(self.int_bits)

    @classmethod
    def from_env(cls) -> "CalcConfig":
        """Build a config from EXPRTREE_* environment variables."""
        return cls(
            int_bits=_parse_int_bits(os.getenv("EXPRTREE_INT_BITS")),
            log_level=os.getenv("EXPRTREE_LOG_LEVEL", "WARNING"),
        )

    def is_exit(self, line: str) -> bool:
        return line.strip().lower() in self.exit_words
