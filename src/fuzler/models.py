from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List


@dataclass(slots=True, frozen=True)
class Token:
    """Represents a token by its inclusive-exclusive character offsets."""

    start_char: int
    end_char: int


@dataclass(slots=True)
class PreparedString:
    """An input string paired with its tokens, built once per scoring call."""

    raw: str
    tokens: List[Token] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tokens)

    def token_text(self, idx: int) -> str:
        token = self.tokens[idx]
        return self.raw[token.start_char : token.end_char]


@dataclass(slots=True)
class ScoredCandidate:
    """A ranked candidate returned by top-N matching."""

    key: str
    value: Any
    score: float
