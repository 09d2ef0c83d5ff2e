from __future__ import annotations

import re
from typing import List, Sequence

from .models import PreparedString, Token

# Unicode White_Space; unlike str.isspace() this excludes the \x1c-\x1f separators.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000"
)
TOKEN_PATTERN = re.compile(f"[^{WHITESPACE}]+")


def tokenize(text: str) -> List[Token]:
    """Split text into whitespace-delimited tokens with character offsets."""
    tokens: List[Token] = []
    for match in TOKEN_PATTERN.finditer(text):
        tokens.append(Token(start_char=match.start(), end_char=match.end()))
    return tokens


def split_tokens(text: str) -> List[str]:
    """Return token texts using the same boundaries as ``tokenize``."""
    return TOKEN_PATTERN.findall(text)


def prepare(text: str) -> PreparedString:
    """Tokenize once and keep the tokens next to the original string."""
    return PreparedString(raw=text, tokens=tokenize(text))


def span_text(
    raw: str, tokens: Sequence[Token], start: int = 0, stop: int | None = None
) -> str:
    """Extract the substring covering tokens[start:stop] without slicing the token list."""
    stop = len(tokens) if stop is None else min(stop, len(tokens))
    if stop <= start:
        return ""
    return raw[tokens[start].start_char : tokens[stop - 1].end_char]
