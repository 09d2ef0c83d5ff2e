from __future__ import annotations

import logging
import math
from typing import Iterator, List

from .config import FuzlerConfig, resolve_config
from .metrics import blend_similarity
from .models import PreparedString, Token
from .tokenization import span_text, tokenize

logger = logging.getLogger(__name__)


def iter_windows(raw: str, tokens: List[Token], size: int) -> Iterator[str]:
    """Yield the text of every full window of ``size`` consecutive tokens."""
    for start_idx in range(len(tokens) - size + 1):
        yield span_text(raw, tokens, start_idx, start_idx + size)


def iter_chunks(raw: str, tokens: List[Token], size: int) -> Iterator[str]:
    """Yield non-overlapping runs of ``size`` tokens; the last run may be shorter."""
    size = max(1, size)
    for start_idx in range(0, len(tokens), size):
        yield span_text(raw, tokens, start_idx, start_idx + size)


def window_similarity(
    query: str,
    target: str,
    config: FuzlerConfig | None = None,
    *,
    query_token_count: int | None = None,
) -> float:
    """Best blend score of the query against any contiguous token window of the target."""
    cfg = resolve_config(config)
    len_q = len(tokenize(query)) if query_token_count is None else query_token_count

    # Trivial and very long queries compare whole.
    if len_q <= 1 or len_q > cfg.window_max_query_tokens:
        return blend_similarity(query, target, cfg)

    target_tokens = tokenize(target)
    if not target_tokens:
        return 0.0

    pad = math.ceil(len_q * cfg.window_pad_ratio)
    win_min = max(1, len_q - pad)
    win_max = min(len_q + pad, cfg.window_max_tokens, len(target_tokens))

    best = 0.0
    for size in range(win_min, win_max + 1):
        for span in iter_windows(target, target_tokens, size):
            candidate = blend_similarity(query, span, cfg)
            if candidate > best:
                best = candidate
                if best >= 1.0:
                    return 1.0
    return best


def chunked_similarity(
    query: PreparedString,
    target: PreparedString,
    config: FuzlerConfig | None = None,
) -> float:
    """
    Sum window scores over consecutive target chunks, capped at 1.0.

    Several partial matches spread across the target add up, so the result
    can exceed any single chunk's best window.
    """
    cfg = resolve_config(config)
    if not target.tokens:
        return 0.0

    q_len = max(len(query.tokens), 1)
    chunk_len = min(max(q_len * cfg.chunk_query_multiplier, cfg.chunk_min), cfg.chunk_max)
    chunk_len = min(chunk_len, len(target.tokens))

    total = 0.0
    for idx, chunk in enumerate(iter_chunks(target.raw, target.tokens, chunk_len)):
        total += window_similarity(
            query.raw, chunk, cfg, query_token_count=len(query.tokens)
        )
        if total >= 1.0:
            logger.debug("Chunk sum saturated after %d chunk(s)", idx + 1)
            return 1.0
    return min(total, 1.0)
