from __future__ import annotations

import logging
import math
from typing import Tuple

from .config import FuzlerConfig, resolve_config
from .metrics import blend_similarity
from .models import PreparedString
from .tokenization import prepare
from .windowing import chunked_similarity

logger = logging.getLogger(__name__)


def orient(a: str, b: str) -> Tuple[PreparedString, PreparedString]:
    """Return (query, target): the side with fewer tokens is the query, ties keep ``a``."""
    prep_a = prepare(a)
    prep_b = prepare(b)
    if len(prep_a.tokens) <= len(prep_b.tokens):
        return prep_a, prep_b
    return prep_b, prep_a


def round_score(score: float, precision: int = 2) -> float:
    """Round half away from zero to ``precision`` decimals after clamping to [0, 1]."""
    factor = 10.0**precision
    clamped = min(max(score, 0.0), 1.0)
    return math.floor(clamped * factor + 0.5) / factor


def similarity_score(a: str, b: str, config: FuzlerConfig | None = None) -> float:
    """
    Fuzzy similarity between two strings in [0, 1], rounded to two decimals.

    The string with fewer tokens is matched as a query against chunks and
    sliding windows of the other; the result is the larger of that partial
    score and the whole-string blend.
    """
    cfg = resolve_config(config)
    query, target = orient(a, b)

    partial = chunked_similarity(query, target, cfg)
    blended = blend_similarity(query.raw, target.raw, cfg)

    logger.debug(
        "query_tokens=%d target_tokens=%d partial=%.4f blended=%.4f",
        len(query.tokens),
        len(target.tokens),
        partial,
        blended,
    )
    return round_score(max(partial, blended), cfg.round_precision)
