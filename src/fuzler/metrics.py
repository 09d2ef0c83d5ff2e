from __future__ import annotations

from collections import Counter

from rapidfuzz.distance import Hamming, Levenshtein

from .config import FuzlerConfig, resolve_config
from .tokenization import split_tokens


def char_similarity(a: str, b: str, config: FuzlerConfig | None = None) -> float:
    """
    Character-level similarity in [0, 1].

    Lengths, prefixes and distances are measured on the UTF-8 bytes.
    Near-equal lengths (within ``hamming_window``) compare the common prefix
    position by position and ignore the trailing surplus. Everything else uses
    a Levenshtein distance bounded by ``max(short_string_band, longest)``.
    """
    cfg = resolve_config(config)
    a_bytes = a.encode("utf-8")
    b_bytes = b.encode("utf-8")
    a_len, b_len = len(a_bytes), len(b_bytes)
    if a_len == 0 and b_len == 0:
        return 1.0
    if a_len == 0 or b_len == 0:
        return 0.0

    if abs(a_len - b_len) <= cfg.hamming_window:
        length = min(a_len, b_len)
        mismatches = Hamming.distance(a_bytes[:length], b_bytes[:length])
        return 1.0 - mismatches / length

    longest = max(a_len, b_len)
    band = max(cfg.short_string_band, longest)
    distance = Levenshtein.distance(a_bytes, b_bytes, score_cutoff=band)
    if distance > band:
        return 0.0
    return 1.0 - distance / longest


def _token_counts(text: str, case_sensitive: bool) -> Counter[str]:
    if not case_sensitive:
        text = text.lower()
    return Counter(split_tokens(text))


def token_multiset_similarity(
    a: str, b: str, config: FuzlerConfig | None = None
) -> float | None:
    """
    Multiset Jaccard over whitespace tokens.

    Returns None when neither side contains a space, so single-token pairs
    fall back to the character metric.
    """
    if " " not in a and " " not in b:
        return None

    cfg = resolve_config(config)
    counts_a = _token_counts(a, cfg.case_sensitive)
    counts_b = _token_counts(b, cfg.case_sensitive)
    intersection = sum((counts_a & counts_b).values())
    union = sum((counts_a | counts_b).values())
    if union == 0:
        return 0.0
    return intersection / union


def blend_similarity(a: str, b: str, config: FuzlerConfig | None = None) -> float:
    """Weighted mix of token overlap and character similarity."""
    cfg = resolve_config(config)
    token = token_multiset_similarity(a, b, cfg)
    char = char_similarity(a, b, cfg)
    if token is None:
        return char
    return cfg.token_weight * token + cfg.char_weight * char
