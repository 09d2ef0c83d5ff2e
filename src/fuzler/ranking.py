from __future__ import annotations

import heapq
from typing import Any, Iterable, List, Mapping, Tuple

from .config import FuzlerConfig
from .models import ScoredCandidate
from .scoring import similarity_score

Candidate = str | Tuple[str, Any]


def _split_candidate(candidate: Candidate) -> Tuple[str, Any]:
    if isinstance(candidate, str):
        return candidate, None
    if isinstance(candidate, (tuple, list)) and len(candidate) == 2:
        key, value = candidate
        return str(key), value
    raise TypeError(
        f"Candidates must be strings or (key, value) pairs, got {type(candidate).__name__}."
    )


def top_matches(
    query: str,
    candidates: Iterable[Candidate] | Mapping[str, Any],
    *,
    limit: int = 5,
    min_score: float = 0.0,
    config: FuzlerConfig | None = None,
) -> List[ScoredCandidate]:
    """
    Score every candidate against the query and keep the ``limit`` best.

    Only a min-heap of ``limit`` entries is held while scanning. Results are in
    descending score order; equal scores keep input order.
    """
    if limit <= 0:
        return []
    if isinstance(candidates, Mapping):
        candidates = candidates.items()

    heap: List[Tuple[float, int, ScoredCandidate]] = []
    for idx, candidate in enumerate(candidates):
        key, value = _split_candidate(candidate)
        score = similarity_score(query, key, config)
        if score < min_score:
            continue
        entry = (score, -idx, ScoredCandidate(key=key, value=value, score=score))
        if len(heap) < limit:
            heapq.heappush(heap, entry)
        elif entry[:2] > heap[0][:2]:
            heapq.heapreplace(heap, entry)

    ordered = sorted(heap, key=lambda item: item[:2], reverse=True)
    return [item for _, _, item in ordered]
