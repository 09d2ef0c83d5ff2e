from __future__ import annotations

import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor, TimeoutError
from types import TracebackType
from typing import Iterable, List, Tuple

from .config import FuzlerConfig
from .scoring import similarity_score

logger = logging.getLogger(__name__)

LOG_PREVIEW_CHARS = 200


def _preview(text: str) -> str:
    if len(text) <= LOG_PREVIEW_CHARS:
        return text
    return f"{text[:LOG_PREVIEW_CHARS]}... ({len(text)} chars)"


def safe_similarity_score(
    a: str,
    b: str,
    *,
    default: float = 0.0,
    config: FuzlerConfig | None = None,
) -> float:
    """Score a pair, logging any fault and returning ``default`` instead of raising."""
    try:
        return similarity_score(a, b, config)
    except Exception:
        logger.exception(
            "similarity_score failed for a=%r b=%r; returning %s",
            _preview(a),
            _preview(b),
            default,
        )
        return default


class SimilarityWorker:
    """Runs scoring off the caller's thread with optional per-call deadlines."""

    def __init__(
        self,
        *,
        max_workers: int | None = None,
        config: FuzlerConfig | None = None,
        default: float = 0.0,
        executor: Executor | None = None,
    ) -> None:
        self._config = config
        self._default = default
        self._owns_executor = executor is None
        self._executor: Executor = executor or ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="fuzler"
        )

    @property
    def default(self) -> float:
        return self._default

    def submit(self, a: str, b: str) -> Future[float]:
        return self._executor.submit(
            safe_similarity_score,
            a,
            b,
            default=self._default,
            config=self._config,
        )

    def score(self, a: str, b: str, timeout: float | None = None) -> float:
        """Wait for a score; a late result is abandoned, not interrupted."""
        return self._await(self.submit(a, b), a, b, timeout)

    def score_many(
        self, pairs: Iterable[Tuple[str, str]], timeout: float | None = None
    ) -> List[float]:
        """Score pairs concurrently; ``timeout`` applies to each pair's wait."""
        submitted = [(a, b, self.submit(a, b)) for a, b in pairs]
        return [self._await(future, a, b, timeout) for a, b, future in submitted]

    def _await(
        self, future: Future[float], a: str, b: str, timeout: float | None
    ) -> float:
        try:
            return future.result(timeout=timeout)
        except TimeoutError:
            logger.warning(
                "similarity_score exceeded %.3fs for a=%r b=%r; returning %s",
                timeout,
                _preview(a),
                _preview(b),
                self._default,
            )
            return self._default

    def close(self, wait: bool = True) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=wait)

    def __enter__(self) -> SimilarityWorker:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
