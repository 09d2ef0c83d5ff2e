import logging
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from fuzler import boundary
from fuzler.boundary import SimilarityWorker, safe_similarity_score


def _explode(a: str, b: str, config=None) -> float:
    raise RuntimeError("boom")


def test_safe_similarity_score_passes_through():
    assert safe_similarity_score("cat", "bat") == 0.67


def test_safe_similarity_score_contains_faults(monkeypatch, caplog):
    monkeypatch.setattr(boundary, "similarity_score", _explode)
    with caplog.at_level(logging.ERROR, logger="fuzler.boundary"):
        assert safe_similarity_score("x" * 1000, "y") == 0.0
        assert safe_similarity_score("a", "b", default=0.5) == 0.5

    assert "similarity_score failed" in caplog.text
    assert "(1000 chars)" in caplog.text


def test_worker_scores_off_thread():
    with SimilarityWorker(max_workers=2) as worker:
        assert worker.score("cat", "bat") == 0.67
        assert worker.score_many([("abc", "xyz"), ("", ""), ("cat", "bat")]) == [
            0.0,
            1.0,
            0.67,
        ]
        assert worker.submit("hello", "hello").result() == 1.0


def test_worker_returns_default_on_timeout(monkeypatch, caplog):
    release = threading.Event()

    def slow(a: str, b: str, config=None) -> float:
        release.wait(5)
        return 1.0

    monkeypatch.setattr(boundary, "similarity_score", slow)
    worker = SimilarityWorker(max_workers=1, default=0.25)
    try:
        with caplog.at_level(logging.WARNING, logger="fuzler.boundary"):
            assert worker.score("a", "b", timeout=0.05) == 0.25
        assert "exceeded" in caplog.text
    finally:
        release.set()
        worker.close()


def test_worker_leaves_injected_executor_running():
    executor = ThreadPoolExecutor(max_workers=1)
    try:
        worker = SimilarityWorker(executor=executor)
        assert worker.score("cat", "cat") == 1.0
        worker.close()
        assert executor.submit(lambda: 42).result() == 42
    finally:
        executor.shutdown()


def test_worker_propagates_nothing_from_faults(monkeypatch):
    monkeypatch.setattr(boundary, "similarity_score", _explode)
    with SimilarityWorker(default=0.1) as worker:
        assert worker.score("a", "b") == pytest.approx(0.1)
