import pytest

from fuzler.ranking import top_matches


def test_top_matches_orders_by_descending_score():
    candidates = ["los angeles", "newark", "new york city", "york"]
    results = top_matches("new york", candidates, limit=3)

    assert len(results) == 3
    assert results[0].key == "new york city"
    assert results[0].score == 1.0
    scores = [item.score for item in results]
    assert scores == sorted(scores, reverse=True)


def test_top_matches_keeps_input_order_on_ties():
    candidates = [("abc", 1), ("abc", 2), ("abc", 3)]
    results = top_matches("abc", candidates, limit=2)
    assert [item.value for item in results] == [1, 2]


def test_top_matches_accepts_mapping():
    results = top_matches("hello", {"ciao": 1, "hola": 2, "hello": 3}, limit=1)
    assert results[0].key == "hello"
    assert results[0].value == 3


def test_top_matches_filters_and_limits():
    assert top_matches("abc", ["abc"], limit=0) == []
    results = top_matches("abc", ["xyz", "abc"], min_score=0.5)
    assert [item.key for item in results] == ["abc"]


def test_top_matches_rejects_unknown_candidate_shapes():
    with pytest.raises(TypeError):
        top_matches("abc", [123])
