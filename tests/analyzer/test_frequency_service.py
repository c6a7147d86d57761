# tests/analyzer/test_frequency_service.py
import pytest

from analyzer.services.frequency_service import aggregate, build_frequency_table, top_k


def test_frequency_table_is_case_insensitive():
    table = build_frequency_table(["Fox", "fox", "dog", "FOX", "cat", "dog"])
    assert table == {"fox": 3, "dog": 2, "cat": 1}
    assert list(table) == ["fox", "dog", "cat"]


def test_ties_keep_first_encounter_order():
    ranked = aggregate(["b", "a", "b", "a", "c", "d", "d"])
    assert [(e.word, e.count) for e in ranked] == [("b", 2), ("a", 2), ("d", 2), ("c", 1)]


def test_top_k_truncates():
    words = ["one", "two", "two", "three", "three", "three"]
    ranked = aggregate(words, top_n=2)
    assert [(e.word, e.count) for e in ranked] == [("three", 3), ("two", 2)]
    assert aggregate(words, top_n=0) == []
    assert len(aggregate(words, top_n=10)) == 3


def test_top_k_rejects_negative_k():
    with pytest.raises(ValueError):
        top_k({"a": 1}, -1)


def test_aggregate_does_not_mutate_input():
    words = ["Beta", "alpha", "beta"]
    aggregate(words, top_n=1)
    assert words == ["Beta", "alpha", "beta"]


def test_aggregate_empty():
    assert aggregate([], top_n=10) == []
