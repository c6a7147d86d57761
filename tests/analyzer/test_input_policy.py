# tests/analyzer/test_input_policy.py
from analyzer.utils.input_policy import prepare_input
from analyzer.utils.stopwords import is_stopword


def test_prepare_input_trims():
    assert prepare_input("  Hello.\n\n") == "Hello."


def test_prepare_input_rejects_blank():
    assert prepare_input("") is None
    assert prepare_input(" \n\t ") is None
    assert prepare_input(None) is None


def test_prepare_input_allows_blank_when_disabled():
    assert prepare_input("   ", reject_blank=False) == ""


def test_stopwords_are_case_insensitive():
    assert is_stopword("The")
    assert is_stopword("THOSE")
    assert not is_stopword("fox")
