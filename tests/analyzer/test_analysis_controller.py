# tests/analyzer/test_analysis_controller.py
import pytest
from pydantic import ValidationError

from analyzer.controllers.analysis_controller import analyze, count_non_whitespace, reading_time
from analyzer.utils.sample_text import SAMPLE_TEXT

FOX = "The quick brown fox jumps over the lazy dog."


def test_reference_sentence_report():
    report = analyze(FOX)

    assert report.basic.characters == 44
    assert report.basic.characters_no_spaces == 36
    assert report.basic.words == 9
    assert report.basic.sentences == 1
    assert report.basic.paragraphs == 1
    assert report.basic.reading_time == 1

    assert report.word_frequency[0].word == "the"
    assert report.word_frequency[0].count == 2
    assert len(report.word_frequency) == 8

    assert report.readability.flesch_score == 94.3
    assert report.readability.avg_words_per_sentence == 9.0
    assert report.readability.avg_syllables_per_word == 1.2

    keywords = [kw.word for kw in report.seo.top_keywords]
    assert keywords == ["quick", "brown", "fox", "jumps", "over"]
    assert all(kw.density == 11.11 for kw in report.seo.top_keywords)
    assert report.seo.keyword_diversity == 7


def test_empty_document():
    report = analyze("")
    assert report.basic.words == 0
    assert report.basic.sentences == 0
    assert report.basic.paragraphs == 0
    assert report.basic.reading_time == 0
    assert report.readability.flesch_score == 100.0
    assert report.word_frequency == ()
    assert report.seo.top_keywords == ()


def test_headings_and_links_in_document():
    report = analyze("# Heading one\nSome text https://example.com more text")
    assert report.seo.heading_count == 1
    assert report.seo.link_count == 1


def test_sample_text_has_three_paragraphs():
    report = analyze(SAMPLE_TEXT)
    assert report.basic.paragraphs == 3
    assert report.basic.sentences == 6
    assert 0.0 <= report.readability.flesch_score <= 100.0


def test_word_frequency_capped_at_ten():
    text = " ".join(f"w{i}" for i in range(25))
    report = analyze(text)
    assert len(report.word_frequency) == 10
    assert report.word_frequency[0].word == "w0"


def test_surrounding_whitespace_does_not_change_counts():
    plain = analyze(FOX + "\n\nSecond paragraph here.")
    padded = analyze("  \n\n" + FOX + "\n\nSecond paragraph here.\n\n   ")
    assert padded.basic.words == plain.basic.words
    assert padded.basic.sentences == plain.basic.sentences
    assert padded.basic.paragraphs == plain.basic.paragraphs
    assert padded.basic.characters_no_spaces == plain.basic.characters_no_spaces


@pytest.mark.parametrize("words, minutes", [(0, 0), (1, 1), (200, 1), (201, 2), (1000, 5)])
def test_reading_time(words, minutes):
    assert reading_time(words) == minutes


def test_reading_time_from_document():
    assert analyze("word " * 201).basic.reading_time == 2


def test_count_non_whitespace():
    assert count_non_whitespace("a b\tc\nd  ") == 4


def test_report_is_immutable():
    report = analyze(FOX)
    with pytest.raises(ValidationError):
        report.basic.words = 1
