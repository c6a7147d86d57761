# tests/analyzer/test_report_controller.py
import pytest

from analyzer.controllers.analysis_controller import analyze
from analyzer.controllers.report_controller import ReportController

FOX = "The quick brown fox jumps over the lazy dog."


@pytest.fixture
def fox_report():
    return analyze(FOX)


def test_build_view_cards_and_readability(fox_report):
    view = ReportController().build_view(fox_report)

    assert view["cards"][0] == {"label": "Words", "value": "9"}
    assert view["cards"][-1] == {"label": "Readability", "value": "94.3"}
    assert view["readability"]["label"] == "Very Easy"
    assert view["readability"]["css_class"] == "score-excellent"
    assert ("Links Found", "0") in view["seo_rows"]


def test_frequent_words_widths_relative_to_top_word(fox_report):
    view = ReportController().build_view(fox_report)
    words = view["frequent_words"]

    assert words[0] == {"word": "the", "count": 2, "width": 100.0}
    assert all(entry["width"] == 50.0 for entry in words[1:])
    assert len(words) == 8


def test_frequent_word_widths_round_half_up():
    # 1/32 of the top word is exactly 3.125 percent
    view = ReportController().build_view(analyze("alpha " * 32 + "beta"))
    widths = [entry["width"] for entry in view["frequent_words"]]
    assert widths == [100.0, 3.13]


def test_frequent_words_shown_is_configurable(fox_report):
    view = ReportController(frequent_words_shown=3).build_view(fox_report)
    assert len(view["frequent_words"]) == 3


def test_card_values_use_thousands_separator():
    view = ReportController().build_view(analyze("word " * 1234))
    assert view["cards"][0]["value"] == "1,234"


def test_keyword_density_formatted_with_two_decimals(fox_report):
    view = ReportController().build_view(fox_report)
    assert view["keywords"][0] == {"word": "quick", "count": 1, "density": "11.11"}


def test_render_text_full_report(fox_report):
    text = ReportController().render_text(fox_report)
    for header in ("--- Summary ---", "--- Readability Analysis ---",
                   "--- SEO Metrics ---", "--- Most Frequent Words ---"):
        assert header in text
    assert "94.3 - Very Easy" in text


def test_render_text_single_section(fox_report):
    text = ReportController().render_text(fox_report, "seo")
    assert text.startswith("--- SEO Metrics ---")
    assert "--- Summary ---" not in text


def test_render_text_empty_report_shows_placeholders():
    text = ReportController().render_text(analyze(""), "words")
    assert "(none)" in text


def test_render_text_rejects_unknown_section(fox_report):
    with pytest.raises(ValueError):
        ReportController().render_text(fox_report, "graphs")
