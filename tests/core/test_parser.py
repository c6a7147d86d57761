# tests/core/test_parser.py
from textpiper_shell.core.parser import parse_command_line


def test_parse_simple_command():
    """Test een enkelvoudig commando zonder argumenten."""
    result = parse_command_line("report seo")
    assert result == [("report", ["seo"], None)]


def test_parse_command_with_arguments():
    """Test een commando met meerdere argumenten."""
    result = parse_command_line("analyze --file notes/draft.md --json")
    assert result == [("analyze", ["--file", "notes/draft.md", "--json"], None)]


def test_parse_sequential_operator():
    """Test de ';' operator voor sequentiële uitvoering."""
    result = parse_command_line("sample ; report words")
    assert result == [
        ("sample", [], None),
        ("report", ["words"], ";")
    ]


def test_parse_conditional_and_operator():
    """Test de '&&' operator voor conditioneel succes."""
    result = parse_command_line("analyze --file a.txt && export --format csv")
    assert result == [
        ("analyze", ["--file", "a.txt"], None),
        ("export", ["--format", "csv"], "&&")
    ]


def test_parse_conditional_or_operator():
    """Test de '||' operator voor conditionele mislukking."""
    result = parse_command_line("report || sample")
    assert result == [
        ("report", [], None),
        ("sample", [], "||")
    ]


def test_parse_pipe_operator():
    """Test de '|' operator voor het doorgeven van output."""
    result = parse_command_line("sample show | analyze --json")
    assert result == [
        ("sample", ["show"], None),
        ("analyze", ["--json"], "|")
    ]


def test_parse_complex_chain():
    """Test een complexe keten met meerdere operatoren."""
    line = "analyze 'Hi there.' && echo 'Done' || echo 'Failed' ; report summary"
    result = parse_command_line(line)
    assert result == [
        ("analyze", ["Hi there."], None),
        ("echo", ["Done"], "&&"),
        ("echo", ["Failed"], "||"),
        ("report", ["summary"], ";")
    ]


def test_parse_variable_shorthands():
    """Test de shorthands voor 'set' en 'get'."""
    result_set = parse_command_line("@{doc}=draft.md")
    assert result_set == [("set", ["@{doc}=draft.md"], None)]

    result_get = parse_command_line("@{report.flesch}")
    assert result_get == [("get", ["@{report.flesch}"], None)]


def test_parse_quoted_arguments():
    """Test argumenten met aanhalingstekens om spaties en operatoren te behouden."""
    line = 'analyze "Fast && cheap; pick two." --json'
    result = parse_command_line(line)
    assert result == [
        ("analyze", ["Fast && cheap; pick two.", "--json"], None)
    ]


def test_parse_unbalanced_quotes_falls_back_to_whitespace_split():
    result = parse_command_line('analyze "unterminated text')
    assert result == [("analyze", ['"unterminated', "text"], None)]


def test_parse_empty_and_whitespace_input():
    """Test of lege invoer correct wordt afgehandeld."""
    assert parse_command_line("") == []
    assert parse_command_line("    ") == []
