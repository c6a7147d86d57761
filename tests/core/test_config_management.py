# tests/core/test_config_management.py
import json

import pytest

from textpiper_shell.core.managers.config_manager import DEFAULT_SETTINGS, ConfigManager, merge_settings
from textpiper_shell.core.handlers.config_handler import handle_config
from textpiper_shell.core.context.shell_context import ShellContext
from textpiper_shell.core.utils.path_utils import PathUtils

# Een standaard, voorspelbare configuratie voor onze tests
MOCK_SETTINGS_CONTENT = {
    "debug": {
        "level": "WARNING"
    },
    "analysis": {
        "reject_blank_input": True
    },
    "report": {
        "frequent_words_shown": 8
    }
}


@pytest.fixture
def config_env(tmp_path, monkeypatch):
    """
    Een fixture die een geïsoleerde testomgeving opzet voor de ConfigManager:
    - Creëert een tijdelijke package root met een nep 'settings.json'.
    - Monkeypatched PathUtils om naar deze tijdelijke locatie te wijzen.
    - Herlaadt na de test de echte settings.json in de singleton.
    """
    package_root = tmp_path / "textpiper_shell"
    package_root.mkdir()
    (package_root / "settings.json").write_text(json.dumps(MOCK_SETTINGS_CONTENT))

    monkeypatch.setattr(PathUtils, 'get_shell_package_root', lambda: package_root)

    # De globale singleton kan al geladen zijn; forceer herladen uit ons nep-bestand
    manager = ConfigManager()
    manager.reset()

    yield manager, ShellContext()

    monkeypatch.undo()
    manager.reset()


# --- Tests voor de ConfigManager direct ---

def test_config_manager_is_singleton(config_env):
    manager, _ = config_env
    assert ConfigManager() is manager


def test_config_manager_load(config_env):
    """Test of de manager de configuratie correct laadt."""
    manager, _ = config_env
    config = manager.get_all()
    assert config["debug"]["level"] == "WARNING"
    assert config["report"]["frequent_words_shown"] == 8


def test_config_manager_get_nested(config_env):
    """Test het ophalen van geneste waarden."""
    manager, _ = config_env
    assert manager.get_nested("analysis.reject_blank_input") is True
    assert manager.get_nested("non.existent.key", "default") == "default"
    assert manager.get_nested("debug.level.deeper", "default") == "default"


def test_config_manager_set_nested(config_env):
    """Test het aanpassen van waarden in het geheugen."""
    manager, _ = config_env

    manager.set_nested("debug.level", "INFO")
    assert manager.get_nested("debug.level") == "INFO"

    # Nieuwe sleutels worden as-is opgeslagen
    manager.set_nested("studio.theme", "dark")
    assert manager.get_nested("studio.theme") == "dark"

    # Type-casting: de originele waarde is een int
    manager.set_nested("report.frequent_words_shown", "5")
    assert manager.get_nested("report.frequent_words_shown") == 5


def test_config_manager_set_nested_parses_booleans(config_env):
    """bool('false') is True; de manager moet de spelling lezen."""
    manager, _ = config_env
    manager.set_nested("analysis.reject_blank_input", "false")
    assert manager.get_nested("analysis.reject_blank_input") is False

    manager.set_nested("analysis.reject_blank_input", "on")
    assert manager.get_nested("analysis.reject_blank_input") is True


def test_config_manager_set_nested_through_scalar_fails(config_env):
    manager, _ = config_env
    assert manager.set_nested("debug.level.sub", "x") is False


def test_config_manager_set_nested_rejects_unconvertible_values(config_env):
    """A value that does not fit the existing type is not stored."""
    manager, _ = config_env
    assert manager.set_nested("report.frequent_words_shown", "lots") is False
    assert manager.get_nested("report.frequent_words_shown") == 8

    assert manager.set_nested("analysis.reject_blank_input", "maybe") is False
    assert manager.get_nested("analysis.reject_blank_input") is True

    assert manager.set_nested("studio", "off") is False
    assert manager.get_nested("studio.port") == 5000


def test_config_manager_reset(config_env):
    """Test of de reset-functie de configuratie herlaadt vanaf schijf."""
    manager, _ = config_env

    manager.set_nested("debug.level", "DEBUG")
    assert manager.get_nested("debug.level") == "DEBUG"

    manager.reset()
    assert manager.get_nested("debug.level") == "WARNING"


def test_config_manager_missing_settings_file(config_env, tmp_path, monkeypatch):
    """Zonder settings.json gelden de ingebouwde standaardwaarden."""
    manager, _ = config_env
    monkeypatch.setattr(PathUtils, "get_shell_package_root", lambda: tmp_path / "missing")
    manager.reset()
    assert manager.get_all() == DEFAULT_SETTINGS


def test_config_manager_fills_missing_sections_from_defaults(config_env):
    manager, _ = config_env
    # Het nep-bestand kent geen studio-sectie
    assert manager.get_nested("studio.debounce_ms") == 1000
    assert manager.get_nested("export.default_format") == "json"


def test_merge_settings_is_deep_and_does_not_mutate():
    base = {"studio": {"host": "127.0.0.1", "port": 5000}}
    merged = merge_settings(base, {"studio": {"port": 8080}, "extra": 1})
    assert merged == {"studio": {"host": "127.0.0.1", "port": 8080}, "extra": 1}
    assert base["studio"]["port"] == 5000


# --- Tests voor de 'config' command handler ---

def test_handle_config_list(config_env, capsys):
    """Test 'config list'."""
    _, ctx = config_env
    assert handle_config(["list"], ctx) == 0
    captured = capsys.readouterr()

    output_json = json.loads(captured.out)
    assert output_json["report"]["frequent_words_shown"] == 8


def test_handle_config_set(config_env, capsys):
    """Test 'config set <key> <value>'."""
    manager, ctx = config_env
    assert handle_config(["set", "report.frequent_words_shown", "3"], ctx) == 0
    captured = capsys.readouterr()

    assert "Config updated: report.frequent_words_shown = 3" in captured.out
    assert manager.get_nested("report.frequent_words_shown") == 3


def test_handle_config_set_requires_value(config_env, capsys):
    _, ctx = config_env
    assert handle_config(["set", "debug.level"], ctx) == 1
    assert "Usage: config set" in capsys.readouterr().out


def test_handle_config_reset(config_env, capsys):
    """Test 'config reset'."""
    manager, ctx = config_env

    handle_config(["set", "debug.level", "CRITICAL"], ctx)
    assert manager.get_nested("debug.level") == "CRITICAL"

    handle_config(["reset"], ctx)
    captured = capsys.readouterr()

    assert "Configuration has been reset" in captured.out
    assert manager.get_nested("debug.level") == "WARNING"


def test_handle_config_unknown_subcommand(config_env, capsys):
    _, ctx = config_env
    assert handle_config(["explode"], ctx) == 1


def test_handle_config_list_section(config_env, capsys):
    _, ctx = config_env
    assert handle_config(["list", "report"], ctx) == 0
    assert json.loads(capsys.readouterr().out) == {"report": {"frequent_words_shown": 8}}

    assert handle_config(["list", "nope"], ctx) == 1


def test_handle_config_get(config_env, capsys):
    _, ctx = config_env
    assert handle_config(["get", "report.frequent_words_shown"], ctx) == 0
    assert capsys.readouterr().out.strip() == "8"

    assert handle_config(["get", "analysis.reject_blank_input"], ctx) == 0
    assert capsys.readouterr().out.strip() == "true"

    assert handle_config(["get", "no.such.key"], ctx) == 1


def test_handle_config_set_rejects_wrong_type(config_env, capsys):
    manager, ctx = config_env
    assert handle_config(["set", "report.frequent_words_shown", "lots"], ctx) == 1
    assert "Failed to set config value" in capsys.readouterr().out
    assert manager.get_nested("report.frequent_words_shown") == 8
