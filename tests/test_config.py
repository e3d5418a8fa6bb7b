"""
Testing settings read from the environment
- Tool: monkeypatch.setenv sets a variable for one test only.
- Trick: importlib.reload re-runs config.py so it reads the new value.
  After each test the module is reloaded again with the real environment.
"""

import importlib

import pytest
from typer.testing import CliRunner

import codeguess.config as config
import codeguess.main as app_main
import codeguess.session as session_module

runner = CliRunner()

SETTINGS = (
    "CODEGUESS_PAUSE_SECONDS",
    "CODEGUESS_MAX_RETRIES",
    "CODEGUESS_MAX_PLAYERS",
    "CODEGUESS_LOG_LEVEL",
)


@pytest.fixture
def reload_config(monkeypatch):
    for name in SETTINGS:
        monkeypatch.delenv(name, raising=False)

    def _reload(**env):
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(config)

    yield _reload

    monkeypatch.undo()
    importlib.reload(config)
    importlib.reload(app_main)


def test_defaults(reload_config):
    settings = reload_config()

    assert settings.PAUSE_SECONDS == 5.0
    assert settings.MAX_RETRIES == 100
    assert settings.MAX_PLAYERS == 10
    assert settings.LOG_LEVEL == "WARNING"


def test_values_from_environment(reload_config):
    settings = reload_config(
        CODEGUESS_PAUSE_SECONDS="1.5",
        CODEGUESS_MAX_RETRIES="7",
        CODEGUESS_MAX_PLAYERS="4",
        CODEGUESS_LOG_LEVEL="debug",
    )

    assert settings.PAUSE_SECONDS == 1.5
    assert settings.MAX_RETRIES == 7
    assert settings.MAX_PLAYERS == 4
    assert settings.LOG_LEVEL == "DEBUG"


@pytest.mark.parametrize(
    "name, value, reason",
    [
        ("CODEGUESS_MAX_RETRIES", "0", "at least 1"),
        ("CODEGUESS_MAX_RETRIES", "abc", "must be a number"),
        ("CODEGUESS_MAX_PLAYERS", "1", "at least 2"),
        ("CODEGUESS_MAX_PLAYERS", "ten", "must be a number"),
        ("CODEGUESS_PAUSE_SECONDS", "-1", "at least 0"),
        ("CODEGUESS_PAUSE_SECONDS", "soon", "must be a number"),
        ("CODEGUESS_LOG_LEVEL", "loud", "must be one of"),
    ],
)
def test_bad_values_raise_runtime_error(reload_config, name, value, reason):
    with pytest.raises(RuntimeError) as exc_info:
        reload_config(**{name: value})

    message = str(exc_info.value)
    assert name in message
    assert reason in message


def test_pause_setting_is_the_cli_default(reload_config, monkeypatch, scripted_io):
    """
    Flow:
    1) CODEGUESS_PAUSE_SECONDS=0.25, reload config and the CLI module.
    2) Play a game without --pause; the pause between turns is 0.25.
    """
    reload_config(CODEGUESS_PAUSE_SECONDS="0.25")
    importlib.reload(app_main)

    monkeypatch.setattr(
        session_module,
        "generate_unique_codes",
        lambda n, **kwargs: [(1, 2, 3, 4), (5, 6, 7, 8)][:n],
    )
    io = scripted_io(names=["Alice", "Bob"], guesses={"Alice": ["1234"], "Bob": ["5678"]})
    monkeypatch.setattr(app_main, "get_io", lambda: io)

    result = runner.invoke(app_main.app, ["play"], input="n\n")

    assert result.exit_code == 0, result.output
    assert io.pauses == [0.25]
