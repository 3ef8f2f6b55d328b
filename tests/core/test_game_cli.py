"""
test_game_cli.py
----------------
Tests for the command-line entry point (the game loop itself is mocked).
"""

from unittest.mock import patch

from catfish.core.debug.debug_logger import LoggerConfig
from catfish.game import main


@patch("catfish.game.GameLoop")
def test_defaults(mock_loop):
    assert main([]) == 0
    mock_loop.assert_called_once_with(config_path=None, save_path=None, seed=None)
    mock_loop.return_value.run.assert_called_once()


@patch("catfish.game.GameLoop")
def test_arguments_forwarded(mock_loop):
    main(["--config", "tuning.yaml", "--save", "slot.json", "--seed", "42"])
    mock_loop.assert_called_once_with(config_path="tuning.yaml", save_path="slot.json", seed=42)


@patch("catfish.game.GameLoop")
def test_log_level_flag(mock_loop, monkeypatch):
    monkeypatch.setattr(LoggerConfig, "LOG_LEVEL", "INFO")
    main(["--log-level", "verbose"])
    assert LoggerConfig.LOG_LEVEL == "VERBOSE"
