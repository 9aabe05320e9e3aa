# test_main.py

import os
from unittest.mock import patch

import pytest

from ansiline.__main__ import build_parser, main
from ansiline.display.terminal import MODE_VARIABLE


@pytest.fixture
def plain_output(monkeypatch):
    """Route ansi() through a fresh TerminalInfo with escape codes disabled."""
    monkeypatch.setenv(MODE_VARIABLE, "OFF")
    monkeypatch.setenv("COLUMNS", "80")
    monkeypatch.setattr("ansiline.display.terminal._terminal_info", None)


class TestParser:

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.command == "demo"
        assert args.names == []
        assert args.mode is None
        assert not args.enable_logging

    def test_rejects_unknown_mode(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--mode", "loud"])


class TestMain:

    def test_unknown_style(self, plain_output, capsys):
        assert main(["colors", "bogus"]) == 1
        captured = capsys.readouterr()
        assert "Error: Unknown font/style bogus" in captured.err
        assert captured.out == ""

    def test_colors_table(self, plain_output, capsys):
        assert main(["colors", "bold", "fraktur"]) == 0
        lines = capsys.readouterr().out.splitlines()
        header = lines[0].split()
        assert header[:3] == ["BLACK", "RED", "GREEN"]
        assert "L_GREEN" in header
        assert len(lines) == len(header) + 1
        assert lines[1].split()[0] == "BLACK"
        assert "Text" in lines[1]

    def test_extra_names_rejected(self, plain_output):
        with pytest.raises(SystemExit):
            main(["cursor", "bold"])

    def test_mode_flag_sets_environment(self, monkeypatch):
        monkeypatch.setenv(MODE_VARIABLE, "OFF")
        with patch("ansiline.__main__.demo") as demo:
            assert main(["--mode", "raw"]) == 0
        demo.assert_called_once()
        assert os.environ[MODE_VARIABLE] == "RAW"
