# test_ansi.py

from unittest.mock import patch

import pytest

from ansiline.display.ansi import Ansi
from ansiline.display.codes import Codes
from ansiline.display.style import Color, Font, Style
from ansiline.errors import AnsiFormatError, AnsiStateError
from ansiline.testing import AnsiForTests, TerminalInfoForTests

HELLO_WORLD = "Hello World"


class TestAnsi:
    """Change-detector tests of the composed output."""

    def setup_method(self):
        self.capture = AnsiForTests()

    def ansi(self) -> Ansi:
        return self.capture.ansi()

    def test_plain(self):
        self.ansi().out(HELLO_WORLD)
        assert self.capture.get_stdout() == HELLO_WORLD

    def test_plainln(self):
        self.ansi().outln(HELLO_WORLD)
        assert self.capture.get_stdout() == HELLO_WORLD + "\n"

    def test_stderr(self):
        self.ansi().color(Color.RED).err("Error:").errln(" bad")
        assert self.capture.get_stdout() == ""
        assert self.capture.get_stderr() == "\\e[31mError:\\e[m bad\n"

    def test_color(self):
        self.ansi().color(Color.RED).out("x")
        assert self.capture.get_stdout() == "\\e[31mx\\e[m"

    def test_color_with_styles_background_and_font(self):
        self.ansi().color(Color.RED, Style.BOLD, background=Color.BLUE, font=Font.FONT_3).out("x")
        assert self.capture.get_stdout() == "\\e[1;13;31;44mx\\e[m"

    def test_background(self):
        self.ansi().background(Color.RED, Style.BOLD).out("x")
        assert self.capture.get_stdout() == "\\e[1;41mx\\e[m"

    def test_suffixes_unwind_in_reverse(self):
        self.ansi().color(Color.RED).font(Font.FONT_1).out("x")
        assert self.capture.get_stdout() == "\\e[31m\\e[11mx\\e[10m\\e[m"

    def test_fixed_inside_color(self):
        self.ansi().color(Color.RED).fixed(3, 4).out("x")
        assert self.capture.get_stdout() == "\\e[31m\\e[s\\e[3;4Hx\\e[u\\e[m"

    def test_color_inside_fixed(self):
        self.ansi().fixed(3, 4).color(Color.RED).out("x")
        assert self.capture.get_stdout() == "\\e[s\\e[3;4H\\e[31mx\\e[m\\e[u"

    def test_queues_reset_after_write(self):
        ansi = self.ansi()
        ansi.color(Color.RED).out("a").out("b")
        assert self.capture.get_stdout() == "\\e[31ma\\e[mb"
        assert not ansi.pending

    def test_empty_queues_write_raw_text(self):
        self.ansi().out("a %s", "b")
        assert self.capture.get_stdout() == "a b"

    def test_default_style_adds_nothing(self):
        self.ansi().style().color(Color.DEFAULT).out("x")
        assert self.capture.get_stdout() == "x"

    def test_cursor_movement_has_no_suffix(self):
        self.ansi().move_cursor(1).out("x")
        self.ansi().move_cursor(-2, 3).out("y")
        assert self.capture.get_stdout() == "\\e[1Ex\\e[2F\\e[3Cy"

    def test_overwrite_this_line(self):
        self.ansi().overwrite_this_line().out("x")
        assert self.capture.get_stdout() == "\\e[2K\\e[1Gx"

    def test_overwrite_last_line(self):
        self.ansi().overwrite_last_line().out("x")
        assert self.capture.get_stdout() == "\\e[2K\\e[1F\\e[2Kx"

    def test_clear_screen(self):
        self.ansi().clear_screen().out("x")
        assert self.capture.get_stdout() == "\\e[2J\\e[1;1Hx"

    def test_hide_and_show_cursor(self):
        self.ansi().hide_cursor().out("x").show_cursor().out("")
        assert self.capture.get_stdout() == "\\e[?25lx\\e[?25h"


class TestNonChainable:
    """title, save_cursor and restore_cursor must stand alone."""

    def setup_method(self):
        self.capture = AnsiForTests()

    def test_title(self):
        self.capture.ansi().title("Title")
        assert self.capture.get_stdout() == "\\e]0;Title\\a"

    def test_title_after_styling(self):
        with pytest.raises(AnsiStateError, match="window title"):
            self.capture.ansi().color(Color.RED).title("Title")
        assert self.capture.get_stdout() == ""

    def test_save_and_restore(self):
        self.capture.ansi().save_cursor().out("x").restore_cursor()
        assert self.capture.get_stdout() == "\\e[sx\\e[u"

    def test_save_after_styling(self):
        with pytest.raises(AnsiStateError):
            self.capture.ansi().style(Style.BOLD).save_cursor()

    def test_restore_after_styling(self):
        with pytest.raises(AnsiStateError):
            self.capture.ansi().fixed(1, 1).restore_cursor()


class TestFormatting:
    """Positional arguments use printf-style substitution."""

    def setup_method(self):
        self.capture = AnsiForTests()

    def test_arguments(self):
        self.capture.ansi().outln("%s-%d", "a", 1)
        assert self.capture.get_stdout() == "a-1\n"

    def test_percent_without_arguments(self):
        self.capture.ansi().out("100%")
        assert self.capture.get_stdout() == "100%"

    @pytest.mark.parametrize("text, args", [
        ("%s %s", ("only one",)),
        ("%s", ("one", "two")),
        ("%d", ("not a number",)),
    ])
    def test_bad_arguments(self, text, args):
        with pytest.raises(AnsiFormatError):
            self.capture.ansi().out(text, *args)

    def test_failed_write_clears_queues(self):
        ansi = self.capture.ansi()
        with pytest.raises(AnsiFormatError):
            ansi.color(Color.RED).out("%s %s", "x")
        assert not ansi.pending
        ansi.out("y")
        assert self.capture.get_stdout() == "y"


class TestModes:

    def test_no_op(self):
        capture = AnsiForTests(Codes.NO_OP)
        capture.ansi().color(Color.RED).fixed(1, 1).overwrite_last_line().out("x")
        capture.ansi().title("Title")
        assert capture.get_stdout() == "x"

    def test_real(self):
        capture = AnsiForTests(Codes.REAL)
        capture.ansi().color(Color.RED).out("x")
        assert capture.get_stdout() == "\x1b[31mx\x1b[m"

    def test_terminal_overrides_default_codes(self):
        capture = AnsiForTests(Codes.REAL, TerminalInfoForTests(codes=Codes.NO_OP))
        capture.ansi().color(Color.RED).out("x")
        assert capture.get_stdout() == "x"

    def test_true_color(self):
        capture = AnsiForTests()
        capture.ansi().color((255, 0, 0)).out("x")
        assert capture.get_stdout() == "\\e[38;2;255;0;0mx\\e[m"

    def test_rgb_downgraded_without_true_color(self):
        capture = AnsiForTests(terminal=TerminalInfoForTests(true_color=False))
        capture.ansi().color((255, 255, 255), background=(0, 0, 0)).out("x")
        assert capture.get_stdout() == "\\e[38;5;231;48;5;16mx\\e[m"

    def test_default_streams(self, capsys):
        Ansi(codes=Codes.RAW).out("x").errln("y")
        captured = capsys.readouterr()
        assert captured.out == "x"
        assert captured.err == "y\n"


def test_delay():
    capture = AnsiForTests()
    with patch("ansiline.display.ansi.time.sleep") as sleep:
        capture.ansi().out("a").delay(0.5).out("b")
    sleep.assert_called_once_with(0.5)
    assert capture.get_stdout() == "ab"
