# test_utilities.py

from unittest.mock import patch

from ansiline.display.animations import ProgressText
from ansiline.testing import AnsiForTests, TerminalInfoForTests
from ansiline.utilities import AnsiUtils

LN = "\n"


class TestStatusMessages:

    def setup_method(self):
        self.capture = AnsiForTests()
        self.utils = AnsiUtils(self.capture.ansi, self.capture.terminal)

    def test_messages(self):
        expected_lines = [
            "[ \\e[1;32mOK   \\e[m ] Foo Bar",
            "[ \\e[1;32mDONE \\e[m ] Foo Bar",
            "[ \\e[1;32mPASS \\e[m ] Foo Bar",
            "[ \\e[1;37mINFO \\e[m ] Foo Bar",
            "[ \\e[1;33mWARN \\e[m ] Foo Bar",
            "[ \\e[1;33mSKIP \\e[m ] Foo Bar",
            "[ \\e[1;31mFAIL \\e[m ] Foo Bar",
            "[ \\e[1;31mERROR\\e[m ] Foo Bar",
            "[ \\e[1;35mDEBUG\\e[m ] Foo Bar",
        ]

        self.utils.ok("Foo %s", "Bar")
        self.utils.done("Foo %s", "Bar")
        self.utils.pass_("Foo %s", "Bar")
        self.utils.info("Foo %s", "Bar")
        self.utils.warn("Foo %s", "Bar")
        self.utils.skip("Foo %s", "Bar")
        self.utils.fail("Foo %s", "Bar")
        self.utils.error("Foo %s", "Bar")
        self.utils.debug("Foo %s", "Bar")

        assert self.capture.get_stdout() == LN.join(expected_lines) + LN
        assert self.capture.get_stderr() == ""

    def test_message_without_arguments(self):
        self.utils.ok("100% done")
        assert self.capture.get_stdout() == "[ \\e[1;32mOK   \\e[m ] 100% done\n"


class TestProgressFactories:

    def test_percent_progress_bar(self):
        capture = AnsiForTests()
        progress_bar = AnsiUtils(capture.ansi, capture.terminal).percent_progress_bar()
        assert progress_bar.config.text is ProgressText.PERCENT
        assert progress_bar.config.units == "%"
        assert progress_bar.total_steps == 100

    def test_counter_progress_bar(self):
        capture = AnsiForTests()
        progress_bar = AnsiUtils(capture.ansi, capture.terminal).counter_progress_bar(7, " files")
        assert progress_bar.config.text is ProgressText.FRACTION
        assert progress_bar.config.units == " files"
        assert progress_bar.total_steps == 7

    def test_custom_bar_uses_terminal_width(self):
        capture = AnsiForTests(terminal=TerminalInfoForTests(columns=20))
        utils = AnsiUtils(capture.ansi, capture.terminal)
        progress_bar = utils.progress_bar().prefix("|").suffix("|").fill_char("#").total_steps(4).build()
        progress_bar.update_progress(2)
        # 20 - len("|") - len("| 2/4") = 14 cells, half filled
        assert capture.get_stdout() == "\\e[2K\\e[1G|" + "#" * 7 + " " * 7 + "| 2/4"

    def test_default_terminal(self):
        with patch("ansiline.utilities.get_terminal_info") as get_terminal_info:
            utils = AnsiUtils()
            assert utils.terminal is get_terminal_info.return_value
