# testing.py

from io import StringIO
from typing import Optional

from .logger import Logger
from .display.ansi import Ansi
from .display.codes import Codes
from .display.terminal import TerminalInfo


class TerminalInfoForTests(TerminalInfo):
    """A TerminalInfo with fixed answers and no environment probing."""

    def __init__(self, codes: Optional[Codes] = None, columns: Optional[int] = None,
                 true_color: bool = True):
        self._codes = codes
        self._columns = columns
        self._true_color = true_color
        self._probe = None
        self.logger = Logger(__name__)

    def codes_for_mode(self, value: str) -> Codes:
        raise NotImplementedError("TerminalInfoForTests does not read modes")

    def true_color(self) -> bool:
        return self._true_color


class AnsiForTests:
    """
    Builds Ansi instances that write to in-memory buffers.

    RAW codes are used by default so captured output is printable, e.g.
    "\\e[2K" rather than an invisible ESC byte.
    """

    def __init__(self, codes: Codes = Codes.RAW,
                 terminal: Optional[TerminalInfo] = None):
        self.stdout = StringIO()
        self.stderr = StringIO()
        self.terminal = terminal or TerminalInfoForTests()
        self.codes = self.terminal.codes(codes)

    def ansi(self) -> Ansi:
        return Ansi(self.stdout, self.stderr, self.codes,
                    true_color=self.terminal.true_color())

    def get_stdout(self) -> str:
        return self.stdout.getvalue()

    def get_stderr(self) -> str:
        return self.stderr.getvalue()
