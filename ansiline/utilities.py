# utilities.py

from typing import Callable, Optional

from .display.ansi import Ansi, ansi
from .display.style import Color, Style
from .display.terminal import TerminalInfo, get_terminal_info
from .display.animations import ProgressBar, ProgressBarBuilder, ProgressText

LABEL_WIDTH = 5


class AnsiUtils:
    """
    Higher-level output helpers built on Ansi: bracketed status messages
    such as "[ OK    ] Deployed" and self-overwriting progress bars.
    """

    def __init__(self, factory: Callable[[], Ansi] = ansi,
                 terminal: Optional[TerminalInfo] = None,
                 logger=None):
        """
        Args:
            factory: Callable returning a fresh Ansi for each message
            terminal: Source of the terminal width for progress bars;
                defaults to the process-wide TerminalInfo
            logger: Optional Logger handed to progress bars
        """
        self._factory = factory
        self._terminal = terminal
        self.logger = logger

    @property
    def terminal(self) -> TerminalInfo:
        return self._terminal if self._terminal is not None else get_terminal_info()

    def _status(self, label: str, color: Color, message: str, args: tuple) -> None:
        (self._factory()
            .out("[ ")
            .color(color, Style.BOLD).out(label.ljust(LABEL_WIDTH))
            .out(" ] ")
            .outln(message, *args))

    def ok(self, message: str, *args) -> None:
        self._status("OK", Color.GREEN, message, args)

    def done(self, message: str, *args) -> None:
        self._status("DONE", Color.GREEN, message, args)

    def pass_(self, message: str, *args) -> None:
        self._status("PASS", Color.GREEN, message, args)

    def info(self, message: str, *args) -> None:
        self._status("INFO", Color.GREY, message, args)

    def warn(self, message: str, *args) -> None:
        self._status("WARN", Color.YELLOW, message, args)

    def skip(self, message: str, *args) -> None:
        self._status("SKIP", Color.YELLOW, message, args)

    def fail(self, message: str, *args) -> None:
        self._status("FAIL", Color.RED, message, args)

    def error(self, message: str, *args) -> None:
        self._status("ERROR", Color.RED, message, args)

    def debug(self, message: str, *args) -> None:
        self._status("DEBUG", Color.MAGENTA, message, args)

    def progress_bar(self) -> ProgressBarBuilder:
        """Return a builder bound to this helper's output and terminal width."""
        return ProgressBarBuilder(
            ansi_factory=self._factory,
            columns=lambda: self.terminal.system_columns(),
            logger=self.logger,
        )

    def percent_progress_bar(self, prefix: str = "[", suffix: str = "]",
                             fill_char: str = "=") -> ProgressBar:
        """
        Return a bar that displays a percentage.

        Call update_progress() with a value from 0 to 100, or use
        update_steps() to have arbitrary step counts converted.
        """
        return (self.progress_bar()
                .prefix(prefix).suffix(suffix).fill_char(fill_char)
                .units("%").text(ProgressText.PERCENT).total_steps(100)
                .build())

    def counter_progress_bar(self, initial_step_count: int, units: str = "",
                             prefix: str = "[", suffix: str = "]",
                             fill_char: str = "=") -> ProgressBar:
        """
        Return a bar that displays an x/y counter.

        Args:
            initial_step_count: Steps needed to fill the bar; can be changed
                later with update_steps()
            units: Text appended to the counter, e.g. " tasks"
            prefix: Text framing the start of the bar
            suffix: Text framing the end of the bar
            fill_char: Character drawn for completed steps
        """
        return (self.progress_bar()
                .prefix(prefix).suffix(suffix).fill_char(fill_char)
                .units(units).text(ProgressText.FRACTION)
                .total_steps(initial_step_count)
                .build())
