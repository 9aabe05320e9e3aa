# display/terminal.py
import os
import sys
import subprocess
import threading
from typing import Mapping, Optional

from rich.console import Console

from ..logger import Logger
from .codes import Codes

MODE_VARIABLE = "ANSILINE_MODE"
DEBUG_VARIABLE = "ANSILINE_DEBUG"
DEFAULT_COLUMNS = 80
PROBE_TIMEOUT = 2.0


class TerminalInfo:
    """
    Environment facts consulted by Ansi instances: which escape codes to
    emit, how wide the terminal is, and whether it renders 24-bit color.

    Everything except the column count is read once at construction. The
    column count may arrive later from a background probe, so callers
    should ask for it each time rather than caching it.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None,
                 console: Optional[Console] = None,
                 lookup_columns: bool = True,
                 logger: Optional[Logger] = None):
        """
        Read configuration and start the columns probe if needed.

        Args:
            environ: Environment mapping, defaults to os.environ
            console: rich Console used for terminal detection
            lookup_columns: Whether to probe the terminal width in the background
            logger: Logger for diagnostics; built from ANSILINE_DEBUG when omitted

        Raises:
            ValueError: If ANSILINE_MODE or ANSILINE_DEBUG hold unknown values
        """
        self._environ = os.environ if environ is None else environ
        self._console = console or Console(file=sys.stdout)
        self.logger = logger or Logger(
            __name__, logging_enabled=self._debug_from_environment(), log_file="-"
        )
        self._codes = self._codes_from_environment()
        self._columns = self._columns_from_environment()
        self._probe: Optional[threading.Thread] = None

        if lookup_columns and self._columns is None:
            self._start_columns_probe()

    def _debug_from_environment(self) -> bool:
        value = self._environ.get(DEBUG_VARIABLE, "false").lower()
        if value not in ("true", "false"):
            raise ValueError(
                f"Invalid value for {DEBUG_VARIABLE}, expected true/false, was {value}"
            )
        return value == "true"

    def _codes_from_environment(self) -> Optional[Codes]:
        value = self._environ.get(MODE_VARIABLE)
        if value is None:
            return None
        return self.codes_for_mode(value)

    def codes_for_mode(self, value: str) -> Codes:
        """
        Resolve a mode name (REAL, RAW, OFF or CONSOLE) to Codes.

        CONSOLE emits real codes only when attached to an interactive terminal.
        """
        mode = value.strip().upper()
        if mode == "REAL":
            return Codes.REAL
        if mode == "RAW":
            return Codes.RAW
        if mode == "OFF":
            return Codes.NO_OP
        if mode == "CONSOLE":
            return Codes.REAL if self._console.is_terminal else Codes.NO_OP
        raise ValueError(f"Invalid value {value} for {MODE_VARIABLE}")

    def _columns_from_environment(self) -> Optional[int]:
        try:
            columns = int(self._environ.get("COLUMNS", ""))
        except ValueError:
            return None
        return columns if columns > 0 else None

    def _start_columns_probe(self) -> None:
        """Look up the terminal width on a daemon thread; never waited on."""
        self._probe = threading.Thread(
            target=self._probe_columns, name="ansiline-columns", daemon=True
        )
        self._probe.start()

    def _probe_columns(self) -> None:
        columns = self._columns_from_stdout() or self._columns_from_tput()
        if columns:
            self._columns = columns
            self.logger.debug(f"Detected terminal width of {columns} columns")
        else:
            self.logger.debug("Could not determine terminal width")

    def _columns_from_stdout(self) -> Optional[int]:
        stream = sys.__stdout__
        if stream is None:
            return None
        try:
            return os.get_terminal_size(stream.fileno()).columns or None
        except (OSError, ValueError) as e:
            self.logger.debug(f"Terminal size unavailable from stdout: {e}")
            return None

    def _columns_from_tput(self) -> Optional[int]:
        # On Windows "bash" may resolve to WSL and report a different terminal
        if sys.platform.startswith("win"):
            return None
        try:
            result = subprocess.run(
                ["bash", "-c", "tput cols 2> /dev/tty"],
                capture_output=True, text=True, timeout=PROBE_TIMEOUT,
            )
        except (OSError, subprocess.SubprocessError) as e:
            self.logger.debug(f"tput lookup failed: {e}")
            return None
        if result.returncode != 0:
            self.logger.debug(
                f"tput exited with {result.returncode}: {result.stderr.strip()}"
            )
            return None
        try:
            return int(result.stdout.strip())
        except ValueError:
            self.logger.debug(f"Unexpected tput output: {result.stdout!r}")
            return None

    def codes(self, default: Codes) -> Codes:
        """Return the configured Codes, or default if none was configured."""
        return self._codes if self._codes is not None else default

    def system_codes(self) -> Optional[Codes]:
        return self._codes

    def system_columns(self) -> Optional[int]:
        """Return the best known terminal width, or None if unknown."""
        return self._columns

    def columns(self, default: int = DEFAULT_COLUMNS) -> int:
        columns = self.system_columns()
        return columns if columns is not None else default

    def true_color(self) -> bool:
        """Return True if the terminal is believed to render 24-bit color."""
        return self._console.color_system == "truecolor"


_terminal_info: Optional[TerminalInfo] = None
_terminal_info_lock = threading.Lock()


def get_terminal_info() -> TerminalInfo:
    """Return the process-wide TerminalInfo, building it on first use."""
    global _terminal_info
    with _terminal_info_lock:
        if _terminal_info is None:
            _terminal_info = TerminalInfo()
        return _terminal_info
