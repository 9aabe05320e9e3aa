# display/ansi.py

import sys
import time
from typing import List, Optional, TextIO

from ..errors import AnsiFormatError, AnsiStateError
from .codes import Codes
from .style.definitions import (
    Color,
    Font,
    Style,
    RgbColor,
    ColorVariant,
    to_color_variant,
)
from .terminal import get_terminal_info

DEFAULT_CODES = Codes.REAL


class Ansi:
    """
    Fluent builder for styled terminal output.

    Styling calls queue escape sequences and return the same instance;
    a terminating write (out, outln, err, errln) wraps its text in the
    queued prefix and suffix, emits it with a single write, and empties
    both queues. Suffixes unwind in reverse order of application, so
    color(A).style(B).out(x) renders as A B x clear(B) clear(A).

    Not thread-safe: concurrent writers must serialize each chain of
    styling calls through its terminating write.
    """

    def __init__(self, stdout: Optional[TextIO] = None,
                 stderr: Optional[TextIO] = None,
                 codes: Codes = DEFAULT_CODES,
                 true_color: bool = True):
        """
        Args:
            stdout: Sink for out/outln, defaults to sys.stdout at write time
            stderr: Sink for err/errln, defaults to sys.stderr at write time
            codes: Escape code encoding to use
            true_color: If False, RGB colors are approximated with the
                256-color palette
        """
        self._stdout = stdout
        self._stderr = stderr
        self.codes = codes
        self.true_color = true_color
        self._prefix: List[str] = []
        self._suffix: List[str] = []

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    @property
    def pending(self) -> bool:
        """True if styling has been queued but not yet written."""
        return bool(self._prefix or self._suffix)

    def _check_unchained(self, operation: str) -> None:
        if self.pending:
            raise AnsiStateError(
                f"Unnecessary chaining; cannot set additional formatting on {operation}."
            )

    def _push(self, prefix: str, suffix: str = "") -> 'Ansi':
        if prefix:
            self._prefix.append(prefix)
            if suffix:
                self._suffix.insert(0, suffix)
        return self

    def _resolve(self, value) -> ColorVariant:
        variant = to_color_variant(value)
        if not self.true_color and isinstance(variant, RgbColor):
            return variant.to_indexed()
        return variant

    # Non-chainable operations

    def title(self, text: str) -> None:
        """Set the terminal window title."""
        self._check_unchained("the window title")
        self.out(self.codes.title(text))

    def save_cursor(self) -> 'Ansi':
        self._check_unchained("save_cursor()")
        self._prefix.append(self.codes.save_cursor())
        return self.out("")

    def restore_cursor(self) -> 'Ansi':
        self._check_unchained("restore_cursor()")
        self._prefix.append(self.codes.restore_cursor())
        return self.out("")

    # Styling

    def color(self, color, *styles: Style, background=Color.DEFAULT,
              font: Font = Font.DEFAULT) -> 'Ansi':
        """
        Apply a foreground color, plus optional styles, background and font.

        Colors may be a Color, a palette index (0-255), an (r, g, b)
        tuple, or a ColorVariant.
        """
        sequence = self.codes.color(
            self._resolve(color), self._resolve(background), font, styles
        )
        return self._push(sequence, self.codes.clear())

    def background(self, background, *styles: Style) -> 'Ansi':
        sequence = self.codes.color(
            self._resolve(Color.DEFAULT), self._resolve(background), Font.DEFAULT, styles
        )
        return self._push(sequence, self.codes.clear())

    def style(self, *styles: Style) -> 'Ansi':
        sequence = self.codes.color(styles=styles)
        return self._push(sequence, self.codes.clear())

    def font(self, font: Font) -> 'Ansi':
        sequence = self.codes.color(font=font)
        return self._push(sequence, self.codes.clear_font())

    # Cursor and screen control

    def move_cursor(self, lines: int, columns: int = 0) -> 'Ansi':
        """Move the cursor relative to its position; negative values move up/left."""
        return self._push(self.codes.move_cursor(lines, columns))

    def fixed(self, row: int, column: int) -> 'Ansi':
        """
        Write the next text at an absolute position, then return the cursor.

        The restore is queued like any other suffix, so styling applied
        before fixed() is cleared after the cursor returns.
        """
        sequence = self.codes.save_cursor() + self.codes.position_cursor(row, column)
        return self._push(sequence, self.codes.restore_cursor())

    def overwrite_this_line(self) -> 'Ansi':
        return self._push(self.codes.clear_line() + self.codes.move_to_column(1))

    def overwrite_last_line(self) -> 'Ansi':
        return self._push(
            self.codes.clear_line() + self.codes.up_line(1) + self.codes.clear_line()
        )

    def clear_screen(self) -> 'Ansi':
        return self._push(self.codes.clear_display() + self.codes.position_cursor(1, 1))

    def hide_cursor(self) -> 'Ansi':
        return self._push(self.codes.hide_cursor())

    def show_cursor(self) -> 'Ansi':
        return self._push(self.codes.show_cursor())

    def delay(self, seconds: float = 1.0) -> 'Ansi':
        time.sleep(seconds)
        return self

    # Terminating writes

    def _write(self, stream: TextIO, newline: bool, text: str, args: tuple) -> 'Ansi':
        try:
            if args:
                try:
                    text = text % args
                except (TypeError, ValueError, KeyError) as e:
                    raise AnsiFormatError(f"Could not format {text!r} with {args!r}: {e}") from e
            output = "".join(self._prefix) + text + "".join(self._suffix)
            if newline:
                output += "\n"
            stream.write(output)
            stream.flush()
        finally:
            self._prefix.clear()
            self._suffix.clear()
        return self

    def out(self, text: str = "", *args) -> 'Ansi':
        return self._write(self.stdout, False, text, args)

    def outln(self, text: str = "", *args) -> 'Ansi':
        return self._write(self.stdout, True, text, args)

    def err(self, text: str = "", *args) -> 'Ansi':
        return self._write(self.stderr, False, text, args)

    def errln(self, text: str = "", *args) -> 'Ansi':
        return self._write(self.stderr, True, text, args)


def ansi() -> Ansi:
    """Return an Ansi using the process's configured codes and color depth."""
    terminal = get_terminal_info()
    return Ansi(codes=terminal.codes(DEFAULT_CODES), true_color=terminal.true_color())


def real_ansi() -> Ansi:
    return Ansi(codes=Codes.REAL)


def raw_ansi() -> Ansi:
    return Ansi(codes=Codes.RAW)


def no_op_ansi() -> Ansi:
    """Return an Ansi that writes text unchanged, without escape codes."""
    return Ansi(codes=Codes.NO_OP)
