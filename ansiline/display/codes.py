# display/codes.py

from enum import Enum
from typing import Iterable, List

from .style.definitions import (
    Font,
    Style,
    ColorVariant,
    DEFAULT_COLOR,
    to_color_variant,
)

ESC_REAL = "\x1b"
BELL_REAL = "\x07"
ESC_RAW = "\\e"
BELL_RAW = "\\a"

CSI_CHAR = "["
TITLE_ESCAPE = "]0;"
SEPARATOR = ";"

# Final bytes of the control sequences used below
CUF = "C"
CUB = "D"
CNL = "E"
CPL = "F"
CHA = "G"
CUP = "H"
ED = "J"
EL = "K"
SU = "S"
SD = "T"
SGR = "m"
SCP = "s"
RCP = "u"
DECTCEM_HIDE = "?25l"
DECTCEM_SHOW = "?25h"


class EncodingMode(Enum):
    REAL = "real"
    RAW = "raw"
    NO_OP = "no_op"


def _check_positive(value: int, message: str) -> None:
    if value <= 0:
        raise ValueError(message % value)


class Codes:
    """
    Translates style and cursor requests into ANSI escape sequences.

    Instances hold no mutable state and can be shared freely. Use the
    REAL, RAW and NO_OP class attributes rather than constructing new
    instances; RAW renders ESC and BEL as the literals \\e and \\a so the
    output can be embedded in a shell `echo -e` call.
    """

    def __init__(self, mode: EncodingMode, esc: str, bell: str):
        self.mode = mode
        self.esc = esc
        self.bell = bell
        self.csi = esc + CSI_CHAR

    def __repr__(self) -> str:
        return f"Codes.{self.mode.name}"

    @classmethod
    def for_mode(cls, mode: EncodingMode) -> 'Codes':
        """Return the shared Codes instance for an encoding mode."""
        return {
            EncodingMode.REAL: cls.REAL,
            EncodingMode.RAW: cls.RAW,
            EncodingMode.NO_OP: cls.NO_OP,
        }[mode]

    def title(self, text: str) -> str:
        return self.esc + TITLE_ESCAPE + text + self.bell

    def move_cursor(self, lines: int, columns: int) -> str:
        """
        Move the cursor relative to its current position.

        Args:
            lines: Lines to move down (positive) or up (negative); line
                movement also returns the cursor to column 1
            columns: Columns to move right (positive) or left (negative)

        Returns:
            Zero, one or two control sequences concatenated
        """
        buffer = []
        if lines > 0:
            buffer.append(f"{self.csi}{lines}{CNL}")
        elif lines < 0:
            buffer.append(f"{self.csi}{-lines}{CPL}")
        if columns > 0:
            buffer.append(f"{self.csi}{columns}{CUF}")
        elif columns < 0:
            buffer.append(f"{self.csi}{-columns}{CUB}")
        return "".join(buffer)

    def down_line(self, n: int) -> str:
        _check_positive(n, "Must specify a positive number of lines, was %s")
        return f"{self.csi}{n}{CNL}"

    def up_line(self, n: int) -> str:
        _check_positive(n, "Must specify a positive number of lines, was %s")
        return f"{self.csi}{n}{CPL}"

    def move_to_column(self, column: int) -> str:
        _check_positive(column, "Must specify a positive column, was %s")
        return f"{self.csi}{column}{CHA}"

    def position_cursor(self, row: int, column: int) -> str:
        _check_positive(row, "Must specify a positive row, was %s")
        _check_positive(column, "Must specify a positive column, was %s")
        return f"{self.csi}{row}{SEPARATOR}{column}{CUP}"

    def save_cursor(self) -> str:
        return self.csi + SCP

    def restore_cursor(self) -> str:
        return self.csi + RCP

    def hide_cursor(self) -> str:
        return self.csi + DECTCEM_HIDE

    def show_cursor(self) -> str:
        return self.csi + DECTCEM_SHOW

    def scroll_up(self, n: int) -> str:
        _check_positive(n, "Must specify a positive number of lines, was %s")
        return f"{self.csi}{n}{SU}"

    def scroll_down(self, n: int) -> str:
        _check_positive(n, "Must specify a positive number of lines, was %s")
        return f"{self.csi}{n}{SD}"

    def clear_display(self) -> str:
        return f"{self.csi}2{ED}"

    def clear_display_forward(self) -> str:
        return f"{self.csi}0{ED}"

    def clear_display_backward(self) -> str:
        return f"{self.csi}1{ED}"

    def clear_line(self) -> str:
        return f"{self.csi}2{EL}"

    def clear_line_forward(self) -> str:
        return f"{self.csi}0{EL}"

    def clear_line_backward(self) -> str:
        return f"{self.csi}1{EL}"

    def color(self, foreground: ColorVariant = DEFAULT_COLOR,
              background: ColorVariant = DEFAULT_COLOR,
              font: Font = Font.DEFAULT,
              styles: Iterable[Style] = ()) -> str:
        """
        Build a single SGR sequence.

        Parameters are ordered styles, font, foreground, background; any
        default value is omitted. A fully default request renders as the
        empty string rather than a bare reset.
        """
        foreground = to_color_variant(foreground)
        background = to_color_variant(background)

        parts: List[int] = [s.code for s in styles]
        if font is not Font.DEFAULT:
            parts.append(font.code)
        if not foreground.is_default:
            parts.extend(foreground.foreground_params())
        if not background.is_default:
            parts.extend(background.background_params())

        if not parts:
            return ""
        return self.csi + SEPARATOR.join(str(p) for p in parts) + SGR

    def clear_font(self) -> str:
        return f"{self.csi}{Font.DEFAULT.code}{SGR}"

    def clear(self) -> str:
        return self.csi + SGR


class NoOpCodes(Codes):
    """Codes that render every request as the empty string, without validation."""

    def __init__(self):
        super().__init__(EncodingMode.NO_OP, "", "")

    def title(self, text: str) -> str:
        return ""

    def move_cursor(self, lines: int, columns: int) -> str:
        return ""

    def down_line(self, n: int) -> str:
        return ""

    def up_line(self, n: int) -> str:
        return ""

    def move_to_column(self, column: int) -> str:
        return ""

    def position_cursor(self, row: int, column: int) -> str:
        return ""

    def save_cursor(self) -> str:
        return ""

    def restore_cursor(self) -> str:
        return ""

    def hide_cursor(self) -> str:
        return ""

    def show_cursor(self) -> str:
        return ""

    def scroll_up(self, n: int) -> str:
        return ""

    def scroll_down(self, n: int) -> str:
        return ""

    def clear_display(self) -> str:
        return ""

    def clear_display_forward(self) -> str:
        return ""

    def clear_display_backward(self) -> str:
        return ""

    def clear_line(self) -> str:
        return ""

    def clear_line_forward(self) -> str:
        return ""

    def clear_line_backward(self) -> str:
        return ""

    def color(self, foreground: ColorVariant = DEFAULT_COLOR,
              background: ColorVariant = DEFAULT_COLOR,
              font: Font = Font.DEFAULT,
              styles: Iterable[Style] = ()) -> str:
        return ""

    def clear_font(self) -> str:
        return ""

    def clear(self) -> str:
        return ""


Codes.REAL = Codes(EncodingMode.REAL, ESC_REAL, BELL_REAL)
Codes.RAW = Codes(EncodingMode.RAW, ESC_RAW, BELL_RAW)
Codes.NO_OP = NoOpCodes()
