# __init__.py

from .logger import Logger
from .errors import AnsiStateError, AnsiFormatError
from .display import (
    Ansi,
    ansi,
    real_ansi,
    raw_ansi,
    no_op_ansi,
    Codes,
    EncodingMode,
    TerminalInfo,
    get_terminal_info,
    Color,
    Font,
    Style,
    NamedColor,
    IndexedColor,
    RgbColor,
    ColorVariant,
    ProgressBar,
    ProgressBarBuilder,
    ProgressState,
    ProgressText,
)
from .utilities import AnsiUtils

__all__ = [
    "Ansi",
    "ansi",
    "real_ansi",
    "raw_ansi",
    "no_op_ansi",
    "AnsiUtils",
    "AnsiStateError",
    "AnsiFormatError",
    "Codes",
    "EncodingMode",
    "TerminalInfo",
    "get_terminal_info",
    "Color",
    "Font",
    "Style",
    "NamedColor",
    "IndexedColor",
    "RgbColor",
    "ColorVariant",
    "ProgressBar",
    "ProgressBarBuilder",
    "ProgressState",
    "ProgressText",
    "Logger",
]
