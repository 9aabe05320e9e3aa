# display/__init__.py

from .codes import Codes, EncodingMode
from .terminal import TerminalInfo, get_terminal_info
from .ansi import Ansi, ansi, real_ansi, raw_ansi, no_op_ansi
from .style import (
    Color,
    Font,
    Style,
    NamedColor,
    IndexedColor,
    RgbColor,
    ColorVariant,
)
from .animations import ProgressBar, ProgressBarBuilder, ProgressState, ProgressText

__all__ = [
    'Codes',
    'EncodingMode',
    'TerminalInfo',
    'get_terminal_info',
    'Ansi',
    'ansi',
    'real_ansi',
    'raw_ansi',
    'no_op_ansi',
    'Color',
    'Font',
    'Style',
    'NamedColor',
    'IndexedColor',
    'RgbColor',
    'ColorVariant',
    'ProgressBar',
    'ProgressBarBuilder',
    'ProgressState',
    'ProgressText',
]
