# display/animations/__init__.py

from .progress_bar import (
    ProgressBar,
    ProgressBarBuilder,
    ProgressBarConfig,
    ProgressState,
    ProgressText,
)

__all__ = [
    'ProgressBar',
    'ProgressBarBuilder',
    'ProgressBarConfig',
    'ProgressState',
    'ProgressText',
]
