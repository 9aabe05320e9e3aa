# display/animations/progress_bar.py

import math
from enum import Enum
from dataclasses import dataclass
from typing import Callable, Optional

from ...errors import AnsiStateError
from ..terminal import DEFAULT_COLUMNS

# A narrower bar can't show meaningful gradation (25% per cell)
MIN_BAR_WIDTH = 4


class ProgressText(Enum):
    """How the numeric readout after the bar is rendered."""
    PERCENT = "percent"
    FRACTION = "fraction"

    def format(self, step: int, total: int) -> str:
        if self is ProgressText.FRACTION:
            return f"{step}/{total}"
        if total == 100:
            return str(step)
        # Half-up rounding, unlike round()'s banker's rounding
        return str(math.floor(100 * step / total + 0.5))


class ProgressState(Enum):
    ACTIVE = "active"
    FINISHED = "finished"
    REMOVED = "removed"


@dataclass(frozen=True)
class ProgressBarConfig:
    prefix: str = "["
    suffix: str = "]"
    fill_char: str = "="
    units: str = ""
    text: ProgressText = ProgressText.FRACTION
    total_steps: int = 100
    initial_step: int = 0

    def __post_init__(self):
        if len(self.fill_char) != 1:
            raise ValueError(f"fill_char must be a single character, was {self.fill_char!r}")
        if self.total_steps <= 0:
            raise ValueError(f"total_steps must be positive, was {self.total_steps}")
        if not 0 <= self.initial_step <= self.total_steps:
            raise ValueError(
                f"initial_step must be in [0, {self.total_steps}], was {self.initial_step}"
            )


class ProgressBar:
    """
    A text progress bar that overwrites its own line on every update.

    The bar assumes it is the only thing writing to the current line
    between updates. It is not thread-safe; have a single thread own
    the output, or synchronize calls externally.
    """

    def __init__(self, config: ProgressBarConfig,
                 ansi_factory: Callable,
                 columns: Optional[Callable[[], Optional[int]]] = None,
                 logger=None):
        """
        Args:
            config: Immutable appearance and initial step configuration
            ansi_factory: Callable returning a fresh Ansi for each render
            columns: Callable returning the terminal width, or None if unknown
            logger: Optional Logger for lifecycle messages
        """
        self.config = config
        self._ansi = ansi_factory
        self._columns = columns or (lambda: None)
        self.logger = logger
        self._step = config.initial_step
        self._steps = config.total_steps
        self._state = ProgressState.ACTIVE

    @property
    def current_step(self) -> int:
        return self._step

    @property
    def total_steps(self) -> int:
        return self._steps

    @property
    def state(self) -> ProgressState:
        return self._state

    def _check_active(self, message: str) -> None:
        if self._state is not ProgressState.ACTIVE:
            raise AnsiStateError(message)

    def _check_updatable(self) -> None:
        self._check_active(
            f"Progress bar can no longer be updated; it was already {self._state.value}."
        )

    def increment(self) -> None:
        """
        Advance the bar by one step.

        Raises:
            AnsiStateError: If the bar is already full or no longer active
        """
        self._check_updatable()
        if self._step >= self._steps:
            raise AnsiStateError(
                f"Cannot increment past the final step ({self._steps})."
            )
        self.update_progress(self._step + 1)

    def update_progress(self, step: int) -> None:
        """
        Set the number of completed steps.

        Raises:
            ValueError: If step is negative
            AnsiStateError: If step exceeds the total, or the bar is no longer active
        """
        if step < 0:
            raise ValueError(f"Step must be non-negative, was {step}")
        self._check_updatable()
        if step > self._steps:
            raise AnsiStateError(f"Step {step} exceeds total steps {self._steps}.")
        self._step = step
        self._display()

    def update_steps(self, step: int, total: int) -> None:
        """
        Replace both the completed and total step counts.

        Raises:
            ValueError: If total isn't positive or step isn't in [0, total]
            AnsiStateError: If the bar is no longer active
        """
        if total <= 0 or step < 0 or step > total:
            raise ValueError(
                f"Expected 0 <= step <= total and total > 0, was step={step}, total={total}"
            )
        self._check_updatable()
        self._step = step
        self._steps = total
        self._display()

    def remove(self) -> None:
        """Clear the bar, leaving the cursor at the start of the empty line."""
        self._check_active(
            f"Progress bar can not be removed; it was already {self._state.value}."
        )
        self._ansi().overwrite_this_line().out("")
        self._state = ProgressState.REMOVED
        if self.logger:
            self.logger.debug("Progress bar removed")

    def finish(self) -> None:
        """Fill the bar and move to the next line, leaving the bar visible."""
        self._check_active(
            f"Progress bar can not be finished; it was already {self._state.value}."
        )
        self._step = self._steps
        self._display()
        self._ansi().outln()
        self._state = ProgressState.FINISHED
        if self.logger:
            self.logger.debug(f"Progress bar finished at {self._steps} steps")

    def render(self, columns: int) -> str:
        """Return the line for the current step at the given terminal width."""
        config = self.config
        suffix_and_count = (
            f"{config.suffix} {config.text.format(self._step, self._steps)}{config.units}"
        )
        bar_width = columns - len(config.prefix) - len(suffix_and_count)
        if bar_width < MIN_BAR_WIDTH:
            return f"{self._step}{config.units}"
        # Round down so the bar doesn't look done before it is
        filled = bar_width * self._step // self._steps
        return (
            config.prefix
            + config.fill_char * filled
            + " " * (bar_width - filled)
            + suffix_and_count
        )

    def _display(self) -> None:
        columns = self._columns()
        line = self.render(columns if columns is not None else DEFAULT_COLUMNS)
        self._ansi().overwrite_this_line().out(line)


class ProgressBarBuilder:
    """
    Fluent configuration for a ProgressBar.

    Example:
        bar = (ProgressBarBuilder()
               .prefix("<").suffix(">").fill_char("#")
               .units(" files").total_steps(40)
               .build(ansi, terminal.system_columns))
    """

    def __init__(self, ansi_factory: Optional[Callable] = None,
                 columns: Optional[Callable[[], Optional[int]]] = None,
                 logger=None):
        self._options = {}
        self._ansi_factory = ansi_factory
        self._columns = columns
        self.logger = logger

    def _set(self, **changes) -> 'ProgressBarBuilder':
        self._options.update(changes)
        return self

    def prefix(self, prefix: str) -> 'ProgressBarBuilder':
        return self._set(prefix=prefix)

    def suffix(self, suffix: str) -> 'ProgressBarBuilder':
        return self._set(suffix=suffix)

    def fill_char(self, fill_char: str) -> 'ProgressBarBuilder':
        return self._set(fill_char=fill_char)

    def units(self, units: str) -> 'ProgressBarBuilder':
        return self._set(units=units)

    def text(self, text: ProgressText) -> 'ProgressBarBuilder':
        return self._set(text=text)

    def total_steps(self, total_steps: int) -> 'ProgressBarBuilder':
        return self._set(total_steps=total_steps)

    def initial_step(self, initial_step: int) -> 'ProgressBarBuilder':
        return self._set(initial_step=initial_step)

    def build(self, ansi_factory: Optional[Callable] = None,
              columns: Optional[Callable[[], Optional[int]]] = None,
              logger=None) -> ProgressBar:
        """
        Create the bar. Arguments override those given to the constructor.

        Raises:
            ValueError: If no ansi_factory was supplied, or the options are invalid
        """
        ansi_factory = ansi_factory or self._ansi_factory
        if ansi_factory is None:
            raise ValueError("ansi_factory must be provided")
        return ProgressBar(
            ProgressBarConfig(**self._options),
            ansi_factory,
            columns or self._columns,
            logger or self.logger,
        )
