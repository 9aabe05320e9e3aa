# errors.py


class AnsiStateError(RuntimeError):
    """Raised when a call violates a sequencing rule, e.g. chaining onto title()."""


class AnsiFormatError(ValueError):
    """Raised when positional substitution of a write's arguments fails."""
