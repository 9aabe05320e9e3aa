# display/style/definitions.py

from enum import Enum
from dataclasses import dataclass
from typing import Tuple, Union

# Offset from a foreground color code to its background counterpart
BACKGROUND_OFFSET = 10

# Extended color selectors (SGR 38/48)
FOREGROUND_EXTENDED = 38
BACKGROUND_EXTENDED = 48
INDEXED_MODE = 5
RGB_MODE = 2

# 256-color palette landmarks
CUBE_START = 0x10
INDEX_BLACK = 0x10
INDEX_WHITE = 0xE7
GREYSCALE_START = 0xE8
GREYSCALE_STEPS = 24


class _NamedLookup:
    """Mixin for case-insensitive lookup of enum members by name."""

    @classmethod
    def from_name(cls, name: str):
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown {cls.__name__.lower()} '{name}'") from None


class Color(_NamedLookup, Enum):
    """The sixteen named terminal colors plus the terminal default."""
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    PURPLE = 35
    CYAN = 36
    GREY = 37
    DARK_GREY = 90
    LIGHT_RED = 91
    LIGHT_GREEN = 92
    LIGHT_YELLOW = 93
    LIGHT_BLUE = 94
    LIGHT_MAGENTA = 95
    LIGHT_PURPLE = 95
    LIGHT_CYAN = 96
    WHITE = 97
    DEFAULT = 39

    @property
    def color(self) -> int:
        return self.value

    @property
    def background(self) -> int:
        return self.value + BACKGROUND_OFFSET


class Font(_NamedLookup, Enum):
    DEFAULT = 10
    FONT_1 = 11
    FONT_2 = 12
    FONT_3 = 13
    FONT_4 = 14
    FONT_5 = 15
    FONT_6 = 16
    FONT_7 = 17
    FONT_8 = 18
    FONT_9 = 19
    FRAKTUR = 20

    @property
    def code(self) -> int:
        return self.value


class Style(_NamedLookup, Enum):
    BOLD = 1
    DIM = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK = 5
    BLINK_RAPID = 6
    REVERSE = 7
    CONCEAL = 8
    STRIKETHROUGH = 9
    FRAME = 51
    ENCIRCLE = 52
    OVERLINE = 53

    @property
    def code(self) -> int:
        return self.value


def _check_byte(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int in [0, 255], was {value!r}")
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be in [0, 255], was {value}")
    return value


@dataclass(frozen=True)
class NamedColor:
    """One of the named Color constants."""
    color: Color

    @property
    def is_default(self) -> bool:
        return self.color is Color.DEFAULT

    def foreground_params(self) -> Tuple[int, ...]:
        return (self.color.color,)

    def background_params(self) -> Tuple[int, ...]:
        return (self.color.background,)


@dataclass(frozen=True)
class IndexedColor:
    """An entry of the 256-color palette."""
    index: int

    def __post_init__(self):
        _check_byte("Color index", self.index)

    @property
    def is_default(self) -> bool:
        return False

    def foreground_params(self) -> Tuple[int, ...]:
        return (FOREGROUND_EXTENDED, INDEXED_MODE, self.index)

    def background_params(self) -> Tuple[int, ...]:
        return (BACKGROUND_EXTENDED, INDEXED_MODE, self.index)

    @classmethod
    def from_cube(cls, red: int, green: int, blue: int) -> 'IndexedColor':
        """Return the 6x6x6 cube entry for components each in [0, 5]."""
        for name, value in (("red", red), ("green", green), ("blue", blue)):
            if not 0 <= value <= 5:
                raise ValueError(f"Cube {name} must be in [0, 5], was {value}")
        return cls(CUBE_START + 36 * red + 6 * green + blue)

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> 'IndexedColor':
        """
        Approximate a 24-bit color with the nearest 256-color palette entry.

        Each component is bucketed into the 6-level color cube. When all
        three land in the same bucket the color is a grey, and the finer
        24-step greyscale ramp is used instead of the cube's diagonal.

        Args:
            red: Red component, 0-255
            green: Green component, 0-255
            blue: Blue component, 0-255

        Returns:
            The closest IndexedColor
        """
        for name, value in (("Red", red), ("Green", green), ("Blue", blue)):
            _check_byte(name, value)

        buckets = [max(0, (c - 55) // 40) for c in (red, green, blue)]
        if len(set(buckets)) > 1:
            return cls.from_cube(*buckets)

        average = (red + green + blue) // 3
        if average < 8:
            return cls(INDEX_BLACK)
        grey = (average - 8) // 10
        if grey >= GREYSCALE_STEPS:
            return cls(INDEX_WHITE)
        return cls(GREYSCALE_START + grey)


@dataclass(frozen=True)
class RgbColor:
    """A 24-bit true color."""
    red: int
    green: int
    blue: int

    def __post_init__(self):
        _check_byte("Red", self.red)
        _check_byte("Green", self.green)
        _check_byte("Blue", self.blue)

    @property
    def is_default(self) -> bool:
        return False

    def foreground_params(self) -> Tuple[int, ...]:
        return (FOREGROUND_EXTENDED, RGB_MODE, self.red, self.green, self.blue)

    def background_params(self) -> Tuple[int, ...]:
        return (BACKGROUND_EXTENDED, RGB_MODE, self.red, self.green, self.blue)

    def to_indexed(self) -> IndexedColor:
        return IndexedColor.from_rgb(self.red, self.green, self.blue)


ColorVariant = Union[NamedColor, IndexedColor, RgbColor]

DEFAULT_COLOR = NamedColor(Color.DEFAULT)


def to_color_variant(value) -> ColorVariant:
    """
    Coerce caller input into a ColorVariant.

    Accepts a Color, a palette index, an (r, g, b) tuple, or an existing
    variant.
    """
    if isinstance(value, (NamedColor, IndexedColor, RgbColor)):
        return value
    if isinstance(value, Color):
        return NamedColor(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return IndexedColor(value)
    if isinstance(value, tuple) and len(value) == 3:
        return RgbColor(*value)
    raise ValueError(f"Cannot interpret {value!r} as a color")
