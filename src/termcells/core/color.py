"""Color attributes understood by the terminal renderer.

The grid itself never looks inside a color; cells carry whatever attribute
objects the caller hands them. Only the renderers in ``termcells.render``
turn a ``Color`` into SGR parameters.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

_NAMES = (
    "black", "red", "green", "yellow", "blue", "magenta", "cyan", "white",
)
_RGB_RE = re.compile(r'(\d+)[,\s]+(\d+)[,\s]+(\d+)$')


class ColorMode(Enum):
    """Color mode for ANSI sequences."""
    DEFAULT = "default"     # Terminal's own color (SGR 39 / 49)
    STANDARD_16 = "16"      # Standard 16-color (SGR 30-37, 40-47, 90-97, 100-107)
    EXTENDED_256 = "256"    # Extended 256-color (SGR 38;5;n, 48;5;n)
    TRUE_COLOR = "rgb"      # 24-bit true color (SGR 38;2;r;g;b, 48;2;r;g;b)


@dataclass(frozen=True)
class Color:
    """
    A color value for cell foreground or background.

    Supports the terminal default, 16-color, 256-color and true color.
    """
    mode: ColorMode
    value: int | tuple[int, int, int] = 0

    DEFAULT: ClassVar["Color"]
    BLACK: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    WHITE: ClassVar["Color"]

    @classmethod
    def from_index(cls, index: int) -> "Color":
        """Create a Color from a 16-color palette index (0-15)."""
        if not 0 <= index <= 15:
            raise ValueError(f"16-color index must be 0-15, got {index}")
        return cls(ColorMode.STANDARD_16, index)

    @classmethod
    def from_256(cls, index: int) -> "Color":
        """Create a Color from a 256-color index."""
        if not 0 <= index <= 255:
            raise ValueError(f"256-color index must be 0-255, got {index}")
        return cls(ColorMode.EXTENDED_256, index)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(ColorMode.TRUE_COLOR, (r, g, b))

    @classmethod
    def parse(cls, text: str) -> "Color":
        """Parse a color string.

        Accepts:
            - "default"
            - Named colors: "red", "bright_blue", "bright-cyan", ...
            - 256-color index: "208"
            - Hex colors: "#FF8800", "#F80"
            - RGB triples: "255,136,0" or "255 136 0"
        """
        color = text.strip().lower()

        if color == "default":
            return cls.DEFAULT

        bright = color.startswith(("bright_", "bright-"))
        name = color[7:] if bright else color
        if name in _NAMES:
            return cls.from_index(_NAMES.index(name) + (8 if bright else 0))

        if color.isdigit():
            return cls.from_256(int(color))

        if color.startswith("#"):
            digits = color[1:]
            if len(digits) == 3:
                # Short form: F80 -> FF8800
                digits = digits[0]*2 + digits[1]*2 + digits[2]*2
            if len(digits) == 6:
                try:
                    return cls.from_rgb(
                        int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
                    )
                except ValueError:
                    pass

        match = _RGB_RE.match(color)
        if match:
            return cls.from_rgb(*(int(g) for g in match.groups()))

        raise ValueError(f"Cannot parse color: {text!r}")

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for use as a foreground color."""
        if self.mode == ColorMode.DEFAULT:
            return "39"
        elif self.mode == ColorMode.STANDARD_16:
            assert isinstance(self.value, int)
            if self.value < 8:
                return str(30 + self.value)
            else:
                return str(90 + self.value - 8)
        elif self.mode == ColorMode.EXTENDED_256:
            return f"38;5;{self.value}"
        else:  # TRUE_COLOR
            assert isinstance(self.value, tuple)
            r, g, b = self.value
            return f"38;2;{r};{g};{b}"

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for use as a background color."""
        if self.mode == ColorMode.DEFAULT:
            return "49"
        elif self.mode == ColorMode.STANDARD_16:
            assert isinstance(self.value, int)
            if self.value < 8:
                return str(40 + self.value)
            else:
                return str(100 + self.value - 8)
        elif self.mode == ColorMode.EXTENDED_256:
            return f"48;5;{self.value}"
        else:  # TRUE_COLOR
            assert isinstance(self.value, tuple)
            r, g, b = self.value
            return f"48;2;{r};{g};{b}"

    def __str__(self) -> str:
        if self.mode == ColorMode.DEFAULT:
            return "default"
        if self.mode == ColorMode.STANDARD_16:
            assert isinstance(self.value, int)
            name = _NAMES[self.value % 8]
            return f"bright_{name}" if self.value >= 8 else name
        if self.mode == ColorMode.EXTENDED_256:
            return str(self.value)
        assert isinstance(self.value, tuple)
        return "#{:02x}{:02x}{:02x}".format(*self.value)


Color.DEFAULT = Color(ColorMode.DEFAULT)
Color.BLACK = Color(ColorMode.STANDARD_16, 0)
Color.RED = Color(ColorMode.STANDARD_16, 1)
Color.GREEN = Color(ColorMode.STANDARD_16, 2)
Color.YELLOW = Color(ColorMode.STANDARD_16, 3)
Color.BLUE = Color(ColorMode.STANDARD_16, 4)
Color.MAGENTA = Color(ColorMode.STANDARD_16, 5)
Color.CYAN = Color(ColorMode.STANDARD_16, 6)
Color.WHITE = Color(ColorMode.STANDARD_16, 7)
