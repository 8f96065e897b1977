"""RGB and RGBA colours with saturating addition and scaled multiplication."""

from __future__ import annotations

from dataclasses import dataclass, replace

COLOR_MAX = 255


def mul_channel(a: int, b: int) -> int:
    """Multiply two channel values, scaled down by 256."""
    return (a * b) >> 8


def add_channel(a: int, b: int) -> int:
    """Add two channel values, saturating at 255."""
    return min(a + b, COLOR_MAX)


def _check(**channels: int) -> None:
    for name, value in channels.items():
        if not 0 <= value <= COLOR_MAX:
            raise ValueError(f"{name} channel out of range: {value}")


def _bump(value: int) -> int:
    return value + 1 if value != COLOR_MAX else value


@dataclass(frozen=True)
class ColorRGB:
    """Three-channel colour; defaults to white."""

    r: int = COLOR_MAX
    g: int = COLOR_MAX
    b: int = COLOR_MAX

    def __post_init__(self) -> None:
        _check(r=self.r, g=self.g, b=self.b)

    @classmethod
    def from_uint(cls, value: int) -> ColorRGB:
        """Build from a packed 0xRRGGBB integer."""
        return cls((value & 0xFFFFFF) >> 16, (value & 0xFFFF) >> 8, value & 0xFF)

    def to_uint(self) -> int:
        """Pack as 0xRRGGBB."""
        return (self.r << 16) + (self.g << 8) + self.b

    def to_rgba(self) -> Color:
        """Opaque RGBA colour with the same channels."""
        return Color(self.r, self.g, self.b)

    def brighten(self) -> ColorRGB:
        """Raise each channel below the maximum by one."""
        return ColorRGB(_bump(self.r), _bump(self.g), _bump(self.b))

    def __add__(self, other: ColorRGB | Color) -> ColorRGB:
        if not isinstance(other, (ColorRGB, Color)):
            return NotImplemented
        return ColorRGB(
            add_channel(self.r, other.r),
            add_channel(self.g, other.g),
            add_channel(self.b, other.b),
        )

    def __mul__(self, other: ColorRGB | Color) -> ColorRGB:
        if not isinstance(other, (ColorRGB, Color)):
            return NotImplemented
        return ColorRGB(
            mul_channel(self.r, other.r),
            mul_channel(self.g, other.g),
            mul_channel(self.b, other.b),
        )


@dataclass(frozen=True)
class Color:
    """Colour with alpha; defaults to opaque white."""

    r: int = COLOR_MAX
    g: int = COLOR_MAX
    b: int = COLOR_MAX
    a: int = COLOR_MAX

    def __post_init__(self) -> None:
        _check(r=self.r, g=self.g, b=self.b, a=self.a)

    @classmethod
    def from_uint(cls, value: int) -> Color:
        """Build an opaque colour from a packed 0xRRGGBB integer."""
        return cls((value & 0xFFFFFF) >> 16, (value & 0xFFFF) >> 8, value & 0xFF)

    def to_uint(self) -> int:
        """Pack the colour channels as 0xRRGGBB."""
        return (self.r << 16) + (self.g << 8) + self.b

    def to_rgb(self) -> ColorRGB:
        """Drop the alpha channel."""
        return ColorRGB(self.r, self.g, self.b)

    def with_alpha(self, alpha: int = COLOR_MAX) -> Color:
        """Same colour with another alpha."""
        return replace(self, a=alpha)

    def brighten(self) -> Color:
        """Raise each channel, alpha included, below the maximum by one."""
        return Color(_bump(self.r), _bump(self.g), _bump(self.b), _bump(self.a))

    def __add__(self, other: ColorRGB | Color) -> Color:
        if not isinstance(other, (ColorRGB, Color)):
            return NotImplemented
        alpha = add_channel(self.a, other.a) if isinstance(other, Color) else self.a
        return Color(
            add_channel(self.r, other.r),
            add_channel(self.g, other.g),
            add_channel(self.b, other.b),
            alpha,
        )

    def __mul__(self, other: ColorRGB | Color) -> Color:
        if not isinstance(other, (ColorRGB, Color)):
            return NotImplemented
        alpha = mul_channel(self.a, other.a) if isinstance(other, Color) else self.a
        return Color(
            mul_channel(self.r, other.r),
            mul_channel(self.g, other.g),
            mul_channel(self.b, other.b),
            alpha,
        )