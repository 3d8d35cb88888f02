"""
Pixel - packed 24-bit RGB colour usable directly as an LED strip value
"""


class Pixel(int):
    """
    RGB colour packed into an int (0xRRGGBB).

    Because Pixel IS an int it can be handed straight to rpi_ws281x without
    conversion, while still exposing r/g/b for rendering code.

    Usage:
        green = Pixel(0, 255, 0)
        same = Pixel(0x00FF00)
        dim_green = green.scaled(0.2)
    """

    def __new__(cls, r: int, g: int = None, b: int = None) -> 'Pixel':
        if g is None and b is None:
            return int.__new__(cls, r & 0xFFFFFF)
        if g is None or b is None:
            raise ValueError("Must provide either just int value or all three RGB values")
        return int.__new__(cls, ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF))

    @property
    def r(self) -> int:
        return (self >> 16) & 0xFF

    @property
    def g(self) -> int:
        return (self >> 8) & 0xFF

    @property
    def b(self) -> int:
        return self & 0xFF

    def scaled(self, factor: float) -> 'Pixel':
        """
        Same hue at a different brightness.

        Args:
            factor: Brightness multiplier, clamped to 0.0-1.0
        """
        factor = min(max(factor, 0.0), 1.0)
        return Pixel(int(self.r * factor), int(self.g * factor), int(self.b * factor))

    def __repr__(self) -> str:
        return f"Pixel(r={self.r}, g={self.g}, b={self.b})"

    def __str__(self) -> str:
        return f"Pixel({self.r}, {self.g}, {self.b})"
