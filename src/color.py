from numbers import Integral
from typing import NamedTuple

from colour import Color as _CColor


class Color(NamedTuple):
    '''
    8-bit RGBA colour with straight (non-premultiplied) alpha.

    Every channel is an int in the range 0-255.
    '''
    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def parse(cls, color: 'Color | list[int] | tuple[int] | list[float] | tuple[float] | str') -> 'Color':
        '''
        Convert different colour representations into a Color.

        Accepts a Color, a colour string understood by the `colour` library (e.g. "red",
        "#FF0000"), or a list/tuple of three or four values. Integer values are read as
        0-255 bytes, float values as fractions in [0, 1]. The fourth value, if present,
        is the alpha channel.

        Args:
            color: The colour value to be processed.

        Returns:
            Color: The parsed colour.

        Raises:
            ValueError: If the colour string is unknown.
            AssertionError: If the tuple does not have three or four values or a value is out of range.
        '''
        if isinstance(color, Color):
            return color
        if isinstance(color, str):
            try:
                c = _CColor(color)
            except (ValueError, AttributeError) as err:
                raise ValueError(f'Unknown color: {color}') from err
            return cls(*(_to_byte(v) for v in c.rgb))

        assert len(color) == 3 or len(color) == 4, f'Color must have three or four parameters: {color}'
        if all(isinstance(v, Integral) for v in color):
            assert all(0 <= v <= 255 for v in color), f'Integer color values must be in range 0-255: {color}'
            return cls(*(int(v) for v in color))
        assert all(0.0 <= v <= 1.0 for v in color), f'Float color values must be in range 0.0-1.0: {color}'
        return cls(*(_to_byte(v) for v in color))


    def with_alpha(self, alpha: int) -> 'Color':
        return self._replace(a=alpha)


    def to_rgb565(self) -> int:
        '''
        Pack the colour into 16 bits as 5-6-5 RGB.

        Each channel is truncated by a right shift, alpha is dropped.
        '''
        r = (self.r >> 3) & 0x1F
        g = (self.g >> 2) & 0x3F
        b = (self.b >> 3) & 0x1F
        return (r << 11) | (g << 5) | b


def _to_byte(v: float) -> int:
    return int(round(v * 255))


WHITE = Color(255, 255, 255, 255)
BLACK = Color(0, 0, 0, 255)
RED = Color(255, 0, 0, 255)
GREEN = Color(0, 255, 0, 255)
BLUE = Color(0, 0, 255, 255)
TRANSPARENT = Color(0, 0, 0, 0)
