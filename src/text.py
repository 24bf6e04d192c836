'''
Text measuring and drawing.

Works with any font object providing `layout(text, px)` and `rasterize(char, px)`,
see `offscreen_canvas.font.Font`.
'''
import numpy as np

from .color import Color
from .compositor import blend_image
from .rect import Rect


def measure_text(text: str, px: float, font) -> Rect:
    '''
    Measure the box a string occupies when drawn with `draw_text` at (0, 0).

    The box starts at the line origin and reaches the right-most and bottom-most inked
    pixel of the laid-out glyphs. An empty or blank string measures as an empty rect.

    Args:
        text (str): The text to measure.
        px (float): Font size in pixels.
        font: The font used for layout.

    Returns:
        Rect: A rectangle with its top-left corner at (0, 0).
    '''
    right = bottom = 0
    for glyph in font.layout(text, px):
        if glyph.width == 0 or glyph.height == 0:
            continue
        right = max(right, glyph.x + glyph.width)
        bottom = max(bottom, glyph.y + glyph.height)
    return Rect(0, 0, right, bottom)


def draw_text(buffer: np.ndarray, font, text: str, color: Color, px: float, x: int, y: int) -> None:
    '''
    Draw a string with the line origin at (`x`, `y`).

    Every glyph's coverage bitmap scales the alpha of `color` and is blended onto the
    buffer. Glyphs may start at negative coordinates; whatever lies off the buffer is clipped.
    '''
    for glyph in font.layout(text, px):
        if glyph.width == 0 or glyph.height == 0:
            continue
        _, coverage = font.rasterize(glyph.char, px)
        blend_image(buffer, x + glyph.x, y + glyph.y, np.asarray(color, dtype=np.uint8), coverage)


def draw_text_centered(buffer: np.ndarray, font, text: str, color: Color, px: float, center_x: int, center_y: int) -> None:
    rect = measure_text(text, px, font)
    draw_text(buffer, font, text, color, px, center_x - rect.width() // 2, center_y - rect.height() // 2)
