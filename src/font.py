'''
Glyph layout and glyph coverage rasterization on top of Skia.
'''
import logging
from os import PathLike
from typing import NamedTuple

import numpy as np
import skia

from .constants import GLYPH_EDGING, GLYPH_HINTING
from .convert import convert_style, int_ceil, int_floor

logger = logging.getLogger(__name__)


class FontLoadError(ValueError):
    '''Raised when font data cannot be turned into a typeface.'''


class GlyphPosition(NamedTuple):
    '''
    Placement of one character's coverage bitmap within a laid-out line.

    `x` and `y` are the bitmap's top-left corner relative to the line origin, with Y
    growing downward from the top of the line. `width` and `height` are the bitmap size.
    '''
    char: str
    x: int
    y: int
    width: int
    height: int


class GlyphMetrics(NamedTuple):
    width: int
    height: int
    xmin: int
    ymin: int
    advance_width: float


class Font:
    '''
    Immutable font handle.

    Wraps a Skia typeface; all sizes are given per call in pixels.
    '''
    def __init__(self, typeface: skia.Typeface):
        if typeface is None or typeface.countGlyphs() == 0:
            raise FontLoadError('Typeface has no glyphs')
        self._typeface = typeface


    @classmethod
    def from_bytes(cls, data: bytes, index: int = 0) -> 'Font':
        '''
        Load a font from TrueType/OpenType bytes.

        Args:
            data (bytes): The font file contents.
            index (int, optional): Face index inside a font collection. Defaults to 0.

        Raises:
            FontLoadError: If Skia cannot create a typeface from the data.
        '''
        typeface = skia.Typeface.MakeFromData(skia.Data.MakeWithCopy(bytes(data)), index)
        if typeface is None:
            raise FontLoadError(f'Cannot load font face {index} from {len(data)} bytes')
        font = cls(typeface)
        logger.debug('loaded font %s (face %d) from %d bytes', font.family_name, index, len(data))
        return font


    @classmethod
    def from_file(cls, path: str | PathLike, index: int = 0) -> 'Font':
        with open(path, 'rb') as f:
            return cls.from_bytes(f.read(), index)


    @classmethod
    def default(cls) -> 'Font':
        '''The platform default typeface.'''
        return cls(skia.Typeface(''))


    @property
    def family_name(self) -> str:
        return self._typeface.getFamilyName()


    def _skia_font(self, px: float) -> skia.Font:
        font = skia.Font(self._typeface, px)
        font.setEdging(convert_style('edging', GLYPH_EDGING))
        font.setHinting(convert_style('hinting', GLYPH_HINTING))
        font.setSubpixel(False)
        return font


    def _baseline(self, font: skia.Font) -> int:
        # Skia reports ascent as a negative distance above the baseline
        return int_ceil(-font.getMetrics().fAscent)


    @staticmethod
    def _box(bounds: skia.Rect) -> tuple[int, int, int, int]:
        if bounds.isEmpty():
            return 0, 0, 0, 0
        left, top = int_floor(bounds.fLeft), int_floor(bounds.fTop)
        return left, top, int_ceil(bounds.fRight) - left, int_ceil(bounds.fBottom) - top


    def layout(self, text: str, px: float) -> list[GlyphPosition]:
        '''
        Lay a string out on a single line, left to right.

        Args:
            text (str): The text to lay out.
            px (float): Font size in pixels.

        Returns:
            list[GlyphPosition]: One entry per character of `text`.
        '''
        if not text:
            return []
        font = self._skia_font(px)
        baseline = self._baseline(font)
        glyphs = font.textToGlyphs(text)
        positions = font.getXPos(glyphs)
        bounds = font.getBounds(glyphs)

        layout = []
        for char, pen_x, bb in zip(text, positions, bounds):
            left, top, width, height = self._box(bb)
            if width == 0 or height == 0:
                layout.append(GlyphPosition(char, int(round(pen_x)), baseline, 0, 0))
            else:
                layout.append(GlyphPosition(char, int(round(pen_x)) + left, baseline + top, width, height))
        return layout


    def rasterize(self, char: str, px: float) -> tuple[GlyphMetrics, np.ndarray]:
        '''
        Render a single character into an 8-bit coverage bitmap.

        Args:
            char (str): The character to render.
            px (float): Font size in pixels.

        Returns:
            tuple[GlyphMetrics, np.ndarray]: The glyph metrics and a (height, width) uint8
                array where 255 means the pixel is fully covered by ink.
        '''
        font = self._skia_font(px)
        glyphs = font.textToGlyphs(char)
        left, top, width, height = self._box(font.getBounds(glyphs)[0])
        metrics = GlyphMetrics(width, height, left, top, font.getWidths(glyphs)[0])
        if width == 0 or height == 0:
            return metrics, np.zeros((height, width), dtype=np.uint8)

        surface = skia.Surface(width, height)
        with surface as canvas:
            canvas.clear(skia.Color4f.kTransparent)
            canvas.drawString(char, -left, -top, font, skia.Paint(Color=skia.ColorWHITE, AntiAlias=True))
        image = surface.makeImageSnapshot()
        pixels = np.frombuffer(image.tobytes(), dtype=np.uint8).reshape(height, width, 4)
        # alpha sits in the last channel for both RGBA and BGRA layouts
        return metrics, pixels[:, :, 3].copy()
