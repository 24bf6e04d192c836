import numpy as np
import pytest

from offscreen_canvas import OffscreenCanvas
from offscreen_canvas.font import GlyphMetrics, GlyphPosition


class BlockFont:
    '''
    Glyph source with fixed-size solid blocks.

    Every character advances by `px // 2`; a space has no ink, any other character is a
    block of `px // 2 - 1` by `px` pixels sitting one pixel below the line top.
    '''
    def layout(self, text, px):
        advance = int(px) // 2
        glyphs = []
        for i, char in enumerate(text):
            if char == ' ':
                glyphs.append(GlyphPosition(char, i * advance, 1, 0, 0))
            else:
                glyphs.append(GlyphPosition(char, i * advance, 1, advance - 1, int(px)))
        return glyphs


    def rasterize(self, char, px):
        advance = int(px) // 2
        if char == ' ':
            return GlyphMetrics(0, 0, 0, 0, advance), np.zeros((0, 0), dtype=np.uint8)
        return GlyphMetrics(advance - 1, int(px), 0, 0, advance), np.full((int(px), advance - 1), 255, dtype=np.uint8)


@pytest.fixture
def block_font():
    return BlockFont()


@pytest.fixture
def canvas(block_font):
    return OffscreenCanvas(40, 30, block_font)


@pytest.fixture
def buffer():
    return np.zeros((20, 20, 4), dtype=np.uint8)


def painted(buffer: np.ndarray) -> set[tuple[int, int]]:
    '''(x, y) of every pixel with non-zero alpha.'''
    ys, xs = np.nonzero(buffer[:, :, 3])
    return set(zip(xs.tolist(), ys.tolist()))
