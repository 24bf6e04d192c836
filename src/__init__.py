'''
offscreen_canvas

Immediate-mode offscreen RGBA canvas for bitmaps, vector primitives and text.
'''

from .canvas import OffscreenCanvas
from .color import Color, WHITE, BLACK, RED, GREEN, BLUE, TRANSPARENT
from .font import Font, FontLoadError
from .image import (FilterType, Interpolation, ResizeOption, RotateOption, ImageDecodeError,
                    load_png, load_image, open_png, open_image)
from .rect import Rect
from .text import measure_text

__all__ = ['OffscreenCanvas', 'Color', 'WHITE', 'BLACK', 'RED', 'GREEN', 'BLUE', 'TRANSPARENT',
           'Font', 'FontLoadError', 'FilterType', 'Interpolation', 'ResizeOption', 'RotateOption',
           'ImageDecodeError', 'load_png', 'load_image', 'open_png', 'open_image', 'Rect', 'measure_text']
