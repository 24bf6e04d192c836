import logging
from os import PathLike

import numpy as np
import PIL
from PIL import Image

from . import image as _image
from . import rasterizer
from . import text as _text
from .color import Color
from .font import Font
from .image import FilterType, ResizeOption, RotateOption
from .rect import Rect

logger = logging.getLogger(__name__)

ColorLike = Color | list[int] | tuple[int] | list[float] | tuple[float] | str


class OffscreenCanvas:
    '''
    Immediate-mode RGBA drawing surface.

    The canvas owns a fixed-size pixel buffer and a font. Every drawing call blends
    straight into the buffer; anything falling outside [0, width) x [0, height) is
    clipped silently. The canvas does no locking, calls from several threads must be
    serialized by the caller.

    Attributes:
        width (int): Buffer width in pixels.
        height (int): Buffer height in pixels.
        font (Font): Font used by the text methods.

    Example:
        >>> canvas = OffscreenCanvas(300, 300, Font.from_file('VonwaonBitmap-16px.ttf'))
        >>> canvas.clear('black')
        >>> canvas.fill_circle((150, 150), 40, RED)
        >>> canvas.draw_text_centered('Hello!', WHITE, 14., 150, 270)
        >>> canvas.save('out.png')
    '''

    def __init__(self, width: int, height: int, font: Font):
        '''
        Create a fully transparent canvas.

        Args:
            width (int): Canvas width in pixels.
            height (int): Canvas height in pixels.
            font (Font): Font used by the text methods.

        Raises:
            AssertionError: If a dimension is negative.
        '''
        assert width >= 0 and height >= 0, f'Canvas size must not be negative: {width}x{height}'
        self._canvas = np.zeros((height, width, 4), dtype=np.uint8)
        self._font = font
        logger.debug('created %dx%d canvas', width, height)


    @property
    def width(self) -> int:
        return self._canvas.shape[1]


    @property
    def height(self) -> int:
        return self._canvas.shape[0]


    @property
    def font(self) -> Font:
        return self._font


    def bounds(self) -> Rect:
        return Rect(0, 0, self.width, self.height)


    def clear(self, color: ColorLike) -> None:
        '''Blend `color` over the whole canvas.'''
        rasterizer.fill_rect(self._canvas, self.bounds(), Color.parse(color))


    def fill_rect(self, rect: Rect, color: ColorLike) -> None:
        rasterizer.fill_rect(self._canvas, rect, Color.parse(color))


    def stroke_rect(self, rect: Rect, color: ColorLike) -> None:
        rasterizer.stroke_rect(self._canvas, rect, Color.parse(color))


    def fill_circle(self, center: tuple[int, int], radius: int, color: ColorLike) -> None:
        rasterizer.fill_circle(self._canvas, center, radius, Color.parse(color))


    def stroke_circle(self, center: tuple[int, int], radius: int, color: ColorLike) -> None:
        rasterizer.stroke_circle(self._canvas, center, radius, Color.parse(color))


    def stroke_line(self, start: tuple[int, int], end: tuple[int, int], color: ColorLike) -> None:
        '''
        Draw a 1px line from `start` to `end`, both endpoints included.

        Example:
            >>> canvas.stroke_line((0, 0), (canvas.width, canvas.height), RED)
        '''
        rasterizer.stroke_line(self._canvas, start, end, Color.parse(color))


    def draw_image_at(self,
                      bitmap: np.ndarray,
                      x: int,
                      y: int,
                      size: ResizeOption | None = None,
                      rotate_option: RotateOption | None = None) -> None:
        '''
        Composite a bitmap with its top-left corner at (`x`, `y`).

        Args:
            bitmap (np.ndarray): Source bitmap, (height, width, 4) uint8 RGBA.
            x (int): Destination left edge, may be negative.
            y (int): Destination top edge, may be negative.
            size (ResizeOption, optional): Resize the bitmap before drawing.
            rotate_option (RotateOption, optional): Rotate the (resized) bitmap before drawing.
        '''
        _image.draw_image_at(self._canvas, bitmap, x, y, size, rotate_option)


    def draw_image_with_rotation_at(self, bitmap: np.ndarray, x: int, y: int, rotate_option: RotateOption) -> None:
        _image.draw_image_at(self._canvas, bitmap, x, y, None, rotate_option)


    def draw_image_with_size_at(self,
                                bitmap: np.ndarray,
                                x: int,
                                y: int,
                                nwidth: int,
                                nheight: int,
                                filter: FilterType | str = FilterType.NEAREST) -> None:
        '''
        Composite a bitmap scaled to `nwidth` x `nheight`.

        Example:
            >>> canvas.draw_image_with_size_at(flower, 0, 0, canvas.width, canvas.height, FilterType.TRIANGLE)
        '''
        _image.draw_image_at(self._canvas, bitmap, x, y, ResizeOption(nwidth, nheight, FilterType(filter)))


    def draw_image_with_src_and_dst(self,
                                    bitmap: np.ndarray,
                                    src: Rect,
                                    dst: Rect,
                                    filter: FilterType | str = FilterType.NEAREST) -> None:
        '''
        Draw the `src` region of a bitmap scaled into `dst`.

        `src` must lie within the bitmap, crossing its edge fails an assertion.

        Example:
            >>> canvas.draw_image_with_src_and_dst(mario, Rect.from_xywh(268, 277, 37, 37),
            ...                                    Rect.from_xywh(0, 0, 50, 50), FilterType.TRIANGLE)
        '''
        _image.draw_image_with_src_and_dst(self._canvas, bitmap, src, dst, filter)


    def draw_image_with_src_and_dst_and_rotation(self,
                                                 bitmap: np.ndarray,
                                                 src: Rect,
                                                 dst: Rect,
                                                 rotate_option: RotateOption) -> None:
        _image.draw_image_with_src_and_dst_and_rotation(self._canvas, bitmap, src, dst, rotate_option)


    def draw_text(self, text: str, color: ColorLike, px: float, x: int, y: int) -> None:
        '''
        Draw a string with its line origin at (`x`, `y`).

        Args:
            text (str): The string to draw.
            color: Text colour, its alpha is scaled by glyph coverage.
            px (float): Font size in pixels.
            x (int): Left edge of the line, may be negative.
            y (int): Top edge of the line, may be negative.
        '''
        _text.draw_text(self._canvas, self._font, text, Color.parse(color), px, x, y)


    def draw_text_centered(self, text: str, color: ColorLike, px: float, center_x: int, center_y: int) -> None:
        _text.draw_text_centered(self._canvas, self._font, text, Color.parse(color), px, center_x, center_y)


    def measure_text(self, text: str, px: float) -> Rect:
        return _text.measure_text(text, px, self._font)


    def _check_point(self, x: int, y: int) -> None:
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            raise IndexError(f'Pixel ({x}, {y}) is outside the {self.width}x{self.height} canvas')


    def get_pixel(self, x: int, y: int) -> Color:
        '''
        Read the pixel at (`x`, `y`).

        Raises:
            IndexError: If the point lies outside the canvas.
        '''
        self._check_point(x, y)
        return Color(*(int(c) for c in self._canvas[y, x]))


    def get_pixel_rgb565(self, x: int, y: int) -> int:
        return self.get_pixel(x, y).to_rgb565()


    def image_data(self) -> np.ndarray:
        '''Read-only view of the pixel buffer, (height, width, 4) uint8 RGBA.'''
        view = self._canvas.view()
        view.flags.writeable = False
        return view


    def image_data_mut(self) -> np.ndarray:
        '''
        The pixel buffer itself.

        Writes go straight into the canvas and bypass blending; do not draw on the
        canvas while holding on to the array.
        '''
        return self._canvas


    def to_pil(self) -> PIL.Image.Image:
        return Image.fromarray(self._canvas.copy())


    def save(self, path: str | PathLike, format: str | None = None) -> None:
        '''
        Encode the canvas into an image file with Pillow.

        Args:
            path (str | PathLike): Output path, the format follows its extension unless `format` is set.
            format (str, optional): Pillow format name, e.g. 'PNG'.
        '''
        self.to_pil().save(path, format=format)
        logger.debug('saved %dx%d canvas to %s', self.width, self.height, path)
