'''
Bitmap loading, resampling and compositing.

Bitmaps are numpy arrays of shape (height, width, 4), dtype uint8, straight RGBA.
Decoding, resizing and rotating are delegated to Pillow; this module decides the
crop -> resize -> rotate -> composite order and does the rectangle bookkeeping.
'''
import logging
from dataclasses import dataclass, field
from enum import Enum
from io import BytesIO
from math import degrees
from os import PathLike

import numpy as np
import PIL
from PIL import Image

from .color import Color, TRANSPARENT
from .compositor import blend_image
from .constants import CHANNELS, DEFAULT_FILTER, DEFAULT_INTERPOLATION, DEFAULT_ROTATION_FILL
from .convert import convert_style
from .rect import Rect

logger = logging.getLogger(__name__)


class ImageDecodeError(ValueError):
    '''Raised when image data cannot be decoded.'''


class FilterType(Enum):
    '''Resampling filter used when resizing a bitmap.'''
    NEAREST = 'nearest'
    TRIANGLE = 'triangle'
    CATMULL_ROM = 'catmull_rom'
    LANCZOS3 = 'lanczos3'


class Interpolation(Enum):
    '''Interpolation used when rotating a bitmap.'''
    NEAREST = 'nearest'
    BILINEAR = 'bilinear'
    BICUBIC = 'bicubic'

    def resize_filter(self) -> FilterType:
        '''The resize filter of the same family, so both stages look alike.'''
        return {Interpolation.NEAREST: FilterType.NEAREST,
                Interpolation.BILINEAR: FilterType.TRIANGLE,
                Interpolation.BICUBIC: FilterType.LANCZOS3}[self]


@dataclass
class ResizeOption:
    nwidth: int
    nheight: int
    filter: FilterType = FilterType(DEFAULT_FILTER)


@dataclass
class RotateOption:
    '''
    Rotation of a bitmap about `center` by `theta` radians, clockwise on screen.

    `center` is in pixel-index coordinates: (0, 0) is the middle of the top-left pixel,
    so the middle of a w x h bitmap is ((w - 1) / 2, (h - 1) / 2).

    Pixels that map from outside the source are set to `default`.
    '''
    center: tuple[float, float]
    theta: float
    interpolation: Interpolation = Interpolation(DEFAULT_INTERPOLATION)
    default: Color = field(default_factory=lambda: Color(*DEFAULT_ROTATION_FILL))

    @classmethod
    def from_center(cls, center: tuple[float, float], theta: float) -> 'RotateOption':
        return cls(center, theta, Interpolation.NEAREST, TRANSPARENT)


def _check_bitmap(bitmap: np.ndarray) -> None:
    assert isinstance(bitmap, np.ndarray), f'Bitmap must be a numpy array, not {type(bitmap).__name__}'
    assert bitmap.ndim == 3 and bitmap.shape[2] == CHANNELS, f'Bitmap must have shape (height, width, 4): {bitmap.shape}'
    assert bitmap.dtype == np.uint8, f'Bitmap must be uint8: {bitmap.dtype}'


def _to_pil(bitmap: np.ndarray) -> PIL.Image.Image:
    return Image.fromarray(np.ascontiguousarray(bitmap))


def _to_array(image: PIL.Image.Image) -> np.ndarray:
    return np.array(image.convert('RGBA'), dtype=np.uint8)


def _decode(source, formats: list[str] | None) -> np.ndarray:
    try:
        with Image.open(source, formats=formats) as im:
            bitmap = _to_array(im)
    except FileNotFoundError:
        raise
    except (PIL.UnidentifiedImageError, OSError, SyntaxError) as err:
        raise ImageDecodeError(f'Cannot decode image: {err}') from err
    logger.debug('decoded %dx%d image', bitmap.shape[1], bitmap.shape[0])
    return bitmap


def load_png(data: bytes) -> np.ndarray:
    '''
    Decode PNG bytes into an RGBA bitmap.

    Raises:
        ImageDecodeError: If the data is not a decodable PNG.
    '''
    return _decode(BytesIO(data), ['PNG'])


def load_image(data: bytes) -> np.ndarray:
    '''Decode image bytes of any format Pillow recognizes into an RGBA bitmap.'''
    return _decode(BytesIO(data), None)


def open_png(path: str | PathLike) -> np.ndarray:
    return _decode(path, ['PNG'])


def open_image(path: str | PathLike) -> np.ndarray:
    return _decode(path, None)


def resize(bitmap: np.ndarray, nwidth: int, nheight: int, filter: FilterType | str = FilterType.NEAREST) -> np.ndarray:
    '''
    Resample a bitmap to `nwidth` x `nheight`.

    Args:
        bitmap (np.ndarray): Source bitmap.
        nwidth (int): Target width, must be positive.
        nheight (int): Target height, must be positive.
        filter (FilterType | str, optional): Resampling filter. Defaults to FilterType.NEAREST.

    Returns:
        np.ndarray: The resized bitmap.
    '''
    _check_bitmap(bitmap)
    assert nwidth > 0 and nheight > 0, f'Target size must be positive: {nwidth}x{nheight}'
    if (nwidth, nheight) == (bitmap.shape[1], bitmap.shape[0]):
        return bitmap.copy()
    resized = _to_pil(bitmap).resize((nwidth, nheight), resample=convert_style('filter', FilterType(filter)))
    return _to_array(resized)


def rotate(bitmap: np.ndarray,
           center: tuple[float, float],
           theta: float,
           interpolation: Interpolation | str = Interpolation.NEAREST,
           default: Color = TRANSPARENT) -> np.ndarray:
    '''
    Rotate a bitmap clockwise by `theta` radians about `center`.

    `center` is in pixel-index coordinates, see `RotateOption`. The result has the size
    of the source; pixels with no source pixel are set to `default`.
    '''
    _check_bitmap(bitmap)
    # Pillow turns counter-clockwise in degrees, about corner coordinates
    rotated = _to_pil(bitmap).rotate(-degrees(theta),
                                     resample=convert_style('interpolation', Interpolation(interpolation)),
                                     expand=False,
                                     center=(center[0] + 0.5, center[1] + 0.5),
                                     fillcolor=tuple(Color.parse(default)))
    return _to_array(rotated)


def crop(bitmap: np.ndarray, rect: Rect) -> np.ndarray:
    '''
    Copy the `rect` region out of a bitmap.

    The rectangle must be non-empty and lie within the bitmap; anything else is a
    caller error and fails an assertion.
    '''
    _check_bitmap(bitmap)
    height, width = bitmap.shape[:2]
    assert rect.width() > 0 and rect.height() > 0, f'Crop rectangle must not be empty: {rect}'
    assert 0 <= rect.left and rect.right <= width and 0 <= rect.top and rect.bottom <= height, \
        f'Crop rectangle {rect} exceeds the {width}x{height} bitmap'
    return bitmap[rect.top:rect.bottom, rect.left:rect.right].copy()


def draw_image_at(buffer: np.ndarray,
                  bitmap: np.ndarray,
                  x: int,
                  y: int,
                  size: ResizeOption | None = None,
                  rotate_option: RotateOption | None = None) -> None:
    '''
    Composite a bitmap onto the buffer with its top-left corner at (`x`, `y`).

    The bitmap is first resized (if `size` is given), then rotated (if `rotate_option`
    is given), then blended pixel by pixel. Parts falling outside the buffer are dropped.

    Args:
        buffer (np.ndarray): Destination buffer.
        bitmap (np.ndarray): Source bitmap.
        x (int): Destination left edge.
        y (int): Destination top edge.
        size (ResizeOption, optional): Target size and filter.
        rotate_option (RotateOption, optional): Rotation applied after resizing.
    '''
    _check_bitmap(bitmap)
    if size is not None:
        if size.nwidth <= 0 or size.nheight <= 0:
            return
        bitmap = resize(bitmap, size.nwidth, size.nheight, size.filter)
    if rotate_option is not None:
        bitmap = rotate(bitmap, rotate_option.center, rotate_option.theta,
                        rotate_option.interpolation, rotate_option.default)
    blend_image(buffer, x, y, bitmap)


def draw_image_with_src_and_dst(buffer: np.ndarray,
                                bitmap: np.ndarray,
                                src: Rect,
                                dst: Rect,
                                filter: FilterType | str = FilterType.NEAREST) -> None:
    '''
    Crop `src` out of the bitmap, scale it to the size of `dst` and composite it at the
    top-left corner of `dst`.
    '''
    sub_image = crop(bitmap, src)
    draw_image_at(buffer, sub_image, dst.left, dst.top, ResizeOption(dst.width(), dst.height(), FilterType(filter)))


def draw_image_with_src_and_dst_and_rotation(buffer: np.ndarray,
                                             bitmap: np.ndarray,
                                             src: Rect,
                                             dst: Rect,
                                             rotate_option: RotateOption) -> None:
    # resize with the filter family of the rotation interpolation
    sub_image = crop(bitmap, src)
    filter = Interpolation(rotate_option.interpolation).resize_filter()
    draw_image_at(buffer, sub_image, dst.left, dst.top,
                  ResizeOption(dst.width(), dst.height(), filter), rotate_option)
