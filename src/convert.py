import skia
from enum import Enum
from math import ceil, floor

from PIL import Image

__converts = {'filter' :
                {
                'nearest' : Image.Resampling.NEAREST,
                'triangle' : Image.Resampling.BILINEAR,
                'bilinear' : Image.Resampling.BILINEAR,
                'catmull_rom' : Image.Resampling.BICUBIC,
                'bicubic' : Image.Resampling.BICUBIC,
                'lanczos3' : Image.Resampling.LANCZOS
                },
            'interpolation' :
                {
                'nearest' : Image.Resampling.NEAREST,
                'bilinear' : Image.Resampling.BILINEAR,
                'bicubic' : Image.Resampling.BICUBIC
                },
            'edging' :
                {
                'alias' : skia.Font.Edging.kAlias,
                'antialias' : skia.Font.Edging.kAntiAlias
                },
            'hinting' :
                {
                'none' : skia.FontHinting.kNone,
                'slight' : skia.FontHinting.kSlight,
                'normal' : skia.FontHinting.kNormal,
                'full' : skia.FontHinting.kFull
                }
            }


def convert_style(conv_type: str, value: str | Enum):
    '''
    Converts a style-related value to the enum value of the library that implements it.

    Filters and interpolations map onto Pillow resampling constants, glyph edging and
    hinting map onto Skia enums. Enum members are looked up by their value.

    Args:
        conv_type (str): The type of conversion. Must be one of:
                        'filter', 'interpolation', 'edging', 'hinting'.
        value (str | Enum): The value to convert, e.g. 'triangle' or FilterType.TRIANGLE.

    Returns:
        The corresponding Pillow or Skia enum value.

    Raises:
        AssertionError: If the conversion type or the value is not supported.
    '''
    assert conv_type in ['filter', 'interpolation', 'edging', 'hinting'], f'Wrong convert type {conv_type}!'
    if isinstance(value, Enum):
        value = value.value
    assert value in __converts[conv_type], f'Unknown {conv_type} value {value}!'
    return __converts[conv_type][value]


def int_ceil(v: float) -> int: return int(ceil(v))


def int_floor(v: float) -> int: return int(floor(v))
