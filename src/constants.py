'''
Library-wide defaults.
'''

# resize filter used when the caller gives none
DEFAULT_FILTER = 'nearest'

# rotation
DEFAULT_INTERPOLATION = 'nearest'
DEFAULT_ROTATION_FILL = (0, 0, 0, 0)

# glyph rasterization
GLYPH_EDGING = 'antialias'
GLYPH_HINTING = 'none'

# bitmaps are (height, width, channels)
CHANNELS = 4
