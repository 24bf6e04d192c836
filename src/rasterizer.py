'''
Scan conversion of lines, rectangles and circles.

All functions write through the compositor and clip every point to the buffer, so any
geometry, even entirely off the buffer, is safe to draw.
'''
from collections.abc import Iterator

import numpy as np

from .color import Color
from .compositor import blend_points, blend_rect
from .rect import Rect


def bresenham_line(start: tuple[int, int], end: tuple[int, int]) -> Iterator[tuple[int, int]]:
    '''
    Iterate the integer points of a line segment, both endpoints included.

    Works for any slope and direction.

    Example:
        >>> list(bresenham_line((0, 0), (3, 1)))
        [(0, 0), (1, 0), (2, 1), (3, 1)]
    '''
    x0, y0 = start
    x1, y1 = end
    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def midpoint_circle(radius: int) -> Iterator[tuple[int, int]]:
    '''
    Iterate the (x, y) offsets of one octant of a circle, from (0, radius) until x > y.

    The remaining seven octants are obtained by mirroring.
    '''
    x = 0
    y = radius
    p = 1 - radius
    while x <= y:
        yield x, y
        x += 1
        if p < 0:
            p += 2 * x + 1
        else:
            y -= 1
            p += 2 * (x - y) + 1


def _line_points(start: tuple[int, int], end: tuple[int, int]) -> tuple[np.ndarray, np.ndarray]:
    if start[1] == end[1]:
        # horizontal spans are the bulk of circle fills
        xs = np.arange(min(start[0], end[0]), max(start[0], end[0]) + 1)
        return xs, np.full(xs.shape, start[1])
    points = np.array(list(bresenham_line(start, end)))
    return points[:, 0], points[:, 1]


def stroke_line(buffer: np.ndarray, start: tuple[int, int], end: tuple[int, int], color: Color) -> None:
    xs, ys = _line_points(start, end)
    blend_points(buffer, xs, ys, color)


def fill_rect(buffer: np.ndarray, rect: Rect, color: Color) -> None:
    '''
    Fill every pixel of `rect` that lies on the buffer.
    '''
    height, width = buffer.shape[:2]
    clip = rect.intersect(Rect(0, 0, width, height))
    if clip is None:
        return
    blend_rect(buffer, clip.left, clip.top, clip.right, clip.bottom, color)


def stroke_rect(buffer: np.ndarray, rect: Rect, color: Color) -> None:
    '''
    Outline `rect` with four 1px lines.

    The outline runs over the outermost pixels `fill_rect` would cover, i.e. the right
    edge is drawn at `right - 1` and the bottom edge at `bottom - 1`. The edges are used
    as given, so a rectangle with swapped edges is outlined the other way round. A
    rectangle of zero width or height has no pixels and draws nothing.
    '''
    if rect.width() == 0 or rect.height() == 0:
        return
    left, top = rect.left, rect.top
    right, bottom = rect.right - 1, rect.bottom - 1

    stroke_line(buffer, (left, top), (right, top), color)
    stroke_line(buffer, (left, bottom), (right, bottom), color)
    stroke_line(buffer, (left, top), (left, bottom), color)
    stroke_line(buffer, (right, top), (right, bottom), color)


def stroke_circle(buffer: np.ndarray, center: tuple[int, int], radius: int, color: Color) -> None:
    '''
    Outline a circle with the midpoint algorithm.

    Every octant point is mirrored into all eight octants and blended as-is, so points
    shared between octants (e.g. radius 0) are blended more than once.
    '''
    octant = np.array(list(midpoint_circle(radius)), dtype=np.int64).reshape(-1, 2)
    if not len(octant):
        return
    x0, y0 = center
    x, y = octant[:, 0], octant[:, 1]
    xs = np.concatenate([x0 + x, x0 + y, x0 - y, x0 - x, x0 - x, x0 - y, x0 + y, x0 + x])
    ys = np.concatenate([y0 + y, y0 + x, y0 + x, y0 + y, y0 - y, y0 - x, y0 - x, y0 - y])
    blend_points(buffer, xs, ys, color)


def fill_circle(buffer: np.ndarray, center: tuple[int, int], radius: int, color: Color) -> None:
    '''
    Fill a circle with four horizontal chords per octant step.

    The chords of neighbouring steps overlap, so a translucent colour builds up where
    they do. Negative radii draw nothing.
    '''
    x0, y0 = center
    xs, ys = [], []
    for x, y in midpoint_circle(radius):
        for start, end in (((x0 - x, y0 + y), (x0 + x, y0 + y)),
                           ((x0 - y, y0 + x), (x0 + y, y0 + x)),
                           ((x0 - x, y0 - y), (x0 + x, y0 - y)),
                           ((x0 - y, y0 - x), (x0 + y, y0 - x))):
            chord_xs, chord_ys = _line_points(start, end)
            xs.append(chord_xs)
            ys.append(chord_ys)
    if xs:
        blend_points(buffer, np.concatenate(xs), np.concatenate(ys), color)
