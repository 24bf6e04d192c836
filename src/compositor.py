'''
The one place where pixels of a buffer get written.

Every drawing primitive ends in one of the functions below, and all of them apply the
same "over" rule implemented by `over`:

    out_rgb = src_rgb * src_a + dst_rgb * (1 - src_a)
    out_a   = src_a + dst_a * (1 - src_a)

with `src_a` normalized to [0, 1]. Coordinates outside the buffer are dropped silently.
'''
import numpy as np

from .color import Color


def over(dst: np.ndarray, src_rgb: np.ndarray, src_alpha: np.ndarray) -> np.ndarray:
    '''
    Composite a source over destination pixels.

    Args:
        dst (np.ndarray): Destination pixels, (..., 4) uint8.
        src_rgb (np.ndarray): Source colour channels, broadcastable to (..., 3).
        src_alpha (np.ndarray): Source alpha in 0-255, broadcastable to (..., 1).

    Returns:
        np.ndarray: The blended pixels, same shape as `dst`, dtype uint8.
    '''
    sa = np.asarray(src_alpha, dtype=np.float32) / 255.0
    inv = 1.0 - sa
    out = np.empty(dst.shape, dtype=np.float32)
    out[..., :3] = np.asarray(src_rgb, dtype=np.float32) * sa + dst[..., :3].astype(np.float32) * inv
    out[..., 3:] = sa * 255.0 + dst[..., 3:].astype(np.float32) * inv
    return np.clip(np.rint(out), 0, 255).astype(np.uint8)


def blend(buffer: np.ndarray, x: int, y: int, color: Color) -> None:
    '''
    Blend a single colour into the pixel at (`x`, `y`).

    Does nothing when the point lies outside the buffer.
    '''
    height, width = buffer.shape[:2]
    if x < 0 or x >= width or y < 0 or y >= height:
        return
    pixel = buffer[y:y + 1, x:x + 1]
    pixel[...] = over(pixel, color[:3], (color[3],))


def blend_points(buffer: np.ndarray, xs, ys, color: Color) -> None:
    '''
    Blend a single colour into every pixel of a point list.

    Gives the same result as calling `blend` for each point in turn: a point listed k
    times is blended k times. Points outside the buffer are dropped.

    Args:
        buffer (np.ndarray): Destination buffer, (H, W, 4) uint8.
        xs: X coordinates, any integer sequence.
        ys: Y coordinates, same length as `xs`.
        color (Color): The colour to blend.
    '''
    height, width = buffer.shape[:2]
    xs = np.asarray(xs, dtype=np.int64)
    ys = np.asarray(ys, dtype=np.int64)
    inside = (xs >= 0) & (xs < width) & (ys >= 0) & (ys < height)
    if not inside.any():
        return
    index, counts = np.unique(ys[inside] * width + xs[inside], return_counts=True)

    # one pass per repetition, the colour is the same for every point
    for level in range(1, int(counts.max()) + 1):
        selected = index[counts >= level]
        py, px = selected // width, selected % width
        buffer[py, px] = over(buffer[py, px], color[:3], (color[3],))


def blend_rect(buffer: np.ndarray, left: int, top: int, right: int, bottom: int, color: Color) -> None:
    '''
    Blend a solid colour into every pixel of [left, right) x [top, bottom).

    The region is clipped to the buffer first; an empty region is a no-op.
    '''
    height, width = buffer.shape[:2]
    left, top = max(left, 0), max(top, 0)
    right, bottom = min(right, width), min(bottom, height)
    if right <= left or bottom <= top:
        return
    region = buffer[top:bottom, left:right]
    region[...] = over(region, color[:3], (color[3],))


def blend_image(buffer: np.ndarray, x: int, y: int, pixels: np.ndarray, coverage: np.ndarray = None) -> None:
    '''
    Blend a bitmap with its top-left corner at (`x`, `y`).

    Source pixels falling outside the buffer are dropped. If `coverage` is given, each
    source alpha is multiplied by coverage/255 before blending.

    Args:
        buffer (np.ndarray): Destination buffer, (H, W, 4) uint8.
        x (int): Left edge of the bitmap in buffer coordinates, may be negative.
        y (int): Top edge of the bitmap in buffer coordinates, may be negative.
        pixels (np.ndarray): Source bitmap (h, w, 4) uint8, or a single colour broadcast over `coverage`.
        coverage (np.ndarray, optional): (h, w) uint8 alpha multipliers.
    '''
    if coverage is not None:
        src_h, src_w = coverage.shape[:2]
        pixels = np.broadcast_to(np.asarray(pixels, dtype=np.uint8), (src_h, src_w, 4))
    else:
        src_h, src_w = pixels.shape[:2]
    height, width = buffer.shape[:2]

    left, top = max(x, 0), max(y, 0)
    right, bottom = min(x + src_w, width), min(y + src_h, height)
    if right <= left or bottom <= top:
        return

    src = pixels[top - y:bottom - y, left - x:right - x]
    alpha = src[..., 3:].astype(np.int32)
    if coverage is not None:
        # alpha * coverage / 255, truncated to a byte
        cov = coverage[top - y:bottom - y, left - x:right - x, np.newaxis].astype(np.int32)
        alpha = alpha * cov // 255

    region = buffer[top:bottom, left:right]
    region[...] = over(region, src[..., :3], alpha)
