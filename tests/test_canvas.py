import numpy as np
import pytest
from PIL import Image

from offscreen_canvas import (OffscreenCanvas, Color, Rect, WHITE, BLACK, RED, GREEN, BLUE, TRANSPARENT,
                              FilterType, RotateOption)


def test_new_canvas_is_transparent(canvas):
    assert (canvas.width, canvas.height) == (40, 30)
    assert canvas.bounds() == Rect(0, 0, 40, 30)
    assert canvas.get_pixel(0, 0) == TRANSPARENT
    assert not canvas.image_data().any()


def test_clear(canvas):
    canvas.clear('white')
    assert (canvas.image_data() == WHITE).all()


@pytest.mark.parametrize('draw', [
    lambda c, color: c.fill_rect(Rect.from_xywh(7, 5, 1, 1), color),
    lambda c, color: c.stroke_rect(Rect.from_xywh(7, 5, 3, 3), color),
    lambda c, color: c.stroke_line((7, 5), (7, 5), color),
    lambda c, color: c.stroke_circle((7, 5), 0, color),
    lambda c, color: c.fill_circle((7, 5), 2, color),
    lambda c, color: c.draw_text('A', color, 10, 7, 4),
])
def test_opaque_write_reads_back_exactly(canvas, draw):
    canvas.clear(BLUE)
    color = Color(12, 200, 77, 255)
    draw(canvas, color)
    assert canvas.get_pixel(7, 5) == color


@pytest.mark.parametrize('draw', [
    lambda c, color: c.clear(color),
    lambda c, color: c.fill_circle((5, 5), 5, color),
    lambda c, color: c.stroke_line((0, 0), (39, 29), color),
    lambda c, color: c.draw_text_centered('AB', color, 10, 20, 15),
])
def test_transparent_draw_changes_nothing(canvas, draw):
    canvas.fill_rect(Rect(0, 0, 20, 30), Color(9, 8, 7, 200))
    before = canvas.image_data().copy()
    draw(canvas, Color(255, 255, 255, 0))
    assert (canvas.image_data() == before).all()


def test_fill_rect_off_canvas(canvas):
    canvas.fill_rect(Rect(-100, -100, -1, -1), RED)
    canvas.fill_rect(Rect(40, 30, 90, 90), RED)
    assert not canvas.image_data().any()


def test_get_pixel_rgb565(canvas):
    canvas.clear(RED)
    assert canvas.get_pixel_rgb565(3, 3) == 0xF800
    canvas.fill_rect(Rect(0, 0, 1, 1), Color(0xFF, 0x7F, 0x0F))
    assert canvas.get_pixel_rgb565(0, 0) == (0x1F << 11) | (0x1F << 5) | 0x01


@pytest.mark.parametrize('x, y', [(-1, 0), (0, -1), (40, 0), (0, 30)])
def test_get_pixel_outside(canvas, x, y):
    with pytest.raises(IndexError):
        canvas.get_pixel(x, y)


def test_image_data_is_read_only(canvas):
    with pytest.raises(ValueError):
        canvas.image_data()[0, 0] = WHITE


def test_image_data_mut_writes_through(canvas):
    canvas.image_data_mut()[2, 1] = GREEN
    assert canvas.get_pixel(1, 2) == GREEN


def test_measure_text(canvas):
    assert canvas.measure_text('AB', 10) == Rect(0, 0, 9, 11)
    assert canvas.measure_text('', 10) == Rect(0, 0, 0, 0)


def test_draw_image_with_size_at(canvas):
    bitmap = np.zeros((2, 2, 4), dtype=np.uint8)
    bitmap[...] = RED
    canvas.draw_image_with_size_at(bitmap, 35, 25, 10, 10, FilterType.NEAREST)
    assert canvas.get_pixel(39, 29) == RED
    assert canvas.get_pixel(34, 29) == TRANSPARENT


def test_draw_image_with_rotation_at(canvas):
    bitmap = np.zeros((2, 2, 4), dtype=np.uint8)
    bitmap[0, 0] = RED
    canvas.draw_image_with_rotation_at(bitmap, 0, 0, RotateOption.from_center((0.5, 0.5), np.pi))
    assert canvas.get_pixel(1, 1) == RED
    assert canvas.get_pixel(0, 0) == TRANSPARENT


def test_draw_image_with_src_and_dst(canvas):
    bitmap = np.zeros((10, 10, 4), dtype=np.uint8)
    bitmap[...] = RED
    canvas.clear(BLACK)
    canvas.draw_image_with_src_and_dst(bitmap, Rect(0, 0, 10, 10), Rect(0, 0, 20, 20), FilterType.NEAREST)
    assert (canvas.image_data()[:20, :20] == RED).all()
    assert (canvas.image_data()[20:, :] == BLACK).all()


def test_save(tmp_path, canvas):
    canvas.fill_circle((20, 15), 6, RED)
    path = tmp_path / 'out.png'
    canvas.save(path)
    with Image.open(path) as im:
        assert im.size == (40, 30)
        assert (np.array(im.convert('RGBA')) == canvas.image_data()).all()
