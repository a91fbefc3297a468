"""Tests for rendering markers onto images."""

import pytest

import const
import canvas
import errors
import painter


def pixel(image, x, y):
    return tuple(int(channel) for channel in image[y, x])


def test_render_size_and_cells(image_300):
    assert canvas.size(image_300) == (120, 120)
    assert pixel(image_300, 5, 5) == const.WHITE      # margin, not painted
    assert pixel(image_300, 25, 25) == const.BLACK    # border
    assert pixel(image_300, 45, 45) == const.BLACK    # orientation cell
    assert pixel(image_300, 65, 45) == const.WHITE    # unset data cell
    assert pixel(image_300, 75, 75) == const.WHITE    # orientation cell, unset
    assert pixel(image_300, 115, 115) == const.WHITE


def test_background_colour_painted():
    image = painter.render('44O', 300, pixel_size=4, colour_bg=const.WHITE, canvas_colour=const.GREY)
    assert pixel(image, 0, 0) == const.WHITE


def test_transparent_background_keeps_canvas():
    image = painter.render('44O', 300, pixel_size=4, canvas_colour=const.GREY)
    assert pixel(image, 0, 0) == const.GREY
    assert pixel(image, 26, 18) == const.GREY  # unset data cell


@pytest.mark.parametrize("handle, position, expected", [
    ('tl', (10, 20), (10, 20)),
    ('tr', (190, 20), (70, 20)),
    ('bl', (10, 190), (10, 70)),
    ('br', (-10, -10), (70, 70)),
    ('tl', (-130, -125), (70, 75)),
])
def test_placement(handle, position, expected):
    renderer = painter.Renderer('44O', canvas_width=200, canvas_height=200,
                                position_x=position[0], position_y=position[1], handle=handle, pixel_size=10)
    assert renderer.placement() == (200, 200) + expected


def test_render_onto_existing_image():
    image = canvas.new(300, 300, const.WHITE)
    painter.Renderer('44O', position_x=100, position_y=50, pixel_size=10).render(300, image)
    assert pixel(image, 125, 75) == const.BLACK
    assert pixel(image, 25, 25) == const.WHITE


def test_cell_painter_clips_to_canvas():
    image = canvas.new(10, 10, const.WHITE)
    cells = painter.CellPainter(image, 0, 0, 4)
    cells.set(2, 2, const.BLACK)
    cells.set(5, 5, const.BLACK)
    cells.set(0, 0, const.TRANSPARENT)
    assert pixel(image, 9, 9) == const.BLACK
    assert pixel(image, 0, 0) == const.WHITE
    assert cells.painted == 2


def test_invalid_options():
    with pytest.raises(errors.InvalidOption):
        painter.Renderer('44O', handle='middle')
    with pytest.raises(errors.InvalidOption):
        painter.Renderer('44O', pixel_size=0)
    with pytest.raises(errors.InvalidProfile):
        painter.Renderer('4O4')
