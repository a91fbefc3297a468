"""Shared test fixtures."""

import pytest

import const
import canvas
import painter


@pytest.fixture
def image_300():
    return painter.render('44O', 300, pixel_size=10)


@pytest.fixture
def blank_image():
    return canvas.new(200, 150, const.WHITE)
