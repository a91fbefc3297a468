"""Tests for finding candidate marker areas."""

import pytest

import const
import canvas
import markers
import luminosity
import locator
from bitmap import Bitmap
from locator import State, Run, Area


class LinePixels:
    """ luminosity along a single line, the same for every row """

    def __init__(self, line):
        self.line = line

    def luminosity(self, x, y):
        return self.line[x]


def scan(line, min_length=3, threshold=0.5):
    scanner = locator.Scanner(LinePixels(line), threshold, min_length)
    for x in range(len(line)):
        scanner.visit(x, 0)
    return scanner


def make_locator(image, profile_name='44O', **kwargs):
    bitmap = Bitmap(image)
    pixels = luminosity.PixelCache(bitmap, luminosity.ColourCache())
    return locator.Locator(bitmap, markers.lookup(profile_name), pixels, **kwargs)


@pytest.mark.parametrize("state, is_dark, is_light, expected", [
    (State.OTHER,  False, True,  State.PROLOG),
    (State.OTHER,  True,  False, State.OTHER),
    (State.PROLOG, True,  False, State.BODY),
    (State.PROLOG, False, True,  State.PROLOG),
    (State.BODY,   False, True,  State.EPILOG),
    (State.BODY,   True,  False, State.BODY),
    (State.EPILOG, True,  False, State.OTHER),
    (State.EPILOG, False, True,  State.EPILOG),
])
def test_transition(state, is_dark, is_light, expected):
    assert locator.transition(state, is_dark, is_light) == expected


def test_run_length_includes_first_pixel():
    scanner = scan([1, 1, 0, 0, 0, 1])
    assert [(run.x, run.y, run.length) for run in scanner.runs] == [(2, 0, 3)]


def test_short_run_ignored():
    assert scan([1, 0, 0, 1]).runs == []


def test_run_without_light_lead_in_ignored():
    assert scan([0, 0, 0, 0, 1, 1]).runs == []


def test_run_without_light_end_ignored():
    assert scan([1, 1, 0, 0, 0, 0]).runs == []


def test_dark_straight_after_a_run_is_swallowed():
    scanner = scan([1, 0, 0, 0, 1, 0, 0, 0, 0, 1])
    assert [(run.x, run.length) for run in scanner.runs] == [(1, 3)]


def test_light_after_swallowed_run_starts_again():
    scanner = scan([1, 0, 0, 0, 1, 0, 1, 0, 0, 0, 1])
    assert [(run.x, run.length) for run in scanner.runs] == [(1, 3), (7, 3)]


def test_restart_forgets_partial_run():
    scanner = locator.Scanner(LinePixels([1, 0, 0, 0, 1]), 0.5, 3)
    scanner.visit(0, 0)
    scanner.visit(1, 0)
    scanner.restart()
    for x in range(2, 5):
        scanner.visit(x, 0)
    assert scanner.runs == []


def test_intersect():
    rows = [Run(10, 10, 100), Run(10, 10, 100), Run(50, 60, 8)]
    columns = [Run(10, 10, 109), Run(50, 60, 9), Run(70, 70, 100)]
    areas = locator.intersect(rows, columns)
    assert areas == [Area(10, 10, 100, 109), Area(10, 10, 100, 109)]


def test_intersect_tolerance():
    assert locator.intersect([Run(0, 0, 100)], [Run(0, 0, 112)]) == []
    assert locator.intersect([Run(0, 0, 100)], [Run(1, 0, 100)]) == []
    assert locator.intersect([Run(0, 0, 8)], [Run(0, 0, 8)]) == [Area(0, 0, 8, 8)]


def test_area():
    area = Area(1, 2, 3, 4)
    assert area.as_dict() == {'x': 1, 'y': 2, 'w': 3, 'h': 4}
    assert area == Area(1, 2, 3, 4)
    assert area != Area(1, 2, 3, 5)
    assert area != (1, 2, 3, 4)


def test_locate_single_marker(image_300):
    finder = make_locator(image_300)
    assert finder.locate() == [Area(20, 20, 80, 80)]
    assert finder.find_threshold() == 0.5
    assert all(run.x == 20 for run in finder.scan_rows())
    assert [(run.x, run.y, run.length) for run in finder.scan_columns()] == [(20, 20, 80)]


def test_locate_results_are_kept(image_300):
    finder = make_locator(image_300)
    assert finder.locate() is finder.locate()
    assert finder.scan_rows() is finder.scan_rows()


@pytest.mark.parametrize("colour", [const.WHITE, const.BLACK, const.GREY])
def test_uniform_image_has_no_areas(colour):
    assert make_locator(canvas.new(100, 80, colour)).locate() == []
    assert make_locator(canvas.new(100, 80, colour), detect_dark_light=True).locate() == []


def test_detected_threshold(image_300):
    assert make_locator(image_300, detect_dark_light=True).find_threshold() == pytest.approx(0.5)
    assert make_locator(canvas.new(50, 50, const.GREY), detect_dark_light=True).find_threshold() == 0


def test_region_limits_scan(image_300):
    assert make_locator(image_300, region=(0, 0, 60, 120)).locate() == []
    assert make_locator(image_300, region=(10, 10, 100, 100)).locate() == [Area(20, 20, 80, 80)]


def test_module_locate(image_300):
    bitmap = Bitmap(image_300)
    pixels = luminosity.PixelCache(bitmap, luminosity.ColourCache())
    assert locator.locate(bitmap, markers.lookup('44O'), pixels) == [Area(20, 20, 80, 80)]


def test_area_encloses():
    outer = Area(10, 10, 50, 50)
    assert outer.encloses(Area(45, 45, 15, 15))
    assert outer.encloses(Area(10, 10, 20, 50))
    assert not outer.encloses(Area(10, 10, 50, 50))
    assert not outer.encloses(Area(45, 45, 16, 15))
    assert not Area(45, 45, 15, 15).encloses(outer)


@pytest.mark.parametrize("size, expected", [(10, []), (15, []), (16, [Area(20, 20, 16, 16)])])
def test_too_small_area_ignored(size, expected):
    image = canvas.new(100, 100, const.WHITE)
    canvas.fill(image, 20, 20, size, size, const.BLACK)
    assert make_locator(image).locate() == expected
