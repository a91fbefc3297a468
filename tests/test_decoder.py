"""Tests for decoding sampled cell matrices."""

import random

import pytest

import errors
import markers
import encoder
import decoder
from tests.helpers import VALUE_300_DATA_AREA, bordered, flip


def test_decode_full_matrix():
    assert decoder.decode('44O', bordered(VALUE_300_DATA_AREA)) == (300, False)


def test_decode_data_area():
    assert decoder.decode('44O', VALUE_300_DATA_AREA) == (300, False)


def test_decode_cell_states():
    matrix = encoder.Encoder('44O').build_matrix(300)
    assert decoder.decode('44O', matrix) == (300, False)


def test_single_flip_is_corrected():
    for cell in markers.lookup('44O').data_cells():
        assert decoder.decode('44O', flip(VALUE_300_DATA_AREA, cell)) == (300, True)


def test_double_flip_is_uncorrectable():
    cells = markers.lookup('44O').data_cells()
    matrix = flip(flip(VALUE_300_DATA_AREA, cells[6]), cells[8])
    with pytest.raises(errors.UncorrectableData):
        decoder.decode('44O', matrix)


@pytest.mark.parametrize("cell", [0, 7, 9, 33, 39, 63])
def test_misread_border_cell_still_decodes(cell):
    assert decoder.decode('44O', flip(bordered(VALUE_300_DATA_AREA), cell)) == (300, True)


def test_missing_border_still_decodes():
    matrix = bordered(VALUE_300_DATA_AREA)
    for cell in range(64):
        row, col = divmod(cell, 8)
        if not (2 <= row < 6 and 2 <= col < 6):
            matrix[cell] = 0
    assert decoder.decode('44O', matrix) == (300, True)


@pytest.mark.parametrize("cell", [0, 12, 15])
def test_wrong_orientation_cell_still_decodes(cell):
    assert decoder.decode('44O', flip(VALUE_300_DATA_AREA, cell)) == (300, True)


def test_orientation_and_codeword_errors_together():
    cells = markers.lookup('44O').data_cells()
    assert decoder.decode('44O', flip(flip(VALUE_300_DATA_AREA, 15), cells[4])) == (300, True)


@pytest.mark.parametrize("length", [0, 15, 17, 63, 65])
def test_wrong_size(length):
    with pytest.raises(errors.UncorrectableData):
        decoder.decode('44O', [1] * length)


def test_spare_cells_ignored():
    matrix = [1, 1, 1, 0]
    assert decoder.decode('22N', matrix) == (1, False)
    assert decoder.decode('22N', flip(matrix, 3)) == (1, False)
    assert decoder.decode('22N', flip(matrix, 0)) == (1, True)


def test_unknown_profile():
    with pytest.raises(errors.InvalidProfile):
        decoder.Decoder('88O')


@pytest.mark.parametrize("name", markers.names())
def test_round_trip(name):
    profile = markers.lookup(name)
    coder = encoder.Encoder(name)
    reader = decoder.Decoder(name)
    if profile.payload_range <= 2048:
        values = range(profile.payload_range)
    else:
        values = random.Random(profile.d).sample(range(profile.payload_range), 200)
        values += [0, profile.payload_range - 1]
    for value in values:
        assert reader.decode(coder.build_matrix(value)) == (value, False)
