"""Shared test constants and helpers."""

import markers
import locator


PIXEL_SIZE = 5

# 44O carrying 300 (see test_encoder.py for how this is worked out)
VALUE_300_CODEWORD = '1011001001100'
VALUE_300_DATA_AREA = [1, 1, 0, 1,
                       1, 0, 0, 1,
                       0, 0, 1, 1,
                       1, 0, 0, 0]


def marker_area(profile_name, pixel_size=PIXEL_SIZE, origin=(0, 0)):
    """ where a marker rendered at origin puts its border, as the locator would report it """
    profile = markers.lookup(profile_name)
    size = profile.marker_size * pixel_size
    offset = profile.b * pixel_size
    return locator.Area(origin[0] + offset, origin[1] + offset, size, size)


def flip(matrix, cell):
    flipped = list(matrix)
    flipped[cell] = 1 - flipped[cell]
    return flipped


def bordered(data_area, size=8, border=2):
    """ the full matrix (border included) for the given data area cells, 44O by default """
    matrix = []
    inner = size - 2 * border
    for row in range(size):
        for col in range(size):
            if border <= row < size - border and border <= col < size - border:
                matrix.append(data_area[(row - border) * inner + (col - border)])
            else:
                matrix.append(1)
    return matrix
