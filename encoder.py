""" Draw a marker for a number
    The marker is drawn in cell units by calling a painter function, paint(x, y, colour), for every cell
    of the marker (margin and border included), cell 0,0 is the top-left of the margin.
    The painter decides what a cell looks like (see painter.py for one that draws onto an image),
    a colour of const.TRANSPARENT means the cell should not be painted at all.
    Drawing is deterministic, the same profile and value always make the same paint calls.
"""

import numbers

import const
import errors
import markers
import hamming

class Encoder:

    def __init__(self, profile_name: str=const.DEFAULT_PROFILE, colour_fg=const.BLACK, colour_bg=const.TRANSPARENT,
                 logger=None):
        self.profile   = markers.lookup(profile_name)
        self.colour_fg = colour_fg
        self.colour_bg = colour_bg
        self.logger    = logger
        self.codec     = hamming.make_codec(self.profile.d, logger)
        if self.codec.code_bits != self.profile.code_bits:
            raise errors.InvalidProfile('profile {} expects {} code bits, codec makes {}'.
                                        format(self.profile.name, self.profile.code_bits, self.codec.code_bits))

    def validate(self, value) -> int:
        """ make sure the value is an integer in the payload range, returns it as an int """
        if isinstance(value, bool) or not isinstance(value, numbers.Number):
            raise errors.InvalidData('require numeric data, not {!r}'.format(value))
        if isinstance(value, numbers.Integral):
            value = int(value)
        elif isinstance(value, numbers.Real) and float(value).is_integer():
            value = int(value)
        else:
            raise errors.InvalidData('require integer data, not {!r}'.format(value))
        if value < 0 or value >= self.profile.payload_range:
            raise errors.DataOutOfRange('data {} out of range 0..{}'.format(value, self.profile.payload_range - 1))
        return value

    def build_matrix(self, value) -> [markers.CellState]:
        """ build the data area cells for the given value,
            orientation cells are fixed, the codeword bits fill the rest in scan order,
            any spare cells at the end are left empty
            """
        value = self.validate(value)
        matrix = markers.new_matrix(self.profile)
        digits = self.codec.encode(hamming.to_digits(value, self.profile.d))
        cell = 0
        for digit in digits:
            while matrix[cell] != markers.CellState.EMPTY:
                # skip reserved cells
                cell += 1
            matrix[cell] = markers.CellState.SET if digit == '1' else markers.CellState.UNSET
            cell += 1
        if self.logger is not None:
            self.logger.log('Value {} in {} is codeword {}'.format(value, self.profile.name, digits))
        return matrix

    def draw_frame(self, paint):
        """ draw the margin and border rings, the outer b rings are background, the inner m are foreground """
        width  = self.profile.width
        height = self.profile.height
        for ring in range(self.profile.b + self.profile.m):
            colour = self.colour_bg if ring < self.profile.b else self.colour_fg
            for i in range(ring, width - ring):
                paint(i, ring, colour)
                paint(i, height - ring - 1, colour)
            for i in range(ring + 1, height - ring - 1):
                paint(ring, i, colour)
                paint(width - ring - 1, i, colour)

    def draw_matrix(self, matrix: [markers.CellState], paint):
        """ draw the data area cells inside the border """
        offset = self.profile.b + self.profile.m
        for cell, state in enumerate(matrix):
            row, col = divmod(cell, self.profile.x)
            colour = self.colour_fg if state == markers.CellState.SET else self.colour_bg
            paint(offset + col, offset + row, colour)

    def encode(self, value, paint):
        """ draw the marker for the given value via the given painter function,
            returns the data area matrix drawn
            """
        matrix = self.build_matrix(value)
        self.draw_frame(paint)
        self.draw_matrix(matrix, paint)
        return matrix

def encode(profile_name: str, value, paint, logger=None):
    """ draw a marker of the given profile for the given value via paint(x, y, colour) """
    return Encoder(profile_name, logger=logger).encode(value, paint)
