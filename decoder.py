""" Decode a sampled cell matrix into a number (if possible)
    The matrix is row-major, each cell is 1 (set) or 0 (unset). It is either the whole marker inside its
    margin (i.e. border included, marker-size cells square) or just the data area.
    Border cells and orientation cells carry no payload so they are discarded, a border cell that is not set
    or an orientation cell that is not set, set, unset is only counted as a misread cell. Orientation is
    not used to turn a rotated marker back.
    The codeword cells are read in scan order and decoded with error correction, spare cells are ignored.
"""

import errors
import markers
import hamming

class Decoder:

    def __init__(self, profile_name: str, logger=None):
        self.profile = markers.lookup(profile_name)
        self.logger  = logger
        self.codec   = hamming.make_codec(self.profile.d, logger)

    @staticmethod
    def bit(cell) -> int:
        """ normalise a cell to 0 or 1 """
        if isinstance(cell, markers.CellState):
            return 1 if cell == markers.CellState.SET else 0
        return 1 if cell else 0

    def extract(self, matrix) -> ([int], int):
        """ get the data area cells from the given matrix,
            returns the cells and how many border cells were not set
            """
        profile = self.profile
        bits = [Decoder.bit(cell) for cell in matrix]
        if len(bits) == profile.cells:
            # its just the data area
            return bits, 0
        size = profile.marker_size
        if len(bits) != size * size:
            raise errors.UncorrectableData('matrix has {} cells, expected {} or {}'.
                                           format(len(bits), size * size, profile.cells))
        data = []
        misread = 0
        for cell, bit in enumerate(bits):
            row, col = divmod(cell, size)
            if profile.b <= row < profile.b + profile.y and profile.b <= col < profile.b + profile.x:
                data.append(bit)
            elif bit != 1:
                misread += 1
        return data, misread

    def digits(self, data: [int]) -> (str, int):
        """ get the codeword digit string from the data area cells,
            returns the digits and how many orientation cells were wrong
            """
        misread = 0
        for cell, state in self.profile.orientation_cells().items():
            if data[cell] != state.value:
                misread += 1
        return ''.join('1' if data[cell] == 1 else '0' for cell in self.profile.data_cells()), misread

    def decode(self, matrix) -> (int, bool):
        """ decode the given matrix,
            returns the value and whether any cell was misread (a codeword bit corrected or a
            border or orientation cell wrong), raises UncorrectableData if it cannot
            """
        data, border_misread = self.extract(matrix)
        digits, orientation_misread = self.digits(data)
        payload, _ = self.codec.decode(digits)
        value = hamming.from_digits(payload)
        corrected = self.codec.encode(payload) != digits
        if self.logger is not None:
            self.logger.log('Codeword {} decodes as {}{}, misread {} border and {} orientation cells'.
                            format(digits, value, ' (corrected)' if corrected else '',
                                   border_misread, orientation_misread))
        return value, corrected or border_misread > 0 or orientation_misread > 0

def decode(profile_name: str, matrix, logger=None) -> (int, bool):
    """ decode the given cell matrix for the given profile """
    return Decoder(profile_name, logger).decode(matrix)
