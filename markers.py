""" Marker geometry catalog
    A marker is a square of cells, drawn as (from the outside in):
        a margin of light cells (the quiet zone),
        a border of dark cells (confirms the detection geometry),
        a data area of x * y cells holding orientation cells, codeword bits and spare cells.
    Structure overview for the 44O profile (m=2, b=2, x=4, y=4, o=3):
        . . . . . . . . . . . .
        . . . . . . . . . . . .
        . . # # # # # # # # . .
        . . # # # # # # # # . .
        . . # # O d d d # # . .     O = orientation cell, always set
        . . # # d d d d # # . .     o = orientation cell, always unset
        . . # # d d d d # # . .     d = a codeword bit (in scan order)
        . . # # O d d o # # . .
        . . # # # # # # # # . .
        . . # # # # # # # # . .
        . . . . . . . . . . . .
        . . . . . . . . . . . .
    Profile fields:
        m - margin rings, b - border rings (every profile has m == b, the encoder draws the outer b
            rings in the background colour and the inner m in the foreground colour),
        x, y - data area width and height in cells,
        o - orientation cells (0 or 3),
        h - Hamming check bits, so the codeword is d+h bits,
        s - spare data area cells (x*y - o - (d+h)), these are never set,
        d - payload bits, so the payload range is 0..(2^d)-1
"""

import enum

import errors

class CellState(enum.Enum):
    """ what a data area cell holds """
    EMPTY = None  # not assigned yet (also what spare cells remain)
    UNSET = 0
    SET   = 1

class MarkerProfile:
    """ the geometry of one marker type (treat as immutable) """

    def __init__(self, name: str, m: int, b: int, x: int, y: int, o: int, h: int, s: int, d: int):
        self.name = name
        self.m = m
        self.b = b
        self.x = x
        self.y = y
        self.o = o
        self.h = h
        self.s = s
        self.d = d
        if x < 1 or y < 1 or min(m, b, o, h, s, d) < 0:
            raise errors.InvalidProfile('profile {} has bad dimensions'.format(name))
        if self.s != (self.cells - self.o - self.code_bits):
            raise errors.InvalidProfile('profile {} has {} spare cells, expected {}'.
                                        format(name, self.s, self.cells - self.o - self.code_bits))

    def __repr__(self):
        return 'MarkerProfile({}: m={}, b={}, x={}, y={}, o={}, h={}, s={}, d={})'.\
            format(self.name, self.m, self.b, self.x, self.y, self.o, self.h, self.s, self.d)

    @property
    def cells(self) -> int:
        """ number of cells in the data area """
        return self.x * self.y

    @property
    def code_bits(self) -> int:
        """ length of the codeword """
        return self.d + self.h

    @property
    def payload_range(self) -> int:
        """ exclusive upper limit of encodable values """
        return 1 << self.d

    @property
    def marker_size(self) -> int:
        """ cells across the marker including its border but not its margin """
        return 2 * self.b + self.x

    @property
    def width(self) -> int:
        """ cells across the whole marker, margin included """
        return self.x + 2 * (self.b + self.m)

    @property
    def height(self) -> int:
        """ cells down the whole marker, margin included """
        return self.y + 2 * (self.b + self.m)

    def orientation_cells(self) -> {int: CellState}:
        """ the data area indices reserved for orientation and their fixed states,
            the asymmetric triple (set, set, unset) in three corners identifies the top-left corner
            """
        if self.o == 0:
            return {}
        return {0:                           CellState.SET,
                self.x * (self.y - 1):       CellState.SET,
                self.x * self.y - 1:         CellState.UNSET}

    def data_cells(self) -> [int]:
        """ the data area indices that hold codeword bits, in scan order """
        reserved = self.orientation_cells()
        cells = [cell for cell in range(self.cells) if cell not in reserved]
        return cells[:self.code_bits]

PROFILES = {profile.name: profile for profile in [
    #             name   m  b  x  y  o  h  s  d
    MarkerProfile('22N', 2, 2, 2, 2, 0, 2, 1,  1),  # [0..2)
    MarkerProfile('33O', 2, 2, 3, 3, 3, 3, 0,  3),  # [0..8)
    MarkerProfile('33N', 2, 2, 3, 3, 0, 4, 0,  5),  # [0..32)
    MarkerProfile('44O', 2, 2, 4, 4, 3, 4, 0,  9),  # [0..512)
    MarkerProfile('44N', 2, 2, 4, 4, 0, 4, 1, 11),  # [0..2048)
    MarkerProfile('55O', 2, 2, 5, 5, 3, 5, 0, 17),
    MarkerProfile('55N', 2, 2, 5, 5, 0, 5, 0, 20),
    MarkerProfile('66O', 2, 2, 6, 6, 3, 6, 0, 27),
    MarkerProfile('66N', 2, 2, 6, 6, 0, 6, 0, 30),
    ]}

def names() -> [str]:
    """ all the known profile names """
    return list(PROFILES.keys())

def lookup(name) -> MarkerProfile:
    """ get the named profile, there is no default """
    profile = PROFILES.get(name) if isinstance(name, str) else None
    if profile is None:
        raise errors.InvalidProfile('invalid marker type {!r}, must be one of {}'.format(name, names()))
    return profile

def new_matrix(profile: MarkerProfile) -> [CellState]:
    """ make a data area matrix with only the orientation cells assigned """
    matrix = [CellState.EMPTY for _ in range(profile.cells)]
    for cell, state in profile.orientation_cells().items():
        matrix[cell] = state
    return matrix
