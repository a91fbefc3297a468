""" Find candidate marker areas
    This module is responsible for finding the rectangles in an image that look like a marker.
    A marker seen along any row (or column) that crosses its top (or left) border looks like:
        light (the margin) -> dark (at least marker-size pixels of border) -> light (the margin again)
    So every row is run through a little state machine that tracks where it is in that pattern:
        OTHER  --light--> PROLOG   (got the light lead-in)
        PROLOG --dark---> BODY     (a dark run starts, note where)
        BODY   --light--> EPILOG   (the dark run ends, keep it if it is long enough)
        EPILOG --dark---> OTHER    (no lead-in for anything that follows immediately)
    The same machine is then run down the columns where rows found something. A marker's top-left border
    corner is where a row run and a column run start at the same pixel with (about) the same length.
    Markers are assumed to be axis aligned and not perspective distorted.
"""

import enum

import const
import utils

class State(enum.Enum):
    OTHER  = 'other'
    PROLOG = 'prolog'
    BODY   = 'body'
    EPILOG = 'epilog'

def transition(state: State, is_dark: bool, is_light: bool) -> State:
    """ get the next scan state for a pixel, this is the same for rows and columns """
    if state == State.OTHER:
        if is_light:
            return State.PROLOG
    elif state == State.PROLOG:
        if is_dark:
            return State.BODY
    elif state == State.BODY:
        if is_light:
            return State.EPILOG
    elif state == State.EPILOG:
        if not is_light:
            return State.OTHER
    return state

class Run:
    """ a dark run found by a scan, x,y is where it started, length is in pixels """

    def __init__(self, x: int, y: int, length: int=1):
        self.x      = x
        self.y      = y
        self.length = length

    def __repr__(self):
        return 'Run({}x{}y, {})'.format(self.x, self.y, self.length)

class Area:
    """ a candidate marker rectangle in image pixel co-ordinates, x,y is the top-left of its border """

    def __init__(self, x: int, y: int, w: int, h: int):
        self.x = x
        self.y = y
        self.w = w
        self.h = h

    def __repr__(self):
        return 'Area({}x{}y, {}w x {}h)'.format(self.x, self.y, self.w, self.h)

    def __eq__(self, other):
        return isinstance(other, Area) and self.as_dict() == other.as_dict()

    def as_dict(self) -> dict:
        return {'x': self.x, 'y': self.y, 'w': self.w, 'h': self.h}

    def encloses(self, other) -> bool:
        """ determine if other lies within this area and is not the same area """
        if other == self:
            return False
        return (self.x <= other.x and other.x + other.w <= self.x + self.w and
                self.y <= other.y and other.y + other.h <= self.y + self.h)

class Scanner:
    """ feed pixels along one row or column and collect the dark runs that qualify """

    def __init__(self, pixels, threshold: float, min_length: int):
        self.pixels     = pixels      # luminosity lookup
        self.threshold  = threshold   # below this is dark, otherwise light
        self.min_length = min_length  # shortest run that counts
        self.state      = State.OTHER
        self.run        = None        # the run being measured
        self.runs       = []          # qualifying runs

    def restart(self):
        """ start a new line """
        self.state = State.OTHER
        self.run   = None

    def visit(self, x: int, y: int):
        lum = self.pixels.luminosity(x, y)
        state = transition(self.state, lum < self.threshold, lum >= self.threshold)
        if state == self.state:
            if self.run is not None:
                self.run.length += 1
            return
        self.state = state
        if state == State.BODY:
            self.run = Run(x, y)
        elif state == State.EPILOG:
            if self.run.length >= self.min_length:
                self.runs.append(self.run)
            self.run = None

def intersect(rows: [Run], columns: [Run],
              tolerance: float=const.AREA_TOLERANCE, minimum: int=const.MIN_AREA_TOLERANCE) -> [Area]:
    """ make areas from the row and column runs that start at the same place and are about the same length,
        duplicates are not merged
        """
    starts = {}
    for column in columns:
        starts.setdefault((column.x, column.y), []).append(column)
    areas = []
    for row in rows:
        for column in starts.get((row.x, row.y), []):
            if utils.within(row.length, column.length, tolerance, minimum):
                areas.append(Area(row.x, row.y, row.length, column.length))
    return areas

class Locator:

    def __init__(self, bitmap, profile, pixels, region: (int, int, int, int)=None, detect_dark_light=False,
                 logger=None):
        self.bitmap            = bitmap
        self.profile           = profile
        self.pixels            = pixels  # luminosity cache for this bitmap
        if region is None:
            region = (0, 0, bitmap.width, bitmap.height)
        self.region            = region  # x, y, width, height of the scan window
        self.detect_dark_light = detect_dark_light
        self.logger            = logger
        self.marker_size       = profile.marker_size
        self.threshold         = None
        self.rows              = None
        self.columns           = None
        self.areas             = None

    def find_threshold(self) -> float:
        """ find the dark/light threshold, either by assuming a full luminosity range
            or by finding the darkest and lightest pixels in the scan window,
            the latter also primes the luminosity cache for all the scans to come
            """
        if self.threshold is not None:
            return self.threshold
        darkest  = const.DARKEST
        lightest = const.LIGHTEST
        if self.detect_dark_light:
            extremes = [const.LIGHTEST, const.DARKEST]

            def visit(x, y):
                lum = self.pixels.luminosity(x, y)
                if lum < extremes[0]:
                    extremes[0] = lum
                if lum > extremes[1]:
                    extremes[1] = lum

            x, y, width, height = self.region
            self.bitmap.scan_area(x, y, width, height, visit)
            darkest, lightest = extremes
        self.threshold = (lightest - darkest) / 2
        if self.logger is not None:
            self.logger.log('Threshold {:.3f} (darkest {:.3f}, lightest {:.3f})'.format(self.threshold, darkest, lightest))
        return self.threshold

    def scan_rows(self) -> [Run]:
        """ find all the qualifying dark runs along the rows of the scan window """
        if self.rows is not None:
            return self.rows
        scanner = Scanner(self.pixels, self.find_threshold(), self.marker_size)
        x, y, width, height = self.region
        for row in range(y, y + height - self.marker_size):
            scanner.restart()
            self.bitmap.scan_area(x, row, width, 1, scanner.visit)
        self.rows = scanner.runs
        if self.logger is not None:
            self.logger.log('Found {} horizontal runs'.format(len(self.rows)))
        return self.rows

    def scan_columns(self) -> [Run]:
        """ find all the qualifying dark runs down the columns that had row runs """
        if self.columns is not None:
            return self.columns
        scanner = Scanner(self.pixels, self.find_threshold(), self.marker_size)
        _, y, _, height = self.region
        for column in sorted(set(run.x for run in self.scan_rows())):
            scanner.restart()
            self.bitmap.scan_area(column, y, 1, height, scanner.visit)
        self.columns = scanner.runs
        if self.logger is not None:
            self.logger.log('Found {} vertical runs'.format(len(self.columns)))
        return self.columns

    def big_enough(self, area: Area) -> bool:
        """ determine if the given area has room for marker-size cells of at least MIN_CELL_PIXELS each """
        smallest = self.marker_size * const.MIN_CELL_PIXELS
        return area.w >= smallest and area.h >= smallest

    def locate(self) -> [Area]:
        """ find all the candidate marker areas """
        if self.areas is not None:
            return self.areas
        areas = intersect(self.scan_rows(), self.scan_columns())
        self.areas = [area for area in areas if self.big_enough(area)]
        if self.logger is not None:
            self.logger.log('Found {} candidate areas ({} too small)'.
                            format(len(self.areas), len(areas) - len(self.areas)))
            for area in self.areas:
                self.logger.log('  {}'.format(area))
        return self.areas

def locate(bitmap, profile, pixels, region=None, detect_dark_light=False, logger=None) -> [Area]:
    """ find the candidate marker areas for the given profile in the given bitmap """
    return Locator(bitmap, profile, pixels, region, detect_dark_light, logger).locate()
