""" Recognize markers in an image
    The steps are:
        find the dark/light threshold (see locator.py),
        find candidate areas by scanning rows then columns (see locator.py),
        sample the cells of each area (see sampler.py),
        decode the cells into a number (see decoder.py).
    An area that does not decode is dropped, the others are still reported. No areas is not an error.
    Results are a dict of 'markers', a list of one dict per marker found, in the order found.
    Each marker has its 'value' and only those diagnostic extras that were asked for:
        'area'   - the x, y, w, h of the marker (border included) in image pixels
        'matrix' - the sampled cells, row-major, 1 is set
        'grid'   - the pixels of every cell (see sampler.draw_grid to make it an image)
        'errors' - True iff any cell was misread (a codeword bit corrected, a border or orientation cell wrong)
    When timing is asked for there is also 'timing': the total and per-step milliseconds.
    Overlapping areas are not merged, but an area that lies inside a marker already found is skipped.
"""

import errors
import markers
import bitmap as bitmaps
import luminosity
import locator
import sampler
import decoder
import utils

class Params:
    """ recognizer options,
        the scan window is x, y, width, height in pixels, a negative x or y is measured from the far edge,
        a width or height of 0 means up to the far edge
        """

    DEFAULTS = {'scan_x':            0,
                'scan_y':            0,
                'scan_width':        0,
                'scan_height':       0,
                'detect_dark_light': False,
                'provide_area':      False,
                'provide_matrix':    False,
                'provide_errors':    False,
                'provide_grid':      False,
                'provide_timing':    False}

    def __init__(self, **options):
        for name, value in Params.DEFAULTS.items():
            setattr(self, name, value)
        for name, value in options.items():
            if name not in Params.DEFAULTS:
                raise errors.InvalidOption('unknown option {!r}, must be one of {}'.
                                           format(name, list(Params.DEFAULTS.keys())))
            setattr(self, name, value)

    def window(self, width: int, height: int) -> (int, int, int, int):
        """ get the scan window within an image of the given size, clipped to the image """
        x = width  + int(self.scan_x) if self.scan_x < 0 else int(self.scan_x)
        y = height + int(self.scan_y) if self.scan_y < 0 else int(self.scan_y)
        x = min(max(x, 0), width)
        y = min(max(y, 0), height)
        w = int(self.scan_width)  if self.scan_width  > 0 else width
        h = int(self.scan_height) if self.scan_height > 0 else height
        return x, y, min(w, width - x), min(h, height - y)

class Recognizer:

    def __init__(self, profile_name: str, logger=None, **options):
        self.profile = markers.lookup(profile_name)
        self.params  = Params(**options)
        self.logger  = logger
        self.decoder = decoder.Decoder(profile_name, logger)
        self.colours = luminosity.ColourCache()  # pure so can be kept across images

    def recognize(self, image) -> dict:
        """ find and decode all the markers in the given image,
            image is a Bitmap (or anything that behaves like one) or a canvas buffer
            """
        if not hasattr(image, 'get_pixel'):
            image = bitmaps.Bitmap(image)
        params = self.params
        timer  = utils.Timer(params.provide_timing)
        pixels = luminosity.PixelCache(image, self.colours)  # only valid for this image
        region = params.window(image.width, image.height)
        if self.logger is not None:
            self.logger.push('recognize')
            self.logger.log('Scanning {} in {}x{} window {} of a {}x{} image'.
                            format(self.profile.name, region[2], region[3], region[:2], image.width, image.height))

        finder = locator.Locator(image, self.profile, pixels, region, params.detect_dark_light, self.logger)
        timer.start()
        threshold = finder.find_threshold()
        timer.stop()
        timer.start()
        finder.scan_rows()
        timer.stop()
        timer.start()
        finder.scan_columns()
        areas = finder.locate()
        timer.stop()

        timer.start()
        reader = sampler.Sampler(image, self.profile, pixels, threshold, self.logger)
        found = []
        decoded = []  # areas of the markers found so far
        for area in areas:
            if any(outer.encloses(area) for outer in decoded):
                # detail inside a marker already found
                if self.logger is not None:
                    self.logger.log('Skipping {}: inside another marker'.format(area))
                continue
            matrix, grid = reader.sample(area, params.provide_grid)
            try:
                value, corrected = self.decoder.decode(matrix)
            except errors.UncorrectableData as error:
                if self.logger is not None:
                    self.logger.log('Dropping {}: {}'.format(area, error))
                continue
            marker = {'value': value}
            if params.provide_area:
                marker['area'] = area.as_dict()
            if params.provide_matrix:
                marker['matrix'] = matrix
            if params.provide_grid:
                marker['grid'] = grid
            if params.provide_errors:
                marker['errors'] = corrected
            found.append(marker)
            decoded.append(area)
        timer.stop()

        result = {'markers': found}
        if params.provide_timing:
            result['timing'] = timer.timing()
        if self.logger is not None:
            self.logger.log('Found {} markers: {}'.format(len(found), [marker['value'] for marker in found]))
            self.logger.pop()
        return result

def recognize(profile_name: str, image, logger=None, **options) -> dict:
    """ find all the markers of the given profile in the given image, see Params for the options """
    return Recognizer(profile_name, logger, **options).recognize(image)
