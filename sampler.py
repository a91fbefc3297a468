""" Sample the cells of a candidate marker area
    The area (the border and data area of a marker) is cut into marker-size x marker-size blocks, the block
    edges are rounded to whole pixels so any area size works. Each block's luminosity is the mean of all its
    pixels but with the pixel at the block centre weighted more than the others, this favours the middle
    of the cell over its edges where neighbouring cells bleed in. A block darker than the threshold is set.
"""

import const
import canvas
import utils

class Sampler:

    def __init__(self, bitmap, profile, pixels, threshold: float, logger=None):
        self.bitmap      = bitmap
        self.profile     = profile
        self.pixels      = pixels  # luminosity cache for this bitmap
        self.threshold   = threshold
        self.logger      = logger
        self.marker_size = profile.marker_size

    def block_luminosity(self, x: int, y: int, width: int, height: int) -> float:
        """ get the centre weighted mean luminosity of the given block """
        centre_x = x + (width >> 1)
        centre_y = y + (height >> 1)
        totals = [0.0, 0]  # weighted luminosity, weights

        def visit(pixel_x, pixel_y):
            if pixel_x == centre_x and pixel_y == centre_y:
                weight = const.CENTRE_WEIGHT
            else:
                weight = 1
            totals[0] += self.pixels.luminosity(pixel_x, pixel_y) * weight
            totals[1] += weight

        self.bitmap.scan_area(x, y, width, height, visit)
        if totals[1] == 0:
            # nothing to see, call it light
            return const.LIGHTEST
        return totals[0] / totals[1]

    def sample(self, area, provide_grid=False) -> ([int], dict):
        """ classify every cell of the given area,
            returns the row-major matrix of 1 (set) or 0 (unset) and, iff asked for, the grid of cell images
            """
        columns = utils.slices(area.w, self.marker_size)
        rows    = utils.slices(area.h, self.marker_size)
        grid = None
        if provide_grid:
            grid = {'w': area.w + (self.marker_size - 1),
                    'h': area.h + (self.marker_size - 1),
                    'cells': []}
        matrix = []
        for j in range(len(rows) - 1):
            for i in range(len(columns) - 1):
                x = area.x + columns[i]
                y = area.y + rows[j]
                width  = columns[i + 1] - columns[i]
                height = rows[j + 1] - rows[j]
                if grid is not None:
                    grid['cells'].append({'i': i, 'j': j,
                                          'x': columns[i], 'y': rows[j], 'w': width, 'h': height,
                                          'data': self.bitmap.get_image_data(x, y, width, height)})
                lum = self.block_luminosity(x, y, width, height)
                matrix.append(1 if lum < self.threshold else 0)
        if self.logger is not None:
            self.logger.log('Sampled {}: {}'.format(area, ''.join(str(bit) for bit in matrix)))
        return matrix, grid

def draw_grid(grid, gutter=const.RED):
    """ assemble the cell images of a grid into one image with a 1 pixel gutter between cells """
    image = canvas.new(grid['w'], grid['h'], gutter)
    for cell in grid['cells']:
        data = cell['data']
        if len(data.shape) == 3 and data.shape[2] == 4:
            data = data[:, :, :3]
        canvas.paste(image, canvas.colourize(data), cell['x'] + cell['i'], cell['y'] + cell['j'])
    return image
