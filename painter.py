""" Paint markers onto images
    The encoder works in cell units and calls a paint(x, y, colour) function for each cell.
    A CellPainter turns that into pixels on a canvas buffer, each cell becoming a square of
    pixel_size pixels offset by the marker position.
    A Renderer works out the canvas size and the marker position (from a handle corner and a position,
    negative positions are from the far edge) and returns the finished image.
"""

import const
import errors
import canvas
import markers
import encoder

class CellPainter:
    """ paint cells as pixel_size squares onto a canvas buffer """

    def __init__(self, buffer, origin_x: int, origin_y: int, pixel_size: int):
        self.buffer     = buffer
        self.origin_x   = origin_x
        self.origin_y   = origin_y
        self.pixel_size = pixel_size
        self.painted    = 0  # count of cells actually painted (diagnostic aid)

    def set(self, x: int, y: int, colour):
        """ paint cell x,y, a transparent colour is not painted """
        if colour is const.TRANSPARENT:
            return
        canvas.fill(self.buffer,
                    self.origin_x + x * self.pixel_size,
                    self.origin_y + y * self.pixel_size,
                    self.pixel_size, self.pixel_size, colour)
        self.painted += 1

    def render(self):
        return self.buffer

class Renderer:
    """ render a marker onto a new image """

    def __init__(self, profile_name: str=const.DEFAULT_PROFILE,
                 canvas_width: int=0, canvas_height: int=0,
                 position_x: int=0, position_y: int=0, handle: str='tl',
                 pixel_size: int=10,
                 colour_bg=const.TRANSPARENT, colour_fg=const.BLACK, canvas_colour=const.WHITE,
                 logger=None):
        self.profile = markers.lookup(profile_name)
        if handle not in const.HANDLES:
            raise errors.InvalidOption('invalid marker handle {!r}, must be one of {}'.format(handle, const.HANDLES))
        if int(pixel_size) < 1:
            raise errors.InvalidOption('pixel size must be at least 1, not {}'.format(pixel_size))
        self.canvas_width  = int(canvas_width)
        self.canvas_height = int(canvas_height)
        self.position_x    = int(position_x)
        self.position_y    = int(position_y)
        self.handle        = handle
        self.pixel_size    = int(pixel_size)
        self.colour_bg     = colour_bg
        self.colour_fg     = colour_fg
        self.canvas_colour = canvas_colour
        self.logger        = logger
        self.encoder       = encoder.Encoder(profile_name, colour_fg, colour_bg, logger)

    def placement(self) -> (int, int, int, int):
        """ get the canvas width and height and the marker top-left x,y on it (all in pixels) """
        marker_width  = self.profile.width  * self.pixel_size
        marker_height = self.profile.height * self.pixel_size
        width  = self.canvas_width  if self.canvas_width  > 0 else marker_width
        height = self.canvas_height if self.canvas_height > 0 else marker_height
        x = width  + self.position_x if self.position_x < 0 else self.position_x
        y = height + self.position_y if self.position_y < 0 else self.position_y
        if self.handle in ('tr', 'br'):
            x -= marker_width
        if self.handle in ('bl', 'br'):
            y -= marker_height
        return width, height, x, y

    def render(self, value, buffer=None):
        """ draw the marker for value, onto the given buffer or a new one, and return the buffer """
        width, height, x, y = self.placement()
        if buffer is None:
            buffer = canvas.new(width, height, self.canvas_colour)
        painter = CellPainter(buffer, x, y, self.pixel_size)
        self.encoder.encode(value, painter.set)
        if self.logger is not None:
            self.logger.log('Rendered {} as {} at {}x{}y on a {}x{} canvas ({} cells painted)'.
                            format(value, self.profile.name, x, y, width, height, painter.painted))
        return painter.render()

def render(profile_name: str, value, pixel_size: int=10, **options):
    """ render a marker of the given profile for value onto a new image, see Renderer for the options """
    return Renderer(profile_name, pixel_size=pixel_size, **options).render(value)
