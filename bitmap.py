""" Bitmap abstraction for the recognizer
    The recognizer only needs to know the size of the image, the colour of any pixel and how to visit
    every pixel in a rectangle. This wraps a canvas buffer (greyscale, BGR or BGRA in cv2 conventions,
    scaled to 8 bits) to provide that. Anything else that provides the same can be given to the recognizer instead.
"""

import const
import canvas

class Bitmap:

    def __init__(self, buffer):
        self.buffer = canvas.make_8bit(buffer)  # luminosity assumes 0..255 channels
        self.width, self.height = canvas.size(buffer)
        if len(buffer.shape) == 2:
            self.channels = 1
        else:
            self.channels = buffer.shape[2]

    def get_pixel(self, x: int, y: int) -> (int, int, int, int):
        """ get the colour of the pixel at x,y as an RGBA tuple """
        pixel = self.buffer[y, x]  # NB: cv2 x, y are reversed
        if self.channels == 1:
            grey = int(pixel)
            return grey, grey, grey, const.OPAQUE
        if self.channels == 4:
            return int(pixel[2]), int(pixel[1]), int(pixel[0]), int(pixel[3])
        return int(pixel[2]), int(pixel[1]), int(pixel[0]), const.OPAQUE  # NB: cv2 is BGR

    def scan_area(self, x: int, y: int, width: int, height: int, visitor):
        """ call visitor(x, y) for every pixel in the given box (clipped to the image), row by row """
        start_x = max(int(round(x)), 0)
        start_y = max(int(round(y)), 0)
        end_x   = min(int(round(x + width)), self.width)
        end_y   = min(int(round(y + height)), self.height)
        for pixel_y in range(start_y, end_y):
            for pixel_x in range(start_x, end_x):
                visitor(pixel_x, pixel_y)

    def get_image_data(self, x: int, y: int, width: int, height: int):
        """ get a copy of the pixels in the given box """
        return canvas.extract(self.buffer, x, y, width, height)

def load(image_file) -> Bitmap:
    """ load a bitmap from an image file, returns None if it cannot be loaded """
    buffer = canvas.load(image_file)
    if buffer is None:
        return None
    return Bitmap(buffer)
