""" wrapper around cv2 to hide it from everyone
    these functions manipulate a 2D array of pixels, either luminance values (greyscale) or BGR(A) tuples,
    it uses the opencv library to read/write images and numpy arrays to modify images at the pixel level
    """

import numpy as np
import cv2
import const

""" WARNING
    cv2 and numpy's co-ordinates are backwards from our pov, the 'x' co-ordinate are columns and 'y' rows.
    The functions here use 'x' then 'y' parameters, swapping as required when dealing with cv2 and numpy arrays.
    Colours are in cv2 order, i.e. BGR not RGB.
    """

# region cv2 usage...
def load(image_file):
    """ load a buffer from an image file, greyscale, BGR or BGRA as the file dictates, None if cannot,
        deeper images (e.g. 16-bit PNGs) are scaled to 8 bits
        """
    buffer = cv2.imread(image_file, cv2.IMREAD_UNCHANGED)
    if buffer is None:
        return None
    return make_8bit(buffer)

def unload(buffer, image_file):
    """ unload the given buffer to an image file (the extension determines the format) """
    cv2.imwrite(image_file, buffer)

def make_8bit(buffer):
    """ scale the given buffer to 8 bits per channel, its a no-op if already 8 bit,
        integer buffers are scaled from their full range, floating point ones from 0..1
        """
    if buffer.dtype == np.uint8:
        return buffer
    if np.issubdtype(buffer.dtype, np.integer):
        scale = const.MAX_LUMINANCE / np.iinfo(buffer.dtype).max
    else:
        scale = const.MAX_LUMINANCE
    return cv2.convertScaleAbs(buffer, alpha=scale)

def colourize(buffer):
    """ make grey image into an BGR one,
        returns the image array with 3 channels,
        its a no-op if we're not a grey image
        """
    if len(buffer.shape) == 2:
        image = cv2.merge([buffer, buffer, buffer])
    else:
        image = buffer
    return image

def greyscale(buffer):
    """ make a BGR(A) image into a grey one, its a no-op if we're already grey """
    if len(buffer.shape) == 2:
        return buffer
    if buffer.shape[2] == 4:
        return cv2.cvtColor(buffer, cv2.COLOR_BGRA2GRAY)
    return cv2.cvtColor(buffer, cv2.COLOR_BGR2GRAY)
# endregion

def copy(buffer):
    """ return a copy of the given buffer """
    return np.copy(buffer)

def new(width, height, colour=const.WHITE):
    """ prepare a new buffer of the given size and colour,
        colour may be a luminance (makes a greyscale buffer) or a BGR tuple (makes a colour buffer)
        """
    if type(colour) == tuple:
        return np.full((height, width, len(colour)), colour, dtype=np.uint8)  # NB: numpy arrays follow cv2 conventions
    return np.full((height, width), colour, dtype=np.uint8)

def size(buffer):
    """ return the x,y size of the given buffer """
    max_x = buffer.shape[1]  # NB: cv2/numpy x,y are reversed
    max_y = buffer.shape[0]  # ..
    return max_x, max_y

def putpixel(buffer, x, y, value):
    """ put the pixel of value at x,y
        value may be a greyscale value or a colour tuple
        """
    max_x, max_y = size(buffer)
    if x < 0 or x >= max_x or y < 0 or y >= max_y:
        return
    buffer[y, x] = value  # NB: cv2 x, y are reversed

def fill(buffer, x, y, width, height, value):
    """ fill the box of width x height pixels with its top-left at x,y with the given value,
        the box is clipped to the buffer
        """
    max_x, max_y = size(buffer)
    start_x = max(int(x), 0)
    start_y = max(int(y), 0)
    end_x   = min(int(x + width), max_x)
    end_y   = min(int(y + height), max_y)
    if start_x >= end_x or start_y >= end_y:
        return
    buffer[start_y:end_y, start_x:end_x] = value

def extract(image, x, y, width, height):
    """ extract a width x height box with its top-left at x,y from the given image as a new buffer """
    return np.copy(image[y:y + height, x:x + width])

def paste(buffer, image, x, y):
    """ paste the given image into the buffer with its top-left at x,y """
    width, height = size(image)
    buffer[y:y + height, x:x + width] = image
    return buffer

def rectangle(buffer, top_left, bottom_right, colour=0, thickness=1):
    """ draw a rectangle outline as directed """
    buffer = colourize(buffer)
    cv2.rectangle(buffer, make_int(top_left), make_int(bottom_right), colour, thickness)
    return buffer

def make_int(this):
    """ make the given thing (a number or a tuple of numbers) into integers """
    if type(this) == tuple:
        return tuple([int(round(x)) for x in this])
    else:
        return int(round(this))
