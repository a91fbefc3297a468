""" Relative luminosity of pixels
    0 is black, 1 is white, see http://www.w3.org/TR/WCAG20/#relativeluminancedef for the formula.
    Two levels of caching are used:
        colour -> luminosity, which is a pure function so can live as long as its owner,
        pixel x,y -> luminosity, which is only valid for one bitmap so lives for one recognize run.
    The recognizer reads the same pixels several times (threshold pass, row scan, column scan, cell sampling)
    and the same colours recur densely, hence the caches.
"""

import const

def channel(value: int) -> float:
    """ linearise one 0..255 colour channel """
    chan = value / const.MAX_LUMINANCE
    if chan <= const.LUMINOSITY_KNEE:
        return chan / const.LUMINOSITY_SLOPE
    return ((chan + const.LUMINOSITY_OFFSET) / (1 + const.LUMINOSITY_OFFSET)) ** const.LUMINOSITY_GAMMA

def relative(r: int, g: int, b: int) -> float:
    """ the relative luminosity of the given colour """
    red, green, blue = const.LUMINOSITY_WEIGHTS
    return channel(r) * red + channel(g) * green + channel(b) * blue

class ColourCache:
    """ colour to luminosity lookup, keyed by the packed RGB value """

    def __init__(self):
        self.cache = {}

    def __len__(self):
        return len(self.cache)

    def luminosity(self, r: int, g: int, b: int) -> float:
        key = (int(r) << 16) | (int(g) << 8) | int(b)
        lum = self.cache.get(key)
        if lum is None:
            lum = relative(int(r), int(g), int(b))
            self.cache[key] = lum
        return lum

class PixelCache:
    """ pixel to luminosity lookup for one bitmap, keyed by the packed x,y """

    def __init__(self, bitmap, colours: ColourCache):
        self.bitmap  = bitmap
        self.colours = colours
        self.stride  = max(bitmap.width, 1)
        self.cache   = {}

    def __len__(self):
        return len(self.cache)

    def luminosity(self, x: int, y: int) -> float:
        key = y * self.stride + x
        lum = self.cache.get(key)
        if lum is None:
            r, g, b, _ = self.bitmap.get_pixel(x, y)
            lum = self.colours.luminosity(r, g, b)
            self.cache[key] = lum
        return lum
