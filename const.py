"""
Globally useful constants
"""

# region luminance...
MAX_LUMINANCE = 255
# endregion

# region alpha channel...
OPAQUE = MAX_LUMINANCE
TRANSPARENT = None  # a 'colour' that means do not paint at all
# endregion

# region Marker and diagnostic image colours...
# NB: cv2 colour order is BGR not RGB
BLACK      = (  0,   0,   0)
GREY       = ( 64,  64,  64)
WHITE      = (255, 255, 255)
RED        = (  0,   0, 255)
GREEN      = (  0, 255,   0)
# endregion

# region Relative luminosity (see http://www.w3.org/TR/WCAG20/#relativeluminancedef)...
LUMINOSITY_WEIGHTS = (0.2126, 0.7152, 0.0722)  # R, G, B
LUMINOSITY_KNEE    = 0.03928  # channel values at or below this are linear
LUMINOSITY_SLOPE   = 12.92    # divisor for the linear part
LUMINOSITY_OFFSET  = 0.055    # offset for the gamma part
LUMINOSITY_GAMMA   = 2.4
DARKEST  = 0.0  # luminosity of black
LIGHTEST = 1.0  # luminosity of white
# endregion

# region Recognizer tuning...
AREA_TOLERANCE     = 0.10  # max difference of horizontal and vertical run lengths as a fraction of their average
MIN_AREA_TOLERANCE = 1     # ..but never less than this many pixels
CENTRE_WEIGHT      = 5     # weight of the centre pixel of a cell block relative to all others
MIN_CELL_PIXELS    = 2     # narrowest cell (in pixels) a candidate area may have
# endregion

# region Marker profiles...
DEFAULT_PROFILE = '44O'
HANDLES = ('tl', 'tr', 'bl', 'br')  # which marker corner a render position refers to
# endregion

