""" Things that can go wrong when drawing or recognizing markers
    Profile and option problems are raised before any work is done.
    Data problems are raised by the encoder for the value being drawn.
    Uncorrectable data is raised by the decoder for a single region only, the recognizer
    catches it and carries on with the other regions.
"""

class MarkerError(Exception):
    """ base of everything we raise """
    pass

class InvalidProfile(MarkerError):
    """ unknown marker profile name """
    pass

class InvalidOption(MarkerError):
    """ unknown or malformed renderer/recognizer option """
    pass

class InvalidData(MarkerError):
    """ value to encode is not an integer """
    pass

class DataOutOfRange(MarkerError):
    """ value to encode does not fit the profile's payload bits """
    pass

class UncorrectableData(MarkerError):
    """ the cells of a region do not make a valid codeword (or a valid marker structure) """
    pass
