""" Hamming coding/decoding functions
    See https://en.wikipedia.org/wiki/Hamming_code for the algorithm.
    Codewords and payloads are digit strings ('0'/'1' characters) MSB first.
    Code bit positions are numbered from 1, the check bits live at the power of 2 positions (1, 2, 4, 8..)
    and the payload bits fill the other positions in order. Each check bit makes the parity of all the
    positions that have its bit set in their position number even.
    This corrects any single bit error. A syndrome that points beyond the end of a shortened code
    (i.e. one whose length is not 2^N-1) reveals an uncorrectable error. Other multi-bit errors are
    indistinguishable from single bit errors and are 'corrected' to the wrong payload.
"""

import errors

class Hamming:

    MAX_PAYLOAD_BITS = 57  # 6 check bits cover 57, this is arbitrary otherwise

    def __init__(self, payload_bits: int, logger=None):
        """ save and validate the code size """
        self.logger       = logger  # iff not None a logging function
        self.payload_bits = payload_bits
        if self.payload_bits < 1 or self.payload_bits > Hamming.MAX_PAYLOAD_BITS:
            raise Exception('payload bits must be 1..{}, given {}'.format(Hamming.MAX_PAYLOAD_BITS, payload_bits))
        self.check_bits = Hamming.check_bits_for(self.payload_bits)
        self.code_bits  = self.payload_bits + self.check_bits  # total bits in the code
        self.positions  = None  # code position (1 based) of each payload bit (lazy evaluation)
        if self.logger is not None:
            self.logger.log('Hamming code: payload bits: {}, check bits: {}, code bits: {}'.
                            format(self.payload_bits, self.check_bits, self.code_bits))

    @staticmethod
    def check_bits_for(payload_bits: int) -> int:
        """ get the number of check bits needed for the given number of payload bits """
        check_bits = 1
        while (1 << check_bits) < (payload_bits + check_bits + 1):
            check_bits += 1
        return check_bits

    @staticmethod
    def is_check(position: int) -> bool:
        """ determine if the given code position is a check bit position (i.e. a power of 2) """
        return (position & (position - 1)) == 0

    def payload_positions(self) -> [int]:
        """ get the code positions of every payload bit, MSB first """
        if self.positions is None:
            self.positions = [position for position in range(1, self.code_bits + 1)
                              if not Hamming.is_check(position)]
        return self.positions

    @staticmethod
    def is_digits(digits: str, length: int) -> bool:
        """ determine if the given digits are a binary digit string of the given length """
        return len(digits) == length and all(digit in '01' for digit in digits)

    @staticmethod
    def syndrome(code: [int]) -> int:
        """ XOR of the positions of all the set bits, code is indexed by position (index 0 is unused) """
        syndrome = 0
        for position in range(1, len(code)):
            if code[position] == 1:
                syndrome ^= position
        return syndrome

    def encode(self, digits: str) -> str:
        """ return the codeword digit string for the given payload digit string """
        if not Hamming.is_digits(digits, self.payload_bits):
            raise errors.InvalidData('payload must be {} binary digits, given {!r}'.format(self.payload_bits, digits))
        code = [0 for _ in range(self.code_bits + 1)]
        for digit, position in zip(digits, self.payload_positions()):
            code[position] = int(digit)
        # set each check bit such that the syndrome becomes 0
        syndrome = Hamming.syndrome(code)
        for bit in range(self.check_bits):
            if syndrome & (1 << bit):
                code[1 << bit] = 1
        return ''.join(str(bit) for bit in code[1:])

    def decode(self, digits: str) -> (str, int):
        """ decode with error correction,
            returns the payload digit string and the number of bits corrected (0 or 1),
            raises UncorrectableData if the codeword cannot be corrected
            """
        if not Hamming.is_digits(digits, self.code_bits):
            raise errors.UncorrectableData('codeword must be {} binary digits, given {!r}'.format(self.code_bits, digits))
        code = [0] + [int(digit) for digit in digits]
        syndrome = Hamming.syndrome(code)
        errors_fixed = 0
        if syndrome > self.code_bits:
            raise errors.UncorrectableData('syndrome {} is beyond the {}-bit code {}'.
                                           format(syndrome, self.code_bits, digits))
        if syndrome > 0:
            code[syndrome] ^= 1
            errors_fixed = 1
        payload = ''.join(str(code[position]) for position in self.payload_positions())
        return payload, errors_fixed

codecs = {}  # codecs already made, keyed by payload bits

def make_codec(payload_bits: int, logger=None) -> Hamming:
    """ make (or re-use) a codec for encoding/decoding the given number of payload bits """
    codec = codecs.get(payload_bits)
    if codec is None:
        if logger is not None:
            logger.log('Preparing codec for {} payload bits...'.format(payload_bits))
        codec = Hamming(payload_bits, logger)
        codecs[payload_bits] = codec
    return codec

def to_digits(value: int, bits: int) -> str:
    """ get the given value as a digit string of the given width, MSB first """
    digits = ''
    for _ in range(bits):
        digits = ('1' if (value & 1) == 1 else '0') + digits
        value >>= 1
    return digits

def from_digits(digits: str) -> int:
    """ undo what to_digits did """
    value = 0
    for digit in digits:
        value = (value << 1) | (1 if digit == '1' else 0)
    return value


if __name__ == "__main__":
    """ test harness """
    import markers
    import utils

    logger = utils.Logger('hamming.log', 'hamming')
    logger.log('Hamming test harness')
    for profile in markers.PROFILES.values():
        codec = make_codec(profile.d, logger)
        if codec.check_bits != profile.h:
            logger.log('  {}: profile has {} check bits, codec needs {}'.format(profile.name, profile.h, codec.check_bits))
        passes = 0
        fails = 0
        for value in range(min(profile.payload_range, 1 << 12)):
            payload = to_digits(value, profile.d)
            codeword = codec.encode(payload)
            for flip in range(-1, codec.code_bits):
                bad = list(codeword)
                if flip >= 0:
                    bad[flip] = '1' if bad[flip] == '0' else '0'
                decoded, _ = codec.decode(''.join(bad))
                if decoded == payload:
                    passes += 1
                else:
                    fails += 1
        logger.log('  {}: {}-bit flips: {} good, {} bad'.format(profile.name, 1, passes, fails))
    logger.log('Done')
    logger.close()
