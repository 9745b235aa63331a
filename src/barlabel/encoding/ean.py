from .encoding import BarcodeEncoding


class Ean13(BarcodeEncoding):
    patterns = (
        # A pattern, B pattern, right-hand pattern
        (0b0001101, 0b0100111, 0b1110010),  # 0
        (0b0011001, 0b0110011, 0b1100110),  # 1
        (0b0010011, 0b0011011, 0b1101100),  # 2
        (0b0111101, 0b0100001, 0b1000010),  # 3
        (0b0100011, 0b0011101, 0b1011100),  # 4
        (0b0110001, 0b0111001, 0b1001110),  # 5
        (0b0101111, 0b0000101, 0b1010000),  # 6
        (0b0111011, 0b0010001, 0b1000100),  # 7
        (0b0110111, 0b0001001, 0b1001000),  # 8
        (0b0001011, 0b0010111, 0b1110100)   # 9
    )

    code_bitlength = 7
    length = 13

    # AB pattern chosen by first digit, read from the highest bit.
    # 0 bit for A, 1 bit for B
    parity_patterns = (
        0b000000, 0b001011, 0b001101, 0b001110, 0b010011,
        0b011001, 0b011100, 0b010101, 0b010110, 0b011010
    )

    left_guard = (1, 0, 1)
    center_guard = (0, 1, 0, 1, 0)
    right_guard = (1, 0, 1)

    @classmethod
    def _digits(cls, data):
        return [ord(char) - ord("0") for char in data]

    @classmethod
    def _is_numeric(cls, data):
        return all("0" <= char <= "9" for char in data)

    @classmethod
    def check_digit(cls, data):
        """Check digit computed over the first 12 digits, weighted
1 and 3 from the left.

        :param str data:    12 or 13 digits
        :return:            Check digit integer"""
        checksum = 0
        for i, number in enumerate(cls._digits(data[:12])):
            checksum += number if i % 2 == 0 else 3 * number
        return (10 - checksum % 10) % 10

    @classmethod
    def validate(cls, data):
        if not isinstance(data, str) or len(data) != cls.length:
            return False
        if not cls._is_numeric(data):
            return False
        return cls.check_digit(data) == int(data[-1])

    @classmethod
    def glyphs(cls, data):
        digits = cls._digits(data)
        parity = cls.parity_patterns[digits[0]]
        glyphs = [cls.left_guard]
        for i, number in enumerate(digits[1:7]):
            ab_index = (parity >> (5 - i)) & 1
            glyphs.append(
                cls.pattern_bits(cls.patterns[number][ab_index],
                                 cls.code_bitlength)
            )
        glyphs.append(cls.center_guard)
        for number in digits[7:]:
            glyphs.append(
                cls.pattern_bits(cls.patterns[number][2], cls.code_bitlength)
            )
        glyphs.append(cls.right_guard)
        return glyphs


class UpcA(Ean13):
    """UPC-A, drawn as EAN-13 with a leading zero"""
    length = 12

    @classmethod
    def check_digit(cls, data):
        """Check digit computed over the first 11 digits, weighted
3 and 1 from the left.

        :param str data:    11 or 12 digits
        :return:            Check digit integer"""
        checksum = 0
        for i, number in enumerate(cls._digits(data[:11])):
            checksum += 3 * number if i % 2 == 0 else number
        return (10 - checksum % 10) % 10

    @classmethod
    def glyphs(cls, data):
        return Ean13.glyphs("0" + data)
