from abc import ABC, abstractmethod


class BarcodeEncoding(ABC):
    """Linear barcode base class"""

    # modules left blank before the first glyph
    quiet_zone = 0
    # modules added to the glyph modules when splitting the box width
    margin_modules = 0

    @classmethod
    def bits(cls, number, bit_length):
        for shift in range(bit_length - 1, -1, -1):
            yield (number >> shift) & 1

    @classmethod
    def pattern_bits(cls, number, bit_length):
        """Module pattern of a glyph as a tuple, 1 for bar, 0 for space"""
        return tuple(cls.bits(number, bit_length))

    @classmethod
    @abstractmethod
    def validate(cls, data):
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def glyphs(cls, data):
        """Module patterns of all glyphs of the symbol, left to right.

        :param data:    Already validated content
        :return:        List of tuples of bits"""
        raise NotImplementedError

    @classmethod
    def total_modules(cls, glyphs):
        return sum(len(glyph) for glyph in glyphs) + cls.margin_modules
