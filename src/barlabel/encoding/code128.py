from .encoding import BarcodeEncoding


class Code128(BarcodeEncoding):
    """
    Encoder for Code128 barcode, B variant only.
    """
    # stripe patterns written as a number, 1 bit for black stripe,
    # 0 bit for white background, 11 bits long.
    # 103-105 are start codes, 106 is the stop code
    pattern = (
        1740, 1644, 1638, 1176, 1164, 1100, 1224, 1220, 1124, 1608, 1604,
        1572, 1436, 1244, 1230, 1484, 1260, 1254, 1650, 1628, 1614, 1764,
        1652, 1902, 1868, 1836, 1830, 1892, 1844, 1842, 1752, 1734, 1590,
        1304, 1112, 1094, 1416, 1128, 1122, 1672, 1576, 1570, 1464, 1422,
        1134, 1496, 1478, 1142, 1910, 1678, 1582, 1768, 1762, 1774, 1880,
        1862, 1814, 1896, 1890, 1818, 1914, 1602, 1930, 1328, 1292, 1200,
        1158, 1068, 1062, 1424, 1412, 1232, 1218, 1076, 1074, 1554, 1616,
        1978, 1556, 1146, 1340, 1212, 1182, 1508, 1268, 1266, 1956, 1940,
        1938, 1758, 1782, 1974, 1400, 1310, 1118, 1512, 1506, 1960, 1954,
        1502, 1518, 1886, 1966, 1668, 1680, 1692, 1594
    )

    start_B = 104
    stop = 106

    # code of the space character, used for bytes outside of alphabet B
    blank = 0

    code_bitlength = 11

    quiet_zone = 10
    # left quiet zone plus one spare module
    margin_modules = 11

    @classmethod
    def _enc_B(cls, byte):
        """Encode single byte from B alphabet

        :param int byte:    A byte value
        :return:            Character code integer"""
        if 32 <= byte <= 126:
            return byte - 32
        return cls.blank

    @classmethod
    def checksum(cls, codes):
        """Modulo 103 checksum. The start code is counted once,
every following code is weighted by its position.

        :param codes:   Start code followed by data codes
        :return:        Checksum code, 0-102"""
        checksum = 0
        for i, code in enumerate(codes):
            checksum += code * max(1, i)
        return checksum % 103

    @classmethod
    def encode(cls, data):
        """Encodes data to a full code sequence
[start, data..., checksum, stop].

        :param data:    str or bytes, str is encoded as UTF-8
        :return:        List of pattern table indices"""
        if isinstance(data, str):
            data = data.encode("utf-8")
        codes = [cls.start_B]
        codes.extend(cls._enc_B(byte) for byte in data)
        codes.append(cls.checksum(codes))
        codes.append(cls.stop)
        return codes

    @classmethod
    def validate(cls, data):
        return data is not None and len(data) > 0

    @classmethod
    def glyphs(cls, data):
        return [
            cls.pattern_bits(cls.pattern[code], cls.code_bitlength)
            for code in cls.encode(data)
        ]
