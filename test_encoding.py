import random

from barlabel.barcode import BarcodeType, validate
from barlabel.encoding import Code128, Ean13, UpcA


def bit_string(bits):
    return "".join(str(bit) for bit in bits)


def test_code128_table():
    assert len(Code128.pattern) == 107
    for code in Code128.pattern:
        bits = Code128.pattern_bits(code, Code128.code_bitlength)
        assert len(bits) == 11
        assert bits[0] == 1
    assert bit_string(Code128.pattern_bits(Code128.pattern[0], 11)) == \
        "11011001100"
    assert bit_string(Code128.pattern_bits(Code128.pattern[104], 11)) == \
        "11010010000"
    assert bit_string(Code128.pattern_bits(Code128.pattern[106], 11)) == \
        "11000111010"


def test_code128_encode():
    assert Code128.encode("AB12") == [104, 33, 34, 17, 18, 19, 106]
    assert Code128.encode(b"AB12") == [104, 33, 34, 17, 18, 19, 106]


def test_code128_unsupported_bytes_become_blank():
    # tab is outside set B: 104 + 33 + 0 * 2 + 34 * 3 = 239 -> 33
    assert Code128.encode("A\tB") == [104, 33, 0, 34, 33, 106]
    # two UTF-8 bytes, two blanks
    assert Code128.encode("é") == [104, 0, 0, 1, 106]
    # DEL is outside set B too: 104 + 94 + 0 * 2 = 198 -> 95
    assert Code128.encode("~\x7f") == [104, 94, 0, 95, 106]


def test_code128_sequence_shape():
    rng = random.Random(128)
    for _ in range(200):
        text = "".join(
            chr(rng.randint(32, 126)) for _ in range(rng.randint(1, 40))
        )
        codes = Code128.encode(text)
        assert len(codes) == len(text) + 3
        assert codes[0] == Code128.start_B
        assert codes[-1] == Code128.stop
        assert 0 <= codes[-2] <= 102
        assert codes[-2] == Code128.checksum(codes[:-2])
        assert Code128.encode(text) == codes


def test_code128_checksum():
    assert Code128.checksum([104, 33, 34, 17, 18]) == 19
    # start code is not multiplied
    assert Code128.checksum([104]) == 1
    assert Code128.checksum([104, 1, 1]) == (104 + 1 + 2) % 103


def test_code128_glyphs():
    glyphs = Code128.glyphs("AB12")
    assert len(glyphs) == 7
    assert all(len(glyph) == 11 for glyph in glyphs)
    assert Code128.total_modules(glyphs) == 7 * 11 + 11


def test_ean13_check_digit():
    assert Ean13.check_digit("400638133393") == 1
    assert Ean13.check_digit("4006381333931") == 1
    assert Ean13.check_digit("000000000000") == 0


def test_upca_check_digit():
    assert UpcA.check_digit("03600029145") == 2
    assert UpcA.check_digit("036000291452") == 2


def test_validate_scenarios():
    assert validate(BarcodeType.EAN13, "4006381333931")
    assert validate(BarcodeType.UPCA, "036000291452")
    assert validate(BarcodeType.CODE128, "AB12")
    assert not validate(BarcodeType.EAN13, "123")
    assert not validate(BarcodeType.UPCA, "036000291450")
    assert not validate(BarcodeType.EAN13, "4006381333932")
    assert not validate(BarcodeType.EAN13, "400638133393a")
    assert not validate(BarcodeType.EAN13, "036000291452")
    assert not validate(BarcodeType.UPCA, "4006381333931")
    assert not validate(BarcodeType.CODE128, "")


def test_validate_rejects_non_ascii_digits():
    arabic = "٤٠٠٦٣٨١٣٣٣" \
        "٩٣١"
    assert len(arabic) == 13
    assert not validate(BarcodeType.EAN13, arabic)


def test_validate_rejects_unknown_type_and_missing_text():
    assert not validate("code128", "AB12")
    assert not validate(None, "AB12")
    assert not validate(BarcodeType.CODE128, None)
    assert not validate(BarcodeType.EAN13, None)
    assert not validate(BarcodeType.EAN13, 4006381333931)


def test_checksum_round_trip():
    rng = random.Random(13)
    for _ in range(100):
        prefix = "".join(str(rng.randint(0, 9)) for _ in range(12))
        valid = [
            digit for digit in "0123456789"
            if validate(BarcodeType.EAN13, prefix + digit)
        ]
        assert valid == [str(Ean13.check_digit(prefix))]
        upc_prefix = prefix[:11]
        valid = [
            digit for digit in "0123456789"
            if validate(BarcodeType.UPCA, upc_prefix + digit)
        ]
        assert valid == [str(UpcA.check_digit(upc_prefix))]


def test_upca_is_ean13_with_leading_zero():
    rng = random.Random(12)
    for _ in range(50):
        prefix = "".join(str(rng.randint(0, 9)) for _ in range(11))
        upc = prefix + str(UpcA.check_digit(prefix))
        assert validate(BarcodeType.UPCA, upc)
        assert validate(BarcodeType.EAN13, "0" + upc)
        assert UpcA.glyphs(upc) == Ean13.glyphs("0" + upc)


def test_ean13_glyphs():
    glyphs = Ean13.glyphs("4006381333931")
    assert len(glyphs) == 15
    assert Ean13.total_modules(glyphs) == 95
    assert glyphs[0] == (1, 0, 1)
    assert glyphs[7] == (0, 1, 0, 1, 0)
    assert glyphs[14] == (1, 0, 1)
    # first digit 4 selects ABAABB
    assert bit_string(glyphs[1]) == "0001101"  # 0, A
    assert bit_string(glyphs[2]) == "0100111"  # 0, B
    assert bit_string(glyphs[3]) == "0101111"  # 6, A
    assert bit_string(glyphs[4]) == "0111101"  # 3, A
    assert bit_string(glyphs[5]) == "0001001"  # 8, B
    assert bit_string(glyphs[6]) == "0110011"  # 1, B
    # right hand side ignores parity
    assert [bit_string(glyph) for glyph in glyphs[8:14]] == [
        "1000010", "1000010", "1000010", "1110100", "1000010", "1100110"
    ]


def test_ean13_first_digit_zero_uses_only_a_patterns():
    glyphs = Ean13.glyphs("0036000291452")
    for glyph, char in zip(glyphs[1:7], "036000"):
        assert glyph == Ean13.pattern_bits(
            Ean13.patterns[int(char)][0], Ean13.code_bitlength
        )
