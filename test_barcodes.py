import io

import pytest

from barlabel.barcode import BarcodeType, draw, geometry
from barlabel.encoding import Code128, Ean13
from barlabel.image import RecordingCanvas, Rectangle
from barlabel.image.bars import rectangles, runs
from barlabel.image.pdf import PdfCanvas
from barlabel.image.svg import SvgCanvas


def modules(text):
    return tuple(int(char) for char in text)


def test_runs():
    assert list(runs(modules("11011001100"))) == [(0, 2), (3, 2), (7, 2)]
    assert list(runs(modules("0110"))) == [(1, 2)]
    assert list(runs(modules("011"))) == [(1, 2)]
    assert list(runs(modules("1"))) == [(0, 1)]
    assert list(runs(modules("000"))) == []
    assert list(runs(())) == []


def test_code128_first_glyph_is_merged():
    # pattern of code 0 alone, no quiet zone, one module per point
    bars = rectangles([modules("11011001100")], 0, 0, 11, 5)
    assert bars == [
        Rectangle(0, 0, 2, 5),
        Rectangle(3, 0, 2, 5),
        Rectangle(7, 0, 2, 5),
    ]


def test_code128_geometry():
    # 7 glyphs of 11 modules plus 11 spare modules -> one point per module
    bars = geometry(BarcodeType.CODE128, "AB12", 100, 20, 88, 30)
    start_b = bars[:3]
    assert start_b == [
        Rectangle(110, 20, 2, 30),
        Rectangle(113, 20, 1, 30),
        Rectangle(116, 20, 1, 30),
    ]
    expected = sum(
        len(list(runs(glyph))) for glyph in Code128.glyphs("AB12")
    )
    assert len(bars) == expected
    # stop glyph ends one spare module before the box edge
    last = bars[-1]
    assert last.x + last.width == pytest.approx(100 + 88 - 1 - 1)


def test_ean13_module_coverage():
    glyphs = Ean13.glyphs("4006381333931")
    dark = sum(sum(glyph) for glyph in glyphs)
    for width in (95, 123.4, 1000, 0.5):
        module_width = width / 95
        bars = geometry(BarcodeType.EAN13, "4006381333931", 7, 3, width, 40)
        assert sum(bar.width for bar in bars) == pytest.approx(
            dark * module_width
        )
        assert bars[0].x == pytest.approx(7)
        assert bars[-1].x + bars[-1].width == pytest.approx(7 + width)
        assert all(bar.y == 3 and bar.height == 40 for bar in bars)
        for left, right in zip(bars, bars[1:]):
            assert left.x + left.width < right.x


def test_upca_geometry_matches_ean13():
    assert geometry(BarcodeType.UPCA, "036000291452", 0, 0, 190, 50) == \
        geometry(BarcodeType.EAN13, "0036000291452", 0, 0, 190, 50)


def test_geometry_is_repeatable():
    first = geometry(BarcodeType.CODE128, "hello world", 0, 0, 300, 50)
    second = geometry(BarcodeType.CODE128, "hello world", 0, 0, 300, 50)
    assert first == second


def test_geometry_of_invalid_input_is_empty():
    assert geometry(BarcodeType.EAN13, "123", 0, 0, 100, 10) == []
    assert geometry(BarcodeType.EAN13, "4006381333931", 0, 0, 0, 10) == []
    assert geometry(BarcodeType.EAN13, "4006381333931", 0, 0, 100, -1) == []


def test_draw_brackets_with_save_and_restore():
    canvas = RecordingCanvas()
    draw(canvas, 10, 10, 190, 50, BarcodeType.EAN13, "4006381333931")
    assert canvas.calls[0] == ("save_state",)
    assert canvas.calls[-1] == ("restore_state",)
    assert canvas.rectangles == geometry(
        BarcodeType.EAN13, "4006381333931", 10, 10, 190, 50
    )
    assert len(canvas.calls) == len(canvas.rectangles) + 2


def test_draw_degenerate_box_draws_nothing():
    canvas = RecordingCanvas()
    draw(canvas, 0, 0, 0, 10, BarcodeType.EAN13, "4006381333931")
    draw(canvas, 0, 0, 10, 0, BarcodeType.CODE128, "abc")
    assert canvas.calls == []


def test_draw_invalid_content_draws_nothing():
    canvas = RecordingCanvas()
    draw(canvas, 0, 0, 100, 10, BarcodeType.EAN13, "123")
    draw(canvas, 0, 0, 100, 10, BarcodeType.UPCA, "036000291450")
    draw(canvas, 0, 0, 100, 10, BarcodeType.CODE128, "")
    draw(canvas, 0, 0, 100, 10, BarcodeType.CODE128, None)
    assert canvas.calls == []


class FailingCanvas(RecordingCanvas):
    def fill_rectangle(self, x, y, width, height):
        raise RuntimeError("surface closed")


def test_draw_restores_state_on_error():
    canvas = FailingCanvas()
    with pytest.raises(RuntimeError):
        draw(canvas, 0, 0, 100, 10, BarcodeType.CODE128, "abc")
    assert canvas.calls == [("save_state",), ("restore_state",)]


def test_svg_canvas():
    canvas = SvgCanvas(190, 50)
    draw(canvas, 0, 0, 190, 50, BarcodeType.EAN13, "4006381333931")
    out = io.StringIO()
    canvas.write(out)
    svg = out.getvalue()
    assert svg.startswith("<svg")
    assert svg.rstrip().endswith("</svg>")
    bars = geometry(BarcodeType.EAN13, "4006381333931", 0, 0, 190, 50)
    # background plus one rect per bar
    assert svg.count("<rect") == len(bars) + 1
    assert svg.count("<g>") == 1
    assert svg.count("</g>") == 1
    # first guard bar spans the whole height from the top
    assert '<rect x="0.0" y="0" width="2.0" height="50"' in svg


def test_svg_canvas_unbalanced_restore():
    with pytest.raises(ValueError):
        SvgCanvas(10, 10).restore_state()


def test_pdf_canvas(tmp_path):
    path = str(tmp_path / "barcode.pdf")
    canvas = PdfCanvas(path, pagesize=(300, 100))
    draw(canvas, 10, 10, 280, 80, BarcodeType.CODE128, "AB12")
    canvas.end_page()
    canvas.save()
    assert canvas.page_count == 1
    with open(path, "rb") as pdf_file:
        assert pdf_file.read(5) == b"%PDF-"
