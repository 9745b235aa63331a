import logging
import random

from reportlab.pdfbase import pdfmetrics

from .. import barcode
from .qr import draw_qr
from .text import fit_text, place_text


logger = logging.getLogger(__name__)

HEX_LENGTH = 10
HEX_CHARS = "0123456789ABCDEF"


def font_available(font_name):
    return font_name in pdfmetrics.standardFonts or \
        font_name in pdfmetrics.getRegisteredFontNames()


class LabelGenerator:
    """Draws one label page per CSV row.

    :param layout:  Layout of the page
    :param data:    CsvData with the rows
    :param rng:     random.Random used for hex codes
    """

    def __init__(self, layout, data, rng=None):
        self.layout = layout
        self.data = data
        self.rng = rng or random.Random()

    def hex_code(self):
        return "".join(self.rng.choice(HEX_CHARS) for _ in range(HEX_LENGTH))

    def row_range(self, row=None):
        """Indices of rows to draw, all of them when row is None"""
        last = self.data.row_count - 1
        if row is None:
            return range(self.data.row_count)
        if row < 0:
            logger.warning("Row index cannot be negative, using 0")
            row = 0
        if row > last:
            logger.warning(
                "Row %d is beyond CSV row count (%d), using last row",
                row, last
            )
            row = last
        if row < 0:
            return range(0)
        return range(row, row + 1)

    def generate(self, canvas, row=None):
        """Draw pages for all rows, or for a single one.

        :param canvas:  PdfCanvas receiving the pages
        :param row:     Index of the only row to draw, None for all
        :return:        Number of pages drawn"""
        rows = self.row_range(row)
        if row is None:
            logger.info("Processing all %d rows", len(rows))
        else:
            logger.info("Processing row %d only", rows.start)
        pages = 0
        for row_index in rows:
            self.draw_page(canvas, row_index, self.hex_code())
            logger.info("Generated label for row %d", row_index)
            pages += 1
        return pages

    def draw_page(self, canvas, row_index, hex_code):
        layout = self.layout
        canvas.begin_page(layout.page.pagesize)
        canvas.set_line_width(layout.page.line_width)
        for line in layout.lines:
            canvas.set_line_width(line.width)
            canvas.line(line.x_start, line.y_start, line.x_end, line.y_end)

        qr_code = layout.qr_code_for(self.data, row_index, hex_code)
        if qr_code is not None and qr_code.enabled and qr_code.text:
            draw_qr(canvas, qr_code.x, qr_code.y, qr_code.size, qr_code.text)

        for entry in layout.barcodes_for(self.data, row_index, hex_code):
            self.draw_barcode(canvas, entry)

        for field in layout.fields_for(self.data, row_index, hex_code):
            self.draw_field(canvas, field)
        canvas.end_page()

    def draw_barcode(self, canvas, entry):
        try:
            barcode_type = barcode.BarcodeType(entry.type_name)
        except ValueError:
            logger.warning("Unknown barcode type: %s", entry.type_name)
            return
        if not barcode.validate(barcode_type, entry.text):
            logger.warning("Invalid barcode data for type %s: %s",
                           entry.type_name, entry.text)
            return
        barcode.draw(canvas, entry.x, entry.y, entry.width, entry.height,
                     barcode_type, entry.text)

    def field_font(self, field):
        if field.font_name and font_available(field.font_name):
            return field.font_name
        if font_available(self.layout.default_font):
            return self.layout.default_font
        return None

    def draw_field(self, canvas, field):
        if field.x_end <= field.x_start or field.y_end <= field.y_start:
            return
        font_name = self.field_font(field)
        if font_name is None:
            logger.warning("No usable font for field %r", field.text)
            return
        if field.wrap:
            fit_text(canvas, font_name, field.x_start, field.x_end,
                     field.y_start, field.y_end, field.text,
                     field.font_size, field.align)
        else:
            place_text(canvas, font_name, field.x_start, field.x_end,
                       field.y_end, field.text, field.font_size,
                       field.align)
