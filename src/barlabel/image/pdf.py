from reportlab.lib.pagesizes import A4
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas

from .canvas import Canvas


class PdfCanvas(Canvas):
    """Canvas drawing into a PDF document, one label per page.

    :param output:      File name or binary file object
    :param pagesize:    (width, height) of the first page, in points
    """

    def __init__(self, output, pagesize=A4):
        self.pdf = canvas.Canvas(output, pagesize=pagesize, pageCompression=1)
        self.page_count = 0

    def save_state(self):
        self.pdf.saveState()

    def restore_state(self):
        self.pdf.restoreState()

    def fill_rectangle(self, x, y, width, height):
        self.pdf.rect(x, y, width, height, stroke=0, fill=1)

    def begin_page(self, pagesize):
        self.pdf.setPageSize(pagesize)

    def end_page(self):
        self.pdf.showPage()
        self.page_count += 1

    def set_line_width(self, width):
        self.pdf.setLineWidth(width)

    def line(self, x1, y1, x2, y2):
        self.pdf.line(x1, y1, x2, y2)

    def string_width(self, text, font_name, font_size):
        return pdfmetrics.stringWidth(text, font_name, font_size)

    def draw_string(self, x, y, text, font_name, font_size):
        self.pdf.setFont(font_name, font_size)
        self.pdf.drawString(x, y, text)

    def save(self):
        self.pdf.save()
