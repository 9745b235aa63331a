"""JSON layout of a label page.

Layout entries keep their text as written in the layout file, text is
substituted from a CSV row only when a page is drawn.
"""
import json
import logging
import os
from collections import namedtuple

from reportlab.lib.pagesizes import A3, A4, A5, LEGAL, LETTER, landscape, \
    portrait
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFError, TTFont

from .errors import LayoutError


logger = logging.getLogger(__name__)

MAX_CONFIG_SIZE = 10 * 1024 * 1024
MAX_FIELD_COUNT = 1000
MAX_LINE_COUNT = 1000
MAX_CUSTOM_FONTS = 100
MAX_TEXT_LENGTH = 1024

DEFAULT_FONT = "Helvetica-Bold"
DEFAULT_LINE_WIDTH = 3.0

PAGE_SIZES = {
    "A3": A3,
    "A4": A4,
    "A5": A5,
    "LETTER": LETTER,
    "LEGAL": LEGAL,
}
ORIENTATIONS = ("portrait", "landscape")
ALIGNMENTS = ("left", "center", "right")
HEX_CODE_MARKERS = ("HEX_CODE", "RANDOM_HEX")


class Page(namedtuple("Page", ["size", "orientation", "line_width"])):
    __slots__ = ()

    @property
    def pagesize(self):
        size = PAGE_SIZES[self.size]
        if self.orientation == "landscape":
            return landscape(size)
        return portrait(size)


CustomFont = namedtuple("CustomFont", ["name", "file"])
Field = namedtuple("Field", [
    "x_start", "x_end", "y_start", "y_end", "text", "font_size",
    "font_name", "wrap", "align", "max_length"
])
Line = namedtuple("Line", ["x_start", "y_start", "x_end", "y_end", "width"])
QRCodeEntry = namedtuple("QRCodeEntry", ["x", "y", "size", "text", "enabled"])
BarcodeEntry = namedtuple("BarcodeEntry", [
    "x", "y", "width", "height", "text", "type_name"
])


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _number(value, default=0.0):
    return float(value) if _is_number(value) else default


def _string(value, default=""):
    return value if isinstance(value, str) else default


def _limited(items, limit, what):
    if len(items) > limit:
        logger.warning(
            "Too many %s (%d), limiting to %d", what, len(items), limit
        )
        return items[:limit]
    return items


def resolve_text(text, data, row_index, hex_code, max_length=0):
    """Substitute layout text for a CSV row.

    "$name" becomes the value of CSV column name, HEX_CODE and
    RANDOM_HEX become the hex code of the label, anything else
    is kept as it is.

    :param str text:        Text from the layout
    :param data:            CsvData or None
    :param int row_index:   Row being drawn
    :param str hex_code:    Random code of the label
    :param int max_length:  Truncate CSV values longer than this, 0 for
                            no limit
    """
    if text.startswith("$") and data is not None \
            and 0 <= row_index < data.row_count:
        name = text[1:]
        value = data.value(row_index, name)
        if value is None:
            return text
        if max_length > 0 and len(value) > max_length:
            logger.info("Truncated field %r", name)
            return value[:max_length]
        return value
    if text in HEX_CODE_MARKERS:
        return hex_code
    return text


def read_document(path):
    """Read and parse a JSON layout file"""
    try:
        size = os.path.getsize(path)
        if size > MAX_CONFIG_SIZE:
            raise LayoutError(
                "Config file too large: {} bytes (max: {})".format(
                    size, MAX_CONFIG_SIZE
                )
            )
        with open(path, "rb") as config_file:
            raw = config_file.read()
    except OSError as e:
        raise LayoutError(
            "Cannot open config file {}: {}".format(path, e.strerror)
        ) from e
    try:
        return json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as e:
        raise LayoutError(
            "Error parsing JSON config file {}: {}".format(path, e)
        ) from e


def check_structure(document):
    if not isinstance(document, dict):
        raise LayoutError("Config must be a JSON object")
    if not isinstance(document.get("page"), dict):
        raise LayoutError("Missing 'page' section in config")
    if not isinstance(document.get("fields"), list):
        raise LayoutError("Missing or invalid 'fields' array in config")


class Layout:
    """Parsed layout of one label page.

    :param dict document:   Decoded JSON layout
    """

    def __init__(self, document):
        check_structure(document)
        self.document = document
        self.page = self._load_page(document["page"])
        self.default_font, self.custom_fonts = self._load_fonts(
            document.get("fonts")
        )
        self.fields = self._load_fields(document["fields"])
        self.lines = self._load_lines(document.get("lines"))
        self.qr_code = self._load_qr_code(document.get("qr_code"))
        self.barcodes = self._load_barcodes(document.get("barcodes"))

    @classmethod
    def load(cls, path):
        return cls(read_document(path))

    @staticmethod
    def _load_page(page):
        size = _string(page.get("size"), "A4")
        if size not in PAGE_SIZES:
            size = "A4"
        orientation = _string(page.get("orientation"), "portrait")
        if orientation not in ORIENTATIONS:
            orientation = "portrait"
        line_width = _number(page.get("line_width"), DEFAULT_LINE_WIDTH)
        if line_width <= 0:
            logger.warning("line_width must be positive, using default %s",
                           DEFAULT_LINE_WIDTH)
            line_width = DEFAULT_LINE_WIDTH
        return Page(size, orientation, line_width)

    @staticmethod
    def _load_fonts(fonts):
        if not isinstance(fonts, dict):
            return DEFAULT_FONT, []
        default = _string(fonts.get("default")) or DEFAULT_FONT
        custom = fonts.get("custom_fonts")
        if not isinstance(custom, list):
            return default, []
        custom_fonts = []
        for entry in _limited(custom, MAX_CUSTOM_FONTS, "custom fonts"):
            if not isinstance(entry, dict):
                continue
            name = _string(entry.get("name"))
            file = _string(entry.get("file"))
            if name and file:
                # TrueType fonts are embedded as Unicode subsets, a layout
                # "encoding" key is ignored
                custom_fonts.append(CustomFont(name, file))
        return default, custom_fonts

    @staticmethod
    def _load_fields(fields):
        loaded = []
        required = ("x_start", "x_end", "y_start", "y_end", "font_size")
        for i, entry in enumerate(
                _limited(fields, MAX_FIELD_COUNT, "fields")):
            if not isinstance(entry, dict):
                continue
            if not all(_is_number(entry.get(key)) for key in required):
                logger.warning(
                    "Field %d: missing/wrong type in required numeric field. "
                    "Skipping.", i
                )
                continue
            wrap = entry.get("wrap")
            if isinstance(wrap, bool):
                pass
            elif _is_number(wrap):
                wrap = int(wrap) != 0
            else:
                wrap = False
            align = _string(entry.get("align"), "left")
            if align not in ALIGNMENTS:
                align = "left"
            max_length = entry.get("max_length")
            if _is_number(max_length):
                max_length = min(max(int(max_length), 0), MAX_TEXT_LENGTH)
            else:
                max_length = 0
            loaded.append(Field(
                float(entry["x_start"]),
                float(entry["x_end"]),
                float(entry["y_start"]),
                float(entry["y_end"]),
                _string(entry.get("text")),
                float(entry["font_size"]),
                _string(entry.get("font_name")),
                wrap,
                align,
                max_length
            ))
        return loaded

    @staticmethod
    def _load_lines(lines):
        if not isinstance(lines, list):
            return []
        loaded = []
        for i, entry in enumerate(_limited(lines, MAX_LINE_COUNT, "lines")):
            if not isinstance(entry, dict):
                continue
            if entry.get("type") == "horizontal_transform":
                if "y" not in entry:
                    logger.warning(
                        "Missing 'y' for horizontal_transform line, "
                        "using default"
                    )
                y = _number(entry.get("y"))
                x_start = _number(entry.get("x_start"), 0.0)
                x_end = _number(entry.get("x_end"), 841.89)
                y_start = y_end = y
            else:
                x_start = _number(entry.get("x_start"))
                y_start = _number(entry.get("y_start"))
                x_end = _number(entry.get("x_end"))
                y_end = _number(entry.get("y_end"))
            width = 1.0
            if _is_number(entry.get("width")):
                width = float(entry["width"])
                if width <= 0:
                    logger.warning(
                        "Line %d width must be positive, using 1.0", i
                    )
                    width = 1.0
            loaded.append(Line(x_start, y_start, x_end, y_end, width))
        return loaded

    @staticmethod
    def _load_qr_code(qr_code):
        if not isinstance(qr_code, dict):
            return None
        enabled = qr_code.get("enabled", True)
        return QRCodeEntry(
            _number(qr_code.get("x"), 192.0),
            _number(qr_code.get("y"), 1.0),
            _number(qr_code.get("size"), 113.4),
            _string(qr_code.get("text")),
            enabled is not False
        )

    @staticmethod
    def _load_barcodes(barcodes):
        if not isinstance(barcodes, list):
            return []
        loaded = []
        required = ("x", "y", "width", "height", "type")
        for i, entry in enumerate(
                _limited(barcodes, MAX_FIELD_COUNT, "barcodes")):
            if not isinstance(entry, dict) or \
                    not all(key in entry for key in required) or \
                    not isinstance(entry["type"], str):
                logger.warning(
                    "Missing required barcode field in barcode %d, skipping",
                    i
                )
                continue
            loaded.append(BarcodeEntry(
                _number(entry["x"]),
                _number(entry["y"]),
                _number(entry["width"]),
                _number(entry["height"]),
                _string(entry.get("text")),
                entry["type"]
            ))
        return loaded

    def register_fonts(self):
        """Register custom TrueType fonts with reportlab.

        :return:    Names of fonts registered"""
        registered = []
        for font in self.custom_fonts:
            try:
                pdfmetrics.registerFont(TTFont(font.name, font.file))
            except (TTFError, OSError) as e:
                logger.warning("Could not load font file %s: %s",
                               font.file, e)
                continue
            logger.info("Loaded font %s from %s", font.name, font.file)
            registered.append(font.name)
        return registered

    def fields_for(self, data, row_index, hex_code):
        return [
            field._replace(text=resolve_text(
                field.text, data, row_index, hex_code, field.max_length
            ))
            for field in self.fields
        ]

    def qr_code_for(self, data, row_index, hex_code):
        if self.qr_code is None:
            return None
        return self.qr_code._replace(text=resolve_text(
            self.qr_code.text, data, row_index, hex_code
        ))

    def barcodes_for(self, data, row_index, hex_code):
        return [
            barcode._replace(text=resolve_text(
                barcode.text, data, row_index, hex_code
            ))
            for barcode in self.barcodes
        ]


def check_layout(path):
    """Validate a layout file without drawing anything.

    :return:    Exit status, 0 if the layout can be used"""
    logger.info("Validating configuration: %s", path)
    try:
        document = read_document(path)
        check_structure(document)
    except LayoutError as e:
        logger.error("%s", e)
        return 1

    page = document["page"]
    size = page.get("size")
    if isinstance(size, str) and size not in PAGE_SIZES:
        logger.warning("Unknown page size: %s", size)
    orientation = page.get("orientation")
    if isinstance(orientation, str) and orientation not in ORIENTATIONS:
        logger.warning(
            "Unknown orientation: %s (use 'portrait' or 'landscape')",
            orientation
        )

    fonts = document.get("fonts")
    custom = fonts.get("custom_fonts") if isinstance(fonts, dict) else None
    if isinstance(custom, list):
        for entry in custom:
            file = entry.get("file") if isinstance(entry, dict) else None
            if not isinstance(file, str):
                continue
            if os.path.isfile(file):
                logger.info("Font file OK: %s", file)
            else:
                logger.warning("Font file not found: %s", file)

    fields = document["fields"]
    logger.info("Found %d field definitions", len(fields))
    for i, entry in enumerate(fields):
        if not isinstance(entry, dict) or not all(
                key in entry
                for key in ("x_start", "x_end", "y_start", "y_end")):
            logger.warning("Field %d missing required coordinates", i)

    logger.info("Configuration is valid: %s", path)
    return 0
