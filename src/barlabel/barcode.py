"""Entry points of the barcode engine.

Every function here is fail-silent: malformed content or a degenerate
box results in no geometry, never in an exception.
"""
from enum import Enum

from .encoding import Code128, Ean13, UpcA
from .image.bars import rectangles


class BarcodeType(Enum):
    CODE128 = "code128"
    EAN13 = "ean13"
    UPCA = "upca"


encoding_classes = {
    BarcodeType.CODE128: Code128,
    BarcodeType.EAN13: Ean13,
    BarcodeType.UPCA: UpcA,
}


def validate(barcode_type, text):
    """Check that text can be encoded as barcode_type

    :param BarcodeType barcode_type:    Symbology
    :param str text:                    Barcode content
    :return:                            True if valid"""
    encoding = encoding_classes.get(barcode_type) \
        if isinstance(barcode_type, BarcodeType) else None
    if encoding is None or text is None:
        return False
    if not isinstance(text, (str, bytes)):
        return False
    return encoding.validate(text)


def geometry(barcode_type, text, x, y, width, height):
    """Rectangles to fill to draw the barcode inside the box.
Empty if the content is invalid or the box has no area."""
    if width <= 0 or height <= 0 or not validate(barcode_type, text):
        return []
    encoding = encoding_classes[barcode_type]
    return rectangles(
        encoding.glyphs(text),
        x, y, width, height,
        quiet_zone=encoding.quiet_zone,
        margin_modules=encoding.margin_modules
    )


def draw(canvas, x, y, width, height, barcode_type, text):
    """Paint the barcode on canvas, bracketed by save/restore of
the canvas state. Does nothing for invalid content or box."""
    bars = geometry(barcode_type, text, x, y, width, height)
    if not bars:
        return
    canvas.save_state()
    try:
        for bar in bars:
            canvas.fill_rectangle(bar.x, bar.y, bar.width, bar.height)
    finally:
        canvas.restore_state()
