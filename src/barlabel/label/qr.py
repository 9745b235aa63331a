import logging

import qrcode
from qrcode.exceptions import DataOverflowError

from ..image.squares import squares


logger = logging.getLogger(__name__)


def qr_matrix(text):
    """Module matrix of the smallest QR code holding text with medium
error correction, without quiet zone. First row is the top of the code.

    :return:    List of rows of booleans"""
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        border=0
    )
    qr.add_data(text)
    qr.make(fit=True)
    return qr.get_matrix()


def draw_qr(canvas, x, y, size, text):
    """Draw a QR code as a size x size square with bottom left
corner at x, y. Nothing is drawn for empty text or size."""
    if not text or size <= 0:
        return
    try:
        matrix = qr_matrix(text)
    except (DataOverflowError, ValueError):
        logger.warning("QR code text too long (%d characters), skipping",
                       len(text))
        return
    modules = len(matrix)
    if modules == 0:
        return
    scale = size / modules
    canvas.save_state()
    try:
        for column, row, width, height in squares(matrix):
            canvas.fill_rectangle(
                x + column * scale,
                y + (modules - row - height) * scale,
                width * scale,
                height * scale
            )
    finally:
        canvas.restore_state()
