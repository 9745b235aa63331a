"""Text fields of a label: single line or wrapped inside a box."""

PADDING = 5.0
LEADING = 1.2
MIN_FONT_SIZE = 6.0


def _line_count(words, width_of, box_width):
    space_width = width_of(" ")
    lines = 1
    line_width = 0.0
    for word in words:
        word_width = width_of(word)
        if line_width == 0:
            line_width = word_width
        elif line_width + space_width + word_width > box_width:
            lines += 1
            line_width = word_width
        else:
            line_width += space_width + word_width
    return lines


def fit_font_size(words, width_for_size, font_size, box_width, box_height):
    """Largest size, going down by one point from font_size, for which
the wrapped words fit the box height. May end below MIN_FONT_SIZE when
nothing fits.

    :param width_for_size:  Function (text, size) -> text width
    """
    size = font_size
    while size >= MIN_FONT_SIZE:
        lines = _line_count(
            words, lambda text: width_for_size(text, size), box_width
        )
        if lines * size * LEADING <= box_height:
            break
        size -= 1.0
    return size


def _x_offset(align, x_start, x_end, box_width, line_width):
    if align == "center":
        return x_start + (box_width - line_width) / 2.0 + PADDING
    if align == "right":
        return x_end - line_width - PADDING
    return x_start + PADDING


def fit_text(canvas, font_name, x_start, x_end, y_start, y_end, text,
             font_size, align="left"):
    """Draw text wrapped on word boundaries inside the box, shrinking
the font until the lines fit. Lines that still don't fit are dropped.

    :param canvas:  PdfCanvas or any object with string_width and
                    draw_string
    """
    if font_size <= 0 or x_end <= x_start or y_end <= y_start:
        return
    box_width = (x_end - x_start) - 2 * PADDING
    box_height = (y_end - y_start) - 2 * PADDING
    if box_width <= 0 or box_height <= 0:
        return

    words = [word for word in text.split(" ") if word]

    def width_for_size(part, size):
        return canvas.string_width(part, font_name, size)

    size = fit_font_size(words, width_for_size, font_size, box_width,
                         box_height)
    line_height = size * LEADING
    y_cursor = y_end - PADDING - size
    bottom = y_start + PADDING

    line = ""
    for word in words:
        candidate = line + " " + word if line else word
        if width_for_size(candidate, size) > box_width and line:
            line_width = width_for_size(line, size)
            canvas.draw_string(
                _x_offset(align, x_start, x_end, box_width, line_width),
                y_cursor, line, font_name, size
            )
            y_cursor -= line_height
            if y_cursor < bottom:
                return
            line = word
        else:
            line = candidate

    if line and y_cursor >= bottom:
        line_width = width_for_size(line, size)
        canvas.draw_string(
            _x_offset(align, x_start, x_end, box_width, line_width),
            y_cursor, line, font_name, size
        )


def place_text(canvas, font_name, x_start, x_end, y_end, text, font_size,
               align="left"):
    """Draw text on a single line at the top of the box"""
    x_offset = x_start + PADDING
    if align == "center":
        line_width = canvas.string_width(text, font_name, font_size)
        box_width = x_end - x_start - 2 * PADDING
        x_offset = x_start + (box_width - line_width) / 2.0
    elif align == "right":
        line_width = canvas.string_width(text, font_name, font_size)
        x_offset = x_end - line_width - PADDING
    canvas.draw_string(x_offset, y_end - font_size - PADDING, text,
                       font_name, font_size)
