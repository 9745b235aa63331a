from .canvas import Rectangle


def runs(pattern):
    """Take a module pattern and yield offset and length of each run of 1

    :param pattern:     Iterable of bits, 1 for bar, 0 for space
    :return:            Yields (start, length) tuples"""
    start = None
    i = 0
    for i, bit in enumerate(pattern):
        if bit and start is None:
            start = i
        elif not bit and start is not None:
            yield start, i - start
            start = None
    if start is not None:
        # glyph ends with a bar
        yield start, i + 1 - start


def rectangles(glyphs, x, y, width, height, quiet_zone=0, margin_modules=0):
    """Geometry of a linear barcode fitted into a box.

    Every run of bar modules within a glyph becomes one rectangle
    spanning the full box height.

    :param glyphs:          Module patterns, left to right
    :param x, y:            Bottom left corner of the box
    :param width, height:   Box size, must be positive
    :param quiet_zone:      Blank modules before the first glyph
    :param margin_modules:  Modules added to the pattern modules
                            when computing module width
    :return:                List of Rectangle"""
    glyphs = [tuple(glyph) for glyph in glyphs]
    total_modules = sum(len(glyph) for glyph in glyphs) + margin_modules
    if total_modules <= 0:
        return []
    module_width = width / total_modules
    out = []
    offset = quiet_zone
    for glyph in glyphs:
        for start, length in runs(glyph):
            out.append(
                Rectangle(
                    x + (offset + start) * module_width,
                    y,
                    length * module_width,
                    height
                )
            )
        offset += len(glyph)
    return out
