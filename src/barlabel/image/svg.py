from .canvas import Canvas


class SvgCanvas(Canvas):
    """Canvas collecting filled rectangles into a .svg image.

    Coordinates passed in have the origin in the bottom left corner
    like PDF, they are flipped when the image is written.
    """
    file_open_mode = "w"

    SVG_OPEN = '<svg xmlns="http://www.w3.org/2000/svg"\n'\
        '    version="1.1" xmlns:xlink="http://www.w3.org/1999/xlink"\n'\
        '    width="{width}" height="{height}">\n'
    SVG_CLOSE = "</svg>\n"
    RECTANGLE = '    <rect x="{x}" y="{y}" width="{width}"'\
                ' height="{height}" fill="{fill}" />\n'
    GROUP_OPEN = "    <g>\n"
    GROUP_CLOSE = "    </g>\n"

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.elements = []
        self.depth = 0

    def save_state(self):
        self.depth += 1
        self.elements.append(self.GROUP_OPEN)

    def restore_state(self):
        if self.depth == 0:
            raise ValueError("restore_state without matching save_state")
        self.depth -= 1
        self.elements.append(self.GROUP_CLOSE)

    def fill_rectangle(self, x, y, width, height):
        self.elements.append(
            self.RECTANGLE.format(
                x=round(x, 4),
                y=round(self.height - y - height, 4),
                width=round(width, 4),
                height=round(height, 4),
                fill="#000"
            )
        )

    def write(self, image_file):
        image_file.write(
            self.SVG_OPEN.format(width=self.width, height=self.height)
        )
        # white background
        image_file.write(
            self.RECTANGLE.format(
                x=0,
                y=0,
                width=self.width,
                height=self.height,
                fill="#fff"
            )
        )
        for element in self.elements:
            image_file.write(element)
        image_file.write(self.SVG_CLOSE)
