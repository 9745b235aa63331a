from abc import ABC, abstractmethod
from collections import namedtuple


Rectangle = namedtuple("Rectangle", ["x", "y", "width", "height"])


class Canvas(ABC):
    """Drawing surface a barcode is painted on.

    Coordinates have their origin in the bottom left corner. Only
    axis-aligned filled rectangles are ever requested by barcode
    rendering, bracketed by save_state / restore_state.
    """

    @abstractmethod
    def save_state(self):
        pass

    @abstractmethod
    def restore_state(self):
        pass

    @abstractmethod
    def fill_rectangle(self, x, y, width, height):
        pass


class RecordingCanvas(Canvas):
    """Canvas remembering every call instead of drawing"""

    def __init__(self):
        self.calls = []
        self.rectangles = []

    def save_state(self):
        self.calls.append(("save_state",))

    def restore_state(self):
        self.calls.append(("restore_state",))

    def fill_rectangle(self, x, y, width, height):
        rectangle = Rectangle(x, y, width, height)
        self.calls.append(("fill_rectangle", rectangle))
        self.rectangles.append(rectangle)
