from .canvas import Canvas, RecordingCanvas, Rectangle
