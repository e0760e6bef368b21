#!/usr/bin/env python3
"""
Signature pad
Records freehand strokes and flattens them to a PNG data URL
"""

import base64
from enum import Enum
from io import BytesIO
from typing import List, Tuple

from PIL import Image, ImageDraw

Point = Tuple[float, float]
Segment = Tuple[Point, Point]

CANVAS_WIDTH = 300
CANVAS_HEIGHT = 80


class DrawingState(str, Enum):
    NOT_DRAWING = "not_drawing"
    DRAWING = "drawing"


class SignaturePad:
    """Drawing surface driven by press/move/release pointer events"""

    def __init__(
        self,
        width: int = CANVAS_WIDTH,
        height: int = CANVAS_HEIGHT,
        line_width: int = 2,
        color: str = "#ffffff",
    ):
        self.width = width
        self.height = height
        self.line_width = line_width
        self.color = color
        self.state = DrawingState.NOT_DRAWING
        self.strokes: List[List[Point]] = []
        self.signature = ""

    @property
    def is_drawing(self) -> bool:
        return self.state is DrawingState.DRAWING

    @property
    def segments(self) -> List[Segment]:
        """Line segments in drawing order"""
        return [
            (stroke[i], stroke[i + 1])
            for stroke in self.strokes
            for i in range(len(stroke) - 1)
        ]

    def press(self, x: float, y: float):
        self.strokes.append([(x, y)])
        self.state = DrawingState.DRAWING

    def move(self, x: float, y: float):
        if not self.is_drawing:
            return
        self.strokes[-1].append((x, y))

    def release(self):
        if not self.is_drawing:
            return
        self.state = DrawingState.NOT_DRAWING
        self.signature = self.to_data_url()

    # Leaving the surface ends the stroke the same way
    leave = release

    def clear(self):
        self.strokes = []
        self.state = DrawingState.NOT_DRAWING
        self.signature = ""

    def undo(self):
        """Drop the last stroke and re-flatten the surface"""
        if self.is_drawing or not self.strokes:
            return
        self.strokes.pop()
        self.signature = self.to_data_url() if self.strokes else ""

    def render(self) -> Image.Image:
        image = Image.new("RGBA", (self.width, self.height), (0, 0, 0, 0))
        draw = ImageDraw.Draw(image)
        radius = self.line_width / 2
        for stroke in self.strokes:
            if len(stroke) < 2:
                continue
            draw.line(stroke, fill=self.color, width=self.line_width, joint="curve")
            # round caps
            for x, y in (stroke[0], stroke[-1]):
                draw.ellipse((x - radius, y - radius, x + radius, y + radius), fill=self.color)
        return image

    def to_data_url(self) -> str:
        buffer = BytesIO()
        self.render().save(buffer, format="PNG")
        return "data:image/png;base64," + base64.b64encode(buffer.getvalue()).decode("ascii")
