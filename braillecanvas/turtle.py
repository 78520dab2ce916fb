from __future__ import annotations

import math

from braillecanvas.canvas import Canvas


class Turtle:
    """A pen that walks around a canvas drawing lines.

    The turtle starts with its brush down, facing right (towards +x). Since y
    grows downwards, turning right rotates clockwise on screen.
    """

    __slots__ = ("x", "y", "brush", "rotation", "canvas")

    def __init__(self, x: float = 0.0, y: float = 0.0, canvas: Canvas | None = None) -> None:
        self.x = x
        self.y = y
        self.brush = True
        self.rotation = 0.0
        self.canvas = canvas if canvas is not None else Canvas()

    def up(self) -> Turtle:
        """Lifts the brush."""
        self.brush = False
        return self

    def down(self) -> Turtle:
        """Puts down the brush."""
        self.brush = True
        return self

    def toggle(self) -> Turtle:
        self.brush = not self.brush
        return self

    def forward(self, dist: float) -> Turtle:
        angle = math.radians(self.rotation)
        return self.teleport(self.x + math.cos(angle) * dist, self.y + math.sin(angle) * dist)

    def back(self, dist: float) -> Turtle:
        return self.forward(-dist)

    def teleport(self, x: float, y: float) -> Turtle:
        """Moves the turtle to the given position.

        If the brush is down, a line is drawn between the old position and the new
        one. Positions off the top or left edge are clamped to 0 for drawing.
        """
        if self.brush:
            self.canvas.line(
                max(0, round(self.x)),
                max(0, round(self.y)),
                max(0, round(x)),
                max(0, round(y)),
            )
        self.x = x
        self.y = y
        return self

    def right(self, angle: float) -> Turtle:
        self.rotation += angle
        return self

    def left(self, angle: float) -> Turtle:
        self.rotation -= angle
        return self

    def frame(self) -> str:
        return self.canvas.frame()

    def __repr__(self) -> str:
        return f"Turtle({self.x:.2f}, {self.y:.2f}, rotation={self.rotation}, brush={self.brush})"
