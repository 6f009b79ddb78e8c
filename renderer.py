from __future__ import annotations
import math
from typing import Iterable, Optional
from bitmap import PixelBuffer, write_pixel
from colors import WHITE
from errors import InvalidCommandError, NullReferenceError
from geometry import Circle, Command, Rectangle, Triangle, clamp


class Renderer:
    def __init__(self, buffer: PixelBuffer):
        if buffer is None:
            raise NullReferenceError("no pixel buffer to draw into")
        self.buffer = buffer
        self.width = buffer.width
        self.height = buffer.height

    def _set_pixel(self, x: int, y: int, color: int):
        write_pixel(self.buffer, x, y, color)

    def render(self, commands: Iterable[Command]):
        for command in commands:
            self.apply_command(command)

    def apply_command(self, command: Command):
        if command is None:
            raise NullReferenceError("no command to draw")

        if isinstance(command, Rectangle):
            self._render_rect(command)
        elif isinstance(command, Circle):
            self._render_circle(command)
        elif isinstance(command, Triangle):
            self._render_triangle(command)
        else:
            raise InvalidCommandError(f"cannot draw {type(command).__name__}")

    def _render_rect(self, rect: Rectangle):
        # off-canvas pixels would be no-ops, skip iterating them
        min_x = max(0, rect.x)
        max_x = min(self.width, rect.x + rect.width)
        min_y = max(0, rect.y)
        max_y = min(self.height, rect.y + rect.height)

        for px in range(min_x, max_x):
            for py in range(min_y, max_y):
                self._set_pixel(px, py, rect.color)

    def _render_circle(self, circle: Circle):
        r = circle.radius
        if r <= 0:
            return

        # one vertical strip per column with |px - x| < r, clipped to the canvas
        min_x = max(0, circle.x - r + 1)
        max_x = min(self.width, circle.x + r)
        for px in range(min_x, max_x):
            dx = abs(px - circle.x)
            dy_max = math.isqrt(r * r - dx * dx)
            min_y = max(0, circle.y - dy_max)
            max_y = min(self.height, circle.y + dy_max + 1)
            for py in range(min_y, max_y):
                self._set_pixel(px, py, circle.color)

    def _draw_span(self, x1: float, x2: float, y: int, color: int):
        if y < 0 or y >= self.height:
            return

        if x1 > x2:
            x1, x2 = x2, x1

        start = clamp(math.floor(x1 + 0.5), 0, self.width)
        end = clamp(math.floor(x2 + 0.5) + 1, 0, self.width)
        for px in range(start, end):
            self._set_pixel(px, y, color)

    def _render_triangle(self, triangle: Triangle):
        # stable sort so that top.y <= mid.y <= bottom.y
        (ax, ay), (bx, by), (cx, cy) = sorted(triangle.vertices(), key=lambda v: v[1])

        dx_top_mid = (bx - ax) / (by - ay) if by > ay else 0.0
        dx_top_bottom = (cx - ax) / (cy - ay) if cy > ay else 0.0
        dx_mid_bottom = (cx - bx) / (cy - by) if cy > by else 0.0

        for py in range(max(ay, 0), min(cy, self.height - 1) + 1):
            long_x = ax + dx_top_bottom * (py - ay)
            if py < by:
                short_x = ax + dx_top_mid * (py - ay)
            else:
                short_x = bx + dx_mid_bottom * (py - by)
            self._draw_span(short_x, long_x, py, triangle.color)


def apply_command(buffer: PixelBuffer, command: Command):
    Renderer(buffer).apply_command(command)


def render_scene(commands: Iterable[Command], width: int, height: int,
                 background_color: Optional[int] = WHITE) -> PixelBuffer:
    buffer = PixelBuffer(width, height)
    renderer = Renderer(buffer)

    if background_color is not None:
        renderer.apply_command(Rectangle(id=0, color=background_color, x=0, y=0,
                                         width=width, height=height))

    renderer.render(commands)
    return buffer
