"""Raster drawing primitives: brush styles, shapes and flood fill."""

from __future__ import annotations

import math
import random
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from PIL import Image, ImageChops, ImageDraw

Point = Tuple[int, int]
Color = Tuple[int, int, int]

ELLIPSE_SEGMENTS = 72


class Mode(Enum):
    """The active drawing tool."""

    FREE_DRAW = 0
    LINE = 1
    RECTANGLE = 2
    ELLIPSE = 3
    FILL = 4


class BrushStyle(Enum):
    """How strokes are rendered."""

    NORMAL = 0
    SPRAY_PAINT = 1
    NEON = 2


@dataclass(frozen=True)
class DrawingContext:
    """Everything needed to render one stroke or shape."""

    color: Color
    brush_size: int
    mode: Mode
    brush_style: BrushStyle
    start_point: Point
    last_point: Point

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", tuple(self.color)[:3])
        object.__setattr__(self, "start_point", tuple(self.start_point))
        object.__setattr__(self, "last_point", tuple(self.last_point))


def _stroke(draw: ImageDraw.ImageDraw, start, end, fill, width: int) -> None:
    """Draw a solid segment with round caps (a dot when both ends match)."""
    if width <= 1:
        if start == end:
            draw.point(start, fill=fill)
        else:
            draw.line([start, end], fill=fill, width=1)
        return
    if start != end:
        draw.line([start, end], fill=fill, width=width)
    radius = width / 2
    for x, y in {start, end}:
        draw.ellipse([x - radius, y - radius, x + radius, y + radius], fill=fill)


class DrawingTools:
    """Renders strokes and shapes onto RGB images in place."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def draw_freely(self, image: Image.Image, context: DrawingContext, current_point: Point) -> None:
        """Draw the segment from the context's last point to ``current_point``."""
        self._segment(image, context, context.last_point, tuple(current_point))

    def draw_line(self, image: Image.Image, context: DrawingContext) -> None:
        """Draw a straight line from the start point to the last point."""
        self._segment(image, context, context.start_point, context.last_point)

    def draw_rectangle(self, image: Image.Image, context: DrawingContext) -> None:
        """Draw the outline of the rectangle spanned by the two points."""
        start = context.start_point
        top_right = (context.last_point[0], start[1])
        bottom_left = (start[0], context.last_point[1])
        bottom_right = context.last_point
        for a, b in (
            (start, top_right),
            (top_right, bottom_right),
            (bottom_right, bottom_left),
            (bottom_left, start),
        ):
            self._segment(image, context, a, b)

    def draw_ellipse(self, image: Image.Image, context: DrawingContext) -> None:
        """Draw the ellipse inscribed in the rectangle spanned by the two points."""
        if context.brush_style is BrushStyle.NORMAL:
            start, last = context.start_point, context.last_point
            self._normal(image, context, start, start)
            half = context.brush_size / 2 if context.brush_size > 1 else 0
            x0, x1 = sorted((start[0], last[0]))
            y0, y1 = sorted((start[1], last[1]))
            ImageDraw.Draw(image).ellipse(
                [x0 - half, y0 - half, x1 + half, y1 + half],
                outline=context.color,
                width=max(1, context.brush_size),
            )
        else:
            self._approximate_ellipse(image, context)

    def fill_area(self, image: Image.Image, context: DrawingContext, start_point: Point) -> None:
        """Flood-fill the region around ``start_point`` with the context colour.

        The origin point (0, 0) is treated as unset and fills nothing.
        """
        x, y = start_point
        width, height = image.size
        if (x, y) == (0, 0) or not (0 <= x < width and 0 <= y < height):
            return
        target = tuple(image.getpixel((x, y)))[:3]
        if target == context.color:
            return
        flood_fill(image, (x, y), target, context.color)

    def _segment(self, image, context, start, end) -> None:
        style = context.brush_style
        if style is BrushStyle.NORMAL:
            self._normal(image, context, start, end)
        elif style is BrushStyle.SPRAY_PAINT:
            self._spray(image, context, start, end)
        elif style is BrushStyle.NEON:
            self._neon(image, context, start, end)

    @staticmethod
    def _normal(image, context, start, end) -> None:
        _stroke(ImageDraw.Draw(image), start, end, context.color, context.brush_size)

    def _spray(self, image, context, start, end) -> None:
        draw = ImageDraw.Draw(image)
        size = context.brush_size
        if start == end:
            self._scatter(draw, start, size * 2, size, context.color)
            return
        length = math.dist(start, end)
        half = size // 2
        steps = max(1, int(length / half)) if half > 0 else max(1, int(length))
        for i in range(steps + 1):
            t = i / steps
            base = (
                start[0] + (end[0] - start[0]) * t,
                start[1] + (end[1] - start[1]) * t,
            )
            self._scatter(draw, base, size, half, context.color)

    def _scatter(self, draw, centre, density: int, radius: float, color) -> None:
        for _ in range(density):
            angle = self._rng.random() * 2 * math.pi
            distance = self._rng.random() * radius
            dx = int(distance * math.cos(angle))
            dy = int(distance * math.sin(angle))
            draw.point((round(centre[0] + dx), round(centre[1] + dy)), fill=color)

    @staticmethod
    def _neon(image, context, start, end) -> None:
        r, g, b = context.color
        core = context.brush_size * 0.4
        step = (context.brush_size - core) / 3.0
        for layer in (3, 2, 1, 0):
            width = max(1, round(core + layer * step))
            if layer == 0:
                rgb, alpha = (r, g, b), 255
            else:
                rgb = tuple(min(255, c + layer * 40) for c in (r, g, b))
                alpha = 60 - layer * 15
            premultiplied = tuple(round(c * alpha / 255) for c in rgb)
            mask = Image.new("L", image.size, 0)
            _stroke(ImageDraw.Draw(mask), start, end, 255, width)
            glow = Image.new("RGB", image.size, premultiplied)
            contribution = ImageChops.multiply(glow, Image.merge("RGB", (mask, mask, mask)))
            image.paste(ImageChops.add(image.convert("RGB"), contribution))

    def _approximate_ellipse(self, image, context, segments: int = ELLIPSE_SEGMENTS) -> None:
        left, top = context.start_point
        right, bottom = context.last_point
        width = right - left + 1
        height = bottom - top + 1
        cx = int((left + right) / 2)
        cy = int((top + bottom) / 2)

        def at(angle: float) -> Point:
            return (
                int(cx + (width / 2.0) * math.cos(angle)),
                int(cy + (height / 2.0) * math.sin(angle)),
            )

        for i in range(segments):
            a = at(i * 2 * math.pi / segments)
            b = at((i + 1) * 2 * math.pi / segments)
            self._segment(image, context, a, b)


def flood_fill(image: Image.Image, start_point: Point, target_color, replacement_color) -> None:
    """Replace the 4-connected region of ``target_color`` around ``start_point``."""
    target = tuple(target_color)
    replacement = tuple(replacement_color)
    if target == replacement:
        return
    pixels = image.load()
    width, height = image.size
    queue = deque([tuple(start_point)])
    while queue:
        x, y = queue.popleft()
        if not (0 <= x < width and 0 <= y < height):
            continue
        if tuple(pixels[x, y])[:3] != target:
            continue
        pixels[x, y] = replacement
        queue.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))