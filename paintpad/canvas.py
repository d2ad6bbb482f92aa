"""The drawing surface: image state, tool dispatch and undo history."""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from PIL import Image

from .drawingtools import BrushStyle, DrawingContext, DrawingTools, Mode

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


class Signal:
    """A minimal observer list."""

    def __init__(self) -> None:
        self._callbacks: List[Callable] = []

    def connect(self, callback: Callable) -> None:
        """Register ``callback`` to be called on every emit."""
        self._callbacks.append(callback)

    def emit(self, *args) -> None:
        """Call every connected callback with ``args``."""
        for callback in list(self._callbacks):
            callback(*args)


class Canvas:
    """Holds the current image and turns pointer input into drawing."""

    MAX_HISTORY = 5

    def __init__(self, tools: Optional[DrawingTools] = None) -> None:
        self.tools = tools if tools is not None else DrawingTools()
        self.image: Optional[Image.Image] = None
        self.color: Tuple[int, int, int] = BLACK
        self.brush_size = 5
        self.draw_mode = Mode.FREE_DRAW
        self.brush_style = BrushStyle.NORMAL
        self.undo_available = Signal()
        self.redo_available = Signal()
        self.canvas_changed = Signal()
        self._original: Optional[Image.Image] = None
        self._is_drawing = False
        self._start_point = (0, 0)
        self._last_point = (0, 0)
        self._undo_stack: List[Optional[Image.Image]] = []
        self._redo_stack: List[Optional[Image.Image]] = []

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size if self.image is not None else (0, 0)

    def create(self, size) -> None:
        """Start a fresh white image of ``size``."""
        self.image = Image.new("RGB", tuple(size), WHITE)
        self.canvas_changed.emit()

    def clear(self) -> None:
        """Paint the whole image white."""
        self._save_state()
        if self.image is not None:
            self.image.paste(WHITE, (0, 0, *self.image.size))
        self.canvas_changed.emit()

    def resize(self, new_size) -> None:
        """Change the image size, keeping existing content at the top left."""
        self._save_state()
        resized = Image.new("RGB", tuple(new_size), WHITE)
        if self.image is not None:
            resized.paste(self.image, (0, 0))
        self.image = resized
        self.canvas_changed.emit()

    def load(self, image: Image.Image) -> None:
        """Replace the current image with ``image``."""
        self._save_state()
        self.image = image.convert("RGB")
        self.canvas_changed.emit()

    def start_drawing(self, point) -> None:
        """Begin a stroke or shape at ``point``."""
        point = tuple(point)
        if self.image is None or not self._inside(point):
            return
        self._is_drawing = True
        self._start_point = point
        self._last_point = point

        if self.draw_mode is Mode.FILL:
            self.tools.fill_area(self.image, self._context(point, point), point)
            self._is_drawing = False
            self._save_state()
            self.canvas_changed.emit()
        elif self.draw_mode is Mode.FREE_DRAW:
            self._save_state()
            self.tools.draw_freely(self.image, self._context(point, point), point)
            self.canvas_changed.emit()
        else:
            self._original = self.image.copy()

    def continue_drawing(self, point) -> None:
        """Extend the stroke, or redraw the shape preview, to ``point``."""
        point = tuple(point)
        if not self._is_drawing or self.image is None:
            return
        if self.draw_mode is Mode.FREE_DRAW:
            self.tools.draw_freely(self.image, self._context(self._last_point, point), point)
            self._last_point = point
            self.canvas_changed.emit()
        elif self.draw_mode is not Mode.FILL and self._original is not None:
            self.image = self._original.copy()
            self._last_point = point
            self._draw_shape(self._context(self._start_point, self._last_point))
            self.canvas_changed.emit()

    def end_drawing(self, point) -> None:
        """Finish the stroke or commit the shape at ``point``."""
        if not self._is_drawing:
            return
        self._last_point = tuple(point)
        self._is_drawing = False
        if self.draw_mode in (Mode.FREE_DRAW, Mode.FILL) or self._original is None:
            return
        self.image = self._original.copy()
        self._save_state()
        self._draw_shape(self._context(self._start_point, self._last_point))
        self.canvas_changed.emit()

    def undo(self) -> None:
        """Step back to the previous saved image."""
        if not self._undo_stack:
            return
        self._redo_stack.append(self.image)
        self.image = self._undo_stack.pop()
        self._emit_history()
        self.canvas_changed.emit()

    def redo(self) -> None:
        """Step forward to the image undone last."""
        if not self._redo_stack:
            return
        self._undo_stack.append(self.image)
        self.image = self._redo_stack.pop()
        self._emit_history()
        self.canvas_changed.emit()

    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    def _inside(self, point) -> bool:
        x, y = point
        width, height = self.image.size
        return 0 <= x < width and 0 <= y < height

    def _context(self, start, last) -> DrawingContext:
        return DrawingContext(
            self.color, self.brush_size, self.draw_mode, self.brush_style, start, last
        )

    def _draw_shape(self, context: DrawingContext) -> None:
        painters = {
            Mode.LINE: self.tools.draw_line,
            Mode.RECTANGLE: self.tools.draw_rectangle,
            Mode.ELLIPSE: self.tools.draw_ellipse,
        }
        painter = painters.get(self.draw_mode)
        if painter is not None:
            painter(self.image, context)

    def _save_state(self) -> None:
        if len(self._undo_stack) >= self.MAX_HISTORY:
            del self._undo_stack[0]
        self._undo_stack.append(self.image.copy() if self.image is not None else None)
        self._redo_stack.clear()
        self._emit_history()

    def _emit_history(self) -> None:
        self.undo_available.emit(self.can_undo())
        self.redo_available.emit(self.can_redo())