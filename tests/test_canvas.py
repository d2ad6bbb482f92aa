import pytest
from PIL import Image

from paintpad.canvas import Canvas, Signal
from paintpad.drawingtools import Mode

WHITE = (255, 255, 255)
RED = (255, 0, 0)
BLUE = (0, 0, 255)


@pytest.fixture
def canvas():
    c = Canvas()
    c.create((40, 40))
    c.color = RED
    return c


def blank_bytes(size=(40, 40)):
    return Image.new("RGB", size, WHITE).tobytes()


def test_signal_calls_all_callbacks():
    sig = Signal()
    seen = []
    sig.connect(lambda *a: seen.append(("a", a)))
    sig.connect(lambda *a: seen.append(("b", a)))
    sig.emit(1, 2)
    assert seen == [("a", (1, 2)), ("b", (1, 2))]


def test_create_makes_white_image(canvas):
    assert canvas.size == (40, 40)
    assert canvas.image.tobytes() == blank_bytes()
    assert not canvas.can_undo()
    assert not canvas.can_redo()


def test_new_canvas_has_no_image():
    c = Canvas()
    assert c.image is None
    assert c.size == (0, 0)
    c.start_drawing((1, 1))
    assert not c.can_undo()


def test_free_draw_and_undo_redo(canvas):
    canvas.start_drawing((10, 10))
    canvas.continue_drawing((30, 10))
    canvas.end_drawing((30, 10))
    assert canvas.image.getpixel((20, 10)) == RED
    assert canvas.can_undo()
    drawn = canvas.image.tobytes()
    canvas.undo()
    assert canvas.image.tobytes() == blank_bytes()
    assert canvas.can_redo()
    canvas.redo()
    assert canvas.image.tobytes() == drawn
    assert not canvas.can_redo()


def test_history_is_limited(canvas):
    for _ in range(Canvas.MAX_HISTORY + 2):
        canvas.clear()
    available = []
    for _ in range(Canvas.MAX_HISTORY + 1):
        available.append(canvas.can_undo())
        canvas.undo()
    assert available == [True] * Canvas.MAX_HISTORY + [False]
    assert canvas.can_redo() is True


def test_new_action_clears_redo(canvas):
    canvas.clear()
    canvas.undo()
    assert canvas.can_redo()
    canvas.clear()
    assert not canvas.can_redo()


def test_history_signals(canvas):
    undo_seen, redo_seen, changes = [], [], []
    canvas.undo_available.connect(undo_seen.append)
    canvas.redo_available.connect(redo_seen.append)
    canvas.canvas_changed.connect(lambda: changes.append(True))
    canvas.clear()
    assert undo_seen == [True] and redo_seen == [False]
    canvas.undo()
    assert undo_seen == [True, False] and redo_seen == [False, True]
    assert len(changes) == 2


def test_start_outside_does_nothing(canvas):
    changes = []
    canvas.canvas_changed.connect(lambda: changes.append(True))
    canvas.start_drawing((40, 5))
    canvas.continue_drawing((10, 10))
    canvas.end_drawing((10, 10))
    assert changes == []
    assert not canvas.can_undo()
    assert canvas.image.tobytes() == blank_bytes()


def test_line_preview_is_replaced(canvas):
    canvas.draw_mode = Mode.LINE
    canvas.start_drawing((5, 5))
    canvas.continue_drawing((35, 5))
    assert canvas.image.getpixel((20, 5)) == RED
    assert not canvas.can_undo()
    canvas.continue_drawing((5, 35))
    assert canvas.image.getpixel((20, 5)) == WHITE
    canvas.end_drawing((5, 35))
    assert canvas.image.getpixel((5, 20)) == RED
    assert canvas.image.getpixel((20, 5)) == WHITE
    canvas.undo()
    assert canvas.image.tobytes() == blank_bytes()


def test_rectangle_then_fill(canvas):
    canvas.brush_size = 1
    canvas.draw_mode = Mode.RECTANGLE
    canvas.start_drawing((5, 5))
    canvas.end_drawing((30, 30))
    canvas.color = BLUE
    canvas.draw_mode = Mode.FILL
    canvas.start_drawing((15, 15))
    assert canvas.image.getpixel((15, 15)) == BLUE
    assert canvas.image.getpixel((5, 5)) == RED
    assert canvas.image.getpixel((35, 35)) == WHITE


def test_resize_keeps_content(canvas):
    canvas.start_drawing((3, 3))
    canvas.end_drawing((3, 3))
    canvas.resize((60, 70))
    assert canvas.size == (60, 70)
    assert canvas.image.getpixel((3, 3)) == RED
    assert canvas.image.getpixel((55, 65)) == WHITE
    canvas.undo()
    assert canvas.size == (40, 40)


def test_load_replaces_image(canvas):
    picture = Image.new("RGBA", (12, 9), (1, 2, 3, 255))
    canvas.load(picture)
    assert canvas.size == (12, 9)
    assert canvas.image.mode == "RGB"
    assert canvas.image.getpixel((4, 4)) == (1, 2, 3)
    assert canvas.can_undo()
    canvas.undo()
    assert canvas.size == (40, 40)


def test_continue_without_start_is_ignored(canvas):
    canvas.continue_drawing((10, 10))
    canvas.end_drawing((10, 10))
    assert canvas.image.tobytes() == blank_bytes()
    assert not canvas.can_undo()


def test_clear_wipes_drawing(canvas):
    canvas.start_drawing((10, 10))
    canvas.end_drawing((10, 10))
    canvas.clear()
    assert canvas.image.tobytes() == blank_bytes()
    canvas.undo()
    assert canvas.image.getpixel((10, 10)) == RED