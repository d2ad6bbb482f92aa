# paintpad

paintpad is a small raster paint program. You draw on a white canvas with a
choice of tools and brush styles, step back and forth through an undo history,
and open and save images in common formats such as PNG, JPEG and BMP.

## Features

- **Tools**: free drawing, straight line, rectangle, ellipse and flood fill.
  The line, rectangle and ellipse tools show a preview while you drag and
  commit the shape when you release the mouse button.
- **Brush styles**: normal (a solid round pen), spray paint (random dots
  scattered within the brush radius) and neon (layered strokes added onto the
  image so they look like they glow).
- **Colours**: a fixed palette of red, blue, green, yellow and black, a custom
  colour picker, and buttons for the five colours you picked most recently.
- **Brush size**: a slider from 1 to 50. The default is 5.
- **History**: up to five undo steps. Redo works until the next change.
- **Files**: *New* creates a blank canvas of any size from 1×1 to 3000×3000
  (the dialog starts at 400×600). *Open...* loads an image. *Save...* writes
  the current canvas. *Clear* paints the canvas white again. The keyboard
  shortcuts are Ctrl+N, Ctrl+O and Ctrl+S.

## Installation

```
pip install .
```

The window uses Tkinter, which ships with most Python installations. If
Tkinter is missing, starting the window raises `RuntimeError`. The drawing
engine described below works without it.

## Running

```
paintpad
```

The command has no options. It opens the window and returns when you close it.

## Using the drawing engine directly

`paintpad.canvas.Canvas` holds the image as a Pillow RGB image and turns
pointer input into drawing. You can drive it without any window:

```python
from paintpad.canvas import Canvas
from paintpad.drawingtools import BrushStyle, DrawingTools, Mode

canvas = Canvas(DrawingTools())
canvas.create((200, 100))
canvas.canvas_changed.connect(lambda: print("canvas changed"))
canvas.undo_available.connect(lambda ok: print("undo available:", ok))

canvas.color = (255, 0, 0)
canvas.brush_size = 3
canvas.draw_mode = Mode.RECTANGLE
canvas.brush_style = BrushStyle.NORMAL
canvas.start_drawing((10, 10))
canvas.continue_drawing((50, 40))
canvas.end_drawing((80, 60))

canvas.undo()
canvas.redo()
canvas.image.save("shape.png")
```

- `Canvas.create`, `clear`, `resize` and `load` set up or replace the image.
  `resize` keeps the existing content at the top left and fills the new area
  with white.
- `start_drawing`, `continue_drawing` and `end_drawing` take `(x, y)` points.
  A stroke that starts outside the image is ignored.
- `undo`, `redo`, `can_undo` and `can_redo` manage the history, which holds at
  most `Canvas.MAX_HISTORY` (5) images.
- The `canvas_changed`, `undo_available` and `redo_available` attributes are
  `Signal` objects. Callbacks registered with `connect` are called on every
  `emit`.

`paintpad.drawingtools.DrawingTools` draws on an image in place, following a
`DrawingContext` (colour, brush size, mode, brush style, start point and last
point). Pass a `random.Random` to its constructor to make spray paint
repeatable. `flood_fill(image, start_point, target_color, replacement_color)`
replaces the 4-connected region of one colour. The flood fill tool in
`DrawingTools.fill_area` does nothing when you click the point (0, 0).

`paintpad.colorhistory.ColorHistory` keeps the list of recent colours, newest
first. If you add the colour that is already first, nothing changes and `add`
returns `False`. Any other colour goes to the front, and when the history is
full the oldest colour drops off the end.

`paintpad.app` has small helpers that the window uses: `tool_mode`,
`palette_color`, `color_name` (which formats a colour as `#rrggbb`) and
`validate_canvas_size` (which raises `ValueError` for sides outside 1–3000).

## Tests

```
pip install ".[test]"
pytest
```