"""The paint window: canvas view, tool panels, colour palette and file menu."""

from __future__ import annotations

from typing import Optional, Tuple

from PIL import Image

from .canvas import BLACK, Canvas
from .colorhistory import ColorHistory
from .drawingtools import BrushStyle, Mode

try:
    import tkinter as tk
    from tkinter import colorchooser, filedialog, ttk
except ImportError:  # pragma: no cover - Tk missing from this interpreter
    tk = None

DEFAULT_CANVAS_SIZE = (400, 600)
MIN_CANVAS_SIDE = 1
MAX_CANVAS_SIDE = 3000
MIN_BRUSH_SIZE = 1
MAX_BRUSH_SIZE = 50
DEFAULT_BRUSH_SIZE = 5

_TOOLS = {
    "brush": Mode.FREE_DRAW,
    "line": Mode.LINE,
    "rect": Mode.RECTANGLE,
    "ellipse": Mode.ELLIPSE,
    "fill": Mode.FILL,
}

_PALETTE = {
    "red": (255, 0, 0),
    "blue": (0, 0, 255),
    "green": (0, 128, 0),
    "yellow": (255, 255, 0),
    "black": (0, 0, 0),
}

_BRUSH_STYLES = {
    "Normal": BrushStyle.NORMAL,
    "Spray": BrushStyle.SPRAY_PAINT,
    "Neon": BrushStyle.NEON,
}

_OPEN_TYPES = [
    ("Image files", "*.png *.jpg *.jpeg *.bmp"),
    ("All files", "*"),
]
_SAVE_TYPES = [
    ("PNG", "*.png"),
    ("JPEG", "*.jpg *.jpeg"),
    ("BMP", "*.bmp"),
]


def tool_mode(name: str) -> Mode:
    """Return the drawing mode behind a tool button name."""
    try:
        return _TOOLS[name]
    except KeyError:
        raise ValueError(f"unknown tool: {name!r}") from None


def palette_color(name: str) -> Tuple[int, int, int]:
    """Return the RGB colour of a palette button."""
    try:
        return _PALETTE[name]
    except KeyError:
        raise ValueError(f"unknown palette colour: {name!r}") from None


def color_name(color) -> str:
    """Format a colour as ``#rrggbb``."""
    r, g, b = tuple(color)[:3]
    return f"#{r:02x}{g:02x}{b:02x}"


def validate_canvas_size(width, height) -> Tuple[int, int]:
    """Check a requested canvas size and return it as integers."""
    size = (int(width), int(height))
    for side in size:
        if not MIN_CANVAS_SIDE <= side <= MAX_CANVAS_SIDE:
            raise ValueError(
                f"canvas sides must be between {MIN_CANVAS_SIDE} and "
                f"{MAX_CANVAS_SIDE}, got {size[0]}x{size[1]}"
            )
    return size


def _require_tk() -> None:
    if tk is None:
        raise RuntimeError("Tk is not available in this Python installation")


class CanvasView:
    """Shows a :class:`Canvas` and feeds it left-button mouse input."""

    def __init__(self, master, canvas: Canvas) -> None:
        _require_tk()
        self.canvas = canvas
        width, height = canvas.size
        self.widget = tk.Canvas(
            master, width=width, height=height, highlightthickness=0, bd=0
        )
        self._photo = None
        self._item = self.widget.create_image(0, 0, anchor="nw")
        self.widget.bind("<ButtonPress-1>", self._on_press)
        self.widget.bind("<B1-Motion>", self._on_move)
        self.widget.bind("<ButtonRelease-1>", self._on_release)
        canvas.canvas_changed.connect(self.refresh)
        self.refresh()

    def refresh(self) -> None:
        """Redraw the widget from the canvas image and match its size."""
        from PIL import ImageTk

        image = self.canvas.image
        if image is None:
            return
        self._photo = ImageTk.PhotoImage(image)
        width, height = image.size
        self.widget.configure(width=width, height=height)
        self.widget.itemconfigure(self._item, image=self._photo)

    def _on_press(self, event) -> None:
        self.canvas.start_drawing((event.x, event.y))

    def _on_move(self, event) -> None:
        self.canvas.continue_drawing((event.x, event.y))

    def _on_release(self, event) -> None:
        self.canvas.end_drawing((event.x, event.y))


class NewCanvasDialog:
    """Modal dialog asking for the width and height of a new canvas."""

    def __init__(self, master) -> None:
        _require_tk()
        self._result: Optional[Tuple[int, int]] = None
        self.window = tk.Toplevel(master)
        self.window.title("New canvas")
        self.window.resizable(False, False)
        self.window.transient(master)

        self._width = tk.IntVar(value=DEFAULT_CANVAS_SIZE[0])
        self._height = tk.IntVar(value=DEFAULT_CANVAS_SIZE[1])

        sizes = ttk.Frame(self.window, padding=8)
        sizes.pack(fill="x")
        for label, var in (("Width:", self._width), ("Height:", self._height)):
            ttk.Label(sizes, text=label).pack(side="left")
            ttk.Spinbox(
                sizes,
                from_=MIN_CANVAS_SIDE,
                to=MAX_CANVAS_SIDE,
                textvariable=var,
                width=6,
            ).pack(side="left", padx=(2, 8))

        buttons = ttk.Frame(self.window, padding=(8, 0, 8, 8))
        buttons.pack(fill="x")
        ttk.Button(buttons, text="Cancel", command=self._reject).pack(side="right")
        ttk.Button(buttons, text="OK", command=self._accept).pack(
            side="right", padx=4
        )
        self.window.bind("<Return>", lambda _event: self._accept())
        self.window.bind("<Escape>", lambda _event: self._reject())
        self.window.protocol("WM_DELETE_WINDOW", self._reject)

        self.window.grab_set()
        master.wait_window(self.window)

    def canvas_size(self) -> Optional[Tuple[int, int]]:
        """Return the chosen size, or None if the dialog was cancelled."""
        return self._result

    def _accept(self) -> None:
        try:
            self._result = validate_canvas_size(self._width.get(), self._height.get())
        except (ValueError, tk.TclError):
            self.window.bell()
            return
        self.window.destroy()

    def _reject(self) -> None:
        self._result = None
        self.window.destroy()


class MainWindow:
    """The application window wiring controls to a canvas."""

    def __init__(self, root) -> None:
        _require_tk()
        self.root = root
        root.title("Paint")
        root.resizable(False, False)

        self.canvas = Canvas()
        self.canvas.create(DEFAULT_CANVAS_SIZE)
        self.canvas.brush_size = DEFAULT_BRUSH_SIZE
        self.history = ColorHistory()

        self._build_menu()
        panel = ttk.Frame(root, padding=6)
        panel.pack(side="left", fill="y")
        self._build_tools(panel)
        self._build_brush_styles(panel)
        self._build_brush_size(panel)
        self._build_colors(panel)
        self._build_actions(panel)

        self.view = CanvasView(root, self.canvas)
        self.view.widget.pack(side="left")

        self.select_color(BLACK)

    def new_canvas(self) -> None:
        """Ask for a size and start a blank canvas of it."""
        size = NewCanvasDialog(self.root).canvas_size()
        if size is None:
            return
        self.canvas.clear()
        self.canvas.resize(size)

    def open_file(self) -> None:
        """Load an image chosen by the user onto the canvas."""
        path = filedialog.askopenfilename(
            parent=self.root, title="Open image", filetypes=_OPEN_TYPES
        )
        if not path:
            return
        try:
            with Image.open(path) as image:
                image.load()
                self.canvas.load(image)
        except OSError:
            return

    def save_file(self) -> None:
        """Write the canvas image to a file chosen by the user."""
        path = filedialog.asksaveasfilename(
            parent=self.root,
            title="Save image",
            filetypes=_SAVE_TYPES,
            defaultextension=".png",
        )
        if path and self.canvas.image is not None:
            self.canvas.image.save(path)

    def clear_all(self) -> None:
        """Wipe the canvas to white."""
        self.canvas.clear()

    def select_color(self, color) -> None:
        """Make ``color`` current and remember it in the history."""
        color = tuple(color)[:3]
        self._use_color(color)
        if self.history.add(color):
            self._refresh_history()

    def _use_color(self, color) -> None:
        self.canvas.color = color
        self._indicator.configure(background=color_name(color))

    def _build_menu(self) -> None:
        menubar = tk.Menu(self.root)
        file_menu = tk.Menu(menubar, tearoff=False)
        file_menu.add_command(label="New", accelerator="Ctrl+N", command=self.new_canvas)
        file_menu.add_command(label="Open...", accelerator="Ctrl+O", command=self.open_file)
        file_menu.add_command(label="Save...", accelerator="Ctrl+S", command=self.save_file)
        menubar.add_cascade(label="File", menu=file_menu)
        self.root.configure(menu=menubar)
        self.root.bind("<Control-n>", lambda _event: self.new_canvas())
        self.root.bind("<Control-o>", lambda _event: self.open_file())
        self.root.bind("<Control-s>", lambda _event: self.save_file())

    def _build_tools(self, panel) -> None:
        frame = ttk.LabelFrame(panel, text="Tool", padding=4)
        frame.pack(fill="x", pady=2)
        self._tool = tk.StringVar(value="brush")
        labels = {
            "brush": "Brush",
            "line": "Line",
            "rect": "Rectangle",
            "ellipse": "Ellipse",
            "fill": "Fill",
        }
        for name, label in labels.items():
            ttk.Radiobutton(
                frame,
                text=label,
                value=name,
                variable=self._tool,
                command=self._on_tool,
            ).pack(anchor="w")

    def _on_tool(self) -> None:
        self.canvas.draw_mode = tool_mode(self._tool.get())

    def _build_brush_styles(self, panel) -> None:
        frame = ttk.LabelFrame(panel, text="Brush style", padding=4)
        frame.pack(fill="x", pady=2)
        self._style = tk.StringVar(value="Normal")
        for label in _BRUSH_STYLES:
            ttk.Radiobutton(
                frame,
                text=label,
                value=label,
                variable=self._style,
                command=self._on_style,
            ).pack(anchor="w")

    def _on_style(self) -> None:
        self.canvas.brush_style = _BRUSH_STYLES[self._style.get()]

    def _build_brush_size(self, panel) -> None:
        frame = ttk.LabelFrame(panel, text="Brush size", padding=4)
        frame.pack(fill="x", pady=2)
        self._size_label = ttk.Label(frame, text=str(DEFAULT_BRUSH_SIZE))
        self._size_label.pack(anchor="e")
        scale = ttk.Scale(
            frame,
            from_=MIN_BRUSH_SIZE,
            to=MAX_BRUSH_SIZE,
            orient="horizontal",
            command=self._on_brush_size,
        )
        scale.set(DEFAULT_BRUSH_SIZE)
        scale.pack(fill="x")

    def _on_brush_size(self, value) -> None:
        size = int(round(float(value)))
        self.canvas.brush_size = size
        self._size_label.configure(text=str(size))

    def _build_colors(self, panel) -> None:
        frame = ttk.LabelFrame(panel, text="Colour", padding=4)
        frame.pack(fill="x", pady=2)

        self._indicator = tk.Label(frame, width=4, relief="sunken")
        self._indicator.pack(anchor="w", pady=(0, 4))

        palette = ttk.Frame(frame)
        palette.pack(fill="x")
        for name in _PALETTE:
            tk.Button(
                palette,
                width=2,
                background=color_name(palette_color(name)),
                command=lambda name=name: self.select_color(palette_color(name)),
            ).pack(side="left", padx=1)
        ttk.Button(frame, text="Custom...", command=self._pick_custom).pack(
            fill="x", pady=2
        )

        recent = ttk.Frame(frame)
        recent.pack(fill="x")
        self._history_buttons = [
            tk.Button(
                recent,
                width=2,
                state="disabled",
                command=lambda index=index: self._on_history(index),
            )
            for index in range(self.history.capacity)
        ]
        for button in self._history_buttons:
            button.pack(side="left", padx=1)

    def _pick_custom(self) -> None:
        rgb, _hex = colorchooser.askcolor(initialcolor="white", parent=self.root)
        if rgb is not None:
            self.select_color(tuple(int(c) for c in rgb))

    def _on_history(self, index: int) -> None:
        if index < len(self.history):
            self._use_color(self.history[index])

    def _refresh_history(self) -> None:
        for button, color in zip(self._history_buttons, self.history):
            button.configure(background=color_name(color), state="normal")

    def _build_actions(self, panel) -> None:
        frame = ttk.Frame(panel, padding=(0, 4))
        frame.pack(fill="x")
        undo = ttk.Button(frame, text="Undo", command=self.canvas.undo, state="disabled")
        redo = ttk.Button(frame, text="Redo", command=self.canvas.redo, state="disabled")
        undo.pack(side="left", expand=True, fill="x")
        redo.pack(side="left", expand=True, fill="x")
        ttk.Button(panel, text="Clear", command=self.clear_all).pack(fill="x")

        def enabler(button):
            return lambda available: button.configure(
                state="normal" if available else "disabled"
            )

        self.canvas.undo_available.connect(enabler(undo))
        self.canvas.redo_available.connect(enabler(redo))


def main(argv=None) -> int:
    """Open the paint window and run until it is closed."""
    _require_tk()
    root = tk.Tk()
    MainWindow(root)
    root.mainloop()
    return 0