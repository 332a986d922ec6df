import logging
import tkinter as tk
from tkinter import ttk, messagebox

from .constants import (
    ADDITIONAL_WIDTH,
    APP_TITLE,
    COL_BACKGROUND,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from .keyboard import KeyRepeatFilter
from .render import HistogramView
from .render.photo import photo_from_buffer
from .session import KEY_COMMANDS, KEY_LEGEND, Command, ImageSession

logger = logging.getLogger(__name__)


class App(tk.Tk):
    def __init__(self, session: ImageSession):
        super().__init__()
        self.title(APP_TITLE)
        self.session = session

        self._photo = None
        self._photo_rev = -1
        self._keys = KeyRepeatFilter()
        self.status = tk.StringVar(value="")

        self._build_ui()
        self._bind_keys()
        self.hist_view = HistogramView(self.canvas)

        self._load_initial()

    def _build_ui(self):
        self.columnconfigure(0, weight=1)
        self.rowconfigure(0, weight=1)

        self.canvas = tk.Canvas(
            self,
            width=WINDOW_WIDTH,
            height=WINDOW_HEIGHT,
            bg=COL_BACKGROUND,
            highlightthickness=0,
        )
        self.canvas.grid(row=0, column=0, sticky="nsew")

        bar = ttk.Frame(self, padding=(6, 2))
        bar.grid(row=1, column=0, sticky="ew")
        ttk.Label(bar, textvariable=self.status, anchor="w").pack(fill="x")

    def _bind_keys(self):
        self.bind("<KeyPress>", self.on_key_down)
        self.bind("<KeyRelease>", self.on_key_up)

    # --- Helpers ---
    def _set_status(self, s):
        self.status.set(s)

    def _image_size(self):
        buf = self.session.buffer
        if buf is None:
            return 0, 0
        return buf.w, buf.h

    def _fit_window(self):
        # obraz + pas na histogram po prawej
        w, h = self._image_size()
        self.canvas.configure(
            width=max(w, WINDOW_WIDTH) + ADDITIONAL_WIDTH, height=max(h, WINDOW_HEIGHT)
        )

    def _load_initial(self):
        result = self.session.execute(Command.RELOAD)
        if not result.ok:
            messagebox.showerror("Obraz", result.message)
        self._set_status(result.message)
        self._fit_window()
        logger.info("Klawisze:\n%s", KEY_LEGEND)
        self.redraw()

    # --- Rysowanie ---
    def redraw(self):
        buf = self.session.buffer
        if buf is not None and self._photo_rev != self.session.revision:
            # piksele się zmieniły → nowa tekstura
            self.canvas.delete("image")
            self._photo = photo_from_buffer(buf)
            self.canvas.create_image(0, 0, image=self._photo, anchor="nw", tags=("image",))
            self._photo_rev = self.session.revision

        w, h = self._image_size()
        bottom = int(self.canvas.cget("height"))
        self.hist_view.draw(self.session.histogram, w + 1, bottom)

    # --- Klawiatura ---
    def on_key_down(self, e):
        key = e.keysym
        if not self._keys.press(key, e.time):
            return

        if key not in KEY_COMMANDS:
            return
        result = self.session.execute_key(key)
        if result.command is Command.RELOAD:
            if result.ok:
                self._fit_window()
            else:
                messagebox.showerror("Obraz", result.message)
        self._set_status(result.message)
        self.redraw()

    def on_key_up(self, e):
        self._keys.release(e.keysym, e.time)
