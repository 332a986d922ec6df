import tkinter as tk

from ..pixel_buffer import PixelBuffer


def photo_from_buffer(buf: PixelBuffer) -> tk.PhotoImage:
    """Buduje PhotoImage z bufora RGBA (kanał A pomijany) → put() wierszami."""
    img = tk.PhotoImage(width=max(1, buf.w), height=max(1, buf.h))
    px = buf.pixels
    base = 0
    for y in range(buf.h):
        row_hex = (
            "{"
            + " ".join(f"#{r:02x}{g:02x}{b:02x}" for (r, g, b, _a) in px[base : base + buf.w])
            + "}"
        )
        img.put(row_hex, to=(0, y))
        base += buf.w
    return img
