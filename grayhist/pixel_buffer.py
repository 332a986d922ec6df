# grayhist/pixel_buffer.py
from dataclasses import dataclass, field
from typing import List, Tuple

from .constants import BITS_PER_CHANNEL

RGBA = Tuple[int, int, int, int]


@dataclass
class PixelBuffer:
    """
    Prostokątny bufor pikseli RGBA (8 bitów na kanał).
    pixels: lista w*h krotek (R,G,B,A), wierszami od góry.
    """

    w: int
    h: int
    pixels: List[RGBA] = field(default_factory=list)
    bits_per_channel: int = BITS_PER_CHANNEL

    def __post_init__(self):
        if self.w < 0 or self.h < 0:
            raise ValueError(f"Niepoprawny rozmiar obrazu: {self.w}×{self.h}")
        if len(self.pixels) != self.w * self.h:
            raise ValueError(
                f"Długość bufora ({len(self.pixels)}) != {self.w}×{self.h}"
            )
        for px in self.pixels:
            self._check_pixel(px)

    def _check_pixel(self, px):
        top = self.max_value
        if len(px) != 4:
            raise ValueError(f"Piksel musi mieć 4 kanały: {px!r}")
        for c in px:
            if c < 0 or c > top:
                raise ValueError(f"Wartość kanału poza zakresem 0..{top}: {px!r}")

    @classmethod
    def blank(cls, w: int, h: int, color: RGBA = (0, 0, 0, 255)) -> "PixelBuffer":
        return cls(w, h, [color] * (w * h))

    @property
    def pixel_count(self) -> int:
        return self.w * self.h

    @property
    def levels(self) -> int:
        """Liczba dyskretnych poziomów jasności L = 2^k."""
        return 2**self.bits_per_channel

    @property
    def max_value(self) -> int:
        return self.levels - 1

    def _index(self, row: int, col: int) -> int:
        if not (0 <= row < self.h and 0 <= col < self.w):
            raise IndexError(f"Piksel ({row},{col}) poza obrazem {self.w}×{self.h}")
        return row * self.w + col

    def get_pixel(self, row: int, col: int) -> RGBA:
        return self.pixels[self._index(row, col)]

    def set_pixel(self, row: int, col: int, rgba: RGBA):
        rgba = tuple(rgba)
        self._check_pixel(rgba)
        self.pixels[self._index(row, col)] = rgba

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self.w, self.h, self.pixels[:], self.bits_per_channel)
