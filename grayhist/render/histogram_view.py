from typing import List, Tuple

from ..constants import COL_HIST_BAR, HIST_BAR_DIVISOR


def histogram_bars(
    hist: List[int], x0: int, bottom: int, divisor: float = HIST_BAR_DIVISOR
) -> List[Tuple[float, float, float, float]]:
    """
    Odcinki (x0, y0, x1, y1) słupków histogramu: jeden piksel szerokości
    na poziom, od dolnej krawędzi w górę, wysokość = liczność / divisor.
    """
    lines = []
    for i, count in enumerate(hist):
        x = x0 + i
        lines.append((x, bottom, x, bottom - count / divisor))
    return lines


class HistogramView:
    """Rysuje bieżący histogram na Canvas obok obrazu."""

    TAG = "histogram"

    def __init__(self, canvas):
        self.canvas = canvas

    def draw(self, hist: List[int], x0: int, bottom: int):
        self.canvas.delete(self.TAG)
        for x_a, y_a, x_b, y_b in histogram_bars(hist, x0, bottom):
            if y_a == y_b:
                continue
            self.canvas.create_line(x_a, y_a, x_b, y_b, fill=COL_HIST_BAR, tags=(self.TAG,))
