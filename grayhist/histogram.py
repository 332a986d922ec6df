# grayhist/histogram.py
import logging
from typing import List, Optional

from .constants import STRICT_GRAYSCALE_CHECK
from .errors import DegenerateImageError, GrayscaleRequiredError
from .image_ops import is_grayscale
from .pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)

HIST_SIZE = 256


def compute_histogram(
    buf: PixelBuffer, strict: bool = STRICT_GRAYSCALE_CHECK
) -> List[int]:
    """
    Zwraca histogram jasności obrazu szarego (buf.levels elementów, dla 8 bitów 256).
    Obraz nie jest modyfikowany. Dla obrazu kolorowego → GrayscaleRequiredError.
    """
    if not is_grayscale(buf, strict):
        raise GrayscaleRequiredError()

    hist = [0] * buf.levels
    # R == G == B, więc wystarczy kanał R
    for r, _g, _b, _a in buf.pixels:
        hist[r] += 1
    return hist


def equalization_table(hist: List[int], total: int, levels: int = HIST_SIZE) -> List[float]:
    """
    Tablica przejścia stary poziom → nowy poziom (float):
    T(v) = (L-1) * sum(hist[0..v]) / total, następnie przeskalowana tak,
    żeby maksimum wynosiło L-1.
    """
    if total <= 0:
        raise ValueError("total musi być > 0")

    top = levels - 1
    table = [0.0] * levels
    cumsum = 0
    peak = 0.0
    for v in range(levels):
        cumsum += hist[v]
        table[v] = top * cumsum / total
        if table[v] > peak:
            peak = table[v]

    # peak == 0 → sam poziom 0, nie ma czego skalować
    if peak > 0 and peak != top:
        for v in range(levels):
            table[v] = table[v] * top / peak
    return table


def histogram_equalize(
    buf: PixelBuffer,
    hist: Optional[List[int]] = None,
    strict: bool = STRICT_GRAYSCALE_CHECK,
) -> List[int]:
    """
    Wyrównanie histogramu w miejscu (obraz szary, kanał A bez zmian).
    hist: aktualny histogram obrazu; None → liczony od nowa.
    Zwraca histogram po wyrównaniu.
    """
    total = buf.pixel_count
    if total == 0:
        raise DegenerateImageError(buf.w, buf.h)
    if hist is None:
        hist = compute_histogram(buf, strict)
    elif not is_grayscale(buf, strict):
        raise GrayscaleRequiredError()

    table = equalization_table(hist, total, buf.levels)

    new_hist = [0] * buf.levels
    px = buf.pixels
    for i in range(len(px)):
        r, _g, _b, a = px[i]
        v = int(table[r])
        px[i] = (v, v, v, a)
        new_hist[v] += 1

    logger.info(
        "Wyrównanie histogramu: %d×%d, poziomy %d..%d",
        buf.w,
        buf.h,
        min(i for i, c in enumerate(new_hist) if c),
        max(i for i, c in enumerate(new_hist) if c),
    )
    return new_hist
