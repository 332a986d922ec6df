# grayhist/image_ops.py
import logging

from .constants import STRICT_GRAYSCALE_CHECK
from .pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)

# współczynniki luminancji BT.709
LUMA_R = 0.2126
LUMA_G = 0.7152
LUMA_B = 0.0722


def _gray_avg(r: int, g: int, b: int) -> int:
    # dzielenie całkowite – obcięcie, nie zaokrąglenie
    return (r + g + b) // 3


def _gray_luma(r: int, g: int, b: int) -> int:
    # suma wag = 1, więc wynik mieści się w 0..255 bez przycinania
    return int(r * LUMA_R + g * LUMA_G + b * LUMA_B)


def _apply_gray(buf: PixelBuffer, reduce):
    px = buf.pixels
    for i in range(len(px)):
        r, g, b, a = px[i]
        v = reduce(r, g, b)
        px[i] = (v, v, v, a)


def to_grayscale_avg(buf: PixelBuffer) -> PixelBuffer:
    """Skala szarości w miejscu – średnia arytmetyczna (R+G+B)//3, kanał A bez zmian."""
    _apply_gray(buf, _gray_avg)
    logger.info("Skala szarości (średnia): %d×%d", buf.w, buf.h)
    return buf


def to_grayscale_luma(buf: PixelBuffer) -> PixelBuffer:
    """Skala szarości w miejscu – ważona luminancja (0.2126R + 0.7152G + 0.0722B)."""
    _apply_gray(buf, _gray_luma)
    logger.info("Skala szarości (luma): %d×%d", buf.w, buf.h)
    return buf


def is_gray_pixel(r: int, g: int, b: int, strict: bool = True) -> bool:
    if strict:
        return r == g == b
    # historyczna reguła: odrzuca piksel tylko gdy r != g ORAZ g != b
    return not (r != g and g != b)


def is_grayscale(buf: PixelBuffer, strict: bool = STRICT_GRAYSCALE_CHECK) -> bool:
    """
    Czy każdy piksel jest szary. Tryb strict wymaga R == G == B,
    tryb łagodny przepuszcza np. (10, 20, 20).
    Przerywa przy pierwszym kolorowym pikselu.
    """
    for r, g, b, _a in buf.pixels:
        if not is_gray_pixel(r, g, b, strict):
            return False
    return True
