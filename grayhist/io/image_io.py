# grayhist/io/image_io.py
import logging

from PIL import Image, UnidentifiedImageError

from ..errors import ImageLoadError
from ..pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)


def _flat_pixels(img):
    # getdata() jest przestarzałe od Pillow 12.1
    getter = getattr(img, "get_flattened_data", None) or img.getdata
    return list(getter())  # [(r,g,b,a)...] wierszami od góry


def read_rgba(path: str) -> PixelBuffer:
    """
    Wczytuje dowolny format obsługiwany przez Pillow i normalizuje do RGBA32.
    Błąd odczytu / dekodowania → ImageLoadError (logowany przez wywołującego).
    """
    logger.info("Wczytywanie obrazu '%s'", path)
    try:
        with Image.open(path) as img:
            img = img.convert("RGBA")
            w, h = img.size
            data = _flat_pixels(img)
    except (OSError, UnidentifiedImageError) as e:
        raise ImageLoadError(f"Nie udało się wczytać obrazu '{path}': {e}") from e
    return PixelBuffer(w, h, data)
