class GrayhistError(Exception):
    """Bazowy błąd operacji na obrazie – nigdy nie jest fatalny."""


class NoImageLoadedError(GrayhistError):
    def __init__(self, operation: str = ""):
        msg = "Brak wczytanego obrazu"
        if operation:
            msg += f" ({operation})"
        super().__init__(msg)


class GrayscaleRequiredError(GrayhistError):
    def __init__(self):
        super().__init__("Obraz musi być w skali szarości.")


class DegenerateImageError(GrayhistError):
    def __init__(self, w: int, h: int):
        super().__init__(f"Obraz nie ma pikseli ({w}×{h}).")
        self.w = w
        self.h = h


class ImageLoadError(GrayhistError):
    """Nie udało się odczytać / zdekodować pliku obrazu."""
