# grayhist/session.py
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional

from .constants import IMAGE_FILENAME, STRICT_GRAYSCALE_CHECK
from .errors import GrayhistError, NoImageLoadedError
from .histogram import HIST_SIZE, compute_histogram, histogram_equalize
from .image_ops import to_grayscale_avg, to_grayscale_luma
from .io import read_rgba
from .pixel_buffer import PixelBuffer

logger = logging.getLogger(__name__)

Loader = Callable[[str], PixelBuffer]


class Command(Enum):
    CONVERT_ARITHMETIC = "convert_arithmetic"
    CONVERT_WEIGHTED = "convert_weighted"
    SHOW_HISTOGRAM = "show_histogram"
    EQUALIZE = "equalize"
    RELOAD = "reload"


# klawisze 1..5 → polecenia
KEY_COMMANDS: Dict[str, Command] = {
    "1": Command.CONVERT_ARITHMETIC,
    "2": Command.CONVERT_WEIGHTED,
    "3": Command.SHOW_HISTOGRAM,
    "4": Command.EQUALIZE,
    "5": Command.RELOAD,
}

KEY_LEGEND = (
    "1 - skala szarości (średnia arytmetyczna)\n"
    "2 - skala szarości (średnia ważona)\n"
    "3 - pokaż histogram bieżącego obrazu\n"
    "4 - wyrównaj histogram (aktualizuje histogram)\n"
    "5 - wczytaj ponownie oryginalny obraz"
)


@dataclass
class CommandResult:
    command: Command
    ok: bool
    message: str


@dataclass
class ImageSession:
    """
    Stan aktywnego obrazu: bufor pikseli + bieżący histogram.
    Jedyny właściciel bufora – operacje modyfikują go w miejscu,
    a wczytanie ponowne podmienia go w całości.
    revision rośnie przy każdej zmianie pikseli (tekstura do odświeżenia).
    """

    path: str = IMAGE_FILENAME
    loader: Loader = read_rgba
    strict: bool = STRICT_GRAYSCALE_CHECK
    buffer: Optional[PixelBuffer] = None
    histogram: List[int] = field(default_factory=lambda: [0] * HIST_SIZE)
    revision: int = 0

    # ---------- pomocnicze ----------
    def _require_buffer(self, operation: str) -> PixelBuffer:
        if self.buffer is None:
            raise NoImageLoadedError(operation)
        return self.buffer

    def _touch(self):
        self.revision += 1

    # ---------- operacje ----------
    def load(self) -> PixelBuffer:
        """Wczytuje self.path. Przy błędzie poprzedni stan zostaje bez zmian."""
        buf = self.loader(self.path)
        self.buffer = buf
        self.histogram = [0] * HIST_SIZE
        self._touch()
        logger.info("Wczytano '%s' (%d×%d)", self.path, buf.w, buf.h)
        return buf

    def convert_arithmetic(self):
        to_grayscale_avg(self._require_buffer("skala szarości – średnia"))
        self._touch()

    def convert_weighted(self):
        to_grayscale_luma(self._require_buffer("skala szarości – luma"))
        self._touch()

    def show_histogram(self) -> List[int]:
        buf = self._require_buffer("histogram")
        self.histogram = compute_histogram(buf, self.strict)
        return self.histogram

    def equalize(self) -> List[int]:
        buf = self._require_buffer("wyrównanie histogramu")
        self.histogram = histogram_equalize(buf, strict=self.strict)
        self._touch()
        return self.histogram

    # ---------- dyspozytor ----------
    def execute(self, command: Command) -> CommandResult:
        """Wykonuje jedno polecenie; błędy są raportowane, nie propagowane."""
        handlers = {
            Command.CONVERT_ARITHMETIC: (self.convert_arithmetic, "Skala szarości (średnia)"),
            Command.CONVERT_WEIGHTED: (self.convert_weighted, "Skala szarości (luma)"),
            Command.SHOW_HISTOGRAM: (self.show_histogram, "Histogram"),
            Command.EQUALIZE: (self.equalize, "Histogram wyrównany"),
            Command.RELOAD: (self.load, f"Wczytano ponownie: {self.path}"),
        }
        func, label = handlers[command]
        try:
            func()
        except GrayhistError as e:
            logger.warning("%s: %s", command.value, e)
            return CommandResult(command, False, str(e))
        return CommandResult(command, True, label)

    def execute_key(self, key: str) -> Optional[CommandResult]:
        command = KEY_COMMANDS.get(key)
        if command is None:
            return None
        return self.execute(command)
