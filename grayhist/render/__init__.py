from .histogram_view import HistogramView, histogram_bars

# photo_from_buffer wymaga tkintera – importowany bezpośrednio z .photo

__all__ = ["HistogramView", "histogram_bars"]
