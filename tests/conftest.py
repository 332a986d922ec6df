import pytest

from grayhist.pixel_buffer import PixelBuffer


def gray_buffer(w, h, values, alpha=255):
    return PixelBuffer(w, h, [(v, v, v, alpha) for v in values])


@pytest.fixture
def black_and_white():
    # 3× czarny, 1× biały
    return gray_buffer(2, 2, [0, 0, 0, 255])


@pytest.fixture
def color_buffer():
    return PixelBuffer(
        2,
        2,
        [(255, 0, 0, 255), (0, 255, 0, 128), (0, 0, 255, 0), (10, 20, 30, 255)],
    )


class FakeLoader:
    """Zwraca kopie podanych buforów; wyjątek w kolejce → rzucany."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls = []

    def __call__(self, path):
        self.calls.append(path)
        res = self.results.pop(0) if len(self.results) > 1 else self.results[0]
        if isinstance(res, Exception):
            raise res
        return res.copy()


@pytest.fixture
def fake_loader():
    return FakeLoader


@pytest.fixture
def make_gray():
    return gray_buffer
