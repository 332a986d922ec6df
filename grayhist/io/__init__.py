from .image_io import read_rgba

__all__ = ["read_rgba"]
