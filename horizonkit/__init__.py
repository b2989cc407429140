"""Attitude estimation, artificial-horizon rendering, e-paper panel and bitmap font helpers."""

__version__ = "0.1.0"

__all__ = ["ahrs", "horizon", "devio", "epd", "fonts", "font12"]