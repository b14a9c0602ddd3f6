from __future__ import annotations


class ChartLayoutError(ValueError):
    """Base error for layouts built with ``strict=True``."""


class InvalidDimensionError(ChartLayoutError):
    pass


class InvalidMarginError(ChartLayoutError):
    pass
