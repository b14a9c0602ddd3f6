from __future__ import annotations

from domain.models import Area, MarginSpec
from domain.services.margins import resolve_margins, uniform_margins


def calculate_area(
    height: float,
    width: float,
    start_x: float,
    start_y: float,
    margins: MarginSpec | None = None,
) -> Area:
    # Percentages resolve against this rectangle, not the whole canvas.
    if margins is None:
        area_margins = uniform_margins(0, height, width)
    else:
        area_margins = resolve_margins(margins, height, width)
    return Area(
        height=height - (area_margins.top + area_margins.bottom),
        width=width - (area_margins.left + area_margins.right),
        x=start_x + area_margins.left,
        y=start_y + area_margins.top,
    )
