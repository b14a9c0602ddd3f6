from __future__ import annotations

from domain.errors import InvalidDimensionError, InvalidMarginError
from domain.models import (
    DEFAULT_MARGIN_FRACTION,
    Fraction,
    Margins,
    MarginSpec,
    Percent,
)


def margin_fraction(percentage: float) -> float:
    """Treat values below 1 as fractions and everything else as whole percent."""
    return percentage if percentage < 1 else percentage / 100


def uniform_margins(fraction: float, height: float, width: float) -> Margins:
    if not fraction:
        return Margins.zero()
    margin_x = width * fraction
    margin_y = height * fraction
    return Margins(top=margin_y, right=margin_x, bottom=margin_y, left=margin_x)


def default_margins(height: float, width: float) -> Margins:
    return uniform_margins(DEFAULT_MARGIN_FRACTION, height, width)


def resolve_margins(spec: MarginSpec | None, height: float, width: float) -> Margins:
    """Resolve a margin spec against a ``height`` x ``width`` basis.

    ``Margins`` values are returned untouched; keeping them non-negative is the
    caller's job unless the layout runs in strict mode.
    """
    if spec is None:
        return default_margins(height, width)
    if isinstance(spec, Margins):
        return spec
    if isinstance(spec, (Percent, Fraction)):
        return uniform_margins(spec.as_fraction(), height, width)
    return uniform_margins(margin_fraction(spec), height, width)


def validate_dimensions(height: float, width: float) -> None:
    if height <= 0 or width <= 0:
        msg = f"Chart dimensions must be positive, got height={height} width={width}"
        raise InvalidDimensionError(msg)


def validate_margin_spec(spec: MarginSpec | None) -> None:
    if spec is None or isinstance(spec, Margins):
        return
    if isinstance(spec, Percent):
        value, upper = spec.percent, 100
    elif isinstance(spec, Fraction):
        value, upper = spec.fraction, 1
    else:
        value, upper = spec, 100
    if not 0 <= value <= upper:
        msg = f"Margin {spec!r} is outside the range [0, {upper}]"
        raise InvalidMarginError(msg)


def validate_margins(margins: Margins, height: float, width: float) -> None:
    sides = {
        "top": margins.top,
        "right": margins.right,
        "bottom": margins.bottom,
        "left": margins.left,
    }
    negative = sorted(name for name, value in sides.items() if value < 0)
    if negative:
        msg = f"Margins must be non-negative: {', '.join(negative)}"
        raise InvalidMarginError(msg)
    if margins.top + margins.bottom >= height:
        msg = (
            f"Vertical margins {margins.top} + {margins.bottom} leave no plot area "
            f"in height {height}"
        )
        raise InvalidMarginError(msg)
    if margins.left + margins.right >= width:
        msg = (
            f"Horizontal margins {margins.left} + {margins.right} leave no plot area "
            f"in width {width}"
        )
        raise InvalidMarginError(msg)
