from __future__ import annotations

import pytest

from domain.errors import InvalidDimensionError, InvalidMarginError
from domain.models import Fraction, Margins, Percent
from domain.services.margins import (
    default_margins,
    margin_fraction,
    resolve_margins,
    validate_dimensions,
    validate_margin_spec,
    validate_margins,
)


def test_whole_percent_and_fraction_resolve_to_same_margins() -> None:
    assert resolve_margins(10, 540, 960) == resolve_margins(0.1, 540, 960)


def test_zero_percentage_yields_zero_margins() -> None:
    assert resolve_margins(0, 540, 960) == Margins.zero()
    assert resolve_margins(Percent(0), 540, 960) == Margins.zero()


def test_percentage_applies_height_to_vertical_and_width_to_horizontal() -> None:
    margins = resolve_margins(20, 200, 400)

    assert margins.top == pytest.approx(40)
    assert margins.bottom == pytest.approx(40)
    assert margins.left == pytest.approx(80)
    assert margins.right == pytest.approx(80)


def test_magnitude_heuristic_treats_one_as_one_percent() -> None:
    assert margin_fraction(1) == pytest.approx(0.01)
    assert margin_fraction(0.5) == pytest.approx(0.5)
    assert margin_fraction(50) == pytest.approx(0.5)


def test_unit_tags_skip_magnitude_inference() -> None:
    half_percent = resolve_margins(Percent(0.5), 100, 1000)
    half = resolve_margins(Fraction(0.5), 100, 1000)

    assert half_percent.left == pytest.approx(5)
    assert half.left == pytest.approx(500)


def test_explicit_margins_pass_through_unchanged() -> None:
    margins = Margins(top=-5, right=1000, bottom=3, left=7)

    assert resolve_margins(margins, 10, 10) is margins


def test_missing_spec_defaults_to_ten_percent() -> None:
    margins = resolve_margins(None, 540, 960)

    assert margins == default_margins(540, 960)
    assert margins.top == pytest.approx(54)
    assert margins.left == pytest.approx(96)


def test_validate_dimensions_rejects_non_positive_values() -> None:
    validate_dimensions(1, 1)
    with pytest.raises(InvalidDimensionError):
        validate_dimensions(0, 100)
    with pytest.raises(InvalidDimensionError):
        validate_dimensions(100, -1)


@pytest.mark.parametrize("spec", [-1, 101, Percent(150), Fraction(1.5), Fraction(-0.1)])
def test_validate_margin_spec_rejects_out_of_range_values(spec: object) -> None:
    with pytest.raises(InvalidMarginError):
        validate_margin_spec(spec)  # type: ignore[arg-type]


def test_validate_margins_rejects_negative_and_oversized_margins() -> None:
    validate_margins(Margins(top=10, right=10, bottom=10, left=10), 100, 100)
    with pytest.raises(InvalidMarginError, match="non-negative"):
        validate_margins(Margins(top=-1, right=0, bottom=0, left=0), 100, 100)
    with pytest.raises(InvalidMarginError, match="Vertical"):
        validate_margins(Margins(top=50, right=0, bottom=50, left=0), 100, 100)
    with pytest.raises(InvalidMarginError, match="Horizontal"):
        validate_margins(Margins(top=0, right=60, bottom=0, left=40), 100, 100)
