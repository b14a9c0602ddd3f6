from __future__ import annotations

import math
from dataclasses import dataclass

from domain.errors import InvalidDimensionError
from domain.models import (
    DEFAULT_ASPECT_RATIO,
    DEFAULT_WIDTH,
    Area,
    ChartLayoutConfig,
    Dimensions,
    Labels,
    LabelsUpdate,
    Margins,
    MarginSpec,
    Region,
)
from domain.services.area import calculate_area
from domain.services.margins import (
    resolve_margins,
    validate_dimensions,
    validate_margin_spec,
    validate_margins,
)


@dataclass(frozen=True)
class ResolvedLayoutConfig:
    dimensions: Dimensions
    margins: Margins
    labels: Labels
    strict: bool = False


def resolve_layout_config(config: ChartLayoutConfig) -> ResolvedLayoutConfig:
    """Fill every unset field of ``config`` with its default.

    Width falls back to 960px and height to ``width / aspect_ratio`` (16:9 by
    default). Margins default to 10% of the canvas and labels to the English
    header/footer/left/right set.
    """
    aspect_ratio = DEFAULT_ASPECT_RATIO if config.aspect_ratio is None else config.aspect_ratio
    if config.strict and aspect_ratio <= 0:
        msg = f"Aspect ratio must be positive, got {aspect_ratio}"
        raise InvalidDimensionError(msg)
    width = DEFAULT_WIDTH if config.width is None else config.width
    if config.height is not None:
        height = config.height
    else:
        height = width / aspect_ratio if aspect_ratio else math.inf
    if config.strict:
        validate_dimensions(height, width)
        validate_margin_spec(config.margins)

    margins = resolve_margins(config.margins, height, width)
    if config.strict:
        validate_margins(margins, height, width)

    labels = Labels()
    if config.labels is not None:
        labels = labels.merged(config.labels)
    return ResolvedLayoutConfig(
        dimensions=Dimensions(height=height, width=width),
        margins=margins,
        labels=labels,
        strict=config.strict,
    )


class ChartLayout:
    """Canvas dimensions, margins and labels with the regions derived from them.

    Every region is recomputed on access, so a region never lags behind
    ``set_margins``.
    """

    def __init__(self, config: ChartLayoutConfig | None = None) -> None:
        resolved = resolve_layout_config(config or ChartLayoutConfig())
        self.dimensions = resolved.dimensions
        self.margins = resolved.margins
        self.labels = resolved.labels
        self.strict = resolved.strict

    @property
    def height(self) -> float:
        return self.dimensions.height

    @property
    def width(self) -> float:
        return self.dimensions.width

    @property
    def plot_area(self) -> Area:
        return calculate_area(self.height, self.width, 0, 0, self.margins)

    @property
    def header_area(self) -> Area:
        return calculate_area(self.margins.top, self.plot_area.width, self.margins.left, 0)

    @property
    def footer_area(self) -> Area:
        return calculate_area(
            self.margins.bottom,
            self.plot_area.width,
            self.margins.left,
            self.height - self.margins.bottom,
        )

    @property
    def left_label_area(self) -> Area:
        return calculate_area(self.plot_area.height, self.margins.left, 0, self.margins.top)

    @property
    def right_label_area(self) -> Area:
        return calculate_area(
            self.plot_area.height,
            self.margins.right,
            self.width - self.margins.right,
            self.margins.top,
        )

    @property
    def top_left_area(self) -> Area:
        return calculate_area(self.margins.top, self.margins.left, 0, 0)

    @property
    def top_right_area(self) -> Area:
        return calculate_area(
            self.margins.top, self.margins.right, self.width - self.margins.right, 0
        )

    @property
    def bottom_left_area(self) -> Area:
        return calculate_area(
            self.margins.bottom, self.margins.left, 0, self.height - self.margins.bottom
        )

    @property
    def bottom_right_area(self) -> Area:
        return calculate_area(
            self.margins.bottom,
            self.margins.right,
            self.width - self.margins.right,
            self.height - self.margins.bottom,
        )

    def area(self, region: Region) -> Area:
        return getattr(self, _AREA_ATTRIBUTES[region])

    def areas(self) -> dict[Region, Area]:
        return {region: self.area(region) for region in Region}

    def set_margins(self, spec: MarginSpec) -> None:
        if self.strict:
            validate_margin_spec(spec)
        margins = resolve_margins(spec, self.height, self.width)
        if self.strict:
            validate_margins(margins, self.height, self.width)
        self.margins = margins

    def set_labels(self, update: LabelsUpdate) -> None:
        self.labels = self.labels.merged(update)


_AREA_ATTRIBUTES: dict[Region, str] = {
    Region.PLOT: "plot_area",
    Region.HEADER: "header_area",
    Region.FOOTER: "footer_area",
    Region.LEFT_LABEL: "left_label_area",
    Region.RIGHT_LABEL: "right_label_area",
    Region.TOP_LEFT: "top_left_area",
    Region.TOP_RIGHT: "top_right_area",
    Region.BOTTOM_LEFT: "bottom_left_area",
    Region.BOTTOM_RIGHT: "bottom_right_area",
}
