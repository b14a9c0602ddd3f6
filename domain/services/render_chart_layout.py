from __future__ import annotations

import logging
from typing import Any

from domain.models import (
    DEFAULT_CONTAINER,
    DEFAULT_SVG_CLASS,
    LabelsUpdate,
    MarginSpec,
    Region,
)
from domain.ports.rendering import RenderingSink
from domain.services.chart_layout import ChartLayout
from domain.services.label_placement import plan_labels

logger = logging.getLogger(__name__)


class ChartLayoutRenderer:
    def __init__(self, layout: ChartLayout, sink: RenderingSink) -> None:
        self.layout = layout
        self.sink = sink
        self.groups: dict[Region, Any] = {}
        self._container = DEFAULT_CONTAINER
        self._svg_class = DEFAULT_SVG_CLASS

    def create_chart_layout(
        self,
        container: str = DEFAULT_CONTAINER,
        svg_class: str = DEFAULT_SVG_CLASS,
    ) -> None:
        self._container = container
        self._svg_class = svg_class
        logger.debug(
            "Creating %sx%s canvas in %s",
            self.layout.width,
            self.layout.height,
            container,
        )
        self.sink.create_canvas(container, svg_class, self.layout.dimensions)
        self.create_area_groups()
        self.create_labels()

    def create_area_groups(self) -> None:
        self.groups = {
            region: self.sink.append_group(region.group_name, area)
            for region, area in self.layout.areas().items()
        }

    def create_labels(self) -> int:
        if not self.groups:
            msg = "Area groups must be created before drawing labels"
            raise RuntimeError(msg)
        drawings = plan_labels(self.layout)
        class_name = self.layout.labels.class_name
        for drawing in drawings:
            self.sink.draw_label(
                self.groups[drawing.region],
                drawing.placement,
                drawing.label,
                class_name,
            )
        logger.debug("Drew %d labels", len(drawings))
        return len(drawings)

    def set_labels(self, update: LabelsUpdate) -> None:
        # Labels cleared to empty text are never drawn, so redraw from a fresh canvas.
        self.layout.set_labels(update)
        if self.groups:
            self.create_chart_layout(self._container, self._svg_class)

    def set_margins(self, spec: MarginSpec) -> None:
        self.layout.set_margins(spec)
        if self.groups:
            self.create_chart_layout(self._container, self._svg_class)
