from __future__ import annotations

import logging
from dataclasses import dataclass

from domain.models import Area, Label, LabelKind, LabelPlacement, Region
from domain.services.chart_layout import ChartLayout

logger = logging.getLogger(__name__)

LABEL_REGIONS: dict[LabelKind, Region] = {
    LabelKind.HEADER: Region.HEADER,
    LabelKind.SUBHEADER: Region.HEADER,
    LabelKind.FOOTER: Region.FOOTER,
    LabelKind.LEFT: Region.LEFT_LABEL,
    LabelKind.RIGHT: Region.RIGHT_LABEL,
}
LABEL_ROTATIONS: dict[LabelKind, float] = {
    LabelKind.LEFT: -90.0,
    LabelKind.RIGHT: 90.0,
}
DRAW_ORDER = (
    LabelKind.HEADER,
    LabelKind.FOOTER,
    LabelKind.LEFT,
    LabelKind.RIGHT,
    LabelKind.SUBHEADER,
)


@dataclass(frozen=True)
class LabelDrawing:
    region: Region
    placement: LabelPlacement
    label: Label


def place_label(region: Area, kind: LabelKind) -> LabelPlacement:
    rotation = LABEL_ROTATIONS.get(kind, 0.0)
    if kind is LabelKind.HEADER:
        return LabelPlacement(kind, region.width / 2, region.height / 4, region.height / 2)
    if kind in (LabelKind.SUBHEADER, LabelKind.FOOTER):
        return LabelPlacement(kind, region.width / 2, region.height * 3 / 4, region.height / 4)
    return LabelPlacement(kind, region.width / 2, region.height / 2, region.width / 4, rotation)


def plan_labels(layout: ChartLayout) -> list[LabelDrawing]:
    drawings: list[LabelDrawing] = []
    for kind in DRAW_ORDER:
        label = layout.labels.label_for(kind)
        if label is None:
            continue
        if label.text == "":
            logger.debug("Skipping %s label %r with empty text", kind.value, label.id)
            continue
        region = LABEL_REGIONS[kind]
        drawings.append(
            LabelDrawing(
                region=region,
                placement=place_label(layout.area(region), kind),
                label=label,
            )
        )
    return drawings
