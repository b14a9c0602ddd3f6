"""Rendering sink that draws a chart layout into an ``svgwrite`` drawing."""

from __future__ import annotations

import logging

import svgwrite
from svgwrite import container
from svgwrite import text as svgtext

from domain.models import Area, Dimensions, Label, LabelKind, LabelPlacement
from domain.ports.rendering import RenderingSink

logger = logging.getLogger(__name__)


def _number(value: float) -> str:
    number = float(value)
    return str(int(number)) if number.is_integer() else repr(number)


class SvgRenderingSink(RenderingSink):
    def __init__(self, *, debug: bool = False) -> None:
        self.debug = debug
        self.container: str | None = None
        self._drawing: svgwrite.Drawing | None = None
        self._texts: dict[tuple[str, LabelKind], svgtext.Text] = {}

    @property
    def drawing(self) -> svgwrite.Drawing:
        if self._drawing is None:
            msg = "Canvas has not been created yet"
            raise RuntimeError(msg)
        return self._drawing

    def create_canvas(self, container: str, class_name: str, dimensions: Dimensions) -> None:
        """Start a new drawing; anything drawn before is discarded.

        The SVG only carries a ``viewBox`` so it scales with its host element.
        ``container`` is kept for callers that embed the markup into a page.
        """
        self.container = container
        self._texts = {}
        self._drawing = svgwrite.Drawing(
            size=("100%", "100%"),
            viewBox=f"0 0 {_number(dimensions.width)} {_number(dimensions.height)}",
            preserveAspectRatio="xMidYMid meet",
            class_=class_name,
            debug=self.debug,
        )

    def append_group(self, name: str, area: Area) -> container.Group:
        group = self.drawing.g(id_=name)
        group.translate(area.x, area.y)
        self.drawing.add(group)
        return group

    def draw_label(
        self,
        group: container.Group,
        placement: LabelPlacement,
        label: Label,
        class_name: str,
    ) -> None:
        if label.text == "":
            return
        key = (group["id"], placement.kind)
        previous = self._texts.pop(key, None)
        if previous is not None:
            group.elements.remove(previous)
            logger.debug("Replacing %s label in %s", placement.kind.value, key[0])

        text = self.drawing.text(
            label.text,
            insert=(placement.x, placement.y),
            id_=label.id,
            class_=class_name,
            **{
                "font-size": placement.font_size,
                "text-anchor": "middle",
                "dominant-baseline": "middle",
            },
        )
        if placement.rotation:
            text.rotate(placement.rotation, center=(placement.x, placement.y))
        group.add(text)
        self._texts[key] = text

    def to_string(self) -> str:
        return self.drawing.tostring()
