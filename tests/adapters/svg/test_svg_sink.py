from __future__ import annotations

import re
import xml.etree.ElementTree as ET

import pytest

from adapters.svg.sink import SvgRenderingSink
from domain.models import (
    Area,
    ChartLayoutConfig,
    Label,
    LabelKind,
    LabelPlacement,
    LabelsUpdate,
    LabelUpdate,
)
from domain.services.chart_layout import ChartLayout
from domain.services.render_chart_layout import ChartLayoutRenderer

SVG = "{http://www.w3.org/2000/svg}"


def _numbers(value: str) -> list[float]:
    return [float(token) for token in re.findall(r"-?\d+(?:\.\d+)?", value)]


def _render(
    config: ChartLayoutConfig | None = None,
) -> tuple[ChartLayoutRenderer, SvgRenderingSink]:
    sink = SvgRenderingSink()
    layout = ChartLayout(config or ChartLayoutConfig(width=960, height=540))
    renderer = ChartLayoutRenderer(layout, sink)
    renderer.create_chart_layout()
    return renderer, sink


def _groups(sink: SvgRenderingSink) -> dict[str, ET.Element]:
    root = ET.fromstring(sink.to_string())
    return {group.get("id"): group for group in root.iter(f"{SVG}g")}


def test_canvas_uses_scaling_viewbox() -> None:
    _, sink = _render()

    root = ET.fromstring(sink.to_string())

    assert root.get("viewBox") == "0 0 960 540"
    assert root.get("preserveAspectRatio") == "xMidYMid meet"
    assert root.get("class") == "chart-layout"
    assert sink.container == "#root"


def test_groups_are_translated_to_region_origin() -> None:
    _, sink = _render()

    groups = _groups(sink)

    assert list(groups) == [
        "plot-group",
        "header-group",
        "footer-group",
        "left-label-group",
        "right-label-group",
        "top-left-group",
        "top-right-group",
        "bottom-left-group",
        "bottom-right-group",
    ]
    assert _numbers(groups["plot-group"].get("transform", "")) == pytest.approx([96, 54])
    assert _numbers(groups["footer-group"].get("transform", "")) == pytest.approx([96, 486])
    assert _numbers(groups["right-label-group"].get("transform", "")) == pytest.approx([864, 54])


def test_labels_are_centered_text_elements() -> None:
    _, sink = _render()

    header = _groups(sink)["header-group"].find(f"{SVG}text")

    assert header is not None
    assert header.text == "Header"
    assert header.get("id") == "header"
    assert header.get("class") == "labels"
    assert header.get("text-anchor") == "middle"
    assert header.get("dominant-baseline") == "middle"
    assert float(header.get("x", "0")) == pytest.approx(384)
    assert float(header.get("y", "0")) == pytest.approx(13.5)
    assert float(header.get("font-size", "0")) == pytest.approx(27)
    assert header.get("transform") is None


def test_side_labels_rotate_about_their_anchor() -> None:
    _, sink = _render()
    groups = _groups(sink)

    left = groups["left-label-group"].find(f"{SVG}text")
    right = groups["right-label-group"].find(f"{SVG}text")

    assert left is not None and right is not None
    assert _numbers(left.get("transform", "")) == pytest.approx([-90, 48, 216])
    assert _numbers(right.get("transform", "")) == pytest.approx([90, 48, 216])


def test_redraw_replaces_label_instead_of_stacking() -> None:
    renderer, sink = _render()

    renderer.set_labels(LabelsUpdate(header=LabelUpdate(text="Revenue")))
    renderer.set_labels(LabelsUpdate(header=LabelUpdate(text="Revenue 2024")))

    texts = _groups(sink)["header-group"].findall(f"{SVG}text")
    assert [text.text for text in texts] == ["Revenue 2024"]


def test_subheader_shares_header_group() -> None:
    config = ChartLayoutConfig(
        width=960,
        height=540,
        labels=LabelsUpdate(subheader=LabelUpdate(text="Quarterly")),
    )

    _, sink = _render(config)

    texts = _groups(sink)["header-group"].findall(f"{SVG}text")
    assert [text.text for text in texts] == ["Header", "Quarterly"]


def test_empty_label_leaves_group_empty() -> None:
    config = ChartLayoutConfig(labels=LabelsUpdate(footer=LabelUpdate(text="")))

    _, sink = _render(config)

    assert _groups(sink)["footer-group"].findall(f"{SVG}text") == []


def test_clearing_a_label_removes_its_text() -> None:
    renderer, sink = _render()

    renderer.set_labels(LabelsUpdate(footer=LabelUpdate(text="")))

    assert _groups(sink)["footer-group"].findall(f"{SVG}text") == []
    assert ">Footer<" not in sink.to_string()


def test_viewbox_keeps_full_precision() -> None:
    _, sink = _render(ChartLayoutConfig(width=1234.5678, height=2000000))

    root = ET.fromstring(sink.to_string())

    assert root.get("viewBox") == "0 0 1234.5678 2000000"


def test_margin_change_starts_a_fresh_drawing() -> None:
    renderer, sink = _render()

    renderer.set_margins(0)

    groups = _groups(sink)
    assert len(groups) == 9
    assert _numbers(groups["plot-group"].get("transform", "")) == pytest.approx([0, 0])


def test_drawing_requires_a_canvas() -> None:
    sink = SvgRenderingSink()

    with pytest.raises(RuntimeError):
        sink.append_group("plot-group", Area(height=1, width=1, x=0, y=0))
    with pytest.raises(RuntimeError):
        sink.to_string()


def test_direct_draw_skips_empty_text() -> None:
    sink = SvgRenderingSink()
    sink.create_canvas("#root", "chart", ChartLayout().dimensions)
    group = sink.append_group("header-group", Area(height=10, width=10, x=0, y=0))

    placement = LabelPlacement(LabelKind.HEADER, 5, 2.5, 5)

    sink.draw_label(group, placement, Label(id="h", text=""), "labels")

    assert group.elements == []
