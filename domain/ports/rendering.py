from __future__ import annotations

from typing import Any, Protocol

from domain.models import Area, Dimensions, Label, LabelPlacement


class RenderingSink(Protocol):
    def create_canvas(self, container: str, class_name: str, dimensions: Dimensions) -> None: ...

    def append_group(self, name: str, area: Area) -> Any: ...

    def draw_label(
        self,
        group: Any,
        placement: LabelPlacement,
        label: Label,
        class_name: str,
    ) -> None: ...
