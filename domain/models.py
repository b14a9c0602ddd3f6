from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

DEFAULT_WIDTH = 960.0
DEFAULT_ASPECT_RATIO = 16 / 9
DEFAULT_MARGIN_FRACTION = 0.1
DEFAULT_LABEL_CLASS = "labels"
DEFAULT_CONTAINER = "#root"
DEFAULT_SVG_CLASS = "chart-layout"


@dataclass(frozen=True)
class Dimensions:
    height: float
    width: float


@dataclass(frozen=True)
class Margins:
    top: float
    right: float
    bottom: float
    left: float

    @classmethod
    def zero(cls) -> Margins:
        return cls(top=0.0, right=0.0, bottom=0.0, left=0.0)


@dataclass(frozen=True)
class Percent:
    """Margin given in whole percent, e.g. ``Percent(10)`` for 10%."""

    percent: float

    def as_fraction(self) -> float:
        return self.percent / 100


@dataclass(frozen=True)
class Fraction:
    """Margin given as a fraction of the basis, e.g. ``Fraction(0.1)``."""

    fraction: float

    def as_fraction(self) -> float:
        return self.fraction


# Plain numbers are whole percent when >= 1 and a fraction otherwise.
MarginSpec = float | Percent | Fraction | Margins


@dataclass(frozen=True)
class Area:
    height: float
    width: float
    x: float
    y: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


class Region(str, Enum):
    PLOT = "plot"
    HEADER = "header"
    FOOTER = "footer"
    LEFT_LABEL = "left_label"
    RIGHT_LABEL = "right_label"
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"

    @property
    def group_name(self) -> str:
        return f"{self.value.replace('_', '-')}-group"


class LabelKind(str, Enum):
    HEADER = "header"
    SUBHEADER = "subheader"
    FOOTER = "footer"
    LEFT = "left"
    RIGHT = "right"


class Label(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    text: str


class LabelUpdate(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str | None = None
    text: str | None = None

    def apply(self, label: Label | None, default_id: str) -> Label:
        if label is None:
            return Label(id=self.id or default_id, text=self.text or "")
        return label.model_copy(
            update={key: value for key, value in self.model_dump().items() if value is not None}
        )


class Labels(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    class_name: str = Field(
        default=DEFAULT_LABEL_CLASS,
        validation_alias=AliasChoices("class_name", "className"),
    )
    header: Label = Label(id="header", text="Header")
    footer: Label = Label(id="footer", text="Footer")
    left: Label = Label(id="left-label", text="Left Label")
    right: Label = Label(id="right-label", text="Right Label")
    subheader: Label | None = None

    def label_for(self, kind: LabelKind) -> Label | None:
        return getattr(self, kind.value)

    def merged(self, update: LabelsUpdate) -> Labels:
        changes: dict[str, object] = {}
        if update.class_name is not None:
            changes["class_name"] = update.class_name
        for kind in LabelKind:
            slot = update.slot(kind)
            if slot is None:
                continue
            changes[kind.value] = slot.apply(self.label_for(kind), default_id=kind.value)
        return self.model_copy(update=changes)


class LabelsUpdate(BaseModel):
    """Per-slot overrides; unset slots keep their current label."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    class_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("class_name", "className"),
    )
    header: LabelUpdate | None = None
    footer: LabelUpdate | None = None
    left: LabelUpdate | None = None
    right: LabelUpdate | None = None
    subheader: LabelUpdate | None = None

    def slot(self, kind: LabelKind) -> LabelUpdate | None:
        return getattr(self, kind.value)


@dataclass(frozen=True)
class LabelPlacement:
    kind: LabelKind
    x: float
    y: float
    font_size: float
    rotation: float = 0.0


class ChartLayoutConfig(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    aspect_ratio: float | None = Field(
        default=None,
        validation_alias=AliasChoices("aspect_ratio", "aspectRatio"),
    )
    width: float | None = None
    height: float | None = None
    margins: MarginSpec | None = None
    labels: LabelsUpdate | None = None
    strict: bool = False
