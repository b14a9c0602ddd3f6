from __future__ import annotations

from pathlib import Path
from typing import Protocol

from domain.models import ChartLayoutConfig


class LayoutConfigRepository(Protocol):
    def load_by_path(self, path: Path) -> ChartLayoutConfig: ...


class SvgRepository(Protocol):
    def save(self, svg: str, path: Path) -> None: ...
