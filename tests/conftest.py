from __future__ import annotations

import os
from collections.abc import Callable, Generator

import pytest

from domain.models import ChartLayoutConfig
from domain.services.chart_layout import ChartLayout


def _clear_chart_layout_env() -> None:
    for key in list(os.environ):
        if key.startswith("CHART_LAYOUT_"):
            os.environ.pop(key, None)


_clear_chart_layout_env()


@pytest.fixture(autouse=True)
def clear_chart_layout_env() -> Generator[None, None, None]:
    _clear_chart_layout_env()
    yield
    _clear_chart_layout_env()


@pytest.fixture
def layout_config() -> ChartLayoutConfig:
    return ChartLayoutConfig(width=960, height=540)


@pytest.fixture
def layout_factory(layout_config: ChartLayoutConfig) -> Callable[..., ChartLayout]:
    def _factory(**overrides: object) -> ChartLayout:
        return ChartLayout(layout_config.model_copy(update=overrides))

    return _factory
