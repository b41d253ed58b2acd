from logging import NOTSET, StreamHandler

from pytest import fixture

from bokeh_models import CONFIG
from bokeh_models.constants import logger
from bokeh_models.core.enums import IdStrategy, Position
from bokeh_models.core.models.author import (
    Circle,
    ColumnDataSource,
    Document,
    LinearAxis,
    PanTool,
    Plot,
    WheelZoomTool,
)


@fixture(autouse=True)
def reset_config():
    yield
    CONFIG.rendering.indent = None
    CONFIG.rendering.sort_keys = False
    CONFIG.serialization.id_strategy = IdStrategy.COUNTER
    for handler in [h for h in logger.handlers if type(h) is StreamHandler]:
        logger.removeHandler(handler)
    logger.setLevel(NOTSET)


@fixture
def source() -> ColumnDataSource:
    return ColumnDataSource(data={"x": [1, 2, 3], "y": [4, 5, 6]})


@fixture
def demo_plot(source) -> Plot:
    plot = Plot()
    plot.add_glyph(source, Circle(x="x", y="y"))
    return plot


@fixture
def full_plot(source) -> Plot:
    plot = Plot(min_border=10)
    plot.add_glyph(source, Circle(x="x", y="y", fill_color="x", size=8))
    plot.add_layout(Position.BELOW, LinearAxis())
    plot.add_layout(Position.LEFT, LinearAxis())
    plot.add_tool(PanTool())
    plot.add_tool(WheelZoomTool())
    return plot


@fixture
def demo_document(demo_plot) -> Document:
    doc = Document()
    doc.add_root(demo_plot)
    return doc


@fixture
def full_document(full_plot) -> Document:
    doc = Document()
    doc.add_root(full_plot)
    return doc
