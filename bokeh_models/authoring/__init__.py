from bokeh_models.core.enums import Position
from bokeh_models.core.models.author import (
    Circle,
    ColumnDataSource,
    Document,
    Glyph,
    Layout,
    LinearAxis,
    PanTool,
    Plot,
    Tool,
    WheelZoomTool,
)
from bokeh_models.core.models.build import GlyphRenderer, Toolbar
from bokeh_models.core.models.ticking import BasicTicker, BasicTickFormatter

__all__ = [
    "Position",
    "ColumnDataSource",
    "Circle",
    "Glyph",
    "LinearAxis",
    "Layout",
    "PanTool",
    "WheelZoomTool",
    "Tool",
    "Plot",
    "Document",
    "GlyphRenderer",
    "Toolbar",
    "BasicTicker",
    "BasicTickFormatter",
]
