from bokeh_models.constants import CONFIG, PROTOCOL_VERSION
from bokeh_models.core.enums import IdStrategy, Position
from bokeh_models.core.exceptions import (
    BuilderConsumedException,
    MissingDataSource,
    MissingPlot,
)
from bokeh_models.core.models.author import (
    Circle,
    ColumnDataSource,
    Document,
    LinearAxis,
    PanTool,
    Plot,
    WheelZoomTool,
)
from bokeh_models.core.models.build import ValidatedDocument, ValidatedPlot
from bokeh_models.core.models.ticking import BasicTicker, BasicTickFormatter
from bokeh_models.loader import load, load_file
from bokeh_models.serialization import to_wire_document, to_wire_string

__version__ = "0.1.0"

__all__ = [
    "CONFIG",
    "PROTOCOL_VERSION",
    "IdStrategy",
    "Position",
    "BuilderConsumedException",
    "MissingDataSource",
    "MissingPlot",
    "Circle",
    "ColumnDataSource",
    "Document",
    "LinearAxis",
    "PanTool",
    "Plot",
    "WheelZoomTool",
    "ValidatedDocument",
    "ValidatedPlot",
    "BasicTicker",
    "BasicTickFormatter",
    "load",
    "load_file",
    "to_wire_document",
    "to_wire_string",
]
