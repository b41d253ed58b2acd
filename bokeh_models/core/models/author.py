from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Iterable, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    FiniteFloat,
    NonNegativeInt,
    PrivateAttr,
    TypeAdapter,
)

from bokeh_models.core.enums import Position, SpatialUnits
from bokeh_models.core.exceptions import BuilderConsumedException
from bokeh_models.core.models.core import ToBokeh
from bokeh_models.core.models.ticking import BasicTicker, BasicTickFormatter

if TYPE_CHECKING:
    from bokeh_models.core.models.build import ValidatedDocument, ValidatedPlot

_COLUMN_ADAPTER = TypeAdapter(list[FiniteFloat])


def field_spec(name: str | None) -> dict[str, str] | None:
    if name is None:
        return None
    return {"field": name}


def value_spec(
    value: int | float | None, units: SpatialUnits = SpatialUnits.SCREEN
) -> dict[str, Any] | None:
    if value is None:
        return None
    return {"units": units.value, "value": value}


# Data


class ColumnDataSource(ToBokeh, BaseModel):
    """Columnar data backing the glyphs of one or more plots.

    Columns are not required to share a length; the runtime decides what
    to do with ragged data. Values must be finite, since NaN and infinities
    have no JSON encoding.
    """

    view_model: ClassVar[str] = "ColumnDataSource"

    data: dict[str, list[FiniteFloat]] = Field(default_factory=dict)

    def add(self, key: str, values: Iterable[float]) -> str:
        """Insert or replace a column, returning its name."""
        self.data[str(key)] = _COLUMN_ADAPTER.validate_python(list(values))
        return str(key)

    @property
    def column_names(self) -> list[str]:
        return list(self.data.keys())

    @property
    def column_lengths(self) -> dict[str, int]:
        return {k: len(v) for k, v in self.data.items()}

    @property
    def is_ragged(self) -> bool:
        return len(set(self.column_lengths.values())) > 1

    def properties(self) -> dict[str, Any]:
        return {"data": {k: list(v) for k, v in self.data.items()}}


# Glyphs


class Circle(ToBokeh, BaseModel):
    """Circle marker. Channels name columns of the bound source."""

    model_config = ConfigDict(frozen=True, extra="forbid")
    view_model: ClassVar[str] = "Circle"

    x: Optional[str] = None
    y: Optional[str] = None
    fill_color: Optional[str] = None
    line_color: Optional[str] = None
    size: Optional[NonNegativeInt] = None
    size_units: SpatialUnits = SpatialUnits.SCREEN

    def properties(self) -> dict[str, Any]:
        return {
            "x": field_spec(self.x),
            "y": field_spec(self.y),
            "fill_color": field_spec(self.fill_color),
            "line_color": field_spec(self.line_color),
            "size": value_spec(self.size, self.size_units),
        }


Glyph = Circle
GLYPH_TYPES: tuple[type, ...] = (Circle,)


# Layouts


class LinearAxis(ToBokeh, BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")
    view_model: ClassVar[str] = "LinearAxis"

    ticker: BasicTicker = Field(default_factory=BasicTicker)
    formatter: BasicTickFormatter = Field(default_factory=BasicTickFormatter)

    def properties(self) -> dict[str, Any]:
        return {"formatter": self.formatter, "ticker": self.ticker}


Layout = LinearAxis
LAYOUT_TYPES: tuple[type, ...] = (LinearAxis,)


# Tools


class PanTool(ToBokeh, BaseModel):
    """Allow the plot to pan."""

    model_config = ConfigDict(frozen=True, extra="forbid")
    view_model: ClassVar[str] = "PanTool"

    def properties(self) -> dict[str, Any]:
        return {}


class WheelZoomTool(ToBokeh, BaseModel):
    """Zoom in and out with the mouse wheel."""

    model_config = ConfigDict(frozen=True, extra="forbid")
    view_model: ClassVar[str] = "WheelZoomTool"

    def properties(self) -> dict[str, Any]:
        return {}


Tool = Union[PanTool, WheelZoomTool]
TOOL_TYPES: tuple[type, ...] = (PanTool, WheelZoomTool)


def _require(value: Any, allowed: tuple[type, ...], role: str) -> None:
    if not isinstance(value, allowed):
        names = ", ".join(t.__name__ for t in allowed)
        raise TypeError(
            f"Expected {role} of type {names}, got {type(value).__name__}"
        )


# Builders


class Builder(BaseModel):
    """Mutable accumulator that can be validated exactly once."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    _consumed: bool = PrivateAttr(default=False)

    @property
    def consumed(self) -> bool:
        return self._consumed

    def _check_open(self) -> None:
        if self._consumed:
            raise BuilderConsumedException(
                f"{type(self).__name__} has already been validated; build a new one"
            )

    def consume(self) -> None:
        self._check_open()
        self._consumed = True


class Plot(Builder):
    """A plot under construction.

    Only `min_border` is set through the constructor. The source, glyphs,
    layouts and tools are bound through the `add_*` operations.
    """

    min_border: Optional[NonNegativeInt] = None

    _source: Optional[ColumnDataSource] = PrivateAttr(default=None)
    _glyphs: list[Glyph] = PrivateAttr(default_factory=list)
    _layouts: dict[Position, Layout] = PrivateAttr(default_factory=dict)
    _tools: list[Tool] = PrivateAttr(default_factory=list)

    @property
    def source(self) -> Optional[ColumnDataSource]:
        return self._source

    @property
    def glyphs(self) -> list[Glyph]:
        return list(self._glyphs)

    @property
    def layouts(self) -> dict[Position, Layout]:
        return dict(self._layouts)

    @property
    def tools(self) -> list[Tool]:
        return list(self._tools)

    def add_glyph(self, source: ColumnDataSource, glyph: Glyph) -> None:
        """Bind `source` to the plot and append `glyph`.

        The most recently bound source wins.
        """
        self._check_open()
        _require(source, (ColumnDataSource,), "source")
        _require(glyph, GLYPH_TYPES, "glyph")
        self._source = source
        self._glyphs.append(glyph)

    def add_layout(self, position: Position | str, layout: Layout) -> None:
        self._check_open()
        _require(layout, LAYOUT_TYPES, "layout")
        self._layouts[Position(position)] = layout

    def add_tool(self, tool: Tool) -> None:
        self._check_open()
        _require(tool, TOOL_TYPES, "tool")
        self._tools.append(tool)

    def validate(self) -> "ValidatedPlot":
        from bokeh_models.core.models.build import Factory

        return Factory().build(self)


class Document(Builder):
    """Main document object, holding a single root plot."""

    _root: Optional[Plot] = PrivateAttr(default=None)

    @property
    def root(self) -> Optional[Plot]:
        return self._root

    def add_root(self, plot: Plot) -> None:
        """Set the root plot, replacing any previous one."""
        self._check_open()
        _require(plot, (Plot,), "root")
        plot._check_open()
        self._root = plot

    def validate(self) -> "ValidatedDocument":
        from bokeh_models.core.models.build import Factory

        return Factory().build(self)
