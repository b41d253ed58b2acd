from __future__ import annotations

from dataclasses import dataclass, field
from functools import singledispatchmethod
from types import MappingProxyType
from typing import Any, ClassVar, Mapping

from bokeh_models.constants import CONFIG, Config, logger
from bokeh_models.core.enums import Position
from bokeh_models.core.exceptions import MissingDataSource, MissingPlot
from bokeh_models.core.models.author import (
    ColumnDataSource,
    Document,
    Glyph,
    Layout,
    Plot,
    Tool,
)
from bokeh_models.core.models.core import ToBokeh

LOGGER_PREFIX = "[MODELS_BUILD]"


@dataclass(frozen=True, eq=False)
class GlyphRenderer(ToBokeh):
    """Binds one glyph to the data source it draws from."""

    view_model: ClassVar[str] = "GlyphRenderer"

    data_source: ColumnDataSource
    glyph: Glyph

    def properties(self) -> dict[str, Any]:
        return {"data_source": self.data_source, "glyph": self.glyph}


@dataclass(frozen=True, eq=False)
class Toolbar(ToBokeh):
    view_model: ClassVar[str] = "Toolbar"

    tools: tuple[Tool, ...] = ()

    def properties(self) -> dict[str, Any]:
        return {"tools": list(self.tools)}


@dataclass(frozen=True, eq=False)
class ValidatedPlot(ToBokeh):
    """Plot that has passed validation.

    The source is guaranteed present. Renderers and the toolbar are
    created once here so every serialization sees the same objects.
    """

    view_model: ClassVar[str] = "Plot"

    source: ColumnDataSource
    min_border: int | None = None
    glyphs: tuple[Glyph, ...] = ()
    layouts: Mapping[Position, Layout] = field(
        default_factory=lambda: MappingProxyType({})
    )
    tools: tuple[Tool, ...] = ()
    renderers: tuple[GlyphRenderer, ...] = ()
    toolbar: Toolbar = field(default_factory=Toolbar)

    def side(self, position: Position) -> list[Layout]:
        layout = self.layouts.get(position)
        return [layout] if layout is not None else []

    def properties(self) -> dict[str, Any]:
        return {
            "min_border": self.min_border,
            "renderers": list(self.renderers),
            "below": self.side(Position.BELOW),
            "left": self.side(Position.LEFT),
            "right": self.side(Position.RIGHT),
            "above": self.side(Position.ABOVE),
            "toolbar": self.toolbar,
        }


@dataclass(frozen=True, eq=False)
class ValidatedDocument:
    """Document whose root plot has passed validation."""

    plot: ValidatedPlot

    @property
    def roots(self) -> tuple[ValidatedPlot, ...]:
        return (self.plot,)

    def references(self) -> list[dict[str, Any]]:
        """Every model reachable from the root, ready for the wire."""
        from bokeh_models.serialization import references

        return references(*self.roots)


class Factory:
    """Turns builders into their validated counterparts.

    This is the only place invariants are checked. A builder handed to
    `build` is consumed whether or not validation succeeds.
    """

    def __init__(self, config: Config | None = None):
        self.config = config or CONFIG

    @singledispatchmethod
    def build(self, base):
        raise NotImplementedError("Cannot build {}".format(type(base)))

    @build.register
    def _(self, base: Plot) -> ValidatedPlot:
        return self._build_plot(base)

    @build.register
    def _(self, base: Document) -> ValidatedDocument:
        return self._build_document(base)

    def _build_plot(self, base: Plot) -> ValidatedPlot:
        base.consume()
        if base.source is None:
            raise MissingDataSource("no ColumnDataSource found")
        source = base.source
        if self.config.warn_ragged_columns and source.is_ragged:
            logger.warning(
                f"{LOGGER_PREFIX} ColumnDataSource has columns of unequal length: {source.column_lengths}"
            )
        glyphs = tuple(base.glyphs)
        tools = tuple(base.tools)
        logger.debug(
            f"{LOGGER_PREFIX} Validated plot with {len(glyphs)} glyph(s), "
            f"{len(base.layouts)} layout(s), {len(tools)} tool(s)"
        )
        return ValidatedPlot(
            source=source,
            min_border=base.min_border,
            glyphs=glyphs,
            layouts=MappingProxyType(dict(base.layouts)),
            tools=tools,
            renderers=tuple(
                GlyphRenderer(data_source=source, glyph=glyph) for glyph in glyphs
            ),
            toolbar=Toolbar(tools=tools),
        )

    def _build_document(self, base: Document) -> ValidatedDocument:
        base.consume()
        if base.root is None:
            raise MissingPlot("document requires a plot")
        return ValidatedDocument(plot=self.build(base.root))
