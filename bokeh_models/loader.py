from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from tomllib import TOMLDecodeError, loads

from bokeh_models.constants import logger
from bokeh_models.core.enums import Position
from bokeh_models.core.exceptions import ChartDescriptionException
from bokeh_models.core.models.author import (
    Circle,
    ColumnDataSource,
    Document,
    LinearAxis,
    PanTool,
    Plot,
    WheelZoomTool,
)

LOGGER_PREFIX = "[LOADER]"

GLYPHS = {"Circle": Circle}
LAYOUTS = {"LinearAxis": LinearAxis}
TOOLS = {"PanTool": PanTool, "WheelZoomTool": WheelZoomTool}


@dataclass
class ChartDescription:
    document: Document
    title: str | None = None


def _lookup(registry: dict[str, type], name: Any, kind: str) -> type:
    try:
        return registry[name]
    except (KeyError, TypeError):
        known = ", ".join(sorted(registry))
        raise ChartDescriptionException(
            f"Unknown {kind} '{name}', expected one of: {known}"
        )


def _build_glyph(raw: Any):
    if not isinstance(raw, dict):
        raise ChartDescriptionException(f"Glyph entries must be tables, got {raw!r}")
    options = dict(raw)
    glyph_type = _lookup(GLYPHS, options.pop("type", "Circle"), "glyph")
    return glyph_type(**options)


def _build_position(raw: str) -> Position:
    try:
        return Position(raw)
    except ValueError:
        known = ", ".join(p.value for p in Position)
        raise ChartDescriptionException(
            f"Unknown layout position '{raw}', expected one of: {known}"
        )


def _section(config_data: dict[str, Any], key: str, kind: type, default: Any) -> Any:
    value = config_data.get(key, default)
    if not isinstance(value, kind):
        expected = "a table" if kind is dict else "an array"
        raise ChartDescriptionException(
            f"'{key}' must be {expected}, got {value!r}"
        )
    return value


def description_from_dict(config_data: dict[str, Any]) -> ChartDescription:
    source = ColumnDataSource()
    for column, values in _section(config_data, "data", dict, {}).items():
        if not isinstance(values, list):
            raise ChartDescriptionException(
                f"Column '{column}' must be an array of numbers, got {values!r}"
            )
        source.add(column, values)

    plot = Plot(min_border=config_data.get("min_border"))
    for raw in _section(config_data, "glyphs", list, []):
        plot.add_glyph(source, _build_glyph(raw))
    for position, name in _section(config_data, "layouts", dict, {}).items():
        plot.add_layout(_build_position(position), _lookup(LAYOUTS, name, "layout")())
    for name in _section(config_data, "tools", list, []):
        plot.add_tool(_lookup(TOOLS, name, "tool")())

    document = Document()
    document.add_root(plot)
    logger.debug(
        f"{LOGGER_PREFIX} Loaded description with columns {source.column_names}"
    )
    return ChartDescription(document=document, title=config_data.get("title"))


def load_description(text: str) -> ChartDescription:
    try:
        config_data = loads(text)
    except TOMLDecodeError as e:
        raise ChartDescriptionException(f"Invalid chart description: {e}") from e
    try:
        return description_from_dict(config_data)
    except ValidationError as e:
        raise ChartDescriptionException(f"Invalid chart description: {e}") from e


def load(text: str) -> Document:
    """Build a document from a TOML chart description."""
    return load_description(text).document


def load_file(path: Path | str) -> Document:
    with open(path, "r") as f:
        return load(f.read())
