"""Render command for the bokeh-models CLI."""

from click import Choice, Path, argument, echo, option, pass_context

from bokeh_models.constants import CONFIG
from bokeh_models.core.enums import IdStrategy
from bokeh_models.loader import load_description
from bokeh_models.scripts.common import handle_execution_exception
from bokeh_models.serialization import to_wire_string

DEFAULT_TITLE = "Bokeh Plot"


@argument("input", type=Path(exists=True, dir_okay=False))
@option("--title", default=None, help="Document title, overrides the description")
@option("--indent", default=None, type=int, help="Indent the JSON output")
@option(
    "--id-strategy",
    type=Choice([s.value for s in IdStrategy]),
    default=IdStrategy.COUNTER.value,
    help="How reference ids are assigned",
)
@pass_context
def render(ctx, input, title, indent, id_strategy):
    """Print the wire JSON for a chart description."""
    try:
        with open(input, "r") as f:
            description = load_description(f.read())
        validated = description.document.validate()
        with CONFIG.rendering.temporary(indent=indent):
            output = to_wire_string(
                validated,
                title or description.title or DEFAULT_TITLE,
                strategy=IdStrategy(id_strategy),
            )
    except Exception as e:
        handle_execution_exception(e, debug=ctx.obj["DEBUG"])
    echo(output)
