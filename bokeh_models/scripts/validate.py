"""Validate command for the bokeh-models CLI."""

from click import Path, argument, pass_context

from bokeh_models.loader import load_file
from bokeh_models.scripts.common import handle_execution_exception
from bokeh_models.scripts.display import print_success


@argument("input", type=Path(exists=True, dir_okay=False))
@pass_context
def validate(ctx, input):
    """Check that a chart description produces a valid document."""
    try:
        validated = load_file(input).validate()
    except Exception as e:
        handle_execution_exception(e, debug=ctx.obj["DEBUG"])
    print_success(
        f"{input} is valid: {len(validated.plot.glyphs)} glyph(s), "
        f"{len(validated.plot.layouts)} layout(s), {len(validated.plot.tools)} tool(s)"
    )
