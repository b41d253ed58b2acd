from click import group, option, pass_context

from bokeh_models.scripts.common import enable_debug_logging
from bokeh_models.scripts.display import show_debug_mode
from bokeh_models.scripts.render import render
from bokeh_models.scripts.validate import validate


@group()
@option("--debug", is_flag=True, default=False, help="Enable debug mode")
@pass_context
def cli(ctx, debug: bool):
    """bokeh-models CLI - compile chart descriptions to BokehJS JSON."""
    ctx.ensure_object(dict)
    ctx.obj["DEBUG"] = debug

    if debug:
        show_debug_mode()
        enable_debug_logging()


cli.command("render")(render)
cli.command("validate")(validate)


if __name__ == "__main__":
    cli()
