"""Common helper functions used across all CLI commands."""

import traceback
from logging import DEBUG, StreamHandler

from click.exceptions import Exit

from bokeh_models.constants import logger
from bokeh_models.core.exceptions import (
    BuilderConsumedException,
    ChartDescriptionException,
    ModelValidationError,
)
from bokeh_models.scripts.display import print_error


def enable_debug_logging(level=DEBUG) -> None:
    if not any([isinstance(x, StreamHandler) for x in logger.handlers]):
        logger.addHandler(StreamHandler())
    logger.setLevel(level)


def handle_execution_exception(e: Exception, debug: bool = False) -> None:
    if isinstance(e, ModelValidationError):
        print_error(f"Validation failed: {e.message}")
    elif isinstance(e, (ChartDescriptionException, BuilderConsumedException)):
        print_error(str(e))
    else:
        print_error(f"Unexpected error: {e}")
    if debug:
        print_error(f"Full traceback:\n{traceback.format_exc()}")
    raise Exit(1) from e
