from contextlib import contextmanager
from dataclasses import dataclass, field
from logging import getLogger
from typing import Any

from bokeh_models.core.enums import IdStrategy

logger = getLogger("bokeh_models")

PROTOCOL_VERSION = "1.0.3"

DEFAULT_ID_START = 1001


@dataclass
class Rendering:
    """Control how the wire JSON is rendered to text"""

    indent: int | None = None
    sort_keys: bool = False

    @contextmanager
    def temporary(self, **kwargs: Any):
        """
        Context manager to temporarily set attributes and revert them afterwards.

        Usage:
            r = Rendering()
            with r.temporary(indent=2, sort_keys=True):
                # indent is 2, sort_keys is True here
                do_something()
            # indent and sort_keys are back to their original values
        """
        original_values = {key: getattr(self, key) for key in kwargs}

        for key, value in kwargs.items():
            setattr(self, key, value)

        try:
            yield self
        finally:
            for key, value in original_values.items():
                setattr(self, key, value)


@dataclass
class Serialization:
    """Control how reference ids are assigned"""

    id_strategy: IdStrategy = IdStrategy.COUNTER
    id_start: int = DEFAULT_ID_START


@dataclass
class Config:
    warn_ragged_columns: bool = True
    rendering: Rendering = field(default_factory=Rendering)
    serialization: Serialization = field(default_factory=Serialization)


CONFIG = Config()
