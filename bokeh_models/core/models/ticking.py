from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from bokeh_models.core.models.core import ToBokeh


class BasicTicker(ToBokeh, BaseModel):
    model_config = ConfigDict(frozen=True)
    view_model: ClassVar[str] = "BasicTicker"

    def properties(self) -> dict[str, Any]:
        return {}


class BasicTickFormatter(ToBokeh, BaseModel):
    model_config = ConfigDict(frozen=True)
    view_model: ClassVar[str] = "BasicTickFormatter"

    def properties(self) -> dict[str, Any]:
        return {}
