from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Iterator


def to_json_value(value: Any, resolve: Callable[["ToBokeh"], Any]) -> Any:
    """Convert an attribute value to plain JSON, handing nested models to `resolve`."""
    if isinstance(value, ToBokeh):
        return resolve(value)
    if isinstance(value, dict):
        return {
            str(k): to_json_value(v, resolve) for k, v in value.items() if v is not None
        }
    if isinstance(value, (list, tuple)):
        return [to_json_value(v, resolve) for v in value]
    return value


def iter_models(value: Any) -> Iterator["ToBokeh"]:
    if isinstance(value, ToBokeh):
        yield value
    elif isinstance(value, dict):
        for v in value.values():
            yield from iter_models(v)
    elif isinstance(value, (list, tuple)):
        for v in value:
            yield from iter_models(v)


def canonical_text(value: Any) -> str:
    return json.dumps(value, sort_keys=True, separators=(",", ":"))


class ToBokeh(ABC):
    """Ability to be represented as a BokehJS model.

    Every object that can appear in the reference graph implements this.
    The representation carries `attributes` and `type` only; ids are the
    serializer's business.
    """

    view_model: ClassVar[str]

    @abstractmethod
    def properties(self) -> dict[str, Any]:
        """Kind specific attributes. Values may be other models."""
        pass

    def as_value(self) -> dict[str, Any]:
        return {
            "attributes": to_json_value(
                self.properties(), lambda model: model.as_value()
            ),
            "type": self.view_model,
        }

    def as_text(self) -> str:
        return canonical_text(self.as_value())

    def children(self) -> list["ToBokeh"]:
        return list(iter_models(self.properties()))
