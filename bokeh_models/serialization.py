"""Flatten validated documents into the BokehJS reference graph wire format."""

import hashlib
import json
from itertools import count
from typing import Any

from bokeh_models.constants import CONFIG, PROTOCOL_VERSION, logger
from bokeh_models.core.enums import IdStrategy
from bokeh_models.core.graph_models import ReferenceGraph, model_to_node
from bokeh_models.core.models.build import ValidatedDocument, ValidatedPlot
from bokeh_models.core.models.core import ToBokeh, to_json_value

LOGGER_PREFIX = "[SERIALIZATION]"


class IdAllocator:
    """Hands out ids for one serialization call.

    COUNTER yields "1001", "1002", ... in visiting order. HASH derives the id
    from the model's canonical text, suffixing distinct models whose text
    collides.

    Assigned models are held for the life of the allocator, so an identity
    key is never reused by a different object.
    """

    def __init__(
        self, strategy: IdStrategy | None = None, start: int | None = None
    ) -> None:
        self.strategy = strategy or CONFIG.serialization.id_strategy
        self._counter = count(CONFIG.serialization.id_start if start is None else start)
        self._digests: dict[str, int] = {}
        self._models: dict[str, ToBokeh] = {}
        self.assigned: dict[str, str] = {}

    def assign(self, model: ToBokeh) -> str:
        node = model_to_node(model)
        if node in self.assigned:
            return self.assigned[node]
        if self.strategy == IdStrategy.HASH:
            new_id = self._hash_id(model)
        else:
            new_id = str(next(self._counter))
        self._models[node] = model
        self.assigned[node] = new_id
        return new_id

    def _hash_id(self, model: ToBokeh) -> str:
        digest = hashlib.md5(model.as_text().encode()).hexdigest()
        seen = self._digests.get(digest, 0) + 1
        self._digests[digest] = seen
        if seen == 1:
            return digest
        return f"{digest}-{seen}"


def serialize_model(model: ToBokeh, ids: dict[str, str]) -> dict[str, Any]:
    def reference(child: ToBokeh) -> dict[str, str]:
        return {"id": ids[model_to_node(child)], "type": child.view_model}

    return {
        "attributes": to_json_value(model.properties(), reference),
        "id": ids[model_to_node(model)],
        "type": model.view_model,
    }


def build_reference_graph(*roots: ToBokeh) -> ReferenceGraph:
    graph = ReferenceGraph()
    for root in roots:
        graph.add_root(root)
    return graph


def references(
    *roots: ValidatedPlot, strategy: IdStrategy | None = None
) -> list[dict[str, Any]]:
    """Serialize every model reachable from `roots`, each distinct object once."""
    graph = build_reference_graph(*roots)
    allocator = IdAllocator(strategy=strategy)
    ordered = graph.ordered_models()
    for model in ordered:
        allocator.assign(model)
    logger.debug(
        f"{LOGGER_PREFIX} Collected {len(ordered)} reference(s) from {len(roots)} root(s)"
    )
    return [serialize_model(model, allocator.assigned) for model in ordered]


def to_wire_document(
    doc: ValidatedDocument, title: str, strategy: IdStrategy | None = None
) -> dict[str, Any]:
    """Return the JSON representation of a validated document."""
    if not isinstance(doc, ValidatedDocument):
        raise TypeError(
            f"Only a ValidatedDocument can be serialized, got {type(doc).__name__}; "
            "call Document.validate() first"
        )
    return {
        "roots": {
            "references": references(*doc.roots, strategy=strategy),
        },
        "title": str(title),
        "version": PROTOCOL_VERSION,
    }


def to_wire_string(
    doc: ValidatedDocument, title: str, strategy: IdStrategy | None = None
) -> str:
    return json.dumps(
        to_wire_document(doc, title, strategy=strategy),
        indent=CONFIG.rendering.indent,
        sort_keys=CONFIG.rendering.sort_keys,
        allow_nan=False,
    )
