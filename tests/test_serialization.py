import hashlib
import json

from pytest import raises

from bokeh_models.constants import CONFIG, PROTOCOL_VERSION
from bokeh_models.core.enums import IdStrategy, Position
from bokeh_models.core.graph_models import ReferenceGraph, model_to_node
from bokeh_models.core.models.author import (
    Circle,
    ColumnDataSource,
    Document,
    LinearAxis,
    Plot,
)
from bokeh_models.core.models.ticking import BasicTicker
from bokeh_models.serialization import (
    IdAllocator,
    build_reference_graph,
    references,
    to_wire_document,
    to_wire_string,
)


def entries_of_type(refs: list[dict], view_model: str) -> list[dict]:
    return [r for r in refs if r["type"] == view_model]


def collect_reference_ids(value) -> list[str]:
    found = []
    if isinstance(value, dict):
        if set(value) == {"id", "type"}:
            found.append(value["id"])
        else:
            for v in value.values():
                found.extend(collect_reference_ids(v))
    elif isinstance(value, list):
        for v in value:
            found.extend(collect_reference_ids(v))
    return found


def test_demo_document(demo_document):
    output = to_wire_document(demo_document.validate(), "demo")
    assert output == {
        "roots": {
            "references": [
                {
                    "attributes": {
                        "renderers": [{"id": "1002", "type": "GlyphRenderer"}],
                        "below": [],
                        "left": [],
                        "right": [],
                        "above": [],
                        "toolbar": {"id": "1005", "type": "Toolbar"},
                    },
                    "id": "1001",
                    "type": "Plot",
                },
                {
                    "attributes": {
                        "data_source": {"id": "1003", "type": "ColumnDataSource"},
                        "glyph": {"id": "1004", "type": "Circle"},
                    },
                    "id": "1002",
                    "type": "GlyphRenderer",
                },
                {
                    "attributes": {"data": {"x": [1.0, 2.0, 3.0], "y": [4.0, 5.0, 6.0]}},
                    "id": "1003",
                    "type": "ColumnDataSource",
                },
                {
                    "attributes": {"x": {"field": "x"}, "y": {"field": "y"}},
                    "id": "1004",
                    "type": "Circle",
                },
                {"attributes": {"tools": []}, "id": "1005", "type": "Toolbar"},
            ]
        },
        "title": "demo",
        "version": "1.0.3",
    }


def test_wire_shape(full_document):
    output = to_wire_document(full_document.validate(), "shape")
    assert set(output) == {"roots", "title", "version"}
    assert output["title"] == "shape"
    assert output["version"] == PROTOCOL_VERSION
    refs = output["roots"]["references"]
    assert isinstance(refs, list)
    for ref in refs:
        assert set(ref) == {"id", "attributes", "type"}
        assert isinstance(ref["id"], str)


def test_full_traversal(full_document):
    refs = to_wire_document(full_document.validate(), "full")["roots"]["references"]
    assert [r["type"] for r in refs] == [
        "Plot",
        "GlyphRenderer",
        "ColumnDataSource",
        "Circle",
        "LinearAxis",
        "BasicTickFormatter",
        "BasicTicker",
        "LinearAxis",
        "BasicTickFormatter",
        "BasicTicker",
        "Toolbar",
        "PanTool",
        "WheelZoomTool",
    ]
    plot = refs[0]["attributes"]
    assert plot["min_border"] == 10
    assert plot["below"] == [{"id": refs[4]["id"], "type": "LinearAxis"}]
    assert plot["left"] == [{"id": refs[7]["id"], "type": "LinearAxis"}]
    circle = entries_of_type(refs, "Circle")[0]
    assert circle["attributes"]["size"] == {"units": "screen", "value": 8}


def test_references_resolve_and_ids_unique(full_document):
    refs = to_wire_document(full_document.validate(), "ids")["roots"]["references"]
    ids = [r["id"] for r in refs]
    assert len(ids) == len(set(ids))
    for ref in refs:
        for target in collect_reference_ids(ref["attributes"]):
            assert target in ids


def test_shared_source_serialized_once(source):
    plot = Plot()
    plot.add_glyph(source, Circle(x="x"))
    plot.add_glyph(source, Circle(y="y"))
    doc = Document()
    doc.add_root(plot)
    refs = to_wire_document(doc.validate(), "shared")["roots"]["references"]
    sources = entries_of_type(refs, "ColumnDataSource")
    assert len(sources) == 1
    renderers = entries_of_type(refs, "GlyphRenderer")
    assert len(renderers) == 2
    assert {r["attributes"]["data_source"]["id"] for r in renderers} == {
        sources[0]["id"]
    }


def test_shared_source_across_plots(source):
    first = Plot()
    first.add_glyph(source, Circle(x="x"))
    second = Plot()
    second.add_glyph(source, Circle(y="y"))
    refs = references(first.validate(), second.validate())
    assert len(entries_of_type(refs, "Plot")) == 2
    assert len(entries_of_type(refs, "ColumnDataSource")) == 1


def test_equal_but_distinct_objects_are_kept_apart():
    first = Plot()
    first.add_glyph(ColumnDataSource(data={"x": [1]}), Circle(x="x"))
    second = Plot()
    second.add_glyph(ColumnDataSource(data={"x": [1]}), Circle(x="x"))
    refs = references(first.validate(), second.validate())
    sources = entries_of_type(refs, "ColumnDataSource")
    assert len(sources) == 2
    assert sources[0]["attributes"] == sources[1]["attributes"]
    assert sources[0]["id"] != sources[1]["id"]


def test_shared_ticker_serialized_once(source):
    ticker = BasicTicker()
    plot = Plot()
    plot.add_glyph(source, Circle())
    plot.add_layout(Position.BELOW, LinearAxis(ticker=ticker))
    plot.add_layout(Position.LEFT, LinearAxis(ticker=ticker))
    refs = references(plot.validate())
    assert len(entries_of_type(refs, "BasicTicker")) == 1
    assert len(entries_of_type(refs, "BasicTickFormatter")) == 2


def test_counter_ids_are_deterministic(full_document):
    validated = full_document.validate()
    first = to_wire_document(validated, "again")
    second = to_wire_document(validated, "again")
    assert first == second
    assert first["roots"]["references"][0]["id"] == "1001"


def test_id_start_from_config(demo_document):
    CONFIG.serialization.id_start = 1
    try:
        refs = demo_document.validate().references()
    finally:
        CONFIG.serialization.id_start = 1001
    assert [r["id"] for r in refs] == ["1", "2", "3", "4", "5"]


def test_hash_ids(full_document):
    validated = full_document.validate()
    refs = to_wire_document(validated, "hash", strategy=IdStrategy.HASH)["roots"][
        "references"
    ]
    tickers = entries_of_type(refs, "BasicTicker")
    digest = hashlib.md5(BasicTicker().as_text().encode()).hexdigest()
    assert [t["id"] for t in tickers] == [digest, f"{digest}-2"]
    again = to_wire_document(validated, "hash", strategy=IdStrategy.HASH)
    assert again["roots"]["references"] == refs


def test_hash_strategy_from_config(demo_document):
    CONFIG.serialization.id_strategy = IdStrategy.HASH
    refs = demo_document.validate().references()
    assert all(len(r["id"]) == 32 for r in refs)


def test_allocator_reuses_ids():
    allocator = IdAllocator(strategy=IdStrategy.COUNTER, start=7)
    ticker = BasicTicker()
    assert allocator.assign(ticker) == "7"
    assert allocator.assign(ticker) == "7"
    assert allocator.assign(BasicTicker()) == "8"


def test_allocator_never_reuses_ids_for_short_lived_models():
    allocator = IdAllocator(strategy=IdStrategy.COUNTER)
    ids = [allocator.assign(BasicTicker()) for _ in range(50)]
    assert ids == [str(n) for n in range(1001, 1051)]


def test_wire_string_is_strict_json(demo_document, source):
    validated = demo_document.validate()
    source.data["x"].append(float("nan"))
    with raises(ValueError):
        to_wire_string(validated, "strict")


def test_document_references_match_wire(full_document):
    validated = full_document.validate()
    assert (
        validated.references()
        == to_wire_document(validated, "x")["roots"]["references"]
    )


def test_unvalidated_document_rejected(demo_document):
    with raises(TypeError):
        to_wire_document(demo_document, "nope")
    with raises(TypeError):
        to_wire_string(demo_document, "nope")


def test_to_wire_string(demo_document):
    validated = demo_document.validate()
    text = to_wire_string(validated, "demo")
    assert json.loads(text) == to_wire_document(validated, "demo")
    with CONFIG.rendering.temporary(indent=2, sort_keys=True):
        pretty = to_wire_string(validated, "demo")
    assert pretty.startswith('{\n  "roots"')
    assert json.loads(pretty) == json.loads(text)
    assert CONFIG.rendering.indent is None


def test_reference_graph(full_plot):
    validated = full_plot.validate()
    graph = build_reference_graph(validated)
    assert isinstance(graph, ReferenceGraph)
    root = model_to_node(validated)
    assert graph.roots == [root]
    assert graph.number_of_nodes() == 13
    assert graph.in_degree(root) == 0
    assert graph.has_edge(root, model_to_node(validated.toolbar))
    assert graph.ordered_models()[0] is validated

    graph.remove_node(model_to_node(validated.toolbar))
    assert model_to_node(validated.toolbar) not in graph.models
