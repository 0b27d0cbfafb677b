import pytest

from vdom_app.models.diff import Added, DomResponse, RemovedNode
from vdom_app.models.vdom import Snapshot, Text, element
from vdom_app.utils.wire import (
    WireFormatError,
    node_from_wire,
    node_to_wire,
    response_to_wire,
    snapshot_from_wire,
)


def test_response_shape():
    response = DomResponse(
        diff=[RemovedNode(Text("a")), Added(element("b", {"id": "x"}, [Text("c")]))],
        html='<b id="x">c</b>',
    )

    assert response_to_wire(response) == {
        "diff": [
            {"RemoveNode": {"element_type": {"Text": "a"}}},
            {"AddNode": {"element_type": {"Element": ["b", {"id": "x"}, [{"Text": "c"}]]}}},
        ],
        "html": '<b id="x">c</b>',
    }


def test_decode_nested_snapshot():
    data = {"element_type": {"Element": ["div", {}, [{"Text": "Hi"}, {"Element": ["br", {}, []]}]]}}
    assert snapshot_from_wire(data) == Snapshot(element("div", {}, [Text("Hi"), element("br")]))


def test_decode_preserves_attribute_order():
    node = node_from_wire({"Element": ["a", {"z": "1", "a": "2"}, []]})
    assert list(node.attrs) == ["z", "a"]
    assert node_to_wire(node) == {"Element": ["a", {"z": "1", "a": "2"}, []]}


@pytest.mark.parametrize("payload", [
    "text",
    {},
    {"Text": "a", "Element": []},
    {"Comment": "x"},
    {"Text": 3},
    {"Element": ["div", {}]},
    {"Element": [1, {}, []]},
    {"Element": ["div", [], []]},
    {"Element": ["div", {"id": 1}, []]},
    {"Element": ["div", {}, "child"]},
    {"Element": ["div", {}, [{"Bogus": ""}]]},
])
def test_decode_rejects_malformed(payload):
    with pytest.raises(WireFormatError):
        node_from_wire(payload)


def test_snapshot_requires_element_type():
    with pytest.raises(WireFormatError):
        snapshot_from_wire({"Text": "a"})
