from typing import Any, Dict

from vdom_app.models.diff import Added, Change, DomResponse
from vdom_app.models.vdom import Element, Node, Snapshot, Text


class WireFormatError(ValueError):
    """Raised when a JSON payload does not describe a valid node."""


def node_to_wire(node: Node) -> Dict[str, Any]:
    """
    Externally tagged shape:
      {"Text": "hi"}
      {"Element": ["div", {"id": "x"}, [...children]]}
    """
    if isinstance(node, Text):
        return {"Text": node.content}
    return {
        "Element": [
            node.tag,
            dict(node.attrs),
            [node_to_wire(child) for child in node.children],
        ]
    }


def snapshot_to_wire(snapshot: Snapshot) -> Dict[str, Any]:
    return {"element_type": node_to_wire(snapshot.root)}


def change_to_wire(change: Change) -> Dict[str, Any]:
    key = "AddNode" if isinstance(change, Added) else "RemoveNode"
    return {key: snapshot_to_wire(Snapshot(change.node))}


def response_to_wire(response: DomResponse) -> Dict[str, Any]:
    return {
        "diff": [change_to_wire(c) for c in response.diff],
        "html": response.html,
    }


def node_from_wire(data: Any) -> Node:
    if not isinstance(data, dict) or len(data) != 1:
        raise WireFormatError(f"expected an object with exactly one variant key, got {data!r}")

    (variant, payload), = data.items()

    if variant == "Text":
        if not isinstance(payload, str):
            raise WireFormatError(f"Text payload must be a string, got {type(payload).__name__}")
        return Text(payload)

    if variant == "Element":
        if not isinstance(payload, list) or len(payload) != 3:
            raise WireFormatError("Element payload must be [tag, attrs, children]")
        tag, attrs, children = payload
        if not isinstance(tag, str):
            raise WireFormatError(f"Element tag must be a string, got {type(tag).__name__}")
        if not isinstance(attrs, dict):
            raise WireFormatError(f"attributes of <{tag}> must be an object")
        for name, value in attrs.items():
            if not isinstance(value, str):
                raise WireFormatError(f"attribute {name!r} of <{tag}> must be a string")
        if not isinstance(children, list):
            raise WireFormatError(f"children of <{tag}> must be a list")
        return Element(tag, attrs, tuple(node_from_wire(child) for child in children))

    raise WireFormatError(f"unknown node variant {variant!r}")


def snapshot_from_wire(data: Any) -> Snapshot:
    if not isinstance(data, dict) or "element_type" not in data:
        raise WireFormatError("snapshot must be an object with an 'element_type' key")
    return Snapshot(node_from_wire(data["element_type"]))
