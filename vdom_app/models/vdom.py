from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Tuple, Union


@dataclass(frozen=True)
class Text:
    content: str


@dataclass(frozen=True)
class Element:
    tag: str
    attrs: Mapping[str, str] = field(default_factory=dict)
    children: Tuple["Node", ...] = ()

    def __post_init__(self):
        # read-only copies so a node never changes after construction
        object.__setattr__(self, "attrs", MappingProxyType(dict(self.attrs or {})))
        object.__setattr__(self, "children", tuple(self.children or ()))


Node = Union[Text, Element]


@dataclass(frozen=True)
class Snapshot:
    """The whole UI tree at one point in time."""
    root: Node


def element(tag: str, attrs: Optional[Mapping[str, str]] = None, children: Sequence[Node] = ()) -> Element:
    return Element(tag, attrs or {}, tuple(children))


def nodes_equal(a: Node, b: Node) -> bool:
    """
    Structural equality: variant, tag/text, attribute set and children (in order).
    Attribute order does not matter.
    """
    return a == b


def is_empty_text(node: Node) -> bool:
    return isinstance(node, Text) and len(node.content) == 0
