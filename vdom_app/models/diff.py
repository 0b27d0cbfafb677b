from dataclasses import dataclass, field
from typing import List, Union

from vdom_app.models.vdom import Node


@dataclass(frozen=True)
class Added:
    node: Node


@dataclass(frozen=True)
class RemovedNode:
    node: Node


Change = Union[Added, RemovedNode]


@dataclass
class DomResponse:
    """
    Result of one comparison: removals first, then additions,
    plus the markup of the new tree.
    """
    diff: List[Change] = field(default_factory=list)
    html: str = ""
