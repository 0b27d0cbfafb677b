import logging
from typing import List

from vdom_app.models.diff import Added, Change, DomResponse, RemovedNode
from vdom_app.models.vdom import Element, Node, Snapshot, is_empty_text, nodes_equal
from vdom_app.services.render_service import render

logger = logging.getLogger(__name__)


def compare(old: Snapshot, new: Snapshot) -> DomResponse:
    """
    Compare two snapshots and render the new one.

    Two independent passes walk the trees in lock-step:
      - removal pass: old nodes that differ from their counterpart
      - addition pass: new nodes that differ from their counterpart
    Children are paired by index and the walk stops at the shorter list,
    so trailing children on either side are never reported.
    """
    diff: List[Change] = []
    diff.extend(RemovedNode(node) for node in find_removed_nodes(old, new))
    diff.extend(Added(node) for node in find_added_nodes(old, new))

    html = render(new.root)

    for change in diff:
        if isinstance(change, Added):
            logger.debug("Added Node: %r", change.node)
        else:
            logger.debug("Removed Node: %r", change.node)

    return DomResponse(diff=diff, html=html)


def find_removed_nodes(old: Snapshot, new: Snapshot) -> List[Node]:
    removed: List[Node] = []
    _collect_changed(old.root, new.root, removed, take_old=True)
    return removed


def find_added_nodes(old: Snapshot, new: Snapshot) -> List[Node]:
    added: List[Node] = []
    _collect_changed(old.root, new.root, added, take_old=False)
    return added


def _collect_changed(old: Node, new: Node, out: List[Node], take_old: bool) -> None:
    """
    Pre-order walk over a positional pair of nodes.
    An unequal pair is reported as a whole subtree (no descent);
    empty text on the reported side is skipped.
    """
    if not nodes_equal(old, new):
        node = old if take_old else new
        if not is_empty_text(node):
            out.append(node)
        return

    if isinstance(old, Element) and isinstance(new, Element):
        # zip() truncates to the shorter child list
        for old_child, new_child in zip(old.children, new.children):
            _collect_changed(old_child, new_child, out, take_old)
