import logging

from vdom_app.models.diff import DomResponse
from vdom_app.models.vdom import Snapshot, Text, element
from vdom_app.services.diff_service import compare

logger = logging.getLogger(__name__)


class AppService:
    """
    Builds the before/after trees for the demo page and diffs them:
    - run_app: the page drops its <input id="myInput"> field
    - update_input: an empty text slot is filled with the typed value
    """

    def run_app(self, dynamic_input: str = "") -> DomResponse:
        old_dom = Snapshot(
            element("div", {}, [
                Text(dynamic_input),
                element("input", {"id": "myInput"}),
            ])
        )
        new_dom = Snapshot(element("div", {}, [Text(dynamic_input)]))

        return compare(old_dom, new_dom)

    def update_input(self, value: str) -> DomResponse:
        old_dom = Snapshot(element("div", {}, [Text("")]))
        new_dom = Snapshot(element("div", {}, [Text(value)] if value else []))

        result = compare(old_dom, new_dom)
        logger.info("HTML PREVIEW: %r", result.html)
        return result
