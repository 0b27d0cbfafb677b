from fastapi import APIRouter, HTTPException
from vdom_app.models.dom_response import (
    CompareRequest,
    DomResponseModel,
    RenderRequest,
    RenderResponseModel,
    UpdateInputRequest,
)
from vdom_app.services.app_service import AppService
from vdom_app.services.diff_service import compare
from vdom_app.services.render_service import render
from vdom_app.utils.wire import WireFormatError, node_from_wire, response_to_wire, snapshot_from_wire

router = APIRouter()
# stateless; safe to share across requests
app_service = AppService()

@router.get("/run_app", response_model=DomResponseModel)
def run_app():
    """
    Diff of the demo page losing its input field.
    """
    return response_to_wire(app_service.run_app(""))

@router.post("/update_input", response_model=DomResponseModel)
def update_input(body: UpdateInputRequest):
    """
    Diff of an empty text slot being filled with the submitted value.
    """
    return response_to_wire(app_service.update_input(body.input))

@router.post("/compare", response_model=DomResponseModel)
def compare_snapshots(body: CompareRequest):
    """
    Compare two client-supplied snapshots and render the new one.
    """
    try:
        old = snapshot_from_wire(body.old)
        new = snapshot_from_wire(body.new)
    except WireFormatError as e:
        raise HTTPException(status_code=400, detail=f"Invalid snapshot: {e}")

    return response_to_wire(compare(old, new))

@router.post("/render", response_model=RenderResponseModel)
def render_node(body: RenderRequest):
    try:
        node = node_from_wire(body.node)
    except WireFormatError as e:
        raise HTTPException(status_code=400, detail=f"Invalid node: {e}")

    return {"html": render(node)}
