from pydantic import BaseModel
from typing import Any, Dict, List

class UpdateInputRequest(BaseModel):
    input: str

class CompareRequest(BaseModel):
    old: Dict[str, Any]  # {"element_type": <node>}
    new: Dict[str, Any]

class RenderRequest(BaseModel):
    node: Dict[str, Any]  # {"Text": ...} or {"Element": [...]}

class DomResponseModel(BaseModel):
    diff: List[Dict[str, Any]]
    html: str

class RenderResponseModel(BaseModel):
    html: str
