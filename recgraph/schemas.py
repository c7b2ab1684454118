from pydantic import BaseModel
from typing import Any, Dict, List, Optional, Union


class DependencySpec(BaseModel):
    type: str                           # fully qualified type name
    qualifier: Optional[str] = None     # "@pkg.Name(members)"


class ParameterSpec(BaseModel):
    qualifier: str
    value: Union[bool, int, float, str]


class ComponentNodeRequest(BaseModel):
    """A resolved component, as handed over by the graph walker"""
    identifier: str
    type: str
    is_interface: bool = False
    shareable: bool = False
    shared: bool = False
    provider: bool = False
    provided: bool = False
    dependencies: List[DependencySpec] = []
    parameters: List[ParameterSpec] = []


class ComponentNodeResponse(BaseModel):
    node_id: str
    shape: str
    fill_color: str
    dashed: bool
    target: str
    body: str
    dot: str
    is_interface: bool = False
    is_provider: bool = False


class UserRecommendations(BaseModel):
    user_id: Union[int, str]
    test_items: List[Union[int, str]] = []
    recommendations: List[Union[int, str]] = []


class MRRRequest(BaseModel):
    users: List[UserRecommendations]
    universe: List[Union[int, str]] = []    # defaults to every item seen
    suffix: Optional[str] = None


class MRRResponse(BaseModel):
    aggregate: Dict[str, float]
    users: List[Dict[str, Any]]     # one record per request user, in order


class SVDConfigResponse(BaseModel):
    settings: Dict[str, Any]
    node: ComponentNodeResponse
