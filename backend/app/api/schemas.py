from typing import List, Dict, Any, Optional, Literal
from pydantic import BaseModel, Field

from antgraph.graph.graph_schema import COORDINATE_MIN, COORDINATE_MAX


class VertexModel(BaseModel):
    id: int
    x: int
    y: int
    label: str


class EdgeModel(BaseModel):
    source: int
    target: int


class GraphStatsResponse(BaseModel):
    vertices: int
    edges: int
    markers: int
    max_x: int
    max_y: int
    metadata: Dict[str, Any]


class GraphExportResponse(BaseModel):
    vertices: List[VertexModel]
    edges: List[EdgeModel]


class MatrixResponse(BaseModel):
    matrix: str
    rows: List[str]


class AdjacencyResponse(BaseModel):
    lines: List[str]
    count: int


class VertexCreateRequest(BaseModel):
    x: int = Field(ge=COORDINATE_MIN, le=COORDINATE_MAX)
    y: int = Field(ge=COORDINATE_MIN, le=COORDINATE_MAX)
    label: str = Field(min_length=1, max_length=1)


class VertexCreateResponse(BaseModel):
    vertex: VertexModel
    inserted: bool


class EdgeRequest(BaseModel):
    x_src: int = Field(ge=COORDINATE_MIN, le=COORDINATE_MAX)
    y_src: int = Field(ge=COORDINATE_MIN, le=COORDINATE_MAX)
    x_dst: int = Field(ge=COORDINATE_MIN, le=COORDINATE_MAX)
    y_dst: int = Field(ge=COORDINATE_MIN, le=COORDINATE_MAX)
    bidirectional: bool = False


class MutationResponse(BaseModel):
    changed: bool


class TraversalRequest(BaseModel):
    strategy: Optional[Literal["depth_first", "breadth_first"]] = None
    x: Optional[int] = Field(default=None, ge=COORDINATE_MIN, le=COORDINATE_MAX)
    y: Optional[int] = Field(default=None, ge=COORDINATE_MIN, le=COORDINATE_MAX)


class VisitModel(BaseModel):
    vertex: VertexModel
    order: int


class TraversalResponse(BaseModel):
    strategy: str
    start: VertexModel
    sequence: List[int]
    visited: List[VisitModel]
