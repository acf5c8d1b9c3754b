from fastapi import APIRouter, Depends, HTTPException

from backend.app.api.schemas import (
    AdjacencyResponse,
    EdgeRequest,
    GraphExportResponse,
    GraphStatsResponse,
    MatrixResponse,
    MutationResponse,
    VertexCreateRequest,
    VertexCreateResponse,
    VertexModel,
)
from backend.app.dependencies import get_antenna_service
from backend.app.services.antenna_service import AntennaService

router = APIRouter()


@router.get("/stats", response_model=GraphStatsResponse)
def graph_stats(service: AntennaService = Depends(get_antenna_service)):
    return GraphStatsResponse(**service.stats())


@router.get("/export", response_model=GraphExportResponse)
def graph_export(service: AntennaService = Depends(get_antenna_service)):
    return GraphExportResponse(**service.export())


@router.get("/vertices", response_model=list[VertexModel])
def list_vertices(service: AntennaService = Depends(get_antenna_service)):
    return [VertexModel(**v.to_dict()) for v in service.vertices()]


@router.get("/matrix", response_model=MatrixResponse)
def graph_matrix(service: AntennaService = Depends(get_antenna_service)):
    matrix = service.matrix()
    if matrix is None:
        raise HTTPException(status_code=413, detail="Grid too large to render")
    return MatrixResponse(matrix=matrix, rows=matrix.splitlines())


@router.get("/adjacency", response_model=AdjacencyResponse)
def graph_adjacency(service: AntennaService = Depends(get_antenna_service)):
    lines = service.adjacency()
    return AdjacencyResponse(lines=lines, count=len(lines))


@router.post("/vertices", response_model=VertexCreateResponse)
def add_vertex(
    request: VertexCreateRequest,
    service: AntennaService = Depends(get_antenna_service),
):
    vertex, inserted = service.add_antenna(request.x, request.y, request.label)
    return VertexCreateResponse(vertex=VertexModel(**vertex.to_dict()), inserted=inserted)


@router.delete("/vertices/{x}/{y}", response_model=MutationResponse)
def remove_vertex(
    x: int,
    y: int,
    service: AntennaService = Depends(get_antenna_service),
):
    if not service.remove_antenna(x, y):
        raise HTTPException(status_code=404, detail=f"No antenna at ({x}, {y})")
    return MutationResponse(changed=True)


@router.post("/edges", response_model=MutationResponse)
def add_edge(
    request: EdgeRequest,
    service: AntennaService = Depends(get_antenna_service),
):
    return MutationResponse(
        changed=service.connect(
            request.x_src,
            request.y_src,
            request.x_dst,
            request.y_dst,
            bidirectional=request.bidirectional,
        )
    )


@router.delete("/edges", response_model=MutationResponse)
def remove_edge(
    request: EdgeRequest,
    service: AntennaService = Depends(get_antenna_service),
):
    return MutationResponse(
        changed=service.disconnect(
            request.x_src,
            request.y_src,
            request.x_dst,
            request.y_dst,
        )
    )


@router.post("/deduce", response_model=MutationResponse)
def deduce_antinodes(service: AntennaService = Depends(get_antenna_service)):
    return MutationResponse(changed=service.deduce_antinodes())


@router.post("/link", response_model=MutationResponse)
def link_same_frequency(service: AntennaService = Depends(get_antenna_service)):
    return MutationResponse(changed=service.link_same_frequency())
