from fastapi import APIRouter, Depends, HTTPException

from backend.app.api.schemas import (
    TraversalRequest,
    TraversalResponse,
    VertexModel,
    VisitModel,
)
from backend.app.dependencies import get_antenna_service
from backend.app.services.antenna_service import AntennaService

router = APIRouter()


@router.post("/", response_model=TraversalResponse)
def traverse(
    request: TraversalRequest,
    service: AntennaService = Depends(get_antenna_service),
):
    result = service.traverse(strategy=request.strategy, x=request.x, y=request.y)
    if result is None:
        raise HTTPException(status_code=404, detail="Traversal seed not found")

    return TraversalResponse(
        strategy=result.strategy,
        start=VertexModel(**result.start.to_dict()),
        sequence=result.sequence(),
        visited=[
            VisitModel(vertex=VertexModel(**v.to_dict()), order=order)
            for v, order in service.visited()
        ],
    )


@router.get("/visited", response_model=list[VisitModel])
def visited(service: AntennaService = Depends(get_antenna_service)):
    return [
        VisitModel(vertex=VertexModel(**v.to_dict()), order=order)
        for v, order in service.visited()
    ]
