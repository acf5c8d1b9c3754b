from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from contextlib import asynccontextmanager

from backend.app.main import create_app
from backend.app.config import AppConfig
from backend.app.dependencies import get_antenna_service
from backend.app.services.antenna_service import AntennaService

from antgraph.config.settings import AntgraphConfig
from antgraph.graph.graph_builder import GraphBuilder
from antgraph.graph.graph_store import GraphStore
from antgraph.formats.grid import parse_grid


SAMPLE_GRID = "A.\n.A\n"


@pytest.fixture()
def graph() -> GraphStore:
    return GraphStore()


@pytest.fixture()
def service() -> AntennaService:
    graph = GraphStore()
    GraphBuilder(graph).add_cells(parse_grid(SAMPLE_GRID))
    service = AntennaService(graph=graph, config=AntgraphConfig())
    service.grow()
    return service


@pytest.fixture()
def client(service: AntennaService):
    @asynccontextmanager
    async def _no_lifespan(_: FastAPI):
        yield

    app = create_app(AppConfig())
    app.router.lifespan_context = _no_lifespan

    app.dependency_overrides[get_antenna_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
