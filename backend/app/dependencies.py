from functools import lru_cache
import logging
from pathlib import Path
from typing import Optional
import time

from antgraph.graph.graph_store import GraphStore

from backend.app.config import AppConfig
from backend.app.services.antenna_service import AntennaService
from backend.app.loaders.graph_loader import load_graph_from_files


@lru_cache
def get_config() -> AppConfig:
    return AppConfig()


@lru_cache
def get_base_graph() -> GraphStore:
    logger = logging.getLogger("antgraph.startup")
    t0 = time.perf_counter()
    graph = GraphStore()
    graph.metadata["source"] = "backend"
    graph.metadata["loaded_from_grid"] = False

    storage = get_config().antgraph.storage
    grid_path = Path(storage.grid_path)
    if grid_path.exists():
        loaded = load_graph_from_files(
            graph=graph,
            grid_path=grid_path,
            empty_label=get_config().antgraph.graph.empty_label,
        )
        graph.metadata["loaded_from_grid"] = loaded
        if not loaded:
            graph.metadata["load_error"] = f"could not read {grid_path}"
    logger.info("[startup] get_base_graph total %.3fs", time.perf_counter() - t0)
    return graph


@lru_cache
def get_antenna_service() -> AntennaService:
    config = get_config()

    service = AntennaService(
        graph=get_base_graph(),
        config=config.antgraph,
    )
    storage = config.antgraph.storage
    if service.graph.metadata.get("loaded_from_grid"):
        service.grow(edges_path=_restorable_edges(storage.edges_path, storage.restore_edges))
    return service


def _restorable_edges(edges_path: str, restore: bool) -> Optional[Path]:
    if not restore:
        return None
    path = Path(edges_path)
    if not path.exists():
        logging.getLogger("antgraph.startup").info(
            "[startup] no edge file at %s; skipping restore", path
        )
        return None
    return path
