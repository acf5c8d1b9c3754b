from __future__ import annotations

from pathlib import Path
import time
import logging

from antgraph.graph.graph_store import GraphStore
from antgraph.formats.grid import load_grid


def load_graph_from_files(
    *,
    graph: GraphStore,
    grid_path: Path,
    empty_label: str = ".",
) -> bool:
    """
    Load antennas from a grid file into the GraphStore.

    Returns False when the grid cannot be read. Saved edges are restored
    later, after antinode deduction (see AntennaService.grow).
    """
    logger = logging.getLogger("antgraph.load_graph")

    t0 = time.perf_counter()
    if not load_grid(graph, grid_path, empty_label=empty_label):
        return False
    logger.info(
        "read vertices=%s in %.3fs",
        graph.vertex_count(),
        time.perf_counter() - t0,
    )
    return True
