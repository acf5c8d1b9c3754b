from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Optional, Union

import numpy as np

from antgraph.graph.graph_builder import Cell, GraphBuilder
from antgraph.graph.graph_schema import EMPTY_LABEL
from antgraph.graph.graph_store import GraphStore

logger = logging.getLogger("antgraph.formats")

PathLike = Union[str, Path]


def parse_grid(text: str, empty_label: str = EMPTY_LABEL) -> Iterator[Cell]:
    """
    Yield (x, y, label) for every non-empty character of a grid.

    Each line break starts a new row; x counts characters within the row.
    """
    x = 0
    y = 0
    for char in text:
        if char == "\n":
            y += 1
            x = 0
            continue
        if char != empty_label:
            yield (x, y, char)
        x += 1


def load_grid(
    graph: GraphStore,
    path: PathLike,
    *,
    empty_label: str = EMPTY_LABEL,
) -> bool:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("could not read grid %s: %s", path, exc)
        return False

    added = GraphBuilder(graph).add_cells(parse_grid(text, empty_label))
    logger.info("loaded %s antennas from %s", added, path)
    return True


def save_vertices(graph: GraphStore, path: PathLike) -> bool:
    """
    Write one "<x> <y> <label>" line per vertex, newest first.
    """
    lines = [f"{v.x} {v.y} {v.label}\n" for v in graph.vertices()]
    try:
        with open(path, "w", encoding="utf-8") as fh:
            fh.writelines(lines)
    except OSError as exc:
        logger.warning("could not write vertices to %s: %s", path, exc)
        return False

    logger.info("saved %s vertices to %s", len(lines), path)
    return True


def render_matrix(graph: GraphStore, empty_label: str = EMPTY_LABEL) -> Optional[str]:
    """
    Render the graph as a character grid spanning [0, max_x] x [0, max_y].

    Returns None when the grid is too large to allocate.
    """
    max_x, max_y = graph.bounds()
    try:
        cells = np.full((max_y + 1, max_x + 1), empty_label, dtype="<U1")
    except (MemoryError, ValueError) as exc:
        logger.warning(
            "could not allocate a %sx%s matrix: %s", max_x + 1, max_y + 1, exc
        )
        return None

    for vertex in graph.vertices():
        if vertex.x < 0 or vertex.y < 0:
            continue
        cells[vertex.y, vertex.x] = vertex.label

    return "".join("".join(row) + "\n" for row in cells)
