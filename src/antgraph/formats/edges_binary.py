from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

import numpy as np

from antgraph.graph.graph_builder import GraphBuilder, Link
from antgraph.graph.graph_store import GraphStore

logger = logging.getLogger("antgraph.formats")

PathLike = Union[str, Path]

# Native byte order, four 32-bit integers per record:
# x_source, y_source, x_dest, y_dest
RECORD_DTYPE = np.dtype(np.int32)
RECORD_WIDTH = 4


def undirected_links(graph: GraphStore) -> List[Link]:
    """
    Each connection once, from the endpoint with the smaller identifier.
    """
    links: List[Link] = []
    for vertex in graph.vertices():
        for neighbor in graph.neighbors(vertex):
            if vertex.id < neighbor.id:
                links.append((vertex.x, vertex.y, neighbor.x, neighbor.y))
    return links


def write_edges(graph: GraphStore, path: PathLike) -> bool:
    links = undirected_links(graph)
    try:
        records = np.array(links, dtype=RECORD_DTYPE).reshape(-1, RECORD_WIDTH)
    except OverflowError as exc:
        logger.warning("edges do not fit 32-bit records: %s", exc)
        return False

    try:
        records.tofile(str(path))
    except OSError as exc:
        logger.warning("could not write edges to %s: %s", path, exc)
        return False

    logger.info("saved %s edge records to %s", len(links), path)
    return True


def read_links(path: PathLike) -> List[Link]:
    """
    Decode every complete record in a binary edge file.

    Raises OSError when the file cannot be read.
    """
    raw = np.fromfile(str(path), dtype=RECORD_DTYPE)
    complete = len(raw) - len(raw) % RECORD_WIDTH
    if complete != len(raw):
        logger.warning(
            "ignoring %s trailing values in %s",
            len(raw) - complete,
            path,
        )
    records = raw[:complete].reshape(-1, RECORD_WIDTH)
    return [tuple(int(v) for v in row) for row in records]


def read_edges(
    graph: GraphStore,
    path: PathLike,
    *,
    bidirectional: bool = True,
) -> bool:
    """
    Restore edges from a binary edge file onto the vertices already in `graph`.

    Records whose endpoints are not both present are skipped.
    """
    try:
        links = read_links(path)
    except OSError as exc:
        logger.warning("could not read edges from %s: %s", path, exc)
        return False

    added = GraphBuilder(graph).add_links(links, bidirectional=bidirectional)
    logger.info(
        "restored %s edges from %s records in %s",
        added,
        len(links),
        path,
    )
    return True
