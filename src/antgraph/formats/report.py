from __future__ import annotations

from typing import List

from antgraph.graph.graph_store import GraphStore
from antgraph.graph.graph_query import GraphQueryEngine


def adjacency_lines(graph: GraphStore) -> List[str]:
    """
    One line per antenna listing the antennas it links to.

    Antennas appear newest first and their links most recent first.
    """
    lines: List[str] = []
    for vertex in graph.vertices():
        targets = " ".join(
            f"{n.label}({n.x}, {n.y})" for n in graph.neighbors(vertex)
        )
        lines.append(f"Antenna ({vertex.x}, {vertex.y}) [{vertex.label}] -> {targets}".rstrip())
    return lines


def visit_lines(engine: GraphQueryEngine) -> List[str]:
    lines = ["Vertex visit order:"]
    for vertex, order in engine.visited():
        lines.append(
            f"Antenna at ({vertex.x}, {vertex.y}), label: {vertex.label}, order: {order}"
        )
    return lines
