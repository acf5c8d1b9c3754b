from __future__ import annotations

from typing import Iterable, Tuple

from antgraph.graph.graph_store import GraphStore

Cell = Tuple[int, int, str]
Link = Tuple[int, int, int, int]


class GraphBuilder:
    """
    Populates a graph from already-parsed cells and coordinate links.
    """

    def __init__(self, graph: GraphStore) -> None:
        self.graph = graph

    def add_cells(self, cells: Iterable[Cell]) -> int:
        added = 0
        for x, y, label in cells:
            _, inserted = self.graph.add_vertex(x, y, label)
            if inserted:
                added += 1
        return added

    def add_links(self, links: Iterable[Link], *, bidirectional: bool = False) -> int:
        added = 0
        for x_src, y_src, x_dst, y_dst in links:
            if self.graph.add_edge(x_src, y_src, x_dst, y_dst):
                added += 1
            if bidirectional and self.graph.add_edge(x_dst, y_dst, x_src, y_src):
                added += 1
        return added
