from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

import networkx as nx

from antgraph.graph.graph_schema import Vertex, Edge, COORDINATE_MIN, COORDINATE_MAX

logger = logging.getLogger("antgraph.store")


class GraphStore:
    """
    Authoritative in-memory antenna graph.

    Vertices are keyed by identifier in the underlying DiGraph and indexed by
    coordinate. Enumeration is newest-first for vertices and most-recent-first
    for each adjacency list.
    """

    def __init__(self) -> None:
        self._graph = nx.DiGraph()
        self._by_coordinate: Dict[Tuple[int, int], int] = {}
        self._next_id = 0
        self.metadata: Dict[str, Any] = {}

    # -------------------- Lookup --------------------

    def find_by_coordinate(self, x: int, y: int) -> Optional[Vertex]:
        vertex_id = self._by_coordinate.get((x, y))
        if vertex_id is None:
            return None
        return self._graph.nodes[vertex_id]["data"]

    def find_by_id(self, vertex_id: int) -> Optional[Vertex]:
        if vertex_id not in self._graph:
            return None
        return self._graph.nodes[vertex_id]["data"]

    def vertices(self) -> List[Vertex]:
        return [
            self._graph.nodes[vertex_id]["data"]
            for vertex_id in reversed(list(self._graph.nodes))
        ]

    def neighbors(self, vertex: Vertex) -> List[Vertex]:
        if vertex.id not in self._graph:
            return []
        return [
            self._graph.nodes[target]["data"]
            for target in reversed(list(self._graph.successors(vertex.id)))
        ]

    # -------------------- Vertices --------------------

    def add_vertex(self, x: int, y: int, label: str) -> Tuple[Vertex, bool]:
        if not isinstance(label, str) or len(label) != 1:
            raise ValueError(f"Vertex label must be a single character, got {label!r}")
        for value in (x, y):
            if not COORDINATE_MIN <= value <= COORDINATE_MAX:
                raise ValueError(f"Vertex coordinate {value} is outside the 32-bit range")

        existing = self.find_by_coordinate(x, y)
        if existing is not None:
            return existing, False

        vertex = Vertex(id=self._next_id, x=x, y=y, label=label)
        self._next_id += 1

        self._graph.add_node(vertex.id, data=vertex)
        self._by_coordinate[vertex.coordinate] = vertex.id
        logger.debug("added vertex id=%s at (%s, %s) [%s]", vertex.id, x, y, label)
        return vertex, True

    def remove_vertex(self, x: int, y: int) -> bool:
        vertex = self.find_by_coordinate(x, y)
        if vertex is None:
            return False

        incident = self._graph.in_degree(vertex.id) + self._graph.out_degree(vertex.id)

        # DiGraph.remove_node drops every in- and out-edge of the node.
        self._graph.remove_node(vertex.id)
        del self._by_coordinate[vertex.coordinate]
        logger.debug(
            "removed vertex id=%s at (%s, %s) with %s incident edges",
            vertex.id,
            x,
            y,
            incident,
        )
        return True

    # -------------------- Edges --------------------

    def add_edge(self, x_src: int, y_src: int, x_dst: int, y_dst: int) -> bool:
        source = self.find_by_coordinate(x_src, y_src)
        target = self.find_by_coordinate(x_dst, y_dst)
        if source is None or target is None:
            return False
        return self.insert_edge(source, target)

    def remove_edge(self, x_src: int, y_src: int, x_dst: int, y_dst: int) -> bool:
        source = self.find_by_coordinate(x_src, y_src)
        target = self.find_by_coordinate(x_dst, y_dst)
        if source is None or target is None:
            return False

        forward = self.discard_edge(source, target)
        backward = self.discard_edge(target, source)
        return forward or backward

    def insert_edge(self, source: Vertex, target: Vertex) -> bool:
        if source.id not in self._graph or target.id not in self._graph:
            return False
        if self._graph.has_edge(source.id, target.id):
            return False

        self._graph.add_edge(source.id, target.id, data=Edge(source.id, target.id))
        logger.debug("added edge %s -> %s", source.coordinate, target.coordinate)
        return True

    def discard_edge(self, source: Vertex, target: Vertex) -> bool:
        if not self._graph.has_edge(source.id, target.id):
            return False

        self._graph.remove_edge(source.id, target.id)
        logger.debug("removed edge %s -> %s", source.coordinate, target.coordinate)
        return True

    def has_edge(self, source: Vertex, target: Vertex) -> bool:
        return self._graph.has_edge(source.id, target.id)

    def edges(self) -> Iterable[Edge]:
        for _, _, data in self._graph.edges(data=True):
            yield data["data"]

    # -------------------- Analytics --------------------

    def vertex_count(self) -> int:
        return self._graph.number_of_nodes()

    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    def bounds(self) -> Tuple[int, int]:
        """
        Largest x and y among all vertices, floored at zero.
        """
        max_x = 0
        max_y = 0
        for vertex in self.vertices():
            max_x = max(max_x, vertex.x)
            max_y = max(max_y, vertex.y)
        return max_x, max_y

    # -------------------- Lifecycle --------------------

    def clear(self) -> None:
        """
        Release every edge, then every vertex.

        Identifiers handed out before the clear are never reassigned.
        """
        edges = self._graph.number_of_edges()
        vertices = self._graph.number_of_nodes()
        self._graph.remove_edges_from(list(self._graph.edges))
        self._graph.clear()
        self._by_coordinate.clear()
        logger.debug("cleared graph (%s vertices, %s edges)", vertices, edges)
