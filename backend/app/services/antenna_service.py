from __future__ import annotations

import logging
import threading
import time
from typing import Any, Dict, List, Optional, Tuple

from antgraph.config.settings import AntgraphConfig, TraversalStrategy
from antgraph.graph.graph_store import GraphStore
from antgraph.graph.graph_schema import Vertex
from antgraph.graph.graph_mutator import GraphMutator
from antgraph.graph.graph_query import GraphQueryEngine, TraversalResult
from antgraph.formats.edges_binary import PathLike, read_edges
from antgraph.formats.grid import render_matrix
from antgraph.formats.report import adjacency_lines


class AntennaService:
    """
    Single owner of an antenna graph.

    Every mutation and traversal runs under one lock; the visit order
    of the last traversal is shared state across the whole vertex set.
    """

    def __init__(
        self,
        *,
        graph: GraphStore,
        config: AntgraphConfig,
    ) -> None:
        self.graph = graph
        self.config = config
        self.mutator = GraphMutator(graph=graph, config=config.graph)
        self.query = GraphQueryEngine(graph)
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_antenna(self, x: int, y: int, label: str) -> Tuple[Vertex, bool]:
        with self._lock:
            return self.graph.add_vertex(x, y, label)

    def remove_antenna(self, x: int, y: int) -> bool:
        with self._lock:
            return self.graph.remove_vertex(x, y)

    def connect(self, x_src: int, y_src: int, x_dst: int, y_dst: int, *, bidirectional: bool = False) -> bool:
        with self._lock:
            added = self.graph.add_edge(x_src, y_src, x_dst, y_dst)
            if bidirectional:
                added = self.graph.add_edge(x_dst, y_dst, x_src, y_src) or added
            return added

    def disconnect(self, x_src: int, y_src: int, x_dst: int, y_dst: int) -> bool:
        with self._lock:
            return self.graph.remove_edge(x_src, y_src, x_dst, y_dst)

    def deduce_antinodes(self) -> bool:
        with self._lock:
            return self.mutator.deduce_antinodes()

    def link_same_frequency(self) -> bool:
        with self._lock:
            return self.mutator.link_same_frequency()

    def grow(self, *, edges_path: Optional[PathLike] = None) -> Dict[str, bool]:
        """
        Apply the post-load steps enabled in the config, in run order:
        deduce antinodes, restore saved edges, then link frequencies.
        """
        t0 = time.perf_counter()
        grown = {"antinodes": False, "restored": False, "links": False}
        with self._lock:
            if self.config.graph.deduce_antinodes:
                grown["antinodes"] = self.mutator.deduce_antinodes()
            if edges_path is not None:
                grown["restored"] = read_edges(
                    self.graph,
                    edges_path,
                    bidirectional=self.config.storage.bidirectional_restore,
                )
            if self.config.graph.link_same_frequency:
                grown["links"] = self.mutator.link_same_frequency()
        logging.getLogger("antgraph.service").info(
            "graph growth %s in %.3fs",
            grown,
            time.perf_counter() - t0,
        )
        return grown

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def traverse(
        self,
        *,
        strategy: Optional[TraversalStrategy] = None,
        x: Optional[int] = None,
        y: Optional[int] = None,
    ) -> Optional[TraversalResult]:
        defaults = self.config.traversal
        with self._lock:
            return self.query.traverse(
                strategy or defaults.strategy,
                defaults.start_x if x is None else x,
                defaults.start_y if y is None else y,
            )

    def visited(self) -> List[Tuple[Vertex, int]]:
        with self._lock:
            return self.query.visited()

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def stats(self) -> Dict[str, Any]:
        with self._lock:
            max_x, max_y = self.graph.bounds()
            return {
                "vertices": self.graph.vertex_count(),
                "edges": self.graph.edge_count(),
                "markers": sum(
                    1
                    for v in self.graph.vertices()
                    if v.label == self.config.graph.marker_label
                ),
                "max_x": max_x,
                "max_y": max_y,
                "metadata": dict(self.graph.metadata),
            }

    def vertices(self) -> List[Vertex]:
        with self._lock:
            return self.graph.vertices()

    def export(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "vertices": [v.to_dict() for v in self.graph.vertices()],
                "edges": [e.to_dict() for e in self.graph.edges()],
            }

    def matrix(self) -> Optional[str]:
        with self._lock:
            return render_matrix(self.graph, self.config.graph.empty_label)

    def adjacency(self) -> List[str]:
        with self._lock:
            return adjacency_lines(self.graph)
