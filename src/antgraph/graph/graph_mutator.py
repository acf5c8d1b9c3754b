from __future__ import annotations

import logging
from typing import List

from antgraph.graph.graph_store import GraphStore
from antgraph.graph.graph_schema import Vertex
from antgraph.config.settings import GraphConfig
from antgraph.utils.geometry import reflect, is_non_negative

logger = logging.getLogger("antgraph.mutator")


class GraphMutator:
    """
    Grows the antenna graph from relationships between same-frequency vertices.
    """

    def __init__(
        self,
        *,
        graph: GraphStore,
        config: GraphConfig,
    ) -> None:
        self.graph = graph
        self.config = config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def deduce_antinodes(self) -> bool:
        """
        Add a marker vertex at each non-negative reflection of one
        same-frequency vertex through another.

        A single pass over the vertices present when the call starts;
        markers created here are not paired within the same call.
        """

        snapshot = self.graph.vertices()
        created = 0

        for v1 in snapshot:
            for v2 in snapshot:
                if v1.id == v2.id:
                    continue
                if v1.label == self.config.marker_label or v1.label != v2.label:
                    continue

                for point in (
                    reflect(v2.coordinate, about=v1.coordinate),
                    reflect(v1.coordinate, about=v2.coordinate),
                ):
                    if not is_non_negative(point):
                        continue
                    _, inserted = self.graph.add_vertex(
                        point[0], point[1], self.config.marker_label
                    )
                    if inserted:
                        created += 1

        logger.info(
            "antinode deduction over %s vertices created %s markers",
            len(snapshot),
            created,
        )
        return created > 0

    def link_same_frequency(self) -> bool:
        """
        Connect every pair of vertices sharing a frequency in both directions.
        """

        vertices: List[Vertex] = [
            v for v in self.graph.vertices() if self._is_frequency(v.label)
        ]
        created = 0

        for i, v1 in enumerate(vertices):
            for v2 in vertices[i + 1:]:
                if v1.label != v2.label:
                    continue
                if self.graph.insert_edge(v1, v2):
                    created += 1
                if self.graph.insert_edge(v2, v1):
                    created += 1

        logger.info("frequency linking created %s edges", created)
        return created > 0

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _is_frequency(self, label: str) -> bool:
        return label not in (self.config.marker_label, self.config.empty_label)
