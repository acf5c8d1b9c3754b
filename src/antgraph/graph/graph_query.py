from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional, Tuple

from antgraph.graph.graph_store import GraphStore
from antgraph.graph.graph_schema import Vertex
from antgraph.config.settings import TraversalStrategy, TRAVERSAL_STRATEGIES

logger = logging.getLogger("antgraph.traversal")


@dataclass
class TraversalContext:
    """
    Visit-order bookkeeping for a single traversal.

    The clock starts at 1; a vertex without a stamp has order 0.
    """

    clock: int = 1
    stamps: Dict[int, int] = field(default_factory=dict)

    def is_visited(self, vertex: Vertex) -> bool:
        return vertex.id in self.stamps

    def stamp(self, vertex: Vertex) -> int:
        order = self.clock
        self.stamps[vertex.id] = order
        self.clock += 1
        return order

    def order_of(self, vertex: Vertex) -> int:
        return self.stamps.get(vertex.id, 0)


@dataclass(frozen=True)
class TraversalResult:
    """
    Outcome of a walk from a seed vertex.
    """

    strategy: TraversalStrategy
    start: Vertex
    order: Dict[int, int]

    def rank(self, vertex: Vertex) -> int:
        return self.order.get(vertex.id, 0)

    def sequence(self) -> List[int]:
        """
        Vertex identifiers in the order they were reached.
        """
        return sorted(self.order, key=self.order.__getitem__)


class GraphQueryEngine:
    """
    Depth-first and breadth-first reachability over directed edges.

    Keeps the context of the most recent traversal so visit order can be
    inspected after the walk.
    """

    def __init__(self, graph: GraphStore) -> None:
        self.graph = graph
        self._context = TraversalContext()

    # -------------------- Walks --------------------

    def traverse(
        self,
        strategy: TraversalStrategy,
        x: int,
        y: int,
    ) -> Optional[TraversalResult]:
        if strategy == "depth_first":
            return self.depth_first(x, y)
        if strategy == "breadth_first":
            return self.breadth_first(x, y)
        raise ValueError(
            f"Unknown traversal strategy {strategy!r}; expected one of {TRAVERSAL_STRATEGIES}"
        )

    def depth_first(self, x: int, y: int) -> Optional[TraversalResult]:
        context = self._reset()
        start = self.graph.find_by_coordinate(x, y)
        if start is None:
            logger.info("depth-first seed (%s, %s) not found", x, y)
            return None

        # Neighbours are pushed in reverse so they pop in adjacency order,
        # which reproduces the recursive pre-order.
        stack: List[Vertex] = [start]
        while stack:
            vertex = stack.pop()
            if context.is_visited(vertex):
                continue
            context.stamp(vertex)
            stack.extend(reversed(self.graph.neighbors(vertex)))

        return self._finish("depth_first", start, context)

    def breadth_first(self, x: int, y: int) -> Optional[TraversalResult]:
        context = self._reset()
        start = self.graph.find_by_coordinate(x, y)
        if start is None:
            logger.info("breadth-first seed (%s, %s) not found", x, y)
            return None

        queue: Deque[Vertex] = deque([start])
        context.stamp(start)

        while queue:
            vertex = queue.popleft()
            for neighbor in self.graph.neighbors(vertex):
                if not context.is_visited(neighbor):
                    context.stamp(neighbor)
                    queue.append(neighbor)

        return self._finish("breadth_first", start, context)

    # -------------------- Inspection --------------------

    def visited(self) -> List[Tuple[Vertex, int]]:
        """
        Vertices reached by the most recent traversal, in store order.
        """
        return [
            (vertex, self._context.order_of(vertex))
            for vertex in self.graph.vertices()
            if self._context.is_visited(vertex)
        ]

    def visit_order(self, x: int, y: int) -> int:
        vertex = self.graph.find_by_coordinate(x, y)
        if vertex is None:
            return 0
        return self._context.order_of(vertex)

    # -------------------- Internals --------------------

    def _reset(self) -> TraversalContext:
        self._context = TraversalContext()
        return self._context

    def _finish(
        self,
        strategy: TraversalStrategy,
        start: Vertex,
        context: TraversalContext,
    ) -> TraversalResult:
        logger.info(
            "%s from (%s, %s) reached %s vertices",
            strategy,
            start.x,
            start.y,
            len(context.stamps),
        )
        return TraversalResult(
            strategy=strategy,
            start=start,
            order=dict(context.stamps),
        )
