"""
Graph subsystem for antgraph.

Defines the antenna graph and the operations that act on it:
- vertex/edge storage with coordinate lookup
- antinode deduction and same-frequency linking
- depth-first and breadth-first traversal
"""

from antgraph.graph.graph_schema import Vertex, Edge, MARKER_LABEL, EMPTY_LABEL
from antgraph.graph.graph_store import GraphStore
from antgraph.graph.graph_builder import GraphBuilder
from antgraph.graph.graph_query import (
    GraphQueryEngine,
    TraversalContext,
    TraversalResult,
)
from antgraph.graph.graph_mutator import GraphMutator

__all__ = [
    "Vertex",
    "Edge",
    "MARKER_LABEL",
    "EMPTY_LABEL",
    "GraphStore",
    "GraphBuilder",
    "GraphQueryEngine",
    "TraversalContext",
    "TraversalResult",
    "GraphMutator",
]
