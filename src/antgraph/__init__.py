"""
antgraph
========

Antenna grids as directed graphs.

Core idea:
- Load labeled antennas from a character grid, deduce antinodes by
  reflecting same-frequency pairs, link same-frequency antennas and
  report what a traversal can reach.

Public API:
- GraphStore
- GraphBuilder
- GraphMutator
- GraphQueryEngine
"""

from antgraph.graph.graph_store import GraphStore
from antgraph.graph.graph_builder import GraphBuilder
from antgraph.graph.graph_mutator import GraphMutator
from antgraph.graph.graph_query import GraphQueryEngine

__all__ = [
    "GraphStore",
    "GraphBuilder",
    "GraphMutator",
    "GraphQueryEngine",
]

__version__ = "0.1.0"
