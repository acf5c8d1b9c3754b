"""
Flat-file adapters for antgraph.

- grid text input, vertex list output and matrix rendering
- binary edge lists (four native int32 values per record)
- plain-text adjacency and visit-order reports
"""

from antgraph.formats.grid import parse_grid, load_grid, save_vertices, render_matrix
from antgraph.formats.edges_binary import (
    undirected_links,
    write_edges,
    read_links,
    read_edges,
)
from antgraph.formats.report import adjacency_lines, visit_lines

__all__ = [
    "parse_grid",
    "load_grid",
    "save_vertices",
    "render_matrix",
    "undirected_links",
    "write_edges",
    "read_links",
    "read_edges",
    "adjacency_lines",
    "visit_lines",
]
