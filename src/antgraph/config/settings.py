from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from antgraph.graph.graph_schema import MARKER_LABEL, EMPTY_LABEL

TraversalStrategy = Literal["depth_first", "breadth_first"]

TRAVERSAL_STRATEGIES = ("depth_first", "breadth_first")

# ---------------------------------------------------------------------
# Labels & graph growth
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class GraphConfig:
    """
    Controls which labels are reserved and how the graph grows
    after the grid has been loaded.
    """

    marker_label: str = MARKER_LABEL
    empty_label: str = EMPTY_LABEL
    deduce_antinodes: bool = True
    link_same_frequency: bool = True

    def __post_init__(self) -> None:
        for name in ("marker_label", "empty_label"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(f"{name} must be a single character, got {value!r}")
        if self.marker_label == self.empty_label:
            raise ValueError("marker_label and empty_label must differ")


# ---------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class TraversalConfig:
    """
    Default seed and walk used when a caller does not specify one.
    """

    strategy: TraversalStrategy = "breadth_first"
    start_x: int = 0
    start_y: int = 0

    def __post_init__(self) -> None:
        if self.strategy not in TRAVERSAL_STRATEGIES:
            raise ValueError(f"Unknown traversal strategy: {self.strategy!r}")


# ---------------------------------------------------------------------
# Flat-file storage
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class StorageConfig:
    """
    Locations of the grid input, the binary edge list and the
    vertex list output.
    """

    grid_path: str = "data/antennas.txt"
    edges_path: str = "data/edges.bin"
    result_path: str = "data/result.txt"
    restore_edges: bool = False
    bidirectional_restore: bool = True


# ---------------------------------------------------------------------
# Root configuration object
# ---------------------------------------------------------------------


@dataclass(frozen=True)
class AntgraphConfig:
    """
    Root configuration object for antgraph.

    Constructed explicitly and passed to the service layer;
    treated as immutable policy for the lifetime of a graph.
    """

    graph: GraphConfig = field(default_factory=GraphConfig)
    traversal: TraversalConfig = field(default_factory=TraversalConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
