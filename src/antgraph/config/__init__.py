"""
Configuration layer for antgraph.

Defines the configuration contracts that control reserved labels,
graph growth after loading, default traversal and flat-file locations.

Configuration is passed explicitly, never read from globals, and
validated when constructed.
"""

from antgraph.config.settings import (
    TRAVERSAL_STRATEGIES,
    TraversalStrategy,
    GraphConfig,
    TraversalConfig,
    StorageConfig,
    AntgraphConfig,
)

__all__ = [
    "TRAVERSAL_STRATEGIES",
    "TraversalStrategy",
    "GraphConfig",
    "TraversalConfig",
    "StorageConfig",
    "AntgraphConfig",
]
