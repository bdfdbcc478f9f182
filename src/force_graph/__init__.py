"""Typed node/edge adapters and a serialized graph for 3D force-directed views."""

from .config import GraphSettings
from .errors import SerializationError
from .graph import (
    Edge,
    Graph,
    Node,
    ToEdge,
    ToGraph,
    ToNode,
    ZoomTarget,
    edge_to_json,
    node_to_json,
)

__all__ = [
    "Edge",
    "Graph",
    "GraphSettings",
    "Node",
    "SerializationError",
    "ToEdge",
    "ToGraph",
    "ToNode",
    "ZoomTarget",
    "edge_to_json",
    "node_to_json",
]
