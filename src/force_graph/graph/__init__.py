"""Graph model definitions."""

from .builder import ToGraph, ZoomTarget
from .data import Graph
from .edge import Edge, ToEdge
from .node import Node, ToNode
from .serialization import edge_to_json, node_to_json

__all__ = [
    "Edge",
    "Graph",
    "Node",
    "ToEdge",
    "ToGraph",
    "ToNode",
    "ZoomTarget",
    "edge_to_json",
    "node_to_json",
]
