"""Contracts for composite objects that populate a graph."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, Tuple, TypeVar

from .data import Graph
from .ids import format_variant_id

EV = TypeVar("EV")
PK = TypeVar("PK")


class ToGraph(ABC):
    """A composite object that adds its sub-entities to a shared graph."""

    @abstractmethod
    def mut_graph(self, graph: Graph) -> None:
        """Add this object's nodes and edges to ``graph``.

        Raises:
            SerializationError: If a record cannot be serialized.
        """
        ...

    def to_graph(self) -> Graph:
        """Build a fresh graph containing only this object's records."""
        graph = Graph()
        self.mut_graph(graph)
        return graph


class ZoomTarget(ToGraph, Generic[EV, PK]):
    """A graph builder that also names one node for the renderer to focus on first."""

    @abstractmethod
    def zoom_to(self) -> Optional[Tuple[EV, PK]]:
        """Return ``(variant, pk)`` of the node to focus, or None."""
        ...

    def zoom_to_id(self) -> Optional[str]:
        target = self.zoom_to()
        if target is None:
            return None
        variant, pk = target
        return format_variant_id(variant, pk)
