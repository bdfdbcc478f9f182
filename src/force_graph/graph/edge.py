from abc import ABC, abstractmethod
from typing import Any, Generic, Tuple, TypeVar

from pydantic import BaseModel, ValidationError

from force_graph.errors import SerializationError

from .ids import format_variant_id
from .serialization import edge_to_json

EV = TypeVar("EV")
PK = TypeVar("PK")
T = TypeVar("T")


class Edge(BaseModel, Generic[EV, PK, T]):
    """Canonical directed edge between two node ids.

    ``source`` and ``target`` are expected to match node ids in the same graph;
    this is a convention and is not checked.

    Attributes:
        variant: Edge category (e.g. "knows").
        variant_pk: Primary key within the edge category.
        id: Unique per edge, even when another edge joins the same two nodes.
        source: Id of the source node.
        target: Id of the target node.
        props: Variant-specific payload.
    """

    variant: EV
    variant_pk: PK
    id: str
    source: str
    target: str
    props: T

    model_config = {"frozen": False, "ser_json_inf_nan": "constants"}


class ToEdge(ABC, Generic[EV, PK, T]):
    """Adapter contract for domain types that render as an edge."""

    @abstractmethod
    def edge_variant(self) -> EV:
        ...

    @abstractmethod
    def edge_pk(self) -> PK:
        ...

    def edge_id(self) -> str:
        return format_variant_id(self.edge_variant(), self.edge_pk())

    @abstractmethod
    def edge_source(self) -> str:
        ...

    @abstractmethod
    def edge_target(self) -> str:
        ...

    @abstractmethod
    def edge_props(self) -> T:
        ...

    def to_edge(self) -> Edge[EV, PK, T]:
        try:
            return Edge(
                variant=self.edge_variant(),
                variant_pk=self.edge_pk(),
                id=self.edge_id(),
                source=self.edge_source(),
                target=self.edge_target(),
                props=self.edge_props(),
            )
        except ValidationError as exc:
            raise SerializationError("edge", None, str(exc)) from exc

    def to_edge_and_json(self) -> Tuple[Edge[EV, PK, T], Any]:
        """Return the edge together with its serialized value.

        Raises:
            SerializationError: If the edge cannot be serialized.
        """
        edge = self.to_edge()
        return edge, edge_to_json(edge)

    def to_edge_json(self) -> Any:
        _edge, value = self.to_edge_and_json()
        return value
