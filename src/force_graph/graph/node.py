from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, Tuple, TypeVar

from pydantic import BaseModel, ValidationError

from force_graph.errors import SerializationError

from .ids import format_variant_id
from .serialization import node_to_json

NV = TypeVar("NV")
PK = TypeVar("PK")
T = TypeVar("T")


class Node(BaseModel, Generic[NV, PK, T]):
    """Canonical graph node representation.

    A force-directed renderer only needs ``id`` and ``name``; everything
    category-specific travels in ``props``.

    Attributes:
        variant: Category discriminator (e.g. an Enum member or a plain string).
        variant_pk: Primary key within the variant (int, str, tuple, ...).
        id: Graph-wide unique id, conventionally ``"<variant>|<pk!r>"``.
        name: Display label.
        props: Variant-specific payload; anything pydantic can serialize.
    """

    variant: NV
    variant_pk: PK
    id: str
    name: str
    props: T

    model_config = {"frozen": False, "ser_json_inf_nan": "constants"}


class ToNode(ABC, Generic[NV, PK, T]):
    """Adapter contract for domain types that render as a node.

    Implementers supply ``node_variant``, ``node_pk``, ``node_name`` and
    ``node_props``; everything else has a default.
    """

    @abstractmethod
    def node_variant(self) -> NV:
        ...

    @abstractmethod
    def node_pk(self) -> PK:
        ...

    def node_id(self) -> str:
        return format_variant_id(self.node_variant(), self.node_pk())

    @abstractmethod
    def node_name(self) -> str:
        ...

    def node_image_url(self) -> Optional[str]:
        """Optional avatar or icon reference for the renderer."""
        return None

    @abstractmethod
    def node_props(self) -> T:
        ...

    def to_node(self) -> Node[NV, PK, T]:
        """Assemble the full node record from the adapter methods.

        Raises:
            SerializationError: If an adapter method returns a value the record
                rejects, e.g. a non-string ``node_name``.
        """
        try:
            return Node(
                variant=self.node_variant(),
                variant_pk=self.node_pk(),
                id=self.node_id(),
                name=self.node_name(),
                props=self.node_props(),
            )
        except ValidationError as exc:
            raise SerializationError("node", None, str(exc)) from exc

    def to_node_and_json(self) -> Tuple[Node[NV, PK, T], Any]:
        """Return the node together with its serialized value.

        Raises:
            SerializationError: If the node cannot be serialized.
        """
        node = self.to_node()
        return node, node_to_json(node)

    def to_node_json(self) -> Any:
        _node, value = self.to_node_and_json()
        return value

    # Edge labels can combine text from both endpoints. These hooks are not
    # read anywhere in this package; renderers building labels call them.

    def edge_source_comment(self) -> Optional[str]:
        """This node's contribution to an edge label when it is the source."""
        return None

    def edge_target_comment(self) -> Optional[str]:
        """This node's contribution to an edge label when it is the target."""
        return None
