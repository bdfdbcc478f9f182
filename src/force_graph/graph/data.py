import logging
from typing import Any, Dict, Tuple

from pydantic import BaseModel, Field, PrivateAttr

from force_graph.config.settings import GraphSettings

from .edge import Edge
from .ids import format_pair_edge_id, is_ambiguous_pk, variant_name
from .node import Node, ToNode
from .serialization import edge_to_json, node_to_json

logger = logging.getLogger(__name__)

Bucket = Dict[str, Dict[str, Any]]


class Graph(BaseModel):
    """Serialized nodes and edges, grouped by variant name and then by id.

    Records are stored as JSON values rather than typed models because the
    graph is built once per view and shipped to a browser as-is:

        {"nodes": {"<variant>": {"<node id>": {...}}},
         "edges": {"<variant>": {"<edge id>": {...}}}}

    Inserting an id that already exists replaces the stored value. A Graph is
    not safe for concurrent mutation; callers gathering entities concurrently
    must populate it from a single thread.

    Attributes:
        nodes: Serialized nodes keyed by variant name, then node id.
        edges: Serialized edges keyed by variant name, then edge id.
    """

    nodes: Bucket = Field(default_factory=dict)
    edges: Bucket = Field(default_factory=dict)

    _settings: GraphSettings = PrivateAttr(default_factory=GraphSettings.from_env_or_default)

    model_config = {"frozen": False}

    @classmethod
    def with_settings(cls, settings: GraphSettings) -> "Graph":
        """Create an empty graph that uses explicit settings instead of the environment."""
        graph = cls()
        graph._settings = settings
        return graph

    def add_node(self, node: Node) -> None:
        """Serialize a node and store it under its variant and id.

        Raises:
            SerializationError: If the node cannot be serialized. Nothing is
                stored for the node in that case.
        """
        value = node_to_json(node)
        self._check_pk(node.variant_pk, node.id)
        self._insert(self.nodes, "node", variant_name(node.variant), node.id, value)

    def add_node_from(self, adapter: ToNode) -> Node:
        """Derive a node from an adapter, store it, and return the typed node."""
        node = adapter.to_node()
        self.add_node(node)
        return node

    def _add_edge(self, edge: Edge) -> None:
        # Public callers go through source_edge_target so that both endpoints
        # are inserted alongside the edge.
        value = edge_to_json(edge)
        self._check_pk(edge.variant_pk, edge.id)
        self._insert(self.edges, "edge", variant_name(edge.variant), edge.id, value)

    def source_edge_target(
        self,
        source: ToNode,
        target: ToNode,
        edge_variant: Any,
        edge_props: Any,
    ) -> Tuple[Node, Edge, Node]:
        """Insert two nodes and the edge joining them.

        The edge's primary key is ``(source_pk, target_pk)`` and its id is
        ``"<source pk>|<edge variant>|<target pk>"``. Insertion order is source
        node, edge, target node. A failure part-way leaves earlier records in
        place.

        Args:
            source: Adapter for the source node.
            target: Adapter for the target node.
            edge_variant: Category of the edge.
            edge_props: Payload for the edge.

        Returns:
            The source node, the edge, and the target node.

        Raises:
            SerializationError: If any of the three records cannot be serialized.
        """
        source_node = source.to_node()
        target_node = target.to_node()
        edge = Edge(
            variant=edge_variant,
            variant_pk=(source_node.variant_pk, target_node.variant_pk),
            id=format_pair_edge_id(source_node.variant_pk, edge_variant, target_node.variant_pk),
            source=source_node.id,
            target=target_node.id,
            props=edge_props,
        )

        self.add_node(source_node)
        self._add_edge(edge)
        self.add_node(target_node)
        return source_node, edge, target_node

    def node_count(self) -> int:
        """Return the number of nodes across all variants."""
        return sum(len(bucket) for bucket in self.nodes.values())

    def edge_count(self) -> int:
        """Return the number of edges across all variants."""
        return sum(len(bucket) for bucket in self.edges.values())

    def to_wire(self) -> Dict[str, Bucket]:
        """Return the ``{"nodes": ..., "edges": ...}`` payload for transport."""
        return self.model_dump(mode="json")

    def _check_pk(self, pk: Any, record_id: str) -> None:
        if self._settings.warn_ambiguous_ids and is_ambiguous_pk(pk):
            logger.warning(
                "Primary key %r contains the id separator; id %s is ambiguous", pk, record_id
            )

    def _insert(
        self, collection: Bucket, kind: str, bucket: str, record_id: str, value: Any
    ) -> None:
        slot = collection.setdefault(bucket, {})
        if record_id in slot:
            level = logging.WARNING if self._settings.log_overwrites else logging.DEBUG
            logger.log(level, "Overwriting %s %s in %s", kind, record_id, bucket)
        else:
            logger.debug("Adding %s %s to %s", kind, record_id, bucket)
        slot[record_id] = value
