"""Conversion of node and edge records to JSON values."""

import json
import logging
import math
from typing import TYPE_CHECKING, Any, Optional

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from force_graph.errors import SerializationError

if TYPE_CHECKING:
    from .edge import Edge
    from .node import Node

logger = logging.getLogger(__name__)


def _reject_constant(token: str) -> Any:
    raise ValueError(f"{token} is not a valid JSON number")


def _non_finite_path(value: Any, path: str = "$") -> Optional[str]:
    """Return the path of the first NaN/Infinity in a python-mode dump, if any."""
    if isinstance(value, float):
        return None if math.isfinite(value) else path
    if isinstance(value, dict):
        for key, item in value.items():
            found = _non_finite_path(item, f"{path}.{key}")
            if found:
                return found
    elif isinstance(value, (list, tuple, set, frozenset)):
        for index, item in enumerate(value):
            found = _non_finite_path(item, f"{path}[{index}]")
            if found:
                return found
    return None


def serialize_record(record: BaseModel, kind: str, record_id: Optional[str]) -> Any:
    """Serialize a pydantic record to a JSON tree (dict/list/str/number/bool/None).

    Nested models in ``props`` keep their own config and would write NaN or
    Infinity as ``null``, so the python-mode dump is scanned for non-finite
    floats at every level before the JSON dump.

    Raises:
        SerializationError: If the record or its props cannot be represented.
    """
    try:
        bad_path = _non_finite_path(record.model_dump(mode="python"))
        if bad_path is not None:
            raise ValueError(f"non-finite float at {bad_path} has no JSON representation")
        payload = record.model_dump_json()
        return json.loads(payload, parse_constant=_reject_constant)
    except (PydanticSerializationError, ValueError, TypeError) as exc:
        logger.debug("Serialization of %s %s failed: %s", kind, record_id, exc)
        raise SerializationError(kind, record_id, str(exc)) from exc


def node_to_json(node: "Node") -> Any:
    """Serialize a node to its wire value."""
    return serialize_record(node, "node", node.id)


def edge_to_json(edge: "Edge") -> Any:
    """Serialize an edge to its wire value."""
    return serialize_record(edge, "edge", edge.id)
