"""Error types raised while converting records to their wire form."""

from typing import Optional


class SerializationError(ValueError):
    """A node, edge, or props payload could not be converted to JSON.

    The underlying failure (pydantic serialization error, non-finite float, ...)
    is chained as ``__cause__``.

    Attributes:
        kind: Record kind that failed ("node" or "edge").
        record_id: Id of the record being serialized, when known.
        reason: Human-readable description of the failure.
    """

    def __init__(self, kind: str, record_id: Optional[str], reason: str):
        self.kind = kind
        self.record_id = record_id
        self.reason = reason
        super().__init__(f"Failed to serialize {kind} '{record_id}': {reason}")
