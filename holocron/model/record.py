"""
Record module for the values held by a vector store.

This module defines the immutable record type: an identifier, an embedding
vector and optional string metadata.
"""

from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple


class Record:
    """
    Represents a single stored embedding.

    A Record is immutable once constructed. No validation is performed here:
    empty ids, empty vectors and zero or NaN components are all accepted and
    only surface as errors when the record is scored during a query.
    """

    __slots__ = ("_id", "_values", "_metadata")

    def __init__(
        self,
        record_id: str,
        values: Iterable[float],
        metadata: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize a Record with the provided attributes.

        Args:
            record_id: Caller supplied identifier, used as the lookup key
            values: The embedding vector
            metadata: Optional string-to-string mapping, opaque to the store.
                None means "no metadata", which is distinct from an empty mapping.
        """
        self._id = record_id
        self._values: Tuple[float, ...] = tuple(float(v) for v in values)
        self._metadata: Optional[Mapping[str, str]] = (
            MappingProxyType(dict(metadata)) if metadata is not None else None
        )

    @property
    def id(self) -> str:
        return self._id

    @property
    def values(self) -> Tuple[float, ...]:
        return self._values

    @property
    def metadata(self) -> Optional[Mapping[str, str]]:
        """Read-only view of the metadata, or None when none was given."""
        return self._metadata

    @property
    def dimension(self) -> int:
        return len(self._values)

    def clone(self) -> "Record":
        """Return an equal record that shares no state with this one."""
        return Record(self._id, self._values, self._metadata)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the Record to a dictionary representation.

        The "metadata" key is only present when the record carries metadata.

        Returns:
            Dictionary containing the record attributes
        """
        data: Dict[str, Any] = {"id": self._id, "values": list(self._values)}
        if self._metadata is not None:
            data["metadata"] = dict(self._metadata)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Record":
        """
        Create a Record from a dictionary representation.

        Args:
            data: Dictionary with "id", "values" and an optional "metadata" key

        Returns:
            A new Record instance

        Raises:
            ValueError: If "id" or "values" is missing
        """
        if "id" not in data:
            raise ValueError("Record must have an 'id'")
        if "values" not in data:
            raise ValueError("Record must have 'values'")

        return cls(data["id"], data["values"], data.get("metadata"))

    def __eq__(self, other):
        """
        Compare this Record with another for equality.

        Two records are equal if id, values and metadata match. A record
        without metadata is not equal to one with empty metadata.
        """
        if not isinstance(other, Record):
            return NotImplemented

        return (
            self._id == other._id
            and self._values == other._values
            and self._metadata == other._metadata
        )

    __hash__ = None

    def __repr__(self):
        values = ", ".join(f"{v:.4g}" for v in self._values[:4])
        if len(self._values) > 4:
            values += ", ..."
        metadata = dict(self._metadata) if self._metadata is not None else None
        return f"Record(id='{self._id}', values=[{values}], dim={self.dimension}, metadata={metadata})"
