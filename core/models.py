"""
Core domain models for the process taxonomy tree.

These are pure data structures without business logic.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Union

from .constants import (
    HIERARCHY_LEVELS,
    METADATA_FIELDS,
    NODE_CHILDREN_KEY,
    NODE_ID_KEY,
    NODE_PARENT_KEY,
    NODE_TITLE_KEY,
)


Number = Union[int, float]


@dataclass(frozen=True)
class NodeMetadata:
    """Descriptive row fields carried onto a node."""
    record_id: str = ""
    business_role: str = ""
    fiori_recommendations: str = ""
    insights: str = ""
    business_stakeholders: str = ""
    materiality: Number = 0
    description: str = ""

    @classmethod
    def from_record(cls, record: Mapping) -> 'NodeMetadata':
        """
        Build metadata from a record keyed by column name.

        Missing or empty columns fall back to their declared defaults.
        """
        values = {}
        for column, (attr, default) in METADATA_FIELDS.items():
            value = record.get(column)
            values[attr] = default if value is None or value == '' else value
        return cls(**values)

    def to_dict(self) -> Dict:
        """Convert to dictionary keyed by column name."""
        return {
            column: getattr(self, attr)
            for column, (attr, _) in METADATA_FIELDS.items()
        }


@dataclass(frozen=True)
class Row:
    """
    One input record.

    ``values`` maps level name to a trimmed non-empty string, or None when
    the row has nothing at that level.
    """
    values: Mapping[str, Optional[str]] = field(default_factory=dict)
    metadata: NodeMetadata = field(default_factory=NodeMetadata)

    def __post_init__(self):
        for level, value in self.values.items():
            if value is not None and not isinstance(value, str):
                raise TypeError(
                    f"Level '{level}' value must be a string or None, got {type(value).__name__}"
                )

    def value_for(self, level: str) -> Optional[str]:
        """Return the trimmed value for a level, or None if absent or blank."""
        value = self.values.get(level)
        if value is None:
            return None
        value = value.strip()
        return value or None

    @classmethod
    def from_record(cls, record: Mapping, levels: Sequence[str] = HIERARCHY_LEVELS) -> 'Row':
        """Build a row from a record keyed by column name."""
        values = {}
        for level in levels:
            value = record.get(level)
            if isinstance(value, str):
                value = value.strip() or None
            values[level] = value
        return cls(values=values, metadata=NodeMetadata.from_record(record))


@dataclass
class Node:
    """A deduplicated element of the process tree."""
    node_id: str
    title: str
    level: str
    parent_id: Optional[str] = None
    child_ids: List[str] = field(default_factory=list)
    metadata: NodeMetadata = field(default_factory=NodeMetadata)

    def add_child(self, child_id: str) -> bool:
        """Append a child id unless already present. Returns True if appended."""
        if child_id in self.child_ids:
            return False
        self.child_ids.append(child_id)
        return True

    def level_fields(self, levels: Sequence[str] = HIERARCHY_LEVELS) -> Dict[str, str]:
        """Level columns: the node's own level holds the title, the rest are empty."""
        return {level: self.title if level == self.level else '' for level in levels}

    def to_dict(self, levels: Sequence[str] = HIERARCHY_LEVELS) -> Dict:
        """Convert to the persisted record format."""
        record = {
            NODE_ID_KEY: self.node_id,
            NODE_TITLE_KEY: self.title,
            NODE_PARENT_KEY: self.parent_id or '',
            NODE_CHILDREN_KEY: list(self.child_ids),
        }
        record.update(self.level_fields(levels))
        record.update(self.metadata.to_dict())
        return record

    @classmethod
    def from_dict(cls, record: Mapping, levels: Sequence[str] = HIERARCHY_LEVELS) -> 'Node':
        """
        Rebuild a node from its persisted record.

        Raises:
            ValueError: If the record does not name exactly one level
        """
        populated = [level for level in levels if record.get(level)]
        if len(populated) != 1:
            raise ValueError(
                f"Node {record.get(NODE_ID_KEY)!r} must have exactly one level set, found {len(populated)}"
            )
        return cls(
            node_id=record[NODE_ID_KEY],
            title=record[NODE_TITLE_KEY],
            level=populated[0],
            parent_id=record.get(NODE_PARENT_KEY) or None,
            child_ids=list(record.get(NODE_CHILDREN_KEY) or []),
            metadata=NodeMetadata.from_record(record),
        )
