"""
Hierarchy Tree Builder

Folds flat taxonomy rows into a deduplicated list of linked nodes.
A node is identified by its path, not its value: the same title under a
different parent, or at a different level, is a different node.
"""
import logging
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from core.constants import HIERARCHY_LEVELS
from core.models import Node, Row
from utils.id_utils import IdGenerator, generate_object_id

logger = logging.getLogger(__name__)

# (level, title, parent id)
DedupKey = Tuple[str, str, Optional[str]]


class HierarchyTreeBuilder:
    """
    Builds the process tree from taxonomy rows.

    Each call to ``build`` starts from empty indices, so one builder can be
    reused for several inputs.
    """

    def __init__(
        self,
        levels: Sequence[str] = HIERARCHY_LEVELS,
        id_generator: Optional[IdGenerator] = None
    ):
        """
        Initialize tree builder.

        Args:
            levels: Level names ordered from rank 1 down
            id_generator: Callable returning a fresh unique id per node

        Raises:
            ValueError: If levels is empty, repeats a name or has a blank name
        """
        if isinstance(levels, str) or not levels:
            raise ValueError("levels must be a non-empty sequence of level names")
        levels = tuple(levels)
        for level in levels:
            if not isinstance(level, str) or not level.strip():
                raise ValueError(f"Invalid level name: {level!r}")
        if len(set(levels)) != len(levels):
            raise ValueError(f"Duplicate level names in {levels}")

        self.levels = levels
        self.id_generator = id_generator or generate_object_id

    def build(self, rows: Iterable[Row]) -> List[Node]:
        """
        Build the node list from rows.

        Args:
            rows: Rows in source order

        Returns:
            Nodes in creation order
        """
        nodes: List[Node] = []
        id_by_key: Dict[DedupKey, str] = {}
        node_by_id: Dict[str, Node] = {}
        row_count = 0

        for row in rows:
            if not isinstance(row, Row):
                raise TypeError(f"Expected Row, got {type(row).__name__}")
            row_count += 1
            parent_id = None

            for level in self.levels:
                title = row.value_for(level)
                if title is None:
                    # Gap: keep chaining from the last populated level
                    continue

                key = (level, title, parent_id)
                node_id = id_by_key.get(key)

                if node_id is None:
                    node_id = self.id_generator()
                    if node_id in node_by_id:
                        raise ValueError(f"Id generator returned duplicate id: {node_id}")
                    node = Node(
                        node_id=node_id,
                        title=title,
                        level=level,
                        parent_id=parent_id,
                        metadata=row.metadata
                    )
                    nodes.append(node)
                    id_by_key[key] = node_id
                    node_by_id[node_id] = node

                    if parent_id is not None:
                        node_by_id[parent_id].add_child(node_id)
                elif row.metadata != node_by_id[node_id].metadata:
                    logger.debug(f"Keeping first metadata for {level}: '{title}'")

                parent_id = node_id

        logger.debug(f"Built {len(nodes)} nodes from {row_count} rows")
        return nodes


def build_hierarchy_tree(
    rows: Iterable[Row],
    levels: Sequence[str] = HIERARCHY_LEVELS,
    id_generator: Optional[IdGenerator] = None
) -> List[Node]:
    """
    Build the process tree from rows in one call.

    Args:
        rows: Rows in source order
        levels: Level names ordered from rank 1 down
        id_generator: Optional id source (defaults to ObjectId-style ids)

    Returns:
        Nodes in creation order
    """
    return HierarchyTreeBuilder(levels, id_generator).build(rows)
