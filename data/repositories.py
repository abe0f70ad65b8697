"""
Repository pattern for data access.

Provides clean separation between data access and tree building.
"""
from typing import List, Optional, Sequence

from sqlalchemy.orm import Session

from core.constants import HIERARCHY_LEVELS
from core.models import Node, NodeMetadata
from data.db_models import HierarchyTree, HierarchyNode


class HierarchyTreeRepository:
    """Repository for stored taxonomy trees."""

    def __init__(self, session: Session):
        self.session = session

    def save_tree(
        self,
        nodes: Sequence[Node],
        source_name: str,
        levels: Sequence[str] = HIERARCHY_LEVELS
    ) -> HierarchyTree:
        """Store a built tree with its nodes in creation order."""
        tree = HierarchyTree(
            source_name=source_name,
            node_count=len(nodes),
            levels=list(levels)
        )
        self.session.add(tree)
        self.session.flush()  # Get tree ID before adding nodes

        for position, node in enumerate(nodes):
            metadata = node.metadata
            self.session.add(HierarchyNode(
                tree_id=tree.id,
                position=position,
                node_id=node.node_id,
                title=node.title,
                level=node.level,
                parent_node_id=node.parent_id,
                child_ids=list(node.child_ids),
                record_id=metadata.record_id,
                business_role=metadata.business_role,
                fiori_recommendations=metadata.fiori_recommendations,
                insights=metadata.insights,
                business_stakeholders=metadata.business_stakeholders,
                materiality=metadata.materiality,
                description=metadata.description
            ))

        self.session.commit()
        self.session.refresh(tree)
        return tree

    def get_by_id(self, tree_id: str) -> Optional[HierarchyTree]:
        """Get tree by ID."""
        return self.session.query(HierarchyTree).filter(
            HierarchyTree.id == tree_id
        ).first()

    def get_latest(self, source_name: Optional[str] = None) -> Optional[HierarchyTree]:
        """Get the most recently stored tree, optionally for one source."""
        query = self.session.query(HierarchyTree)
        if source_name:
            query = query.filter(HierarchyTree.source_name == source_name)
        return query.order_by(HierarchyTree.created_at.desc()).first()

    def list_all(self, limit: int = 50, offset: int = 0) -> List[HierarchyTree]:
        """List trees with pagination."""
        return self.session.query(HierarchyTree)\
            .order_by(HierarchyTree.created_at.desc())\
            .limit(limit)\
            .offset(offset)\
            .all()

    def load_nodes(self, tree_id: str) -> List[Node]:
        """Load the nodes of a tree in creation order."""
        rows = self.session.query(HierarchyNode)\
            .filter(HierarchyNode.tree_id == tree_id)\
            .order_by(HierarchyNode.position)\
            .all()
        return [self._to_node(row) for row in rows]

    def delete(self, tree_id: str) -> bool:
        """Delete a tree and its nodes."""
        tree = self.get_by_id(tree_id)
        if tree:
            self.session.delete(tree)
            self.session.commit()
            return True
        return False

    @staticmethod
    def _to_node(row: HierarchyNode) -> Node:
        materiality = row.materiality or 0
        if isinstance(materiality, float) and materiality.is_integer():
            materiality = int(materiality)

        return Node(
            node_id=row.node_id,
            title=row.title,
            level=row.level,
            parent_id=row.parent_node_id,
            child_ids=list(row.child_ids or []),
            metadata=NodeMetadata(
                record_id=row.record_id or '',
                business_role=row.business_role or '',
                fiori_recommendations=row.fiori_recommendations or '',
                insights=row.insights or '',
                business_stakeholders=row.business_stakeholders or '',
                materiality=materiality,
                description=row.description or ''
            )
        )
