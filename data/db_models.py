"""
Database models for built taxonomy trees.

Stores one row per build and one row per node, keeping node creation order.
"""
from datetime import datetime

from sqlalchemy import (
    Column, String, Integer, Float, Text, DateTime, ForeignKey, JSON
)
from sqlalchemy.orm import declarative_base, relationship

from utils.id_utils import generate_uuid

Base = declarative_base()


class HierarchyTree(Base):
    """One build of the taxonomy tree."""

    __tablename__ = 'hierarchy_trees'

    id = Column(String, primary_key=True, default=generate_uuid)
    source_name = Column(String, nullable=False)
    node_count = Column(Integer, nullable=False, default=0)

    # Level names in rank order
    levels = Column(JSON, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    nodes = relationship(
        "HierarchyNode",
        back_populates="tree",
        cascade="all, delete-orphan",
        order_by="HierarchyNode.position"
    )

    def __repr__(self):
        return f"<HierarchyTree(id={self.id}, source={self.source_name}, nodes={self.node_count})>"


class HierarchyNode(Base):
    """A single node of a stored tree."""

    __tablename__ = 'hierarchy_nodes'

    id = Column(String, primary_key=True, default=generate_uuid)
    tree_id = Column(String, ForeignKey('hierarchy_trees.id'), nullable=False)

    # Creation order within the tree
    position = Column(Integer, nullable=False)

    # Node identification
    node_id = Column(String, nullable=False)
    title = Column(Text, nullable=False)
    level = Column(String, nullable=False)

    # Hierarchy
    parent_node_id = Column(String)  # node_id of the parent, NULL at the top
    child_ids = Column(JSON, nullable=False, default=list)

    # Metadata
    record_id = Column(Text, default='')
    business_role = Column(Text, default='')
    fiori_recommendations = Column(Text, default='')
    insights = Column(Text, default='')
    business_stakeholders = Column(Text, default='')
    materiality = Column(Float, default=0)
    description = Column(Text, default='')

    # Relationships
    tree = relationship("HierarchyTree", back_populates="nodes")

    def __repr__(self):
        return f"<HierarchyNode(node_id={self.node_id}, level={self.level}, title={self.title})>"

    def to_dict(self):
        """Convert to dictionary for display."""
        return {
            'id': self.id,
            'tree_id': self.tree_id,
            'position': self.position,
            'node_id': self.node_id,
            'title': self.title,
            'level': self.level,
            'parent_node_id': self.parent_node_id,
            'child_ids': list(self.child_ids or []),
            'materiality': self.materiality
        }
