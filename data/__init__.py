"""Data access layer - Readers, sinks and tree storage."""

from .db_models import Base, HierarchyTree, HierarchyNode
from .database import (
    DatabaseManager,
    get_db_manager,
    session_scope,
    init_database
)
from .readers import TabularSourceError, TabularRowReader, JsonNodeReader
from .sinks import JsonNodeSink
from .repositories import HierarchyTreeRepository

__all__ = [
    # Models
    'Base',
    'HierarchyTree',
    'HierarchyNode',

    # Database
    'DatabaseManager',
    'get_db_manager',
    'session_scope',
    'init_database',

    # Readers and sinks
    'TabularSourceError',
    'TabularRowReader',
    'JsonNodeReader',
    'JsonNodeSink',
    'HierarchyTreeRepository'
]
