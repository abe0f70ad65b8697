"""Hierarchy package - Tree construction and reporting for taxonomy rows."""

from .tree_builder import (
    HierarchyTreeBuilder,
    build_hierarchy_tree,
)

from .reporting import (
    PlacementExample,
    DuplicateTitle,
    HierarchyReport,
    summarize_tree,
    format_report,
)

__all__ = [
    'HierarchyTreeBuilder',
    'build_hierarchy_tree',
    'PlacementExample',
    'DuplicateTitle',
    'HierarchyReport',
    'summarize_tree',
    'format_report',
]
