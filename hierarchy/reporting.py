"""
Tree reporting.

Read-only statistics over a built node list: how many nodes sit at each
level, and which titles occur on more than one node.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from core.constants import (
    DEFAULT_REPORT_MAX_EXAMPLES,
    DEFAULT_REPORT_TOP_N,
    HIERARCHY_LEVELS,
)
from core.models import Node


@dataclass
class PlacementExample:
    """One occurrence of a duplicated title together with its parent."""
    node_id: str
    level: str
    title: str
    parent_level: str
    parent_title: str


@dataclass
class DuplicateTitle:
    """A title held by more than one node."""
    title: str
    node_ids: List[str] = field(default_factory=list)
    examples: List[PlacementExample] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.node_ids)


@dataclass
class HierarchyReport:
    """Summary of a built tree."""
    total_nodes: int
    level_counts: Dict[str, int]
    duplicates: List[DuplicateTitle] = field(default_factory=list)
    max_examples: int = DEFAULT_REPORT_MAX_EXAMPLES


def summarize_tree(
    nodes: Sequence[Node],
    levels: Sequence[str] = HIERARCHY_LEVELS,
    max_examples: int = DEFAULT_REPORT_MAX_EXAMPLES
) -> HierarchyReport:
    """
    Compute level counts and duplicated titles.

    Args:
        nodes: Nodes in creation order
        levels: Level names ordered from rank 1 down
        max_examples: Occurrences inspected per duplicated title

    Returns:
        HierarchyReport
    """
    level_counts = {level: 0 for level in levels}
    ids_by_title: Dict[str, List[str]] = {}
    node_by_id = {node.node_id: node for node in nodes}

    for node in nodes:
        if node.level in level_counts:
            level_counts[node.level] += 1
        ids_by_title.setdefault(node.title, []).append(node.node_id)

    duplicates = []
    for title, node_ids in ids_by_title.items():
        if len(node_ids) < 2:
            continue
        duplicate = DuplicateTitle(title=title, node_ids=node_ids)
        for node_id in node_ids[:max_examples]:
            node = node_by_id[node_id]
            parent: Optional[Node] = node_by_id.get(node.parent_id) if node.parent_id else None
            if parent is None:
                continue
            duplicate.examples.append(PlacementExample(
                node_id=node.node_id,
                level=node.level,
                title=node.title,
                parent_level=parent.level,
                parent_title=parent.title
            ))
        duplicates.append(duplicate)

    # Stable sort keeps first-seen order among equal counts
    duplicates.sort(key=lambda d: d.count, reverse=True)

    return HierarchyReport(
        total_nodes=len(nodes),
        level_counts=level_counts,
        duplicates=duplicates,
        max_examples=max_examples
    )


def format_report(
    report: HierarchyReport,
    top_n: int = DEFAULT_REPORT_TOP_N,
    max_examples: int = DEFAULT_REPORT_MAX_EXAMPLES
) -> List[str]:
    """
    Render a report as console lines.

    Args:
        report: Report from summarize_tree
        top_n: Number of duplicated titles to detail
        max_examples: Occurrences shown per title, capped by the report's own max_examples

    Returns:
        Lines of text
    """
    limit = min(max_examples, report.max_examples)

    lines = ['', 'Nodes at each level:']
    for level, count in report.level_counts.items():
        lines.append(f"- {level}: {count} nodes")

    if report.duplicates:
        lines.append('')
        lines.append(
            f"Found {len(report.duplicates)} items that appear under multiple parents:"
        )
        for duplicate in report.duplicates[:top_n]:
            lines.append(
                f'- "{duplicate.title}" appears {duplicate.count} times with different parents'
            )
            shown = set(duplicate.node_ids[:limit])
            for example in duplicate.examples:
                if example.node_id not in shown:
                    continue
                lines.append(
                    f'  * {example.level}: "{example.title}" under '
                    f'{example.parent_level}: "{example.parent_title}"'
                )
            if duplicate.count > limit:
                lines.append(
                    f"  * ... and {duplicate.count - limit} more instances"
                )

    return lines
