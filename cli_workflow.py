#!/usr/bin/env python3
"""
CLI workflow runner for spreadsheet-to-tree conversion.

Reads a taxonomy spreadsheet, builds the deduplicated process tree and
writes it as a flat JSON list of nodes.
"""
import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from sqlalchemy.exc import SQLAlchemyError

from config.settings import settings
from core.constants import HIERARCHY_LEVELS
from core.models import Node
from data.database import init_database, session_scope
from data.readers import JsonNodeReader, TabularRowReader, TabularSourceError
from data.repositories import HierarchyTreeRepository
from data.sinks import JsonNodeSink
from hierarchy.reporting import format_report, summarize_tree
from hierarchy.tree_builder import build_hierarchy_tree

logger = logging.getLogger(__name__)


def setup_logging(level_name: str) -> None:
    """Configure console logging for the CLI."""
    logging.basicConfig(
        level=getattr(logging, str(level_name).upper(), logging.INFO),
        format='%(levelname)s: %(message)s',
        force=True
    )


def build_tree_cli(
    input_file: str,
    output_file: str,
    sheet_name=0,
    database_url: Optional[str] = None,
    levels: Sequence[str] = HIERARCHY_LEVELS
) -> Optional[List[Node]]:
    """
    Convert a spreadsheet into the JSON tree file.

    Returns:
        Built nodes, or None if reading, building or writing failed
    """
    print("=" * 60)
    print(f"Converting: {input_file}")
    print("=" * 60)

    try:
        rows = TabularRowReader(input_file, levels, sheet_name=sheet_name).read()

        nodes = build_hierarchy_tree(rows, levels)
        JsonNodeSink(output_file, levels, indent=settings.json_indent).write(nodes)
    except (OSError, ValueError) as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"❌ Error processing spreadsheet: {e}", file=sys.stderr)
        return None

    print(f"✓ Successfully processed {len(nodes)} nodes")
    print(f"✓ Output written to: {output_file}")

    if database_url:
        try:
            init_database(database_url)
            with session_scope(database_url) as session:
                tree = HierarchyTreeRepository(session).save_tree(
                    nodes, source_name=os.path.basename(input_file), levels=levels
                )
                print(f"✓ Tree stored: {tree.id} ({tree.node_count} nodes)")
        except SQLAlchemyError as e:
            logger.debug("Storing tree failed", exc_info=True)
            print(f"❌ Error storing tree: {e}", file=sys.stderr)
            return None

    return nodes


def report_cli(
    output_file: str,
    levels: Sequence[str] = HIERARCHY_LEVELS,
    top_n: int = 5,
    max_examples: int = 3
) -> bool:
    """
    Print statistics for a written tree file.

    Returns:
        True if the report could be produced
    """
    try:
        nodes = JsonNodeReader(output_file, levels).read()
    except (OSError, TabularSourceError) as e:
        print(f"Error analyzing output: {e}", file=sys.stderr)
        return False

    report = summarize_tree(nodes, levels, max_examples=max_examples)
    for line in format_report(report, top_n=top_n, max_examples=max_examples):
        print(line)
    return True


def show_tree_cli(nodes: Sequence[Node]) -> None:
    """Print the tree structure."""
    node_by_id: Dict[str, Node] = {node.node_id: node for node in nodes}

    def print_node(node: Node, indent: int = 0):
        """Print a single node and its children."""
        print("  " * indent + f"├─ [{node.node_id}] {node.title}")
        for child_id in node.child_ids:
            print_node(node_by_id[child_id], indent + 1)

    print("\nTree Structure:")
    print("-" * 60)
    for node in nodes:
        if node.parent_id is None:
            print_node(node)


def main(argv: Optional[Sequence[str]] = None):
    parser = argparse.ArgumentParser(
        description='Convert a process taxonomy spreadsheet into a JSON node tree'
    )
    parser.add_argument('input_file', nargs='?', default=settings.input_file,
                        help=f'Spreadsheet to read (default: {settings.input_file})')
    parser.add_argument('output_file', nargs='?', default=settings.output_file,
                        help=f'JSON file to write (default: {settings.output_file})')
    parser.add_argument('--sheet', default=settings.sheet_name,
                        help='Worksheet name or index (default: first sheet)')
    parser.add_argument('--database-url', type=str, default=settings.database_url,
                        help='Also store the tree in this database')
    parser.add_argument('--no-report', action='store_true', help='Skip the statistics report')
    parser.add_argument('--show-tree', action='store_true', help='Print the tree structure')
    parser.add_argument('--log-level', type=str, default=settings.log_level, help='Logging level')

    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if not os.path.exists(args.input_file):
        print(f"Error: Input file '{args.input_file}' does not exist.", file=sys.stderr)
        parser.print_usage(sys.stderr)
        sys.exit(1)

    sheet = args.sheet
    if isinstance(sheet, str) and sheet.isdigit():
        sheet = int(sheet)

    nodes = build_tree_cli(
        input_file=args.input_file,
        output_file=args.output_file,
        sheet_name=sheet,
        database_url=args.database_url
    )
    if nodes is None:
        sys.exit(1)

    print("Process completed successfully")

    if not args.no_report:
        report_cli(args.output_file, **settings.get_report_config())

    if args.show_tree:
        show_tree_cli(nodes)


if __name__ == '__main__':
    main()
