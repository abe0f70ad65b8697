"""Core package - Domain models and constants."""

from .models import Row, Node, NodeMetadata
from .constants import (
    HIERARCHY_LEVELS,
    METADATA_FIELDS,
    NUMERIC_METADATA_FIELDS,
    DEFAULT_INPUT_FILE,
    DEFAULT_OUTPUT_FILE,
)

__all__ = [
    'Row',
    'Node',
    'NodeMetadata',
    'HIERARCHY_LEVELS',
    'METADATA_FIELDS',
    'NUMERIC_METADATA_FIELDS',
    'DEFAULT_INPUT_FILE',
    'DEFAULT_OUTPUT_FILE',
]
