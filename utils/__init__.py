"""Utilities package - Helper functions for identifiers and cell values."""

from .id_utils import (
    IdGenerator,
    generate_object_id,
    generate_uuid,
    SequentialIdGenerator
)

from .cell_utils import (
    is_blank,
    is_missing,
    cell_to_text,
    cell_to_number
)

__all__ = [
    # Id utils
    'IdGenerator',
    'generate_object_id',
    'generate_uuid',
    'SequentialIdGenerator',

    # Cell utils
    'is_blank',
    'is_missing',
    'cell_to_text',
    'cell_to_number'
]
