"""
Unit tests for core.constants module.
"""
import pytest
from core.constants import (
    HIERARCHY_LEVELS,
    METADATA_FIELDS,
    NUMERIC_METADATA_FIELDS,
    DEFAULT_INPUT_FILE,
    DEFAULT_OUTPUT_FILE
)
from core.models import NodeMetadata


class TestHierarchyLevels:
    """Tests for HIERARCHY_LEVELS constant."""

    def test_five_levels(self):
        """Test there are five ranked levels."""
        assert len(HIERARCHY_LEVELS) == 5

    def test_level_order(self):
        """Test levels are ordered L1 to L5."""
        for rank, level in enumerate(HIERARCHY_LEVELS, 1):
            assert level.startswith(f"L{rank} - ")

    def test_level_names(self):
        """Test the exact level column names."""
        assert HIERARCHY_LEVELS == (
            'L1 - Line of Business',
            'L2 - Process Group',
            'L3 - Scope Item',
            'L4 - Process Variant',
            'L5 - Process Step',
        )


class TestMetadataFields:
    """Tests for METADATA_FIELDS constant."""

    def test_attributes_match_model(self):
        """Test every metadata attribute exists on NodeMetadata."""
        defaults = NodeMetadata()
        for column, (attr, default) in METADATA_FIELDS.items():
            assert getattr(defaults, attr) == default, column

    @pytest.mark.parametrize("column", NUMERIC_METADATA_FIELDS)
    def test_numeric_defaults_zero(self, column):
        """Test numeric columns default to zero."""
        assert METADATA_FIELDS[column][1] == 0

    def test_text_defaults_empty(self):
        """Test text columns default to empty string."""
        for column, (_, default) in METADATA_FIELDS.items():
            if column not in NUMERIC_METADATA_FIELDS:
                assert default == ''


class TestDefaultFiles:
    """Tests for command line defaults."""

    def test_input_is_spreadsheet(self):
        assert DEFAULT_INPUT_FILE.endswith('.xlsx')

    def test_output_is_json(self):
        assert DEFAULT_OUTPUT_FILE == 'tree_output.json'
