"""
Unit tests for core.models module.
"""
import dataclasses

import pytest

from core.constants import HIERARCHY_LEVELS
from core.models import Node, NodeMetadata, Row

L1, L2, L3, L4, L5 = HIERARCHY_LEVELS


class TestNodeMetadata:
    """Tests for NodeMetadata dataclass."""

    def test_default_values(self):
        """Test defaults are empty strings and zero materiality."""
        metadata = NodeMetadata()

        assert metadata.record_id == ""
        assert metadata.business_role == ""
        assert metadata.materiality == 0
        assert metadata.description == ""

    def test_from_record(self):
        """Test building from column-keyed record."""
        metadata = NodeMetadata.from_record({
            'ID': 'J58',
            'Business Role': 'Accountant',
            'Fiori app UX recommendations': 'Manage Journal Entries',
            'Insights (Indicative)': 'Faster close',
            'Business stakeholders': 'CFO',
            'Materiality': 4,
            'Description': 'Post entries',
        })

        assert metadata == NodeMetadata(
            record_id='J58',
            business_role='Accountant',
            fiori_recommendations='Manage Journal Entries',
            insights='Faster close',
            business_stakeholders='CFO',
            materiality=4,
            description='Post entries',
        )

    def test_from_record_missing_and_empty(self):
        """Test missing or empty columns use defaults."""
        metadata = NodeMetadata.from_record({'ID': '', 'Materiality': None})

        assert metadata == NodeMetadata()

    def test_to_dict_column_order(self):
        """Test to_dict uses the persisted column names in order."""
        assert list(NodeMetadata().to_dict()) == [
            'ID', 'Business Role', 'Fiori app UX recommendations',
            'Insights (Indicative)', 'Business stakeholders', 'Materiality', 'Description',
        ]

    def test_immutable(self):
        """Test metadata cannot be modified."""
        metadata = NodeMetadata()
        with pytest.raises(dataclasses.FrozenInstanceError):
            metadata.description = "changed"


class TestRow:
    """Tests for Row dataclass."""

    def test_value_for_trims(self):
        """Test values are trimmed and blanks become None."""
        row = Row(values={L1: '  Finance ', L2: '   '})

        assert row.value_for(L1) == 'Finance'
        assert row.value_for(L2) is None
        assert row.value_for(L3) is None

    def test_rejects_non_string_values(self):
        """Test non-string level values violate the row contract."""
        with pytest.raises(TypeError):
            Row(values={L1: 42})

    def test_from_record(self):
        """Test building from a spreadsheet record."""
        row = Row.from_record({L1: ' Finance ', L3: '', 'Description': 'x'})

        assert row.values[L1] == 'Finance'
        assert row.values[L3] is None
        assert set(row.values) == set(HIERARCHY_LEVELS)
        assert row.metadata.description == 'x'

    def test_default_row_is_empty(self):
        """Test a default row has no values."""
        row = Row()

        assert all(row.value_for(level) is None for level in HIERARCHY_LEVELS)
        assert row.metadata == NodeMetadata()


class TestNode:
    """Tests for Node dataclass."""

    def test_add_child_no_duplicates(self):
        """Test add_child ignores ids already present."""
        node = Node(node_id='1', title='A', level=L1)

        assert node.add_child('2') is True
        assert node.add_child('3') is True
        assert node.add_child('2') is False
        assert node.child_ids == ['2', '3']

    def test_child_ids_independent(self):
        """Test child lists are not shared between instances."""
        first = Node(node_id='1', title='A', level=L1)
        second = Node(node_id='2', title='B', level=L1)

        first.add_child('3')

        assert second.child_ids == []

    def test_level_fields(self):
        """Test only the node's own level holds the title."""
        node = Node(node_id='1', title='Scope', level=L3)

        assert node.level_fields() == {L1: '', L2: '', L3: 'Scope', L4: '', L5: ''}

    def test_to_dict(self):
        """Test persisted record shape and key order."""
        node = Node(
            node_id='abc',
            title='Accounting',
            level=L2,
            parent_id='p1',
            child_ids=['c1'],
            metadata=NodeMetadata(record_id='J58', materiality=3),
        )

        record = node.to_dict()

        assert list(record)[:4] == ['_id', 'title', '_parent', '_child']
        assert list(record)[4:9] == list(HIERARCHY_LEVELS)
        assert record['_parent'] == 'p1'
        assert record['_child'] == ['c1']
        assert record[L2] == 'Accounting'
        assert record[L1] == ''
        assert record['ID'] == 'J58'
        assert record['Materiality'] == 3
        assert record['Description'] == ''

    def test_to_dict_top_level_parent_is_empty_string(self):
        """Test top-level nodes persist an empty parent."""
        assert Node(node_id='1', title='A', level=L1).to_dict()['_parent'] == ''

    def test_from_dict(self):
        """Test rebuilding a node from its record."""
        original = Node(
            node_id='abc', title='Step', level=L5, parent_id='p',
            child_ids=[], metadata=NodeMetadata(description='d', materiality=1.5),
        )

        assert Node.from_dict(original.to_dict()) == original

    def test_from_dict_requires_one_level(self):
        """Test records with zero or several levels are rejected."""
        record = Node(node_id='1', title='A', level=L1).to_dict()
        record[L2] = 'B'

        with pytest.raises(ValueError):
            Node.from_dict(record)

        record[L1] = record[L2] = ''
        with pytest.raises(ValueError):
            Node.from_dict(record)
